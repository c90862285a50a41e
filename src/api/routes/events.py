"""Upcoming celebration endpoints."""

import asyncio
import sqlite3
import time
from datetime import date, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from api.dependencies import get_db, verify_api_key
from api.logging import RequestLog, log_request
from api.models.responses import ErrorCodes, EventResponse, EventsResponse
from core.config import MAX_WINDOW_DAYS, UPCOMING_WINDOW_DAYS
from core.database import fetch_company, fetch_company_users
from core.validation import load_people
from services.events import collect_upcoming_events, events_within

router = APIRouter(prefix="/v1")


def get_client_ip(request: Request) -> str:
    """Extract client IP from request, handling proxies."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def parse_as_of(date_str: str | None) -> date:
    """Parse as_of date string, defaulting to today."""
    if not date_str:
        return date.today()
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Invalid as_of format",
                "code": ErrorCodes.INVALID_REQUEST,
                "details": ["Expected format: YYYY-MM-DD"],
            },
        )


def _build_events_response(
    conn: sqlite3.Connection,
    request: Request,
    company_id: str,
    days: int,
    as_of: str | None,
) -> EventsResponse:
    """Load a company's directory, project its events and log the request."""
    start_time = time.time()

    request_log = RequestLog(
        endpoint=request.url.path,
        method=request.method,
        client_ip=get_client_ip(request),
        company_id=company_id,
    )

    try:
        today = parse_as_of(as_of)

        if fetch_company(conn, company_id) is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail={
                    "error": "Company not found",
                    "code": ErrorCodes.NOT_FOUND,
                    "details": [f"Company ID: {company_id}"],
                },
            )

        # Bad rows are skipped, not fatal
        people, skipped = load_people(fetch_company_users(conn, company_id))
        events = events_within(collect_upcoming_events(people, today), days)

        request_log.status_code = 200
        request_log.events_returned = len(events)
        for message in skipped:
            request_log.details.append(("skipped_record", message))

        return EventsResponse(
            company_id=company_id,
            as_of=today,
            events=[EventResponse.from_event(event) for event in events],
            skipped=skipped,
        )

    except HTTPException as e:
        request_log.status_code = e.status_code
        if isinstance(e.detail, dict):
            request_log.error_code = e.detail.get("code")
            request_log.error_message = e.detail.get("error")
        else:
            request_log.error_message = str(e.detail)
        raise

    except Exception as e:
        request_log.status_code = 500
        request_log.error_code = ErrorCodes.INTERNAL_ERROR
        request_log.error_message = str(e)

        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "Internal server error",
                "code": ErrorCodes.INTERNAL_ERROR,
                "details": [],
            },
        )

    finally:
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)
        try:
            log_request(conn, request_log)
        except sqlite3.Error:
            # Don't fail the request if logging fails
            pass


@router.get("/companies/{company_id}/events", response_model=EventsResponse)
async def upcoming_events(
    request: Request,
    company_id: str,
    days: Annotated[
        int, Query(ge=0, le=MAX_WINDOW_DAYS, description="Look-ahead window in days")
    ] = UPCOMING_WINDOW_DAYS,
    as_of: Annotated[
        str | None, Query(description="Reference date (YYYY-MM-DD), defaults to today")
    ] = None,
    conn: sqlite3.Connection = Depends(get_db),
    _api_key: str = Depends(verify_api_key),
):
    """Birthdays and work anniversaries in the next `days` days, soonest first."""
    return await asyncio.to_thread(
        _build_events_response, conn, request, company_id, days, as_of
    )


@router.get("/companies/{company_id}/events/today", response_model=EventsResponse)
async def todays_celebrations(
    request: Request,
    company_id: str,
    as_of: Annotated[
        str | None, Query(description="Reference date (YYYY-MM-DD), defaults to today")
    ] = None,
    conn: sqlite3.Connection = Depends(get_db),
    _api_key: str = Depends(verify_api_key),
):
    """Birthdays and work anniversaries happening today."""
    return await asyncio.to_thread(_build_events_response, conn, request, company_id, 0, as_of)
