"""User profile date endpoints."""

import asyncio
import sqlite3
import time

from fastapi import APIRouter, Depends, HTTPException, Request, status

from api.dependencies import get_db, verify_api_key
from api.logging import RequestLog, log_request
from api.models.responses import ErrorCodes, UserDatesResponse, UserDatesUpdate
from api.routes.events import get_client_ip
from core.database import fetch_user, update_user_dates
from core.dates import InvalidDateFormat, parse_month_day

router = APIRouter(prefix="/v1")


def _apply_date_update(
    conn: sqlite3.Connection, request: Request, user_id: str, update: UserDatesUpdate
) -> UserDatesResponse:
    """Validate and store a user's dates, logging the request."""
    start_time = time.time()

    request_log = RequestLog(
        endpoint=request.url.path,
        method=request.method,
        client_ip=get_client_ip(request),
    )

    try:
        errors = []
        for field_name in ("birthday", "anniversary"):
            value = getattr(update, field_name)
            if value:
                try:
                    parse_month_day(value)
                except InvalidDateFormat as e:
                    errors.append(f"{field_name}: {e}")

        if errors:
            raise HTTPException(
                status_code=422,
                detail={
                    "error": "Invalid date",
                    "code": ErrorCodes.VALIDATION_ERROR,
                    "details": errors,
                },
            )

        if not update_user_dates(conn, user_id, update.birthday, update.anniversary):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail={
                    "error": "User not found",
                    "code": ErrorCodes.NOT_FOUND,
                    "details": [f"User ID: {user_id}"],
                },
            )

        user = fetch_user(conn, user_id)
        request_log.company_id = user["company_id"]
        request_log.status_code = 200

        return UserDatesResponse(
            user_id=user_id,
            birthday=user["birthday"],
            anniversary=user["anniversary"],
        )

    except HTTPException as e:
        request_log.status_code = e.status_code
        if isinstance(e.detail, dict):
            request_log.error_code = e.detail.get("code")
            request_log.error_message = e.detail.get("error")
            if e.detail.get("code") == ErrorCodes.VALIDATION_ERROR:
                for detail in e.detail.get("details", []):
                    request_log.details.append(("validation_error", detail))
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


@router.patch("/users/{user_id}/dates", response_model=UserDatesResponse)
async def update_dates(
    request: Request,
    user_id: str,
    update: UserDatesUpdate,
    conn: sqlite3.Connection = Depends(get_db),
    _api_key: str = Depends(verify_api_key),
):
    """
    Update a user's birthday and/or work anniversary.

    Dates are validated here so malformed values never reach the directory.
    """
    return await asyncio.to_thread(_apply_date_update, conn, request, user_id, update)
