"""
Configuration constants and environment setup.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent
DB_PATH = Path(os.environ.get("CAKEDAY_DB_PATH", PROJECT_ROOT / "data" / "db" / "cakeday.db"))

# =============================================================================
# EMAIL CONFIGURATION
# =============================================================================

FROM_EMAIL = os.environ.get("CAKEDAY_FROM_EMAIL", "noreply@cakeday.app")
ERROR_EMAIL = os.environ.get("CAKEDAY_ERROR_EMAIL", "")

# =============================================================================
# CELEBRATIONS CONFIGURATION
# =============================================================================

UPCOMING_WINDOW_DAYS = int(os.environ.get("UPCOMING_WINDOW_DAYS", "10"))
MAX_WINDOW_DAYS = 366

EVENT_KIND_LABELS = {
    "birthday": "has a birthday",
    "anniversary": "celebrates a work anniversary",
}

# =============================================================================
# MS GRAPH CREDENTIALS (from environment)
# =============================================================================

GRAPH_TENANT_ID = os.environ.get("MICROSOFT_GRAPH_TENANT_ID", "")
GRAPH_APP_ID = os.environ.get("MICROSOFT_GRAPH_APP_ID", "")
GRAPH_CLIENT_SECRET = os.environ.get("MICROSOFT_GRAPH_CLIENT_SECRET", "")

# =============================================================================
# WEBHOOKS
# =============================================================================

WEBHOOK_TIMEOUT_SECONDS = float(os.environ.get("WEBHOOK_TIMEOUT_SECONDS", "10"))

# =============================================================================
# API CONFIGURATION
# =============================================================================

CAKEDAY_API_KEY = os.environ.get("CAKEDAY_API_KEY", "")
API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
API_VERSION = "1.0.0"
