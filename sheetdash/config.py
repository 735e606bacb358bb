"""
Sheetdash — Configuration: upload limits, field candidates, chart caps.
"""
import os

# ---------------------------------------------------------------------------
# Upload limits — override with env vars for deployment
# ---------------------------------------------------------------------------
MAX_UPLOAD_MB = int(os.environ.get("SHEETDASH_MAX_UPLOAD_MB", "50"))
MAX_UPLOAD_BYTES = MAX_UPLOAD_MB * 1024 * 1024
# Multipart boundaries and headers on top of the file itself
UPLOAD_OVERHEAD_BYTES = 64 * 1024

CORS_ORIGINS = [o.strip() for o in os.environ.get("SHEETDASH_CORS_ORIGINS", "*").split(",") if o.strip()]

# ---------------------------------------------------------------------------
# Field candidates (order matters — first match wins)
# ---------------------------------------------------------------------------
AMOUNT_FIELDS = ["TotalDue", "SubTotal", "LineTotal"]
TOTAL_FIELDS = ["TotalDue", "SubTotal", "LineTotal", "OrderQty"]
DATE_FIELDS = ["OrderDate", "ModifiedDate", "Date"]
TERRITORY_FIELDS = ["TerritoryID", "Territory", "Name"]
STATUS_FIELDS = ["Status", "ShipMethodID", "Type"]
CATEGORY_FIELDS = ["ProductCategory", "Category", "Type", "Status"]
TREND_LABEL_FIELDS = ["Name", "OrderDate"]

# ---------------------------------------------------------------------------
# Chart caps and label limits
# ---------------------------------------------------------------------------
DASHBOARD_TREND_ROWS = 10
DASHBOARD_TERRITORY_LIMIT = 8
DASHBOARD_STATUS_LIMIT = 5
DASHBOARD_STATUS_DEFAULT = "Active"

ANALYTICS_BUCKET_LIMIT = 20
ANALYTICS_PERFORMER_LIMIT = 10
ANALYTICS_PERFORMER_LABEL = 20
ANALYTICS_CATEGORY_LIMIT = 6
ANALYTICS_CATEGORY_DEFAULT = "Other"

TOP_GROUP_LIMIT = 8
SHORT_LABEL = 15
UNKNOWN_GROUP = "Unknown"
NO_GROUP = "N/A"

# ---------------------------------------------------------------------------
# Table browsing
# ---------------------------------------------------------------------------
DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 500
