# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics: single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""
from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "shop_requests_total",
    "Total HTTP requests to the shop service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "shop_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "shop_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
MEMBERS_JOINED = Counter(
    "shop_members_joined_total",
    "Total members registered",
)
MEMBER_UPDATES = Counter(
    "shop_member_updates_total",
    "Total member name updates",
)
MEMBERS_TOTAL = Gauge(
    "shop_members",
    "Current number of registered members",
)
ORDERS_PLACED = Counter(
    "shop_orders_placed_total",
    "Total orders placed",
)
ORDERS_CANCELLED = Counter(
    "shop_orders_cancelled_total",
    "Total orders cancelled",
)
