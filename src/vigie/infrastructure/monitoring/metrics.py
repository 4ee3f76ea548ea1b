"""
Prometheus metrics collection.
"""

from prometheus_client import Counter, Gauge, Histogram

# ============================================================
# Token API Metrics
# ============================================================

token_api_requests_total = Counter(
    "vigie_token_api_requests_total",
    "Total token API requests",
    ["endpoint", "status"],
)

token_api_request_duration_seconds = Histogram(
    "vigie_token_api_request_duration_seconds",
    "Token API request duration in seconds",
    ["endpoint"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

token_api_retries_total = Counter(
    "vigie_token_api_retries_total",
    "Token API requests retried after a transient failure",
    ["endpoint"],
)

# ============================================================
# Dashboard Metrics
# ============================================================

dashboard_refreshes_total = Counter(
    "vigie_dashboard_refreshes_total",
    "Total dashboard refreshes",
    ["outcome"],
)

dashboard_refresh_duration_seconds = Histogram(
    "vigie_dashboard_refresh_duration_seconds",
    "Dashboard refresh duration in seconds",
    buckets=(0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0),
)

networks_reporting = Gauge(
    "vigie_networks_reporting",
    "Networks that returned USDC metrics in the last refresh",
)

network_fetch_failures_total = Counter(
    "vigie_network_fetch_failures_total",
    "Per-network metric fetch failures",
    ["network", "reason"],
)

usdc_price = Gauge(
    "vigie_usdc_price",
    "Last observed USDC price in USD",
)

# ============================================================
# HTTP Metrics
# ============================================================

http_requests_total = Counter(
    "vigie_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "vigie_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)
