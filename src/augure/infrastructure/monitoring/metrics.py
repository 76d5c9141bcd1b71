"""
Prometheus metrics collection.
"""

from prometheus_client import Counter, Histogram

# ============================================================
# HTTP Metrics
# ============================================================

http_requests_total = Counter(
    "augure_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "augure_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

http_errors_total = Counter(
    "augure_http_errors_total",
    "Total HTTP errors",
    ["method", "endpoint", "error_type"],
)

# ============================================================
# Cache Metrics
# ============================================================

cache_hits_total = Counter(
    "augure_cache_hits_total",
    "Total cache hits",
    ["namespace"],
)

cache_misses_total = Counter(
    "augure_cache_misses_total",
    "Total cache misses",
    ["namespace"],
)

# ============================================================
# External API Metrics
# ============================================================

external_requests_total = Counter(
    "augure_external_requests_total",
    "Total outbound API requests",
    ["service", "status"],
)

external_request_duration_seconds = Histogram(
    "augure_external_request_duration_seconds",
    "Outbound API request duration in seconds",
    ["service"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

retry_attempts_total = Counter(
    "augure_retry_attempts_total",
    "Retries performed after a failed attempt",
    ["operation"],
)

# ============================================================
# Business Metrics
# ============================================================

analyses_generated_total = Counter(
    "augure_analyses_generated_total",
    "Wallet analyses generated",
    ["blockchain", "with_insights"],
)

insight_failures_total = Counter(
    "augure_insight_failures_total",
    "Insight generation failures downgraded to warnings",
    ["blockchain"],
)
