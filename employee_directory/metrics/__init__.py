# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Prometheus metrics for the employee directory service."""
from prometheus_client import Counter, Gauge, Histogram

EMPLOYEES_CREATED = Counter(
    "employees_created_total", "Total employees created"
)
EMPLOYEES_UPDATED = Counter(
    "employees_updated_total", "Total employee updates applied"
)
EMPLOYEES_DELETED = Counter(
    "employees_deleted_total", "Total employees deleted"
)
EMPLOYEES_TOTAL = Gauge(
    "employees_total", "Employees currently stored"
)
EMAIL_DISPATCH = Counter(
    "email_dispatch_total", "Email webhook dispatch attempts", ["outcome"]
)
EMAIL_DISPATCH_LATENCY = Histogram(
    "email_dispatch_seconds",
    "Time spent calling the email webhook",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)
REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "endpoint", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "HTTP request latency", ["method", "endpoint"]
)
HTTP_ERRORS = Counter(
    "http_errors_total", "Total HTTP errors", ["method", "endpoint", "status"]
)
