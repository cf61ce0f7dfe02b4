"""Prometheus metrics for monitoring boleto encoding volume and rejections"""

from prometheus_client import Counter, Histogram

# Encoding metrics
boleto_encoded_counter = Counter(
    "boleto_encoded_total",
    "Total boletos encoded",
    ["layout"],
)

boleto_rejected_counter = Counter(
    "boleto_rejected_total",
    "Requests rejected by domain validation",
    ["operation", "reason"],  # encode | decode, exception class name
)

due_date_factor_clamped_counter = Counter(
    "boleto_due_date_factor_clamped_total",
    "Boletos whose due date fell outside the factor range and was pinned to 1000 or 9999",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_boleto(layout_name: str, factor_clamped: bool) -> None:
    """Record a successful encoding and whether its due-date factor was clamped"""
    boleto_encoded_counter.labels(layout=layout_name).inc()

    if factor_clamped:
        due_date_factor_clamped_counter.inc()


def record_rejection(operation: str, error: Exception) -> None:
    """Record a request rejected while encoding or decoding"""
    boleto_rejected_counter.labels(operation=operation, reason=type(error).__name__).inc()
