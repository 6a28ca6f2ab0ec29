"""Prometheus metrics for monitoring checkouts, rejections and returns"""

from prometheus_client import Counter, Histogram
from rentatool.domain.models import RentalAgreement

# Checkout metrics
checkout_counter = Counter(
    "rentatool_checkout_total",
    "Total tool checkouts completed",
    ["tool_type"],
)

checkout_rejected_counter = Counter(
    "rentatool_checkout_rejected_total",
    "Checkouts refused before an agreement was produced",
    ["reason"],  # invalid_argument | not_found | unavailable
)

final_charge_histogram = Histogram(
    "rentatool_final_charge_dollars",
    "Final charge per rental agreement",
    buckets=[1, 5, 10, 25, 50, 100, 250, 1000],
)

tool_return_counter = Counter(
    "rentatool_tool_return_total",
    "Tools returned to the store",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_checkout(agreement: RentalAgreement) -> None:
    """Record checkout volume per tool type and the charge distribution"""
    checkout_counter.labels(tool_type=agreement.type).inc()
    final_charge_histogram.observe(float(agreement.final_charge))
