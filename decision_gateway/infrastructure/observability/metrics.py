"""Prometheus metrics for monitoring approval rates, loan sizes and request latency"""

from typing import Optional

from prometheus_client import Counter, Histogram

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | rejected | invalid_age | no_valid_loan | error
)

approved_amount_histogram = Histogram(
    "loan_approved_amount_euros",
    "Approved loan amounts",
    buckets=[2000, 3000, 4000, 5000, 6000, 7000, 8000, 9000, 10000],
)

period_extension_counter = Counter(
    "loan_period_extended_total",
    "Approvals where the period had to be longer than requested",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(outcome: str, loan_amount: Optional[int] = None, extended: bool = False) -> None:
    """Record decision metrics for monitoring approval rates and amount distribution"""
    decision_counter.labels(outcome=outcome).inc()

    if loan_amount is not None:
        approved_amount_histogram.observe(loan_amount)
    if extended:
        period_extension_counter.inc()
