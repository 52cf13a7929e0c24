"""Prometheus metrics for monitoring approval rates and approved loan amounts"""

from typing import Optional
from prometheus_client import Counter, Histogram

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | invalid_personal_code | invalid_loan_amount | ... | no_valid_loan
)

approved_amount_histogram = Histogram(
    "loan_approved_amount",
    "Approved loan amounts in euros",
    buckets=[2000, 3000, 4000, 5000, 6000, 7000, 8000, 9000, 10000],
)

approved_period_histogram = Histogram(
    "loan_approved_period_months",
    "Approved loan periods in months",
    buckets=[12, 18, 24, 36, 48, 60],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(loan_amount: Optional[int], loan_period: Optional[int], rejection: Optional[str]) -> None:
    """Record decision metrics for monitoring approval rates and offer distribution"""
    outcome = "approved" if rejection is None else rejection
    decision_counter.labels(outcome=outcome).inc()

    if loan_amount is not None:
        approved_amount_histogram.observe(loan_amount)
    if loan_period is not None:
        approved_period_histogram.observe(loan_period)
