"""Prometheus metrics for monitoring approval rates and granted loan terms"""

from prometheus_client import Counter, Histogram

from loan_gateway.domain.models import LoanDecision

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome", "reason"],  # approved | declined, denial reason or "none"
)

approved_amount_histogram = Histogram(
    "loan_approved_amount",
    "Approved loan amounts in euros",
    buckets=[2000, 3000, 4000, 5000, 6000, 8000, 10000],
)

approved_period_histogram = Histogram(
    "loan_approved_period_months",
    "Approved loan periods in months",
    buckets=[12, 18, 24, 36, 48, 60],
)

decision_errors_counter = Counter(
    "loan_decision_errors_total",
    "Loan evaluations that failed with an internal error",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(decision: LoanDecision) -> None:
    """Record decision metrics for monitoring approval rates and granted terms"""
    if decision.approved:
        decision_counter.labels(outcome="approved", reason="none").inc()
        approved_amount_histogram.observe(decision.loan_amount)
        approved_period_histogram.observe(decision.loan_period)
    else:
        decision_counter.labels(outcome="declined", reason=decision.denial_reason.value).inc()
