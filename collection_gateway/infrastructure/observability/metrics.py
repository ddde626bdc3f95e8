"""Prometheus metrics for monitoring scheduling capacity and interest accrual"""

from prometheus_client import Counter, Histogram

# Scheduling metrics
appointment_counter = Counter(
    "collection_appointment_total",
    "Appointment scheduling attempts",
    ["outcome"],  # scheduled | no_capacity
)

# Debt metrics
debt_created_counter = Counter(
    "collection_debt_created_total",
    "Debts opened",
    ["monthly_percent"],
)

debt_accrual_counter = Counter(
    "collection_debt_accrual_total",
    "Debts visited by the periodic accrual pass",
    ["result"],  # updated | skipped
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_appointment(scheduled: bool) -> None:
    appointment_counter.labels(outcome="scheduled" if scheduled else "no_capacity").inc()


def record_debt_created(monthly_percent: float) -> None:
    # Percent is one of a handful of values (0, 10, 20, 30)
    debt_created_counter.labels(monthly_percent=f"{monthly_percent:g}").inc()


def record_accrual_pass(updated: int, skipped: int) -> None:
    debt_accrual_counter.labels(result="updated").inc(updated)
    debt_accrual_counter.labels(result="skipped").inc(skipped)
