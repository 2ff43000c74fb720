"""Prometheus metrics for monitoring payments, deposits and request latency"""

from prometheus_client import Counter, Histogram

# Money movement metrics
payment_counter = Counter(
    "billing_payment_total",
    "Job payment attempts",
    ["outcome"],  # paid | not_found | forbidden | already_paid | insufficient_funds | error
)

deposit_counter = Counter(
    "billing_deposit_total",
    "Client deposit attempts",
    ["outcome"],  # deposited | not_found | invalid | limit_exceeded | error
)

transferred_cents_counter = Counter(
    "billing_transferred_cents_total",
    "Cents moved from clients to contractors",
)

deposited_cents_counter = Counter(
    "billing_deposited_cents_total",
    "Cents deposited into client balances",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_payment(outcome: str, amount_cents: int = 0) -> None:
    """Record a payment attempt; only successful payments add to the transferred total"""
    payment_counter.labels(outcome=outcome).inc()
    if outcome == "paid":
        transferred_cents_counter.inc(amount_cents)


def record_deposit(outcome: str, amount_cents: int = 0) -> None:
    deposit_counter.labels(outcome=outcome).inc()
    if outcome == "deposited":
        deposited_cents_counter.inc(amount_cents)
