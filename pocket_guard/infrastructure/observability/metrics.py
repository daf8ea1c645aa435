"""Prometheus metrics for calculation volume, filing eligibility and HTTP latency"""

from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "pocket_guard_calculation_total",
    "Total engine calculations served",
    ["kind"],  # emi | amortization | remaining_balance | tax
)

validation_failure_counter = Counter(
    "pocket_guard_validation_failures_total",
    "Rule sets that reported at least one violation",
    ["rule_set"],  # deductions | filing
)

eligibility_counter = Counter(
    "pocket_guard_pan_eligibility_total",
    "PAN eligibility checks by outcome",
    ["outcome"],  # eligible | ineligible
)

# PAN verification metrics
pan_verification_latency_histogram = Histogram(
    "pan_verification_latency_seconds",
    "PAN verification service response time",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 15.0],
)

pan_verification_failures_counter = Counter(
    "pan_verification_failures_total",
    "Failed PAN verification calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(kind: str) -> None:
    calculation_counter.labels(kind=kind).inc()


def record_eligibility(eligible: bool) -> None:
    """Record filing eligibility outcome for monitoring rejection rates"""
    outcome = "eligible" if eligible else "ineligible"
    eligibility_counter.labels(outcome=outcome).inc()
