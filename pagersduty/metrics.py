"""Metrics for pagersduty."""

from prometheus_client import Counter, Histogram

# Buckets for remote API latencies (seconds)
DEFAULT_BUCKETS_EXTERNAL_API = (0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0)

rest_request = Counter(
    "pagersduty_rest_requests_total",
    "Total number of PagerDuty REST API requests",
    ["method", "verb"],
)

rest_request_duration = Histogram(
    "pagersduty_rest_request_duration_seconds",
    "PagerDuty REST API request duration in seconds",
    ["method", "verb"],
    buckets=DEFAULT_BUCKETS_EXTERNAL_API,
)

events_request = Counter(
    "pagersduty_events_requests_total",
    "Total number of PagerDuty Events API requests",
    ["method", "verb"],
)

events_request_duration = Histogram(
    "pagersduty_events_request_duration_seconds",
    "PagerDuty Events API request duration in seconds",
    ["method", "verb"],
    buckets=DEFAULT_BUCKETS_EXTERNAL_API,
)

events_outcome = Counter(
    "pagersduty_events_outcomes_total",
    "Classified outcomes of PagerDuty event submissions",
    ["outcome"],
)
