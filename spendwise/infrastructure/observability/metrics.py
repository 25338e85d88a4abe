"""Prometheus metrics for monitoring scores, nudges, badges and request latency"""

from typing import Iterable
from prometheus_client import Counter, Histogram

# Analytics metrics
score_histogram = Histogram(
    "spendwise_smart_spend_score",
    "Smart Spend Scores computed",
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

score_band_counter = Counter(
    "spendwise_score_band_total",
    "Smart Spend Scores by band",
    ["band"],  # Excellent | Good | Fair | Needs Improvement
)

nudges_generated_counter = Counter(
    "spendwise_nudges_generated_total",
    "Nudges newly stored for users",
)

badges_awarded_counter = Counter(
    "spendwise_badges_awarded_total",
    "Badges awarded by type",
    ["badge_type"],
)

# Activity metrics
expenses_logged_counter = Counter(
    "spendwise_expenses_logged_total",
    "Expenses logged by category",
    ["category"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_score(score: int, band: str) -> None:
    """Record score distribution for monitoring spending health across users"""
    score_histogram.observe(score)
    score_band_counter.labels(band=band).inc()


def record_badges(badge_types: Iterable[str]) -> None:
    for badge_type in badge_types:
        badges_awarded_counter.labels(badge_type=badge_type).inc()
