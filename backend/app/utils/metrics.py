"""Prometheus metrics for itinerary scheduling."""

from prometheus_client import Counter, Histogram

# Generation metrics
itinerary_latency_ms = Histogram(
    "itinerary_latency_ms",
    "Full itinerary generation latency in milliseconds",
    buckets=[1, 5, 10, 25, 50, 100, 250, 500, 1000],
)

itinerary_days_total = Counter(
    "itinerary_days_total",
    "Total itinerary days generated",
)

itinerary_advisories_total = Counter(
    "itinerary_advisories_total",
    "Total schedule advisories raised",
    ["code"],
)

# Edit metrics
itinerary_edits_total = Counter(
    "itinerary_edits_total",
    "Total interactive itinerary edits",
    ["operation", "outcome"],
)


class PrometheusItineraryMetrics:
    """Prometheus-based itinerary metrics implementation."""

    def record_generation(self, latency_ms: float, num_days: int) -> None:
        """Record generation latency and generated day count."""
        itinerary_latency_ms.observe(latency_ms)
        itinerary_days_total.inc(num_days)

    def inc_advisory(self, code: str) -> None:
        """Increment advisory counter."""
        itinerary_advisories_total.labels(code=code).inc()

    def inc_edit(self, operation: str, outcome: str) -> None:
        """Increment edit counter."""
        itinerary_edits_total.labels(operation=operation, outcome=outcome).inc()
