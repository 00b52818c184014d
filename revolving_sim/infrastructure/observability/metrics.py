"""Prometheus metrics for simulation outcomes and HTTP latency"""

from prometheus_client import Counter, Histogram

# Simulation metrics
simulation_counter = Counter(
    "revolving_simulation_total",
    "Total simulations run",
    ["outcome"],  # paid_off | debt_trap
)

simulation_months_histogram = Histogram(
    "revolving_simulation_months",
    "Simulated months until termination",
    buckets=[12, 24, 60, 120, 240, 360, 600],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_simulation(is_infinite: bool, months: int) -> None:
    """Record simulation outcome and horizon"""
    outcome = "debt_trap" if is_infinite else "paid_off"
    simulation_counter.labels(outcome=outcome).inc()
    simulation_months_histogram.observe(months)
