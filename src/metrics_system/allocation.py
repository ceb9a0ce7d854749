"""
Utilization of a client node's resources, derived from its metrics summary
"""

import math

from .errors import MetricsError
from .summary import MetricsSummary

ALLOCATIONS = "allocations"
RESOURCES = (ALLOCATIONS, "cpu", "memory", "disk")

RUNNING_ALLOCATIONS_GAUGE = "nomad.client.allocations.running"
ALLOCATED_GAUGE = "nomad.client.allocated.{}"
UNALLOCATED_GAUGE = "nomad.client.unallocated.{}"


def percentage_of_allocated_resource(summary: MetricsSummary, resource: str, max_allocations: int) -> float:
    """
    Fraction (normally 0.0-1.0) of a resource in use.

    - allocations: running allocations / max_allocations (can exceed 1.0)
    - cpu, memory, disk: allocated / (allocated + unallocated)

    Raises:
        ValueError: unknown resource or non-positive max_allocations
        MetricsError: required gauge missing or not finite, or zero capacity reported
    """
    if resource not in RESOURCES:
        raise ValueError(f"unknown resource '{resource}' (expected one of: {', '.join(RESOURCES)})")

    if resource == ALLOCATIONS:
        if max_allocations <= 0:
            raise ValueError(f"max allocations must be positive, got {max_allocations}")
        running = _require_gauge(summary, RUNNING_ALLOCATIONS_GAUGE)
        return running / max_allocations

    allocated = _require_gauge(summary, ALLOCATED_GAUGE.format(resource))
    unallocated = _require_gauge(summary, UNALLOCATED_GAUGE.format(resource))
    total = allocated + unallocated
    if total <= 0:
        raise MetricsError(f"no {resource} capacity reported")
    return allocated / total


def _require_gauge(summary: MetricsSummary, name: str) -> float:
    value = summary.gauge_total(name)
    if value is None:
        raise MetricsError(f"gauge '{name}' not found in metrics (is this a client agent?)")
    if not math.isfinite(value):
        raise MetricsError(f"gauge '{name}' is not a finite number: {value}")
    return value

