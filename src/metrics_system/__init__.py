"""
Metrics System - agent metrics over HTTP(S)

- MetricsConfig / TLSConfig: address and TLS settings (env driven)
- MetricsClient: GET /v1/metrics with httpx
- MetricsSummary: decoded metrics document
- percentage_of_allocated_resource: utilization fraction of one resource
"""

from .errors import MetricsError, MetricsConfigError
from .config import MetricsConfig, TLSConfig, DEFAULT_ADDRESS
from .summary import MetricsSummary, GaugeValue, PointValue, SampledValue
from .allocation import percentage_of_allocated_resource, RESOURCES, ALLOCATIONS
from .client import MetricsClient, build_ssl_context

__all__ = [
    'MetricsError',
    'MetricsConfigError',
    'MetricsConfig',
    'TLSConfig',
    'DEFAULT_ADDRESS',
    'MetricsSummary',
    'GaugeValue',
    'PointValue',
    'SampledValue',
    'percentage_of_allocated_resource',
    'RESOURCES',
    'ALLOCATIONS',
    'MetricsClient',
    'build_ssl_context',
]
