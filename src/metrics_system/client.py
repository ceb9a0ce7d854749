"""
HTTP client for the agent's metrics endpoint
"""

import os
import ssl
from typing import Any, Optional

import httpx

from .allocation import percentage_of_allocated_resource
from .config import MetricsConfig, TLSConfig
from .errors import MetricsConfigError, MetricsError
from .summary import MetricsSummary

METRICS_ENDPOINT = "/v1/metrics"


def build_ssl_context(tls: TLSConfig) -> ssl.SSLContext:
    """
    SSL context with TLS 1.2 minimum, custom CAs and optional client cert.

    Raises:
        MetricsConfigError: certificate files missing or unreadable
    """
    tls.validate()

    ca_file = ca_dir = None
    if tls.ca_cert:
        if os.path.isdir(tls.ca_cert):
            ca_dir = tls.ca_cert
        else:
            ca_file = tls.ca_cert
    if tls.ca_path:
        ca_dir = tls.ca_path

    try:
        context = ssl.create_default_context(cafile=ca_file, capath=ca_dir)
        context.minimum_version = ssl.TLSVersion.TLSv1_2
        if tls.insecure:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        if tls.has_client_cert:
            context.load_cert_chain(tls.client_cert, tls.client_cert_key)
    except (OSError, ssl.SSLError) as e:
        raise MetricsConfigError(f"failed to configure TLS: {e}") from e

    return context


class MetricsClient:
    """
    Fetches the metrics summary of one agent.

    Usage:
        client = MetricsClient(MetricsConfig.from_env(), logger)
        fraction = client.percentage_of_allocated_resource("allocations", 8)
    """

    def __init__(self, config: MetricsConfig, logger, transport: Optional[httpx.BaseTransport] = None):
        """
        Args:
            config: Address, TLS and timeout settings
            logger: ClassLogger instance for logging
            transport: Optional httpx transport (tests use httpx.MockTransport)

        Raises:
            MetricsConfigError: invalid address or TLS settings
        """
        config.validate()
        self.config = config
        self._logger = logger

        timeout = httpx.Timeout(config.request_timeout_s, connect=config.tls_handshake_timeout_s)
        self._http = httpx.Client(
            base_url=config.address,
            verify=build_ssl_context(config.tls),
            timeout=timeout,
            transport=transport,
        )
        self._logger.info(f"Metrics client targeting {config.address}")

    def get(self, endpoint: str) -> Any:
        """
        GET endpoint and decode its JSON body.

        Raises:
            MetricsError: connection failure, non-200 status or invalid JSON
        """
        try:
            response = self._http.get(endpoint)
        except httpx.HTTPError as e:
            raise MetricsError(f"GET {endpoint} failed: {e}") from e

        if response.status_code != httpx.codes.OK:
            raise MetricsError(f"unexpected response code {response.status_code}: {response.text.strip()}")

        try:
            return response.json()
        except ValueError as e:
            raise MetricsError(f"invalid JSON from {endpoint}: {e}") from e

    def metrics(self) -> MetricsSummary:
        return MetricsSummary.from_dict(self.get(METRICS_ENDPOINT))

    def percentage_of_allocated_resource(self, resource: str, max_allocations: int) -> float:
        """Fetch metrics and compute the utilization fraction of resource"""
        summary = self.metrics()
        fraction = percentage_of_allocated_resource(summary, resource, max_allocations)
        self._logger.debug(f"{len(summary.gauges)} gauges at {summary.timestamp or 'unknown time'}")
        return fraction

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> 'MetricsClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
