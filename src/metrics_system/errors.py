"""
Metrics system exceptions
"""


class MetricsError(RuntimeError):
    """Metrics could not be fetched, decoded or interpreted (recoverable per poll)"""


class MetricsConfigError(ValueError):
    """Invalid client configuration (bad address, half-configured TLS, unreadable certs)"""
