"""
Metrics client configuration

Defaults point at a local Nomad agent and are overridden by the standard
Nomad CLI environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

import httpx

from .errors import MetricsConfigError

DEFAULT_ADDRESS = "http://127.0.0.1:4646"

_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}


def parse_bool(value: str) -> Optional[bool]:
    """Parse a boolean env value; None if it is not recognized"""
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


@dataclass
class TLSConfig:
    """TLS settings for talking to the agent"""
    ca_cert: Optional[str] = None          # CA bundle file (or directory)
    ca_path: Optional[str] = None          # Directory of CA certificates
    client_cert: Optional[str] = None
    client_cert_key: Optional[str] = None
    insecure: bool = False                 # Skip server certificate verification

    @property
    def has_client_cert(self) -> bool:
        return bool(self.client_cert and self.client_cert_key)

    def validate(self) -> None:
        if bool(self.client_cert) != bool(self.client_cert_key):
            raise MetricsConfigError("client cert and client key must be provided")


@dataclass
class MetricsConfig:
    """Address, TLS and timeouts of the metrics client"""
    address: str = DEFAULT_ADDRESS
    tls: TLSConfig = field(default_factory=TLSConfig)
    tls_handshake_timeout_s: float = 10.0
    request_timeout_s: float = 10.0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'MetricsConfig':
        """
        Build config from NOMAD_ADDR, NOMAD_CACERT, NOMAD_CAPATH,
        NOMAD_CLIENT_CERT, NOMAD_CLIENT_KEY and NOMAD_SKIP_VERIFY.
        """
        env = os.environ if environ is None else environ
        config = cls()

        if env.get("NOMAD_ADDR"):
            config.address = env["NOMAD_ADDR"]
        if env.get("NOMAD_CACERT"):
            config.tls.ca_cert = env["NOMAD_CACERT"]
        if env.get("NOMAD_CAPATH"):
            config.tls.ca_path = env["NOMAD_CAPATH"]
        if env.get("NOMAD_CLIENT_CERT"):
            config.tls.client_cert = env["NOMAD_CLIENT_CERT"]
        if env.get("NOMAD_CLIENT_KEY"):
            config.tls.client_cert_key = env["NOMAD_CLIENT_KEY"]
        if env.get("NOMAD_SKIP_VERIFY"):
            insecure = parse_bool(env["NOMAD_SKIP_VERIFY"])
            if insecure is not None:
                config.tls.insecure = insecure

        return config

    def validate(self) -> None:
        """Check address and TLS settings"""
        try:
            url = httpx.URL(self.address)
        except (httpx.InvalidURL, TypeError) as e:
            raise MetricsConfigError(f"invalid address '{self.address}': {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise MetricsConfigError(f"invalid address '{self.address}': expected http(s)://host[:port]")

        if self.tls_handshake_timeout_s <= 0 or self.request_timeout_s <= 0:
            raise MetricsConfigError("timeouts must be positive")

        self.tls.validate()
