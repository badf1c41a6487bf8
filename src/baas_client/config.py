"""Configuration helpers for the BaaS client."""

from __future__ import annotations

from dataclasses import dataclass, field

from .exceptions import ConfigurationError
from .http import TransportOptions
from .operations import SERVICE_BASE_URL

DEFAULT_BASE_URL = SERVICE_BASE_URL
SECURE_SCHEME = "https://"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Typed, immutable configuration for `BaaSClient`."""

    access_id: str
    access_key: str = field(repr=False)
    base_url: str | None = DEFAULT_BASE_URL
    ca_cert: str | None = None
    reject_unauthorized: bool = True
    debug: bool = False
    timeout: float | None = None

    def __post_init__(self) -> None:
        if not self.access_id or not self.access_key:
            raise ConfigurationError("Both access_id and access_key are required.")
        base_url = DEFAULT_BASE_URL if self.base_url is None else self.base_url.strip()
        if not base_url:
            raise ConfigurationError("base_url must be a non-empty URL.")
        object.__setattr__(self, "base_url", base_url.rstrip("/"))

    @property
    def is_secure(self) -> bool:
        return self.base_url.lower().startswith(SECURE_SCHEME)

    def transport_options(self) -> TransportOptions | None:
        """TLS options for https endpoints; plaintext endpoints get none at all."""

        if not self.is_secure:
            return None
        return TransportOptions(
            ca_cert=self.ca_cert,
            reject_unauthorized=self.reject_unauthorized,
        )
