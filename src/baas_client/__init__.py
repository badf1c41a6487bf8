"""High-level BaaS client entrypoints."""
from .auth.signature import generate_auth_code
from .client import BaaSClient
from .config import ClientConfig
from .exceptions import BaaSError, HTTPResponseError, MissingParameterError, TransportError
from .http import LogicalRequest, NormalizedResponse

__all__ = [
    "BaaSClient",
    "ClientConfig",
    "BaaSError",
    "HTTPResponseError",
    "MissingParameterError",
    "TransportError",
    "LogicalRequest",
    "NormalizedResponse",
    "generate_auth_code",
]
