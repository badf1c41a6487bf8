"""Authentication strategies for the BaaS API."""
from .base import AuthStrategy
from .authcode import HMACAuth
from .signature import generate_auth_code, redact_auth_code

__all__ = ["AuthStrategy", "HMACAuth", "generate_auth_code", "redact_auth_code"]
