"""Login and self-registration."""

from __future__ import annotations

from ..http import NormalizedResponse
from .base import Parameters, ResourceBase

SESSION_TOKEN_HEADER = "session-token"


def session_token(response: NormalizedResponse) -> str | None:
    """Return the ``session-token`` header a successful login hands back."""

    return response.headers.get(SESSION_TOKEN_HEADER)


class SessionResource(ResourceBase):
    """Obtain session tokens for the ``sessionToken`` parameter of other calls."""

    def login(self, parameters: Parameters = None) -> NormalizedResponse:
        """Log in with ``appToken``, ``loginName`` and ``password`` (form-encoded)."""
        return self._call("loginUsingPOST", parameters)

    def register(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("registerUserUsingPOST", parameters)
