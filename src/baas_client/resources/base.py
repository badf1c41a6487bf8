"""Common helpers for resource wrappers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ..http import NormalizedResponse

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..client import BaaSClient

Parameters = Mapping[str, Any] | None


class ResourceBase:
    """Provide shared helpers for resource modules."""

    def __init__(self, client: BaaSClient) -> None:
        self._client = client

    def _call(self, operation_id: str, parameters: Parameters = None) -> NormalizedResponse:
        return self._client.call(operation_id, parameters)
