"""Base abstractions for auth strategies."""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, MutableMapping
from typing import Any


class AuthStrategy(ABC):
    """Interface each authentication mechanism must implement."""

    @abstractmethod
    def apply(
        self,
        method: str,
        params: Mapping[str, Any],
        headers: MutableMapping[str, str],
    ) -> None:
        """Mutate headers in-place with credentials bound to ``method`` and ``params``."""
