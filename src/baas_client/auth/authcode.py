"""HMAC authentication-code strategy."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Any

from .base import AuthStrategy
from .signature import AUTH_CODE_HEADER, generate_auth_code, redact_auth_code

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HMACAuth(AuthStrategy):
    """Sign path and query parameters into the ``authCode`` header."""

    access_id: str
    access_key: str = field(repr=False)
    debug: bool = False

    def apply(
        self,
        method: str,
        params: Mapping[str, Any],
        headers: MutableMapping[str, str],
    ) -> None:
        if self.debug and not params:
            logger.debug("No parameters given for %s request", method.upper())
        auth_code = generate_auth_code(
            method,
            self.access_key,
            self.access_id,
            params,
            debug=self.debug,
        )
        if self.debug:
            logger.debug("authCode: %s", redact_auth_code(auth_code))
        headers[AUTH_CODE_HEADER] = auth_code
