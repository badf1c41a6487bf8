"""High-level BaaS REST client."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import urllib3
from urllib3.exceptions import InsecureRequestWarning

from .auth.authcode import HMACAuth
from .auth.base import AuthStrategy
from .auth.signature import AUTH_CODE_HEADER, redact_auth_code
from .config import ClientConfig
from .endpoints import Endpoint
from .exceptions import HTTPResponseError, ValidationError
from .http import (
    LogicalRequest,
    NormalizedResponse,
    RequestsTransport,
    Transport,
    encode_form,
    encode_json,
    encode_query,
    normalize_response,
)
from .operations import OPERATIONS
from .resources import (
    ArchivesResource,
    CommandsResource,
    DelegationsResource,
    DevicesResource,
    ExternalDataResource,
    PermissionsResource,
    ReportsResource,
    RolesResource,
    SessionResource,
    SharesResource,
    SqlTemplatesResource,
    UsersResource,
)
from .resources.session import SESSION_TOKEN_HEADER

logger = logging.getLogger(__name__)

BODYLESS_METHODS = frozenset({"GET", "HEAD"})


class BaaSClient:
    """Sign and dispatch BaaS API requests, with one helper per operation."""

    def __init__(
        self,
        access_id: str,
        access_key: str,
        *,
        base_url: str | None = None,
        ca_cert: str | None = None,
        reject_unauthorized: bool = True,
        debug: bool = False,
        timeout: float | None = None,
        transport: Transport | None = None,
        auth_strategy: AuthStrategy | None = None,
    ) -> None:
        self.config = ClientConfig(
            access_id=access_id,
            access_key=access_key,
            base_url=base_url,
            ca_cert=ca_cert,
            reject_unauthorized=reject_unauthorized,
            debug=debug,
            timeout=timeout,
        )
        self._suppress_insecure_warning_if_needed()
        self._transport: Transport = transport or RequestsTransport(timeout=timeout)
        self._auth = auth_strategy or HMACAuth(access_id, access_key, debug=debug)
        self.users = UsersResource(self)
        self.devices = DevicesResource(self)
        self.archives = ArchivesResource(self)
        self.commands = CommandsResource(self)
        self.delegations = DelegationsResource(self)
        self.shares = SharesResource(self)
        self.external_data = ExternalDataResource(self)
        self.permissions = PermissionsResource(self)
        self.roles = RolesResource(self)
        self.sql_templates = SqlTemplatesResource(self)
        self.reports = ReportsResource(self)
        self.session = SessionResource(self)

    # Context manager helpers -------------------------------------------------
    def __enter__(self) -> BaaSClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover - passthrough
        self.close()

    # Public API --------------------------------------------------------------
    def call(
        self, operation_id: str, parameters: Mapping[str, Any] | None = None
    ) -> NormalizedResponse:
        """Bind ``parameters`` to a catalogued operation and dispatch it."""

        endpoint = self.endpoint(operation_id)
        if self.config.debug:
            logger.debug("-------------%s---------------", operation_id)
        request = endpoint.bind(parameters)
        if self.config.debug:
            logger.debug("Parameter.pathParameters: %s", request.path_params)
            logger.debug("Parameter.queryParameters: %s", request.query_params)
        return self.request(request)

    def request(self, request: LogicalRequest) -> NormalizedResponse:
        """Sign, encode and send ``request``.

        Raises:
            TransportError: no response was obtained.
            HTTPResponseError: the status was not 2xx; ``exc.response`` holds
                the normalized response.
        """
        method = request.method.upper()
        uri = self._resolve_url(request.path)
        headers = dict(request.headers)
        self._auth.apply(method, {**request.path_params, **request.query_params}, headers)

        body = self._prepare_body(method, request)
        if request.query_params:
            uri = f"{uri}?{encode_query(request.query_params)}"

        options = self.config.transport_options()
        self._log_request(method, uri, headers, body)
        raw = self._transport.send(
            uri,
            method=method,
            headers=headers,
            body=body,
            options=options,
        )
        response = normalize_response(raw)
        self._log_response(response)
        if not raw.ok:
            raise HTTPResponseError(response)
        return response

    def endpoint(self, operation_id: str) -> Endpoint:
        try:
            return OPERATIONS[operation_id]
        except KeyError:
            raise ValidationError(f"Unknown operation: {operation_id}") from None

    def close(self) -> None:
        self._transport.close()

    # Internal helpers -------------------------------------------------------
    def _resolve_url(self, path: str) -> str:
        normalized = path if path.startswith("/") else f"/{path}"
        return f"{self.config.base_url}{normalized}"

    @staticmethod
    def _prepare_body(method: str, request: LogicalRequest) -> bytes | None:
        if method in BODYLESS_METHODS:
            return None
        if request.form:
            return encode_form(request.body, request.form)
        return encode_json(request.body)

    def _log_request(
        self, method: str, uri: str, headers: Mapping[str, str], body: bytes | None
    ) -> None:
        logger.info("BaaS request %s %s", method, uri)
        if not self.config.debug:
            return
        logger.debug(
            "Request: headers=%s body=%s options=%s",
            _redact_headers(headers),
            body.decode("utf-8", errors="replace") if body is not None else None,
            self.config.transport_options(),
        )

    def _log_response(self, response: NormalizedResponse) -> None:
        if not self.config.debug:
            return
        logger.debug(
            "Response: statusCode=%s | statusMessage=%s | body=%s",
            response.status_code,
            response.status_message,
            response.body,
        )

    def _suppress_insecure_warning_if_needed(self) -> None:
        if self.config.is_secure and not self.config.reject_unauthorized:
            urllib3.disable_warnings(InsecureRequestWarning)


def _redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    redacted = dict(headers)
    if AUTH_CODE_HEADER in redacted:
        redacted[AUTH_CODE_HEADER] = redact_auth_code(redacted[AUTH_CODE_HEADER])
    if SESSION_TOKEN_HEADER in redacted:
        redacted[SESSION_TOKEN_HEADER] = "***"
    return redacted
