"""HTTP utilities for BaaS API access."""

from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Any, Protocol
from urllib.parse import quote, urlencode

import requests

from .exceptions import TransportError

# Characters encodeURIComponent leaves alone on top of quote()'s always-safe set.
URI_COMPONENT_SAFE = "!~*'()"

_CHARSET_RE = re.compile(r"charset\s*=\s*[\"']?([^\s;\"']+)", re.IGNORECASE)


def encode_uri_component(value: str) -> str:
    """Percent-encode ``value`` exactly like JavaScript's ``encodeURIComponent``."""

    return quote(value, safe=URI_COMPONENT_SAFE)


def js_text(value: Any) -> str:
    """Render a scalar the way the service's JavaScript tooling stringifies it."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


@dataclass(slots=True)
class LogicalRequest:
    """A request split into parameter buckets, before signing and encoding."""

    method: str
    path: str
    path_params: dict[str, Any] = field(default_factory=dict)
    query_params: dict[str, Any] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = field(default_factory=dict)
    form: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.method = self.method.upper()


@dataclass(frozen=True, slots=True)
class TransportOptions:
    """TLS settings handed to the transport for https endpoints only."""

    ca_cert: str | None = None
    reject_unauthorized: bool = True

    def requests_verify(self) -> bool | str:
        if not self.reject_unauthorized:
            return False
        return self.ca_cert or True


@dataclass(slots=True)
class TransportResponse:
    """What a transport hands back once the server has answered."""

    status_code: int
    status_message: str
    ok: bool
    content: bytes
    headers: Mapping[str, str]
    raw: Any = None
    encoding: str | None = None

    @property
    def text(self) -> str:
        try:
            return self.content.decode(self.encoding or "utf-8", errors="replace")
        except LookupError:
            return self.content.decode("utf-8", errors="replace")


@dataclass(slots=True)
class NormalizedResponse:
    """Uniform response envelope returned on success and attached on failure."""

    status_code: int
    status_message: str
    raw_response: TransportResponse
    body: Any

    @property
    def ok(self) -> bool:
        return self.raw_response.ok

    @property
    def headers(self) -> Mapping[str, str]:
        return self.raw_response.headers


class Transport(Protocol):
    """Narrow capability the dispatcher sends requests through."""

    def send(
        self,
        uri: str,
        *,
        method: str,
        headers: Mapping[str, str],
        body: bytes | None,
        options: TransportOptions | None,
    ) -> TransportResponse:
        ...

    def close(self) -> None:
        ...


class RequestsTransport:
    """Default transport backed by a `requests.Session`."""

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        timeout: float | tuple[float, float] | None = None,
    ) -> None:
        self._session = session or requests.Session()
        self._timeout = timeout

    def send(
        self,
        uri: str,
        *,
        method: str,
        headers: Mapping[str, str],
        body: bytes | None,
        options: TransportOptions | None,
    ) -> TransportResponse:
        extra: dict[str, Any] = {}
        if options is not None:
            extra["verify"] = options.requests_verify()
        try:
            response = self._session.request(
                method=method,
                url=uri,
                headers=dict(headers),
                data=body,
                timeout=self._timeout,
                **extra,
            )
        except requests.RequestException as exc:
            reason = str(exc).strip() or exc.__class__.__name__
            raise TransportError(
                f"Failed to communicate with BaaS API: {reason}", details=reason
            ) from exc

        return TransportResponse(
            status_code=response.status_code,
            status_message=response.reason or "",
            ok=200 <= response.status_code < 300,
            content=response.content or b"",
            headers=response.headers,
            raw=response,
            encoding=declared_charset(response.headers),
        )

    def close(self) -> None:
        self._session.close()


def declared_charset(headers: Mapping[str, str]) -> str | None:
    """Charset named by the ``Content-Type`` header; bodies without one are UTF-8."""

    match = _CHARSET_RE.search(headers.get("Content-Type") or "")
    return match.group(1) if match else None


def _querystring_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, float) and not math.isfinite(value):
        return ""
    if isinstance(value, (bool, int, float)):
        return js_text(value)
    return ""


def encode_query(params: Mapping[str, Any]) -> str:
    """Serialize parameters like Node's ``querystring.stringify``.

    Sequences repeat the key, numbers and booleans use their JavaScript text
    and anything else that is not a string is sent as an empty value.
    """

    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        items = value if isinstance(value, (list, tuple)) else [value]
        for item in items:
            pairs.append((key, _querystring_value(item)))
    return urlencode(pairs, safe=URI_COMPONENT_SAFE, quote_via=quote)


def encode_form(body: Any, form: Mapping[str, Any]) -> bytes:
    """Form-encode the body payload overlaid with form fields (form fields win)."""

    merged: MutableMapping[str, Any] = dict(body) if isinstance(body, Mapping) else {}
    merged.update(form)
    return encode_query(merged).encode("ascii")


def encode_json(body: Any) -> bytes:
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_body(raw: TransportResponse) -> Any:
    """Parse JSON, falling back to the plain text when the body is not JSON."""

    text = raw.text
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return text


def normalize_response(raw: TransportResponse) -> NormalizedResponse:
    return NormalizedResponse(
        status_code=raw.status_code,
        status_message=raw.status_message,
        raw_response=raw,
        body=parse_body(raw),
    )
