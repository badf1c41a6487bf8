"""Authentication-code algorithm shared with the BaaS server.

The server recomputes the code from the same inputs, so every step here is
fixed: the prefix field order, the key derivation, the canonical parameter
ordering and the percent-encoding all have to match byte for byte.

An auth code looks like::

    accessId=EUqV2yIU&nonce=B2d1a32w112a3ldkKDKNEN&timestamp=1501661974308&signature=gGORxQcvvKG%2B2kp8%2FwgnRM5nvlA%3D
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
import logging
import time
import uuid
from collections.abc import Mapping
from typing import Any

from ..http import encode_uri_component, js_text

logger = logging.getLogger(__name__)

AUTH_CODE_HEADER = "authCode"
SESSION_TOKEN_PARAM = "sessionToken"
_SIGNATURE_FIELD = "&signature="


def new_nonce() -> str:
    return str(uuid.uuid1())


def current_timestamp() -> int:
    return int(time.time() * 1000)


def _hmac_sha1_base64(message: str, key: str) -> str:
    digest = hmac.new(key.encode("utf-8"), message.encode("utf-8"), hashlib.sha1).digest()
    return base64.b64encode(digest).decode("ascii")


def build_prefix(access_id: str, nonce: str, timestamp: int | str) -> str:
    return f"accessId={access_id}&nonce={nonce}&timestamp={timestamp}"


def derive_signing_key(prefix: str, access_key: str) -> str:
    """Return ``base64(HMAC-SHA1(prefix))`` keyed by the raw access key."""

    return _hmac_sha1_base64(prefix, access_key)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def build_signature_content(method: str, params: Mapping[str, Any]) -> str:
    """Canonicalize the signed parameters as ``METHOD-k1=v1&k2=v2``.

    ``sessionToken`` is never signed. Lists and mappings are signed as compact
    JSON, and empty values are dropped unless they are numbers, so ``0`` stays.
    """

    pairs: list[str] = []
    for key in sorted(params):
        if key == SESSION_TOKEN_PARAM:
            continue
        value = params[key]
        if isinstance(value, (list, tuple, Mapping)):
            value = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
        if not value and not _is_number(value):
            continue
        pairs.append(f"{key}={encode_uri_component(js_text(value))}")
    return f"{method.upper()}-{'&'.join(pairs)}"


def compute_signature(content: str, signing_key: str) -> str:
    return encode_uri_component(_hmac_sha1_base64(content, signing_key))


def generate_auth_code(
    method: str,
    access_key: str,
    access_id: str,
    params: Mapping[str, Any],
    *,
    nonce: str | None = None,
    timestamp: int | None = None,
    debug: bool = False,
) -> str:
    """Compute the ``authCode`` header value for one request.

    Args:
        method: HTTP method of the request, any case.
        access_key: Shared secret; used only as the HMAC key.
        access_id: Public identifier of the caller.
        params: Union of path and query parameters.
        nonce: Pre-supplied nonce; a fresh ``uuid1`` is generated when empty.
        timestamp: Pre-supplied epoch milliseconds; the current time when empty.
        debug: Emit DEBUG traces of the non-secret intermediate values.

    Returns:
        ``accessId=..&nonce=..&timestamp=..&signature=..``
    """
    prefix = build_prefix(access_id, nonce or new_nonce(), timestamp or current_timestamp())
    signing_key = derive_signing_key(prefix, access_key)
    content = build_signature_content(method, params)
    if debug:
        logger.debug("authPrefixString: %s", prefix)
        logger.debug("signatureContent: %s", content)
    return f"{prefix}{_SIGNATURE_FIELD}{compute_signature(content, signing_key)}"


def redact_auth_code(auth_code: str) -> str:
    """Mask the signature part of an auth code for trace output."""

    prefix, sep, _ = auth_code.partition(_SIGNATURE_FIELD)
    return f"{prefix}{sep}***" if sep else auth_code
