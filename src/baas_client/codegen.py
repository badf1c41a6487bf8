"""Build-time generator for the operation catalog.

Loads the service's Swagger 2.0 description (online first, local file as a
fallback), turns every path/method pair into an `Endpoint` and writes the
``operations`` module the runtime client imports.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import requests

from .endpoints import FORM_CONTENT_TYPE, JSON_CONTENT_TYPE, Endpoint, Param
from .exceptions import CodegenError

logger = logging.getLogger(__name__)

DEFAULT_DOC_URL = "http://demo.heclouds.com/baasapi/v2/api-docs?group=baas%20demo"
DEFAULT_OUTPUT = Path(__file__).with_name("operations.py")

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch")
LOCATION_BY_SWAGGER_IN = {
    "path": "path",
    "query": "query",
    "header": "header",
    "body": "body",
    "formData": "form",
}


@dataclass(slots=True)
class GeneratorConfig:
    """Where to read the description from and where to write the catalog."""

    doc_url: str | None = DEFAULT_DOC_URL
    doc_file: Path | None = None
    output: Path = field(default=DEFAULT_OUTPUT)
    protocol: str = "http"
    host: str = "demo.heclouds.com"
    base_path: str = "/baasapi"
    timeout: float = 30.0

    @property
    def configured_domain(self) -> str:
        return f"{self.protocol}://{self.host}{self.base_path}"


def load_service_description(
    config: GeneratorConfig, session: requests.Session | None = None
) -> dict[str, Any]:
    """Fetch the description online, falling back to ``config.doc_file``."""

    if config.doc_url:
        http = session or requests.Session()
        try:
            logger.info("Loading service description from %s", config.doc_url)
            response = http.get(
                config.doc_url,
                headers={"Accept": "application/json"},
                timeout=config.timeout,
            )
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as exc:
            if config.doc_file is None:
                raise CodegenError(
                    f"Unable to load service description from {config.doc_url}", details=str(exc)
                ) from exc
            logger.warning(
                "Loading %s failed (%s); using local file %s",
                config.doc_url,
                exc,
                config.doc_file,
            )
    if config.doc_file is None:
        raise CodegenError("No service description source configured.")
    try:
        return json.loads(Path(config.doc_file).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise CodegenError(
            f"Unable to read service description file {config.doc_file}", details=str(exc)
        ) from exc


def resolve_domain(doc: Mapping[str, Any], *, protocol: str, host: str, base_path: str) -> str:
    """Pick the base URL baked into the generated catalog."""

    configured = f"{protocol}://{host}{base_path}"
    doc_host = doc.get("host")
    doc_base_path = doc.get("basePath") or ""
    if not doc_host:
        logger.warning("Service description has no host; using %s", configured)
        return configured.rstrip("/")
    if re.match(r"^https?://", doc_host):
        domain = f"{doc_host}{doc_base_path}"
    else:
        logger.warning("Service description host has no scheme; assuming %s", protocol)
        domain = f"{protocol}://{doc_host}{doc_base_path}"
    return domain.rstrip("/")


def _camel_case(name: str) -> str:
    parts = [part for part in re.split(r"[^0-9A-Za-z]+", name) if part]
    if not parts:
        return name
    return parts[0] + "".join(part[:1].upper() + part[1:] for part in parts[1:])


def _param_from_swagger(raw: Mapping[str, Any]) -> Param:
    swagger_in = raw.get("in")
    location = LOCATION_BY_SWAGGER_IN.get(swagger_in or "")
    if location is None:
        raise CodegenError(f"Unsupported parameter location: {swagger_in!r}")
    wire_name = str(raw["name"])
    name = _camel_case(wire_name)
    return Param(
        name,
        location,
        required=bool(raw.get("required", False)),
        wire_name=wire_name if wire_name != name and location != "body" else None,
    )


def _content_type(operation: Mapping[str, Any], params: Iterable[Param]) -> str:
    if any(param.location == "form" for param in params):
        return FORM_CONTENT_TYPE
    consumes = operation.get("consumes") or []
    return consumes[0] if consumes else JSON_CONTENT_TYPE


def collect_endpoints(doc: Mapping[str, Any]) -> list[Endpoint]:
    """Turn Swagger ``paths`` into endpoints, keeping document order."""

    endpoints: list[Endpoint] = []
    for path, item in (doc.get("paths") or {}).items():
        shared = item.get("parameters") or []
        for method in HTTP_METHODS:
            operation = item.get(method)
            if not operation:
                continue
            operation_id = operation.get("operationId")
            if not operation_id:
                raise CodegenError(f"{method.upper()} {path} has no operationId")
            params = tuple(
                _param_from_swagger(raw) for raw in [*shared, *(operation.get("parameters") or [])]
            )
            endpoints.append(
                Endpoint(
                    operation_id=operation_id,
                    method=method.upper(),
                    path=path,
                    params=params,
                    content_type=_content_type(operation, params),
                    summary=operation.get("summary") or "",
                )
            )
    return endpoints


def _literal(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _render_param(param: Param) -> str:
    parts = [_literal(param.name), _literal(param.location)]
    if param.required:
        parts.append("required=True")
    if param.wire_name:
        parts.append(f"wire_name={_literal(param.wire_name)}")
    return f"            Param({', '.join(parts)}),"


def _render_endpoint(endpoint: Endpoint) -> list[str]:
    lines = [
        "    Endpoint(",
        f"        operation_id={_literal(endpoint.operation_id)},",
        f"        method={_literal(endpoint.method)},",
        f"        path={_literal(endpoint.path)},",
        "        params=(",
    ]
    lines.extend(_render_param(param) for param in endpoint.params)
    lines.append("        ),")
    if endpoint.content_type == FORM_CONTENT_TYPE:
        lines.append("        content_type=FORM_CONTENT_TYPE,")
    elif endpoint.content_type != JSON_CONTENT_TYPE:
        lines.append(f"        content_type={_literal(endpoint.content_type)},")
    if endpoint.summary:
        lines.append(f"        summary={_literal(endpoint.summary)},")
    lines.append("    ),")
    return lines


def render_operations_module(endpoints: Iterable[Endpoint], domain: str) -> str:
    """Render the Python source of the ``operations`` module."""

    out: list[str] = [
        '"""BaaS operation catalog.',
        "",
        "Generated by ``baas generate`` from the service description. Do not edit by hand.",
        '"""',
        "",
        "from __future__ import annotations",
        "",
        "from .endpoints import FORM_CONTENT_TYPE, Endpoint, Param",
        "",
        f"SERVICE_BASE_URL = {_literal(domain)}",
        "",
        "ENDPOINTS: tuple[Endpoint, ...] = (",
    ]
    for endpoint in endpoints:
        out.extend(_render_endpoint(endpoint))
    out.append(")")
    out.append("")
    out.append(
        "OPERATIONS: dict[str, Endpoint] = "
        "{endpoint.operation_id: endpoint for endpoint in ENDPOINTS}"
    )
    out.append("")
    return "\n".join(out)


def generate(config: GeneratorConfig, session: requests.Session | None = None) -> Path:
    """Load, render and write the catalog; return the written path."""

    doc = load_service_description(config, session=session)
    domain = resolve_domain(
        doc, protocol=config.protocol, host=config.host, base_path=config.base_path
    )
    endpoints = collect_endpoints(doc)
    source = render_operations_module(endpoints, domain)
    output = Path(config.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(source, encoding="utf-8")
    logger.info("Wrote %d operations to %s (domain %s)", len(endpoints), output, domain)
    return output
