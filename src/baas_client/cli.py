"""Command-line interface for calling the BaaS API."""
from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from . import BaaSClient
from .auth.signature import generate_auth_code
from .cli_schema import CLI_TABLE_VIEWS, TableView
from .codegen import DEFAULT_DOC_URL, DEFAULT_OUTPUT, GeneratorConfig, generate
from .config import DEFAULT_BASE_URL
from .exceptions import (
    BaaSError,
    CodegenError,
    ConfigurationError,
    HTTPResponseError,
    MissingParameterError,
    TransportError,
)
from .http import NormalizedResponse
from .operations import ENDPOINTS
from .resources.session import session_token

app = typer.Typer(help="BaaS API command-line client.", no_args_is_help=True)

console = Console(force_terminal=False, color_system=None)


def _build_client(
    base_url: str,
    access_id: str | None,
    access_key: str | None,
    verify_ssl: bool,
    cert_path: Path | None,
    timeout: float,
    debug: bool,
) -> BaaSClient:
    if not access_id or not access_key:
        raise typer.BadParameter("--access-id and --access-key are required.")

    ca_cert: str | None = None
    if cert_path:
        expanded_cert = cert_path.expanduser()
        if not expanded_cert.exists():
            raise typer.BadParameter("Certificate file not found for --cert option.")
        if not verify_ssl:
            raise typer.BadParameter("Cannot combine --cert with --no-verify.")
        ca_cert = str(expanded_cert)

    if debug:
        logging.basicConfig(level=logging.DEBUG)

    try:
        return BaaSClient(
            access_id,
            access_key,
            base_url=base_url,
            ca_cert=ca_cert,
            reject_unauthorized=verify_ssl,
            debug=debug,
            timeout=timeout,
        )
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _render_rich_table(view: TableView, rows: Sequence[Mapping[str, Any]]) -> None:
    table = Table(
        title=view.title,
        box=box.SIMPLE,
        show_lines=False,
        header_style="bold cyan",
    )
    for column in view.columns:
        table.add_column(column.header, justify=column.justify)
    ordered_rows = list(rows)
    if view.sort_key:
        ordered_rows.sort(key=view.sort_key)
    for row in ordered_rows:
        table.add_row(*(column.render(row) for column in view.columns))
    console.print(table)


def _response_payload(response: NormalizedResponse) -> dict[str, Any]:
    return {
        "status": response.status_code,
        "statusMessage": response.status_message,
        "body": response.body,
    }


def _handle_error(exc: BaaSError) -> None:
    if isinstance(exc, MissingParameterError):
        typer.secho(str(exc), err=True, fg=typer.colors.RED)
        raise typer.Exit(code=2)
    if isinstance(exc, HTTPResponseError):
        message = f"Request failed (status {exc.status_code}): {exc.response.status_message}"
        if exc.details not in (None, ""):
            message += f"\nDetails: {json.dumps(exc.details, ensure_ascii=False)}"
    else:
        message = f"Request failed: {exc}"
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)


def _coerce_simple(value: str) -> Any:
    v = value.strip()
    if not v:
        return ""
    if v.startswith("@"):
        path = Path(v[1:]).expanduser()
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise typer.BadParameter(f"Unable to read payload file: {exc}") from exc
        except ValueError as exc:
            raise typer.BadParameter(f"Payload file is not valid JSON: {exc}") from exc
    if v[0] in "{[":
        try:
            return json.loads(v)
        except ValueError as exc:
            raise typer.BadParameter(f"Invalid JSON value: {v}") from exc
    low = v.lower()
    if low == "true":
        return True
    if low == "false":
        return False
    if low in {"null", "none"}:
        return None
    try:
        if "." in v:
            return float(v)
        return int(v)
    except ValueError:
        return v


def parse_params(entries: Sequence[str]) -> dict[str, Any]:
    """Parse repeated ``key=value`` options into an operation parameter mapping."""
    out: dict[str, Any] = {}
    for entry in entries:
        if "=" not in entry:
            raise typer.BadParameter(f"Parameters must be key=value pairs, got {entry!r}.")
        key, value = entry.split("=", 1)
        out[key.strip()] = _coerce_simple(value)
    return out


def _default_verify() -> bool:
    # Accept common truthy/falsey representations (1/0, true/false, yes/no).
    env_verify = os.getenv("BAAS_VERIFY_SSL")
    if env_verify is None:
        return True
    return env_verify.strip().lower() not in {"0", "false", "no", "off"}


def _shared_options() -> dict[str, Any]:  # pragma: no cover - helper indirection
    return {
        "base_url": typer.Option(
            DEFAULT_BASE_URL, "--base-url", envvar="BAAS_BASE_URL", help="BaaS API base URL."
        ),
        "access_id": typer.Option(
            None, "--access-id", envvar="BAAS_ACCESS_ID", help="Access key identifier."
        ),
        "access_key": typer.Option(
            None,
            "--access-key",
            envvar="BAAS_ACCESS_KEY",
            help="Secret access key used to sign requests.",
            hide_input=True,
        ),
        "session_token": typer.Option(
            None,
            "--session-token",
            "-s",
            envvar="BAAS_SESSION_TOKEN",
            help="Session token from `baas login`, sent as sessionToken.",
        ),
        "verify_ssl": typer.Option(
            _default_verify(),
            "--verify/--no-verify",
            envvar="BAAS_VERIFY_SSL",
            help="Reject untrusted TLS certificates (https endpoints only).",
            show_default=True,
        ),
        "cert_path": typer.Option(
            None,
            "--cert",
            envvar="BAAS_CA_CERT",
            help="Path to a custom CA bundle for TLS verification.",
        ),
        "timeout": typer.Option(30.0, help="Request timeout (seconds).", show_default=True),
        "debug": typer.Option(False, "--debug", help="Trace signing and requests to stderr."),
        "params": typer.Option(
            [],
            "--param",
            "-P",
            help="Operation parameter as key=value; JSON literals and @file.json accepted.",
            show_default=False,
        ),
        "output_json": typer.Option(
            False,
            "--json",
            "-j",
            help="Return raw JSON instead of rendering a table.",
        ),
    }


_SHARED_OPTIONS = _shared_options()


@app.command("operations")
def operations_list(output_json: bool = _SHARED_OPTIONS["output_json"]) -> None:
    """List every operation the client knows about."""

    rows = [
        {
            "operationId": endpoint.operation_id,
            "method": endpoint.method,
            "path": endpoint.path,
            "required": list(endpoint.required),
            "contentType": endpoint.content_type,
        }
        for endpoint in ENDPOINTS
    ]
    if output_json:
        _echo_json(rows)
        return
    _render_rich_table(CLI_TABLE_VIEWS["operations"], rows)


@app.command("call")
def call_operation(
    operation_id: str = typer.Argument(..., help="Operation id, e.g. getDevicesListUsingGET."),
    params: list[str] = _SHARED_OPTIONS["params"],
    base_url: str = _SHARED_OPTIONS["base_url"],
    access_id: str | None = _SHARED_OPTIONS["access_id"],
    access_key: str | None = _SHARED_OPTIONS["access_key"],
    session_token_value: str | None = _SHARED_OPTIONS["session_token"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    debug: bool = _SHARED_OPTIONS["debug"],
) -> None:
    """Call any operation by id and print the normalized response."""

    parameters = parse_params(params)
    if session_token_value and "sessionToken" not in parameters:
        parameters["sessionToken"] = session_token_value

    with _build_client(
        base_url=base_url,
        access_id=access_id,
        access_key=access_key,
        verify_ssl=verify_ssl,
        cert_path=cert_path,
        timeout=timeout,
        debug=debug,
    ) as client:
        try:
            response = client.call(operation_id, parameters)
        except (HTTPResponseError, TransportError, MissingParameterError) as exc:
            _handle_error(exc)
            return
        except BaaSError as exc:
            raise typer.BadParameter(str(exc)) from exc

    _echo_json(_response_payload(response))


@app.command("login")
def login(
    app_token: str = typer.Option(..., "--app-token", envvar="BAAS_APP_TOKEN"),
    login_name: str = typer.Option(..., "--login-name", envvar="BAAS_LOGIN_NAME"),
    password: str = typer.Option(
        ..., "--password", envvar="BAAS_PASSWORD", prompt=True, hide_input=True
    ),
    base_url: str = _SHARED_OPTIONS["base_url"],
    access_id: str | None = _SHARED_OPTIONS["access_id"],
    access_key: str | None = _SHARED_OPTIONS["access_key"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    debug: bool = _SHARED_OPTIONS["debug"],
) -> None:
    """Log in and print the session token for subsequent calls."""

    with _build_client(
        base_url=base_url,
        access_id=access_id,
        access_key=access_key,
        verify_ssl=verify_ssl,
        cert_path=cert_path,
        timeout=timeout,
        debug=debug,
    ) as client:
        try:
            response = client.session.login(
                {"appToken": app_token, "loginName": login_name, "password": password}
            )
        except (HTTPResponseError, TransportError) as exc:
            _handle_error(exc)
            return

    token = session_token(response)
    if not token:
        typer.secho("Login succeeded but no session-token header was returned.", err=True)
        raise typer.Exit(code=1)
    typer.echo(token)


@app.command("sign")
def sign(
    method: str = typer.Argument(..., help="HTTP method of the request to sign."),
    params: list[str] = _SHARED_OPTIONS["params"],
    access_id: str | None = _SHARED_OPTIONS["access_id"],
    access_key: str | None = _SHARED_OPTIONS["access_key"],
    nonce: str | None = typer.Option(None, "--nonce", help="Fixed nonce (default: uuid1)."),
    timestamp: int | None = typer.Option(
        None, "--timestamp", help="Fixed epoch milliseconds (default: now)."
    ),
) -> None:
    """Print the authCode header for a method and its path/query parameters."""

    if not access_id or not access_key:
        raise typer.BadParameter("--access-id and --access-key are required.")
    typer.echo(
        generate_auth_code(
            method,
            access_key,
            access_id,
            parse_params(params),
            nonce=nonce,
            timestamp=timestamp,
        )
    )


@app.command("generate")
def generate_catalog(
    doc_url: str = typer.Option(
        DEFAULT_DOC_URL, "--doc-url", help="Online service description (Swagger 2.0 JSON)."
    ),
    doc_file: Path | None = typer.Option(
        None, "--doc-file", help="Local description used when the online one fails."
    ),
    output: Path = typer.Option(DEFAULT_OUTPUT, "--output", "-o", help="Module to write."),
    protocol: str = typer.Option("http", "--protocol", help="Scheme when the doc has none."),
    host: str = typer.Option("demo.heclouds.com", "--host", help="Host when the doc has none."),
    base_path: str = typer.Option("/baasapi", "--base-path", help="Base path fallback."),
    offline: bool = typer.Option(False, "--offline", help="Skip the online description."),
) -> None:
    """Regenerate the operation catalog from the service description."""

    config = GeneratorConfig(
        doc_url=None if offline else doc_url,
        doc_file=doc_file,
        output=output,
        protocol=protocol,
        host=host,
        base_path=base_path,
    )
    try:
        written = generate(config)
    except CodegenError as exc:
        typer.secho(f"Generation failed: {exc}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Wrote {written}")
