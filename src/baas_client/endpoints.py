"""Declarative endpoint descriptions and their parameter binding."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .exceptions import MissingParameterError
from .http import LogicalRequest, js_text

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
EXTRA_QUERY_KEY = "$queryParameters"

LOCATIONS = ("path", "query", "header", "body", "form")


@dataclass(frozen=True, slots=True)
class Param:
    """One declared operation parameter and the bucket it is sent in."""

    name: str
    location: str
    required: bool = False
    wire_name: str | None = None

    def __post_init__(self) -> None:
        if self.location not in LOCATIONS:
            raise ValueError(f"Unknown parameter location: {self.location}")

    @property
    def key(self) -> str:
        return self.wire_name or self.name


@dataclass(frozen=True, slots=True)
class Endpoint:
    """A single API operation: method, path template and declared parameters."""

    operation_id: str
    method: str
    path: str
    params: tuple[Param, ...] = ()
    content_type: str = JSON_CONTENT_TYPE
    summary: str = field(default="", compare=False)

    @property
    def required(self) -> tuple[str, ...]:
        return tuple(param.name for param in self.params if param.required)

    def bind(self, parameters: Mapping[str, Any] | None = None) -> LogicalRequest:
        """Sort caller parameters into buckets and substitute the path.

        Parameters are checked in declaration order and the first missing
        required one is reported. ``None`` counts as missing, so placeholders
        are always resolved before the request leaves the client.
        """
        values = parameters or {}
        request = LogicalRequest(
            method=self.method,
            path=self.path,
            headers={"Accept": "*/*", "Content-Type": self.content_type},
        )
        for param in self.params:
            value = values.get(param.name)
            if value is None:
                if param.required:
                    raise MissingParameterError(param.name, operation=self.operation_id)
                continue
            if param.location == "path":
                request.path = request.path.replace(f"{{{param.key}}}", js_text(value))
                request.path_params[param.key] = value
            elif param.location == "query":
                request.query_params[param.key] = value
            elif param.location == "header":
                request.headers[param.key] = js_text(value)
            elif param.location == "body":
                request.body = value
            else:
                request.form[param.key] = value

        extra_query = values.get(EXTRA_QUERY_KEY)
        if extra_query:
            request.query_params.update(extra_query)
        return request
