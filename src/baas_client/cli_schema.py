"""Schema describing important fields for CLI table rendering."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

Row = Mapping[str, Any]
ValueFormatter = Callable[[Any], str]
SortKey = Callable[[Row], Any]


@dataclass(frozen=True)
class Column:
    """Describe how to pull and format a column for Rich tables."""

    header: str
    key: str
    formatter: ValueFormatter | None = None
    justify: str = "left"

    def render(self, row: Row) -> str:
        value = row.get(self.key)
        if value is None:
            return ""
        if self.formatter:
            return self.formatter(value)
        return str(value)


@dataclass(frozen=True)
class TableView:
    """Describe a Rich table for a CLI command."""

    title: str
    columns: tuple[Column, ...]
    sort_key: SortKey | None = None


def _list_formatter(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return str(value)


CLI_TABLE_VIEWS: dict[str, TableView] = {
    "operations": TableView(
        title="BaaS Operations",
        columns=(
            Column("Operation", "operationId"),
            Column("Method", "method"),
            Column("Path", "path"),
            Column("Required", "required", formatter=_list_formatter),
            Column("Content-Type", "contentType"),
        ),
        sort_key=lambda row: (str(row.get("path", "")), str(row.get("method", ""))),
    ),
}
