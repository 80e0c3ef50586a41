"""Structured query fragments - predicates, ordering and pagination.

Repositories describe filters with a `Query` instead of concatenating SQL
strings. Column names passed here come from code, never from user input;
values always travel as bound parameters.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from app.models import Window


@dataclass(frozen=True)
class Page:
    """Offset/limit pagination."""

    offset: int = 0
    limit: int | None = None

    @classmethod
    def number(cls, page: int, per_page: int) -> "Page":
        """Page numbers start at 1."""
        return cls(offset=max(page - 1, 0) * per_page, limit=per_page)


@dataclass
class Query:
    """Predicate list plus optional order and pagination."""

    predicates: list[str] = field(default_factory=list)
    params: list[Any] = field(default_factory=list)
    order_by: str | None = None
    order: str = "ASC"
    page: Page | None = None

    def where(self, clause: str, *params: Any) -> "Query":
        self.predicates.append(clause)
        self.params.extend(params)
        return self

    def equals(self, column: str, value: Any) -> "Query":
        return self.where(f"{column} = ?", value)

    def between(self, column: str, start: Any, end: Any) -> "Query":
        return self.where(f"{column} BETWEEN ? AND ?", start, end)

    def within(self, window: Window, column: str = "date") -> "Query":
        return self.between(column, window.start, window.end)

    def isin(self, column: str, values: Iterable[Any]) -> "Query":
        values = list(values)
        if not values:
            return self.where("FALSE")
        return self.where(f"{column} IN ({', '.join('?' * len(values))})", *values)

    def ordered(self, column: str, order: str = "ASC") -> "Query":
        order = order.upper()
        if order not in ("ASC", "DESC"):
            raise ValueError(f"Invalid sort order: {order}")
        self.order_by = column
        self.order = order
        return self

    def paginate(self, page: Page | None) -> "Query":
        self.page = page
        return self

    def where_sql(self) -> str:
        if not self.predicates:
            return ""
        return "WHERE " + " AND ".join(self.predicates)

    def tail_sql(self) -> str:
        parts = []
        if self.order_by:
            parts.append(f"ORDER BY {self.order_by} {self.order}")
        if self.page and self.page.limit is not None:
            parts.append(f"LIMIT {int(self.page.limit)}")
        if self.page and self.page.offset:
            parts.append(f"OFFSET {int(self.page.offset)}")
        return " ".join(parts)

    def sql(self, select: str, group_by: str = "") -> tuple[str, list[Any]]:
        """Compose `select` with this query's filters into (sql, params)."""
        parts = [select.strip(), self.where_sql()]
        if group_by:
            parts.append(f"GROUP BY {group_by}")
        parts.append(self.tail_sql())
        return "\n".join(p for p in parts if p), list(self.params)
