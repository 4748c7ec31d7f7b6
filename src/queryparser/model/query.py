"""Result model for parsed search queries.

A :class:`QueryBuilder` accumulates filters while a single parse runs;
:meth:`QueryBuilder.build` hands back an immutable :class:`Query`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from queryparser.parser.cutset import strip_duplicate_ws


@dataclass(frozen=True)
class Query:
    """Filters and residual text extracted from a query string.

    ``filters`` maps lowercased filter names to their values in the order
    they were found. Lookups lowercase the name first.
    """

    raw: str = ""
    filters: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def get(self, name: str) -> tuple[tuple[str, ...], bool]:
        """Return ``(values, found)`` for the filter *name*."""
        values = self.filters.get(name.lower())
        if values is None:
            return (), False
        return values, True

    def get_one(self, name: str) -> str:
        """Return the last value of *name*, or ``""`` if it has none.

        Useful when a filter should only be given once.
        """
        values, _ = self.get(name)
        return values[-1] if values else ""

    def has(self, name: str) -> bool:
        return name.lower() in self.filters

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)


def split_values(raw_value: str) -> list[str]:
    """Turn a raw filter value into its list of values.

    Quoted values (leading ``"`` or ``'``) become one value with that quote
    character removed throughout; anything else is split on commas with
    empty pieces dropped.

    >>> split_values('"jane doe"')
    ['jane doe']
    >>> split_values("a,,b,")
    ['a', 'b']
    """
    raw_value = strip_duplicate_ws(raw_value)
    for quote in ('"', "'"):
        if raw_value.startswith(quote):
            return [raw_value.replace(quote, "")]
    return [v for v in raw_value.split(",") if v]


class QueryBuilder:
    """Mutable accumulator owned by one parse."""

    def __init__(self) -> None:
        self._filters: dict[str, list[str]] = {}

    def add(self, name: str, raw_value: str) -> None:
        """Append the value(s) of *raw_value* under the lowercased *name*.

        The key is created even when no value survives splitting.
        """
        self._filters.setdefault(name.lower(), []).extend(split_values(raw_value))

    def build(self, raw: str = "") -> Query:
        """Freeze the accumulated filters into a :class:`Query`."""
        filters = {name: tuple(values) for name, values in self._filters.items()}
        return Query(raw=raw, filters=MappingProxyType(filters))
