"""Result model for parsed queries."""

from queryparser.model.query import Query, QueryBuilder, split_values

__all__ = ["Query", "QueryBuilder", "split_values"]
