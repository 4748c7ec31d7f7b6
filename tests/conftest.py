"""Shared test fixtures for queryparser tests."""

from __future__ import annotations

import pytest

from queryparser.parser.query_parser import Options
from queryparser.server.intent import QueryIntent


@pytest.fixture
def raw_options() -> Options:
    """Options without a cutset, so literals come through untouched."""
    return Options()


@pytest.fixture
def intent() -> QueryIntent:
    """Provide a fresh QueryIntent with the default options."""
    return QueryIntent()


@pytest.fixture
def intent_with_query(intent: QueryIntent) -> QueryIntent:
    """Provide a QueryIntent that has already parsed a query."""
    result = intent.execute_parse('hello tag:a,b author:"jane doe"')
    assert "tag:" in result
    return intent
