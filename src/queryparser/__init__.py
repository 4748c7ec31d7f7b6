"""queryparser — extract ``name:value`` filters from free-form search strings.

>>> from queryparser import parse
>>> q = parse('hello world tag:foo,bar author:"jane doe"')
>>> q.raw
'hello world'
>>> q.get_one("author")
'jane doe'
"""

from queryparser.errors import OptionsError, QueryParserError, StateError
# parser before model: the model reuses parser.cutset
from queryparser.parser import DEFAULT_OPTIONS, Options, Parser, default_cut, parse
from queryparser.model.query import Query, QueryBuilder

__all__ = [
    "parse",
    "default_cut",
    "DEFAULT_OPTIONS",
    "Options",
    "Parser",
    "Query",
    "QueryBuilder",
    "QueryParserError",
    "OptionsError",
    "StateError",
]
