"""Character cutsets for sanitising filter values and raw text."""

from __future__ import annotations

import re
from typing import Callable

CutFn = Callable[[str], bool]

# Characters kept by default_cut besides letters and numbers.
_DEFAULT_KEEP = frozenset(" \t_,-.:")

_DUPLICATE_SPACES = re.compile(r" {2,}")


def default_cut(ch: str) -> bool:
    """Return True if *ch* should be stripped.

    Keeps Unicode letters and numbers plus space, tab and ``_,-.:``.
    """
    return not (ch.isalpha() or ch.isnumeric() or ch in _DEFAULT_KEEP)


def cutset(text: str, cut_fn: CutFn) -> str:
    """Remove every character of *text* for which *cut_fn* returns True."""
    return "".join(ch for ch in text if not cut_fn(ch))


def strip_duplicate_ws(text: str) -> str:
    """Collapse runs of spaces into a single space."""
    return _DUPLICATE_SPACES.sub(" ", text)
