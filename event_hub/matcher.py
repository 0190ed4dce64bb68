"""
Event Hub — Pattern matcher
Resolves which pattern-table entries apply to an emitted event name.

A pattern containing ``.*`` is a wildcard pattern. Each ``.*.`` segment and a
trailing ``.*`` become one run of non-dot characters; everything else in the
pattern is passed to ``re`` as-is. The derived expression is searched inside
the event name, not matched against all of it, so ``a.*.b`` also matches
``x.a.mid.b.y``. A key equal to the event name always matches.

The matcher does no logging of its own; diagnostics go through the hub's
LogSink so stop_logging() silences them.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from functools import lru_cache
from typing import TypeVar

from .config import SEGMENT_REGEX, WILDCARD_MARKER
from .errors import InvalidPatternError

T = TypeVar("T")

_INNER_WILDCARD = re.compile(r"\.\*\.")
_TRAILING_WILDCARD = re.compile(r"\.\*\Z")


def is_wildcard(pattern: str) -> bool:
    return WILDCARD_MARKER in pattern


def to_regex(pattern: str) -> str:
    """Translate a wildcard pattern into its regular-expression source."""
    source = _INNER_WILDCARD.sub(lambda _m: f".{SEGMENT_REGEX}.", pattern)
    return _TRAILING_WILDCARD.sub(lambda _m: f".{SEGMENT_REGEX}", source)


@lru_cache(maxsize=1024)
def compile_pattern(pattern: str) -> re.Pattern[str] | None:
    """
    Compile a pattern for emit-time matching.

    Returns None for plain patterns, which only match by string equality.
    Raises InvalidPatternError when the derived expression is rejected by re.
    """
    if not is_wildcard(pattern):
        return None
    source = to_regex(pattern)
    try:
        return re.compile(source)
    except re.error as exc:
        raise InvalidPatternError(pattern, detail=str(exc)) from exc


def matches(pattern: str, event_name: str) -> bool:
    """True if an event emitted as ``event_name`` reaches subscribers of ``pattern``."""
    if pattern == event_name:
        return True
    compiled = compile_pattern(pattern)
    if compiled is None:
        return False
    return compiled.search(event_name) is not None


def resolve_for_emit(table: Mapping[str, T], event_name: str) -> list[T]:
    """Collections whose pattern matches ``event_name``, in table order."""
    matched: list[T] = []
    for pattern, collection in table.items():
        if matches(pattern, event_name):
            matched.append(collection)
    return matched


def resolve_for_exact(table: Mapping[str, T], pattern: str) -> T | None:
    """Collection registered under exactly ``pattern``. Never expands wildcards."""
    return table.get(pattern)


def matching_patterns(patterns: Sequence[str], event_name: str) -> list[str]:
    """Subset of ``patterns`` that an emit of ``event_name`` would reach."""
    return [p for p in patterns if matches(p, event_name)]
