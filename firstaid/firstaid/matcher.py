"""
Keyword matcher shared by the guidance resolver and the satellite classifiers.

A table is an ordered sequence of (trigger key, payload) pairs. Order is the
priority: phase 1 returns the first key found as a substring of the input,
phase 2 (frequency scoring) only runs when phase 1 finds nothing.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

from .schema import KnowledgeEntry, MatchResult, normalize_key

logger = logging.getLogger(__name__)

P = TypeVar("P")

MIN_TOKEN_LENGTH = 4

Phase = Callable[[str, "KeywordTable[Any]"], Optional[MatchResult]]


class KeywordTable(Generic[P]):
    """Immutable, ordered (key, payload) pairs plus a default payload."""

    def __init__(self, pairs: Iterable[Tuple[str, P]], default: P, name: str = "table"):
        items: List[Tuple[str, P]] = []
        for key, payload in pairs:
            norm = normalize_key(key)
            if not norm:
                raise ValueError(f"{name}: empty trigger key")
            items.append((norm, payload))
        if not items:
            raise ValueError(f"{name}: table must have at least one key")
        self._pairs: Tuple[Tuple[str, P], ...] = tuple(items)
        self.default = default
        self.name = name

    @classmethod
    def from_entries(cls, entries: Iterable[KnowledgeEntry], default: str, name: str = "guidance") -> "KeywordTable[str]":
        pairs = [(key, e.guidance) for e in entries for key in e.keys]
        return cls(pairs, default, name=name)

    @property
    def pairs(self) -> Tuple[Tuple[str, P], ...]:
        return self._pairs

    def keys(self) -> List[str]:
        return [k for k, _ in self._pairs]

    def extend_front(self, pairs: Iterable[Tuple[str, P]]) -> "KeywordTable[P]":
        """New table with ``pairs`` ahead of this table's pairs (higher priority)."""
        return KeywordTable(list(pairs) + list(self._pairs), self.default, name=self.name)

    def __iter__(self) -> Iterator[Tuple[str, P]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)


def normalize_text(text: Optional[str]) -> str:
    if not text:
        return ""
    return str(text).lower()


def exact_match(text: str, table: KeywordTable[Any]) -> Optional[MatchResult]:
    """Phase 1: first key (in table order) that is a substring of ``text``."""
    lowered = normalize_text(text)
    if not lowered:
        return None
    for key, payload in table:
        if key in lowered:
            return MatchResult(key=key, payload=payload, phase="exact")
    return None


def score_match(text: str, table: KeywordTable[Any]) -> Optional[MatchResult]:
    """Phase 2: key with the strictly highest token-overlap score.

    Ties go to the key that reached the maximum first while scoring.
    """
    best_key: Optional[str] = None
    best_score = 0
    running: Dict[str, int] = {}
    lookup = dict(reversed(table.pairs))
    keys = list(dict.fromkeys(table.keys()))
    for token in normalize_text(text).split():
        if len(token) < MIN_TOKEN_LENGTH:
            continue
        for key in keys:
            if token in key:
                running[key] = running.get(key, 0) + 1
                if running[key] > best_score:
                    best_key, best_score = key, running[key]
    if best_key is None:
        return None
    return MatchResult(key=best_key, payload=lookup[best_key], phase="scored", score=best_score)


def first_success(*phases: Phase) -> Phase:
    """Combine phases; the first one returning a result wins."""

    def run(text: str, table: KeywordTable[Any]) -> Optional[MatchResult]:
        for phase in phases:
            result = phase(text, table)
            if result is not None:
                return result
        return None

    return run


exact_only = first_success(exact_match)
exact_then_scored = first_success(exact_match, score_match)


def classify(text: Optional[str], table: KeywordTable[P], fallback_scoring: bool = False) -> MatchResult:
    """Match ``text`` against ``table``; never raises for string input."""
    pipeline = exact_then_scored if fallback_scoring else exact_only
    result = pipeline(normalize_text(text), table)
    if result is None:
        logger.debug("%s: no match, using default payload", table.name)
        return MatchResult(key=None, payload=table.default, phase="default")
    logger.debug("%s: matched %r (%s)", table.name, result.key, result.phase)
    return result


def match(text: Optional[str], table: KeywordTable[P], fallback_scoring: bool = False) -> P:
    return classify(text, table, fallback_scoring=fallback_scoring).payload


def matching_keys(text: Optional[str], keys: Sequence[str]) -> List[str]:
    lowered = normalize_text(text)
    return [k for k in keys if k in lowered]
