"""
Audit of keyword tables: empty payloads, contradictory duplicates and
shadowed keys.

A key is shadowed when an earlier key is a substring of it: any input
containing the later key also contains the earlier one, so the later key can
never win an exact match. Shadowing is reported as a warning only, since the
earlier key may be the intended winner.
"""
from __future__ import annotations

from typing import Any, Dict, List, Sequence

from .followup import FOLLOW_UP_TABLE, SUGGESTION_TABLE
from .knowledge_base import GUIDANCE_TABLE
from .matcher import KeywordTable
from .supplies import SUPPLY_TABLE


def _is_empty(payload: Any) -> bool:
    if payload is None:
        return True
    if isinstance(payload, str):
        return not payload.strip()
    try:
        return len(payload) == 0
    except TypeError:
        return False


def find_shadowed(table: KeywordTable[Any]) -> List[Dict[str, str]]:
    shadowed: List[Dict[str, str]] = []
    pairs = table.pairs
    for i, (later, payload) in enumerate(pairs):
        for earlier, earlier_payload in pairs[:i]:
            # Synonyms sharing a payload are harmless.
            if earlier != later and earlier in later and earlier_payload != payload:
                shadowed.append({"key": later, "shadowed_by": earlier})
                break
    return shadowed


def find_contradictions(table: KeywordTable[Any]) -> List[str]:
    seen: Dict[str, Any] = {}
    bad: List[str] = []
    for key, payload in table:
        if key in seen and seen[key] != payload and key not in bad:
            bad.append(key)
        seen.setdefault(key, payload)
    return bad


def audit_table(table: KeywordTable[Any]) -> Dict[str, Any]:
    empty = [k for k, payload in table if _is_empty(payload)]
    contradictions = find_contradictions(table)
    shadowed = find_shadowed(table)
    default_empty = _is_empty(table.default)
    return {
        "table": table.name,
        "keys": len(table),
        "empty_payloads": empty,
        "contradictory_keys": contradictions,
        "default_empty": default_empty,
        "shadowed_keys": shadowed,
        "summary_pass": not (empty or contradictions or default_empty),
    }


def default_tables() -> Sequence[KeywordTable[Any]]:
    return (GUIDANCE_TABLE, FOLLOW_UP_TABLE, SUGGESTION_TABLE, SUPPLY_TABLE)


def audit_all(tables: Sequence[KeywordTable[Any]] = ()) -> Dict[str, Any]:
    reports = [audit_table(t) for t in (tables or default_tables())]
    return {
        "tables": reports,
        "summary_pass": all(r["summary_pass"] for r in reports),
    }
