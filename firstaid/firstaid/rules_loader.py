from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from .knowledge_base import GUIDANCE_TABLE
from .matcher import KeywordTable
from .schema import KnowledgeEntry


def load_knowledge_dir(kb_dir: str | Path) -> Dict[str, List[KnowledgeEntry]]:
    kb_path = Path(kb_dir)
    if not kb_path.exists():
        raise FileNotFoundError(f"knowledge dir not found: {kb_dir}")
    result: Dict[str, List[KnowledgeEntry]] = {}
    for p in sorted(kb_path.glob("*.json")):
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if isinstance(data, dict):
            data = data.get("entries", [])
        entries = [KnowledgeEntry(**e) for e in data]
        _check_consistent(p.stem, entries)
        result[p.stem] = entries
    return result


def _check_consistent(pack: str, entries: List[KnowledgeEntry]) -> None:
    seen: Dict[str, str] = {}
    for e in entries:
        for key in e.keys:
            if key in seen and seen[key] != e.guidance:
                raise ValueError(f"{pack}: key {key!r} maps to contradictory guidance")
            seen[key] = e.guidance


def build_guidance_table(
    packs: Mapping[str, List[KnowledgeEntry]],
    base: Optional[KeywordTable[str]] = GUIDANCE_TABLE,
) -> KeywordTable[str]:
    """Pack entries first (pack name order), then the ``base`` table."""
    pairs = [(key, e.guidance) for entries in packs.values() for e in entries for key in e.keys]
    if base is None:
        return KeywordTable(pairs, GUIDANCE_TABLE.default, name="guidance")
    return base.extend_front(pairs)
