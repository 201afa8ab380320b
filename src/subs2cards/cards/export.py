from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .types import Card

CardLike = Union[Card, Mapping[str, Any]]


def _as_record(card: CardLike) -> Dict[str, Any]:
    if isinstance(card, Card):
        return card.to_dict()
    return dict(card)


def sanitize_field(value: Optional[str]) -> str:
    """
    清理 TSV 字段：制表符与换行（含 \\r\\n）替换为空格，并去除首尾空白。
    """
    if value is None:
        return ""
    return str(value).replace("\t", " ").replace("\r\n", " ").replace("\n", " ").strip()


def cards_to_json(cards: Iterable[CardLike]) -> str:
    records = [_as_record(card) for card in cards]
    return json.dumps(records, ensure_ascii=False, indent=2)


def cards_to_tsv(cards: Iterable[CardLike]) -> str:
    lines: List[str] = []
    for card in cards:
        record = _as_record(card)
        sentence = sanitize_field(record.get("sentence"))
        translation = sanitize_field(record.get("translation"))
        lines.append(f"{sentence}\t{translation}")
    return "\n".join(lines)


def _write_text(text: str, path: str | Path) -> Path:
    out_path = Path(path).expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text, encoding="utf-8")
    return out_path


def write_json(cards: Iterable[CardLike], path: str | Path) -> Path:
    return _write_text(cards_to_json(cards), path)


def write_tsv(cards: Iterable[CardLike], path: str | Path) -> Path:
    return _write_text(cards_to_tsv(cards), path)
