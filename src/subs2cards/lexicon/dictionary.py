from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .types import DictionaryEntry

Dictionary = Dict[str, DictionaryEntry]


def _entry_from_json(data: Any) -> Optional[DictionaryEntry]:
    if not isinstance(data, dict):
        return None
    lemma = data.get("lemma")
    if not isinstance(lemma, str):
        return None
    meanings = data.get("meanings")
    if meanings is not None and not isinstance(meanings, list):
        meanings = [meanings]
    reading = data.get("reading")
    pos = data.get("pos")
    return DictionaryEntry(
        lemma=lemma,
        meanings=[str(m) for m in meanings] if meanings is not None else None,
        reading=reading if isinstance(reading, str) else None,
        pos=pos if isinstance(pos, str) else None,
    )


def load_dictionary(dict_path: Optional[str | Path]) -> Dictionary:
    """
    读取词典 JSON（条目数组或单个条目对象），按 lemma 建立查找表。

    - 文件不存在时打印警告并返回空表；
    - lemma 重复时以后出现的条目为准。
    """
    if dict_path is None:
        return {}
    path = Path(dict_path).expanduser()
    if not path.is_file():
        print(f"警告: 未找到词典文件 {path}，将不输出释义。")
        return {}

    payload = json.loads(path.read_text(encoding="utf-8"))
    raw_entries = payload if isinstance(payload, list) else [payload]

    dictionary: Dictionary = {}
    for raw in raw_entries:
        entry = _entry_from_json(raw)
        if entry is None:
            continue
        dictionary[entry.lemma] = entry
    print(f"[Dictionary] 已加载 {len(dictionary)} 个词条: {path}")
    return dictionary
