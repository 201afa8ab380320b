from __future__ import annotations

import itertools
import json
import math
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Union

Identifier = Union[int, float, str]

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def normalize_identifier(value: Any) -> Optional[Identifier]:
    """
    规范化 id / subtitleId：

      - None 或空字符串 -> None；
      - 有限数字保持为数字（整数值的浮点数转为 int）；
      - 以整数开头的字符串取其整数部分（"05" -> 5，"12a" -> 12）；
      - 其它值转为字符串。
    """
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value) if value.is_integer() else value
    match = _LEADING_INT_RE.match(str(value))
    if match:
        return int(match.group(1))
    return str(value)


def identifier_key(value: Any) -> Optional[str]:
    normalized = normalize_identifier(value)
    if normalized is None:
        return None
    return str(normalized)


@dataclass
class TranslationEntry:
    translation: str
    id: Optional[Identifier] = None
    subtitle_id: Optional[Identifier] = None
    sentence: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "subtitleId": self.subtitle_id,
            "sentence": self.sentence,
            "translation": self.translation,
        }


def sanitize_translation_entry(data: Any) -> Optional[TranslationEntry]:
    """
    校验并规范化一条译文提示；translation 缺失或为空时返回 None。
    """
    if not isinstance(data, Mapping):
        return None
    raw_translation = data.get("translation")
    if not isinstance(raw_translation, str):
        return None
    translation = raw_translation.strip()
    if not translation:
        return None

    raw_sentence = data.get("sentence")
    sentence = raw_sentence.strip() if isinstance(raw_sentence, str) else ""

    return TranslationEntry(
        translation=translation,
        id=normalize_identifier(data.get("id")),
        subtitle_id=normalize_identifier(data.get("subtitleId")),
        sentence=sentence or None,
    )


@dataclass
class TranslationState:
    """
    本次运行的译文缓存。

    三个索引分别按 id、subtitleId、去空白后的句子查找；
    initial_entries 为启动时加载的条目，added_entries 为本次运行新生成的条目。
    """

    by_id: Dict[str, str] = field(default_factory=dict)
    by_subtitle_id: Dict[str, str] = field(default_factory=dict)
    by_sentence: Dict[str, str] = field(default_factory=dict)
    initial_entries: List[TranslationEntry] = field(default_factory=list)
    added_entries: List[TranslationEntry] = field(default_factory=list)
    source_path: Optional[Path] = None

    def _index(self, entry: TranslationEntry) -> None:
        id_key = identifier_key(entry.id)
        if id_key is not None:
            self.by_id[id_key] = entry.translation
        subtitle_key = identifier_key(entry.subtitle_id)
        if subtitle_key is not None:
            self.by_subtitle_id[subtitle_key] = entry.translation
        if entry.sentence:
            self.by_sentence[entry.sentence] = entry.translation

    def add_initial(self, data: Any) -> Optional[TranslationEntry]:
        entry = sanitize_translation_entry(data)
        if entry is None:
            return None
        self._index(entry)
        self.initial_entries.append(entry)
        return entry

    def lookup(self, card: Mapping[str, Any]) -> Optional[str]:
        """
        依次按 id、subtitleId、句子查找提示译文，未命中返回 None。
        """
        id_key = identifier_key(card.get("id"))
        if id_key is not None and id_key in self.by_id:
            return self.by_id[id_key]

        subtitle_key = identifier_key(card.get("subtitleId"))
        if subtitle_key is not None and subtitle_key in self.by_subtitle_id:
            return self.by_subtitle_id[subtitle_key]

        sentence = str(card.get("sentence") or "").strip()
        if sentence and sentence in self.by_sentence:
            return self.by_sentence[sentence]
        return None

    def register(self, card: Mapping[str, Any], translation: str) -> Optional[TranslationEntry]:
        """
        记录外部服务新生成的译文，使后续相同 id / subtitleId / 句子的卡片直接命中缓存。
        """
        sentence = str(card.get("sentence") or "").strip()
        entry = sanitize_translation_entry(
            {
                "id": card.get("id"),
                "subtitleId": card.get("subtitleId"),
                "sentence": sentence or None,
                "translation": translation,
            }
        )
        if entry is None:
            return None
        self._index(entry)
        self.added_entries.append(entry)
        return entry


def load_translation_hints(path: Optional[str | Path]) -> TranslationState:
    """
    读取译文提示 / 缓存文件。

    支持两种格式：
      - 数组：[{id?, subtitleId?, sentence?, translation}, ...]
      - 对象：键视为 id，值为译文字符串或包含其它字段的子对象
    文件不存在时打印警告并返回空状态。
    """
    if path is None:
        return TranslationState()

    hint_path = Path(path).expanduser()
    state = TranslationState(source_path=hint_path)
    if not hint_path.is_file():
        print(f"警告: 未找到译文提示文件 {hint_path}，跳过提示译文。")
        return state

    raw = json.loads(hint_path.read_text(encoding="utf-8"))
    if isinstance(raw, list):
        for item in raw:
            state.add_initial(item)
    elif isinstance(raw, dict):
        for key, value in raw.items():
            if isinstance(value, str):
                state.add_initial({"id": key, "translation": value})
            elif isinstance(value, dict):
                state.add_initial({"id": key, **value})
    print(f"[Translations] 已加载 {len(state.initial_entries)} 条提示译文: {hint_path}")
    return state


def _merge_key(entry: TranslationEntry, anon_ids: Iterator[int]) -> str:
    if entry.subtitle_id is not None:
        return f"subtitleId:{entry.subtitle_id}"
    if entry.id is not None:
        return f"id:{entry.id}"
    if entry.sentence:
        return f"sentence:{entry.sentence}"
    return f"anon:{next(anon_ids)}"


def merge_translation_entries(
    existing: Iterable[TranslationEntry],
    additions: Iterable[TranslationEntry],
) -> List[TranslationEntry]:
    """
    合并已有条目与新增条目。

    去重键优先级：subtitleId > id > sentence；三者皆无的条目各自独立保留。
    键相同时后出现的条目覆盖先前条目，位置保持首次出现的位置。
    """
    merged: Dict[str, TranslationEntry] = {}
    anon_ids = itertools.count()
    for entry in list(existing) + list(additions):
        merged[_merge_key(entry, anon_ids)] = entry
    return list(merged.values())


def persist_translations(state: TranslationState, output_path: str | Path) -> Path:
    merged = merge_translation_entries(state.initial_entries, state.added_entries)
    out_path = Path(output_path).expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(
        json.dumps([entry.to_dict() for entry in merged], ensure_ascii=False, indent=2),
        encoding="utf-8",
    )
    print(f"译文缓存已更新: {out_path} (+{len(state.added_entries)} 条新译文)")
    return out_path
