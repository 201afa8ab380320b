from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class SubtitleEntry:
    """
    SRT 中的单个字幕块。

    - index 为解析后条目中的 1-based 位置；
    - raw_id 为源文件中声明的序号（可能重复、跳号或缺失）。
    """

    index: int
    raw_id: int
    start: Optional[str]
    end: Optional[str]
    start_ms: Optional[int]
    end_ms: Optional[int]
    text: str
