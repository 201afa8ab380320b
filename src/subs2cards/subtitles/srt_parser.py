from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional

from .timecode import timecode_to_ms
from .types import SubtitleEntry

_BLOCK_SPLIT_RE = re.compile(r"\n{2,}")
_INTEGER_RE = re.compile(r"^[+-]?\d+$")

TIME_RANGE_SEPARATOR = "-->"


def _parse_declared_id(line: str) -> Optional[int]:
    stripped = line.strip()
    if not _INTEGER_RE.match(stripped):
        return None
    return int(stripped)


def parse_srt(content: str) -> List[SubtitleEntry]:
    """
    将 SRT 文本拆分为有序的 SubtitleEntry 列表。

    规则：
      - 统一换行符并去除 BOM；
      - 以连续空行分块，块内首个非空行若为整数则视为声明序号，
        否则按已产出条目数 + 1 自动编号；
      - 含 "-->" 的行视为时间轴，缺失时起止时间为 None；
      - 其余非空行去空白后以单个空格拼接，文本为空的块整体丢弃。
    """
    normalized = content.replace("\r\n", "\n").replace("\ufeff", "")
    entries: List[SubtitleEntry] = []

    for block in _BLOCK_SPLIT_RE.split(normalized):
        lines = block.split("\n")
        cursor = next((i for i, line in enumerate(lines) if line.strip()), None)
        if cursor is None:
            continue

        declared_id = _parse_declared_id(lines[cursor])
        if declared_id is not None:
            raw_id = declared_id
            cursor += 1
        else:
            raw_id = len(entries) + 1

        start: Optional[str] = None
        end: Optional[str] = None
        if cursor < len(lines) and TIME_RANGE_SEPARATOR in lines[cursor]:
            parts = [part.strip() for part in lines[cursor].split(TIME_RANGE_SEPARATOR)]
            start = parts[0]
            end = parts[1] if len(parts) > 1 else None
            cursor += 1

        text_lines = [line.strip() for line in lines[cursor:]]
        text = " ".join(line for line in text_lines if line)
        if not text:
            continue

        entries.append(
            SubtitleEntry(
                index=len(entries) + 1,
                raw_id=raw_id,
                start=start,
                end=end,
                start_ms=timecode_to_ms(start),
                end_ms=timecode_to_ms(end),
                text=text,
            )
        )

    return entries


def read_srt(path: str | Path) -> List[SubtitleEntry]:
    srt_path = Path(path).expanduser().resolve()
    if not srt_path.is_file():
        raise FileNotFoundError(f"字幕文件不存在: {srt_path}")
    return parse_srt(srt_path.read_text(encoding="utf-8"))
