from __future__ import annotations

import re
from typing import Optional

_TIMECODE_RE = re.compile(r"(\d{2}):(\d{2}):(\d{2}),(\d{3})")


def timecode_to_ms(timecode: Optional[str]) -> Optional[int]:
    """
    将 SRT 时间戳（HH:MM:SS,mmm）转换为整数毫秒。

    输入为空或格式不匹配时返回 None，不抛出异常。
    """
    if not timecode:
        return None
    match = _TIMECODE_RE.search(timecode)
    if match is None:
        return None
    hh, mm, ss, ms = (int(part) for part in match.groups())
    return hh * 3600 * 1000 + mm * 60 * 1000 + ss * 1000 + ms


def ms_to_timecode(total_ms: int) -> str:
    if total_ms < 0:
        total_ms = 0
    ms = total_ms % 1000
    total_seconds = total_ms // 1000
    s = total_seconds % 60
    total_minutes = total_seconds // 60
    m = total_minutes % 60
    h = total_minutes // 60
    return f"{h:02d}:{m:02d}:{s:02d},{ms:03d}"
