from __future__ import annotations

from .types import SubtitleEntry
from .timecode import ms_to_timecode, timecode_to_ms
from .srt_parser import parse_srt, read_srt

__all__ = ["SubtitleEntry", "ms_to_timecode", "timecode_to_ms", "parse_srt", "read_srt"]
