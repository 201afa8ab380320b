from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass
class TokenBreakdown:
    """
    单个词元的归一化结果：表层形、原形、平假名读音、词性路径与释义。
    """

    surface: str
    lemma: str
    reading: Optional[str]
    pos: str
    meanings: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "surface": self.surface,
            "lemma": self.lemma,
            "reading": self.reading,
            "pos": self.pos,
            "meanings": list(self.meanings) if self.meanings is not None else None,
        }


@dataclass
class Card:
    """
    由一条字幕生成的闪卡记录。

    id 在构建时按顺序分配且之后不再改变；subtitle_id 保留 SRT 中声明的序号，
    允许重复或不连续。romaji / furigana 为预留字段。
    """

    id: int
    subtitle_id: int
    sentence: str
    translation: str = ""
    romaji: str = ""
    furigana: str = ""
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    start_ms: Optional[int] = None
    end_ms: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        # 字段顺序即 JSON 输出顺序
        return {
            "id": self.id,
            "subtitleId": self.subtitle_id,
            "sentence": self.sentence,
            "translation": self.translation,
            "romaji": self.romaji,
            "furigana": self.furigana,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "startMs": self.start_ms,
            "endMs": self.end_ms,
        }
