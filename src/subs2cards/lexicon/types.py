from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

WILDCARD = "*"


@dataclass
class MorphFeatures:
    """
    形态分析器输出的单个词元特征（IPADIC 风格）。

    basic_form / reading / pos_detail_* 可能为 "*"，表示分析器未给出该值。
    """

    surface: str
    basic_form: Optional[str] = None
    reading: Optional[str] = None
    pos: Optional[str] = None
    pos_detail_1: Optional[str] = None
    pos_detail_2: Optional[str] = None
    pos_detail_3: Optional[str] = None


@dataclass
class DictionaryEntry:
    lemma: str
    meanings: Optional[List[str]] = None
    reading: Optional[str] = None
    pos: Optional[str] = None
