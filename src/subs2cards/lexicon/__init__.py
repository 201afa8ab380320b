from __future__ import annotations

from .types import WILDCARD, DictionaryEntry, MorphFeatures
from .analyzer import FugashiAnalyzer, MorphologicalAnalyzer
from .dictionary import Dictionary, load_dictionary
from .normalizer import (
    POS_LABELS,
    build_breakdown,
    build_pos_label,
    katakana_to_hiragana,
    normalize_token,
)

__all__ = [
    "WILDCARD",
    "DictionaryEntry",
    "MorphFeatures",
    "FugashiAnalyzer",
    "MorphologicalAnalyzer",
    "Dictionary",
    "load_dictionary",
    "POS_LABELS",
    "build_breakdown",
    "build_pos_label",
    "katakana_to_hiragana",
    "normalize_token",
]
