from __future__ import annotations

import re
from types import MappingProxyType
from typing import List, Mapping, Optional

from subs2cards.cards.types import TokenBreakdown

from .analyzer import MorphologicalAnalyzer
from .dictionary import Dictionary
from .types import WILDCARD, MorphFeatures

# IPADIC 词性标签 -> 可读英文标签（只读）
POS_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "名詞": "noun",
        "動詞": "verb",
        "形容詞": "adjective",
        "副詞": "adverb",
        "助詞": "particle",
        "助動詞": "auxiliary-verb",
        "記号": "symbol",
        "連体詞": "prenoun-adjectival",
        "感動詞": "interjection",
        "接続詞": "conjunction",
        "接頭詞": "prefix",
        "その他": "other",
        "フィラー": "filler",
        "一般": "general",
        "固有名詞": "proper-noun",
        "サ変接続": "suru-verb",
        "自立": "independent",
        "非自立": "non-independent",
        "形容動詞語幹": "na-adj-stem",
        "数": "number",
        "助数詞": "counter",
        "係助詞": "binding-particle",
        "格助詞": "case-particle",
        "副助詞": "adverbial-particle",
        "並立助詞": "parallel-particle",
        "終助詞": "sentence-ending-particle",
        "連体化": "attributive",
        "接続助詞": "conjunctive-particle",
        "感動詞語幹": "interjection-stem",
        "括弧開": "open-bracket",
        "括弧閉": "close-bracket",
        "句点": "period",
        "読点": "comma",
        "空白": "whitespace",
        "記号一般": "symbol-general",
        "代名詞": "pronoun",
        "副詞可能": "adverbial",
        "連語": "expression",
        "語幹": "stem",
        "テ形": "te-form",
        "タ形": "ta-form",
    }
)

# 复合词性字段使用全角斜杠分隔
POS_SEGMENT_SEPARATOR = "／"

_KATAKANA_RE = re.compile("[\u30a1-\u30f6]")
_KANA_OFFSET = 0x60


def katakana_to_hiragana(text: str) -> str:
    """
    将片假名（ァ-ヶ）逐字平移为对应的平假名；其它字符保持不变。
    """
    return _KATAKANA_RE.sub(lambda m: chr(ord(m.group(0)) - _KANA_OFFSET), text)


def _present(value: Optional[str]) -> Optional[str]:
    if not value or value == WILDCARD:
        return None
    return value


def translate_pos_part(
    part: Optional[str],
    labels: Mapping[str, str] = POS_LABELS,
) -> Optional[str]:
    part = _present(part)
    if part is None:
        return None
    segments = [segment.strip() for segment in part.split(POS_SEGMENT_SEPARATOR)]
    return "/".join(labels.get(segment, segment) for segment in segments)


def build_pos_label(
    features: MorphFeatures,
    labels: Mapping[str, str] = POS_LABELS,
) -> str:
    parts = [
        translate_pos_part(part, labels)
        for part in (
            features.pos,
            features.pos_detail_1,
            features.pos_detail_2,
            features.pos_detail_3,
        )
    ]
    return "-".join(part for part in parts if part)


def normalize_token(
    features: MorphFeatures,
    dictionary: Dictionary,
    labels: Mapping[str, str] = POS_LABELS,
) -> TokenBreakdown:
    lemma = _present(features.basic_form) or features.surface
    entry = dictionary.get(lemma)
    raw_reading = _present(features.reading)
    reading = katakana_to_hiragana(raw_reading) if raw_reading is not None else None
    return TokenBreakdown(
        surface=features.surface,
        lemma=lemma,
        reading=reading,
        pos=build_pos_label(features, labels),
        meanings=list(entry.meanings) if entry is not None and entry.meanings is not None else None,
    )


def build_breakdown(
    sentence: str,
    analyzer: MorphologicalAnalyzer,
    dictionary: Dictionary,
    labels: Mapping[str, str] = POS_LABELS,
) -> List[TokenBreakdown]:
    """
    对句子分词并归一化每个词元。

    过滤发生在归一化之后：表层形去空白后为空的词元（空白/结构性词元）被移除。
    """
    tokens = analyzer.analyze(sentence or "")
    breakdown = [normalize_token(token, dictionary, labels) for token in tokens]
    return [token for token in breakdown if token.surface.strip()]
