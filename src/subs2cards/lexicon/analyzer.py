from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence

import fugashi
import ipadic

from .types import MorphFeatures

# IPADIC 特征列：品詞, 品詞細分類1-3, 活用型, 活用形, 原形, 読み, 発音
_BASIC_FORM_INDEX = 6
_READING_INDEX = 7


class MorphologicalAnalyzer(ABC):
    """
    形态分析能力的抽象接口。

    给定一个句子，按顺序返回每个词元的 MorphFeatures；
    具体的分词与词典算法由实现方负责。
    """

    @abstractmethod
    def analyze(self, sentence: str) -> List[MorphFeatures]:
        """
        对句子进行分词，返回有序的词元特征列表。
        """


def _feature_at(feature: Sequence[str], index: int) -> str | None:
    if index < len(feature):
        return feature[index]
    return None


class FugashiAnalyzer(MorphologicalAnalyzer):
    """
    基于 fugashi (MeCab) + ipadic 词典的形态分析器。

    Tagger 在首次调用时才创建，避免导入阶段加载词典。
    未登录词只有 7 列特征，此时读音为 None。
    """

    def __init__(self, mecab_args: str | None = None) -> None:
        self.mecab_args = mecab_args if mecab_args is not None else ipadic.MECAB_ARGS
        self._tagger: fugashi.GenericTagger | None = None

    def _ensure_tagger(self) -> fugashi.GenericTagger:
        if self._tagger is None:
            self._tagger = fugashi.GenericTagger(self.mecab_args)
        return self._tagger

    def analyze(self, sentence: str) -> List[MorphFeatures]:
        if not sentence:
            return []
        tagger = self._ensure_tagger()
        tokens: List[MorphFeatures] = []
        for word in tagger(sentence):
            feature = tuple(word.feature)
            tokens.append(
                MorphFeatures(
                    surface=word.surface,
                    basic_form=_feature_at(feature, _BASIC_FORM_INDEX),
                    reading=_feature_at(feature, _READING_INDEX),
                    pos=_feature_at(feature, 0),
                    pos_detail_1=_feature_at(feature, 1),
                    pos_detail_2=_feature_at(feature, 2),
                    pos_detail_3=_feature_at(feature, 3),
                )
            )
        return tokens
