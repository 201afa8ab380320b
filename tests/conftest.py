from __future__ import annotations

from typing import Dict, List, Optional

import pytest

from subs2cards.lexicon import DictionaryEntry, MorphFeatures, MorphologicalAnalyzer
from subs2cards.translate import TranslationEngine, TranslationError


def noun(surface: str, basic_form: str = "*", reading: str = "*") -> MorphFeatures:
    return MorphFeatures(
        surface=surface,
        basic_form=basic_form,
        reading=reading,
        pos="名詞",
        pos_detail_1="一般",
        pos_detail_2="*",
        pos_detail_3="*",
    )


class FakeAnalyzer(MorphologicalAnalyzer):
    """按句子返回预设的词元特征；未预设的句子按空格切分。"""

    def __init__(self, sentences: Optional[Dict[str, List[MorphFeatures]]] = None) -> None:
        self.sentences = sentences or {}
        self.calls: List[str] = []

    def analyze(self, sentence: str) -> List[MorphFeatures]:
        self.calls.append(sentence)
        if sentence in self.sentences:
            return list(self.sentences[sentence])
        return [noun(word) for word in sentence.split(" ") if word]


class FakeTranslator(TranslationEngine):
    def __init__(self, prefix: str = "EN:") -> None:
        self.prefix = prefix
        self.calls: List[str] = []

    def translate_text(self, text: str, source_lang: str, target_lang: str) -> str:
        self.calls.append(text)
        return f"{self.prefix}{text}"


class FailingTranslator(TranslationEngine):
    def __init__(self) -> None:
        self.calls: List[str] = []

    def translate_text(self, text: str, source_lang: str, target_lang: str) -> str:
        self.calls.append(text)
        raise TranslationError("service unavailable")


@pytest.fixture
def fake_analyzer() -> FakeAnalyzer:
    return FakeAnalyzer()


@pytest.fixture
def fake_translator() -> FakeTranslator:
    return FakeTranslator()


@pytest.fixture
def failing_translator() -> FailingTranslator:
    return FailingTranslator()


@pytest.fixture
def small_dictionary() -> Dict[str, DictionaryEntry]:
    return {
        "猫": DictionaryEntry(lemma="猫", meanings=["cat"]),
        "犬": DictionaryEntry(lemma="犬", meanings=["dog", "hound"]),
        "行く": DictionaryEntry(lemma="行く", meanings=["to go"]),
    }
