from __future__ import annotations

from .deepl_translator import DeepLTranslator
from .google_translator import GoogleTranslator
from .translator import TranslationEngine

TRANSLATION_ENGINES = ("deepl", "google")


def get_translation_engine(
    name: str,
    formality: str | None = "default",
    glossary_id: str | None = None,
) -> TranslationEngine:
    """
    根据名称返回对应的翻译引擎实例。

    支持：
      - "deepl"  : DeepLTranslator（需要 DEEPL_API_KEY）
      - "google" : GoogleTranslator
    """
    key = name.lower()
    if key == "deepl":
        return DeepLTranslator(formality=formality, glossary_id=glossary_id)
    if key == "google":
        return GoogleTranslator()
    raise ValueError(f"Unknown translation engine: {name}")
