from __future__ import annotations

from .translator import TranslationEngine, TranslationError
from .google_translator import GoogleTranslator
from .deepl_translator import DeepLTranslator
from .factory import TRANSLATION_ENGINES, get_translation_engine
from .hints import (
    TranslationEntry,
    TranslationState,
    load_translation_hints,
    merge_translation_entries,
    persist_translations,
)
from .resolver import TranslationResolver, build_literal_translation

__all__ = [
    "TranslationEngine",
    "TranslationError",
    "GoogleTranslator",
    "DeepLTranslator",
    "TRANSLATION_ENGINES",
    "get_translation_engine",
    "TranslationEntry",
    "TranslationState",
    "load_translation_hints",
    "merge_translation_entries",
    "persist_translations",
    "TranslationResolver",
    "build_literal_translation",
]
