from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from subs2cards.cards.types import TokenBreakdown

from .hints import TranslationState
from .translator import TranslationEngine, TranslationError

SOURCE_HINT = "hint"
SOURCE_CARD = "card"
SOURCE_LITERAL = "literal"
SOURCE_AUTO = "auto"


def build_literal_translation(tokens: Iterable[TokenBreakdown]) -> str:
    """
    逐词直译：有释义时取第一条释义，否则保留表层形，以单个空格拼接。
    """
    parts = [
        token.meanings[0] if token.meanings and token.meanings[0] else token.surface
        for token in tokens
    ]
    return " ".join(parts)


def _card_label(card: Mapping[str, Any]) -> Any:
    subtitle_id = card.get("subtitleId")
    return subtitle_id if subtitle_id is not None else card.get("id")


class TranslationResolver:
    """
    按优先级为每张卡片确定译文：

      1. 提示译文（id > subtitleId > 句子）；
      2. 卡片自带译文（未启用自动翻译，或启用但要求保留已有译文时）；
      3. 逐词直译；
      4. 自动翻译：在前面均无结果，或 replace_existing=True 且结果不是来自提示时调用。

    自动翻译成功后写入 TranslationState，后续相同键的卡片直接命中提示；
    失败时打印警告并保留之前的结果。卡片须按顺序逐张处理。
    """

    def __init__(
        self,
        state: TranslationState,
        translator: Optional[TranslationEngine] = None,
        replace_existing: bool = True,
        source_lang: str = "ja",
        target_lang: str = "en",
    ) -> None:
        self.state = state
        self.translator = translator
        self.replace_existing = replace_existing
        self.source_lang = source_lang
        self.target_lang = target_lang
        self.last_source: Optional[str] = None

    def _auto_translate(
        self,
        translator: TranslationEngine,
        card: Mapping[str, Any],
    ) -> Optional[str]:
        sentence = str(card.get("sentence") or "").strip()
        if not sentence:
            return None
        try:
            generated = translator.translate_text(
                sentence,
                source_lang=self.source_lang,
                target_lang=self.target_lang,
            )
        except TranslationError as exc:
            print(f"警告: 自动翻译失败（subtitle {_card_label(card)}）: {exc}")
            return None
        return generated.strip() or None

    def resolve(self, card: Mapping[str, Any], breakdown: Iterable[TokenBreakdown]) -> str:
        translator = self.translator
        card_translation = str(card.get("translation") or "").strip()

        source: Optional[str] = None
        translation = self.state.lookup(card)
        if translation:
            source = SOURCE_HINT

        if not translation and card_translation and (
            translator is None or not self.replace_existing
        ):
            translation = card_translation
            source = SOURCE_CARD

        if not translation:
            translation = build_literal_translation(breakdown)
            source = SOURCE_LITERAL

        should_auto_translate = not translation or (
            self.replace_existing and source != SOURCE_HINT
        )
        if translator is not None and should_auto_translate:
            generated = self._auto_translate(translator, card)
            if generated:
                translation = generated
                source = SOURCE_AUTO
                self.state.register(card, generated)

        self.last_source = source
        return translation or ""
