from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional

from .config import EnrichConfig, ParseConfig
from .cards import Card, build_cards, write_json, write_tsv
from .lexicon import (
    Dictionary,
    FugashiAnalyzer,
    MorphologicalAnalyzer,
    build_breakdown,
    load_dictionary,
)
from .subtitles import read_srt
from .translate import (
    TranslationEngine,
    TranslationResolver,
    TranslationState,
    get_translation_engine,
    load_translation_hints,
    persist_translations,
)


class ParsePipeline:
    """
    SRT -> 卡片 JSON / TSV。
    """

    def __init__(self, config: ParseConfig) -> None:
        self.config = config

    def run(self) -> List[Card]:
        subtitles = read_srt(self.config.input_path)
        if not subtitles:
            raise ValueError(f"No subtitle lines found in {self.config.input_path}.")

        cards = build_cards(subtitles)
        print(f"已解析 {len(subtitles)} 个字幕块，生成 {len(cards)} 张卡片")

        if self.config.write_json and self.config.json_path is not None:
            out_path = write_json(cards, self.config.json_path)
            print(f"   JSON: {out_path}")
        if self.config.write_tsv and self.config.tsv_path is not None:
            out_path = write_tsv(cards, self.config.tsv_path)
            print(f"   TSV: {out_path}")
        return cards


class EnrichPipeline:
    """
    卡片富化 Pipeline：逐张卡片分词、查词典并确定译文，最后统一写出结果。

    analyzer / translator 可由调用方注入；未注入时分别使用 FugashiAnalyzer
    与配置指定的翻译引擎（仅在启用自动翻译时创建）。
    """

    def __init__(
        self,
        config: EnrichConfig,
        analyzer: Optional[MorphologicalAnalyzer] = None,
        translator: Optional[TranslationEngine] = None,
    ) -> None:
        self.config = config
        self.analyzer = analyzer
        self.translator = translator

    def _build_translator(self) -> Optional[TranslationEngine]:
        if not self.config.auto_translate:
            return None
        if self.translator is not None:
            return self.translator
        engine = get_translation_engine(
            self.config.translation_engine,
            formality=self.config.deepl_formality,
            glossary_id=self.config.deepl_glossary_id,
        )
        print(f"[Translate] 已启用自动翻译，引擎: {self.config.translation_engine}")
        return engine

    def _load_cards(self) -> List[Dict[str, Any]]:
        input_path = self.config.input_path
        if not input_path.is_file():
            raise FileNotFoundError(f"卡片文件不存在: {input_path}")
        payload = json.loads(input_path.read_text(encoding="utf-8"))
        if not isinstance(payload, list):
            raise ValueError(f"卡片文件应为 JSON 数组: {input_path}")
        return [card for card in payload if isinstance(card, dict)]

    def enrich_card(
        self,
        card: Mapping[str, Any],
        analyzer: MorphologicalAnalyzer,
        dictionary: Dictionary,
        resolver: TranslationResolver,
    ) -> Dict[str, Any]:
        breakdown = build_breakdown(str(card.get("sentence") or ""), analyzer, dictionary)
        translation = resolver.resolve(card, breakdown)
        enriched = dict(card)
        enriched["translation"] = translation
        enriched["tokens"] = [token.to_dict() for token in breakdown]
        return enriched

    def enrich_cards(
        self,
        cards: List[Dict[str, Any]],
        analyzer: MorphologicalAnalyzer,
        dictionary: Dictionary,
        state: TranslationState,
        translator: Optional[TranslationEngine],
    ) -> List[Dict[str, Any]]:
        resolver = TranslationResolver(
            state,
            translator=translator,
            replace_existing=self.config.auto_translate_replace,
            source_lang=self.config.source_lang,
            target_lang=self.config.target_lang,
        )
        # 必须按顺序逐张处理：后续卡片依赖前面卡片写入的译文缓存
        return [self.enrich_card(card, analyzer, dictionary, resolver) for card in cards]

    def run(self) -> List[Dict[str, Any]]:
        cards = self._load_cards()
        analyzer = self.analyzer or FugashiAnalyzer()
        dictionary = load_dictionary(self.config.dict_path)
        state = load_translation_hints(self.config.translation_path)
        translator = self._build_translator()

        enriched = self.enrich_cards(cards, analyzer, dictionary, state, translator)

        out_path = write_json(enriched, self.config.output_json_path)
        print(f"富化后的 JSON 已写入: {out_path}")
        if self.config.write_tsv:
            tsv_path = write_tsv(enriched, self.config.tsv_path)
            print(f"TSV 已写入: {tsv_path}")

        if self.config.translation_save_path is not None and state.added_entries:
            persist_translations(state, self.config.translation_save_path)
        return enriched

