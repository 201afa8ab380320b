from subs2cards.cards import TokenBreakdown
from subs2cards.translate import TranslationResolver, TranslationState, build_literal_translation

from .conftest import FailingTranslator, FakeTranslator


def tok(surface, meanings=None):
    return TokenBreakdown(surface=surface, lemma=surface, reading=None, pos="noun", meanings=meanings)


def test_literal_translation():
    tokens = [tok("猫", ["cat", "feline"]), tok("が"), tok("いる", ["to exist"])]
    assert build_literal_translation(tokens) == "cat が to exist"
    assert build_literal_translation([]) == ""
    assert build_literal_translation([tok("x", [""])]) == "x"


def test_hint_by_id_wins_regardless_of_dictionary():
    state = TranslationState()
    state.add_initial({"id": "5", "translation": "Hello there"})
    resolver = TranslationResolver(state)
    card = {"id": 5, "subtitleId": 1, "sentence": "猫", "translation": "ignored"}
    assert resolver.resolve(card, [tok("猫", ["cat"])]) == "Hello there"
    assert resolver.last_source == "hint"


def test_subtitle_hint_beats_sentence_hint():
    state = TranslationState()
    state.add_initial({"sentence": "猫", "translation": "by sentence"})
    state.add_initial({"subtitleId": 3, "translation": "by subtitle"})
    resolver = TranslationResolver(state)
    assert resolver.resolve({"id": 1, "subtitleId": 3, "sentence": "猫"}, []) == "by subtitle"


def test_existing_card_translation_used_without_translator():
    resolver = TranslationResolver(TranslationState())
    card = {"id": 1, "sentence": "猫", "translation": "  A cat  "}
    assert resolver.resolve(card, [tok("猫", ["cat"])]) == "A cat"
    assert resolver.last_source == "card"


def test_literal_fallback_when_nothing_else():
    resolver = TranslationResolver(TranslationState())
    assert resolver.resolve({"id": 1, "sentence": "猫"}, [tok("猫")]) == "猫"
    assert resolver.last_source == "literal"


def test_auto_translate_replaces_card_and_literal_by_default():
    translator = FakeTranslator()
    state = TranslationState()
    resolver = TranslationResolver(state, translator=translator)

    card = {"id": 1, "subtitleId": 1, "sentence": "猫", "translation": "A cat"}
    assert resolver.resolve(card, [tok("猫", ["cat"])]) == "EN:猫"
    assert resolver.last_source == "auto"
    assert translator.calls == ["猫"]
    assert [e.translation for e in state.added_entries] == ["EN:猫"]


def test_auto_translate_never_overrides_hint():
    translator = FakeTranslator()
    state = TranslationState()
    state.add_initial({"sentence": "猫", "translation": "Cat hint"})
    resolver = TranslationResolver(state, translator=translator)
    assert resolver.resolve({"id": 1, "sentence": "猫"}, [tok("猫")]) == "Cat hint"
    assert translator.calls == []


def test_keep_mode_preserves_existing_and_literal():
    translator = FakeTranslator()
    resolver = TranslationResolver(TranslationState(), translator=translator, replace_existing=False)

    assert resolver.resolve({"id": 1, "sentence": "猫", "translation": "Mine"}, [tok("猫")]) == "Mine"
    assert resolver.resolve({"id": 2, "sentence": "犬"}, [tok("犬", ["dog"])]) == "dog"
    assert translator.calls == []


def test_keep_mode_translates_when_nothing_found():
    translator = FakeTranslator()
    resolver = TranslationResolver(TranslationState(), translator=translator, replace_existing=False)
    # 空的词元列表得到空的直译
    assert resolver.resolve({"id": 1, "sentence": "猫"}, []) == "EN:猫"


def test_generated_translation_is_reused_for_matching_cards():
    translator = FakeTranslator()
    state = TranslationState()
    resolver = TranslationResolver(state, translator=translator)

    first = resolver.resolve({"id": 1, "subtitleId": 7, "sentence": "猫"}, [tok("猫")])
    second = resolver.resolve({"id": 2, "subtitleId": 8, "sentence": " 猫 "}, [tok("猫")])
    assert first == second == "EN:猫"
    assert translator.calls == ["猫"]
    assert resolver.last_source == "hint"
    assert len(state.added_entries) == 1


def test_failure_keeps_literal_and_warns(capsys):
    translator = FailingTranslator()
    state = TranslationState()
    resolver = TranslationResolver(state, translator=translator)
    card = {"id": 4, "subtitleId": 12, "sentence": "猫"}
    assert resolver.resolve(card, [tok("猫")]) == "猫"
    assert resolver.last_source == "literal"
    assert state.added_entries == []
    out = capsys.readouterr().out
    assert "警告" in out and "12" in out


def test_empty_sentence_never_sent_to_service():
    translator = FakeTranslator()
    resolver = TranslationResolver(TranslationState(), translator=translator)
    assert resolver.resolve({"id": 1, "sentence": "  "}, []) == ""
    assert translator.calls == []


def test_without_translator_empty_literal_stays_empty():
    state = TranslationState()
    resolver = TranslationResolver(state)
    assert resolver.resolve({"id": 1, "sentence": "猫"}, []) == ""
    assert resolver.last_source == "literal"
    assert state.added_entries == []
