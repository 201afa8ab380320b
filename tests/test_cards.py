import json

from subs2cards.cards import build_cards, cards_to_json, cards_to_tsv, sanitize_field, write_json, write_tsv
from subs2cards.subtitles import parse_srt


def test_build_cards_from_single_block():
    cards = build_cards(parse_srt("1\n00:00:01,000 --> 00:00:02,500\nこんにちは"))
    assert len(cards) == 1
    record = cards[0].to_dict()
    assert record == {
        "id": 1,
        "subtitleId": 1,
        "sentence": "こんにちは",
        "translation": "",
        "romaji": "",
        "furigana": "",
        "startTime": "00:00:01,000",
        "endTime": "00:00:02,500",
        "startMs": 1000,
        "endMs": 2500,
    }


def test_duplicate_declared_ids_keep_subtitle_id_but_get_sequential_ids():
    content = "1\n00:00:01,000 --> 00:00:02,000\nA\n\n1\n00:00:03,000 --> 00:00:04,000\nB"
    cards = build_cards(parse_srt(content))
    assert [(c.id, c.subtitle_id) for c in cards] == [(1, 1), (2, 1)]


def test_ids_contiguous_despite_gaps():
    content = "10\nA\n\n4\nB\n\nC\n\n99\nD"
    cards = build_cards(parse_srt(content))
    assert [c.id for c in cards] == [1, 2, 3, 4]
    assert [c.subtitle_id for c in cards] == [10, 4, 3, 99]


def test_sanitize_field():
    assert sanitize_field(" a\tb\r\nc\nd ") == "a b c d"
    assert sanitize_field(None) == ""
    once = sanitize_field("x\t\ty\n\nz")
    assert sanitize_field(once) == once


def test_cards_to_tsv_has_no_header_and_no_trailing_newline():
    records = [
        {"sentence": "猫\tです", "translation": "It's a\ncat"},
        {"sentence": "犬", "translation": None},
    ]
    assert cards_to_tsv(records) == "猫 です\tIt's a cat\n犬\t"


def test_cards_to_json_keeps_field_order_and_unicode():
    cards = build_cards(parse_srt("1\nこんにちは"))
    text = cards_to_json(cards)
    assert "こんにちは" in text
    assert list(json.loads(text)[0].keys())[:3] == ["id", "subtitleId", "sentence"]
    assert text.startswith("[\n  {")


def test_writers_create_parent_dirs(tmp_path):
    cards = build_cards(parse_srt("1\nA"))
    json_path = write_json(cards, tmp_path / "out" / "a.json")
    tsv_path = write_tsv(cards, tmp_path / "out" / "a.tsv")
    assert json.loads(json_path.read_text(encoding="utf-8"))[0]["sentence"] == "A"
    assert tsv_path.read_text(encoding="utf-8") == "A\t"
