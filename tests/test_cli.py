import json

import pytest

from subs2cards import cli

from .conftest import FakeAnalyzer


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("SUBS2CARDS_DICT_PATH", "SUBS2CARDS_TRANSLATION_ENGINE", "DEEPL_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("subs2cards.pipeline.FugashiAnalyzer", FakeAnalyzer)


def test_parse_and_enrich_roundtrip(tmp_path, capsys):
    srt = tmp_path / "ep.ja.srt"
    srt.write_text("1\n00:00:01,000 --> 00:00:02,000\n猫\n", encoding="utf-8")

    assert cli.main(["parse", str(srt), "--no-tsv"]) == 0
    cards_path = tmp_path / "ep.cards.json"
    assert cards_path.is_file()
    assert not (tmp_path / "ep.cards.tsv").exists()

    hints = tmp_path / "hints.json"
    hints.write_text(json.dumps({"1": "Cat!"}), encoding="utf-8")
    assert cli.main(["enrich", str(cards_path), "--translations", str(hints)]) == 0
    enriched = json.loads(cards_path.read_text(encoding="utf-8"))
    assert enriched[0]["translation"] == "Cat!"
    assert enriched[0]["tokens"][0]["meanings"] == ["cat"]
    assert (tmp_path / "ep.cards.tsv").read_text(encoding="utf-8") == "猫\tCat!"
    assert "卡片数: 1" in capsys.readouterr().out


def test_parse_missing_file_returns_error(tmp_path, capsys):
    assert cli.main(["parse", str(tmp_path / "none.srt")]) == 1
    assert "处理失败" in capsys.readouterr().out


def test_parse_requires_an_output(tmp_path, capsys):
    srt = tmp_path / "a.srt"
    srt.write_text("1\nA", encoding="utf-8")
    assert cli.main(["parse", str(srt), "--no-json", "--no-tsv"]) == 1
    assert "At least one output" in capsys.readouterr().out


def test_enrich_auto_translate_without_key_fails(tmp_path, capsys):
    cards = tmp_path / "c.json"
    cards.write_text(json.dumps([{"id": 1, "subtitleId": 1, "sentence": "猫"}]), encoding="utf-8")
    assert cli.main(["enrich", str(cards), "--deepl-translate"]) == 1
    assert "DEEPL_API_KEY" in capsys.readouterr().out


def test_scaffold_command(tmp_path):
    assert cli.main(["scaffold", "Show", "2", "--root", str(tmp_path / "subs")]) == 0
    assert (tmp_path / "subs" / "Show" / "episode02" / "raw").is_dir()


def test_unknown_engine_rejected_by_parser():
    with pytest.raises(SystemExit):
        cli.main(["enrich", "c.json", "--translation-engine", "bing"])


def test_keep_flag_maps_to_config(monkeypatch, tmp_path):
    captured = {}

    class RecordingPipeline:
        def __init__(self, config):
            captured["config"] = config

        def run(self):
            return []

    monkeypatch.setattr(cli, "EnrichPipeline", RecordingPipeline)
    assert (
        cli.main(
            [
                "enrich",
                "c.json",
                "--auto-translate",
                "--auto-translate-keep",
                "--translation-engine",
                "google",
                "--deepl-formality",
                "prefer_less",
            ]
        )
        == 0
    )
    config = captured["config"]
    assert config.auto_translate is True
    assert config.auto_translate_replace is False
    assert config.translation_engine == "google"
    assert config.deepl_formality == "prefer_less"
