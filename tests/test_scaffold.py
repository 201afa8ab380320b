import pytest

from subs2cards.scaffold import format_episode_id, scaffold_episode


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1", "01"),
        ("12", "12"),
        ("105", "105"),
        ("S01-E02", "s01e02"),
        (None, "01"),
        ("", "01"),
    ],
)
def test_format_episode_id(value, expected):
    assert format_episode_id(value) == expected


def test_scaffold_creates_layout(tmp_path):
    layout = scaffold_episode("ChainsawMan", "3", root=tmp_path / "subtitles")
    assert layout.episode_dir == (tmp_path / "subtitles" / "ChainsawMan" / "episode03").resolve()
    assert layout.raw_dir.is_dir()
    assert layout.cards_dir.is_dir()
    assert layout.copied == []


def test_scaffold_copies_sources_and_is_rerunnable(tmp_path):
    ja = tmp_path / "input.ja.srt"
    en = tmp_path / "input.en.srt"
    ja.write_text("1\nこんにちは", encoding="utf-8")
    en.write_text("1\nHello", encoding="utf-8")

    scaffold_episode("Show", "1", root=tmp_path / "subs")
    layout = scaffold_episode("Show", "1", ja_source=ja, en_source=en, root=tmp_path / "subs")
    assert [p.name for p in layout.copied] == ["episode01.ja.srt", "episode01.en.srt"]
    assert (layout.raw_dir / "episode01.ja.srt").read_text(encoding="utf-8") == "1\nこんにちは"


def test_scaffold_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError, match="Source file not found"):
        scaffold_episode("Show", "1", ja_source=tmp_path / "missing.srt", root=tmp_path)
