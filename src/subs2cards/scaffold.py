from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import re
import shutil
from typing import List, Optional

_DIGITS_RE = re.compile(r"[0-9]+")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def format_episode_id(value: Optional[str]) -> str:
    """
    规范化集数：纯数字补零到两位，其它值仅保留字母数字并转小写，缺省为 "01"。
    """
    if not value:
        return "01"
    if _DIGITS_RE.fullmatch(value):
        return value.zfill(2)
    return _NON_ALNUM_RE.sub("", value).lower()


@dataclass
class EpisodeLayout:
    episode_dir: Path
    raw_dir: Path
    cards_dir: Path
    copied: List[Path] = field(default_factory=list)


def _copy_into_place(source: str | Path, destination: Path) -> Path:
    source_path = Path(source).expanduser().resolve()
    if not source_path.is_file():
        raise FileNotFoundError(f"Source file not found: {source}")
    shutil.copyfile(source_path, destination)
    return destination


def scaffold_episode(
    show_slug: str,
    episode: Optional[str],
    ja_source: Optional[str | Path] = None,
    en_source: Optional[str | Path] = None,
    root: str | Path = "subtitles",
) -> EpisodeLayout:
    """
    创建 <root>/<Show>/episode<NN>/{raw,cards} 目录结构，并可选复制日/英 SRT 到 raw/。
    """
    episode_id = format_episode_id(episode)
    episode_dir = Path(root).expanduser().resolve() / show_slug / f"episode{episode_id}"
    raw_dir = episode_dir / "raw"
    cards_dir = episode_dir / "cards"
    raw_dir.mkdir(parents=True, exist_ok=True)
    cards_dir.mkdir(parents=True, exist_ok=True)

    layout = EpisodeLayout(episode_dir=episode_dir, raw_dir=raw_dir, cards_dir=cards_dir)
    if ja_source:
        layout.copied.append(
            _copy_into_place(ja_source, raw_dir / f"episode{episode_id}.ja.srt")
        )
    if en_source:
        layout.copied.append(
            _copy_into_place(en_source, raw_dir / f"episode{episode_id}.en.srt")
        )
    return layout
