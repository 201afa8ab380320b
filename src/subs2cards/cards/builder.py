from __future__ import annotations

from typing import Iterable, List

from subs2cards.subtitles import SubtitleEntry

from .types import Card


def build_cards(entries: Iterable[SubtitleEntry]) -> List[Card]:
    cards: List[Card] = []
    for idx, entry in enumerate(entries, start=1):
        cards.append(
            Card(
                id=idx,
                subtitle_id=entry.raw_id,
                sentence=entry.text,
                start_time=entry.start,
                end_time=entry.end,
                start_ms=entry.start_ms,
                end_ms=entry.end_ms,
            )
        )
    return cards
