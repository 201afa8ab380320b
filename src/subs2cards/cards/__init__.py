from __future__ import annotations

from .types import Card, TokenBreakdown
from .builder import build_cards
from .export import cards_to_json, cards_to_tsv, sanitize_field, write_json, write_tsv

__all__ = [
    "Card",
    "TokenBreakdown",
    "build_cards",
    "cards_to_json",
    "cards_to_tsv",
    "sanitize_field",
    "write_json",
    "write_tsv",
]
