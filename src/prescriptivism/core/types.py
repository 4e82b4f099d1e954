"""Word type alias and notation helpers.

Cards are written with their one-character IPA symbol, so the word
/pat/ is ``"pat"`` and parses to ``(C_P, V_A, C_T)``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeAlias

from prescriptivism.core.cards import STANDARD_CATALOG, CardCatalog, CardId

Word: TypeAlias = tuple[CardId, ...]

DEFAULT_WORD_SIZE = 6


def card_symbol(card: CardId, catalog: CardCatalog = STANDARD_CATALOG) -> str:
    """Symbol of a card, e.g. C_SH → 'ʃ'; power cards use their name."""
    return str(catalog[card])


def parse_card(symbol: str, catalog: CardCatalog = STANDARD_CATALOG) -> CardId:
    """Parse a sound symbol, e.g. 'ʃ' → C_SH."""
    card = catalog.by_symbol(symbol)
    if card is None:
        raise ValueError(f"Invalid sound symbol: {symbol!r}")
    return card


def parse_word(text: str, catalog: CardCatalog = STANDARD_CATALOG) -> Word:
    """Parse a word written as consecutive symbols; spaces are ignored."""
    return tuple(parse_card(ch, catalog) for ch in text if not ch.isspace())


def word_to_str(word: Iterable[CardId], catalog: CardCatalog = STANDARD_CATALOG) -> str:
    return "".join(card_symbol(card, catalog) for card in word)
