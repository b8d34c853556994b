from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List, Tuple

from .errors import DuplicateCard, InvalidDeckLength, InvalidMnemonic, MultipleCursors
from .models import DECK_SIZE


class Suit(IntEnum):
    CLUBS = 1
    DIAMONDS = 2
    HEARTS = 3
    SPADES = 4


RANKS = range(1, 14)
RANK_SYMBOLS: Dict[int, str] = {1: "A", 11: "J", 12: "Q", 13: "K"}
SUIT_SYMBOLS: Dict[Suit, str] = {
    Suit.CLUBS: "C",
    Suit.DIAMONDS: "D",
    Suit.HEARTS: "H",
    Suit.SPADES: "S",
}

_RANK_BY_SYMBOL = {symbol: rank for rank, symbol in RANK_SYMBOLS.items()}
_SUIT_BY_SYMBOL = {symbol: suit for suit, symbol in SUIT_SYMBOLS.items()}
_MNEMONIC_RE = re.compile(r"([AJQK]|[0-9]+)([CDHS])", re.IGNORECASE | re.ASCII)

SEPARATOR = "-"


@dataclass(frozen=True)
class Card:
    suit: Suit
    rank: int

    def __post_init__(self) -> None:
        try:
            suit = Suit(self.suit)
        except ValueError:
            raise ValueError(f"Invalid suit: {self.suit}") from None
        if isinstance(self.rank, bool) or not isinstance(self.rank, int) or self.rank not in RANKS:
            raise ValueError(f"Invalid rank: {self.rank}")
        # Normalise plain ints so equality and JSON output stay consistent.
        object.__setattr__(self, "suit", suit)

    @property
    def value(self) -> int:
        """Unique 0..51 index: clubs first, ace low within each suit."""
        return 13 * (self.suit - 1) + (self.rank - 1)

    @property
    def mnemonic(self) -> str:
        return encode_mnemonic(self.suit, self.rank)

    def to_json(self) -> Dict[str, object]:
        return {
            "suit": int(self.suit),
            "rank": self.rank,
            "value": self.value,
            "mnemonic": self.mnemonic,
        }

    def __str__(self) -> str:
        return self.mnemonic


def encode_mnemonic(suit: Suit | int, rank: int) -> str:
    """Render (suit, rank) as its canonical token, e.g. ``10S`` or ``QD``."""
    rank_symbol = RANK_SYMBOLS.get(rank, str(rank))
    return f"{rank_symbol}{SUIT_SYMBOLS[Suit(suit)]}"


def parse_mnemonic(text: str) -> Card:
    """Decode a token such as ``AS``, ``10h`` or ``kc`` into a Card.

    Matching is case-insensitive. Numerals are accepted across the whole rank
    range, so ``1C`` is the ace of clubs; the returned card always carries the
    canonical mnemonic. Raises InvalidMnemonic with the raw token otherwise.
    """
    if not isinstance(text, str):
        raise InvalidMnemonic(str(text))
    match = _MNEMONIC_RE.fullmatch(text)
    if not match:
        raise InvalidMnemonic(text)

    rank_part = match.group(1).upper()
    suit_part = match.group(2).upper()

    if rank_part in _RANK_BY_SYMBOL:
        rank = _RANK_BY_SYMBOL[rank_part]
    else:
        rank = int(rank_part)
        if rank not in RANKS:
            raise InvalidMnemonic(text)

    return Card(_SUIT_BY_SYMBOL[suit_part], rank)


def build_standard_deck() -> List[Card]:
    """All 52 cards in canonical order: suits CLUBS..SPADES, ranks ace..king."""
    return [Card(suit, rank) for suit in Suit for rank in RANKS]


def cards_to_mnemonics(cards: Iterable[Card]) -> List[str]:
    return [card.mnemonic for card in cards]


def parse_mnemonics(tokens: Iterable[str]) -> List[Card]:
    return [parse_mnemonic(token) for token in tokens]


def parse_deck_string(text: str, allow_duplicates: bool = False) -> Tuple[List[Card], int]:
    """Split a serialized deck into its cards and cursor position.

    Exactly one token may be wrapped in brackets to mark the cursor; without
    one the cursor is 0.
    """
    tokens = text.split(SEPARATOR)
    if len(tokens) != DECK_SIZE:
        raise InvalidDeckLength(len(tokens), DECK_SIZE)

    cards: List[Card] = []
    cursors: List[int] = []
    for idx, raw in enumerate(tokens):
        token = raw
        if len(raw) >= 2 and raw.startswith("[") and raw.endswith("]"):
            token = raw[1:-1]
            cursors.append(idx)
        try:
            cards.append(parse_mnemonic(token))
        except InvalidMnemonic:
            raise InvalidMnemonic(raw) from None

    if len(cursors) > 1:
        raise MultipleCursors(cursors)
    if not allow_duplicates:
        seen = set()
        for card in cards:
            if card in seen:
                raise DuplicateCard(card.mnemonic)
            seen.add(card)

    return cards, (cursors[0] if cursors else 0)
