from __future__ import annotations

from typing import Sequence


class DeckError(ValueError):
    """Base class for every deck validation failure."""


class InvalidMnemonic(DeckError):
    def __init__(self, mnemonic: str) -> None:
        super().__init__(f"Invalid card mnemonic: {mnemonic}")
        self.mnemonic = mnemonic


class InvalidDeckLength(DeckError):
    def __init__(self, length: int, expected: int = 52) -> None:
        super().__init__(f"Deck must contain {expected} cards. Got {length}.")
        self.length = length
        self.expected = expected


class SeedLengthMismatch(DeckError):
    def __init__(self, length: int, expected: int = 52) -> None:
        super().__init__(f"Seed length ({length}) must match cards length ({expected})")
        self.length = length
        self.expected = expected


class DuplicateCard(DeckError):
    def __init__(self, mnemonic: str) -> None:
        super().__init__(f"Duplicate card in deck: {mnemonic}")
        self.mnemonic = mnemonic


class MultipleCursors(DeckError):
    def __init__(self, positions: Sequence[int]) -> None:
        joined = ", ".join(str(pos) for pos in positions)
        super().__init__(f"Only one card may be bracketed, found brackets at {joined}")
        self.positions = list(positions)


class OutOfCards(DeckError):
    def __init__(self, requested: int, remaining: int) -> None:
        super().__init__(f"Not enough cards left in deck: requested {requested}, {remaining} remaining")
        self.requested = requested
        self.remaining = remaining
