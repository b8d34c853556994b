from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional, Sequence, Tuple

from .cards import SEPARATOR, Card, build_standard_deck, parse_deck_string
from .errors import OutOfCards, SeedLengthMismatch
from .hashing import ZERO_HASH, hash_cards, hash_seed
from .models import DECK_SIZE, DeckConfig, DeckSnapshot

LOGGER = logging.getLogger("fairdeck")

# Deck holds card order and the dealing cursor only. Hashes are recomputed on
# every reorder so a published ``hash`` always describes the current order.


class Deck:
    """Standard 52-card deck with seed-verifiable Fisher-Yates shuffling.

    ``Deck()`` builds the canonical order (clubs, diamonds, hearts, spades;
    ace to king). ``Deck(text)`` restores a deck serialized by ``to_string``,
    where the single bracketed token marks the next card to deal.
    """

    def __init__(
        self,
        deck: Optional[str] = None,
        *,
        config: Optional[DeckConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or DeckConfig()
        self._rng = rng or random.SystemRandom()
        if deck is None:
            cards, top = build_standard_deck(), 0
        else:
            cards, top = self._parse(deck)
        self._cards: List[Card] = cards
        self._top = top
        self.hash = hash_cards(self._cards)
        self.seed_hash = ZERO_HASH
        LOGGER.debug("Deck ready (top=%s, hash=%s)", self._top, self.hash)

    @classmethod
    def from_string(
        cls,
        text: str,
        *,
        config: Optional[DeckConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> "Deck":
        return cls(text, config=config, rng=rng)

    # Restoration -----------------------------------------------------

    def _parse(self, text: str) -> Tuple[List[Card], int]:
        return parse_deck_string(text, allow_duplicates=self.config.allow_duplicates)

    # Shuffling -------------------------------------------------------

    def shuffle(self, seed: Optional[Sequence[int]] = None) -> None:
        """Reorder the deck in place with Fisher-Yates driven by ``seed``.

        Walking ``i`` from 51 down to 1, the card at ``i`` swaps with the card
        at ``seed[i] % (i + 1)``. The same seed on the same order always gives
        the same result, and ``seed_hash`` lets the seed be committed to before
        it is revealed. Without a seed one is drawn from the deck's rng, which
        makes the result unverifiable unless the caller records it.

        The cursor does not move.
        """
        if not seed:
            seed = self.generate_seed()
        values = list(seed)
        if len(values) != len(self._cards):
            raise SeedLengthMismatch(len(values), len(self._cards))
        for value in values:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Seed values must be integers, got {value!r}")

        self.seed_hash = hash_seed(values)
        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = values[i] % (i + 1)
            cards[i], cards[j] = cards[j], cards[i]
        self.hash = hash_cards(cards)
        LOGGER.debug("Shuffled deck (seed_hash=%s, hash=%s)", self.seed_hash, self.hash)

    def generate_seed(self) -> List[int]:
        """Draw a fresh seed from the deck's rng, bounded by ``config.seed_bound``."""
        if not isinstance(self._rng, random.SystemRandom):
            LOGGER.warning("Generating shuffle seed from a non-system rng; result is not unpredictable")
        return [self._rng.randrange(self.config.seed_bound) for _ in range(len(self._cards))]

    # Dealing ---------------------------------------------------------

    @property
    def top(self) -> int:
        return self._top

    @property
    def remaining(self) -> int:
        return len(self._cards) - self._top

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def get_next(self) -> Card:
        if self._top >= len(self._cards):
            raise OutOfCards(1, 0)
        card = self._cards[self._top]
        self._top += 1
        return card

    def deal(self, amount: int) -> List[Card]:
        if amount < 0:
            raise ValueError("Deal amount must be non-negative")
        if amount > self.remaining:
            raise OutOfCards(amount, self.remaining)
        return [self.get_next() for _ in range(amount)]

    # Serialization ---------------------------------------------------

    def to_json(self) -> Dict[str, List[Dict[str, object]]]:
        return {"cards": [card.to_json() for card in self._cards]}

    def to_string(self) -> str:
        tokens = []
        for idx, card in enumerate(self._cards):
            if idx == self._top:
                tokens.append(f"[{card.mnemonic}]")
            else:
                tokens.append(card.mnemonic)
        return SEPARATOR.join(tokens)

    def snapshot(self) -> DeckSnapshot:
        return DeckSnapshot(
            deck=self.to_string(),
            top=self._top,
            remaining=self.remaining,
            hash=self.hash,
            seed_hash=self.seed_hash,
        )

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Deck(top={self._top}, remaining={self.remaining}, hash={self.hash[:12]}...)"


def replay_shuffle(
    seed: Sequence[int],
    start: Optional[str] = None,
    *,
    config: Optional[DeckConfig] = None,
) -> Deck:
    """Rebuild the deck a revealed seed produces.

    Starts from the canonical order, or from ``start`` when the shuffle was
    applied to a restored deck, so the result can be compared with a
    previously published order hash.
    """
    if not seed:
        # An empty seed would silently fall back to a random one.
        raise SeedLengthMismatch(0, DECK_SIZE)
    deck = Deck(start, config=config)
    deck.shuffle(seed)
    return deck
