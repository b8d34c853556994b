from __future__ import annotations

import hashlib
import hmac
from typing import Iterable, Sequence, Union

from .cards import SEPARATOR, Card, cards_to_mnemonics, parse_deck_string

# Placeholder for "no shuffle yet". The 0x prefix keeps it out of the space of
# real 64-char hex digests.
ZERO_HASH = "0x" + "0" * 64


def content_hash(text: str) -> str:
    """Lowercase hex SHA-256 of the UTF-8 bytes of ``text``."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def hash_cards(cards: Iterable[Card]) -> str:
    return content_hash(SEPARATOR.join(cards_to_mnemonics(cards)))


def hash_seed(seed: Iterable[int]) -> str:
    return content_hash(SEPARATOR.join(str(value) for value in seed))


def verify_seed(seed: Sequence[int], seed_hash: str) -> bool:
    return hmac.compare_digest(hash_seed(seed), seed_hash)


def verify_order(cards: Union[str, Sequence[Card]], order_hash: str) -> bool:
    """Check a deck order against a published hash.

    ``cards`` may be a card sequence or a serialized deck string. Strings are
    held to the same rules as restoring a Deck; the cursor bracket does not
    affect the hash.
    """
    if isinstance(cards, str):
        cards, _ = parse_deck_string(cards)
    return hmac.compare_digest(hash_cards(cards), order_hash)
