from __future__ import annotations

import random
from typing import List, Optional

from fairdeck import Deck, DeckConfig

CANONICAL_ORDER = (
    "AC-2C-3C-4C-5C-6C-7C-8C-9C-10C-JC-QC-KC-"
    "AD-2D-3D-4D-5D-6D-7D-8D-9D-10D-JD-QD-KD-"
    "AH-2H-3H-4H-5H-6H-7H-8H-9H-10H-JH-QH-KH-"
    "AS-2S-3S-4S-5S-6S-7S-8S-9S-10S-JS-QS-KS"
)
CANONICAL_HASH = "077b3951614ed59287fef573a6062d01f1703736e12a61d283aeeca8a3f8aab1"

IDENTITY_SEED = list(range(52))
IDENTITY_SEED_HASH = "9b9300d96324f9de178153c7c0a569ca9bde92ef97801a1133d9ec8fa143c0f1"

# [52, 51, ..., 1]
DESCENDING_SEED = list(range(52, 0, -1))
DESCENDING_SEED_HASH = "b540b946a57199e7156247bc29394563acd3f8816c02cdc50b1ec8b042c8af56"
DESCENDING_ORDER = (
    "AC-8S-JH-2S-4S-5H-10S-8H-KH-3H-6H-9H-2H-7H-6S-4H-QS-10H-QH-AS-3S-5S-7S-9S-JS-KS-"
    "AH-KD-QD-JD-10D-9D-8D-7D-6D-5D-4D-3D-2D-AD-KC-QC-JC-10C-9C-8C-7C-6C-5C-4C-3C-2C"
)
DESCENDING_HASH = "cba9043ad8d50f6bd3b86abeb7a221934a7d9185e47cb402d97f1590ca352ac8"


def with_cursor(order: str, top: int) -> str:
    """Bracket the token at ``top`` in a plain hyphen-joined order."""
    tokens = order.split("-")
    if top < len(tokens):
        tokens[top] = f"[{tokens[top]}]"
    return "-".join(tokens)


def mnemonics(deck: Deck) -> List[str]:
    return [card.mnemonic for card in deck.cards]


def seeded_deck(seed: int = 42, config: Optional[DeckConfig] = None) -> Deck:
    """Fresh deck whose unseeded shuffles are reproducible."""
    return Deck(config=config, rng=random.Random(seed))
