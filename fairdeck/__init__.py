"""Verifiable 52-card deck: mnemonic codec, seeded shuffle and content hashes."""

from .cards import Card, Suit, build_standard_deck, encode_mnemonic, parse_deck_string, parse_mnemonic
from .deck import Deck, replay_shuffle
from .errors import (
    DeckError,
    DuplicateCard,
    InvalidDeckLength,
    InvalidMnemonic,
    MultipleCursors,
    OutOfCards,
    SeedLengthMismatch,
)
from .hashing import ZERO_HASH, content_hash, hash_cards, hash_seed, verify_order, verify_seed
from .models import DECK_SIZE, DeckConfig, DeckSnapshot

__all__ = [
    "Card",
    "Suit",
    "build_standard_deck",
    "encode_mnemonic",
    "parse_mnemonic",
    "parse_deck_string",
    "Deck",
    "replay_shuffle",
    "DeckError",
    "DuplicateCard",
    "InvalidDeckLength",
    "InvalidMnemonic",
    "MultipleCursors",
    "OutOfCards",
    "SeedLengthMismatch",
    "ZERO_HASH",
    "content_hash",
    "hash_cards",
    "hash_seed",
    "verify_order",
    "verify_seed",
    "DECK_SIZE",
    "DeckConfig",
    "DeckSnapshot",
]
