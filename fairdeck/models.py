from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict


DECK_SIZE = 52


@dataclass
class DeckConfig:
    # Exclusive upper bound for internally generated seed values.
    seed_bound: int = 1_000_000
    # Skip the duplicate-card check when restoring from a string.
    allow_duplicates: bool = False

    def __post_init__(self) -> None:
        if self.seed_bound <= 0:
            raise ValueError("seed_bound must be positive")


@dataclass
class DeckSnapshot:
    deck: str
    top: int
    remaining: int
    hash: str
    seed_hash: str

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)
