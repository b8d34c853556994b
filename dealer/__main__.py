import argparse
import json
import logging
import re
import sys
from typing import List, Optional

from fairdeck import Deck, DeckConfig, verify_order, verify_seed

LOGGER = logging.getLogger("dealer")

# Commas always separate; a hyphen separates only after a digit so that
# "-5" keeps its sign.
_SEED_SPLIT_RE = re.compile(r",|(?<=\d)-")


def parse_seed(text: str) -> List[int]:
    try:
        return [int(part) for part in _SEED_SPLIT_RE.split(text) if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Seed must be comma separated integers: {text}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Verifiable deck dealer")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, etc.).")
    parser.add_argument("--seed-bound", type=int, default=1_000_000, help="Upper bound for generated seed values")
    parser.add_argument(
        "--allow-duplicates",
        action="store_true",
        help="Accept restored decks that repeat a card",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("new", help="Print a fresh deck in canonical order")

    shuffle = sub.add_parser("shuffle", help="Shuffle a deck and print its hashes")
    shuffle.add_argument("--deck", help="Serialized deck to shuffle (defaults to a fresh deck)")
    shuffle.add_argument("--seed", type=parse_seed, help="52 comma separated integers; random when omitted")

    deal = sub.add_parser("deal", help="Deal cards from a serialized deck")
    deal.add_argument("count", type=int)
    deal.add_argument("--deck", required=True)

    verify = sub.add_parser("verify", help="Check a revealed seed or deck order against its hash")
    verify.add_argument("--seed", type=parse_seed)
    verify.add_argument("--seed-hash")
    verify.add_argument("--deck")
    verify.add_argument("--hash")
    return parser


def run(args: argparse.Namespace) -> int:
    config = DeckConfig(seed_bound=args.seed_bound, allow_duplicates=args.allow_duplicates)

    if args.command == "new":
        deck = Deck(config=config)
        emit(deck.snapshot().to_dict())
        return 0

    if args.command == "shuffle":
        deck = Deck(args.deck, config=config)
        if args.seed:
            deck.shuffle(args.seed)
            emit(deck.snapshot().to_dict())
            return 0
        # Record the generated seed so the shuffle stays verifiable.
        seed = deck.generate_seed()
        deck.shuffle(seed)
        payload = deck.snapshot().to_dict()
        payload["seed"] = seed
        emit(payload)
        return 0

    if args.command == "deal":
        deck = Deck(args.deck, config=config)
        dealt = deck.deal(args.count)
        payload = deck.snapshot().to_dict()
        payload["dealt"] = [card.mnemonic for card in dealt]
        emit(payload)
        return 0

    if args.command == "verify":
        if args.seed is not None and args.seed_hash:
            ok = verify_seed(args.seed, args.seed_hash)
        elif args.deck and args.hash:
            ok = verify_order(args.deck, args.hash)
        else:
            LOGGER.error("verify needs --seed with --seed-hash, or --deck with --hash")
            return 2
        emit({"ok": ok})
        return 0 if ok else 1

    raise ValueError(f"Unsupported command {args.command}")


def emit(payload: object) -> None:
    print(json.dumps(payload))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")
    try:
        return run(args)
    except ValueError as exc:
        # DeckError is a ValueError; plain ones come from config and deal amounts.
        LOGGER.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
