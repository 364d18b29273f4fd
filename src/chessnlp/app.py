"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from chessnlp.core.errors import NotationError
from chessnlp.i18n import LANGUAGES
from chessnlp.translator import ChessNLP

_LOGGER = logging.getLogger(__name__)


def _parse_aliases(pairs: list[str]) -> dict[str, list[str]]:
    aliases: dict[str, list[str]] = {}
    for pair in pairs:
        slot, sep, term = pair.partition("=")
        if not sep:
            raise argparse.ArgumentTypeError(f"Alias must look like SLOT=TERM: {pair!r}")
        aliases.setdefault(slot.strip(), []).append(term)
    return aliases


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="chessnlp",
        description="Convert spoken-style chess moves to SAN and back",
    )
    p.add_argument("moves", nargs="+", help="Move descriptions (or SAN with --reverse)")
    p.add_argument("--reverse", action="store_true", help="Convert SAN to text instead")
    p.add_argument("--language", default="English", help=f"One of: {', '.join(LANGUAGES)}")
    p.add_argument(
        "--alias",
        action="append",
        default=[],
        metavar="SLOT=TERM",
        help="Extra term for a vocabulary slot, e.g. knight=night (repeatable)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def main(argv: list[str] | None = None) -> int:
    """Run the translator over every positional argument."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        aliases = _parse_aliases(args.alias)
        nlp = ChessNLP(aliases=aliases, language=args.language)
    except (argparse.ArgumentTypeError, NotationError) as exc:
        parser.error(str(exc))

    convert = nlp.san_to_text if args.reverse else nlp.text_to_san
    status = 0
    for move in args.moves:
        try:
            print(convert(move))
        except NotationError as exc:
            _LOGGER.warning("%s", exc)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
