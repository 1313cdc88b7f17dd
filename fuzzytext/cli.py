"""Command-line entry point: score two texts, or two columns of a CSV file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .errors import FuzzyError
from .fuzzy_ngram import create
from .options import FuzzyOptions


def build_parser() -> argparse.ArgumentParser:
    d = FuzzyOptions()
    parser = argparse.ArgumentParser(prog="fuzzytext", description="Fuzzy n-gram text similarity.")
    parser.add_argument("texts", nargs="*", metavar="TEXT", help="two texts to compare")
    parser.add_argument("--csv", type=str, help="CSV file to score instead of TEXT arguments")
    parser.add_argument("--columns", nargs=2, metavar=("A", "B"), help="CSV columns to compare")
    parser.add_argument("--delimiter", default=d.delimiter)
    parser.add_argument("--locale", default=d.stemmer_locale, help="stemmer locale")
    parser.add_argument("--text-threshold", type=float, default=d.text_threshold)
    parser.add_argument("--word-threshold", type=float, default=d.word_threshold)
    parser.add_argument("--token-length", type=int, default=d.token_length)
    parser.add_argument("--min-word-length", type=int, default=d.min_word_length)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        fuzzy = create(
            delimiter=args.delimiter,
            stemmer_locale=args.locale,
            text_threshold=args.text_threshold,
            word_threshold=args.word_threshold,
            token_length=args.token_length,
            min_word_length=args.min_word_length,
        )
    except FuzzyError as e:
        parser.error(str(e))

    if args.csv:
        if not args.columns:
            parser.error("--csv requires --columns A B")
        if args.texts:
            parser.error("TEXT arguments cannot be combined with --csv")
        import pandas as pd

        from .frame import score_columns

        path = Path(args.csv)
        if not path.exists():
            parser.error(f"file not found: {path}")
        df = pd.read_csv(path)
        try:
            out = score_columns(df, args.columns[0], args.columns[1], fuzzy=fuzzy)
        except KeyError as e:
            parser.error(str(e))
        out.to_csv(sys.stdout, index=False)
        return 0

    if len(args.texts) != 2:
        parser.error("expected exactly two TEXT arguments")
    first, second = args.texts
    score = fuzzy.compare(first, second)
    print(f"score={score:.4f} equal={fuzzy.equals(first, second)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
