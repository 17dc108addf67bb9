import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from country_codes.directory.config import TABLE_PATH_ENV
from country_codes.directory.loader import clear_caches
from country_codes.directory.lookup import (
    find_by_dial_code,
    find_by_iso_code,
    find_by_name,
    search_countries,
    suggest_countries,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="country-codes",
        description="Look up countries by dial code, ISO code or name.",
    )
    query = parser.add_mutually_exclusive_group(required=True)
    query.add_argument("--dial-code")
    query.add_argument("--iso-code")
    query.add_argument("--name")
    query.add_argument("--search", help="accent-insensitive filter, as a picker does")
    query.add_argument("--suggest", help="fuzzy name suggestions")
    parser.add_argument("--limit", type=int, help="maximum number of suggestions, only with --suggest")
    parser.add_argument("--table", help="path to an alternative country table")
    parser.add_argument("--log-level", default="WARNING")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.limit is not None:
        if args.suggest is None:
            parser.error("--limit only applies to --suggest")
        if args.limit <= 0:
            parser.error(f"--limit must be positive, got {args.limit}")
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.table:
        os.environ[TABLE_PATH_ENV] = args.table
        clear_caches()

    if args.search is not None:
        payload = [country.to_dict() for country in search_countries(args.search)]
    elif args.suggest is not None:
        payload = [
            {**country.to_dict(), "score": round(score, 4)}
            for country, score in suggest_countries(args.suggest, limit=args.limit)
        ]
    else:
        if args.dial_code is not None:
            country = find_by_dial_code(args.dial_code)
        elif args.iso_code is not None:
            country = find_by_iso_code(args.iso_code)
        else:
            country = find_by_name(args.name)
        if country is None:
            print("Country not found", file=sys.stderr)
            return 1
        payload = {**country.to_dict(), "flag_uri": country.flag_uri}

    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
