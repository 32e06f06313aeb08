#!/usr/bin/env python3
"""
Sign database seeding utility:
- Reads a JSON vocabulary file and loads it into an SQLite sign database.

The service runs from the bundled JSON by default; point SIGNBSL_DB_PATH at
a seeded database to serve a larger or customised vocabulary instead.

Usage examples:
  python3 -m signbsl.seed --db signs.db
  python3 -m signbsl.seed --db signs.db --json my_signs.json
  python3 -m signbsl.seed --db signs.db --list
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from signbsl.database import SignDictionary, seed_from_json
from signbsl.shared.config import PATHS


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--db", default=PATHS['signs_db'], help="Path to the SQLite sign database")
    ap.add_argument("--json", default=PATHS['signs_json'], help="JSON vocabulary to import")
    ap.add_argument("--list", action="store_true", help="List glosses by category after seeding")

    args = ap.parse_args(argv)
    if not args.db:
        print("Missing --db (or SIGNBSL_DB_PATH env var)", file=sys.stderr)
        return 2

    try:
        inserted = seed_from_json(args.db, args.json)
    except (OSError, ValueError, KeyError) as e:
        print(f"Could not read vocabulary {args.json}: {e}", file=sys.stderr)
        return 1

    dictionary = SignDictionary.from_db(args.db)
    print(f"Inserted {inserted} signs ({dictionary.count()} total) into {args.db}")

    if args.list:
        for category, glosses in sorted(dictionary.glosses_by_category().items()):
            print(f"{category}: {' '.join(glosses)}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
