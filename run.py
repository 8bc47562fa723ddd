#!/usr/bin/env python3
"""
Query governance tallies and points ledgers from the configured store.

Usage:
    python run.py proposals                      # All proposals with tallies
    python run.py history <wallet> [limit]       # Wallet points history (default 20)
    python run.py leaderboard [points|volume] [limit]
    python run.py init-db                        # Create DuckDB tables

Store backend is chosen by FLIP_STORE_BACKEND (duckdb | supabase).
"""

import sys

from app.container import container
from app.errors import LedgerError
from app.repositories.db import get_write_connection
from settings import DB_PATH, LOG_LEVEL
from settings.logging import setup_logging
from web.api.errors import error_response
from web.api.governance import get_proposals
from web.api.points import get_leaderboard, get_points_history

logger = setup_logging(level=LOG_LEVEL, to_file=False)


def main() -> int:
    args = sys.argv[1:]
    if not args:
        print(__doc__)
        return 1

    command, rest = args[0], args[1:]

    if command == "init-db":
        get_write_connection(DB_PATH).close()
        logger.info("Tables ready in {}", DB_PATH)
        return 0

    container.init()
    try:
        if command == "proposals":
            response = get_proposals()
        elif command == "history":
            response = get_points_history(rest[0] if rest else None, rest[1] if len(rest) > 1 else None)
        elif command == "leaderboard":
            response = get_leaderboard(rest[0] if rest else None, rest[1] if len(rest) > 1 else None)
        else:
            print(__doc__)
            return 1
    except LedgerError as e:
        print(error_response(e).model_dump_json(indent=2))
        return 2
    finally:
        container.close()

    print(response.model_dump_json(indent=2, by_alias=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
