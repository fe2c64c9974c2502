#!/usr/bin/env python3
"""
Preflight check — run before starting the explorer service.

Usage:
    python3 scripts/preflight_check.py            # provider keys + database
    python3 scripts/preflight_check.py --no-db    # skip the database connection

Exits 0 if all checks pass. Exits 1 if any check fails.
"""

import argparse
import asyncio
import sys

import asyncpg

from services.explorer.config import Settings

# ANSI colors
GREEN = "\033[32m"
RED = "\033[31m"
YELLOW = "\033[33m"
RESET = "\033[0m"
BOLD = "\033[1m"

PASS = f"{GREEN}PASS{RESET}"
FAIL = f"{RED}FAIL{RESET}"
WARN = f"{YELLOW}WARN{RESET}"

failures = []


def check(label: str, fn):
    """Run a check function, print result, accumulate failures."""
    try:
        result = fn()
        if result is True or result is None:
            print(f"  {PASS}  {label}")
        elif isinstance(result, str) and result.startswith("WARN"):
            print(f"  {WARN}  {label}: {result[5:].strip()}")
        else:
            print(f"  {FAIL}  {label}: {result}")
            failures.append(label)
    except Exception as e:
        print(f"  {FAIL}  {label}: {e}")
        failures.append(label)


# ---------------------------------------------------------------------------
# Individual checks
# ---------------------------------------------------------------------------

def key_check(settings: Settings, field: str):
    def _check():
        if not getattr(settings, field):
            return f"{field.upper()} is not set (endpoint will answer 502)"
        return True
    return _check


def check_database(settings: Settings):
    if not settings.database_url:
        return "WARN DATABASE_URL is not set; location cache disabled"

    async def _connect():
        conn = await asyncpg.connect(settings.database_url, timeout=5)
        try:
            await conn.fetchval("SELECT 1")
        finally:
            await conn.close()

    asyncio.run(_connect())
    return True


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--no-db", action="store_true", help="Skip the database check")
    args = parser.parse_args()

    settings = Settings()

    print(f"{BOLD}Provider keys{RESET}")
    for field in ("geocoding_api_key", "darksky_api_key", "yelp_api_key", "movie_api_key"):
        check(field.upper(), key_check(settings, field))

    if not args.no_db:
        print(f"{BOLD}Location store{RESET}")
        check("DATABASE_URL reachable", lambda: check_database(settings))

    if failures:
        print(f"\n{RED}{len(failures)} check(s) failed{RESET}")
        return 1
    print(f"\n{GREEN}All checks passed{RESET}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
