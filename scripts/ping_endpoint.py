#!/usr/bin/env python3
"""Probe the configured sheets endpoint once and report the outcome.

Usage:
    python scripts/ping_endpoint.py

Reads SHEETS_SCRIPT_URL / SHEETS_USER_EMAIL from the environment (or .env).
"""

import asyncio
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from inventory_sheets.client import SheetsApiClient
from inventory_sheets.errors import ConfigurationError


async def _ping() -> int:
    try:
        client = SheetsApiClient.from_env()
    except ConfigurationError as e:
        print(f"Not configured: {e}", file=sys.stderr)
        return 2

    result = await client.test_connection()
    if result.success:
        print(f"{result.message}: {client.config.script_url}")
        return 0
    print(f"{result.message}: {result.error}", file=sys.stderr)
    return 1


def main():
    sys.exit(asyncio.run(_ping()))


if __name__ == "__main__":
    main()
