"""``wren check``: validate every page spec and the route table.

Exits with code 1 on the first configuration error.  Nothing is rendered.
"""

import argparse
import sys

from wren.cli._resolve import resolve_or_exit
from wren.errors import ConfigurationError


def run_check(args: argparse.Namespace) -> None:
    site = resolve_or_exit(args)
    try:
        routes = site.check()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"OK: {len(routes)} page specs, {len(routes.urls)} urls")
