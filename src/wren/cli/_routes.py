"""``wren routes``: list declared paths.

Resolves an import string to a wren Site and prints every declared
path with its kind and the number of URLs it generates.
"""

import argparse
import sys

from wren.cli._resolve import resolve_or_exit
from wren.errors import ConfigurationError


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of PATH, KIND, URLS and the first generated URL."""
    site = resolve_or_exit(args)
    try:
        routes = site.routes
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not len(routes):
        print("No pages declared.")
        return

    # Build rows: (path, kind, url count, first url)
    rows: list[tuple[str, str, str, str]] = []
    for spec in routes:
        first = spec.endpoints[0].url if spec.endpoints else ""
        rows.append((spec.path, spec.kind_name, str(len(spec.endpoints)), first))

    max_path = max(max(len(r[0]) for r in rows), 4)  # "PATH" header
    max_kind = max(max(len(r[1]) for r in rows), 4)  # "KIND" header
    max_count = max(max(len(r[2]) for r in rows), 4)  # "URLS" header

    fmt = f"{{:<{max_path}}}  {{:<{max_kind}}}  {{:>{max_count}}}  {{}}"
    print(fmt.format("PATH", "KIND", "URLS", "FIRST URL"))
    sep_len = max_path + max_kind + max_count + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
