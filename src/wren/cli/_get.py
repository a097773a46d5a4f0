"""``wren get``: generate the site and print one deliverable.

A stand-in for serving the generated site: useful for checking a
template or a redirect without publishing anything.
"""

import argparse
import sys

from wren.cli._resolve import resolve_or_exit
from wren.errors import WrenError


def run_get(args: argparse.Namespace) -> None:
    site = resolve_or_exit(args)
    try:
        website = site.generate()
    except WrenError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    deliverable = website.get(args.url)
    if deliverable is None:
        print(f"Error: no endpoint has url {args.url!r}", file=sys.stderr)
        raise SystemExit(1)

    if args.headers:
        for name, value in deliverable.headers.items():
            print(f"{name}: {value}")
        print()
    sys.stdout.flush()
    sys.stdout.buffer.write(deliverable.body)
    sys.stdout.flush()
