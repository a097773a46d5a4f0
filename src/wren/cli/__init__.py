"""Wren CLI: route listing, config checks and single-URL rendering.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren: compile declared pages into a static website.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every page spec and endpoint",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren routes ------------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List declared paths")
    routes_parser.add_argument("site", help="Import string (e.g. mysite:site)")

    # -- wren check -------------------------------------------------------
    check_parser = subparsers.add_parser(
        "check", help="Validate page specs and the route table without rendering"
    )
    check_parser.add_argument("site", help="Import string (e.g. mysite:site)")

    # -- wren get ---------------------------------------------------------
    get_parser = subparsers.add_parser("get", help="Generate the site and print one URL")
    get_parser.add_argument("site", help="Import string (e.g. mysite:site)")
    get_parser.add_argument("url", help="Generated URL, e.g. /2017/my-project/friends/bill")
    get_parser.add_argument(
        "--headers",
        action="store_true",
        help="Print response headers before the body",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "routes":
        from wren.cli._routes import run_routes

        run_routes(args)
    elif args.command == "check":
        from wren.cli._check import run_check

        run_check(args)
    elif args.command == "get":
        from wren.cli._get import run_get

        run_get(args)
