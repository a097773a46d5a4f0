"""Locating the Site a ``wren`` command works on.

A target is ``module`` or ``module:attribute``; the attribute defaults to
``site``.  It may name a Site or a zero-argument callable returning one.

Site modules usually build their SiteConfig and Site at import time, and
both validate eagerly, so most configuration mistakes surface while the
target is loaded rather than when a command runs.
"""

import argparse
import importlib
import sys

from wren.errors import ConfigurationError, WrenError
from wren.site import Site

DEFAULT_ATTRIBUTE = "site"


def resolve_site(target: str) -> Site:
    """Import *target* and return the Site it names.

    Raises:
        ImportError: If the module cannot be imported.
        WrenError: If importing the module or calling the factory raised
            one, e.g. a ``ConfigurationError`` from ``SiteConfig``.
        ConfigurationError: If the attribute is missing or does not
            produce a Site.
    """
    module_name, _, attribute = target.partition(":")
    attribute = attribute or DEFAULT_ATTRIBUTE

    module = importlib.import_module(module_name)
    if not hasattr(module, attribute):
        msg = (
            f"Module {module_name!r} has no attribute {attribute!r}. "
            f"Pass MODULE:ATTRIBUTE to name the site."
        )
        raise ConfigurationError(msg)

    site = getattr(module, attribute)
    if callable(site) and not isinstance(site, Site):
        site = site()

    if not isinstance(site, Site):
        msg = f"{target!r} resolved to {type(site).__name__}, not a wren.Site"
        raise ConfigurationError(msg)
    return site


def resolve_or_exit(args: argparse.Namespace) -> Site:
    """Resolve ``args.site``, printing the error and exiting 1 on failure."""
    try:
        return resolve_site(args.site)
    except (ImportError, WrenError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
