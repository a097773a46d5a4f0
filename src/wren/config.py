"""Site configuration.

SiteConfig is a frozen dataclass: immutable after creation, validated
once in ``__post_init__``.
"""

from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlsplit

from wren.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site configuration. Immutable after creation.

    Only ``base_url`` is required::

        config = SiteConfig(
            base_url="https://example.com",
            base_href="/2017/my-project",
            template_dir="views",
        )
    """

    # URLs
    base_url: str
    base_href: str = ""

    # Templates
    template_dir: str | Path = "templates"
    template_suffix: str = ".html"
    autoescape: bool = True
    trim_blocks: bool = False
    lstrip_blocks: bool = False

    def __post_init__(self) -> None:
        validate_base_url(self.base_url)
        validate_base_href(self.base_href)


def validate_base_url(base_url: str) -> None:
    """``base_url`` is scheme and host only: ``https://example.com``.

    Social sites only unfurl http(s) URLs, and every href already carries
    the site's subpath.
    """
    if not base_url or not isinstance(base_url, str):
        msg = "You must specify base_url: for instance, http://localhost:3000"
        raise ConfigurationError(msg)

    parts = urlsplit(base_url)
    if parts.scheme not in ("http", "https"):
        msg = f'You set base_url to {base_url!r}. Change it to start with "http://" or "https://".'
        raise ConfigurationError(msg)
    if not parts.netloc or parts.path or parts.query or parts.fragment:
        msg = f"base_url must be a URL without subdirectories, such as 'http://example.com'; got {base_url!r}"
        raise ConfigurationError(msg)


def validate_base_href(base_href: str) -> None:
    """``base_href`` is ``""`` or a subpath like ``/2017/slug``."""
    if base_href is None or not isinstance(base_href, str):
        msg = "You must specify base_href: for instance, '/2017/SLUG' or even the empty string, ''"
        raise ConfigurationError(msg)
    if base_href and (not base_href.startswith("/") or base_href.endswith("/")):
        msg = f"base_href must start with '/' and must not end with '/'; got {base_href!r}"
        raise ConfigurationError(msg)
