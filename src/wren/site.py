"""Wren site class.

Holds everything a generation run needs.  The route table is compiled
once, on first use, and shared by every later ``generate()`` call.
"""

import threading
from collections.abc import Mapping, Sequence
from typing import Any

from wren.config import SiteConfig
from wren.errors import ConfigurationError
from wren.generator import Generator, build_routes
from wren.routing.table import RouteTable
from wren.templating.integration import KidaRenderer
from wren.templating.protocol import Renderer, validate_globals
from wren.website import StaticWebsite


class Site:
    """A declared static site.

    Usage::

        site = Site(
            SiteConfig(base_url="https://example.com", base_href="/2017/my-project"),
            pages=[{"path": "simple"}, {"path": "friends/:permalink", "collection": "friends"}],
            database={"friends": [{"permalink": "bill"}, {"permalink": "ted"}]},
        )
        website = site.generate()

    Thread safety:
        Compiling the route table uses a Lock + double-check so exactly
        one thread builds it.
    """

    __slots__ = ("_freeze_lock", "_renderer", "_routes", "config", "database", "globals", "pages")

    def __init__(
        self,
        config: SiteConfig,
        *,
        pages: Sequence[Mapping[str, Any]],
        database: Mapping[str, Any] | None = None,
        globals: Mapping[str, Any] | None = None,  # noqa: A002
        renderer: Renderer | None = None,
    ) -> None:
        validate_pages(pages)
        validate_globals(globals or {})
        self.config = config
        self.pages: tuple[Mapping[str, Any], ...] = tuple(pages)
        self.database = database
        self.globals: dict[str, Any] = dict(globals or {})
        self._renderer = renderer
        self._routes: RouteTable | None = None
        self._freeze_lock = threading.Lock()

    @property
    def routes(self) -> RouteTable:
        """The compiled route table. Built on first access."""
        if self._routes is not None:
            return self._routes
        with self._freeze_lock:
            if self._routes is None:
                self._routes = build_routes(
                    self.pages,
                    base_url=self.config.base_url,
                    base_href=self.config.base_href,
                    database=self.database,
                )
        return self._routes

    @property
    def renderer(self) -> Renderer:
        if self._renderer is None:
            self._renderer = KidaRenderer.from_config(self.config)
        return self._renderer

    def check(self) -> RouteTable:
        """Validate every page spec and the route table without rendering."""
        return self.routes

    def url_for(self, path: str, *params: Any) -> str:
        return self.routes.url_for(path, *params)

    def generate(self) -> StaticWebsite:
        """Render every endpoint. Configuration errors surface first."""
        routes = self.routes
        return Generator(routes, self.renderer, self.globals).run()


def validate_pages(pages: Any) -> None:
    if pages is None:
        msg = "You must pass pages, a list of page mappings."
        raise ConfigurationError(msg)
    if not isinstance(pages, Sequence) or isinstance(pages, (str, bytes)):
        msg = f"pages must be a list, got {type(pages).__name__}"
        raise ConfigurationError(msg)
