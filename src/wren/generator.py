"""Generation driver: page records in, static website out.

Every page spec and the route table are built, in declaration order,
before anything renders.  If a developer has two config errors and one
render error, fixing the first config error surfaces the second; once a
render error is raised, there are no config errors left.
"""

import html
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from wren.errors import GenerationError
from wren.pages.spec import build_page_spec
from wren.pages.types import Blob, Endpoint, Page, PageSpec, Redirect
from wren.routing.path import MISSING, read_field
from wren.routing.table import RouteTable
from wren.templating.protocol import Renderer, validate_globals
from wren.website import Deliverable, StaticWebsite

logger = logging.getLogger("wren.generator")

_REDIRECT_HTML = (
    '<!doctype html><head><meta charset="utf-8"><title>Redirect</title></head>'
    '<body>You are being <a href="{href}">redirected</a>...</body></html>'
)


def build_routes(
    pages: Iterable[Mapping[str, Any]],
    *,
    base_url: str,
    base_href: str,
    database: Mapping[str, Any] | None = None,
) -> RouteTable:
    """Validate every page record and compile the route table.

    Raises:
        ConfigurationError: On the first invalid record, duplicate path,
            duplicate URL or unknown redirect target.
    """
    specs = [build_page_spec(entry, base_href=base_href, database=database) for entry in pages]
    return RouteTable(base_url, specs)


class Generator:
    """Expands page specs into deliverables.

    Holds the read-only route table, the renderer and the user globals
    shared by every render.
    """

    __slots__ = ("globals", "renderer", "routes")

    def __init__(
        self,
        routes: RouteTable,
        renderer: Renderer,
        globals_: Mapping[str, Any] | None = None,
    ) -> None:
        validate_globals(globals_ or {})
        self.routes = routes
        self.renderer = renderer
        self.globals: dict[str, Any] = dict(globals_ or {})

    def render(
        self,
        template: str,
        url: str,
        model: Any,
        locals_: Mapping[str, Any] | None = None,
    ) -> bytes:
        """Render *template* for one endpoint.

        ``partial`` in the variables re-enters this method with the same
        url and model and fresh locals.
        """

        def partial(name: str, locals: Mapping[str, Any] | None = None) -> bytes:  # noqa: A002
            return self.render(name, url, model, locals)

        variables = {
            **self.globals,
            "url": url,
            "model": model,
            "locals": dict(locals_ or {}),
            "partial": partial,
            "routes": self.routes,
        }
        return self.renderer.render(template, variables)

    def expand(self, spec: PageSpec, endpoint: Endpoint) -> Deliverable:
        """Produce the deliverable for one endpoint of *spec*."""
        headers = dict(spec.headers)
        url, model = endpoint.url, endpoint.model

        match spec.kind:
            case Page(template=template):
                body = self.render(template, url, model)
            case Blob(field=field):
                body = _blob_bytes(read_field(model, field), field, url)
            case Redirect():
                location = self.routes.redirect_url_for(spec, model)
                headers["Location"] = location
                body = _REDIRECT_HTML.format(href=html.escape(location, quote=True)).encode("utf-8")
            case _:
                msg = f"Unknown page kind {spec.kind!r} for {spec.path!r}"
                raise TypeError(msg)

        logger.debug("Expanded %s %r -> %s (%d bytes)", spec.kind_name, spec.path, url, len(body))
        return Deliverable(url=url, headers=headers, body=body)

    def run(self) -> StaticWebsite:
        """Expand every endpoint of every spec, in declaration order."""
        deliverables = [
            self.expand(spec, endpoint) for spec in self.routes for endpoint in spec.endpoints
        ]
        logger.info("Generated %d endpoints from %d page specs", len(deliverables), len(self.routes))
        return StaticWebsite(tuple(deliverables))


def _blob_bytes(value: Any, field: str, url: str) -> bytes:
    if value is None or value is MISSING:
        msg = f'There is no "{field}" blob on the model for {url!r}'
        raise GenerationError(msg)
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    msg = f'The "{field}" blob on the model for {url!r} is a {type(value).__name__}, not str or bytes'
    raise GenerationError(msg)


def generate(
    pages: Iterable[Mapping[str, Any]],
    *,
    base_url: str,
    base_href: str,
    renderer: Renderer,
    database: Mapping[str, Any] | None = None,
    globals_: Mapping[str, Any] | None = None,
) -> StaticWebsite:
    """Build the route table, then render every endpoint.

    Any exception aborts the whole run; nothing partial is returned.
    """
    routes = build_routes(pages, base_url=base_url, base_href=base_href, database=database)
    return Generator(routes, renderer, globals_).run()
