"""Wren: compile declared pages into a static website.

Resolves path templates bound to data models into a collision-free set
of URLs, renders each one, and gives templates reverse lookup.

Basic usage::

    from wren import Site, SiteConfig

    site = Site(
        SiteConfig(base_url="https://example.com", base_href="/2017/my-project"),
        pages=[
            {"path": "simple"},
            {"path": "friends/:permalink", "template": "friend", "collection": "friends"},
        ],
        database={"friends": [{"name": "Bill", "permalink": "bill"}]},
    )
    website = site.generate()
    website.get("/2017/my-project/friends/bill").body

In a template::

    <a href="{{ routes.url_for('friends/:permalink', model.permalink) }}">...</a>
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ConfigurationError",
    "Deliverable",
    "GenerationError",
    "PageSpec",
    "RouteError",
    "RouteTable",
    "Site",
    "SiteConfig",
    "StaticWebsite",
    "WrenError",
    "generate",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "Site":
        from wren.site import Site

        return Site

    if name == "SiteConfig":
        from wren.config import SiteConfig

        return SiteConfig

    if name == "generate":
        from wren.generator import generate

        return generate

    if name == "PageSpec":
        from wren.pages.types import PageSpec

        return PageSpec

    if name == "RouteTable":
        from wren.routing.table import RouteTable

        return RouteTable

    if name in ("Deliverable", "StaticWebsite"):
        from wren import website as _website

        return getattr(_website, name)

    if name in ("WrenError", "ConfigurationError", "GenerationError", "RouteError"):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
