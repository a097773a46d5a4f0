"""Declared pages: validation, model binding and URL expansion.

Each page record names a path template and, optionally, the model or
collection it is bound to::

    pages = [
        {"path": "_root", "redirect": "simple"},
        {"path": "simple"},
        {"path": "my-hero", "template": "hero", "model": "hero"},
        {"path": "friends/:permalink", "template": "friend", "collection": "friends"},
        {
            "path": "friends/:permalink.txt",
            "collection": "friends",
            "blob": "name",
            "headers": {"Content-Type": "text/plain; charset=utf-8"},
        },
    ]
"""

from wren.pages.spec import build_page_spec
from wren.pages.types import DEFAULT_HEADERS, Blob, Endpoint, Page, PageKind, PageSpec, Redirect

__all__ = [
    "DEFAULT_HEADERS",
    "Blob",
    "Endpoint",
    "Page",
    "PageKind",
    "PageSpec",
    "Redirect",
    "build_page_spec",
]
