"""Data models for declared pages.

Immutable frozen dataclasses built once, in declaration order, before
anything is rendered.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final

DEFAULT_HEADERS: Final[Mapping[str, str]] = {
    "Content-Type": "text/html; charset=utf-8",
    "Cache-Control": "public, max-age=300",
}


@dataclass(frozen=True, slots=True)
class Page:
    """Render ``template`` through the template engine."""

    template: str


@dataclass(frozen=True, slots=True)
class Blob:
    """Serve the raw value of ``field`` on the bound model."""

    field: str


@dataclass(frozen=True, slots=True)
class Redirect:
    """Redirect to ``destination``.

    ``destination`` is either an absolute URL (``https://...``) or another
    declared path, whose placeholders are filled from the same model.
    """

    destination: str


type PageKind = Page | Blob | Redirect


@dataclass(frozen=True, slots=True)
class Endpoint:
    """One concrete URL and the model it was generated from."""

    url: str
    model: Any


@dataclass(frozen=True, slots=True)
class PageSpec:
    """A validated page entry bound to its models.

    Attributes:
        path: The declared path template, e.g. ``friends/:permalink``.
        kind: What to produce for each endpoint.
        placeholder_keys: Placeholder names in ``path``, in order.
        models: Bound models. ``(None,)`` when the entry has no model.
        database_key: The ``model`` or ``collection`` key, if any.
        headers: Default headers overlaid with the entry's own.
        endpoints: One per bound model, in binding order.
        reverse: Ordered placeholder values -> URL. Static paths store
            a single ``() -> url`` entry.
    """

    path: str
    kind: PageKind
    placeholder_keys: tuple[str, ...]
    models: tuple[Any, ...]
    database_key: str | None
    headers: Mapping[str, str]
    endpoints: tuple[Endpoint, ...]
    reverse: Mapping[tuple[str, ...], str]

    @property
    def is_parametric(self) -> bool:
        return bool(self.placeholder_keys)

    @property
    def kind_name(self) -> str:
        return type(self.kind).__name__.lower()
