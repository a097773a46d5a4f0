"""Renderer protocol.

A renderer is any object with a ``render`` method matching::

    def render(self, template: str, variables: Mapping[str, Any]) -> bytes: ...

No base class required.  ``variables`` always holds ``url``, ``model``,
``locals``, ``partial`` and ``routes``, plus the site's globals.
``partial(template, locals=None)`` re-enters ``render`` with the same
``url`` and ``model`` and returns bytes.
"""

from collections.abc import Callable, Mapping
from typing import Any, Final, Protocol

from wren.errors import ConfigurationError

# Variable names the generator sets on every render
RESERVED_NAMES: Final = frozenset({"url", "model", "locals", "partial", "routes"})

# partial(template, locals=None) -> bytes
type Partial = Callable[..., bytes]


class Renderer(Protocol):
    """Turns a template identifier plus variables into bytes.

    Errors raised here reach the caller of ``generate()`` unchanged.
    """

    def render(self, template: str, variables: Mapping[str, Any]) -> bytes: ...


def validate_globals(globals_: Mapping[str, Any]) -> None:
    """Globals may not shadow per-render variables and must be identifiers.

    Raises:
        ConfigurationError: On the first offending key.
    """
    for key in globals_:
        if key in RESERVED_NAMES:
            msg = (
                f"You cannot specify globals[{key!r}]: {key!r} is already set on every "
                f"render. Rename or remove it from your globals."
            )
            raise ConfigurationError(msg)
        if not isinstance(key, str) or not key.isidentifier():
            msg = f"You cannot specify globals[{key!r}]: it is not a valid identifier."
            raise ConfigurationError(msg)
