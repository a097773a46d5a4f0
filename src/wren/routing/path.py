"""Path templates: placeholder parsing, validation and substitution.

A path template is a string like ``friends/:permalink`` or
``friends/:permalink.txt``.  Every ``:name`` token is a placeholder filled
from the bound model's ``name`` field.
"""

import re
from collections.abc import Mapping
from typing import Any, Final

# :name tokens, left to right
PLACEHOLDER_RE: Final = re.compile(r":(\w+)")

# "_root" as a whole leading word: "_root", "_root/", "_root.json"
_ROOT_RE: Final = re.compile(r"^_root\b")

ROOT_SEGMENT: Final = "_root"


class _Missing:
    """Sentinel for a field that is absent from a model."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


def placeholder_keys(path: str) -> tuple[str, ...]:
    """Return placeholder names in declaration order.

    Duplicates are kept::

        placeholder_keys("a/:x/:y")   -> ("x", "y")
        placeholder_keys("a/:x/:x")   -> ("x", "x")
        placeholder_keys("about")     -> ()
    """
    return tuple(PLACEHOLDER_RE.findall(path))


def is_parametric(path: str) -> bool:
    return PLACEHOLDER_RE.search(path) is not None


def is_root_path(path: str) -> bool:
    """True when *path* starts with the reserved ``_root`` word."""
    return _ROOT_RE.match(path) is not None


def static_href(base_href: str, path: str) -> str:
    """Return the href of a static path.

    ``_root`` stands for *base_href* itself, so ``_root`` maps to
    ``/base`` and ``_root/`` maps to ``/base/``.
    """
    if is_root_path(path):
        return base_href + path[len(ROOT_SEGMENT) :]
    return f"{base_href}/{path}"


def fill(path: str, values: tuple[str, ...]) -> str:
    """Substitute placeholder tokens positionally with *values*.

    *values* must have one entry per token returned by
    :func:`placeholder_keys`.
    """
    it = iter(values)
    return PLACEHOLDER_RE.sub(lambda _m: next(it), path)


def read_field(model: Any, name: str) -> Any:
    """Read *name* off a model, returning :data:`MISSING` when absent.

    Mappings are read by key; any other object by attribute.
    """
    if model is None:
        return MISSING
    if isinstance(model, Mapping):
        return model.get(name, MISSING)
    return getattr(model, name, MISSING)


def is_empty_value(value: Any) -> bool:
    """Placeholder values must be present, not ``None`` and not ``""``."""
    return value is MISSING or value is None or value == ""
