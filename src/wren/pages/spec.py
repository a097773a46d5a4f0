"""Page spec validation and model binding.

Turns one declared page record::

    {"path": "friends/:permalink", "template": "friend", "collection": "friends"}

into a :class:`~wren.pages.types.PageSpec` holding every generated URL and
a reverse lookup from placeholder values to URL.  Construction either fully
succeeds or raises :class:`~wren.errors.ConfigurationError`; there is no
partially-built state.
"""

import json
import logging
import re
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, Final

from wren.errors import ConfigurationError
from wren.pages.types import DEFAULT_HEADERS, Blob, Endpoint, Page, PageKind, PageSpec, Redirect
from wren.routing.path import (
    fill,
    is_empty_value,
    is_parametric,
    placeholder_keys,
    read_field,
    static_href,
)

logger = logging.getLogger("wren.pages")

# Keys a page record may carry
PAGE_FIELDS: Final = frozenset(
    {"path", "template", "model", "collection", "blob", "redirect", "headers"}
)

# Scheme-prefixed redirect targets: "https://example.com/x"
ABSOLUTE_URL_RE: Final = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


def describe(entry: Mapping[str, Any]) -> str:
    """Echo a page record for error messages."""
    return json.dumps(dict(entry), default=repr)


def is_absolute_url(destination: str) -> bool:
    return ABSOLUTE_URL_RE.match(destination) is not None


def build_page_spec(
    entry: Mapping[str, Any],
    *,
    base_href: str,
    database: Mapping[str, Any] | None = None,
) -> PageSpec:
    """Validate *entry* and compute every URL it generates.

    Args:
        entry: A declared page record.
        base_href: Prefix for every generated URL, e.g. ``"/2017/my-project"``.
        database: Models and collections referenced by ``model`` /
            ``collection``. May be ``None`` when no entry references one.

    Raises:
        ConfigurationError: On the first invalid property found. The
            message embeds the record.
    """
    if not isinstance(entry, Mapping):
        msg = f"Page spec must be a mapping, got {type(entry).__name__}: {entry!r}"
        raise ConfigurationError(msg)

    path = _validate_path(entry)
    unknown = sorted(str(k) for k in entry if k not in PAGE_FIELDS)
    if unknown:
        msg = f"Page spec has unknown keys {unknown}; valid keys are {sorted(PAGE_FIELDS)}: {describe(entry)}"
        raise ConfigurationError(msg)

    model_key = entry.get("model")
    collection_key = entry.get("collection")
    blob = entry.get("blob")
    declared_headers = entry.get("headers") or {}

    if is_parametric(path) and not model_key and not collection_key:
        msg = (
            f'Page spec path includes a ":name" placeholder but has no "model" or '
            f'"collection"; please add one: {describe(entry)}'
        )
        raise ConfigurationError(msg)
    if blob and not model_key and not collection_key:
        msg = f'Page spec includes "blob" but has no "model" or "collection"; please add one: {describe(entry)}'
        raise ConfigurationError(msg)
    if model_key and collection_key:
        msg = (
            f'Page spec includes both "model" and "collection", which conflict; '
            f"please use just one: {describe(entry)}"
        )
        raise ConfigurationError(msg)

    models = _bind_models(entry, model_key, collection_key, database)
    kind = _resolve_kind(entry, declared_headers)

    if not isinstance(declared_headers, Mapping):
        msg = f'Page spec "headers" must be a mapping: {describe(entry)}'
        raise ConfigurationError(msg)
    headers = MappingProxyType({**DEFAULT_HEADERS, **declared_headers})

    database_key = model_key or collection_key or None
    keys = placeholder_keys(path)
    if keys:
        endpoints, reverse = _expand_parametric(entry, path, keys, models, base_href, database_key)
    else:
        href = static_href(base_href, path)
        endpoints = (Endpoint(url=href, model=models[0] if models else None),)
        reverse = {(): href}

    logger.debug("Page spec %r -> %d endpoint(s)", path, len(endpoints))
    return PageSpec(
        path=path,
        kind=kind,
        placeholder_keys=keys,
        models=models,
        database_key=database_key,
        headers=headers,
        endpoints=endpoints,
        reverse=MappingProxyType(reverse),
    )


def _validate_path(entry: Mapping[str, Any]) -> str:
    path = entry.get("path")
    if not path or not isinstance(path, str):
        msg = f'Page spec must have a "path" string; please set one: {describe(entry)}'
        raise ConfigurationError(msg)
    if path == "/":
        msg = f'Page spec cannot have path "/"; try "_root" or "_root/": {describe(entry)}'
        raise ConfigurationError(msg)
    if path.startswith("/"):
        msg = f'Page spec paths cannot start with "/". Please delete that character: {describe(entry)}'
        raise ConfigurationError(msg)
    return path


def _bind_models(
    entry: Mapping[str, Any],
    model_key: str | None,
    collection_key: str | None,
    database: Mapping[str, Any] | None,
) -> tuple[Any, ...]:
    """Resolve the model binding to an ordered tuple of records."""
    if not model_key and not collection_key:
        return (None,)

    label = "model" if model_key else "collection"
    key = model_key or collection_key
    if database is None:
        msg = f'Page spec includes "{label}" but there is no database; please add a database: {describe(entry)}'
        raise ConfigurationError(msg)
    if database.get(key) is None:
        msg = (
            f"Page spec references {label} database[{key!r}] which does not exist; "
            f"please add it to the database: {describe(entry)}"
        )
        raise ConfigurationError(msg)

    value = database[key]
    if model_key:
        return (value,)

    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        msg = (
            f"Page spec references collection database[{key!r}] which is not a list "
            f"(got {type(value).__name__}); please use a list: {describe(entry)}"
        )
        raise ConfigurationError(msg)
    return tuple(value)


def _resolve_kind(entry: Mapping[str, Any], declared_headers: Any) -> PageKind:
    """Decide once which kind of page this entry produces."""
    redirect = entry.get("redirect")
    blob = entry.get("blob")

    if redirect:
        if entry.get("template"):
            msg = f'Page spec has both "template" and "redirect"; please delete one: {describe(entry)}'
            raise ConfigurationError(msg)
        if blob:
            msg = f'Page spec has both "blob" and "redirect"; please delete one: {describe(entry)}'
            raise ConfigurationError(msg)
        return Redirect(destination=str(redirect))

    if blob:
        if not isinstance(declared_headers, Mapping) or not declared_headers.get("Content-Type"):
            msg = (
                f"Page spec has \"blob\" but is missing \"headers['Content-Type']\" "
                f"(case-sensitive); please add one: {describe(entry)}"
            )
            raise ConfigurationError(msg)
        return Blob(field=str(blob))

    return Page(template=str(entry.get("template") or entry["path"]))


def _expand_parametric(
    entry: Mapping[str, Any],
    path: str,
    keys: tuple[str, ...],
    models: tuple[Any, ...],
    base_href: str,
    database_key: str | None,
) -> tuple[tuple[Endpoint, ...], dict[tuple[str, ...], str]]:
    """One endpoint per model; fills the reverse lookup as it goes."""
    endpoints: list[Endpoint] = []
    reverse: dict[tuple[str, ...], str] = {}
    # placeholder tuple -> index of the model that produced it
    sources: dict[tuple[str, ...], int] = {}

    for index, model in enumerate(models):
        values: list[str] = []
        for key in keys:
            value = read_field(model, key)
            if is_empty_value(value):
                msg = (
                    f"Page spec {path!r} refers to database[{database_key!r}], but the "
                    f"model at index {index} is missing a {key!r} value. Please set one: "
                    f"{describe(entry)}"
                )
                raise ConfigurationError(msg)
            values.append(str(value))

        params = tuple(values)
        href = f"{base_href}/{fill(path, params)}"
        if params in sources:
            msg = (
                f"Two models for {path!r} (database[{database_key!r}] indexes "
                f"{sources[params]} and {index}) resolve to the same href {href!r}. "
                f"Please change or remove a model or adjust the path so each model "
                f"gets a unique URL."
            )
            raise ConfigurationError(msg)

        sources[params] = index
        reverse[params] = href
        endpoints.append(Endpoint(url=href, model=model))

    return tuple(endpoints), reverse
