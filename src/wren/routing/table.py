"""Route table: global uniqueness plus forward and reverse lookup.

Built once from every page spec, in declaration order, and immutable
afterwards.  Templates receive it as ``routes`` and call
``routes.url_for("friends/:permalink", "bill")``.
"""

import logging
from collections.abc import Iterable, Iterator
from types import MappingProxyType
from typing import Any

from wren.errors import (
    ConfigurationError,
    GenerationError,
    NoSuchParameters,
    ParameterCountError,
    PathNotFound,
)
from wren.pages.spec import is_absolute_url
from wren.pages.types import PageSpec, Redirect
from wren.routing.path import is_empty_value, read_field

logger = logging.getLogger("wren.routing")


class RouteTable:
    """Immutable mapping of declared paths and generated URLs.

    Usage::

        table = RouteTable("https://example.com", specs)
        table.url_for("friends/:permalink", "bill")
        # "/2017/my-project/friends/bill"
        table.absolute_url_for("friends/:permalink", "bill")
        # "https://example.com/2017/my-project/friends/bill"
    """

    __slots__ = ("_path_to_spec", "_url_to_path", "base_url")

    def __init__(self, base_url: str, specs: Iterable[PageSpec]) -> None:
        self.base_url = base_url
        path_to_spec: dict[str, PageSpec] = {}
        url_to_path: dict[str, str] = {}

        for spec in specs:
            if spec.path in path_to_spec:
                msg = f"Two page specs have path {spec.path!r}. Please edit or delete one."
                raise ConfigurationError(msg)
            path_to_spec[spec.path] = spec

            for endpoint in spec.endpoints:
                other = url_to_path.get(endpoint.url)
                if other is not None:
                    msg = (
                        f"Two page specs have href {endpoint.url!r}. One page spec is "
                        f"{other!r} and the other is {spec.path!r}. Please change the page "
                        f"specs or database so that no two entries resolve to the same href."
                    )
                    raise ConfigurationError(msg)
                url_to_path[endpoint.url] = spec.path

        self._path_to_spec = MappingProxyType(path_to_spec)
        self._url_to_path = MappingProxyType(url_to_path)
        self._check_redirect_targets()
        logger.debug("Route table: %d paths, %d urls", len(path_to_spec), len(url_to_path))

    def _check_redirect_targets(self) -> None:
        """Every relative redirect must name a declared path."""
        for spec in self._path_to_spec.values():
            if not isinstance(spec.kind, Redirect):
                continue
            destination = spec.kind.destination
            if is_absolute_url(destination) or destination in self._path_to_spec:
                continue
            msg = (
                f"Path {spec.path!r} tried to redirect to {destination!r} but that is not "
                f"a valid path in this project. Use a declared path or an absolute URL."
            )
            raise ConfigurationError(msg)

    # -- Introspection --

    @property
    def paths(self) -> tuple[str, ...]:
        """Declared paths, in declaration order."""
        return tuple(self._path_to_spec)

    @property
    def specs(self) -> tuple[PageSpec, ...]:
        return tuple(self._path_to_spec.values())

    @property
    def urls(self) -> tuple[str, ...]:
        """Every generated URL, in generation order."""
        return tuple(self._url_to_path)

    def path_for_url(self, url: str) -> str | None:
        """Return the declared path that generated *url*, if any."""
        return self._url_to_path.get(url)

    def __contains__(self, path: object) -> bool:
        return path in self._path_to_spec

    def __iter__(self) -> Iterator[PageSpec]:
        return iter(self._path_to_spec.values())

    def __len__(self) -> int:
        return len(self._path_to_spec)

    def __repr__(self) -> str:
        return f"RouteTable({self.base_url!r}, paths={len(self)}, urls={len(self._url_to_path)})"

    # -- Lookup --

    def resolve_path(self, path: str) -> PageSpec:
        """Return the page spec declared with exactly *path*.

        Raises:
            PathNotFound: No page spec has this path.
        """
        spec = self._path_to_spec.get(path)
        if spec is not None:
            return spec

        if path.startswith("/"):
            msg = f"You asked for path {path!r}, but paths cannot start with '/'. Please remove the '/'."
        else:
            msg = (
                f"There is no page spec with path {path!r}. "
                f"Please choose a valid path: {sorted(self._path_to_spec)}"
            )
        raise PathNotFound(msg)

    def url_for(self, path: str, *params: Any) -> str:
        """Return the href generated for *path* with these placeholder values.

        ``url_for("friends/:permalink", "bill")`` -> ``"/base/friends/bill"``.
        Static paths take no parameters.  Parameters are compared as
        strings, so ``url_for("posts/:id", 7)`` matches a model whose
        ``id`` is ``7`` or ``"7"``.

        Raises:
            PathNotFound: *path* is not declared.
            ParameterCountError: Wrong number of parameters.
            NoSuchParameters: No model produced these values.
        """
        spec = self.resolve_path(path)
        keys = spec.placeholder_keys
        if len(params) != len(keys):
            noun = "value" if len(params) == 1 else "values"
            msg = (
                f"Page spec {path!r} requires parameters {list(keys)}, "
                f"but you specified {len(params)} {noun}"
            )
            raise ParameterCountError(msg)

        href = spec.reverse.get(tuple(str(p) for p in params))
        if href is None:
            msg = f"Page spec {path!r} does not have an entry with parameters {list(params)}"
            raise NoSuchParameters(msg)
        return href

    def absolute_url_for(self, path: str, *params: Any) -> str:
        """Like :meth:`url_for`, prefixed with the site's base URL."""
        return f"{self.base_url}{self.url_for(path, *params)}"

    def redirect_url_for(self, spec: PageSpec, model: Any) -> str:
        """Resolve where a redirect spec points for one of its models.

        Absolute destinations are returned verbatim.  A declared path is
        filled from *model*: its own placeholder keys are read off the
        model that is being redirected.
        """
        if not isinstance(spec.kind, Redirect):
            msg = f"Page spec {spec.path!r} is a {spec.kind_name}, not a redirect"
            raise TypeError(msg)

        destination = spec.kind.destination
        if is_absolute_url(destination):
            return destination

        target = self.resolve_path(destination)
        params: list[Any] = []
        for key in target.placeholder_keys:
            value = read_field(model, key)
            if is_empty_value(value):
                msg = (
                    f"Path {spec.path!r} redirects to {destination!r}, which needs a "
                    f"{key!r} value, but the model has none: {model!r}"
                )
                raise GenerationError(msg)
            params.append(value)
        return self.url_for(target.path, *params)
