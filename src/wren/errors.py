"""Wren exception hierarchy.

Shared across page specs, the route table, the generator and the CLI so
every module raises and catches the same types.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when site configuration or a page spec is invalid.

    Always raised before any template is rendered.
    """


class RouteError(WrenError, LookupError):
    """Raised when a reverse lookup (``url_for``) is misused."""


class PathNotFound(RouteError):  # noqa: N818
    """No page spec is declared with the requested path."""


class ParameterCountError(RouteError):
    """``url_for`` got a different number of parameters than the path has placeholders."""


class NoSuchParameters(RouteError):  # noqa: N818
    """The path exists, but no bound model produced this parameter combination."""


class GenerationError(WrenError):
    """Raised while expanding an endpoint, after configuration was validated.

    Covers data problems the route table cannot see in advance, such as a
    blob field that is ``None`` on one model.
    """
