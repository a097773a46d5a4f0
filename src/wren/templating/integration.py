"""Kida environment setup and the kida-backed renderer.

Creates a kida Environment from wren's SiteConfig.  The environment is
created once per generation run and shared by every page render.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from kida import Environment, FileSystemLoader
from kida.template import Markup

from wren.config import SiteConfig


def create_environment(config: SiteConfig) -> Environment:
    """Create a kida Environment reading templates from ``config.template_dir``."""
    return Environment(
        loader=FileSystemLoader(str(config.template_dir)),
        autoescape=config.autoescape,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )


class KidaRenderer:
    """Renders page templates with kida.

    Template identifiers are extension-less (``"friend"``,
    ``"blog/post"``); ``template_suffix`` is appended to find the file.
    """

    __slots__ = ("env", "template_suffix")

    def __init__(self, env: Environment, *, template_suffix: str = ".html") -> None:
        self.env = env
        self.template_suffix = template_suffix

    @classmethod
    def from_config(cls, config: SiteConfig) -> KidaRenderer:
        return cls(create_environment(config), template_suffix=config.template_suffix)

    def template_name(self, template: str) -> str:
        return f"{template}{self.template_suffix}"

    def render(self, template: str, variables: Mapping[str, Any]) -> bytes:
        context = dict(variables)
        partial = context.get("partial")
        if partial is not None:
            # partials return bytes; hand kida markup so it isn't escaped twice
            def partial_markup(name: str, locals: Mapping[str, Any] | None = None) -> Markup:  # noqa: A002
                return Markup(partial(name, locals).decode("utf-8"))

            context["partial"] = partial_markup

        tmpl = self.env.get_template(self.template_name(template))
        return tmpl.render(context).encode("utf-8")
