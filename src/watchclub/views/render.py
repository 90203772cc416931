"""Kida rendering adapter for view models.

Creates one kida ``Environment`` over the built-in template sources. Each
view model names its template in a ``template`` class attribute and is
exposed to it as ``view``.
"""

from typing import Any

from kida import DictLoader, Environment

from watchclub.views.templates import TEMPLATES


def create_environment(templates: dict[str, str] | None = None) -> Environment:
    """Create the kida Environment used for every region.

    *templates* overrides or extends the built-in sources by name.
    """
    sources = dict(TEMPLATES)
    if templates:
        sources.update(templates)
    return Environment(loader=DictLoader(sources), autoescape=True)


class Renderer:
    """Turns view models into HTML strings."""

    __slots__ = ("env",)

    def __init__(self, env: Environment | None = None) -> None:
        self.env = env or create_environment()

    def render(self, view: Any) -> str:
        template = self.env.get_template(view.template)
        return template.render({"view": view})
