"""Static about screen."""

from collections.abc import Mapping

from watchclub.dom import Page
from watchclub.models import Identity
from watchclub.pages.base import PageController
from watchclub.views.models import AboutView


class AboutPage(PageController):
    __slots__ = ()

    def mount(self, params: Mapping[str, str], identity: Identity | None) -> Page:
        from watchclub import __version__

        return self.shell(AboutView(version=__version__))
