"""In-memory document: the mounted page, its regions, and the navigation bar.

A page is mounted in two phases. The shell renders at once from cached or
static data, carrying empty region slots; each slot is then filled when
its asynchronous load completes::

    page = document.mount(ClubShell(...), token=router.token(),
                          regions={"club_content": Message("Loading...", "loading")})
    region = page.region("club_content")
    ...                                   # await the backend
    region.render(detail_view)            # no-op when the user navigated away

A ``Region`` handle stays valid only while its page is the mounted page
and its navigation token is current. Rendering into a stale handle does
nothing, so late responses never overwrite the page the user is looking at.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from watchclub.routing import NavigationToken
from watchclub.views.render import Renderer

logger = logging.getLogger("watchclub.dom")


def region_slot(region_id: str) -> str:
    """The empty placeholder a template writes for a region."""
    return f'<div id="{region_id}" data-region></div>'


class Region:
    """A named, independently updatable part of a page."""

    __slots__ = ("id", "page", "version", "view")

    def __init__(self, region_id: str, page: Page, view: Any) -> None:
        self.id = region_id
        self.page = page
        self.view = view
        self.version = 0

    @property
    def attached(self) -> bool:
        return self.page.attached and self.page.regions.get(self.id) is self

    def render(self, view: Any) -> bool:
        """Replace the region's content. Returns False for a stale handle."""
        if not self.attached:
            logger.debug("Dropping update for detached region %r", self.id)
            return False
        self.view = view
        self.version += 1
        return True

    def __repr__(self) -> str:
        return f"Region({self.id!r}, {type(self.view).__name__}, version={self.version})"


class Page:
    """One mounted screen: a shell view plus its regions."""

    __slots__ = ("document", "regions", "token", "view")

    def __init__(self, document: Document, view: Any, token: NavigationToken) -> None:
        self.document = document
        self.view = view
        self.token = token
        self.regions: dict[str, Region] = {}

    @property
    def attached(self) -> bool:
        return self.document.page is self and self.token.is_current

    def add_region(self, region_id: str, view: Any) -> Region:
        """Create (or recreate) a region. A previous handle with the same id detaches."""
        region = Region(region_id, self, view)
        self.regions[region_id] = region
        return region

    def region(self, region_id: str) -> Region | None:
        return self.regions.get(region_id)


class Document:
    """The single rendering surface of the client."""

    __slots__ = ("nav", "page", "renderer")

    def __init__(self, renderer: Renderer | None = None) -> None:
        self.renderer = renderer or Renderer()
        self.page: Page | None = None
        self.nav: Any = None

    def mount(
        self,
        view: Any,
        *,
        token: NavigationToken,
        regions: Mapping[str, Any] | None = None,
    ) -> Page:
        """Replace the current page. Regions of the previous page detach."""
        page = Page(self, view, token)
        for region_id, region_view in (regions or {}).items():
            page.add_region(region_id, region_view)
        self.page = page
        logger.debug("Mounted %s (generation %d)", type(view).__name__, token.generation)
        return page

    def set_nav(self, view: Any) -> None:
        self.nav = view

    def find(self, region_id: str) -> Region | None:
        """Region *region_id* of the mounted page, if any."""
        if self.page is None:
            return None
        return self.page.region(region_id)

    def render_view(self, view: Any) -> str:
        return self.renderer.render(view)

    def html(self) -> str:
        """Serialize the navigation bar and the mounted page."""
        parts = []
        if self.nav is not None:
            parts.append(self.renderer.render(self.nav))
        if self.page is not None:
            body = self.renderer.render(self.page.view)
            for region in self.page.regions.values():
                slot = region_slot(region.id)
                filled = f'<div id="{region.id}" data-region>{self.renderer.render(region.view)}</div>'
                if slot in body:
                    body = body.replace(slot, filled, 1)
                else:
                    body += filled
            parts.append(f"<main>{body}</main>")
        return "\n".join(parts)
