"""WatchClub application context.

Owns everything a page controller or action touches: configuration, the
persistent cache, the gateway, the router, the document, the host
services, and the task group that runs page loads.

Usage::

    async with WatchClubApp(config, gateway=gateway) as app:
        app.navigate("/club/42")
        await app.settle()
        print(app.document.html())

Entering the context starts the router (the current location resolves
once). Leaving it stops the router and cancels loads still in flight.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from contextlib import AsyncExitStack
from typing import Any

import anyio
from anyio.abc import TaskGroup

from watchclub.browser import ConsoleDialogs, Dialogs, Downloads, FileDownloads
from watchclub.cache import PersistentCache
from watchclub.config import ClientConfig
from watchclub.dom import Document
from watchclub.errors import WatchClubError
from watchclub.models import Identity
from watchclub.pages import register_pages
from watchclub.routing import Location, Router
from watchclub.rpc import Gateway
from watchclub.storage import FileStorage, KeyValueStore, MemoryStorage
from watchclub.views.builders import build_nav
from watchclub.views.render import Renderer

logger = logging.getLogger("watchclub.app")


class WatchClubApp:
    """The running client.

    Route resolution and page shells are synchronous. Page loads run as
    tasks on the app's task group via ``spawn()``; ``settle()`` waits for
    them.
    """

    __slots__ = (
        "_exit_stack",
        "_idle",
        "_owns_gateway",
        "_pending",
        "_task_group",
        "cache",
        "config",
        "dialogs",
        "document",
        "downloads",
        "gateway",
        "router",
        "store",
    )

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        gateway: Gateway | None = None,
        store: KeyValueStore | None = None,
        location: Location | None = None,
        dialogs: Dialogs | None = None,
        downloads: Downloads | None = None,
        renderer: Renderer | None = None,
    ) -> None:
        self.config: ClientConfig = config or ClientConfig()
        if store is None:
            store = FileStorage(self.config.storage_path) if self.config.storage_path else MemoryStorage()
        self.store = store
        self.cache = PersistentCache(store, club_limit=self.config.club_cache_limit)

        self._owns_gateway = gateway is None
        if gateway is None:
            from watchclub.rpc.http import HttpGateway

            gateway = HttpGateway.from_config(self.config)
        self.gateway: Gateway = gateway

        self.dialogs: Dialogs = dialogs or ConsoleDialogs()
        self.downloads: Downloads = downloads or FileDownloads(self.config.downloads_dir)
        self.document = Document(renderer)
        self.router = Router(location, after_resolve=self.refresh_nav)

        self._exit_stack: AsyncExitStack | None = None
        self._task_group: TaskGroup | None = None
        self._pending = 0
        self._idle: anyio.Event | None = None

        register_pages(self)

    # -- Lifecycle --

    async def __aenter__(self) -> WatchClubApp:
        stack = AsyncExitStack()
        self._task_group = await stack.enter_async_context(anyio.create_task_group())
        self._exit_stack = stack
        logger.debug("Starting at %s", self.router.location.path)
        self.router.start()
        return self

    async def __aexit__(self, *exc_info: Any) -> bool | None:
        self.router.stop()
        task_group, stack = self._task_group, self._exit_stack
        self._task_group = None
        self._exit_stack = None
        try:
            if task_group is not None:
                task_group.cancel_scope.cancel()
            if stack is not None:
                return await stack.__aexit__(*exc_info)
            return None
        finally:
            if self._owns_gateway:
                await self.gateway.aclose()  # type: ignore[attr-defined]

    @property
    def running(self) -> bool:
        return self._task_group is not None

    # -- Background loads --

    def spawn(self, func: Callable[..., Awaitable[Any]], *args: Any) -> None:
        """Run ``func(*args)`` on the task group.

        RPC failures are handled inside page loads; any other exception
        escapes the task group and ends the app context.
        """
        if self._task_group is None:
            msg = "WatchClubApp is not running; use 'async with app:' before navigating."
            raise WatchClubError(msg)
        self._pending += 1
        self._task_group.start_soon(self._run, func, args)

    async def _run(self, func: Callable[..., Awaitable[Any]], args: tuple[Any, ...]) -> None:
        try:
            await func(*args)
        finally:
            self._pending -= 1
            if self._idle is not None:
                self._idle.set()

    @property
    def pending(self) -> int:
        """Number of page loads still in flight."""
        return self._pending

    async def settle(self, remaining: int = 0) -> None:
        """Wait until at most *remaining* page loads are in flight."""
        while self._pending > remaining:
            self._idle = anyio.Event()
            await self._idle.wait()
        self._idle = None

    # -- Identity and navigation --

    @property
    def identity(self) -> Identity | None:
        return self.cache.identity

    def sign_in(self, identity: Identity) -> None:
        """Persist *identity* and update the navigation bar."""
        self.cache.save_identity(identity)
        self.refresh_nav()

    def reset(self) -> None:
        """Forget the identity and every cached club."""
        self.cache.clear_identity()
        self.refresh_nav()
        logger.info("Signed out")

    def refresh_nav(self) -> None:
        self.document.set_nav(build_nav(self.identity))

    def navigate(self, path: str) -> None:
        self.router.navigate(path)

    def html(self) -> str:
        return self.document.html()

    def __repr__(self) -> str:
        return f"WatchClubApp(location={self.router.location.path!r}, pending={self._pending})"
