"""Shared fixtures: a seeded fake backend and an app wired to it."""

import pytest

from watchclub.app import WatchClubApp
from watchclub.config import ClientConfig
from watchclub.models import Club, Identity, User
from watchclub.routing import Location
from watchclub.storage import MemoryStorage
from watchclub.testing import FakeGateway, MemoryDownloads, ScriptedDialogs


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def alice(gateway: FakeGateway) -> User:
    return gateway.seed_user("Alice", "alice@example.com")


@pytest.fixture
def bob(gateway: FakeGateway) -> User:
    return gateway.seed_user("Bob", "bob@example.com")


@pytest.fixture
def club(gateway: FakeGateway, alice: User, bob: User) -> Club:
    return gateway.seed_club("Movie Night", members=(alice, bob))


@pytest.fixture
def store() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def dialogs() -> ScriptedDialogs:
    return ScriptedDialogs()


@pytest.fixture
def downloads() -> MemoryDownloads:
    return MemoryDownloads()


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(public_url="https://watch.example/")


@pytest.fixture
def make_app(gateway, store, dialogs, downloads, config):
    """Build an app over the shared fixtures, optionally signed in as *user*."""

    def _make(user: User | None = None, path: str = "/") -> WatchClubApp:
        app = WatchClubApp(
            config,
            gateway=gateway,
            store=store,
            location=Location(path),
            dialogs=dialogs,
            downloads=downloads,
        )
        if user is not None:
            app.cache.save_identity(Identity.from_user(user))
        return app

    return _make
