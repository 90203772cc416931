"""Test doubles for the WatchClub client.

::

    from watchclub.testing import FakeGateway, MemoryDownloads, ScriptedDialogs

    gateway = FakeGateway()
    alice = gateway.seed_user("Alice")
    app = WatchClubApp(gateway=gateway, dialogs=ScriptedDialogs([True]))
"""

from watchclub.testing.browser import MemoryDownloads, ScriptedDialogs
from watchclub.testing.gateway import Call, FakeGateway, Gate

__all__ = ["Call", "FakeGateway", "Gate", "MemoryDownloads", "ScriptedDialogs"]
