"""WatchClub: a client for coordinating a shared watching schedule.

Users create an account (or log in through an emailed link), create or
join a club, submit picks, start the club so the backend shuffles the
picks into a schedule, then browse or download that schedule.

Basic usage::

    from watchclub import ClientConfig, WatchClubApp

    async with WatchClubApp(ClientConfig.from_env()) as app:
        app.navigate("/profile")
        await app.settle()
        print(app.html())
"""

__version__ = "0.1.0"
__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "Identity",
    "RPCError",
    "Router",
    "WatchClubApp",
    "WatchClubError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import watchclub`` fast; ``httpx`` and ``kida`` load on first use.
    """
    if name == "WatchClubApp":
        from watchclub.app import WatchClubApp

        return WatchClubApp

    if name == "ClientConfig":
        from watchclub.config import ClientConfig

        return ClientConfig

    if name in ("ConfigurationError", "RPCError", "WatchClubError"):
        from watchclub import errors

        return getattr(errors, name)

    if name == "Identity":
        from watchclub.models import Identity

        return Identity

    if name == "Router":
        from watchclub.routing import Router

        return Router

    msg = f"module 'watchclub' has no attribute {name!r}"
    raise AttributeError(msg)
