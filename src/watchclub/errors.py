"""WatchClub exception hierarchy.

Shared across the router, cache, RPC adapters, and actions so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class WatchClubError(Exception):
    """Base for all watchclub-specific errors."""


class ConfigurationError(WatchClubError):
    """Raised when the client is wired up incorrectly.

    Typically a route table without a root route, a malformed route
    pattern, or an invalid configuration value.
    """


@dataclass(frozen=True, slots=True)
class RPCError(WatchClubError):
    """A failure reported by the RPC gateway.

    ``code`` is the gateway's status name (``"not_found"``,
    ``"failed_precondition"``, ...). ``message`` is the backend-supplied
    text, shown to the user verbatim.
    """

    code: str
    message: str = ""

    def __str__(self) -> str:
        if self.message:
            return f"{self.code}: {self.message}"
        return self.code
