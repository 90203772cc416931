"""RPC layer: gateway contract, result type, wire codec, and HTTP adapter.

The backend owns all durable state and business rules. The client only
consumes its contract::

    from watchclub.rpc import Failure, Ok, attempt

    match await attempt(gateway.get_club(club_id)):
        case Ok(value=details): ...
        case Failure(message=message): ...

``HttpGateway`` is imported lazily so the rest of the client does not pay
for ``httpx`` when a different gateway is plugged in.
"""

from watchclub.rpc.gateway import Gateway
from watchclub.rpc.result import Failure, Ok, Result, attempt

__all__ = ["Failure", "Gateway", "HttpGateway", "Ok", "Result", "attempt"]


def __getattr__(name: str) -> object:
    if name == "HttpGateway":
        from watchclub.rpc.http import HttpGateway

        return HttpGateway
    msg = f"module 'watchclub.rpc' has no attribute {name!r}"
    raise AttributeError(msg)
