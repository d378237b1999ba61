"""Outbound ports — interfaces for external system adapters."""

from typing import Awaitable, Callable, Dict, Protocol, runtime_checkable

from inventory_sheets.domain.models import ActionRequest, TransportResponse

SleepFunc = Callable[[float], Awaitable[None]]

DEFAULT_HEADERS: Dict[str, str] = {"Content-Type": "application/json"}


@runtime_checkable
class TransportPort(Protocol):
    """Interface for the HTTP round trip to the script endpoint.

    ``url`` already carries the full query string. Implementations raise
    ``TransportError`` when no response arrives at all and otherwise return
    the status and the body text, decoded without failing on bad bytes.
    """

    async def send(self, url: str, request: ActionRequest) -> TransportResponse: ...
