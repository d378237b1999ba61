"""Port interfaces (Hexagonal Architecture)."""

from inventory_sheets.ports.outbound import DEFAULT_HEADERS, SleepFunc, TransportPort

__all__ = [
    "DEFAULT_HEADERS",
    "SleepFunc",
    "TransportPort",
]
