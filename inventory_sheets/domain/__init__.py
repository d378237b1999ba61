"""Domain layer — pure Python, no framework dependencies."""

from inventory_sheets.domain.actions import ACTIONS, DEFAULT_AUDIT_LOG_LIMIT, PROBE_ACTION
from inventory_sheets.domain.models import (
    ActionRequest,
    ConnectionTestResult,
    TransportResponse,
    stringify_params,
)
from inventory_sheets.domain.retry import RetryPolicy

__all__ = [
    "ACTIONS",
    "DEFAULT_AUDIT_LOG_LIMIT",
    "PROBE_ACTION",
    "ActionRequest",
    "ConnectionTestResult",
    "TransportResponse",
    "stringify_params",
    "RetryPolicy",
]
