"""Inventory Sheets — async client for the spreadsheet-backed inventory web app."""

from inventory_sheets.config import CONFIG, ClientConfig, __version__
from inventory_sheets.errors import (
    ApplicationError,
    ConfigurationError,
    SheetsApiError,
    TransportError,
)
from inventory_sheets.domain import (
    ACTIONS,
    ActionRequest,
    ConnectionTestResult,
    RetryPolicy,
    TransportResponse,
)
from inventory_sheets.adapters.http import AiohttpTransport
from inventory_sheets.executor import RequestExecutor
from inventory_sheets.client import SheetsApiClient

__all__ = [
    "__version__",
    "CONFIG",
    "ClientConfig",
    "ApplicationError",
    "ConfigurationError",
    "SheetsApiError",
    "TransportError",
    "ACTIONS",
    "ActionRequest",
    "ConnectionTestResult",
    "RetryPolicy",
    "TransportResponse",
    "AiohttpTransport",
    "RequestExecutor",
    "SheetsApiClient",
]
