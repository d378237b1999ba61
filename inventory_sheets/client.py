"""Sheets API client — one method per remote action."""

from typing import Any, Dict, List, Mapping, Optional

from inventory_sheets.adapters.http.aiohttp_transport import AiohttpTransport
from inventory_sheets.config import ClientConfig
from inventory_sheets.domain.actions import DEFAULT_AUDIT_LOG_LIMIT
from inventory_sheets.domain.models import ConnectionTestResult
from inventory_sheets.executor import RequestExecutor
from inventory_sheets.ports.outbound import SleepFunc, TransportPort

Filters = Optional[Mapping[str, Any]]


class SheetsApiClient:
    """Async client for the inventory spreadsheet web app.

    Reads (``get_*``, ``export_sheet``) send their arguments as query params
    over GET; writes send theirs as a JSON body over POST.
    """

    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        transport: Optional[TransportPort] = None,
        sleep: Optional[SleepFunc] = None,
    ) -> "SheetsApiClient":
        config.validate()
        return cls(RequestExecutor(config, transport or AiohttpTransport(), sleep=sleep))

    @classmethod
    def from_env(cls) -> "SheetsApiClient":
        return cls.from_config(ClientConfig.from_env())

    @property
    def config(self) -> ClientConfig:
        return self.executor.config

    async def request(
        self,
        action: str,
        payload: Optional[Mapping[str, Any]] = None,
        query_params: Filters = None,
    ) -> Dict[str, Any]:
        return await self.executor.execute(action, payload, query_params)

    async def test_connection(self) -> ConnectionTestResult:
        return await self.executor.test_connection()

    # ── Items ──────────────────────────────────────

    async def initialize(self) -> Dict[str, Any]:
        return await self.request("initialize")

    async def get_items(self) -> Dict[str, Any]:
        return await self.request("getItems")

    async def add_item(self, item_data: Mapping[str, Any]) -> Dict[str, Any]:
        return await self.request("addItem", item_data)

    async def import_items(self, items: List[Mapping[str, Any]]) -> Dict[str, Any]:
        return await self.request("importItems", {"items": list(items)})

    async def get_inventory(self) -> Dict[str, Any]:
        return await self.request("getInventory")

    async def get_users(self) -> Dict[str, Any]:
        return await self.request("getUsers")

    # ── Bookings ──────────────────────────────────────

    async def get_bookings(self, filters: Filters = None) -> Dict[str, Any]:
        return await self.request("getBookings", None, filters)

    async def create_booking(self, booking_data: Mapping[str, Any]) -> Dict[str, Any]:
        return await self.request("createBooking", booking_data)

    async def update_booking_status(self, booking_id: str, action: str) -> Dict[str, Any]:
        """Apply a status action (e.g. ``approve``) to one booking."""
        return await self.request(
            "updateBookingStatus",
            {"bookingId": booking_id, "action": action},
        )

    # ── Loadings ──────────────────────────────────────

    async def get_loadings(self, filters: Filters = None) -> Dict[str, Any]:
        return await self.request("getLoadings", None, filters)

    async def create_loading(self, loading_data: Mapping[str, Any]) -> Dict[str, Any]:
        return await self.request("createLoading", loading_data)

    async def generate_delivery_note(self, load_id: str) -> Dict[str, Any]:
        return await self.request("generateDeliveryNote", {"loadId": load_id})

    # ── Transactions ──────────────────────────────────────

    async def get_transactions(self, filters: Filters = None) -> Dict[str, Any]:
        return await self.request("getTransactions", None, filters)

    async def create_transaction(self, transaction_data: Mapping[str, Any]) -> Dict[str, Any]:
        return await self.request("createTransaction", transaction_data)

    # ── Dispatch / returns ──────────────────────────────────────

    async def get_dispatch(self, filters: Filters = None) -> Dict[str, Any]:
        return await self.request("getDispatch", None, filters)

    async def create_dispatch(self, dispatch_data: Mapping[str, Any]) -> Dict[str, Any]:
        return await self.request("createDispatch", dispatch_data)

    async def get_returns(self, filters: Filters = None) -> Dict[str, Any]:
        return await self.request("getReturns", None, filters)

    async def create_return(self, return_data: Mapping[str, Any]) -> Dict[str, Any]:
        return await self.request("createReturn", return_data)

    # ── Reports ──────────────────────────────────────

    async def export_sheet(self, sheet_name: str) -> Dict[str, Any]:
        return await self.request("exportSheet", None, {"sheetName": sheet_name})

    async def get_audit_log(self, limit: int = DEFAULT_AUDIT_LOG_LIMIT) -> Dict[str, Any]:
        return await self.request("getAuditLog", None, {"limit": limit})
