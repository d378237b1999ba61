"""Remote action catalog: action name → HTTP method it travels with."""

from typing import Dict

GET = "GET"
POST = "POST"

ACTIONS: Dict[str, str] = {
    "initialize": GET,
    "getItems": GET,
    "addItem": POST,
    "getUsers": GET,
    "getBookings": GET,
    "createBooking": POST,
    "updateBookingStatus": POST,
    "getLoadings": GET,
    "createLoading": POST,
    "getTransactions": GET,
    "createTransaction": POST,
    "getInventory": GET,
    "getDispatch": GET,
    "createDispatch": POST,
    "getReturns": GET,
    "createReturn": POST,
    "generateDeliveryNote": POST,
    # TODO: confirm the deployed script reads exportSheet/getAuditLog from GET;
    # it may only look at the action param and ignore the method.
    "exportSheet": GET,
    "importItems": POST,
    "getAuditLog": GET,
}

# Read-only action used for connectivity probes
PROBE_ACTION = "getItems"

DEFAULT_AUDIT_LOG_LIMIT = 100
