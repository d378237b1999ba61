"""Request and result types for remote actions."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def stringify_params(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Turn caller params into query-string values, dropping ``None`` entries."""
    if not params:
        return {}
    return {
        str(key): _query_value(value)
        for key, value in params.items()
        if value is not None
    }


@dataclass(frozen=True)
class ActionRequest:
    """One remote call: action + identity, plus a payload or extra query params."""

    action: str
    identity: str
    payload: Optional[Dict[str, Any]] = None
    query_params: Dict[str, str] = field(default_factory=dict)

    @property
    def method(self) -> str:
        return "GET" if self.payload is None else "POST"

    @property
    def query(self) -> Dict[str, str]:
        # action/email always present and never overridden by caller params
        query = {"action": self.action, "email": self.identity}
        for key, value in self.query_params.items():
            if key not in query:
                query[key] = value
        return query

    @property
    def body(self) -> Optional[str]:
        if self.payload is None:
            return None
        return json.dumps(self.payload, ensure_ascii=False)

    def url(self, base_url: str) -> str:
        sep = "&" if "?" in base_url else "?"
        return f"{base_url}{sep}{urlencode(self.query)}"


@dataclass
class TransportResponse:
    """Raw HTTP outcome as seen by the executor."""

    status: int
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


@dataclass
class ConnectionTestResult:
    success: bool
    message: str = ""
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
