"""aiohttp transport — implements TransportPort."""

import asyncio
from typing import Dict, Optional

import aiohttp

from inventory_sheets.domain.models import ActionRequest, TransportResponse
from inventory_sheets.errors import TransportError
from inventory_sheets.ports.outbound import DEFAULT_HEADERS


class AiohttpTransport:
    """Sends one request per call on a fresh ``aiohttp.ClientSession``."""

    def __init__(self, headers: Optional[Dict[str, str]] = None):
        self.headers = {**DEFAULT_HEADERS, **(headers or {})}

    async def send(self, url: str, request: ActionRequest) -> TransportResponse:
        try:
            async with aiohttp.ClientSession() as session:
                async with session.request(
                    request.method,
                    url,
                    headers=self.headers,
                    data=request.body,
                ) as resp:
                    # Bodies that are not UTF-8 must still reach the executor with their status
                    raw = await resp.read()
                    text = raw.decode("utf-8", errors="replace")
                    return TransportResponse(status=resp.status, text=text)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Network error: {e!r}") from e
