"""Request executor — one action, one round trip, bounded retry."""

import asyncio
import json
import sys
from typing import Any, Dict, Mapping, Optional

from inventory_sheets.config import ClientConfig
from inventory_sheets.domain.actions import PROBE_ACTION
from inventory_sheets.domain.models import (
    ActionRequest,
    ConnectionTestResult,
    TransportResponse,
    stringify_params,
)
from inventory_sheets.errors import ApplicationError, ConfigurationError, TransportError
from inventory_sheets.ports.outbound import SleepFunc, TransportPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class RequestExecutor:
    """Turns a logical action into a request against the script endpoint.

    Transport failures (no response, non-2xx, body that is not JSON) are
    retried per ``config.retry``. A well-formed ``success: false`` answer is
    raised as ``ApplicationError`` straight away.
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: TransportPort,
        sleep: Optional[SleepFunc] = None,
    ):
        self.config = config
        self.transport = transport
        self._sleep = sleep or asyncio.sleep

    def build_request(
        self,
        action: str,
        payload: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> ActionRequest:
        if not action or not str(action).strip():
            raise ConfigurationError("Action name must be a non-empty string.")
        return ActionRequest(
            action=action,
            identity=self.config.user_email,
            payload=dict(payload) if payload is not None else None,
            query_params=stringify_params(query_params),
        )

    async def execute(
        self,
        action: str,
        payload: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Run ``action`` and return the parsed response body.

        Args:
            action: Remote action name (``getItems``, ``createBooking``, ...).
            payload: JSON body. Its presence switches the call from GET to POST.
            query_params: Extra query-string values; ``action``/``email`` win
                on collision.

        Raises:
            ConfigurationError: empty action.
            TransportError: every attempt failed in transport.
            ApplicationError: the endpoint reported ``success: false``.
        """
        request = self.build_request(action, payload, query_params)
        policy = self.config.retry

        attempt = 1
        while True:
            try:
                return await self._attempt(request)
            except TransportError as e:
                e.attempts = attempt
                if not policy.should_retry(attempt):
                    self._debug(f"[{request.action}] giving up after {attempt} attempt(s): {e}")
                    raise
                delay = policy.delay_for(attempt)
                self._debug(f"[{request.action}] attempt {attempt} failed ({e}), retrying in {delay:.2f}s")
                await self._sleep(delay)
                attempt += 1

    async def test_connection(self) -> ConnectionTestResult:
        """Single probe call without retry. Reports failures instead of raising."""
        try:
            request = self.build_request(PROBE_ACTION)
            data = await self._attempt(request)
            return ConnectionTestResult(
                success=True,
                message="Connection successful",
                data=data,
            )
        except Exception as e:
            return ConnectionTestResult(
                success=False,
                message="Connection failed",
                error=str(e),
            )

    async def _attempt(self, request: ActionRequest) -> Dict[str, Any]:
        url = request.url(self.config.script_url)
        self._debug(f"Request: {request.method} {url}")
        if request.body is not None:
            self._debug(f"Request Body: {request.body}")

        response = await self.transport.send(url, request)
        result = self._decode(response)
        self._debug(f"Response: {result}")

        if not isinstance(result, dict) or not result.get("success"):
            message = None
            if isinstance(result, dict):
                message = result.get("message")
            raise ApplicationError(message or "Request failed", response=result)
        return result

    @staticmethod
    def _decode(response: TransportResponse) -> Any:
        if not response.ok:
            raise TransportError(f"HTTP {response.status}", status=response.status)
        try:
            return json.loads(response.text)
        except ValueError as e:
            raise TransportError(
                f"Invalid JSON response: {e}", status=response.status
            ) from e

    def _debug(self, msg: str):
        if self.config.debug:
            _log(msg)
