"""Shared fakes: scripted transport and recording sleep."""

import json

import pytest

from inventory_sheets.config import ClientConfig
from inventory_sheets.domain.models import TransportResponse
from inventory_sheets.domain.retry import RetryPolicy
from inventory_sheets.errors import TransportError


class FakeTransport:
    """Replays scripted outcomes in order and records every request.

    Each outcome is a dict (sent back as 200 JSON), a TransportResponse,
    or an exception instance to raise.
    """

    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    async def send(self, url, request):
        self.calls.append((url, request))
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        if isinstance(outcome, TransportResponse):
            return outcome
        return TransportResponse(status=200, text=json.dumps(outcome))


class RecordingSleep:
    def __init__(self):
        self.delays = []

    async def __call__(self, delay):
        self.delays.append(delay)


@pytest.fixture
def config():
    return ClientConfig(
        script_url="https://script.example.com/exec",
        user_email="clerk@example.com",
        retry=RetryPolicy(max_attempts=3, base_delay=0.5),
    )


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def make_transport():
    return FakeTransport


@pytest.fixture
def network_down():
    return TransportError("Network error: ClientConnectorError()")
