"""Pytest fixtures for SPIKE client tests."""

from typing import Callable, List

import httpx
import pytest

from spike_api import SpikeClient, SpikeConfig


class RecordingTransport:
    """Answers every request with the same response and keeps what was sent."""

    def __init__(self, response: Callable[[httpx.Request], httpx.Response]):
        self._response = response
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._response(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def config() -> SpikeConfig:
    return SpikeConfig(secret_key="sk_test_123", publishable_key="pk_test_123")


@pytest.fixture
def recorder():
    return RecordingTransport


@pytest.fixture
def make_client(config):
    """Build a SpikeClient whose HTTP calls are answered by ``handler``."""

    def _make(handler) -> SpikeClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return SpikeClient(config, http_client=http_client)

    return _make


@pytest.fixture
def charge_payload() -> dict:
    return {
        "id": "20150101-000000-abcdefghij",
        "object": "charge",
        "livemode": False,
        "created": 1420070400,
        "paid": True,
        "captured": True,
        "refunded": False,
        "amount": 1080,
        "currency": "JPY",
        "amount_refunded": None,
        "card": {"last4": "1111", "type": "Visa", "exp_month": 1, "exp_year": 2030, "name": "Taro Spike"},
        "refunds": [],
    }
