"""Shared fixtures: a fake clock for the limiter and a mocked whatismymmr.com."""

from __future__ import annotations

import asyncio
import copy
import json
from typing import Any, Callable, List

import httpx
import pytest

from whatismymmr.infrastructure import TokenBucketRateLimiter, WhatIsMyMMRClient

SUMMONER_PAYLOAD = {
    "ranked": {
        "avg": 1550,
        "err": 40,
        "warn": False,
        "timestamp": 1675000000,
        "historical": [
            {"avg": 1520, "err": 45, "warn": False, "timestamp": 1674000000},
            {"avg": 1490, "err": 50, "warn": True, "timestamp": 1673000000},
        ],
        "closestRank": "Gold II",
        "percentile": 74.7,
        "tierData": [
            {"name": "Gold II", "avg": 1540, "min": 1500, "max": 1580},
            {"name": "Gold I", "avg": 1620, "min": 1580, "max": 1660},
        ],
        "historicalTierData": [
            {"name": "Gold III", "avg": 1460, "min": 1420, "max": 1500},
        ],
    },
    "normal": {
        "avg": 1400,
        "err": 80,
        "warn": True,
        "timestamp": 1675000000,
        "historical": [],
        "closestRank": "Silver I",
        "percentile": 61.2,
    },
    "ARAM": {
        "avg": 1800,
        "err": 60,
        "warn": False,
        "timestamp": 1675000000,
        "historical": [{"avg": 1790, "err": 62, "warn": False, "timestamp": 1674000000}],
        "closestRank": "Platinum II",
        "percentile": 88.0,
    },
}

DISTRIBUTION_PAYLOAD = {
    "ranked": {"1000": 120, "1100": 340, "1200": 210},
    "normal": {"900": 50, "1000": 75},
    "ARAM": {"1500": 10, "1600": 30, "1700": 5},
}

NOT_FOUND_PAYLOAD = {"error": {"message": "not found", "code": 404}}


class FakeClock:
    """Monotonic clock whose sleep advances time instantly."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds
        await asyncio.sleep(0)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def limiter(clock: FakeClock) -> TokenBucketRateLimiter:
    return TokenBucketRateLimiter(60, 60.0, clock=clock, sleep=clock.sleep)


@pytest.fixture
def summoner_payload() -> dict:
    return copy.deepcopy(SUMMONER_PAYLOAD)


@pytest.fixture
def distribution_payload() -> dict:
    return copy.deepcopy(DISTRIBUTION_PAYLOAD)


def json_response(status_code: int, payload: Any) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode())


class RecordingHandler:
    """MockTransport handler that answers from a callable and keeps every request."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]) -> None:
        self.respond = respond
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)


@pytest.fixture
def make_client(limiter: TokenBucketRateLimiter):
    """Build a client whose HTTP traffic goes to ``respond`` instead of the network."""

    def _make(respond: Callable[[httpx.Request], httpx.Response]) -> WhatIsMyMMRClient:
        handler = respond if isinstance(respond, RecordingHandler) else RecordingHandler(respond)
        client = WhatIsMyMMRClient(limiter=limiter, transport=httpx.MockTransport(handler))
        client.handler = handler
        return client

    return _make
