"""Shared fixtures: an isolated request gate on a fake clock."""

from __future__ import annotations

import pytest

from eksi import Eksi
from eksi.scraper.gate import RequestGate

from tests.pages import BASE_URL, FINGERPRINT


class FakeClock:
    """A monotonic clock that only moves when something sleeps on it."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def gate(clock: FakeClock) -> RequestGate:
    return RequestGate(
        min_interval=0.25,
        cooldown=5.0,
        max_retries=5,
        clock=clock,
        sleep=clock.sleep,
    )


@pytest.fixture
def eksi(gate: RequestGate):
    client = Eksi(gate=gate, fingerprint=FINGERPRINT, base_url=BASE_URL)
    yield client
    client.close()
