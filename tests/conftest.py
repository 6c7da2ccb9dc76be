import os

import pytest

# api.py builds its scale at import time
os.environ["SCALE_ADAPTER"] = "mock"
os.environ["COIN_COUNT"] = "9"
os.environ["MOCK_FAKE_COIN"] = "4"

from coinscale.adapters.scale.base import WeighingOracle
from coinscale.locator.contracts import ComparisonOutcome
from coinscale.locator.errors import OracleFailure
from coinscale.services.status_store import StatusStore


class FakeOracle(WeighingOracle):
    """Reports which group holds `fake`; optionally fails on the n-th weighing."""

    def __init__(self, fake, fail_at=None, error=None):
        self.fake = fake
        self.fail_at = fail_at
        self.error = error or OracleFailure("scale unreachable")
        self.calls = []

    def compare(self, left, right):
        self.calls.append((list(left), list(right)))
        if self.fail_at is not None and len(self.calls) == self.fail_at:
            raise self.error
        if self.fake in left:
            return ComparisonOutcome.LEFT
        if self.fake in right:
            return ComparisonOutcome.RIGHT
        return ComparisonOutcome.BALANCED

    def select(self, coin):
        return "found" if coin == self.fake else "wrong"


@pytest.fixture
def status():
    return StatusStore()
