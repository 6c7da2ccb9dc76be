import random
from typing import List, Optional

from coinscale.adapters.scale.base import WeighingOracle
from coinscale.locator.contracts import ComparisonOutcome
from coinscale.locator.errors import OracleFailure


class MockScale(WeighingOracle):
    """In-process balance with one light coin. Stands in for the challenge page."""

    def __init__(self, status_store, fake: Optional[int] = None, coins: int = 9):
        self.status = status_store
        self.coins = coins
        self.fake = fake if fake is not None else random.randrange(coins)
        if not 0 <= self.fake < coins:
            raise ValueError(f"fake coin must be in the range [0, {coins})")
        self.count = 0
        self._history: List[str] = []

    def _check(self, group: List[int]):
        for coin in group:
            if not 0 <= coin < self.coins:
                raise OracleFailure(f"coin id must be in the range [0, {self.coins}), got {coin}")

    def compare(self, left: List[int], right: List[int]) -> ComparisonOutcome:
        self._check(left)
        self._check(right)
        if len(left) != len(right) or set(left) & set(right):
            raise OracleFailure(f"pans must hold disjoint groups of equal size: {left} vs {right}")

        if self.fake in left:
            outcome = ComparisonOutcome.LEFT
        elif self.fake in right:
            outcome = ComparisonOutcome.RIGHT
        else:
            outcome = ComparisonOutcome.BALANCED
        self.count += 1
        line = f"{left} {outcome.value} {right}"
        self._history.append(line)
        self.status.log(f"mock_scale: weigh #{self.count} {line}")
        return outcome

    def reset(self):
        self.status.log("mock_scale: reset")

    def select(self, coin: int) -> str:
        self._check([coin])
        msg = "Yay! You find it!" if coin == self.fake else "Oops! Try Again!"
        self.status.log(f"mock_scale: select {coin} -> {msg}")
        return msg

    def weighings(self) -> List[str]:
        return list(self._history)

    def get_status(self) -> dict:
        return {"ok": True, "coins": self.coins, "weighings": self.count}
