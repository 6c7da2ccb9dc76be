from abc import ABC, abstractmethod
from typing import List

from coinscale.locator.contracts import ComparisonOutcome


class WeighingOracle(ABC):
    @abstractmethod
    def compare(self, left: List[int], right: List[int]) -> ComparisonOutcome:
        """Weigh two disjoint, equal-size groups and report which side holds the fake."""
        ...

    def reset(self):
        """Clear both pans."""

    def select(self, coin: int) -> str:
        """Report `coin` as the fake. Returns the scale's verdict message."""
        raise NotImplementedError

    def weighings(self) -> List[str]:
        return []

    def get_status(self) -> dict:
        return {}
