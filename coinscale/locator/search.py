"""
Ternary search for the one counterfeit coin.

Each weighing splits the candidates into three groups: the first two thirds go
on the pans, the rest stay off the scale. Whichever group the scale implicates
(or the off-scale group when it balances) becomes the next candidate set, so a
population of 3^k coins is solved in k weighings.
"""

from functools import lru_cache
from typing import Sequence

from coinscale.adapters.scale.base import WeighingOracle
from coinscale.locator.contracts import ComparisonOutcome
from coinscale.locator.errors import InvalidPopulation, OracleFailure


@lru_cache(maxsize=1024)
def is_resolvable(n: int) -> bool:
    """True if a population of n coins only ever reduces to groups of 1 or 3."""
    if n in (1, 3):
        return True
    if n < 3:
        return False
    g = n // 3
    return is_resolvable(g) and is_resolvable(n - 2 * g)


@lru_cache(maxsize=1024)
def max_weighings(n: int) -> int:
    """Worst-case number of weighings for a resolvable population of n coins."""
    if not is_resolvable(n):
        raise InvalidPopulation(f"cannot resolve a population of {n} coins")
    if n == 1:
        return 0
    if n == 3:
        return 1
    g = n // 3
    return 1 + max(max_weighings(g), max_weighings(n - 2 * g))


def split(coins: Sequence[int]):
    """First third, second third, remainder. The remainder absorbs any surplus."""
    g = len(coins) // 3
    return list(coins[:g]), list(coins[g:2 * g]), list(coins[2 * g:])


class CounterfeitLocator:
    def __init__(self, oracle: WeighingOracle):
        self.oracle = oracle

    def locate(self, coins: Sequence[int]) -> int:
        coins = list(coins)
        self.validate(coins)
        return self._search(coins)

    @staticmethod
    def validate(coins: Sequence[int]):
        if not coins:
            raise InvalidPopulation("no coins to search")
        if len(set(coins)) != len(coins):
            raise InvalidPopulation(f"duplicate coin ids in {list(coins)}")
        if not is_resolvable(len(coins)):
            raise InvalidPopulation(
                f"a population of {len(coins)} coins does not reduce to groups of 1 or 3"
            )

    def _search(self, coins: list) -> int:
        if len(coins) == 1:
            return coins[0]

        if len(coins) == 3:
            outcome = self._compare([coins[0]], [coins[1]])
            if outcome is ComparisonOutcome.BALANCED:
                return coins[2]
            if outcome is ComparisonOutcome.LEFT:
                return coins[0]
            return coins[1]

        one, two, three = split(coins)
        outcome = self._compare(one, two)
        if outcome is ComparisonOutcome.BALANCED:
            return self._search(three)
        if outcome is ComparisonOutcome.LEFT:
            return self._search(one)
        return self._search(two)

    def _compare(self, left: list, right: list) -> ComparisonOutcome:
        # oracle exceptions propagate as-is; a weighing is never retried
        outcome = self.oracle.compare(left, right)
        if not isinstance(outcome, ComparisonOutcome):
            raise OracleFailure(f"scale returned {outcome!r} for {left} vs {right}")
        return outcome
