import pytest

from coinscale.locator.contracts import ComparisonOutcome
from coinscale.locator.errors import InvalidPopulation, OracleFailure
from coinscale.locator.search import CounterfeitLocator, is_resolvable, max_weighings, split

from conftest import FakeOracle


class TestLocate:
    @pytest.mark.parametrize("n", [1, 3, 5, 9, 11, 15, 27, 81])
    def test_finds_every_position(self, n):
        coins = list(range(n))
        for fake in coins:
            oracle = FakeOracle(fake)
            assert CounterfeitLocator(oracle).locate(coins) == fake
            assert len(oracle.calls) <= max_weighings(n)

    def test_arbitrary_ids(self):
        coins = [40, 12, 7, 99, 3, 18, 21, 64, 5]
        oracle = FakeOracle(64)
        assert CounterfeitLocator(oracle).locate(coins) == 64

    def test_single_coin_needs_no_weighing(self):
        oracle = FakeOracle(5)
        assert CounterfeitLocator(oracle).locate([5]) == 5
        assert oracle.calls == []

    def test_three_coins_balanced(self):
        oracle = FakeOracle(2)
        assert CounterfeitLocator(oracle).locate([0, 1, 2]) == 2
        assert oracle.calls == [([0], [1])]

    def test_three_coins_left(self):
        oracle = FakeOracle(0)
        assert CounterfeitLocator(oracle).locate([0, 1, 2]) == 0
        assert oracle.calls == [([0], [1])]

    def test_three_coins_right(self):
        oracle = FakeOracle(1)
        assert CounterfeitLocator(oracle).locate([0, 1, 2]) == 1

    def test_nine_coins_last_third(self):
        oracle = FakeOracle(7)
        assert CounterfeitLocator(oracle).locate(list(range(9))) == 7
        assert oracle.calls == [([0, 1, 2], [3, 4, 5]), ([6], [7])]

    @pytest.mark.parametrize("k", [1, 2, 3, 4, 5])
    def test_power_of_three_takes_k_weighings(self, k):
        n = 3 ** k
        for fake in (0, n // 2, n - 1):
            oracle = FakeOracle(fake)
            CounterfeitLocator(oracle).locate(list(range(n)))
            assert len(oracle.calls) == k

    def test_pans_are_equal_and_disjoint(self):
        oracle = FakeOracle(10)
        CounterfeitLocator(oracle).locate(list(range(11)))
        for left, right in oracle.calls:
            assert len(left) == len(right)
            assert not set(left) & set(right)


class TestInvalidPopulation:
    @pytest.mark.parametrize("coins", [[], [0, 1], [0, 1, 2, 3], list(range(6)), list(range(10))])
    def test_rejected_before_weighing(self, coins):
        oracle = FakeOracle(0)
        with pytest.raises(InvalidPopulation):
            CounterfeitLocator(oracle).locate(coins)
        assert oracle.calls == []

    def test_duplicates(self):
        oracle = FakeOracle(1)
        with pytest.raises(InvalidPopulation, match="duplicate"):
            CounterfeitLocator(oracle).locate([1, 1, 2])
        assert oracle.calls == []


class TestOracleFailure:
    @pytest.mark.parametrize("depth", [1, 2, 3])
    def test_failure_propagates_at_any_depth(self, depth):
        err = OracleFailure("scale unreachable")
        oracle = FakeOracle(26, fail_at=depth, error=err)
        with pytest.raises(OracleFailure) as exc:
            CounterfeitLocator(oracle).locate(list(range(27)))
        assert exc.value is err
        assert len(oracle.calls) == depth

    def test_non_outcome_result(self):
        class Sloppy(FakeOracle):
            def compare(self, left, right):
                super().compare(left, right)
                return "="

        oracle = Sloppy(0)
        with pytest.raises(OracleFailure):
            CounterfeitLocator(oracle).locate([0, 1, 2])
        assert len(oracle.calls) == 1


class TestHelpers:
    def test_is_resolvable(self):
        assert [n for n in range(0, 30) if is_resolvable(n)] == [1, 3, 5, 9, 11, 15, 27, 29]

    def test_max_weighings(self):
        assert max_weighings(1) == 0
        assert max_weighings(3) == 1
        assert max_weighings(5) == 2
        assert max_weighings(9) == 2
        assert max_weighings(81) == 4

    def test_max_weighings_unresolvable(self):
        with pytest.raises(InvalidPopulation):
            max_weighings(2)

    def test_split_order(self):
        assert split([9, 8, 7, 6, 5, 4, 3, 2, 1, 0, 10]) == ([9, 8, 7], [6, 5, 4], [3, 2, 1, 0, 10])


class TestOutcomeParse:
    @pytest.mark.parametrize("text,expected", [
        ("=", ComparisonOutcome.BALANCED),
        ("<", ComparisonOutcome.LEFT),
        (" > ", ComparisonOutcome.RIGHT),
    ])
    def test_symbols(self, text, expected):
        assert ComparisonOutcome.parse(text) is expected

    @pytest.mark.parametrize("text", ["", "?", "left", None, 1, ["<"]])
    def test_unknown_text_is_a_failure(self, text):
        with pytest.raises(OracleFailure):
            ComparisonOutcome.parse(text)


def test_size_caches_are_bounded():
    assert is_resolvable.cache_info().maxsize is not None
    assert max_weighings.cache_info().maxsize is not None
