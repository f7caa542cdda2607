"""
Tests for engine/calculator.py

Run with: pytest tests/test_calculator.py -v
"""

import pytest

from arbcalc import BookmakerLeg, CalculationResult, calculate_arbitrage


class TestTwoWayArbitrage:
    """Two bookmakers with a genuine arbitrage and nothing pinned."""

    @pytest.fixture
    def result(self):
        return calculate_arbitrage([{"finalOdd": 2.10}, {"finalOdd": 2.05}])

    def test_percentage_and_flag(self, result):
        # 1/2.10 + 1/2.05 = 0.96399
        assert result.arbitrage_percentage == pytest.approx(96.40)
        assert result.is_arbitrage is True

    def test_default_investment(self, result):
        assert result.total_investment == pytest.approx(100)
        assert result.distributed_stakes == [49.40, 50.60]

    def test_returns_are_balanced(self, result):
        assert len(result.returns) == 2
        assert result.returns[0] == pytest.approx(result.returns[1], abs=0.02)
        assert result.profit > 0
        assert result.profit == min(result.returns)
        assert result.profit == pytest.approx(3.73)
        assert result.profit_percentage == pytest.approx(3.73)

    def test_camel_case_dump(self, result):
        payload = result.model_dump(by_alias=True)
        assert set(payload) == {
            "arbitragePercentage",
            "isArbitrage",
            "totalInvestment",
            "distributedStakes",
            "returns",
            "profit",
            "profitPercentage",
        }


class TestDegenerateInput:
    """Any unusable odd zeroes the whole result."""

    @pytest.mark.parametrize(
        "bookmakers",
        [
            [{"finalOdd": 0}, {"finalOdd": 2.0}],
            [{"finalOdd": 2.0}, {"finalOdd": "abc"}],
            [{"finalOdd": -1.5}, {"finalOdd": 2.0}],
            [{"finalOdd": ""}, {"finalOdd": 2.0}],
            [{"finalOdd": 2.0}, {"finalOdd": 1.0, "isLayBet": True}],
            [{"finalOdd": 2.0}, {}],
            [{"finalOdd": 2.0}, None],
            [],
        ],
    )
    def test_zeroed(self, bookmakers):
        result = calculate_arbitrage(bookmakers)
        assert result == CalculationResult.zeroed()
        assert result.model_dump(by_alias=True) == {
            "arbitragePercentage": 0,
            "isArbitrage": False,
            "totalInvestment": 0,
            "distributedStakes": [],
            "returns": [],
            "profit": 0,
            "profitPercentage": 0,
        }


class TestStrategies:
    """End-to-end checks of each stake strategy."""

    def test_fixed_stake_back_only(self):
        result = calculate_arbitrage([
            {"finalOdd": 3.2, "isStakeFixed": True, "stake": 100},
            {"finalOdd": 3.5},
            {"finalOdd": 3.6},
        ])
        assert result.distributed_stakes == [100, 91.43, 88.89]
        assert result.total_investment == pytest.approx(280.32)
        for ret in result.returns:
            assert ret == pytest.approx(result.returns[0], abs=0.02)

    def test_fixed_stake_with_manual_override(self):
        result = calculate_arbitrage([
            {"finalOdd": 2.1, "isStakeFixed": True, "stake": 100},
            {"finalOdd": 2.05, "manualStake": 50},
        ])
        assert result.distributed_stakes == [100, 50]
        assert result.total_investment == pytest.approx(150)
        # 100 * 2.1 - 150; 50 * 2.05 - 150
        assert result.returns == [60, -47.5]
        assert result.profit == -47.5

    def test_manual_stakes_without_fill_in(self):
        result = calculate_arbitrage([
            {"finalOdd": 2.1, "manualStake": 40},
            {"finalOdd": 2.05},
        ])
        assert result.distributed_stakes == [40, 0]
        assert result.total_investment == pytest.approx(40)

    def test_manual_lay_counts_liability(self):
        result = calculate_arbitrage([
            {"finalOdd": 2.1, "manualStake": 40},
            {"finalOdd": 3.0, "isLayBet": True, "manualStake": 25},
        ])
        assert result.total_investment == pytest.approx(90)

    def test_proportional_with_lay_hits_target(self):
        result = calculate_arbitrage([
            {"finalOdd": 2.1},
            {"finalOdd": 3.0, "isLayBet": True, "commissionRate": 5},
        ])
        assert result.total_investment == pytest.approx(100, abs=0.02)

    @pytest.mark.parametrize(
        "back_odd, lay_odd",
        [(1.17, 21.0), (1.2, 1000.0)],
    )
    def test_proportional_with_long_lay_hits_target(self, back_odd, lay_odd):
        # Tiny lay stakes carry large liabilities; cent-rounded stakes would miss
        result = calculate_arbitrage([
            {"finalOdd": back_odd},
            {"finalOdd": lay_odd, "isLayBet": True},
        ])
        assert result.total_investment == pytest.approx(100, abs=0.02)

    def test_fixed_stake_odd_amount_returns_balanced(self):
        result = calculate_arbitrage([
            {"finalOdd": 2.7, "isStakeFixed": True, "stake": 7.77},
            {"finalOdd": 1.3},
            {"finalOdd": 23.0},
        ])
        assert result.distributed_stakes[0] == 7.77
        for ret in result.returns:
            assert ret == pytest.approx(result.returns[0], abs=0.02)

    def test_custom_target_investment(self):
        result = calculate_arbitrage(
            [{"finalOdd": 2.0}, {"finalOdd": 2.0}], target_investment=500
        )
        assert result.distributed_stakes == [250, 250]
        assert result.total_investment == 500
        assert result.profit == 0
        assert result.is_arbitrage is False


class TestLayRoundTrip:
    """A winning lay leg returns stake * (1 - commission)."""

    def test_lay_winning_return(self):
        result = calculate_arbitrage([
            {"finalOdd": 2.5, "manualStake": 20},
            {"finalOdd": 3.0, "isLayBet": True, "commissionRate": 5, "manualStake": 50},
        ])
        # Lay wins: 50 * 0.95 - 20 (back stake lost)
        assert result.returns[1] == pytest.approx(27.5)


class TestPurity:
    def test_idempotent(self):
        bookmakers = [
            {"finalOdd": "2.10"},
            {"finalOdd": 3.0, "isLayBet": True, "commissionRate": 2},
            {"finalOdd": 5.0, "freebet": True},
        ]
        first = calculate_arbitrage(bookmakers)
        second = calculate_arbitrage(bookmakers)
        assert first.model_dump_json() == second.model_dump_json()

    def test_input_not_mutated(self):
        bookmakers = [{"finalOdd": "2.10"}, {"finalOdd": 2.05}]
        calculate_arbitrage(bookmakers)
        assert bookmakers == [{"finalOdd": "2.10"}, {"finalOdd": 2.05}]

    def test_accepts_models(self):
        legs = [BookmakerLeg(final_odd=2.10), BookmakerLeg(final_odd=2.05)]
        assert calculate_arbitrage(legs) == calculate_arbitrage(
            [{"finalOdd": 2.10}, {"finalOdd": 2.05}]
        )


@pytest.mark.parametrize(
    "odds",
    [[2.0, 2.0], [2.2, 1.9], [1.5, 3.5], [3.2, 3.5, 3.6], [1.8, 3.9, 5.5]],
)
def test_flag_matches_percentage(odds):
    result = calculate_arbitrage([{"finalOdd": o} for o in odds])
    assert result.is_arbitrage == (result.arbitrage_percentage < 100)
