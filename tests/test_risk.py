"""Tests for the risk module.

Covers risk amount, lot sizing, take-profit rounding and the per-profile
stop-loss / take-profit table.
"""

import math

import pytest

from blueprint.risk.position_sizer import calculate_lot_size, calculate_risk_amount
from blueprint.risk.rounding import format_fixed, round_half_up
from blueprint.risk.sl_tp import RiskLevels, calculate_tp_pips, risk_levels_for
from blueprint.strategy.models import Profile


# ── Rounding ─────────────────────────────────────────────────────────────


class TestRounding:
    def test_half_rounds_away_from_zero(self):
        assert round_half_up(0.125, 2) == 0.13
        assert round_half_up(2.5) == 3.0
        assert round_half_up(-2.5) == -3.0

    def test_rounds_to_integer_by_default(self):
        assert round_half_up(9.6) == 10.0
        assert round_half_up(9.4) == 9.0

    def test_format_fixed_pads_decimals(self):
        assert format_fixed(10) == "10.00"
        assert format_fixed(0.005) == "0.01"
        assert format_fixed(3.14159, 3) == "3.142"


# ── Risk amount ──────────────────────────────────────────────────────────


class TestRiskAmount:
    def test_one_percent_of_thousand(self):
        assert calculate_risk_amount(1000, 1) == pytest.approx(10.0)

    def test_two_percent_of_two_thousand(self):
        assert calculate_risk_amount(2000, 2) == pytest.approx(40.0)

    def test_rejects_zero_capital(self):
        with pytest.raises(ValueError, match="capital"):
            calculate_risk_amount(0, 1)

    def test_rejects_zero_risk(self):
        with pytest.raises(ValueError, match="risk_pct"):
            calculate_risk_amount(1000, 0)


# ── Lot size ─────────────────────────────────────────────────────────────


class TestLotSize:
    def test_day_trade_lot_size(self):
        """$10 at risk, 20 pip SL → 10 / 30 = 0.33."""
        assert calculate_lot_size(10.0, 20) == 0.33

    def test_scalping_lot_size(self):
        """$40 at risk, 8 pip SL → 40 / 12 = 3.33."""
        assert calculate_lot_size(40.0, 8) == 3.33

    def test_custom_pip_cost(self):
        assert calculate_lot_size(100.0, 20, pip_cost=1.0) == 5.0

    def test_rejects_zero_sl(self):
        with pytest.raises(ValueError, match="sl_distance_pips"):
            calculate_lot_size(10.0, 0)

    def test_rejects_negative_risk(self):
        with pytest.raises(ValueError, match="risk_amount"):
            calculate_lot_size(-1.0, 20)


# ── SL / TP ──────────────────────────────────────────────────────────────


class TestTakeProfit:
    def test_scalping_rounds_up(self):
        """8 × 1.2 = 9.6 → 10."""
        assert calculate_tp_pips(8, 1.2) == 10

    def test_day_trade(self):
        assert calculate_tp_pips(20, 2.0) == 40

    def test_swing(self):
        """45 × 2.8 = 126."""
        assert calculate_tp_pips(45, 2.8) == 126

    def test_rejects_non_positive(self):
        with pytest.raises(ValueError, match="multiplier"):
            calculate_tp_pips(20, 0)


class TestRiskLevels:
    @pytest.mark.parametrize(
        "profile, expected",
        [
            (Profile.SCALPING, RiskLevels(8, 1.2, 10)),
            (Profile.DAY_TRADE, RiskLevels(20, 2.0, 40)),
            (Profile.SWING, RiskLevels(45, 2.8, 126)),
        ],
    )
    def test_profile_table(self, profile, expected):
        assert risk_levels_for(profile) == expected


class TestRoundingMagnitude:
    def test_large_values_pass_through(self):
        assert round_half_up(1e298, 2) == 1e298
        assert format_fixed(12345678.0) == "12345678.00"

    def test_non_finite_values_pass_through(self):
        assert round_half_up(math.inf, 2) == math.inf
        assert math.isnan(round_half_up(math.nan))
