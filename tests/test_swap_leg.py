import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from ficcmc.errors import ArgumentError, DegenerateScheduleWarning, UnsupportedVariantError
from ficcmc.products import (
    AccruingNotional,
    ConstantNotional,
    FixedCoupon,
    FloatingRateIndex,
    LinearCombinationIndex,
    Period,
    SwapLeg,
    build_periods,
)
from ficcmc.schedule import Schedule

EURIBOR = FloatingRateIndex("EURIBOR", 0.0, 1.0)


@pytest.fixture
def degenerate_schedule():
    return Schedule.from_arrays([0, 1, 1, 2], [1, 1, 2, 3], [1, 0, 1, 1])


def test_one_period_per_schedule_period(annual_schedule):
    leg = build_periods(annual_schedule, 100.0, None, 0.02)
    assert len(leg) == 4
    assert all(isinstance(p, Period) for p in leg)
    assert [p.fixing_time for p in leg] == [0.0, 1.0, 2.0, 3.0]
    assert [p.payment_time for p in leg] == [1.0, 2.0, 3.0, 4.0]


def test_zero_length_period_dropped(degenerate_schedule):
    with pytest.warns(DegenerateScheduleWarning, match="period 1"):
        leg = build_periods(degenerate_schedule, 100.0, None, [0.01, 0.02, 0.03, 0.04])
    assert len(leg) == 3
    assert [p.coupon.rate for p in leg] == [0.01, 0.03, 0.04]
    assert [p.fixing_time for p in leg] == [0.0, 1.0, 2.0]


def test_zero_length_period_rejected_in_strict_mode(degenerate_schedule):
    with pytest.raises(ArgumentError, match="zero-length"):
        build_periods(degenerate_schedule, 100.0, None, 0.02, strict=True)


@pytest.mark.parametrize(
    "notional, spread",
    [
        ([100.0, 100.0, 100.0], 0.02),
        (100.0, [0.01, 0.02]),
        ([100.0] * 5, [0.01] * 4),
    ],
)
def test_array_length_mismatch(annual_schedule, notional, spread):
    with pytest.raises(ArgumentError, match="must match number of periods"):
        build_periods(annual_schedule, notional, None, spread)


def test_mismatch_rejected_before_construction(annual_schedule, monkeypatch):
    built = []
    monkeypatch.setattr(
        "ficcmc.products.swap_leg.Period",
        lambda **kwargs: built.append(kwargs),
    )
    with pytest.raises(ArgumentError):
        build_periods(annual_schedule, 100.0, None, [0.01, 0.02, 0.03])
    assert built == []


def test_fixed_leg_coupons_equal_spreads(annual_schedule):
    spreads = [0.01, 0.02, 0.03, 0.04]
    leg = build_periods(annual_schedule, 100.0, None, spreads)
    assert [p.coupon for p in leg] == [FixedCoupon(s) for s in spreads]


def test_spread_wraps_index(annual_schedule):
    leg = build_periods(annual_schedule, 100.0, EURIBOR, 0.001)
    for period in leg:
        assert period.coupon == LinearCombinationIndex(1.0, EURIBOR, 1.0, FixedCoupon(0.001))


def test_zero_spread_uses_index_directly(annual_schedule):
    leg = build_periods(annual_schedule, 100.0, EURIBOR, 0.0)
    assert all(p.coupon is EURIBOR for p in leg)


def test_unsupported_index(annual_schedule):
    with pytest.raises(UnsupportedVariantError, match="str"):
        build_periods(annual_schedule, 100.0, "EURIBOR", 0.0)


def test_per_period_notionals(annual_schedule, zero_rate_model):
    leg = build_periods(annual_schedule, [100.0, 200.0, ConstantNotional(300.0), 400.0], None, 0.01)
    assert [p.notional.amount for p in leg] == [100.0, 200.0, 300.0, 400.0]
    assert_allclose(leg.value(0.0, zero_rate_model).values, 10.0)


def test_accrual_chaining(annual_schedule, zero_rate_model):
    leg = build_periods(annual_schedule, 100.0, None, 0.02, accrue_notional=True)
    periods = list(leg)

    assert periods[0].notional == ConstantNotional(100.0)
    for previous, period in zip(periods[:-1], periods[1:]):
        assert isinstance(period.notional, AccruingNotional)
        assert period.notional.previous_period is previous

    second = periods[1].notional.value(periods[1].period_start, zero_rate_model)
    assert_allclose(second.values, 100.0 * 1.02)
    last = periods[3].notional.value(periods[3].period_start, zero_rate_model)
    assert_allclose(last.values, 100.0 * 1.02**3)


def test_accrual_without_coupon_payment(annual_schedule, zero_rate_model):
    leg = build_periods(
        annual_schedule, 100.0, None, 0.02, pay_coupon=False, accrue_notional=True
    )
    assert_allclose(leg.value(0.0, zero_rate_model).values, 0.0)
    last = leg[3].notional.value(leg[3].period_start, zero_rate_model)
    assert_allclose(last.values, 100.0 * 1.02**3)


def test_accrual_requires_single_notional(annual_schedule):
    with pytest.raises(ArgumentError, match="single initial notional"):
        build_periods(annual_schedule, [100.0] * 4, None, 0.02, accrue_notional=True)


def test_end_to_end_fixed_leg(annual_schedule, zero_rate_model):
    leg = SwapLeg(annual_schedule, ConstantNotional(100.0), None, 0.02)
    for period in leg.periods:
        assert_allclose(period.value(0.0, zero_rate_model).values, 2.0)
    value = leg.value(0.0, zero_rate_model)
    assert_allclose(value.values, [8.0] * zero_rate_model.num_paths)
    assert value.time == 0.0


def test_floating_leg_against_curve(annual_schedule, curve_model):
    leg = SwapLeg(annual_schedule, 100.0, EURIBOR, 0.001)
    forward = math.exp(0.035) - 1.0
    expected = sum(100.0 * (forward + 0.001) * math.exp(-0.03 * t) for t in (1, 2, 3, 4))
    assert leg.price(curve_model) == pytest.approx(expected, rel=1e-12)


def test_leg_value_after_payments(annual_schedule, zero_rate_model):
    leg = SwapLeg(annual_schedule, 100.0, None, 0.02)
    assert_allclose(leg.value(2.0, zero_rate_model).values, 6.0)
    assert_allclose(leg.value(2.5, zero_rate_model).values, 4.0)


def test_cashflows(annual_schedule, zero_rate_model):
    leg = SwapLeg(annual_schedule, 100.0, None, 0.02)
    cashflows = leg.cashflows(zero_rate_model)
    assert list(cashflows.columns) == [
        "period",
        "fixing_time",
        "payment_time",
        "period_length",
        "rate",
        "notional",
        "coupon",
        "value",
    ]
    assert len(cashflows) == 4
    assert np.allclose(cashflows["coupon"], 2.0)
    assert cashflows["value"].sum() == pytest.approx(8.0)


def test_leg_is_reusable_across_models(annual_schedule, zero_rate_model, curve_model):
    leg = SwapLeg(annual_schedule, 100.0, EURIBOR, 0.0)
    first = leg.value(0.0, curve_model)
    leg.value(0.0, zero_rate_model)
    assert_allclose(leg.value(0.0, curve_model).values, first.values)


def test_long_accruing_leg(zero_rate_model):
    num_periods = 1500
    schedule = Schedule.from_arrays(
        [i / 365 for i in range(num_periods)],
        [(i + 1) / 365 for i in range(num_periods)],
        [1 / 365] * num_periods,
    )
    leg = build_periods(schedule, 100.0, None, 0.0365, accrue_notional=True)

    last = leg[num_periods - 1]
    growth = 1.0 + 0.0365 / 365
    assert_allclose(
        last.notional.value(last.period_start, zero_rate_model).values,
        100.0 * growth ** (num_periods - 1),
        rtol=1e-9,
    )
    assert_allclose(
        leg.value(0.0, zero_rate_model).values,
        100.0 * (growth**num_periods - 1.0),
        rtol=1e-9,
    )


def test_cashflows_of_unpaid_coupons(annual_schedule, zero_rate_model):
    leg = SwapLeg(annual_schedule, 100.0, None, 0.02, pay_coupon=False, accrue_notional=True)
    cashflows = leg.cashflows(zero_rate_model)
    assert np.allclose(cashflows["coupon"], 0.0)
    assert np.allclose(cashflows["rate"], 0.02)
    assert cashflows["notional"].tolist() == pytest.approx([100.0 * 1.02**i for i in range(4)])
