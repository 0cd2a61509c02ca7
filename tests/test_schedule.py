from datetime import date

import pytest

from ficcmc.conventions import BusinessDayAdjustment, CalendarType, Frequency, StubType, get_calendar
from ficcmc.errors import ArgumentError
from ficcmc.schedule import (
    Schedule,
    ScheduleDescriptor,
    SchedulePeriod,
    add_months,
    adjust_date,
    is_end_of_month,
)

WEEKEND = get_calendar(CalendarType.WEEKEND)


class TestSchedule:
    def test_from_arrays(self):
        schedule = Schedule.from_arrays([0, 1], [1, 2], [1.0, 0.5])
        assert schedule.num_periods == len(schedule) == 2
        assert schedule[1] == SchedulePeriod(1.0, 2.0, 1.0, 2.0, 0.5)
        assert schedule.fixing(0) == 0.0
        assert schedule.payment(1) == 2.0
        assert schedule.period_start(1) == 1.0
        assert schedule.period_end(0) == 1.0
        assert schedule.period_length(1) == 0.5

    def test_length_mismatch(self):
        with pytest.raises(ArgumentError, match="equal lengths"):
            Schedule.from_arrays([0, 1], [1, 2], [1.0])

    def test_fixing_after_payment(self):
        with pytest.raises(ArgumentError, match="after payment time"):
            Schedule.from_arrays([0, 2.5], [1, 2], [1, 1])

    def test_unordered_periods(self):
        with pytest.raises(ArgumentError, match="not ordered"):
            Schedule.from_arrays([1, 0], [2, 1], [1, 1])


@pytest.mark.parametrize(
    "adjustment, unadjusted, expected",
    [
        (BusinessDayAdjustment.NO_ADJUSTMENT, date(2024, 6, 1), date(2024, 6, 1)),
        (BusinessDayAdjustment.FOLLOWING, date(2024, 6, 1), date(2024, 6, 3)),
        (BusinessDayAdjustment.PRECEDING, date(2024, 6, 1), date(2024, 5, 31)),
        (BusinessDayAdjustment.MODIFIED_FOLLOWING, date(2024, 6, 1), date(2024, 6, 3)),
        (BusinessDayAdjustment.MODIFIED_FOLLOWING, date(2024, 8, 31), date(2024, 8, 30)),
        (BusinessDayAdjustment.MODIFIED_PRECEDING, date(2024, 6, 1), date(2024, 6, 3)),
        (BusinessDayAdjustment.FOLLOWING, date(2024, 6, 5), date(2024, 6, 5)),
    ],
)
def test_adjust_date(adjustment, unadjusted, expected):
    assert adjust_date(unadjusted, adjustment, WEEKEND) == expected


@pytest.mark.parametrize(
    "start, months, eom, expected",
    [
        (date(2024, 1, 31), 1, True, date(2024, 2, 29)),
        (date(2024, 2, 29), 1, True, date(2024, 3, 31)),
        (date(2024, 2, 29), 1, False, date(2024, 3, 29)),
        (date(2024, 1, 15), 6, True, date(2024, 7, 15)),
        (date(2024, 3, 31), -1, True, date(2024, 2, 29)),
    ],
)
def test_add_months(start, months, eom, expected):
    assert add_months(start, months, eom) == expected


def test_is_end_of_month():
    assert is_end_of_month(date(2023, 2, 28))
    assert not is_end_of_month(date(2024, 2, 28))


def descriptor(maturity, stub_type, **kwargs):
    fields = dict(
        frequency=Frequency.SEMIANNUAL,
        business_day_adjustment=BusinessDayAdjustment.NO_ADJUSTMENT,
        calendar=CalendarType.WEEKEND,
        fixing_lag_days=0,
        stub_type=stub_type,
    )
    fields.update(kwargs)
    return ScheduleDescriptor(date(2024, 1, 15), maturity, **fields)


class TestScheduleDescriptor:
    def test_regular_schedule(self):
        periods = descriptor(date(2026, 1, 15), StubType.NO_STUB).generate_periods()
        assert [p.end_date for p in periods] == [
            date(2024, 7, 15),
            date(2025, 1, 15),
            date(2025, 7, 15),
            date(2026, 1, 15),
        ]
        assert not any(p.is_stub for p in periods)

    def test_no_stub_rejects_irregular_dates(self):
        with pytest.raises(ValueError, match="no-stub"):
            descriptor(date(2025, 3, 15), StubType.NO_STUB).generate_periods()

    @pytest.mark.parametrize(
        "stub_type, boundaries, stub_index",
        [
            (StubType.SHORT_FINAL, [date(2024, 7, 15), date(2025, 1, 15)], -1),
            (StubType.LONG_FINAL, [date(2024, 7, 15)], -1),
            (StubType.SHORT_INITIAL, [date(2024, 3, 15), date(2024, 9, 15)], 0),
            (StubType.LONG_INITIAL, [date(2024, 9, 15)], 0),
        ],
    )
    def test_stubs(self, stub_type, boundaries, stub_index):
        periods = descriptor(date(2025, 3, 15), stub_type).generate_periods()
        assert [p.start_date for p in periods] == [date(2024, 1, 15)] + boundaries
        assert periods[-1].end_date == date(2025, 3, 15)
        assert periods[stub_index].is_stub
        assert sum(p.is_stub for p in periods) == 1

    def test_business_day_adjustment(self):
        schedule = ScheduleDescriptor(
            date(2024, 3, 31),
            date(2025, 3, 31),
            Frequency.QUARTERLY,
            calendar=CalendarType.TARGET,
        )
        calendar = get_calendar(CalendarType.TARGET)
        periods = schedule.generate_periods()
        assert len(periods) == 4
        for period in periods:
            assert calendar.is_business_day(period.start_date)
            assert calendar.is_business_day(period.end_date)
            assert calendar.is_business_day(period.fixing_date)
            assert period.fixing_date < period.start_date
        # 2024-03-31 is a Sunday and the next business day falls in April
        assert periods[0].start_date == date(2024, 3, 28)

    def test_start_after_maturity(self):
        with pytest.raises(ValueError, match="must be before maturity"):
            descriptor(date(2024, 1, 15), StubType.SHORT_FINAL)

    def test_get_schedule(self):
        dated = descriptor(
            date(2025, 1, 15),
            StubType.SHORT_FINAL,
            fixing_lag_days=2,
            payment_lag_days=2,
            day_count="ACT/360",
        )
        schedule = dated.get_schedule(date(2024, 1, 15))
        assert len(schedule) == 2
        first = schedule[0]
        assert first.period_start == 0.0
        assert first.period_end == pytest.approx(182 / 365)
        assert first.fixing_time == pytest.approx(-4 / 365)
        assert first.payment_time == pytest.approx(184 / 365)
        assert first.period_length == pytest.approx(182 / 360)
