"""
Dated schedule generation.

A :class:`ScheduleDescriptor` holds the calendar and day count conventions
of a leg. It generates business-day adjusted periods and converts them into
the time-offset :class:`Schedule` consumed by products.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Union

from ficcmc.conventions.calendars import get_calendar
from ficcmc.conventions.daycount import ACT_365F, DayCountConvention, get_day_count_convention
from ficcmc.conventions.types import BusinessDayAdjustment, CalendarType, Frequency, StubType

from .adjustments import add_months, adjust_date
from .core import Schedule, SchedulePeriod

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DatedPeriod:
    """A schedule period expressed in calendar dates.

    Attributes:
        start_date: Adjusted accrual start
        end_date: Adjusted accrual end
        fixing_date: Rate fixing date
        payment_date: Payment date
        year_fraction: Accrual fraction under the schedule's day count
        is_stub: Whether the period is irregular
    """

    start_date: date
    end_date: date
    fixing_date: date
    payment_date: date
    year_fraction: float
    is_stub: bool = False


@dataclass(frozen=True)
class ScheduleDescriptor:
    """Conventions of a leg schedule.

    Attributes:
        start_date: Unadjusted effective date
        maturity_date: Unadjusted maturity date
        frequency: Payment frequency
        day_count: Day count for accrual fractions
        business_day_adjustment: Adjustment of period boundaries
        calendar: Holiday calendar
        fixing_lag_days: Business days from fixing to period start
        payment_lag_days: Business days from period end to payment
        stub_type: Placement of an irregular period
        end_of_month_rule: Keep month-end dates on month end
    """

    start_date: date
    maturity_date: date
    frequency: Frequency
    day_count: Union[str, DayCountConvention] = "ACT/360"
    business_day_adjustment: BusinessDayAdjustment = BusinessDayAdjustment.MODIFIED_FOLLOWING
    calendar: CalendarType = CalendarType.TARGET
    fixing_lag_days: int = 2
    payment_lag_days: int = 0
    stub_type: StubType = StubType.SHORT_FINAL
    end_of_month_rule: bool = True

    def __post_init__(self):
        if self.start_date >= self.maturity_date:
            raise ValueError(
                f"Start date {self.start_date} must be before maturity date {self.maturity_date}"
            )
        if self.fixing_lag_days < 0 or self.payment_lag_days < 0:
            raise ValueError("Fixing and payment lags must be non-negative")

    def generate_periods(self) -> List[DatedPeriod]:
        """Generate adjusted periods in chronological order.

        Periods collapsing to a single date after adjustment are skipped.
        """
        calendar = get_calendar(self.calendar)
        day_count = get_day_count_convention(self.day_count)
        unadjusted = self._unadjusted_dates()

        periods = []
        for start_unadj, end_unadj in zip(unadjusted[:-1], unadjusted[1:]):
            start = adjust_date(start_unadj, self.business_day_adjustment, calendar)
            end = adjust_date(end_unadj, self.business_day_adjustment, calendar)
            if start >= end:
                logger.debug("Skipping period %s - %s collapsed by adjustment", start_unadj, end_unadj)
                continue

            fixing = start
            if self.fixing_lag_days > 0:
                fixing = calendar.add_business_days(start, -self.fixing_lag_days)
            payment = end
            if self.payment_lag_days > 0:
                payment = calendar.add_business_days(end, self.payment_lag_days)

            periods.append(
                DatedPeriod(
                    start_date=start,
                    end_date=end,
                    fixing_date=fixing,
                    payment_date=payment,
                    year_fraction=day_count.year_fraction(start, end),
                    is_stub=self._is_stub(start_unadj, end_unadj),
                )
            )
        return periods

    def get_schedule(self, reference_date: date) -> Schedule:
        """Schedule with times as ACT/365F year fractions from ``reference_date``."""

        def to_time(dt: date) -> float:
            return ACT_365F.year_fraction(reference_date, dt)

        return Schedule(
            tuple(
                SchedulePeriod(
                    period_start=to_time(p.start_date),
                    period_end=to_time(p.end_date),
                    fixing_time=to_time(p.fixing_date),
                    payment_time=to_time(p.payment_date),
                    period_length=p.year_fraction,
                )
                for p in self.generate_periods()
            )
        )

    def _shift(self, anchor: date, periods: int) -> date:
        return add_months(anchor, periods * self.frequency.months(), self.end_of_month_rule)

    def _unadjusted_dates(self) -> List[date]:
        start, maturity = self.start_date, self.maturity_date

        if self.stub_type in (StubType.SHORT_INITIAL, StubType.LONG_INITIAL):
            # Regular dates rolled backwards from maturity
            regular = []
            k = 1
            while self._shift(maturity, -k) > start:
                regular.insert(0, self._shift(maturity, -k))
                k += 1
            has_stub = self._shift(maturity, -k) != start
            if self.stub_type == StubType.LONG_INITIAL and has_stub and regular:
                regular = regular[1:]
            return [start] + regular + [maturity]

        # Regular dates rolled forwards from start
        regular = []
        k = 1
        while self._shift(start, k) < maturity:
            regular.append(self._shift(start, k))
            k += 1
        has_stub = self._shift(start, k) != maturity

        if self.stub_type == StubType.NO_STUB and has_stub:
            raise ValueError(
                f"Cannot create no-stub schedule - {start} to {maturity} is not a whole "
                f"number of {self.frequency.name.lower()} periods"
            )
        if self.stub_type == StubType.LONG_FINAL and has_stub and regular:
            regular = regular[:-1]
        return [start] + regular + [maturity]

    def _is_stub(self, start: date, end: date) -> bool:
        return self._shift(start, 1) != end and self._shift(end, -1) != start
