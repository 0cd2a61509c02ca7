"""
Date adjustment functions for schedule generation.
"""

from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from ficcmc.conventions.calendars import Calendar
from ficcmc.conventions.types import BusinessDayAdjustment


def _roll(dt: date, calendar: Calendar, step: int) -> date:
    while not calendar.is_business_day(dt):
        dt += timedelta(days=step)
    return dt


def adjust_date(dt: date, adjustment: BusinessDayAdjustment, calendar: Calendar) -> date:
    """Apply business day adjustment to a date."""
    if adjustment == BusinessDayAdjustment.NO_ADJUSTMENT:
        return dt
    if adjustment == BusinessDayAdjustment.FOLLOWING:
        return _roll(dt, calendar, 1)
    if adjustment == BusinessDayAdjustment.PRECEDING:
        return _roll(dt, calendar, -1)
    if adjustment == BusinessDayAdjustment.MODIFIED_FOLLOWING:
        adjusted = _roll(dt, calendar, 1)
        # Month changed: use preceding instead
        return adjusted if adjusted.month == dt.month else _roll(dt, calendar, -1)
    if adjustment == BusinessDayAdjustment.MODIFIED_PRECEDING:
        adjusted = _roll(dt, calendar, -1)
        return adjusted if adjusted.month == dt.month else _roll(dt, calendar, 1)
    raise ValueError(f"Unknown business day adjustment: {adjustment}")


def is_end_of_month(dt: date) -> bool:
    """Check if date is the last calendar day of its month."""
    return (dt + timedelta(days=1)).month != dt.month


def add_months(dt: date, months: int, end_of_month_rule: bool = True) -> date:
    """Add months to a date.

    Days past the end of the target month are clipped to month end. With the
    end-of-month rule, a month-end date stays on month end.
    """
    shifted = dt + relativedelta(months=months)
    if end_of_month_rule and is_end_of_month(dt):
        return shifted + relativedelta(day=31)
    return shifted
