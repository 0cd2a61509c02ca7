"""
Holiday calendars backed by QuantLib.
"""

from datetime import date
from typing import Union

import QuantLib as ql

from .daycount import DateLike, to_ql_date
from .types import CalendarType


def _to_py_date(ql_date: ql.Date) -> date:
    return date(ql_date.year(), ql_date.month(), ql_date.dayOfMonth())


class Calendar:
    """Business day calendar."""

    def __init__(self, name: str, ql_calendar: ql.Calendar):
        self.name = name
        self._ql_calendar = ql_calendar

    def is_business_day(self, dt: DateLike) -> bool:
        return self._ql_calendar.isBusinessDay(to_ql_date(dt))

    def add_business_days(self, start_date: DateLike, days: int) -> date:
        """Move ``days`` business days forward (or back, if negative)."""
        result = self._ql_calendar.advance(to_ql_date(start_date), days, ql.Days)
        return _to_py_date(result)

    def __repr__(self) -> str:
        return f"Calendar({self.name!r})"


CALENDARS = {
    CalendarType.TARGET: Calendar("TARGET", ql.TARGET()),
    CalendarType.USNY: Calendar("USNY", ql.UnitedStates(ql.UnitedStates.FederalReserve)),
    CalendarType.UK: Calendar("UK", ql.UnitedKingdom(ql.UnitedKingdom.Settlement)),
    CalendarType.WEEKEND: Calendar("WEEKEND", ql.WeekendsOnly()),
}


def get_calendar(name: Union[str, CalendarType]) -> Calendar:
    """Look up a calendar by type or name ("TARGET", "USNY", "UK", "WEEKEND")."""
    try:
        return CALENDARS[CalendarType(name)]
    except ValueError:
        raise ValueError(
            f"Unknown calendar: {name}. Available: {[c.value for c in CALENDARS]}"
        ) from None
