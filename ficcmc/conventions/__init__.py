"""Market conventions: frequencies, business day rules, day counts, calendars."""

from .calendars import Calendar, get_calendar
from .daycount import (
    ACT_360,
    ACT_365F,
    ACT_ACT,
    THIRTY_360E,
    THIRTY_360U,
    DayCountConvention,
    get_day_count_convention,
)
from .types import BusinessDayAdjustment, CalendarType, Frequency, StubType
