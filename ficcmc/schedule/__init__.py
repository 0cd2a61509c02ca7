"""Schedules: time-offset periods and dated schedule generation."""

from .adjustments import add_months, adjust_date, is_end_of_month
from .core import Schedule, SchedulePeriod
from .generator import DatedPeriod, ScheduleDescriptor
