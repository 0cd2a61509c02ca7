"""
Core data structures for schedules expressed as time offsets.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

from ficcmc.errors import ArgumentError


@dataclass(frozen=True)
class SchedulePeriod:
    """A single period of a schedule.

    All times are year fractions from the schedule's reference date.
    ``period_length`` is the day-count weighted accrual fraction.
    """

    period_start: float
    period_end: float
    fixing_time: float
    payment_time: float
    period_length: float


@dataclass(frozen=True)
class Schedule:
    """Ordered, immutable sequence of schedule periods."""

    periods: Tuple[SchedulePeriod, ...]

    def __post_init__(self):
        periods = tuple(self.periods)
        object.__setattr__(self, "periods", periods)

        for i, period in enumerate(periods):
            if period.fixing_time > period.payment_time:
                raise ArgumentError(
                    f"Period {i}: fixing time {period.fixing_time} "
                    f"after payment time {period.payment_time}"
                )
        for i in range(1, len(periods)):
            if periods[i].period_start < periods[i - 1].period_start:
                raise ArgumentError(
                    f"Periods not ordered: period {i} starts at {periods[i].period_start}, "
                    f"before period {i - 1} at {periods[i - 1].period_start}"
                )

    @classmethod
    def from_arrays(
        cls,
        fixing_times: Sequence[float],
        payment_times: Sequence[float],
        period_lengths: Sequence[float],
        period_starts: Optional[Sequence[float]] = None,
        period_ends: Optional[Sequence[float]] = None,
    ) -> "Schedule":
        """Build a schedule from parallel sequences.

        Period starts and ends default to the fixing and payment times.
        """
        if period_starts is None:
            period_starts = fixing_times
        if period_ends is None:
            period_ends = payment_times

        sizes = {
            len(fixing_times),
            len(payment_times),
            len(period_lengths),
            len(period_starts),
            len(period_ends),
        }
        if len(sizes) != 1:
            raise ArgumentError(f"Schedule arrays must have equal lengths, got sizes {sorted(sizes)}")

        return cls(
            tuple(
                SchedulePeriod(
                    period_start=float(start),
                    period_end=float(end),
                    fixing_time=float(fixing),
                    payment_time=float(payment),
                    period_length=float(length),
                )
                for start, end, fixing, payment, length in zip(
                    period_starts, period_ends, fixing_times, payment_times, period_lengths
                )
            )
        )

    @property
    def num_periods(self) -> int:
        return len(self.periods)

    def __len__(self) -> int:
        return len(self.periods)

    def __iter__(self) -> Iterator[SchedulePeriod]:
        return iter(self.periods)

    def __getitem__(self, index: int) -> SchedulePeriod:
        return self.periods[index]

    def fixing(self, index: int) -> float:
        return self.periods[index].fixing_time

    def payment(self, index: int) -> float:
        return self.periods[index].payment_time

    def period_start(self, index: int) -> float:
        return self.periods[index].period_start

    def period_end(self, index: int) -> float:
        return self.periods[index].period_end

    def period_length(self, index: int) -> float:
        return self.periods[index].period_length
