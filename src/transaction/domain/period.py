"""Reporting periods resolved to inclusive UTC date ranges."""

from datetime import date, datetime, time, timedelta, timezone
from enum import Enum
from typing import Optional, Tuple, Union

import attrs

from src.shared.domain.clock import ensure_utc, utc_now
from src.shared.exception.exceptions import ValidationError


END_OF_DAY = time(23, 59, 59, 999000)

DateInput = Union[str, date, datetime, None]


class Period(str, Enum):
    TODAY = 'today'
    WEEK = 'week'
    MONTH = 'month'


@attrs.define(frozen=True)
class DateRange:
    """Inclusive on both ends; a None bound is open."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None

    def __attrs_post_init__(self) -> None:
        if self.start is not None and self.end is not None and self.start > self.end:
            raise ValidationError('Start date must be before end date', field='start_date')

    @property
    def is_bounded(self) -> bool:
        return self.start is not None and self.end is not None

    def contains(self, moment: datetime) -> bool:
        moment = ensure_utc(moment)  # type: ignore[assignment]
        if self.start is not None and moment < self.start:
            return False
        if self.end is not None and moment > self.end:
            return False
        return True


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def end_of_day(day: date) -> datetime:
    return datetime.combine(day, END_OF_DAY, tzinfo=timezone.utc)


def week_bounds(today: date) -> Tuple[date, date]:
    # Weeks run Sunday through Saturday; date.weekday() has Monday as 0
    sunday = today - timedelta(days=(today.weekday() + 1) % 7)
    return sunday, sunday + timedelta(days=6)


def month_bounds(today: date) -> Tuple[date, date]:
    first = today.replace(day=1)
    next_month = (first + timedelta(days=32)).replace(day=1)
    return first, next_month - timedelta(days=1)


def period_range(period: Period, now: Optional[datetime] = None) -> DateRange:
    today = ensure_utc(now or utc_now()).date()  # type: ignore[union-attr]
    if period == Period.TODAY:
        first, last = today, today
    elif period == Period.WEEK:
        first, last = week_bounds(today)
    else:
        first, last = month_bounds(today)
    return DateRange(start=start_of_day(first), end=end_of_day(last))


def parse_boundary(value: DateInput, *, is_end: bool, field: str) -> Optional[datetime]:
    """Parse 'YYYY-MM-DD' or an ISO datetime.

    A bare date expands to the start of the day, or to 23:59:59.999 when it closes a range.
    """
    if value is None or value == '':
        return None

    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, date):
        return end_of_day(value) if is_end else start_of_day(value)

    text = value.strip()
    try:
        if len(text) == 10:
            day = date.fromisoformat(text)
            return end_of_day(day) if is_end else start_of_day(day)
        return ensure_utc(datetime.fromisoformat(text.replace('Z', '+00:00')))
    except ValueError:
        raise ValidationError(f'Invalid date: {value}', field=field) from None


def resolve_range(
    period: Optional[Period] = None,
    start_date: DateInput = None,
    end_date: DateInput = None,
    now: Optional[datetime] = None,
) -> DateRange:
    """A named period wins over explicit dates; with neither, the range is open."""
    if period is not None:
        return period_range(Period(period), now)
    return DateRange(
        start=parse_boundary(start_date, is_end=False, field='start_date'),
        end=parse_boundary(end_date, is_end=True, field='end_date'),
    )


def resolve_bounded_range(
    period: Optional[Period] = None,
    start_date: DateInput = None,
    end_date: DateInput = None,
    now: Optional[datetime] = None,
) -> DateRange:
    """Like resolve_range, but a missing bound falls back to the current week."""
    requested = resolve_range(period, start_date, end_date, now)
    if requested.is_bounded:
        return requested

    week = period_range(Period.WEEK, now)
    return DateRange(
        start=requested.start if requested.start is not None else week.start,
        end=requested.end if requested.end is not None else week.end,
    )
