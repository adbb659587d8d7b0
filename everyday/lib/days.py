import re
from datetime import date, datetime, timedelta

from dateutil import parser as dateutil_parser
from dateutil.parser import ParserError

from everyday.core.errors import ValidationError

from . import clock

__all__ = ["parse_day", "to_day", "window"]

_WEEKDAYS = ["mon", "tue", "wed", "thu", "fri", "sat", "sun"]
_OFFSET_RE = re.compile(r"^-(\d+)$")


def to_day(value: date | datetime) -> date:
    """Strip any time-of-day component. Calendar-day equality is date-only."""
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_day(text: str | None, today: date | None = None) -> date:
    """Parse a day reference: 'today', 'yesterday', 'mon'..'sun', '-N', or a date.

    Weekday names resolve to the most recent occurrence on or before today,
    since completions are usually logged after the fact.
    """
    base = today or clock.today()
    if text is None:
        return base
    ref = text.strip().lower()
    if not ref or ref == "today":
        return base
    if ref == "yesterday":
        return base - timedelta(days=1)
    if m := _OFFSET_RE.match(ref):
        try:
            return base - timedelta(days=int(m.group(1)))
        except OverflowError as e:
            raise ValidationError(f"cannot parse day '{text}'") from e
    ref = ref[:3] if ref[:3] in _WEEKDAYS and ref.endswith("day") else ref
    if ref in _WEEKDAYS:
        days_back = (base.weekday() - _WEEKDAYS.index(ref)) % 7
        return base - timedelta(days=days_back)
    try:
        return dateutil_parser.parse(
            text, default=datetime(base.year, base.month, base.day)
        ).date()
    except (ParserError, ValueError, OverflowError) as e:
        raise ValidationError(f"cannot parse day '{text}'") from e


def window(start: date, days: int) -> list[date]:
    return [start + timedelta(days=i) for i in range(days)]
