"""Calendar helpers for campaign periods."""
import calendar
import math
from datetime import date, timedelta


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def _round_half_up(value: float, places: int = 2) -> float:
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def calculate_period_in_months(start: date, end: date) -> float:
    """
    Fractional number of months between ``start`` and ``end``.

    Whole months come from year/month subtraction. When the end day-of-month
    is earlier than the start day, one month is borrowed and the remainder is
    expressed as a fraction of the days in the end month; when it is later,
    the extra days are a fraction of the days in the month following the start.
    Rounded half-up to 2 places, never below 1.
    """
    total = float((end.year - start.year) * 12 + (end.month - start.month))
    day_diff = end.day - start.day

    # denominators: the end month when borrowing, the month after the start otherwise
    if day_diff < 0:
        total -= 1
        month_days = days_in_month(end.year, end.month)
        total += (month_days + day_diff) / month_days
    elif day_diff > 0:
        following_year, following_month = (start.year + 1, 1) if start.month == 12 else (start.year, start.month + 1)
        total += day_diff / days_in_month(following_year, following_month)

    return max(1.0, _round_half_up(total))


def campaign_end_date(start: date, months: int) -> date:
    """
    Add calendar months to ``start``. A day missing from the target month
    rolls over into the following month (Jan 31 + 1 month -> Mar 2 in 2024).
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    return date(year, month, 1) + timedelta(days=start.day - 1)
