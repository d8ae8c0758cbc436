from datetime import date

import pytest

from src.spaces.services import calculate_period_in_months, campaign_end_date
from src.spaces.services.periods import days_in_month


@pytest.mark.parametrize(
    "start, end, expected",
    [
        # borrow: 1 month + 2/31 (days in March)
        (date(2024, 1, 31), date(2024, 3, 2), 1.06),
        # same day floors at one month
        (date(2024, 5, 10), date(2024, 5, 10), 1),
        # exact month
        (date(2024, 1, 15), date(2024, 2, 15), 1),
        # extra days over the month following the start (leap February: 29 days)
        (date(2024, 1, 10), date(2024, 3, 25), 2.52),
        (date(2023, 1, 10), date(2023, 3, 25), 2.54),
        # borrow with a 30-day end month: 2 + 20/30
        (date(2024, 1, 20), date(2024, 4, 10), 2.67),
        # less than a month still bills as one
        (date(2024, 1, 31), date(2024, 2, 28), 1),
        (date(2024, 3, 1), date(2024, 12, 31), 10),
        (date(2023, 11, 15), date(2024, 2, 15), 3),
    ],
)
def test_calculate_period_in_months(start, end, expected):
    assert calculate_period_in_months(start, end) == pytest.approx(expected)


def test_days_in_month_knows_leap_years():
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28
    assert days_in_month(2024, 12) == 31


@pytest.mark.parametrize(
    "start, months, expected",
    [
        (date(2024, 1, 15), 1, date(2024, 2, 15)),
        (date(2024, 1, 31), 1, date(2024, 3, 2)),
        (date(2023, 1, 31), 1, date(2023, 3, 3)),
        (date(2024, 11, 30), 3, date(2025, 3, 2)),
        (date(2024, 12, 1), 1, date(2025, 1, 1)),
        (date(2024, 3, 31), 12, date(2025, 3, 31)),
    ],
)
def test_campaign_end_date_rolls_over_missing_days(start, months, expected):
    assert campaign_end_date(start, months) == expected
