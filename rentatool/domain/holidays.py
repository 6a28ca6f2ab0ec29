"""Observed holiday dates for the two holidays the store closes for"""

import logging
from datetime import date, timedelta

JULY = 7
SEPTEMBER = 9

SATURDAY = 5
SUNDAY = 6
MONDAY = 0


def observed_holiday_date(month: int, year: int) -> date | None:
    """
    Return the date a holiday is observed on for the given month and year.

    - July: Independence Day. A 4th falling on Saturday is observed Friday the 3rd,
      on Sunday it is observed Monday the 5th.
    - September: Labor Day, the first Monday of the month.

    Any other month is not a store holiday; a warning is logged and None returned.
    """
    if month == JULY:
        observed = date(year, JULY, 4)
        if observed.weekday() == SATURDAY:
            observed -= timedelta(days=1)
        elif observed.weekday() == SUNDAY:
            observed += timedelta(days=1)
        return observed

    if month == SEPTEMBER:
        first = date(year, SEPTEMBER, 1)
        return first + timedelta(days=(MONDAY - first.weekday()) % 7)

    logging.warning(
        "observed_holiday_date called with a month other than July or September",
        extra={"month": month, "year": year},
    )
    return None


def date_in_range(target: date, start: date, end: date) -> bool:
    """True if target is strictly after start and on or before end"""
    return start < target <= end


def count_observed_holidays(checkout_date: date, due_date: date) -> int:
    """
    Count observed holidays after checkout_date up to and including due_date.

    Checkout year: each holiday counted if it falls in range.
    Years strictly between: both holidays always fall inside the rental.
    Due year (when different): each holiday counted if on or before due_date.
    """
    total = 0
    for month in (JULY, SEPTEMBER):
        if date_in_range(observed_holiday_date(month, checkout_date.year), checkout_date, due_date):
            total += 1

    year_difference = due_date.year - checkout_date.year
    if year_difference > 0:
        if year_difference > 1:
            total += 2 * (year_difference - 1)

        for month in (JULY, SEPTEMBER):
            if observed_holiday_date(month, due_date.year) <= due_date:
                total += 1

    return total
