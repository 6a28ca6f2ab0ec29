"""Rental charge engine - chargeable day counting and decimal money arithmetic"""

from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from rentatool.domain.models import Tool, to_decimal
from rentatool.domain.holidays import SATURDAY, SUNDAY, count_observed_holidays

CENTS = Decimal("0.01")


def calculate_chargeable_days(tool: Tool, checkout_date: date, rental_days: int) -> int:
    """
    Count billable days after checkout_date up to and including the due date.

    Whole weeks contribute 5 weekdays and 2 weekend days each. The leftover
    rental_days % 7 days are the ones immediately before (and including) the
    due date, and are classified one by one.

    Weekend days go straight into the total when the tool charges weekends.
    Weekdays are tallied separately because observed holidays always land on
    a weekday: that tally is only final once holidays are taken back out
    (or, for a holiday-only tool, holidays alone are added).
    """
    due_date = checkout_date + timedelta(days=rental_days)
    full_weeks, remainder = divmod(rental_days, 7)

    chargeable_days = 0
    weekdays = 0

    # Partial week anchored to the end of the rental period
    for offset in range(remainder - 1, -1, -1):
        day = due_date - timedelta(days=offset)
        if day.weekday() in (SATURDAY, SUNDAY):
            if tool.charge_on_weekends:
                chargeable_days += 1
        else:
            weekdays += 1

    weekdays += 5 * full_weeks
    if tool.charge_on_weekends:
        chargeable_days += 2 * full_weeks

    holidays = count_observed_holidays(checkout_date, due_date)

    if tool.charge_on_weekdays:
        chargeable_days += weekdays
        if not tool.charge_on_holidays:
            chargeable_days -= holidays
    elif tool.charge_on_holidays:
        chargeable_days += holidays

    return chargeable_days


def calculate_pre_discount_charge(daily_charge: Decimal | float | str, chargeable_days: int) -> Decimal:
    """Daily rate x chargeable days, rounded half-up to cents"""
    return (to_decimal(daily_charge) * chargeable_days).quantize(CENTS, rounding=ROUND_HALF_UP)


def calculate_discount_amount(pre_discount_charge: Decimal, discount_percent: int) -> Decimal:
    """
    Discount off the pre-discount charge, rounded half-up to cents.

    Example:
        10.43 at 50% → 5.215 → 5.22
    """
    discount = pre_discount_charge * Decimal(discount_percent) / Decimal(100)
    return discount.quantize(CENTS, rounding=ROUND_HALF_UP)


def calculate_final_charge(pre_discount_charge: Decimal, discount_amount: Decimal) -> Decimal:
    """Exact difference of the two already-rounded amounts"""
    return pre_discount_charge - discount_amount
