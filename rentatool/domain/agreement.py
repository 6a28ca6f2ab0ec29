"""Rental agreement construction and the printed agreement report"""

import sys
from datetime import date, timedelta
from decimal import Decimal
from typing import List, Optional, TextIO
from rentatool.domain.models import Tool, RentalAgreement
from rentatool.domain.exceptions import CheckoutValidationError
from rentatool.domain.charges import (
    calculate_chargeable_days,
    calculate_pre_discount_charge,
    calculate_discount_amount,
    calculate_final_charge,
)
from rentatool.utils.date_utils import format_short_date


def validate_checkout(
    tool: Optional[Tool],
    rental_days: int,
    discount_percent: int,
    checkout_date: Optional[date],
) -> None:
    """
    Reject checkout arguments the calculator cannot price.

    Raises:
        CheckoutValidationError: Naming every invalid argument
    """
    problems: List[str] = []
    if tool is None:
        problems.append("a tool is required")
    if rental_days is None or rental_days < 1:
        problems.append("rental day count must be 1 or greater")
    if discount_percent is None or not 0 <= discount_percent <= 100:
        problems.append("discount percent must be in the range 0-100")
    if checkout_date is None:
        problems.append("a checkout date is required")
    elif rental_days is not None and rental_days >= 1:
        try:
            checkout_date + timedelta(days=rental_days)
        except OverflowError:
            problems.append("rental period extends past the supported calendar")

    if problems:
        raise CheckoutValidationError("Invalid checkout: " + "; ".join(problems))


def create_rental_agreement(
    tool: Optional[Tool],
    rental_days: int,
    discount_percent: int,
    checkout_date: Optional[date],
) -> RentalAgreement:
    """
    Main entry point: validate checkout arguments and price the rental.

    Flow:
    1. Validate inputs (nothing is built if any are invalid)
    2. Due date = checkout date + rental days
    3. Count chargeable days under the tool's charge policy
    4. Pre-discount charge → discount amount → final charge

    Returns:
        Frozen RentalAgreement with every derived field populated

    Raises:
        CheckoutValidationError: Missing tool/date, rental_days < 1,
            discount_percent outside 0-100, or a due date past year 9999
    """
    validate_checkout(tool, rental_days, discount_percent, checkout_date)

    due_date = checkout_date + timedelta(days=rental_days)
    chargeable_days = calculate_chargeable_days(tool, checkout_date, rental_days)
    pre_discount_charge = calculate_pre_discount_charge(tool.daily_charge, chargeable_days)
    discount_amount = calculate_discount_amount(pre_discount_charge, discount_percent)

    return RentalAgreement(
        tool=tool,
        rental_days=rental_days,
        discount_percent=discount_percent,
        checkout_date=checkout_date,
        due_date=due_date,
        total_chargeable_days=chargeable_days,
        pre_discount_charge=pre_discount_charge,
        discount_amount=discount_amount,
        final_charge=calculate_final_charge(pre_discount_charge, discount_amount),
    )


def _currency(amount: Decimal) -> str:
    return f"${amount:,.2f}"


def format_rental_agreement(agreement: RentalAgreement) -> str:
    """Render the agreement as the fixed-order, newline separated report"""
    lines = [
        f"Tool code: {agreement.code}",
        f"Tool type: {agreement.type}",
        f"Tool brand: {agreement.brand}",
        f"Rental days: {agreement.rental_days}",
        f"Check out date: {format_short_date(agreement.checkout_date)}",
        f"Due date: {format_short_date(agreement.due_date)}",
        f"Daily rental charge: {_currency(agreement.daily_rental_charge)}",
        f"Charge days: {agreement.total_chargeable_days}",
        f"Pre-discount charge: {_currency(agreement.pre_discount_charge)}",
        f"Discount percent: {agreement.discount_percent}%",
        f"Discount amount: {_currency(agreement.discount_amount)}",
        f"Final charge: {_currency(agreement.final_charge)}",
    ]
    return "\n".join(lines)


def print_rental_agreement(agreement: RentalAgreement, out: Optional[TextIO] = None) -> str:
    """Write the report to out (stdout by default) and return it"""
    report = format_rental_agreement(agreement)
    print(report, file=out if out is not None else sys.stdout)
    return report
