"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


def to_decimal(value: Decimal | float | int | str) -> Decimal:
    """Promote a rate to Decimal through its string form (1.99 stays 1.99, not 1.9899999...)"""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class Tool:
    """Read-only snapshot of a rentable tool and its charge policy"""

    code: str
    type: str  # "Chainsaw", "Ladder", "Jackhammer"
    brand: str
    daily_charge: Decimal
    charge_on_weekdays: bool
    charge_on_weekends: bool
    charge_on_holidays: bool
    checked_out: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "daily_charge", to_decimal(self.daily_charge))


@dataclass(frozen=True)
class RentalAgreement:
    """Binding charge for a single checkout, computed once and never mutated"""

    tool: Tool = field(repr=False)
    rental_days: int
    discount_percent: int
    checkout_date: date
    due_date: date
    total_chargeable_days: int
    pre_discount_charge: Decimal
    discount_amount: Decimal
    final_charge: Decimal

    @property
    def code(self) -> str:
        return self.tool.code

    @property
    def type(self) -> str:
        return self.tool.type

    @property
    def brand(self) -> str:
        return self.tool.brand

    @property
    def daily_rental_charge(self) -> Decimal:
        return self.tool.daily_charge
