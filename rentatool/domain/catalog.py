"""Tool presets per category and the default rental inventory"""

from decimal import Decimal
from typing import List
from rentatool.domain.models import Tool

CHAINSAW = "Chainsaw"
LADDER = "Ladder"
JACKHAMMER = "Jackhammer"


def ladder(
    code: str,
    brand: str,
    daily_charge: Decimal | float | str = Decimal("1.99"),
    charge_on_weekdays: bool = True,
    charge_on_weekends: bool = True,
    charge_on_holidays: bool = False,
) -> Tool:
    """Ladders charge every day except holidays"""
    return Tool(
        code=code,
        type=LADDER,
        brand=brand,
        daily_charge=daily_charge,
        charge_on_weekdays=charge_on_weekdays,
        charge_on_weekends=charge_on_weekends,
        charge_on_holidays=charge_on_holidays,
    )


def chainsaw(
    code: str,
    brand: str,
    daily_charge: Decimal | float | str = Decimal("1.49"),
    charge_on_weekdays: bool = True,
    charge_on_weekends: bool = False,
    charge_on_holidays: bool = True,
) -> Tool:
    """Chainsaws charge weekdays and holidays, weekends are free"""
    return Tool(
        code=code,
        type=CHAINSAW,
        brand=brand,
        daily_charge=daily_charge,
        charge_on_weekdays=charge_on_weekdays,
        charge_on_weekends=charge_on_weekends,
        charge_on_holidays=charge_on_holidays,
    )


def jackhammer(
    code: str,
    brand: str,
    daily_charge: Decimal | float | str = Decimal("2.99"),
    charge_on_weekdays: bool = True,
    charge_on_weekends: bool = False,
    charge_on_holidays: bool = False,
) -> Tool:
    """Jackhammers charge non-holiday weekdays only"""
    return Tool(
        code=code,
        type=JACKHAMMER,
        brand=brand,
        daily_charge=daily_charge,
        charge_on_weekdays=charge_on_weekdays,
        charge_on_weekends=charge_on_weekends,
        charge_on_holidays=charge_on_holidays,
    )


def default_inventory() -> List[Tool]:
    """Stock tools loaded into a fresh store"""
    return [
        chainsaw("CHNS", "Stihl"),
        ladder("LADW", "Werner"),
        jackhammer("JAKD", "DeWalt"),
        jackhammer("JAKR", "Ridgid"),
    ]
