"""Data access layer for the tool inventory"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List
from sqlalchemy.orm import Session
from rentatool.infrastructure.database.models import ToolRecord
from rentatool.domain.catalog import default_inventory
from rentatool.domain.exceptions import DuplicateToolError, ToolNotFoundError, ToolUnavailableError
from rentatool.domain.models import Tool, to_decimal

# Attribute → expected Python type for partial updates
UPDATABLE_FIELDS: Dict[str, type] = {
    "code": str,
    "type": str,
    "brand": str,
    "daily_charge": object,  # any Decimal-convertible value
    "charge_on_weekdays": bool,
    "charge_on_weekends": bool,
    "charge_on_holidays": bool,
    "checked_out": bool,
}


def parse_daily_charge(value: Any) -> Decimal:
    """Daily charges are non-negative decimal amounts"""
    try:
        amount = to_decimal(value)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Invalid value for daily_charge: {value!r}") from e
    if not amount.is_finite() or amount < 0:
        raise ValueError(f"Invalid value for daily_charge: {value!r}")
    return amount


def to_domain(record: ToolRecord) -> Tool:
    """Detach a frozen snapshot from the ORM row"""
    return Tool(
        code=record.code,
        type=record.type,
        brand=record.brand,
        daily_charge=record.daily_charge,
        charge_on_weekdays=record.charge_on_weekdays,
        charge_on_weekends=record.charge_on_weekends,
        charge_on_holidays=record.charge_on_holidays,
        checked_out=record.checked_out,
    )


class ToolRepository:
    """Repository for rentable tools"""

    def __init__(self, db: Session):
        self.db = db

    def _get_record(self, code: str) -> ToolRecord:
        record = self.db.get(ToolRecord, code)
        if record is None:
            raise ToolNotFoundError(f"No tool with code {code} was found")
        return record

    def add_tool(self, tool: Tool) -> Tool:
        """Insert a new tool; codes are unique"""
        if self.db.get(ToolRecord, tool.code) is not None:
            raise DuplicateToolError(f"A tool with code {tool.code} already exists")

        record = ToolRecord(
            code=tool.code,
            type=tool.type,
            brand=tool.brand,
            daily_charge=parse_daily_charge(tool.daily_charge),
            charge_on_weekdays=tool.charge_on_weekdays,
            charge_on_weekends=tool.charge_on_weekends,
            charge_on_holidays=tool.charge_on_holidays,
            checked_out=tool.checked_out,
        )
        self.db.add(record)
        self.db.flush()
        return to_domain(record)

    def get_tool(self, code: str) -> Tool:
        """Fetch a snapshot of one tool"""
        return to_domain(self._get_record(code))

    def list_tools(self) -> List[Tool]:
        """All tools ordered by code"""
        records = self.db.query(ToolRecord).order_by(ToolRecord.code).all()
        return [to_domain(r) for r in records]

    def update_tool(self, tool_code: str, /, **changes: Any) -> Tool:
        """
        Apply typed attribute updates to a stored tool.

        Raises:
            ToolNotFoundError: Unknown code
            DuplicateToolError: Renaming to a code that is already taken
            ValueError: Unknown attribute or value of the wrong type
        """
        record = self._get_record(tool_code)

        for name, value in changes.items():
            expected = UPDATABLE_FIELDS.get(name)
            if expected is None:
                raise ValueError(f"Unknown tool attribute: {name}")
            if value is None or not isinstance(value, expected):
                raise ValueError(f"Invalid value for {name}: {value!r}")

        new_code = changes.pop("code", tool_code)
        if new_code != tool_code and self.db.get(ToolRecord, new_code) is not None:
            raise DuplicateToolError(f"A tool with code {new_code} already exists")

        if "daily_charge" in changes:
            changes["daily_charge"] = parse_daily_charge(changes["daily_charge"])
        for name, value in changes.items():
            setattr(record, name, value)
        record.code = new_code

        self.db.flush()
        return to_domain(record)

    def check_out_tool(self, code: str) -> Tool:
        """
        Claim an available tool in a single conditional UPDATE.

        Raises:
            ToolNotFoundError: Unknown code
            ToolUnavailableError: Tool is already checked out
        """
        claimed = (
            self.db.query(ToolRecord)
            .filter(ToolRecord.code == code, ToolRecord.checked_out.is_(False))
            .update({ToolRecord.checked_out: True}, synchronize_session="fetch")
        )
        record = self._get_record(code)
        if claimed == 0:
            raise ToolUnavailableError(f"Tool {code} is currently checked out")
        return to_domain(record)

    def set_checked_out(self, code: str, checked_out: bool) -> Tool:
        """Record that a tool left the store or came back"""
        return self.update_tool(code, checked_out=checked_out)

    def remove_tool(self, code: str) -> None:
        """Delete a tool from the inventory"""
        self.db.delete(self._get_record(code))
        self.db.flush()


def seed_default_tools(db: Session) -> int:
    """Insert the default inventory, skipping codes that already exist"""
    inserted = 0
    repo = ToolRepository(db)
    for tool in default_inventory():
        try:
            repo.add_tool(tool)
            inserted += 1
        except DuplicateToolError:
            continue

    logging.info("Default tools seeded", extra={"inserted": inserted})
    return inserted
