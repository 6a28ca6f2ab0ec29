"""Integration tests for the SQLAlchemy tool repository"""

import pytest
from decimal import Decimal
from sqlalchemy.orm import Session
from rentatool.infrastructure.database.repositories import ToolRepository, seed_default_tools
from rentatool.domain.catalog import jackhammer
from rentatool.domain.exceptions import DuplicateToolError, ToolNotFoundError, ToolUnavailableError


def test_default_tools_are_seeded(db: Session):
    tools = ToolRepository(db).list_tools()

    assert [t.code for t in tools] == ["CHNS", "JAKD", "JAKR", "LADW"]


def test_seeding_is_idempotent(db: Session):
    assert seed_default_tools(db) == 0
    assert len(ToolRepository(db).list_tools()) == 4


def test_get_tool_returns_snapshot(db: Session):
    ladder = ToolRepository(db).get_tool("LADW")

    assert ladder.type == "Ladder"
    assert ladder.brand == "Werner"
    assert ladder.daily_charge == Decimal("1.99")
    assert ladder.charge_on_weekends is True
    assert ladder.checked_out is False


def test_get_unknown_tool(db: Session):
    with pytest.raises(ToolNotFoundError):
        ToolRepository(db).get_tool("NOPE")


def test_add_tool(db: Session):
    repo = ToolRepository(db)
    repo.add_tool(jackhammer("JAKB", "Bosch", daily_charge="3.25"))
    db.commit()

    stored = repo.get_tool("JAKB")
    assert stored.brand == "Bosch"
    assert stored.daily_charge == Decimal("3.25")


def test_add_duplicate_tool(db: Session):
    with pytest.raises(DuplicateToolError):
        ToolRepository(db).add_tool(jackhammer("JAKR", "Ridgid"))


def test_add_tool_with_negative_charge(db: Session):
    with pytest.raises(ValueError):
        ToolRepository(db).add_tool(jackhammer("JAKN", "Ridgid", daily_charge="-1.00"))


def test_update_tool_fields(db: Session):
    repo = ToolRepository(db)
    updated = repo.update_tool("JAKD", daily_charge=Decimal("3.49"), charge_on_holidays=True)
    db.commit()

    assert updated.daily_charge == Decimal("3.49")
    assert repo.get_tool("JAKD").charge_on_holidays is True


def test_update_tool_code(db: Session):
    repo = ToolRepository(db)
    repo.update_tool("JAKD", code="JAKW")
    db.commit()

    assert repo.get_tool("JAKW").brand == "DeWalt"
    with pytest.raises(ToolNotFoundError):
        repo.get_tool("JAKD")


def test_update_tool_code_to_existing_code(db: Session):
    with pytest.raises(DuplicateToolError):
        ToolRepository(db).update_tool("JAKD", code="JAKR")


@pytest.mark.parametrize(
    "changes",
    [
        {"colour": "yellow"},
        {"charge_on_weekends": "yes"},
        {"brand": 42},
        {"daily_charge": "free"},
    ],
)
def test_update_tool_rejects_bad_values(db: Session, changes):
    repo = ToolRepository(db)
    with pytest.raises(ValueError):
        repo.update_tool("CHNS", **changes)

    assert repo.get_tool("CHNS").daily_charge == Decimal("1.49")


def test_set_checked_out(db: Session):
    repo = ToolRepository(db)
    repo.set_checked_out("CHNS", True)

    assert repo.get_tool("CHNS").checked_out is True


def test_check_out_tool(db: Session):
    repo = ToolRepository(db)
    claimed = repo.check_out_tool("LADW")
    db.commit()

    assert claimed.checked_out is True
    assert repo.get_tool("LADW").checked_out is True


def test_check_out_tool_only_succeeds_once(db: Session):
    repo = ToolRepository(db)
    snapshot = repo.get_tool("LADW")
    repo.check_out_tool("LADW")

    # Stale snapshot still reads available
    assert snapshot.checked_out is False
    with pytest.raises(ToolUnavailableError):
        repo.check_out_tool(snapshot.code)


def test_check_out_unknown_tool(db: Session):
    with pytest.raises(ToolNotFoundError):
        ToolRepository(db).check_out_tool("NOPE")


def test_remove_tool(db: Session):
    repo = ToolRepository(db)
    repo.remove_tool("LADW")
    db.commit()

    with pytest.raises(ToolNotFoundError):
        repo.get_tool("LADW")
    with pytest.raises(ToolNotFoundError):
        repo.remove_tool("LADW")
