"""/v1/tools - Tool inventory CRUD and returns"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from rentatool.api.v1.schemas import ToolSchema, ToolListResponse, ToolUpdateRequest
from rentatool.infrastructure.database.session import get_db
from rentatool.infrastructure.database.repositories import ToolRepository
from rentatool.infrastructure.observability.metrics import tool_return_counter
from rentatool.domain.exceptions import DuplicateToolError, ToolNotFoundError

router = APIRouter()


@router.get("/tools", response_model=ToolListResponse)
def list_tools(db: Session = Depends(get_db)):
    """List every tool in the inventory, ordered by code"""
    tools = ToolRepository(db).list_tools()
    return ToolListResponse(tools=[ToolSchema.from_domain(t) for t in tools])


@router.get("/tools/{code}", response_model=ToolSchema)
def get_tool(code: str, db: Session = Depends(get_db)):
    try:
        tool = ToolRepository(db).get_tool(code.strip().upper())
    except ToolNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return ToolSchema.from_domain(tool)


@router.post("/tools", response_model=ToolSchema, status_code=201)
def add_tool(tool: ToolSchema, db: Session = Depends(get_db)):
    """Add a new tool; 409 if the code is already taken"""
    try:
        created = ToolRepository(db).add_tool(tool.to_domain())
        db.commit()
    except DuplicateToolError as e:
        db.rollback()
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=422, detail=str(e))

    logging.info("Tool added", extra={"tool_code": created.code})
    return ToolSchema.from_domain(created)


@router.patch("/tools/{code}", response_model=ToolSchema)
def update_tool(code: str, changes: ToolUpdateRequest, db: Session = Depends(get_db)):
    """
    Update selected attributes of a tool.

    Only fields present in the body are applied; a code change is refused (409)
    when the new code already belongs to another tool.
    """
    try:
        updated = ToolRepository(db).update_tool(
            code.strip().upper(),
            **changes.model_dump(exclude_unset=True, exclude_none=True),
        )
        db.commit()
    except ToolNotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
    except DuplicateToolError as e:
        db.rollback()
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=422, detail=str(e))

    return ToolSchema.from_domain(updated)


@router.delete("/tools/{code}", status_code=204)
def remove_tool(code: str, db: Session = Depends(get_db)):
    try:
        ToolRepository(db).remove_tool(code.strip().upper())
        db.commit()
    except ToolNotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)


@router.post("/tools/{code}/return", response_model=ToolSchema)
def return_tool(code: str, db: Session = Depends(get_db)):
    """Mark a checked-out tool as back in the store"""
    try:
        returned = ToolRepository(db).set_checked_out(code.strip().upper(), False)
        db.commit()
    except ToolNotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))

    tool_return_counter.inc()
    logging.info("Tool returned", extra={"tool_code": returned.code})
    return ToolSchema.from_domain(returned)
