"""Pydantic schemas for API request/response validation"""

from datetime import date
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from rentatool.domain.models import Tool, RentalAgreement


class ToolSchema(BaseModel):
    """A tool and its charge policy"""

    code: str = Field(..., min_length=1, max_length=16, description="Tool code, e.g. LADW")
    type: str = Field(..., min_length=1, description="Tool category label")
    brand: str = Field(..., min_length=1)
    daily_charge: Decimal = Field(..., ge=0, decimal_places=2)
    charge_on_weekdays: bool
    charge_on_weekends: bool
    charge_on_holidays: bool
    checked_out: bool = False

    @field_validator("code")
    @classmethod
    def normalize_code(cls, value: str) -> str:
        return value.strip().upper()

    @classmethod
    def from_domain(cls, tool: Tool) -> "ToolSchema":
        return cls(
            code=tool.code,
            type=tool.type,
            brand=tool.brand,
            daily_charge=tool.daily_charge,
            charge_on_weekdays=tool.charge_on_weekdays,
            charge_on_weekends=tool.charge_on_weekends,
            charge_on_holidays=tool.charge_on_holidays,
            checked_out=tool.checked_out,
        )

    def to_domain(self) -> Tool:
        return Tool(**self.model_dump())


class ToolUpdateRequest(BaseModel):
    """Request body for PATCH /v1/tools/{code} - only supplied fields change"""

    code: Optional[str] = Field(None, min_length=1, max_length=16)
    type: Optional[str] = Field(None, min_length=1)
    brand: Optional[str] = Field(None, min_length=1)
    daily_charge: Optional[Decimal] = Field(None, ge=0, decimal_places=2)
    charge_on_weekdays: Optional[bool] = None
    charge_on_weekends: Optional[bool] = None
    charge_on_holidays: Optional[bool] = None
    checked_out: Optional[bool] = None

    @field_validator("code")
    @classmethod
    def normalize_code(cls, value: Optional[str]) -> Optional[str]:
        return value.strip().upper() if value is not None else None


class ToolListResponse(BaseModel):
    """Response for GET /v1/tools"""

    tools: List[ToolSchema]


class CheckoutRequest(BaseModel):
    """
    Request body for POST /v1/checkout.

    Day and discount ranges are checked by the domain validator, not here.
    """

    tool_code: str = Field(..., min_length=1, description="Code of the tool being rented")
    rental_days: int = Field(..., description="Number of days the tool is rented for")
    discount_percent: int = Field(0, description="Whole-number discount, 0-100")
    checkout_date: Optional[str] = Field(None, description="M/d/yy or YYYY-MM-DD")

    @field_validator("tool_code")
    @classmethod
    def normalize_code(cls, value: str) -> str:
        return value.strip().upper()


class RentalAgreementResponse(BaseModel):
    """Response for POST /v1/checkout"""

    tool_code: str
    tool_type: str
    tool_brand: str
    rental_days: int
    checkout_date: date
    due_date: date
    daily_rental_charge: Decimal
    charge_days: int
    pre_discount_charge: Decimal
    discount_percent: int
    discount_amount: Decimal
    final_charge: Decimal
    report: str

    @classmethod
    def from_domain(cls, agreement: RentalAgreement, report: str) -> "RentalAgreementResponse":
        return cls(
            tool_code=agreement.code,
            tool_type=agreement.type,
            tool_brand=agreement.brand,
            rental_days=agreement.rental_days,
            checkout_date=agreement.checkout_date,
            due_date=agreement.due_date,
            daily_rental_charge=agreement.daily_rental_charge,
            charge_days=agreement.total_chargeable_days,
            pre_discount_charge=agreement.pre_discount_charge,
            discount_percent=agreement.discount_percent,
            discount_amount=agreement.discount_amount,
            final_charge=agreement.final_charge,
            report=report,
        )
