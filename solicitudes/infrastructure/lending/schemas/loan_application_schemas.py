"""Pydantic schemas for loan application API request/response validation."""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field


class LoanApplicationCreateRequest(BaseModel):
    """
    Schema for creating a loan application.

    Values are passed on unchanged; the use case reports invalid amounts,
    terms and emails as INVALID_INPUT.
    """

    amount: Decimal | None = Field(None, alias="monto", description="Requested amount")
    term_months: int | None = Field(None, alias="plazo", description="Term in months")
    email: str | None = Field(None, description="Applicant email")
    loan_type_id: str | None = Field(None, alias="id_tipo_prestamo", description="Loan type id")

    model_config = {"populate_by_name": True}


class LoanApplicationResponse(BaseModel):
    """Schema for a loan application."""

    id: UUID
    amount: Decimal = Field(..., serialization_alias="monto")
    term_months: int = Field(..., serialization_alias="plazo")
    email: str
    status_id: UUID = Field(..., serialization_alias="id_estado")
    loan_type_id: UUID = Field(..., serialization_alias="id_tipo_prestamo")
    version: int
