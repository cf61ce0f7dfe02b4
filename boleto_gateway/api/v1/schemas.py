"""Pydantic schemas for API request/response validation"""

from datetime import date

from pydantic import BaseModel, Field


class BoletoRequest(BaseModel):
    """Request body for POST /v1/boleto"""

    due_date: date = Field(..., description="Payment due date")
    amount_cents: int = Field(..., ge=0, description="Amount in cents")
    assignor_code: str = Field(..., min_length=1, description="Bank-issued payee code")
    our_number: str = Field(..., min_length=15, description="Payee's document reference, at least 15 digits")


class BoletoResponse(BaseModel):
    """Response for POST /v1/boleto"""

    barcode: str
    typeable_line: str
    formatted_typeable_line: str
    due_date_factor: str
    valid: bool


class BarcodeResponse(BaseModel):
    """Response for GET /v1/boleto/{typeable_line}/barcode"""

    typeable_line: str
    barcode: str
