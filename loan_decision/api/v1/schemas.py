"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import Optional


class DecisionRequest(BaseModel):
    """Request body for POST /v1/loan/decision"""

    personal_code: str = Field(..., description="Estonian personal identification code")
    loan_amount: int = Field(..., description="Requested loan amount in euros")
    loan_period: int = Field(..., description="Requested loan period in months")


class DecisionResponse(BaseModel):
    """Response for POST /v1/loan/decision"""

    loan_amount: Optional[int] = None
    loan_period: Optional[int] = None
    error_message: Optional[str] = None
