"""Pydantic schemas for API request/response validation"""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional


class LoanDecisionRequest(BaseModel):
    """Request body for POST /v1/loan/decision"""

    personal_code: str = Field(..., description="Applicant's Estonian personal identification code")
    loan_amount: int = Field(..., description="Requested loan amount in euros")
    loan_period: int = Field(..., description="Requested loan period in months")


class LoanDecisionResponse(BaseModel):
    """Response for POST /v1/loan/decision"""

    personal_code: str
    loan_amount: Optional[int] = None
    loan_period: Optional[int] = None
    error_message: Optional[str] = None


class ConstraintsResponse(BaseModel):
    """Response for GET /v1/loan/constraints"""

    min_loan_amount: int
    max_loan_amount: int
    min_loan_period: int
    max_loan_period: int
    min_loaner_age: int
    expected_lifetime: int
    min_credit_score: Decimal
