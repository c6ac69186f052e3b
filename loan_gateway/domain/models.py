"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional


class DenialReason(str, Enum):
    """Why a loan application was not approved"""

    INVALID_IDENTIFIER = "InvalidIdentifier"
    TOO_YOUNG = "TooYoung"
    TOO_OLD = "TooOld"
    INVALID_AMOUNT = "InvalidAmount"
    INVALID_PERIOD = "InvalidPeriod"
    NO_VALID_LOAN = "NoValidLoan"

    @property
    def message(self) -> str:
        return _DENIAL_MESSAGES[self]

    @property
    def is_input_error(self) -> bool:
        """True when the applicant's input was rejected before any calculation"""
        return self is not DenialReason.NO_VALID_LOAN


_DENIAL_MESSAGES = {
    DenialReason.INVALID_IDENTIFIER: "Invalid personal ID code!",
    DenialReason.TOO_YOUNG: "Too young to get a loan!",
    DenialReason.TOO_OLD: "Too old to get a loan!",
    DenialReason.INVALID_AMOUNT: "Invalid loan amount!",
    DenialReason.INVALID_PERIOD: "Invalid loan period!",
    DenialReason.NO_VALID_LOAN: "No valid loan found!",
}


@dataclass(frozen=True)
class DecisionConstraints:
    """
    Business rules the decision engine evaluates against.

    Amounts are in whole euros, periods and ages in months/years as named.
    The credit score is a Decimal so the amount formula stays exact.
    """

    min_loan_amount: int = 2000
    max_loan_amount: int = 10000
    min_loan_period: int = 12
    max_loan_period: int = 60
    min_loaner_age: int = 18
    expected_lifetime: int = 78
    min_credit_score: Decimal = Decimal("0.1")
    segment_1_modifier: int = 100
    segment_2_modifier: int = 300
    segment_3_modifier: int = 1000

    def __post_init__(self) -> None:
        if not 0 < self.min_loan_amount <= self.max_loan_amount:
            raise ValueError(
                f"Invalid loan amount bounds: [{self.min_loan_amount}, {self.max_loan_amount}]"
            )
        if not 0 < self.min_loan_period <= self.max_loan_period:
            raise ValueError(
                f"Invalid loan period bounds: [{self.min_loan_period}, {self.max_loan_period}]"
            )
        if self.min_credit_score <= 0:
            raise ValueError("min_credit_score must be positive")
        modifiers = (self.segment_1_modifier, self.segment_2_modifier, self.segment_3_modifier)
        if any(modifier <= 0 for modifier in modifiers):
            raise ValueError("Segment credit modifiers must be positive")
        if self.min_loaner_age * 12 > self.max_loaner_age_months:
            raise ValueError("Age window is empty: expected lifetime too short for the longest period")

    @property
    def min_loaner_age_months(self) -> int:
        return self.min_loaner_age * 12

    @property
    def max_loaner_age_months(self) -> int:
        """Oldest age at which the longest loan still matures within the expected lifetime"""
        return self.expected_lifetime * 12 - self.max_loan_period


@dataclass(frozen=True)
class LoanRequest:
    """Loan application as received from the applicant"""

    personal_code: str
    loan_amount: int
    loan_period: int


@dataclass(frozen=True)
class LoanDecision:
    """Outcome of a loan evaluation: approved terms or a denial reason, never both"""

    loan_amount: Optional[int] = None
    loan_period: Optional[int] = None
    denial_reason: Optional[DenialReason] = None

    @classmethod
    def approve(cls, loan_amount: int, loan_period: int) -> "LoanDecision":
        return cls(loan_amount=loan_amount, loan_period=loan_period)

    @classmethod
    def deny(cls, reason: DenialReason) -> "LoanDecision":
        return cls(denial_reason=reason)

    @property
    def approved(self) -> bool:
        return self.denial_reason is None

    @property
    def error_message(self) -> Optional[str]:
        return self.denial_reason.message if self.denial_reason else None
