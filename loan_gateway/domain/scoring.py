"""Loan decision engine - core business logic for loan approvals"""

import logging
import math
from datetime import date
from typing import Callable, Optional

from loan_gateway.domain.identity import EstonianPersonalCodeParser, IdentityCodeParser, mask_code
from loan_gateway.domain.models import DecisionConstraints, DenialReason, LoanDecision, LoanRequest
from loan_gateway.domain.validation import validate_request

logger = logging.getLogger(__name__)


def segment_modifier(personal_code: str, constraints: DecisionConstraints) -> int:
    """
    Map the last four digits of the identity code to a credit modifier.

    Segments:
    - 0000-2499: debt, modifier 0 (never approved)
    - 2500-4999: segment 1
    - 5000-7499: segment 2
    - 7500-9999: segment 3
    """
    segment = int(personal_code[-4:])

    if segment < 2500:
        return 0
    elif segment < 5000:
        return constraints.segment_1_modifier
    elif segment < 7500:
        return constraints.segment_2_modifier
    else:
        return constraints.segment_3_modifier


def maximum_loan_amount(modifier: int, loan_period: int, constraints: DecisionConstraints) -> int:
    """Largest amount the credit modifier supports over the given period (uncapped)"""
    return math.floor(modifier * loan_period / (10 * constraints.min_credit_score))


def minimum_loan_period(modifier: int, constraints: DecisionConstraints) -> int:
    """Shortest period at which the modifier supports the minimum loan amount"""
    return math.ceil(constraints.min_credit_score * 10 * constraints.min_loan_amount / modifier)


def decide(
    modifier: int,
    requested_amount: int,
    requested_period: int,
    constraints: DecisionConstraints,
) -> LoanDecision:
    """
    Find the loan to offer for a credit modifier.

    Only two candidates are considered:
    1. The requested period, with the largest amount it supports (capped at
       max_loan_amount)
    2. If that is below min_loan_amount, the minimum amount over the shortest
       period that supports it

    The requested amount does not affect the offer; it has already been
    checked against the bounds.
    """
    if modifier == 0:
        return LoanDecision.deny(DenialReason.NO_VALID_LOAN)

    amount = min(maximum_loan_amount(modifier, requested_period, constraints), constraints.max_loan_amount)
    if amount >= constraints.min_loan_amount:
        return LoanDecision.approve(amount, requested_period)

    period = minimum_loan_period(modifier, constraints)
    if period > constraints.max_loan_period:
        return LoanDecision.deny(DenialReason.NO_VALID_LOAN)

    return LoanDecision.approve(constraints.min_loan_amount, period)


class LoanDecisionEngine:
    """Validates loan applications and calculates the loan we are willing to grant"""

    def __init__(
        self,
        constraints: Optional[DecisionConstraints] = None,
        identity: Optional[IdentityCodeParser] = None,
        clock: Callable[[], date] = date.today,
    ):
        self.constraints = constraints or DecisionConstraints()
        self.identity = identity or EstonianPersonalCodeParser()
        self.clock = clock

    def evaluate(
        self,
        personal_code: str,
        loan_amount: int,
        loan_period: int,
        as_of: Optional[date] = None,
    ) -> LoanDecision:
        """
        Main entry point: validate the application and make the loan decision.

        Business rejections come back as a denied LoanDecision. Only internal
        faults (DecisionEngineError) are raised.
        """
        request = LoanRequest(personal_code=personal_code, loan_amount=loan_amount, loan_period=loan_period)
        as_of = as_of or self.clock()

        reason = validate_request(request, self.constraints, self.identity, as_of)
        if reason is not None:
            logger.debug(
                "Loan application rejected",
                extra={"personal_code": mask_code(personal_code), "denial_reason": reason.value},
            )
            return LoanDecision.deny(reason)

        modifier = segment_modifier(request.personal_code, self.constraints)
        decision = decide(modifier, request.loan_amount, request.loan_period, self.constraints)

        logger.debug(
            "Loan application evaluated",
            extra={
                "personal_code": mask_code(personal_code),
                "credit_modifier": modifier,
                "loan_amount": decision.loan_amount,
                "loan_period": decision.loan_period,
                "denial_reason": decision.denial_reason.value if decision.denial_reason else None,
            },
        )
        return decision
