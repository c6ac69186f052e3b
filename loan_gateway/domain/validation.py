"""Input validation for loan applications"""

from datetime import date
from typing import Optional

from loan_gateway.domain.exceptions import DecisionEngineError, IdentityCodeError
from loan_gateway.domain.identity import IdentityCodeParser
from loan_gateway.domain.models import DecisionConstraints, DenialReason, LoanRequest


def validate_request(
    request: LoanRequest,
    constraints: DecisionConstraints,
    identity: IdentityCodeParser,
    as_of: date,
) -> Optional[DenialReason]:
    """
    Check a loan request against the business rules.

    Checks run in order and stop at the first failure:
    1. Identity code format and checksum
    2. Applicant age: at least min_loaner_age, and young enough that the
       longest possible loan matures before the expected lifetime
    3. Requested amount within [min_loan_amount, max_loan_amount]
    4. Requested period within [min_loan_period, max_loan_period]

    Returns:
        The denial reason, or None when the request is acceptable

    Raises:
        DecisionEngineError: Identity code passed validation but its birth
            date could not be decoded
    """
    if not identity.is_valid(request.personal_code):
        return DenialReason.INVALID_IDENTIFIER

    try:
        age_months = identity.age_in_months(request.personal_code, as_of)
    except IdentityCodeError as e:
        raise DecisionEngineError("Validated identity code could not be decoded") from e

    if age_months < constraints.min_loaner_age_months:
        return DenialReason.TOO_YOUNG
    if age_months > constraints.max_loaner_age_months:
        return DenialReason.TOO_OLD

    if not constraints.min_loan_amount <= request.loan_amount <= constraints.max_loan_amount:
        return DenialReason.INVALID_AMOUNT
    if not constraints.min_loan_period <= request.loan_period <= constraints.max_loan_period:
        return DenialReason.INVALID_PERIOD

    return None
