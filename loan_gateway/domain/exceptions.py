"""Domain-specific exceptions

Business denials are not exceptions; see DenialReason. These are faults.
"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class IdentityCodeError(DomainException):
    """Identity code could not be decoded"""

    pass


class DecisionEngineError(DomainException):
    """Internal inconsistency while evaluating a loan application"""

    pass
