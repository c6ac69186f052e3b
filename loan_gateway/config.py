"""Configuration management using Pydantic Settings"""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict

from loan_gateway.domain.models import DecisionConstraints


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-gateway"
    log_level: str = "INFO"

    # Loan bounds (amounts in whole euros, periods in months)
    min_loan_amount: int = 2000
    max_loan_amount: int = 10000
    min_loan_period: int = 12
    max_loan_period: int = 60

    # Applicant age window
    min_loaner_age: int = 18
    expected_lifetime: int = 78

    # Credit scoring
    min_credit_score: Decimal = Decimal("0.1")
    segment_1_modifier: int = 100
    segment_2_modifier: int = 300
    segment_3_modifier: int = 1000

    def decision_constraints(self) -> DecisionConstraints:
        """Freeze the loan rules into the immutable object the engine works with"""
        return DecisionConstraints(
            min_loan_amount=self.min_loan_amount,
            max_loan_amount=self.max_loan_amount,
            min_loan_period=self.min_loan_period,
            max_loan_period=self.max_loan_period,
            min_loaner_age=self.min_loaner_age,
            expected_lifetime=self.expected_lifetime,
            min_credit_score=self.min_credit_score,
            segment_1_modifier=self.segment_1_modifier,
            segment_2_modifier=self.segment_2_modifier,
            segment_3_modifier=self.segment_3_modifier,
        )


settings = Settings()
