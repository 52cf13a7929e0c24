"""Configuration management using Pydantic Settings"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from loan_decision.domain.models import LoanLimits


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-decision-engine"
    log_level: str = "INFO"

    # Loan amount bounds in euros (inclusive)
    min_loan_amount: int = Field(2000, gt=0)
    max_loan_amount: int = Field(10000, gt=0)

    # Loan period bounds in months (inclusive)
    min_loan_period: int = Field(12, gt=0)
    max_loan_period: int = Field(60, gt=0)

    # Credit modifiers per personal code segment
    segment_1_modifier: int = Field(100, gt=0)
    segment_2_modifier: int = Field(300, gt=0)
    segment_3_modifier: int = Field(1000, gt=0)

    def loan_limits(self) -> LoanLimits:
        """Build validated loan limits for the decision engine"""
        return LoanLimits(
            min_loan_amount=self.min_loan_amount,
            max_loan_amount=self.max_loan_amount,
            min_loan_period=self.min_loan_period,
            max_loan_period=self.max_loan_period,
            segment_1_modifier=self.segment_1_modifier,
            segment_2_modifier=self.segment_2_modifier,
            segment_3_modifier=self.segment_3_modifier,
        )


settings = Settings()
