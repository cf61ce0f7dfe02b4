"""Configuration management using Pydantic Settings"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from boleto_gateway.domain.models import BankLayout


class Settings(BaseSettings):
    """Application configuration loaded from BOLETO_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="BOLETO_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Service
    service_name: str = "boleto-gateway"
    log_level: str = "INFO"

    # Bank layout (defaults: Caixa SIGCB)
    layout_name: str = "caixa-sigcb"
    bank_id: str = "104"
    currency_code: str = "9"  # 9 = real
    billing_type: str = "2"  # 1 = registered, 2 = unregistered
    issuer_role: str = "4"  # 4 = payee issues the slip
    assignor_code_width: int = 6

    # Due-date factor
    due_date_factor_mode: Literal["clamp", "rollover"] = "clamp"

    def layout(self) -> BankLayout:
        """Build the bank layout; raises InvalidFieldError on malformed values"""
        return BankLayout(
            name=self.layout_name,
            bank_id=self.bank_id,
            currency_code=self.currency_code,
            billing_type=self.billing_type,
            issuer_role=self.issuer_role,
            assignor_code_width=self.assignor_code_width,
        )


settings = Settings()
