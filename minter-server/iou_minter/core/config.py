"""Application configuration using pydantic settings with structured sections."""

from decimal import Decimal
from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from iou_minter.infrastructure.ledger.currency import encode_currency_code


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 4000
    reload: bool = False


class LedgerSettings(BaseModel):
    endpoint: str = "wss://s.altnet.rippletest.net:51233"
    connect_timeout: float = Field(default=10.0, gt=0)
    # upper bound for waiting on consensus validation of one submission
    submit_timeout: float = Field(default=60.0, gt=0)


class IssuerSettings(BaseModel):
    secret: Optional[SecretStr] = None
    address: Optional[str] = None
    currency: str = "KFD"

    @field_validator("currency")
    @classmethod
    def _check_currency(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("currency must not be empty")
        if value.upper() == "XRP":
            raise ValueError("XRP cannot be issued")
        if len(value) != 40 and not 3 <= len(value) <= 20:
            raise ValueError("currency must be 3-20 characters or a 40-hex code")
        try:
            encode_currency_code(value)
        except ValueError as exc:
            raise ValueError(f"currency cannot be used on the ledger: {exc}") from exc
        return value


class LimitSettings(BaseModel):
    max_batch_items: int = Field(default=200, ge=1)
    max_amount: Decimal = Field(default=Decimal("1000000"), gt=0)
    default_trust_limit: Decimal = Field(default=Decimal("1000000"), gt=0)


class WalletSigningSettings(BaseModel):
    api_key: Optional[str] = None
    api_secret: Optional[SecretStr] = None
    base_url: str = "https://xumm.app/api/v1/platform"
    timeout: float = 15.0

    @property
    def configured(self) -> bool:
        return bool(self.api_key and self.api_secret and self.api_secret.get_secret_value())


class DatabaseSettings(BaseModel):
    url: str = "sqlite+aiosqlite:///./minter.db"
    echo: bool = False


class LoggingSettings(BaseModel):
    level: str = "INFO"


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "IOU Minter"
    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]

    server: ServerSettings = ServerSettings()
    ledger: LedgerSettings = LedgerSettings()
    issuer: IssuerSettings = IssuerSettings()
    limits: LimitSettings = LimitSettings()
    wallet_signing: WalletSigningSettings = WalletSigningSettings()
    database: DatabaseSettings = DatabaseSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def currency(self) -> str:
        return self.issuer.currency

    @property
    def max_batch_items(self) -> int:
        return self.limits.max_batch_items

    @property
    def max_amount(self) -> Decimal:
        return self.limits.max_amount


@lru_cache()
def get_settings() -> Settings:
    return Settings()
