"""
Application settings (pydantic-settings v2, `.env` supported).

Integration credentials live in `core.settings`; this module only holds what
the HTTP process itself needs.
"""
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process settings."""

    PROJECT_NAME: str = Field(
        default="Storefront Payment API",
        validation_alias=AliasChoices("PROJECT_NAME", "SERVICE_NAME"),
    )
    VERSION: str = Field(default="1.0.0", validation_alias=AliasChoices("VERSION", "APP_VERSION"))
    DEBUG: bool = False
    ENVIRONMENT: str = Field(default="development", validation_alias=AliasChoices("ENVIRONMENT", "NODE_ENV"))

    # Storefront origin; also used to build links in notifications
    FRONTEND_URL: str = "*"
    PORT: int = 3000

    # Request body logging
    LOG_REQUEST_BODY_ENABLE_BY_DEFAULT: bool = True
    LOG_REQUEST_BODY_MAX_BYTES: int = 2048

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("ENVIRONMENT")
    @classmethod
    def _lower_environment(cls, v: str) -> str:
        return (v or "development").strip().lower()

    @property
    def diagnostics_enabled(self) -> bool:
        """Whether internal error details may be returned to callers."""
        return self.DEBUG or self.ENVIRONMENT == "development"

    @property
    def cors_origins(self) -> list[str]:
        if not self.FRONTEND_URL or self.FRONTEND_URL.strip() == "*":
            return ["*"]
        return [o.strip().rstrip("/") for o in self.FRONTEND_URL.split(",") if o.strip()]

    @property
    def public_base_url(self) -> str:
        """First configured storefront origin, used for links in e-mails."""
        origins = [o for o in self.cors_origins if o != "*"]
        return origins[0] if origins else "http://localhost:8000"


settings = Settings()
