"""Application settings and configuration helpers."""
from functools import lru_cache
import os
from typing import Optional

from pydantic import BaseModel, Field, model_validator
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: Optional[bool]) -> Optional[bool]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Runtime configuration loaded from environment variables."""

    app_env: str = Field(default="development", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"], alias="CORS_ORIGINS")
    seed_employees: bool = Field(default=True, alias="SEED_EMPLOYEES")
    # None means "on in development only"
    enable_swagger: Optional[bool] = Field(default=None, alias="ENABLE_SWAGGER")
    host: str = Field(default="127.0.0.1", alias="HOST")
    port: int = Field(default=8000, alias="PORT")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() == "development"

    @model_validator(mode="after")
    def _default_swagger(self) -> "Settings":
        if self.enable_swagger is None:
            self.enable_swagger = self.is_development
        return self


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    app_env = os.getenv("APP_ENV", Settings.model_fields["app_env"].default)
    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    return Settings(
        app_env=app_env,
        log_level=os.getenv("LOG_LEVEL", Settings.model_fields["log_level"].default),
        cors_origins=origins or ["*"],
        seed_employees=_env_flag("SEED_EMPLOYEES", True),
        enable_swagger=_env_flag("ENABLE_SWAGGER", None),
        host=os.getenv("HOST", Settings.model_fields["host"].default),
        port=int(os.getenv("PORT", Settings.model_fields["port"].default)),
    )
