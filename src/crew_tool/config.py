"""Application settings using Pydantic Settings"""
from typing import List
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str

    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    ACCESS_TOKEN_SECRET: str = "change-me-in-production"
    ACCESS_TOKEN_EXPIRE_SECONDS: int = 60 * 60 * 12

    CORS_ALLOW_ORIGINS: str = "*"

    GENERATED_PASSWORD_LENGTH: int = 12

    @field_validator("APP_ENV")
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        allowed = ["dev", "staging", "prod"]
        if v not in allowed:
            raise ValueError(f"APP_ENV must be one of: {allowed}")
        return v

    @field_validator("GENERATED_PASSWORD_LENGTH")
    @classmethod
    def validate_password_length(cls, v: int) -> int:
        if v < 8:
            raise ValueError("GENERATED_PASSWORD_LENGTH must be at least 8")
        return v

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == "prod"

    @property
    def cors_origins(self) -> List[str]:
        if not self.CORS_ALLOW_ORIGINS:
            return []
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]

    def validate_secrets_for_production(self) -> None:
        if self.is_production:
            errors = []
            if self.ACCESS_TOKEN_SECRET == "change-me-in-production":
                errors.append("ACCESS_TOKEN_SECRET must be set to a secure value in production")
            if errors:
                raise ValueError("; ".join(errors))

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
