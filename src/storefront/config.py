"""Runtime settings read from the environment."""

import os
from dataclasses import dataclass

_DEV_JWT_SECRET = "storefront-development-secret-change-me-in-production"


def current_environment() -> str:
    """Name of the active environment, lower-cased."""
    return (os.getenv("ENV") or os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


@dataclass(frozen=True)
class Settings:
    environment: str
    log_level: str | None
    log_dir: str
    jwt_secret: str
    jwt_algorithm: str

    @classmethod
    def from_env(cls) -> "Settings":
        environment = current_environment()
        jwt_secret = os.getenv("JWT_SECRET")
        if not jwt_secret:
            if environment == "production":
                raise RuntimeError("JWT_SECRET must be set in production")
            jwt_secret = _DEV_JWT_SECRET

        return cls(
            environment=environment,
            log_level=os.getenv("LOG_LEVEL"),
            log_dir=os.getenv("LOG_DIR", "logs"),
            jwt_secret=jwt_secret,
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        )


def get_settings() -> Settings:
    return Settings.from_env()
