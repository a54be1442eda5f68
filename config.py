import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "FitPlan"
    ENV: str = "development"

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()


def configure_logging() -> None:
    """Host applications call this once at startup; the engine never does."""
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=settings.LOG_FORMAT)
