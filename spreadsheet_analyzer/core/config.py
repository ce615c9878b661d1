"""Application configuration loaded from environment variables."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed settings object shared by every analysis entry point."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="console", alias="LOG_FORMAT")
    service_name: str = Field(default="spreadsheet-analyzer", alias="SERVICE_NAME")
    environment: str = Field(default="local", alias="ENVIRONMENT")

    analysis_classifier: Literal["quick", "full"] = Field(
        default="quick", alias="ANALYSIS_CLASSIFIER"
    )
    analysis_sample_size: int = Field(default=5, ge=1, alias="ANALYSIS_SAMPLE_SIZE")
    analysis_top_values: int = Field(default=10, ge=1, alias="ANALYSIS_TOP_VALUES")


settings = Settings()
