"""Configuration management for the application."""

import json
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SiteConfig(BaseSettings):
    """Static copy shown on the portfolio page."""

    owner_headline: str = "Full-Stack Engineer"
    hero_title: str = "Building Amazing Digital Experiences"
    hero_tagline: str = (
        "Passionate full-stack engineer crafting modern web applications with "
        "cutting-edge technologies and clean, scalable code."
    )
    footer_text: str = "Built with care using FastAPI, SQLAlchemy, and modern web technologies"
    footer_copyright: str = "© 2024 Full-Stack Engineer Portfolio"

    @classmethod
    def from_file(cls, filepath: str = "config/site.json") -> "SiteConfig":
        """
        Load site copy from a JSON file.

        Args:
            filepath: Path to the configuration file

        Returns:
            SiteConfig instance (defaults when the file does not exist)
        """
        if not Path(filepath).exists():
            return cls()
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls(**data)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default="sqlite:///./portfolio.db")

    # Server
    server_host: str = Field(default="0.0.0.0")
    server_port: int = Field(default=2022)

    # Base URL the page renderer uses to reach the procedure API
    api_url: str = Field(default="http://localhost:2022")

    cors_origins: list[str] = Field(default=["http://localhost:3000"])

    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def normalize_database_url(self) -> "Settings":
        """Rewrite the legacy ``postgres://`` scheme that SQLAlchemy rejects."""
        if self.database_url.startswith("postgres://"):
            self.database_url = self.database_url.replace("postgres://", "postgresql://", 1)
        return self


# Global settings instance
settings = Settings()

# Load page copy
site_config = SiteConfig.from_file()
