"""
Configuration management for the golf trip planner.
Supports multiple LLM providers (OpenAI, Mistral, OpenRouter, Ollama) and
the catalog provider API, with a demo mode backed by bundled sample data.
"""
from decimal import Decimal
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


DEMO_API_KEY = "demo-key"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # LLM Configuration
    llm_provider: Literal["openai", "mistral", "openrouter", "ollama", "mock"] = "mock"
    llm_api_key: str = ""
    llm_base_url: str = ""
    llm_model: str = "gpt-4o-mini"

    # LLM Parameters
    llm_temperature: float = 0.7
    llm_max_tokens: int = 2000

    # Catalog provider API
    catalog_api_base_url: str = "https://api.golfgenie.ai"
    catalog_api_key: str = DEMO_API_KEY
    catalog_timeout_seconds: float = 10.0

    # Trip defaults and cost heuristics
    default_destination: str = "Myrtle Beach, SC"
    rental_location: str = "Myrtle Beach International Airport"
    meal_cost_estimate: Decimal = Decimal("100")
    rental_cost_per_day: Decimal = Decimal("50")

    # Server Configuration
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = True
    log_level: str = "INFO"

    @property
    def demo_mode(self) -> bool:
        """True when no catalog credentials are configured."""
        return not self.catalog_api_key or self.catalog_api_key == DEMO_API_KEY


# Global settings instance
settings = Settings()


def get_llm_config(config: Settings = None) -> dict:
    """Get LLM configuration based on provider."""
    config = config or settings
    llm_config = {
        "api_key": config.llm_api_key,
        "model": config.llm_model,
        "temperature": config.llm_temperature,
        "max_tokens": config.llm_max_tokens,
    }

    # Set base URL based on provider
    if config.llm_provider == "ollama":
        llm_config["base_url"] = config.llm_base_url or "http://localhost:11434/v1"
        llm_config["api_key"] = config.llm_api_key or "ollama"  # Not needed for Ollama
    elif config.llm_provider == "mistral":
        llm_config["base_url"] = config.llm_base_url or "https://api.mistral.ai/v1"
    elif config.llm_provider == "openrouter":
        llm_config["base_url"] = config.llm_base_url or "https://openrouter.ai/api/v1"
    else:  # openai
        llm_config["base_url"] = config.llm_base_url or "https://api.openai.com/v1"

    return llm_config
