from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    """Process wide settings. Built once at startup and passed around."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: Env = Env.local
    html_dir: Path = Path(__file__).resolve().parent / "templates"
    openai_api_key: str | None = None
    openai_base_url: str | None = None
    core_model: str = "gpt-4-turbo-preview"
    max_tokens: int = 3000
    request_timeout: float | None = 60 * 2
    strict_markup: bool = False
    session_ttl: int = 60 * 30
    log_level: str = "INFO"

    @property
    def has_credential(self) -> bool:
        return bool(self.openai_api_key and self.openai_api_key.strip())
