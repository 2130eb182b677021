from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.aopenai import DEFAULT_MODEL, TIMEOUT


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: Env = Env.local
    html_dir: Path = Path("assets/html")
    openai_model: str = DEFAULT_MODEL
    openai_timeout: float = TIMEOUT
    log_level: str = "INFO"
