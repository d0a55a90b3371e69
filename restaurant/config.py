from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


PACKAGE_DIR = Path(__file__).resolve().parent


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: Env = Env.local
    html_dir: Path = PACKAGE_DIR / "templates"
    mongo_url: str = "mongodb://localhost:27017"
    db_name: str = "restaurant"
    collection_name: str = "customers"
    store_timeout_ms: int = 5000
    host: str = "0.0.0.0"
    port: int = 8080
