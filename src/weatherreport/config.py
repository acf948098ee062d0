# settings come from the environment, optionally seeded from a local .env file

from __future__ import annotations
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()  # real environment variables win over .env values

DEFAULT_DATA_FILE = "weather_data.txt"
DEFAULT_LOG_LEVEL = "WARNING"
TRUTHY = {"1", "true", "yes", "on"}
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    data_file: str = DEFAULT_DATA_FILE
    strict_parse: bool = False
    log_level: str = DEFAULT_LOG_LEVEL


def get_settings() -> Settings:
    # read on every call so tests can monkeypatch the environment
    return Settings(
        data_file=os.getenv("WEATHER_DATA_FILE", DEFAULT_DATA_FILE),
        strict_parse=os.getenv("WEATHER_STRICT_PARSE", "").strip().lower() in TRUTHY,
        log_level=log_level_from_env(),
    )


def log_level_from_env() -> str:
    # unknown names fall back to the default instead of failing in logging.basicConfig
    level = os.getenv("WEATHER_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL
