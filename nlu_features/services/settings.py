# services/settings.py
import os
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    log_dir: Optional[str] = None
    log_prefix: str = "nlu_features"
    log_console: bool = False


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUTHY


def load_settings() -> Settings:
    """
    Read library settings from the environment (and a .env file if present).

    NLU_FEATURES_LOG_DIR     directory for the daily log file, unset = console only
    NLU_FEATURES_LOG_PREFIX  log file name prefix
    NLU_FEATURES_LOG_CONSOLE echo log messages to the console
    """
    load_dotenv()

    log_dir = os.getenv("NLU_FEATURES_LOG_DIR") or None
    prefix = os.getenv("NLU_FEATURES_LOG_PREFIX") or "nlu_features"

    return Settings(
        log_dir=log_dir,
        log_prefix=prefix,
        log_console=_env_flag("NLU_FEATURES_LOG_CONSOLE"),
    )
