import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from codereview.tools.llm.config import LLMConfig

from .exceptions import SettingsError

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

@dataclass
class AppSettings:
    """Configuration settings for the code review command."""
    llm: LLMConfig = field(default_factory=LLMConfig)
    storage_root: str = "storage/app"
    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT

def load_settings(dotenv_path: Optional[str] = None) -> AppSettings:
    """Load settings from the environment, reading a .env file first if present."""
    load_dotenv(dotenv_path)
    return AppSettings(
        llm=LLMConfig.from_env(),
        storage_root=os.getenv("CODE_REVIEW_STORAGE", "storage/app"),
        log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
    )

def configure_logging(settings: AppSettings) -> None:
    """Send log records to stderr; stdout carries only the review text."""
    level = getattr(logging, settings.log_level, None)
    if not isinstance(level, int):
        raise SettingsError(f"Invalid log level: {settings.log_level}")
    logging.basicConfig(
        level=level,
        format=settings.log_format,
        stream=sys.stderr,
    )
