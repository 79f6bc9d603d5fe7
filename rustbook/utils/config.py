"""
Configuration for RustBook.

Settings come from environment variables, optionally seeded from the
nearest .env file found from the working directory upward.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field


DEFAULT_CATALOG_PATH = Path(__file__).parent.parent / "data" / "courses.yaml"
DEFAULT_EXECUTE_URL = "http://127.0.0.1:3000"
DEFAULT_EXECUTE_TIMEOUT = 30.0

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    execute_url: str = DEFAULT_EXECUTE_URL
    execute_timeout: float = Field(default=DEFAULT_EXECUTE_TIMEOUT, gt=0)
    catalog_path: Path = DEFAULT_CATALOG_PATH
    log_level: str = "INFO"


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Build settings from the environment.

    Args:
        env_file: Optional .env file (default: nearest .env from the working
            directory upward). Existing environment variables take
            precedence over the file.

    Raises:
        pydantic.ValidationError: If a value cannot be parsed
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))

    return Settings(
        execute_url=os.environ.get("RUSTBOOK_EXECUTE_URL", DEFAULT_EXECUTE_URL).rstrip("/"),
        execute_timeout=os.environ.get("RUSTBOOK_EXECUTE_TIMEOUT", DEFAULT_EXECUTE_TIMEOUT),
        catalog_path=os.environ.get("RUSTBOOK_CATALOG_PATH") or DEFAULT_CATALOG_PATH,
        log_level=os.environ.get("RUSTBOOK_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO"):
    """Set up root logging once for the app."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
    )
