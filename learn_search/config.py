"""
Runtime configuration.

Settings come from environment variables, optionally loaded from
`.env.local` (highest priority) or `.env` in the working directory:

    LEARN_REPO_ROOT        Corpus root directory (default: current directory)
    LEARN_BASE_URL         Canonical URL prefix of modules
    LEARN_UNIT_EXTENSION   Unit file extension (default: .md)
    LEARN_SEARCH_WORKERS   Threads used to scan units (default: 1)
    LOG_LEVEL              Console log level (default: WARNING)
    LEARN_SEARCH_LOG_FILE  Base path of a rotating debug log (default: off)
"""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .corpus.builder import DEFAULT_UNIT_EXTENSION
from .corpus.models import DEFAULT_BASE_URL
from .errors import FatalInputError

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """Validated runtime settings"""
    model_config = ConfigDict(frozen=True)

    repo_root: Path = Field(default_factory=Path.cwd, description="Corpus root directory")
    base_url: str = Field(DEFAULT_BASE_URL, min_length=1)
    unit_extension: str = Field(DEFAULT_UNIT_EXTENSION, min_length=1)
    workers: int = Field(1, ge=1, le=64)
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @field_validator("base_url")
    @classmethod
    def _trailing_slash(cls, value: str) -> str:
        return value if value.endswith("/") else f"{value}/"

    @field_validator("unit_extension")
    @classmethod
    def _leading_dot(cls, value: str) -> str:
        return value if value.startswith(".") else f".{value}"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{value}'")
        return level

    @property
    def console_level(self) -> int:
        return logging.getLevelName(self.log_level)


# Environment variable -> Settings field
ENV_FIELDS = {
    "LEARN_REPO_ROOT": "repo_root",
    "LEARN_BASE_URL": "base_url",
    "LEARN_UNIT_EXTENSION": "unit_extension",
    "LEARN_SEARCH_WORKERS": "workers",
    "LOG_LEVEL": "log_level",
    "LEARN_SEARCH_LOG_FILE": "log_file",
}


def load_env_files(directory: Optional[Path] = None) -> Optional[Path]:
    """Load .env.local (preferred) or .env from directory, if present"""
    directory = directory or Path.cwd()
    for name in (".env.local", ".env"):
        env_file = directory / name
        if env_file.exists():
            load_dotenv(env_file, override=False)
            return env_file
    return None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from environment variables.

    Raises:
        FatalInputError: If a variable has an invalid value
    """
    environ = os.environ if environ is None else environ
    values = {
        field_name: environ[variable]
        for variable, field_name in ENV_FIELDS.items()
        if environ.get(variable)
    }
    try:
        return Settings(**values)
    except ValidationError as e:
        raise FatalInputError(f"Invalid configuration: {e}") from e
