"""
Configuration defaults for docmerge.

Values can be overridden through environment variables (or a ``.env`` file
found by python-dotenv) and, on the command line, through CLI options.
"""

import os
from typing import Literal, Optional

from dotenv import load_dotenv, find_dotenv
from pydantic import BaseModel, Field, field_validator

DEFAULT_REPO_URL = "https://github.com/ant-design/ant-design"
DEFAULT_BRANCH = "master"
FALLBACK_BRANCH = "main"
DEFAULT_OUTPUT_DIR = "./merged-docs"
TEMP_DIR_NAME = ".docmerge-temp"
INDEX_TITLE = "Component Index"

# Directory names never treated as component directories
DEFAULT_EXCLUDED_DIRS = frozenset({"overview", "_util"})


class Settings(BaseModel):
    """Runtime settings resolved from the environment."""
    repo_url: str = Field(default=DEFAULT_REPO_URL, description="Repository to fetch")
    branch: str = Field(default=DEFAULT_BRANCH, description="Branch to clone")
    output_dir: str = Field(default=DEFAULT_OUTPUT_DIR, description="Output root directory")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level name"
    )

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


def load_settings(env: Optional[dict] = None) -> Settings:
    """
    Build settings from ``DOCMERGE_*`` environment variables.

    Args:
        env: Mapping to read instead of ``os.environ`` (the ``.env`` file is
            only loaded when reading the real environment)

    Returns:
        Settings with unset values left at their defaults

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value
    """
    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = dict(os.environ)

    overrides = {}
    for field_name, var_name in (
        ("repo_url", "DOCMERGE_REPO"),
        ("branch", "DOCMERGE_BRANCH"),
        ("output_dir", "DOCMERGE_OUTPUT"),
        ("log_level", "DOCMERGE_LOG_LEVEL"),
    ):
        value = env.get(var_name)
        if value:
            overrides[field_name] = value

    return Settings(**overrides)
