"""
Configuration for the SPIKE client.

Values come from keyword arguments first, then from environment variables
(optionally loaded from a ``.env`` file):
- SPIKE_SECRET_KEY
- SPIKE_PUBLISHABLE_KEY
- SPIKE_API_BASE_URL
- SPIKE_TIMEOUT_SECONDS
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from spike_api.version import __version__

logger = logging.getLogger(__name__)

REST_BASE_URL = "https://api.spike.cc/v1/"
DEFAULT_TIMEOUT_SECONDS = 30.0
USER_AGENT = f"spike-api-python/{__version__}"

_ENV_FIELDS = {
    "secret_key": "SPIKE_SECRET_KEY",
    "publishable_key": "SPIKE_PUBLISHABLE_KEY",
    "base_url": "SPIKE_API_BASE_URL",
    "timeout_seconds": "SPIKE_TIMEOUT_SECONDS",
}


class SpikeConfig(BaseModel):
    """Immutable client configuration captured at construction."""

    model_config = ConfigDict(frozen=True)

    secret_key: str = ""
    publishable_key: str = ""
    base_url: str = REST_BASE_URL
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    user_agent: str = USER_AGENT

    @field_validator("base_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        if not value:
            raise ValueError("base_url must not be empty")
        return value if value.endswith("/") else value + "/"

    @property
    def auth(self) -> tuple[str, str]:
        """HTTP Basic credential: secret key as user, empty password."""
        return (self.secret_key, "")

    def default_headers(self) -> Dict[str, str]:
        return {
            "Accept": "*/*",
            "Connection": "close",
            "User-Agent": self.user_agent,
        }


def load_config(env_file: Optional[Union[str, Path]] = None, **overrides: Any) -> SpikeConfig:
    """
    Build a SpikeConfig from the environment.

    Args:
        env_file: Optional path to a ``.env`` file. When omitted, python-dotenv
            searches for one starting from the current directory.
        **overrides: Explicit field values; these win over the environment.

    Returns:
        Validated SpikeConfig

    Raises:
        ValidationError: If the resulting values don't match the schema
    """
    load_dotenv(dotenv_path=env_file)

    values: Dict[str, Any] = {}
    for field_name, env_name in _ENV_FIELDS.items():
        raw = os.getenv(env_name)
        if raw:
            values[field_name] = raw
    values.update({k: v for k, v in overrides.items() if v is not None})

    if not values.get("secret_key"):
        logger.warning("SPIKE_SECRET_KEY is not set; requests will be unauthenticated.")

    try:
        return SpikeConfig(**values)
    except ValidationError as e:
        logger.error(f"SPIKE config validation failed: {e}")
        raise
