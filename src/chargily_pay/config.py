"""
Settings for applications embedding the SDK.

The client never reads the environment on its own; ``ChargilySettings``
is an opt-in helper that collects the credentials from environment
variables (optionally from a .env file) and hands them to
``ChargilyClient.from_settings``.

Environment variables:
    CHARGILY_API_KEY: Secret API key (required)
    CHARGILY_MODE: "live" or "test" (default: test)
    CHARGILY_WEBHOOK_SECRET: Key used to check webhook signatures
        (default: the API key, which is what Chargily signs with)
"""

import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .engine.exceptions import ConfigurationError
from .schemas.modes import ApiMode


class ChargilySettings(BaseModel):
    api_key: str = Field(..., min_length=1, repr=False)
    mode: ApiMode = ApiMode.TEST
    webhook_secret: Optional[str] = Field(None, repr=False)

    @field_validator("mode", mode="before")
    @classmethod
    def _parse_mode(cls, value):
        return ApiMode.from_string(value)

    @property
    def signing_secret(self) -> str:
        return self.webhook_secret or self.api_key

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None) -> "ChargilySettings":
        """
        Load settings from the process environment.

        Args:
            env_file: Optional .env file read first; existing variables win.

        Raises:
            ConfigurationError: If the .env file is missing or CHARGILY_API_KEY is unset
        """
        if env_file is not None:
            env_path = Path(env_file)
            if not env_path.exists():
                raise ConfigurationError(f"Config path does not exist: {env_path}")
            load_dotenv(dotenv_path=env_path)

        api_key = os.getenv("CHARGILY_API_KEY")
        if not api_key:
            raise ConfigurationError("CHARGILY_API_KEY is not set")

        return cls(
            api_key=api_key,
            mode=os.getenv("CHARGILY_MODE", ApiMode.TEST.value),
            webhook_secret=os.getenv("CHARGILY_WEBHOOK_SECRET") or None,
        )
