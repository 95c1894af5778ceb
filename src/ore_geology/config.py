"""Application configuration backed by an optional YAML file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path

import yaml

DEFAULT_MODEL_NAME = "gemini-3-pro-preview"
DEFAULT_TEMPERATURE = 0.4
DEFAULT_LOCALE = "en"
DEFAULT_API_KEY_ENV = "GEMINI_API_KEY"
FALLBACK_API_KEY_ENV = "API_KEY"


@dataclass
class AppConfig:
    """Runtime settings for the geology room."""

    extra_config: dict = field(default_factory=dict)
    environment: dict[str, str] | None = None

    @property
    def model_name(self) -> str:
        return self.extra_config.get("model_name", DEFAULT_MODEL_NAME)

    @property
    def temperature(self) -> float:
        return float(self.extra_config.get("temperature", DEFAULT_TEMPERATURE))

    @property
    def locale(self) -> str:
        return self.extra_config.get("locale", DEFAULT_LOCALE)

    @property
    def api_key_env(self) -> str:
        return self.extra_config.get("api_key_env", DEFAULT_API_KEY_ENV)

    def get_environment(self, name: str) -> str | None:
        """Look up a variable in the explicit environment, then os.environ."""
        if self.environment is not None and name in self.environment:
            return self.environment[name]
        return os.environ.get(name)

    def get_api_key(self) -> str | None:
        """Backend credential, or None when absent or blank."""
        for name in (self.api_key_env, FALLBACK_API_KEY_ENV):
            value = self.get_environment(name)
            if value and value.strip():
                return value.strip()
        return None


def load_config(path: Path) -> AppConfig:
    """Load room settings from a YAML mapping.

    A missing file yields defaults. Unknown keys are kept in
    ``extra_config`` untouched.
    """
    if not path.exists():
        return AppConfig()
    data = yaml.safe_load(path.read_text()) or {}
    if not isinstance(data, dict):
        msg = f"Config must be a mapping: {path}"
        raise ValueError(msg)
    return AppConfig(extra_config=data)

