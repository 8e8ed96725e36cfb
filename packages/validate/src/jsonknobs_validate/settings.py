"""Validation settings and the process-wide message verbosity switch.

Messages attached to failed paths come in two regimes: a human-readable
description in debug mode, or an empty string otherwise. The failing paths
are identical in both.

The process-wide settings are read once from the environment on first use:

- ``JSONKNOBS_ENVIRONMENT`` (falling back to ``ENVIRONMENT``) selects the
  environment. Only ``development`` turns verbose messages on.
- ``JSONKNOBS_VERBOSE`` forces verbose messages on or off regardless of the
  environment.

Callers that prefer explicit configuration pass a :class:`ValidateSettings`
to :func:`jsonknobs_validate.validate` instead.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .exceptions import SettingsError

logger = logging.getLogger(__name__)

ENV_PREFIX = "JSONKNOBS_"
DEBUG_ENVIRONMENT = "development"
DEFAULT_ENVIRONMENT = "production"


def _parse_flag(value: str) -> bool | None:
    lowered = value.strip().lower()
    if lowered in ["true", "yes", "1"]:
        return True
    if lowered in ["false", "no", "0"]:
        return False
    return None


@dataclass(frozen=True)
class ValidateSettings:
    """Settings threaded through a validation call.

    Attributes:
        environment: Deployment environment name (lowercase)
        verbose: Force verbose messages on or off; ``None`` derives it
            from the environment
    """

    environment: str = DEFAULT_ENVIRONMENT
    verbose: bool | None = None

    @property
    def debug(self) -> bool:
        """Whether failures carry human-readable messages."""
        if self.verbose is not None:
            return self.verbose
        return self.environment == DEBUG_ENVIRONMENT

    def message(self, text: str) -> str:
        """Return ``text`` in debug mode, otherwise an empty message."""
        return text if self.debug else ""

    @classmethod
    def detect_environment(cls) -> str:
        """Detect the current environment from env vars.

        Checks ``JSONKNOBS_ENVIRONMENT``, then ``ENVIRONMENT``, and defaults
        to ``production``.
        """
        if env := os.environ.get(f"{ENV_PREFIX}ENVIRONMENT"):
            return env.lower()
        if env := os.environ.get("ENVIRONMENT"):
            return env.lower()
        return DEFAULT_ENVIRONMENT

    @classmethod
    def from_env(cls) -> ValidateSettings:
        """Build settings from environment variables."""
        verbose = None
        raw = os.environ.get(f"{ENV_PREFIX}VERBOSE")
        if raw is not None:
            verbose = _parse_flag(raw)
            if verbose is None:
                logger.debug("Ignoring unrecognized %sVERBOSE value %r", ENV_PREFIX, raw)
        return cls(environment=cls.detect_environment(), verbose=verbose)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ValidateSettings:
        """Create settings from a dictionary.

        Args:
            data: Mapping with optional ``environment`` and ``verbose`` keys

        Raises:
            SettingsError: If a key has the wrong type
        """
        environment = data.get("environment", DEFAULT_ENVIRONMENT)
        if not isinstance(environment, str):
            raise SettingsError(
                "Setting 'environment' must be a string",
                context={"environment": environment},
            )
        verbose = data.get("verbose")
        if verbose is not None and not isinstance(verbose, bool):
            raise SettingsError(
                "Setting 'verbose' must be a boolean",
                context={"verbose": verbose},
            )
        return cls(environment=environment.lower(), verbose=verbose)

    @classmethod
    def load(cls, path: str | Path) -> ValidateSettings:
        """Load settings from a YAML or JSON file.

        Args:
            path: Path to a ``.yaml``, ``.yml`` or ``.json`` file

        Raises:
            SettingsError: If the file cannot be read or parsed
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                if path.suffix in [".yaml", ".yml"]:
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise SettingsError(
                f"Failed to parse validation settings {path}: {e}",
                context={"path": str(path)},
            ) from e
        except OSError as e:
            raise SettingsError(
                f"Failed to read validation settings {path}: {e}",
                context={"path": str(path)},
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise SettingsError(
                f"Validation settings must be a dictionary: {path}",
                context={"path": str(path)},
            )
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        return {"environment": self.environment, "verbose": self.verbose}


_settings: ValidateSettings | None = None
_settings_lock = threading.Lock()


def get_settings() -> ValidateSettings:
    """Return the process-wide settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        with _settings_lock:
            if _settings is None:
                _settings = ValidateSettings.from_env()
                logger.debug(
                    "Loaded validation settings: environment=%s debug=%s",
                    _settings.environment,
                    _settings.debug,
                )
    return _settings


def configure(settings: ValidateSettings) -> None:
    """Replace the process-wide settings."""
    global _settings
    with _settings_lock:
        _settings = settings


def reset_settings() -> None:
    """Forget the process-wide settings so the next use re-reads the environment."""
    global _settings
    with _settings_lock:
        _settings = None


__all__ = [
    "ValidateSettings",
    "get_settings",
    "configure",
    "reset_settings",
]
