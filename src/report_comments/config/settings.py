"""Comment limits and runtime toggles, overridable by stored settings or environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, ClassVar, Dict, Mapping, Optional

from dotenv import load_dotenv

LOGGER = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a configuration value cannot be parsed in strict mode."""


def load_env_file(env_path: Optional[Path] = None, *, override: bool = False) -> bool:
    """Load environment variables from a ``.env`` file if it exists."""

    path = env_path or Path(".") / ".env"
    if not path.exists():
        return False
    load_dotenv(path, override=override)
    LOGGER.info("Environment variables loaded from %s", path)
    return True


def _parse_bool(value: Any, default: bool = False) -> bool:
    """Return a boolean coerced from ``value`` with sensible defaults."""
    if isinstance(value, bool):
        return value
    if value is None:
        return default
    if isinstance(value, (int, float)):
        return bool(value)
    text = str(value).strip().lower()
    if text in {"1", "true", "yes", "on", "enabled"}:
        return True
    if text in {"0", "false", "no", "off", "disabled"}:
        return False
    return default


def _parse_non_negative_int(name: str, value: Any, default: int, *, strict: bool) -> int:
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        parsed = -1
    if parsed >= 0:
        return parsed
    if strict:
        raise ConfigurationError(f"Invalid value for {name}: {value!r}")
    LOGGER.warning("Ignoring invalid value for %s: %r", name, value)
    return default


@dataclass(frozen=True)
class CommentSettings:
    """Limits applied to comment text plus the debug toggle."""

    min_comment_length: int = 10
    max_comment_length: int = 1000
    max_final_comment_length: int = 1000
    debug: bool = False

    ENV_MAPPING: ClassVar[Mapping[str, str]] = {
        "min_comment_length": "REPORT_COMMENTS_MIN_COMMENT_LENGTH",
        "max_comment_length": "REPORT_COMMENTS_MAX_COMMENT_LENGTH",
        "max_final_comment_length": "REPORT_COMMENTS_MAX_FINAL_COMMENT_LENGTH",
        "debug": "REPORT_COMMENTS_DEBUG",
    }

    SETTINGS_KEY: ClassVar[str] = "comment_settings"

    @classmethod
    def from_settings(cls, settings: Any | None = None, *, strict: bool = False) -> "CommentSettings":
        """Build settings from defaults, then ``settings``, then environment variables."""
        values: Dict[str, Any] = {field.name: getattr(cls(), field.name) for field in fields(cls) if field.init}

        stored: Any = {}
        if isinstance(settings, Mapping):
            stored = settings.get(cls.SETTINGS_KEY, settings)
        elif settings is not None:
            stored = settings.get(cls.SETTINGS_KEY, {})
        if isinstance(stored, Mapping):
            for key, value in stored.items():
                if key in values:
                    values[key] = cls._coerce(key, value, values[key], strict=strict, source=key)

        for attr, env_name in cls.ENV_MAPPING.items():
            env_value = os.getenv(env_name)
            if env_value is not None:
                values[attr] = cls._coerce(attr, env_value, values[attr], strict=strict, source=env_name)

        return cls(**values)

    @staticmethod
    def _coerce(attr: str, value: Any, default: Any, *, strict: bool, source: str) -> Any:
        if attr == "debug":
            return _parse_bool(value, default)
        return _parse_non_negative_int(source, value, default, strict=strict)

    def as_dict(self) -> Dict[str, Any]:
        """Return a plain dictionary representation of the settings."""
        return {field.name: getattr(self, field.name) for field in fields(self) if field.init}


__all__ = ["CommentSettings", "ConfigurationError", "load_env_file"]
