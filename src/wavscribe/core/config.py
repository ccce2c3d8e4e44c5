"""
Configuration management for wavscribe
"""

from typing import Dict, Any, Optional
import math
import os

from ..providers.base.exceptions import ConfigurationError, ProviderError, UnsupportedFormatError

DEFAULT_CREDENTIALS_PATH = "chatkey.json"
DEFAULT_LANGUAGE_CODE = "en-US"
SUPPORTED_ENCODINGS = ["LINEAR16"]


def _parse_bool(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_timeout(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid timeout: {value!r}", "config")
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigurationError(f"Timeout must be a positive finite number, got {timeout}", "config")
    return timeout


class TranscriberConfig:
    """Configuration manager for wavscribe

    Explicit values take precedence over environment variables, which take
    precedence over the defaults.
    """

    DEFAULTS: Dict[str, Any] = {
        "credentials_path": DEFAULT_CREDENTIALS_PATH,
        "language_code": DEFAULT_LANGUAGE_CODE,
        "encoding": "LINEAR16",
        "timeout": None,
        "enable_word_time_offsets": False,
        "validate_header": False,
    }

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize configuration

        Args:
            config: Configuration dictionary or None to use environment variables
        """
        self.config = {k: v for k, v in (config or {}).items() if v is not None}
        self._load_from_environment()
        self._validate()

    def _load_from_environment(self):
        """Load configuration from environment variables"""
        env_config = {
            "credentials_path": (
                os.getenv("WAVSCRIBE_CREDENTIALS")
                or os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
            ),
            "language_code": os.getenv("WAVSCRIBE_LANGUAGE"),
            "timeout": os.getenv("WAVSCRIBE_TIMEOUT"),
            "enable_word_time_offsets": _parse_bool(os.getenv("WAVSCRIBE_WORD_TIMES")),
            "validate_header": _parse_bool(os.getenv("WAVSCRIBE_VALIDATE_HEADER")),
        }

        for key, value in env_config.items():
            if key not in self.config and value is not None:
                self.config[key] = value

        for key, value in self.DEFAULTS.items():
            self.config.setdefault(key, value)

    def _validate(self):
        encoding = self.config["encoding"]
        if encoding not in SUPPORTED_ENCODINGS:
            raise UnsupportedFormatError(
                f"Unsupported encoding: {encoding}. Must be one of {SUPPORTED_ENCODINGS}",
                "config",
            )
        if not self.config["language_code"]:
            raise ConfigurationError("Language code must not be empty", "config")
        self.config["timeout"] = _parse_timeout(self.config["timeout"])

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value"""
        return self.config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value

        Args:
            key: Configuration key
            value: Configuration value
        """
        previous = self.config.get(key)
        self.config[key] = value
        try:
            self._validate()
        except ProviderError:
            self.config[key] = previous
            raise

    @property
    def credentials_path(self) -> str:
        return self.config["credentials_path"]

    @property
    def language_code(self) -> str:
        return self.config["language_code"]

    @property
    def encoding(self) -> str:
        return self.config["encoding"]

    @property
    def timeout(self) -> Optional[float]:
        return self.config["timeout"]

    @property
    def enable_word_time_offsets(self) -> bool:
        return bool(self.config["enable_word_time_offsets"])

    @property
    def validate_header(self) -> bool:
        return bool(self.config["validate_header"])

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary"""
        return self.config.copy()

    def __repr__(self) -> str:
        """String representation (hide credentials)"""
        safe_config = {
            key: ("***" if key == "credentials_path" and value else value)
            for key, value in self.config.items()
        }
        return f"TranscriberConfig({safe_config})"
