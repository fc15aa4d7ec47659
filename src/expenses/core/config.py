#!/usr/bin/env python3
"""
Configuration Management for the Expense Ledger

Handles environment-based configuration with safe defaults and validation.
Supports multiple environments (development, test, production); the test
environment keeps its data under the system temp directory.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_LEDGER_FILENAME = "expenses.csv"


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class Config:
    """
    Main configuration class for the expense ledger.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment

    # Storage
    data_dir: Path
    ledger_file: Path

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("EXPENSES_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_expenses"
            data_dir = Path(os.getenv("EXPENSES_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("EXPENSES_DATA_DIR", "./data")).expanduser().resolve()

        ledger_file_env = os.getenv("EXPENSES_FILE")
        if ledger_file_env:
            ledger_file = Path(ledger_file_env).expanduser()
            if not ledger_file.is_absolute():
                ledger_file = data_dir / ledger_file
        else:
            ledger_file = data_dir / DEFAULT_LEDGER_FILENAME

        return cls(
            environment=env,
            data_dir=data_dir,
            ledger_file=ledger_file,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if self.ledger_file.exists() and not self.ledger_file.is_file():
            errors.append(f"ledger_file is not a regular file: {self.ledger_file}")

        if self.data_dir.exists() and not self.data_dir.is_dir():
            errors.append(f"data_dir is not a directory: {self.data_dir}")

        if getattr(logging, self.log_level, None) is None:
            errors.append(f"Unknown LOG_LEVEL: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)
        if self.debug:
            level = logging.DEBUG

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary for display."""
        result: dict[str, Any] = {}
        for field_name, field_value in self.__dict__.items():
            if isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value
        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


# Convenience functions
def get_data_dir() -> Path:
    """Get the data directory path."""
    return get_config().data_dir


def get_ledger_file() -> Path:
    """Get the backing file path."""
    return get_config().ledger_file


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
