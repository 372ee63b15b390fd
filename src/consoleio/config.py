"""Configuration management for consoleio."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .reader import ExhaustedInputPolicy

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """Settings loaded from a .env file and the environment."""

    def __init__(self, project_dir: Optional[Path] = None):
        """Initialize config from .env in the project directory."""
        self.project_dir = project_dir or Path.cwd()

        load_dotenv(self.project_dir / ".env")

        # "retry" keeps prompting at end of input; "raise" stops with an error
        self.on_exhausted = os.getenv("CONSOLEIO_ON_EXHAUSTED", "retry").strip().lower()
        self.log_level = os.getenv("CONSOLEIO_LOG_LEVEL", "WARNING").strip().upper()

    def validate(self) -> list[str]:
        """Validate configuration values."""
        errors = []

        policies = [policy.value for policy in ExhaustedInputPolicy]
        if self.on_exhausted not in policies:
            errors.append(f"CONSOLEIO_ON_EXHAUSTED must be one of: {', '.join(policies)}")
        if self.log_level not in LOG_LEVELS:
            errors.append(f"CONSOLEIO_LOG_LEVEL must be one of: {', '.join(LOG_LEVELS)}")

        return errors

    @property
    def exhausted_policy(self) -> ExhaustedInputPolicy:
        """Parsed end-of-input policy.

        Raises:
            ValueError: If CONSOLEIO_ON_EXHAUSTED is not a known policy
        """
        return ExhaustedInputPolicy(self.on_exhausted)

    @property
    def logging_level(self) -> int:
        """Numeric logging level, WARNING when the configured name is unknown."""
        if self.log_level in LOG_LEVELS:
            return getattr(logging, self.log_level)
        return logging.WARNING
