"""Configuration management for minibank."""
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv


@dataclass
class Settings:
    """Configuration settings for minibank.

    Values come from environment variables, optionally seeded from a .env file.
    """

    # Logging
    log_level: str = 'INFO'
    log_file: Optional[str] = None

    # Statements
    statement_floatfmt: str = '.2f'

    @classmethod
    def load(cls, dotenv_path: Optional[str] = None) -> 'Settings':
        """Load settings from environment variables.

        Variables already present in the environment take precedence over the
        .env file.

        Args:
            dotenv_path: Path of the .env file. When omitted it is searched for
                upwards from the working directory.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If MINIBANK_LOG_LEVEL is not a known logging level.
        """
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))

        log_level = os.getenv('MINIBANK_LOG_LEVEL', cls.log_level).upper()
        if log_level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {log_level}")

        return cls(
            log_level=log_level,
            log_file=os.getenv('MINIBANK_LOG_FILE') or None,
            statement_floatfmt=os.getenv('MINIBANK_STATEMENT_FLOATFMT', cls.statement_floatfmt),
        )
