"""
Logging configuration for authhttp

Provides structured logging with optional file output and console output.
Library modules log under the "authhttp" logger hierarchy.
"""

import logging
import sys
from pathlib import Path
from urllib.parse import urlsplit, urlunsplit

from .config import Config, config
from .parameters import SENSITIVE_PARAMETERS

MASK = "***"


class AuthHttpLogger:
    """Centralized logger for the library"""

    def __init__(
        self,
        name: str = "authhttp",
        log_file: Path | None = None,
        console_output: bool = True,
        console_level: int = logging.INFO,
    ):
        """
        Initialize logger

        Args:
            name: Logger name (usually "authhttp" for the root library logger)
            log_file: Path to log file (optional)
            console_output: Whether to print to console
            console_level: Minimum level printed to the console
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)

        # Clear existing handlers
        self.logger.handlers = []

        # Format: timestamp - module - level - message
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )

        # Console handler (if enabled)
        if console_output:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(console_level)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        # File handler (if path provided)
        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def get_logger(self) -> logging.Logger:
        """Get the underlying logger instance"""
        return self.logger


def setup_logging(
    log_file: Path | None = None, verbose: bool = True, config_obj: Config | None = None
) -> logging.Logger:
    """
    Setup logging for an application using authhttp

    Args:
        log_file: Optional log file receiving DEBUG and above
        verbose: Whether to also print to console
        config_obj: Config object (optional, uses global config if None)

    Returns:
        Configured logger instance
    """
    if config_obj is None:
        config_obj = config

    level_name = str(config_obj.get("logging.level", "INFO")).upper()
    console_level = logging.getLevelName(level_name)
    if not isinstance(console_level, int):
        console_level = logging.INFO

    logger_wrapper = AuthHttpLogger(
        name="authhttp",
        log_file=log_file,
        console_output=verbose,
        console_level=console_level,
    )

    return logger_wrapper.get_logger()


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get logger for a specific module

    Args:
        module_name: Name of the module (e.g., 'request', 'http_client')

    Returns:
        Logger instance
    """
    return logging.getLogger(f"authhttp.{module_name}")


def mask_pii(value: str | None, config_obj: Config | None = None) -> str:
    """
    Mask a potentially sensitive value for log output

    Empty and missing values stay visible so that "not sent" and "sent empty"
    can still be told apart in the logs.
    """
    if config_obj is None:
        config_obj = config
    if value is None:
        return "(null)"
    if value == "" or not config_obj.get("logging.mask_pii", True):
        return value
    return MASK


def describe_parameters(params: dict[str, str], config_obj: Config | None = None) -> str:
    """Render a parameter mapping for log output with masked values

    Credentials stay masked even when logging.mask_pii is switched off.
    """
    rendered = []
    for key, value in params.items():
        if key in SENSITIVE_PARAMETERS and value:
            rendered.append(f"{key}={MASK}")
        else:
            rendered.append(f"{key}={mask_pii(value, config_obj)}")
    return ", ".join(rendered)


def redact_url(url: str) -> str:
    """Drop the query string from a URL for log output"""
    parts = urlsplit(url)
    if not parts.query:
        return url
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "<query>", ""))
