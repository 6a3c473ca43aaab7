"""Configuration module for loading and accessing library settings."""

from authhttp.exceptions import ConfigurationError

from .loader import Config, config

__all__ = ["Config", "ConfigurationError", "config"]
