#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Configuration module for the YouTube MCP server.

Defines configuration parameters and loads values from environment variables.
A ``.env`` file in the working directory is loaded when this module is first
imported, before the ``config`` singleton is built, so that values read at
import time (the MCP server name, the advertised ``maxResults`` bounds) see it.
"""

import os
import logging
from pathlib import Path
from typing import Dict, Any

from dotenv import load_dotenv

# Initialize a basic logger for config loading issues
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = Path(".") / ".env"

# Default configuration values
_CONFIG_DEFAULTS: Dict[str, Any] = {
    # API Configuration
    "API_KEY": "",
    "API_KEY_ENV_VAR": "YOUTUBE_API_KEY",

    # Server identity (reported by the health descriptor and the MCP handshake)
    "SERVER_NAME": "youtube-mcp-server",

    # Search
    "DEFAULT_SEARCH_RESULTS": 5,
    "MAX_SEARCH_RESULTS": 25,

    # Comments
    "DEFAULT_COMMENT_RESULTS": 20,
    "MAX_COMMENT_RESULTS": 100,
    "COMMENT_ORDER": "relevance",  # or "time"
    "COMMENT_TEXT_FORMAT": "plainText",  # or "html"

    # Transcripts
    "DEFAULT_TRANSCRIPT_LANGUAGE": "en",

    # Web Server
    "DEFAULT_ENCODING": "utf-8",
    "CORS_MAX_AGE": 86400,

    # CORS
    "ALLOWED_ORIGINS": ["*"],
}


class Config:
    """Configuration class that loads values from environment variables."""

    def __init__(self, load_from_env=True):
        """Initialize configuration with default values and optionally from environment.

        Args:
            load_from_env: Whether to load values from environment variables
        """
        for key, value in _CONFIG_DEFAULTS.items():
            # Copy lists so instances never share mutable defaults
            setattr(self, key, list(value) if isinstance(value, list) else value)

        if load_from_env:
            self.load_from_env()

    def load_from_env(self):
        """Load configuration values from environment variables."""
        self.API_KEY = os.environ.get(self.API_KEY_ENV_VAR, self.API_KEY)

        env_origins = os.environ.get("ALLOWED_ORIGINS", "")
        if env_origins:
            origins = [origin.strip() for origin in env_origins.split(",")]
            self.ALLOWED_ORIGINS = [o for o in origins if o]
            logger.info(f"CORS origins set from environment: {self.ALLOWED_ORIGINS}")

        self._load_str_from_env("SERVER_NAME")
        self._load_str_from_env("COMMENT_ORDER")
        self._load_str_from_env("COMMENT_TEXT_FORMAT")
        self._load_str_from_env("DEFAULT_TRANSCRIPT_LANGUAGE")

        self._load_int_from_env("DEFAULT_SEARCH_RESULTS")
        self._load_int_from_env("MAX_SEARCH_RESULTS")
        self._load_int_from_env("DEFAULT_COMMENT_RESULTS")
        self._load_int_from_env("MAX_COMMENT_RESULTS")
        self._load_int_from_env("CORS_MAX_AGE")

        if not self.API_KEY:
            logger.warning(f"API key not found in env var {self.API_KEY_ENV_VAR}.")

    def _load_str_from_env(self, key):
        """Load a non-empty string value from environment variable.

        Args:
            key: The configuration key to load

        Returns:
            bool: True if the value was loaded, False otherwise
        """
        env_value = os.environ.get(key, "").strip()
        if env_value:
            setattr(self, key, env_value)
            return True
        return False

    def _load_int_from_env(self, key):
        """Load an integer value from environment variable.

        Args:
            key: The configuration key to load

        Returns:
            bool: True if the value was loaded, False otherwise
        """
        env_value = os.environ.get(key)
        if env_value is not None:
            try:
                setattr(self, key, int(env_value))
                return True
            except ValueError:
                logger.warning(f"Invalid integer value for {key}: {env_value}")
        return False


def load_env_file(env_path: Path = DEFAULT_ENV_FILE) -> bool:
    """Load variables from a ``.env`` file into the process environment.

    Values in the file override variables already set in the environment.

    Args:
        env_path: Path of the file to load.

    Returns:
        bool: True if the file exists and was loaded, False otherwise
    """
    if not env_path.is_file():
        return False
    load_dotenv(dotenv_path=env_path, override=True)
    logger.info(f"Loaded environment variables from: {env_path.resolve()}")
    return True


ENV_FILE_LOADED = load_env_file()

# Create a single instance of Config to be imported by other modules
config = Config(load_from_env=True)
