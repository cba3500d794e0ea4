#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Uvicorn server entry point for the YouTube MCP server.

Handles final logging configuration based on environment
and starts the Uvicorn server process. Use ``mcp_server.py`` instead for the
stdio transport.
"""

import logging
import os

import uvicorn

from config import ENV_FILE_LOADED, config
from logging_config import setup_logging
from common import is_true


def main():
    """Set up logging from the environment and run the HTTP server."""
    # 1. The .env file (if any) was loaded when config was imported
    if not ENV_FILE_LOADED:
        print(".env file not found, using system environment variables.")

    # 2. Setup Logging based on final configuration
    log_level_console = getattr(logging, os.environ.get("LOG_LEVEL_CONSOLE", "INFO").upper(), logging.INFO)
    log_level_file = getattr(logging, os.environ.get("LOG_LEVEL_FILE", "DEBUG").upper(), logging.DEBUG)
    log_structured = is_true(os.environ.get("LOG_STRUCTURED", "true"))

    setup_logging(
        log_level_console=log_level_console,
        log_level_file=log_level_file,
        structured=log_structured
    )

    # 3. Check for Essential Configuration (e.g., API Key)
    if not config.API_KEY:
        logging.warning("=" * 80)
        logging.warning(" WARNING: YOUTUBE_API_KEY is not defined.")
        logging.warning(" Please define it in a .env file or as an environment variable.")
        logging.warning(" Only get_transcript will work until it is set.")
        logging.warning("=" * 80)

    # 4. Get Uvicorn Server Parameters from Environment/Defaults
    run_host = os.environ.get("HOST", "127.0.0.1")
    try:
        run_port = int(os.environ.get("PORT", "8000"))
    except ValueError:
        logging.warning(f"Invalid PORT environment variable '{os.environ.get('PORT')}', using default 8000.")
        run_port = 8000

    debug_mode = is_true(os.environ.get("DEBUG", "false"))
    uvicorn_log_level = os.environ.get("UVICORN_LOG_LEVEL", "debug" if debug_mode else "info").lower()

    # 5. Start the Uvicorn Server
    logging.info(f"Starting Uvicorn server on http://{run_host}:{run_port}")
    logging.info(f"Debug mode: {debug_mode}, Reload: {debug_mode}, Uvicorn Log Level: {uvicorn_log_level}")

    uvicorn.run(
        "main:app",
        host=run_host,
        port=run_port,
        reload=debug_mode,
        # The service singleton lives in-process; keep a single worker
        workers=1,
        log_level=uvicorn_log_level,
    )


if __name__ == "__main__":
    main()
