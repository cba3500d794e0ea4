#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Service wiring and FastAPI dependency providers.

``initialize_services`` builds the tool service once per process; both the
HTTP app (on lifespan startup) and the stdio MCP entry point call it. Route
handlers and MCP tools read the resulting singleton.
"""

from typing import Optional

from fastapi import HTTPException, status

from config import config
from exceptions import APIConfigurationError
from services.operations import YouTubeToolService
from services.transcript import TranscriptFetcher
from services.youtube_api import YouTubeAPIClient
from logging_config import StructuredLogger

logger = StructuredLogger(__name__)

# --- Global Service Instance ---
# Populated by initialize_services(); read-only afterwards.
tool_service: Optional[YouTubeToolService] = None


def initialize_services(api_key: Optional[str] = None) -> YouTubeToolService:
    """Build the tool service and store it as the process-wide instance.

    A missing or unusable API key is not fatal: the service starts without a
    Data API client, so transcripts keep working and the other tools report
    the configuration error.

    Args:
        api_key: Overrides config.API_KEY when given.

    Returns:
        The initialized YouTubeToolService.
    """
    global tool_service

    key = api_key if api_key is not None else config.API_KEY
    api_client: Optional[YouTubeAPIClient] = None
    if not key:
        logger.warning("YOUTUBE_API_KEY is not defined. Only get_transcript will be available.")
    else:
        try:
            api_client = YouTubeAPIClient(key)
            if not api_client.validate_api_key_format():
                logger.warning("API key format validation failed (heuristic check). Application might not function correctly.")
        except APIConfigurationError as api_err:
            logger.critical(f"API configuration error during startup: {api_err}", exc_info=False)

    tool_service = YouTubeToolService(api_client=api_client, transcript_fetcher=TranscriptFetcher())
    logger.info("YouTube tool service initialized.", api_client_ready=api_client is not None)
    return tool_service


def get_tool_service() -> YouTubeToolService:
    """Dependency function to get the initialized YouTubeToolService instance.

    Raises:
        HTTPException: 503 Service Unavailable if the service is not initialized.

    Returns:
        The singleton YouTubeToolService instance.
    """
    if not tool_service:
        logger.critical("Dependency Error: YouTube tool service not initialized.", exc_info=False)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service Initialization Error: YouTube tool service is not available.",
            headers={"X-Error-Code": "SERVICE_UNAVAILABLE_TOOL_SERVICE"}
        )
    return tool_service
