#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
YouTube Data API v3 client for the YouTube MCP server.

Issues single-page ``list`` requests against the Data API with the configured
API key attached, and normalizes HTTP failures into ``UpstreamApiError``.
"""

import asyncio
import re
from typing import Any, Dict, FrozenSet, Optional

from googleapiclient.discovery import Resource, build
from googleapiclient.errors import HttpError

# Imports from this package
from config import config
from exceptions import APIConfigurationError, InvalidInputError, UpstreamApiError
from utils import performance_timer
from logging_config import StructuredLogger

logger = StructuredLogger(__name__)


class YouTubeAPIClient:
    """Client for the read-only YouTube Data API v3 endpoints used by the tools.

    The API key is passed to the discovery client as ``developerKey``, which
    sends it as the reserved ``key`` query parameter on every request.
    """

    SUPPORTED_ENDPOINTS: FrozenSet[str] = frozenset({"videos", "search", "channels", "commentThreads"})

    # Quota units per call, logged with each request
    API_COST = {
        "videos": 1,
        "search": 100,
        "channels": 1,
        "commentThreads": 1,
    }

    def __init__(self, api_key: Optional[str] = None):
        """Initialize the YouTube API client.

        Args:
            api_key: YouTube Data API key. If None, the configured key is used.

        Raises:
            APIConfigurationError: If the API key is missing or client cannot be built.
        """
        self.api_key = api_key if api_key is not None else config.API_KEY

        if not self.api_key:
            logger.critical("YouTube API key is missing.", exc_info=False)
            raise APIConfigurationError("YouTube API Key is not configured.")

        try:
            # cache_discovery=False prevents issues with stale discovery documents
            self.youtube: Resource = build("youtube", "v3", developerKey=self.api_key, cache_discovery=False)
            logger.debug("YouTube API Resource created successfully.")
        except Exception as e:
            logger.critical(f"Error initializing YouTube API client build: {e}", error=str(e))
            raise APIConfigurationError(f"Could not initialize YouTube API service: {e}") from e

    def validate_api_key_format(self) -> bool:
        """Heuristic check that the key looks like a Google API key (``AIza`` + 35 chars)."""
        return bool(re.fullmatch(r"AIza[0-9A-Za-z_-]{35}", self.api_key))

    async def fetch_endpoint(self, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Issue one ``list`` request against a Data API endpoint.

        The request is sent once, without retry; the blocking HTTP call runs
        in the default executor.

        Args:
            endpoint: Endpoint name (``videos``, ``search``, ``channels``, ``commentThreads``).
            params: Query parameters for the request. ``key`` is reserved.

        Returns:
            dict: The parsed JSON response body.

        Raises:
            InvalidInputError: If the endpoint is not supported.
            UpstreamApiError: If the API answers with a non-success status.
        """
        if endpoint not in self.SUPPORTED_ENDPOINTS:
            raise InvalidInputError(f"Unsupported YouTube API endpoint: {endpoint}")

        request = getattr(self.youtube, endpoint)().list(**params)
        logger.debug(
            f"Calling {endpoint}.list",
            endpoint=endpoint,
            params=params,
            quota_cost=self.API_COST[endpoint]
        )

        loop = asyncio.get_running_loop()
        try:
            with performance_timer(f"youtube_api.{endpoint}"):
                return await loop.run_in_executor(None, request.execute)
        except HttpError as http_err:
            status_code = int(getattr(http_err.resp, "status", 500))
            body = _response_text(http_err.content)
            logger.warning(
                f"YouTube API returned {status_code} for {endpoint}.list",
                endpoint=endpoint,
                status=status_code
            )
            raise UpstreamApiError(status_code, body) from http_err


def _response_text(content: Any) -> str:
    """Decode an error response body for display."""
    if isinstance(content, bytes):
        return content.decode(config.DEFAULT_ENCODING, errors="replace")
    return str(content or "")
