#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tool operations for the YouTube MCP server.

Each operation parses its input into a canonical identifier, calls one Data
API endpoint (or the caption source), maps the response, and returns a
``ToolResponse``. Failures never escape: they are logged and returned as
error payloads naming the operation that failed.
"""

from typing import Any, Awaitable, Callable, Optional

# Imports from this package
from config import config
from exceptions import (AppBaseError, APIConfigurationError, IdentifierParseError,
                        InvalidInputError)
from models import ToolResponse
from services.identifiers import channel_query_params, extract_channel_identifier, extract_video_id
from services.mappers import map_channel_info, map_comments, map_search_results, map_video_details
from services.transcript import TranscriptFetcher
from services.youtube_api import YouTubeAPIClient
from logging_config import StructuredLogger

logger = StructuredLogger(__name__)

NO_TRANSCRIPT_CONTENT = "No transcript content found."
VIDEO_ID_PARSE_MESSAGE = "Could not extract a valid video ID from the provided URL."
CHANNEL_PARSE_MESSAGE = "Could not parse channel identifier."

TOOL_NAMES = (
    "get_transcript",
    "get_video_details",
    "search_videos",
    "get_channel_details",
    "get_video_comments",
)


def _require_video_id(url: str) -> str:
    video_id = extract_video_id(url)
    if not video_id:
        raise IdentifierParseError(VIDEO_ID_PARSE_MESSAGE)
    return video_id


def _check_max_results(value: Any, upper: int) -> int:
    """Reject result counts outside 1..upper before any request is made."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"maxResults must be an integer between 1 and {upper}, got {value!r}.")
    if not 1 <= value <= upper:
        raise InvalidInputError(f"maxResults must be between 1 and {upper}, got {value}.")
    return value


class YouTubeToolService:
    """The five lookup operations exposed to tool clients.

    Holds no per-call state: every invocation is independent, and identical
    inputs against unchanged upstream data produce identical responses.
    """

    def __init__(self, api_client: Optional[YouTubeAPIClient], transcript_fetcher: TranscriptFetcher):
        """Initialize the service.

        Args:
            api_client: Data API client, or None when no API key is configured.
                Only ``get_transcript`` works without it.
            transcript_fetcher: Caption source adapter.
        """
        self.api_client = api_client
        self.transcript_fetcher = transcript_fetcher

    def _require_api_client(self) -> YouTubeAPIClient:
        if self.api_client is None:
            raise APIConfigurationError("YouTube API key is not configured (set YOUTUBE_API_KEY).")
        return self.api_client

    async def _run(self, operation: str, action: str, call: Callable[[], Awaitable[ToolResponse]]) -> ToolResponse:
        """Run one operation, converting any failure into an error payload.

        Args:
            operation: Tool name, attached to log records.
            action: Human-readable description used in error messages.
            call: Coroutine factory performing the operation.
        """
        log = logger.bind(operation=operation)
        try:
            return await call()
        except IdentifierParseError as e:
            log.info(f"{operation}: {e.message}", error_code=e.error_code)
            return ToolResponse.error(f"Error: {e.message}")
        except AppBaseError as e:
            log.warning(f"{operation} failed: {e.message}", error_code=e.error_code)
            return ToolResponse.error(f"Error {action}: {e.message}")
        except Exception as e:
            log.error(f"Unexpected error in {operation}: {e}", error=str(e))
            return ToolResponse.error(f"Error {action}: {e}")

    # --- Operations ---

    async def get_transcript(self, url: str, language: Optional[str] = None) -> ToolResponse:
        """Fetch the captions of a video as one space-joined string."""
        async def call() -> ToolResponse:
            video_id = _require_video_id(url)
            fragments = await self.transcript_fetcher.fetch_fragments(
                video_id, language or config.DEFAULT_TRANSCRIPT_LANGUAGE
            )
            transcript = " ".join(fragments)
            return ToolResponse(text=transcript or NO_TRANSCRIPT_CONTENT)

        return await self._run("get_transcript", "fetching transcript", call)

    async def get_video_details(self, url: str) -> ToolResponse:
        """Fetch title, statistics and other metadata for a video."""
        async def call() -> ToolResponse:
            video_id = _require_video_id(url)
            data = await self._require_api_client().fetch_endpoint("videos", {
                "part": "snippet,statistics,contentDetails",
                "id": video_id,
            })
            return ToolResponse.from_result(map_video_details(data))

        return await self._run("get_video_details", "fetching video details", call)

    async def search_videos(self, query: str, max_results: Optional[int] = None) -> ToolResponse:
        """Search for videos matching a query (one page, at most MAX_SEARCH_RESULTS)."""
        async def call() -> ToolResponse:
            if not query or not query.strip():
                raise InvalidInputError("Search query cannot be empty.")
            count = _check_max_results(
                config.DEFAULT_SEARCH_RESULTS if max_results is None else max_results,
                config.MAX_SEARCH_RESULTS
            )
            data = await self._require_api_client().fetch_endpoint("search", {
                "part": "snippet",
                "q": query,
                "type": "video",
                "maxResults": count,
            })
            return ToolResponse.from_result(map_search_results(data))

        return await self._run("search_videos", "searching videos", call)

    async def get_channel_details(self, channel: str) -> ToolResponse:
        """Fetch metadata for a channel given its URL, ID, handle or username."""
        async def call() -> ToolResponse:
            identifier = extract_channel_identifier(channel)
            if identifier is None:
                raise IdentifierParseError(CHANNEL_PARSE_MESSAGE)
            params = {"part": "snippet,statistics", **channel_query_params(identifier)}
            data = await self._require_api_client().fetch_endpoint("channels", params)
            return ToolResponse.from_result(map_channel_info(data))

        return await self._run("get_channel_details", "fetching channel info", call)

    async def get_video_comments(self, url: str, max_results: Optional[int] = None) -> ToolResponse:
        """Fetch the top-level comments of a video."""
        async def call() -> ToolResponse:
            video_id = _require_video_id(url)
            count = _check_max_results(
                config.DEFAULT_COMMENT_RESULTS if max_results is None else max_results,
                config.MAX_COMMENT_RESULTS
            )
            data = await self._require_api_client().fetch_endpoint("commentThreads", {
                "part": "snippet",
                "videoId": video_id,
                "maxResults": count,
                "order": config.COMMENT_ORDER,
                "textFormat": config.COMMENT_TEXT_FORMAT,
            })
            return ToolResponse.from_result(map_comments(data))

        return await self._run("get_video_comments", "fetching comments", call)
