#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Transcript fetcher for the YouTube MCP server.

Thin asynchronous adapter over youtube_transcript_api. Captions are scraped
from the public watch page, so no Data API key is involved.
"""

import asyncio
from typing import List, Optional

import requests
from youtube_transcript_api import CouldNotRetrieveTranscript, YouTubeTranscriptApi

# Imports from this package
from config import config
from exceptions import TranscriptFetchError
from utils import performance_timer
from logging_config import StructuredLogger

logger = StructuredLogger(__name__)


class TranscriptFetcher:
    """Fetches caption fragments for a video in a requested language."""

    def __init__(self, transcript_api: Optional[YouTubeTranscriptApi] = None):
        """Initialize the fetcher.

        Args:
            transcript_api: Optional preconfigured client (e.g. with a proxy config).
        """
        self.transcript_api = transcript_api or YouTubeTranscriptApi()

    async def fetch_fragments(self, video_id: str, language: Optional[str] = None) -> List[str]:
        """Fetch the caption fragments of a video, in order.

        Args:
            video_id: The 11-character video ID.
            language: Language code; defaults to config.DEFAULT_TRANSCRIPT_LANGUAGE.

        Returns:
            list: The text of each caption fragment.

        Raises:
            TranscriptFetchError: If captions are disabled, unavailable in the
                language, or the caption source cannot be reached.
        """
        lang = language or config.DEFAULT_TRANSCRIPT_LANGUAGE
        log_prefix = f"[{video_id}][{lang}]"
        logger.debug(f"{log_prefix} Fetching transcript...")

        loop = asyncio.get_running_loop()
        try:
            with performance_timer("transcript.fetch"):
                fetched = await loop.run_in_executor(
                    None,
                    lambda: self.transcript_api.fetch(video_id, languages=[lang])
                )
        except CouldNotRetrieveTranscript as e_retrieve:
            logger.info(f"{log_prefix} Transcript unavailable: {type(e_retrieve).__name__}")
            raise TranscriptFetchError(str(e_retrieve)) from e_retrieve
        except requests.RequestException as e_network:
            logger.warning(f"{log_prefix} Network error while fetching transcript: {e_network}")
            raise TranscriptFetchError(str(e_network)) from e_network

        fragments = [snippet.text for snippet in fetched]
        logger.debug(f"{log_prefix} Fetched {len(fragments)} caption fragments.")
        return fragments
