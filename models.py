#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Pydantic models for tool arguments, tool responses, and the result records
projected from YouTube Data API responses.

Result records use snake_case attributes and serialize with the camelCase
names of the upstream API (``view_count`` -> ``viewCount``).
"""

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from config import config


class ResultRecord(BaseModel):
    """Base class for immutable, camelCase-serialized result records."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        """Return the record as a dict keyed by upstream field names."""
        return self.model_dump(by_alias=True)


class VideoDetails(ResultRecord):
    """Metadata for a single video (``videos`` endpoint)."""

    title: str
    description: str
    channel_title: str
    channel_id: str
    published_at: str
    view_count: str
    like_count: str
    comment_count: str
    duration: str
    tags: List[str]
    thumbnail_url: str
    category_id: str


class SearchResult(ResultRecord):
    """One video returned by the ``search`` endpoint."""

    video_id: str
    title: str
    description: str
    channel_title: str
    published_at: str
    thumbnail_url: str


class ChannelInfo(ResultRecord):
    """Metadata for a channel (``channels`` endpoint)."""

    id: str
    title: str
    description: str
    custom_url: str
    published_at: str
    subscriber_count: str
    video_count: str
    view_count: str
    thumbnail_url: str
    country: str


class Comment(ResultRecord):
    """Top-level comment of a comment thread (``commentThreads`` endpoint)."""

    author: str
    text: str
    like_count: int
    published_at: str
    reply_count: int


class ToolResponse(BaseModel):
    """Uniform payload returned by every tool operation."""

    text: str = Field(..., description="JSON document on success, error message otherwise.")
    is_error: bool = Field(False, description="True when the operation failed.")

    @classmethod
    def from_result(cls, result: Any) -> "ToolResponse":
        """Serialize a record or a list of records as indented JSON."""
        if isinstance(result, list):
            payload = [item.to_dict() for item in result]
        else:
            payload = result.to_dict()
        return cls(text=json.dumps(payload, indent=2, ensure_ascii=False))

    @classmethod
    def error(cls, message: str) -> "ToolResponse":
        """Build an error payload."""
        return cls(text=message, is_error=True)


# --- Tool Argument Models (HTTP surface) ---

class _ToolArguments(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class VideoUrlArguments(_ToolArguments):
    """Arguments of ``get_video_details``."""

    url: str = Field(..., description="YouTube video URL or video ID")


class TranscriptArguments(VideoUrlArguments):
    """Arguments of ``get_transcript``."""

    language: Optional[str] = Field(
        None,
        description="Language code for the transcript (e.g. 'en', 'es'). "
                    f"Defaults to '{config.DEFAULT_TRANSCRIPT_LANGUAGE}'."
    )

    @field_validator("language")
    @classmethod
    def blank_language_means_default(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty language code as 'use the default'."""
        if v is not None and not v.strip():
            return None
        return v


class SearchArguments(_ToolArguments):
    """Arguments of ``search_videos``."""

    query: str = Field(..., min_length=1, description="Search query")
    max_results: int = Field(
        config.DEFAULT_SEARCH_RESULTS,
        alias="maxResults",
        ge=1,
        le=config.MAX_SEARCH_RESULTS,
        description=f"Maximum number of results to return (1-{config.MAX_SEARCH_RESULTS})"
    )


class ChannelArguments(_ToolArguments):
    """Arguments of ``get_channel_details``."""

    channel: str = Field(..., description="YouTube channel URL, channel ID, or @handle")


class CommentArguments(VideoUrlArguments):
    """Arguments of ``get_video_comments``."""

    max_results: int = Field(
        config.DEFAULT_COMMENT_RESULTS,
        alias="maxResults",
        ge=1,
        le=config.MAX_COMMENT_RESULTS,
        description=f"Maximum number of comments to return (1-{config.MAX_COMMENT_RESULTS})"
    )
