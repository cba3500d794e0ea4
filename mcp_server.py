#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
MCP tool registration for the YouTube MCP server.

Creates the shared ``FastMCP`` instance and registers the five lookup tools
on it. The tools delegate to the process-wide ``YouTubeToolService`` and
return its payload as a ``CallToolResult``, with ``isError`` set for error
payloads, so clients receive the service's message text unchanged.

Run this module directly to serve the tools over stdio::

    "command": "python",
    "args": ["mcp_server.py"]

``main.py`` mounts the same instance's SSE app for HTTP clients.

The server name and the ``maxResults`` bounds are fixed when this module is
imported. They come from the process environment or from the ``.env`` file
that ``config`` loads on import.
"""

import logging
import sys
from typing import Annotated, Any, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent
from pydantic import Field

from config import config
from models import ToolResponse
from api import dependencies
from logging_config import StructuredLogger, setup_logging

logger = StructuredLogger(__name__)

SERVICE_UNAVAILABLE_MESSAGE = "Service Initialization Error: YouTube tool service is not available."

# Create the shared MCP server instance.
mcp = FastMCP(config.SERVER_NAME)


async def _call(operation: str, *args: Any) -> CallToolResult:
    """Run a service operation and wrap its payload as an MCP tool result."""
    service = dependencies.tool_service
    if service is None:
        logger.critical(f"{operation} called before the tool service was initialized.", exc_info=False)
        response = ToolResponse.error(SERVICE_UNAVAILABLE_MESSAGE)
    else:
        response = await getattr(service, operation)(*args)

    return CallToolResult(
        content=[TextContent(type="text", text=response.text)],
        isError=response.is_error,
    )


@mcp.tool()
async def get_transcript(
    url: Annotated[str, Field(description="YouTube video URL or video ID")],
    language: Annotated[Optional[str], Field(
        description="Language code for the transcript (e.g. 'en', 'es'). "
                    f"Defaults to '{config.DEFAULT_TRANSCRIPT_LANGUAGE}'."
    )] = None,
) -> CallToolResult:
    """Fetch the transcript/captions of a YouTube video"""
    return await _call("get_transcript", url, language)


@mcp.tool()
async def get_video_details(
    url: Annotated[str, Field(description="YouTube video URL or video ID")],
) -> CallToolResult:
    """Get metadata for a YouTube video including title, description, view count, likes, and more"""
    return await _call("get_video_details", url)


@mcp.tool()
async def search_videos(
    query: Annotated[str, Field(description="Search query")],
    maxResults: Annotated[int, Field(
        ge=1,
        le=config.MAX_SEARCH_RESULTS,
        description=f"Maximum number of results to return (1-{config.MAX_SEARCH_RESULTS}, "
                    f"default {config.DEFAULT_SEARCH_RESULTS})"
    )] = config.DEFAULT_SEARCH_RESULTS,
) -> CallToolResult:
    """Search YouTube for videos matching a query"""
    return await _call("search_videos", query, maxResults)


@mcp.tool()
async def get_channel_details(
    channel: Annotated[str, Field(description="YouTube channel URL, channel ID, or @handle")],
) -> CallToolResult:
    """Get information about a YouTube channel"""
    return await _call("get_channel_details", channel)


@mcp.tool()
async def get_video_comments(
    url: Annotated[str, Field(description="YouTube video URL or video ID")],
    maxResults: Annotated[int, Field(
        ge=1,
        le=config.MAX_COMMENT_RESULTS,
        description=f"Maximum number of comments to return (1-{config.MAX_COMMENT_RESULTS}, "
                    f"default {config.DEFAULT_COMMENT_RESULTS})"
    )] = config.DEFAULT_COMMENT_RESULTS,
) -> CallToolResult:
    """Get top comments on a YouTube video"""
    return await _call("get_video_comments", url, maxResults)


def main() -> None:
    """Serve the tools over stdio."""
    # stdout carries the MCP protocol; logs go to stderr
    setup_logging(log_level_console=logging.INFO, structured=False, stream=sys.stderr, log_file=None)

    dependencies.initialize_services()
    logger.info(f"Starting MCP server '{config.SERVER_NAME}' on stdio")
    mcp.run()


if __name__ == "__main__":
    main()
