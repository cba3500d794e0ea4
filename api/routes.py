#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
API Routes for the YouTube MCP server using FastAPI.

Serves the health descriptor and exposes each tool operation as
``POST /tools/{tool_name}`` for plain HTTP clients.
"""

from typing import Any, Awaitable, Callable, Dict, Tuple, Type

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel, ValidationError

from config import config
from exceptions import AppBaseError, ResourceNotFoundError, handle_exception
from models import (ChannelArguments, CommentArguments, SearchArguments, ToolResponse,
                    TranscriptArguments, VideoUrlArguments)
from services.operations import TOOL_NAMES, YouTubeToolService
from api.dependencies import get_tool_service
from logging_config import StructuredLogger

# Single source of the version, shared with setup.py
from version import __version__ as app_version


logger = StructuredLogger(__name__)

router = APIRouter()

ToolHandler = Callable[[YouTubeToolService, Any], Awaitable[ToolResponse]]

# tool name -> (argument model, handler)
TOOL_DISPATCH: Dict[str, Tuple[Type[BaseModel], ToolHandler]] = {
    "get_transcript": (
        TranscriptArguments,
        lambda service, args: service.get_transcript(args.url, args.language),
    ),
    "get_video_details": (
        VideoUrlArguments,
        lambda service, args: service.get_video_details(args.url),
    ),
    "search_videos": (
        SearchArguments,
        lambda service, args: service.search_videos(args.query, args.max_results),
    ),
    "get_channel_details": (
        ChannelArguments,
        lambda service, args: service.get_channel_details(args.channel),
    ),
    "get_video_comments": (
        CommentArguments,
        lambda service, args: service.get_video_comments(args.url, args.max_results),
    ),
}


@router.get(
    "/",
    summary="Health Check",
    description="Static descriptor of the server: name, version, MCP endpoints and tool names.",
)
async def health_check() -> Dict[str, Any]:
    """Endpoint reporting that the server is up and which tools it provides."""
    logger.debug("Health check endpoint requested.")
    return {
        "status": "ok",
        "name": config.SERVER_NAME,
        "version": app_version,
        "endpoints": {"sse": "/sse", "messages": "/messages/"},
        "tools": list(TOOL_NAMES),
    }


@router.post(
    "/tools/{tool_name}",
    response_model=ToolResponse,
    summary="Invoke a tool",
    description="Runs one tool operation with a JSON object of its arguments. "
                "Operation failures are reported in the payload with is_error=true.",
)
async def invoke_tool(
    tool_name: str,
    arguments: Dict[str, Any] = Body(default_factory=dict),
    service: YouTubeToolService = Depends(get_tool_service),
) -> ToolResponse:
    """Validate the arguments of ``tool_name`` and run it.

    Raises:
        HTTPException: 404 for an unknown tool, 422 for invalid arguments,
            500 for unexpected failures.
    """
    try:
        dispatch = TOOL_DISPATCH.get(tool_name)
        if dispatch is None:
            raise ResourceNotFoundError(f"Unknown tool: {tool_name}", error_code="UNKNOWN_TOOL")

        argument_model, handler = dispatch
        try:
            args = argument_model.model_validate(arguments)
        except ValidationError as e:
            logger.info(f"Invalid arguments for {tool_name}", tool=tool_name, errors=e.errors(include_url=False))
            raise HTTPException(
                status_code=422,
                detail=e.errors(include_url=False),
            ) from e

        logger.info(f"Invoking tool {tool_name}", tool=tool_name)
        return await handler(service, args)

    # --- Exception Handling for /tools ---
    # Use the centralized exception handler
    except HTTPException:
        raise
    except Exception as e:
        if isinstance(e, AppBaseError):
            logger.warning(f"{type(e).__name__} invoking {tool_name}: {e}", tool=tool_name, error_code=e.error_code)
        else:
            logger.critical(f"Unexpected error invoking {tool_name}: {e}", tool=tool_name)
        raise handle_exception(e)
