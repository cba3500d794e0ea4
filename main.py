#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Main FastAPI application setup for the YouTube MCP server.

Initializes the tool service on startup, registers CORS and request logging
middleware, includes the HTTP routes, and mounts the MCP SSE transport.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Single source of the version, shared with setup.py
from version import __version__

from api import dependencies, routes
from config import config
from middleware import RequestLoggingMiddleware
from mcp_server import mcp
from logging_config import StructuredLogger

logger = StructuredLogger(__name__)

# --- Lifespan Management ---

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Populates the tool service in api.dependencies on startup.
    """
    logger.info("Starting YouTube MCP server application lifespan...")
    dependencies.initialize_services()

    yield

    logger.info("Shutting down YouTube MCP server application lifespan...")
    dependencies.tool_service = None


# --- FastAPI Application Instantiation ---

app = FastAPI(
    lifespan=lifespan,
    title="YouTube MCP Server",
    description="Read-only YouTube lookups (transcripts, video details, search, channels, comments) as MCP tools.",
    version=__version__
)

# --- Middleware Registration ---
logger.debug("Registering middleware...")

# CORS Middleware also answers preflight OPTIONS requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "Authorization"],
    max_age=config.CORS_MAX_AGE,
)
logger.debug(f"CORS Middleware added. Allowed origins: {config.ALLOWED_ORIGINS}")

app.add_middleware(RequestLoggingMiddleware)

# --- API Router Inclusion ---
app.include_router(routes.router)
logger.info("API routes included.")

# --- MCP SSE transport ---
# Mounted last: the routes above take precedence, and the SSE app answers
# every other path (/sse, /messages/, or 404).
app.mount("/", mcp.sse_app())

logger.info("FastAPI application setup complete.")
