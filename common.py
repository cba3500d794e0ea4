#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Common utilities for the YouTube MCP server.
"""


def is_true(value: str) -> bool:
    """Check if a string value represents a boolean True.

    Args:
        value: String value to check

    Returns:
        bool: True if the value represents a boolean True
    """
    if not value:
        return False
    return value.lower() in ("true", "1", "yes", "y", "on")
