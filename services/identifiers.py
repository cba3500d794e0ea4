#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Identifier parsing for YouTube inputs.

Turns the strings users paste (watch/short/embed/shorts/live URLs, bare
video IDs, channel URLs, @handles, channel IDs, legacy usernames) into the
canonical identifiers used for Data API calls. Everything here is pure and
never touches the network.
"""

import re
from dataclasses import dataclass
from typing import Dict, Optional, Union

VIDEO_ID_RE = re.compile(r"^[a-zA-Z0-9_-]{11}$")

# Exactly one of these can match a given URL; dict order is irrelevant.
VIDEO_URL_PATTERNS: Dict[str, "re.Pattern[str]"] = {
    "watch": re.compile(r"youtube\.com/watch\?.*v=([a-zA-Z0-9_-]{11})"),
    "short_link": re.compile(r"youtu\.be/([a-zA-Z0-9_-]{11})"),
    "embed": re.compile(r"youtube\.com/embed/([a-zA-Z0-9_-]{11})"),
    "shorts": re.compile(r"youtube\.com/shorts/([a-zA-Z0-9_-]{11})"),
    "live": re.compile(r"youtube\.com/live/([a-zA-Z0-9_-]{11})"),
    "legacy_v": re.compile(r"youtube\.com/v/([a-zA-Z0-9_-]{11})"),
}

CHANNEL_ID_URL_RE = re.compile(r"youtube\.com/channel/([a-zA-Z0-9_-]+)")
CHANNEL_HANDLE_URL_RE = re.compile(r"youtube\.com/@([a-zA-Z0-9_.-]+)")

CHANNEL_ID_LENGTH = 24
CHANNEL_ID_PREFIX = "UC"


# --- Channel identifier variants ---

@dataclass(frozen=True)
class ChannelId:
    """A channel ID such as ``UCBJycsmduvYEL83R_U4JriQ``."""
    value: str


@dataclass(frozen=True)
class ChannelHandle:
    """A channel handle, always including the leading ``@``."""
    value: str


@dataclass(frozen=True)
class ChannelUsername:
    """A legacy channel username (``youtube.com/user/<name>``)."""
    value: str


ChannelIdentifier = Union[ChannelId, ChannelHandle, ChannelUsername]


def extract_video_id(url_or_id: str) -> Optional[str]:
    """Extract the 11-character video ID from a URL or a bare ID.

    Args:
        url_or_id: A video URL in any supported shape, or the ID itself.

    Returns:
        The video ID, or None if the input is not a supported video reference.

    Examples::

        >>> extract_video_id("https://youtu.be/dQw4w9WgXcQ")
        'dQw4w9WgXcQ'
        >>> extract_video_id("https://www.youtube.com/playlist?list=PL123") is None
        True
    """
    if not isinstance(url_or_id, str):
        return None

    trimmed = url_or_id.strip()
    if VIDEO_ID_RE.match(trimmed):
        return trimmed

    for pattern in VIDEO_URL_PATTERNS.values():
        match = pattern.search(trimmed)
        if match:
            return match.group(1)
    return None


def extract_channel_identifier(channel: str) -> Optional[ChannelIdentifier]:
    """Classify a channel reference.

    Channel URLs and ``@handles`` are recognised explicitly, a 24-character
    ``UC...`` string is taken as a channel ID, and anything else falls back to
    a legacy username lookup.

    Args:
        channel: A channel URL, channel ID, ``@handle`` or username.

    Returns:
        The matching identifier variant, or None for empty input.
    """
    if not isinstance(channel, str):
        return None

    trimmed = channel.strip()
    if not trimmed:
        return None

    id_match = CHANNEL_ID_URL_RE.search(trimmed)
    if id_match:
        return ChannelId(id_match.group(1))

    handle_match = CHANNEL_HANDLE_URL_RE.search(trimmed)
    if handle_match:
        return ChannelHandle(f"@{handle_match.group(1)}")

    if trimmed.startswith("@"):
        return ChannelHandle(trimmed)
    if trimmed.startswith(CHANNEL_ID_PREFIX) and len(trimmed) == CHANNEL_ID_LENGTH:
        return ChannelId(trimmed)

    return ChannelUsername(trimmed)


def channel_query_params(identifier: ChannelIdentifier) -> Dict[str, str]:
    """Map a channel identifier to the ``channels.list`` filter parameter."""
    if isinstance(identifier, ChannelId):
        return {"id": identifier.value}
    if isinstance(identifier, ChannelHandle):
        return {"forHandle": identifier.value}
    if isinstance(identifier, ChannelUsername):
        return {"forUsername": identifier.value}
    raise TypeError(f"Unsupported channel identifier: {identifier!r}")
