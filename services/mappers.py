#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Response mappers: project raw Data API JSON into result records.

Optional upstream fields are coalesced one by one to their documented
sentinels. Fields outside that set are part of the API contract and are
read directly, so a malformed item fails loudly instead of producing a
half-filled record.
"""

from typing import Any, Dict, List

from exceptions import ResourceNotFoundError
from models import ChannelInfo, Comment, SearchResult, VideoDetails

NOT_AVAILABLE = "N/A"
HIDDEN = "hidden"
ZERO = "0"


def _require_items(data: Dict[str, Any], message: str) -> List[Dict[str, Any]]:
    """Return the ``items`` array, raising ResourceNotFoundError if it is empty or absent."""
    items = (data or {}).get("items")
    if not items:
        raise ResourceNotFoundError(message)
    return items


def _high_thumbnail_url(snippet: Dict[str, Any]) -> str:
    """URL of the ``high`` thumbnail, or an empty string."""
    thumbnails = snippet.get("thumbnails") or {}
    high = thumbnails.get("high") or {}
    return high.get("url") or ""


def _coalesce(container: Dict[str, Any], key: str, default: Any) -> Any:
    value = container.get(key)
    return default if value is None else value


def map_video_details(data: Dict[str, Any]) -> VideoDetails:
    """Map a ``videos.list`` response to VideoDetails."""
    item = _require_items(data, "Video not found or is private.")[0]
    snippet = item["snippet"]
    statistics = item.get("statistics") or {}

    return VideoDetails(
        title=snippet["title"],
        description=snippet["description"],
        channel_title=snippet["channelTitle"],
        channel_id=snippet["channelId"],
        published_at=snippet["publishedAt"],
        view_count=_coalesce(statistics, "viewCount", NOT_AVAILABLE),
        like_count=_coalesce(statistics, "likeCount", NOT_AVAILABLE),
        comment_count=_coalesce(statistics, "commentCount", NOT_AVAILABLE),
        duration=item["contentDetails"]["duration"],
        tags=_coalesce(snippet, "tags", []),
        thumbnail_url=_high_thumbnail_url(snippet),
        category_id=snippet["categoryId"],
    )


def map_search_results(data: Dict[str, Any]) -> List[SearchResult]:
    """Map a ``search.list`` response to a list of SearchResult."""
    items = _require_items(data, "No videos found matching the query.")

    results = []
    for item in items:
        snippet = item["snippet"]
        results.append(SearchResult(
            video_id=item["id"]["videoId"],
            title=snippet["title"],
            description=snippet["description"],
            channel_title=snippet["channelTitle"],
            published_at=snippet["publishedAt"],
            thumbnail_url=_high_thumbnail_url(snippet),
        ))
    return results


def map_channel_info(data: Dict[str, Any]) -> ChannelInfo:
    """Map a ``channels.list`` response to ChannelInfo."""
    item = _require_items(data, "Channel not found.")[0]
    snippet = item["snippet"]
    # hiddenSubscriberCount channels omit subscriberCount entirely
    statistics = item.get("statistics") or {}

    return ChannelInfo(
        id=item["id"],
        title=snippet["title"],
        description=snippet["description"],
        custom_url=_coalesce(snippet, "customUrl", ""),
        published_at=snippet["publishedAt"],
        subscriber_count=_coalesce(statistics, "subscriberCount", HIDDEN),
        video_count=_coalesce(statistics, "videoCount", ZERO),
        view_count=_coalesce(statistics, "viewCount", ZERO),
        thumbnail_url=_high_thumbnail_url(snippet),
        country=_coalesce(snippet, "country", NOT_AVAILABLE),
    )


def map_comments(data: Dict[str, Any]) -> List[Comment]:
    """Map a ``commentThreads.list`` response to the top-level comments."""
    items = _require_items(data, "No comments found for this video.")

    comments = []
    for item in items:
        thread = item["snippet"]
        top = thread["topLevelComment"]["snippet"]
        comments.append(Comment(
            author=top["authorDisplayName"],
            text=top["textDisplay"],
            like_count=top["likeCount"],
            published_at=top["publishedAt"],
            reply_count=thread["totalReplyCount"],
        ))
    return comments
