"""
Sample YouTube Data API responses shared by the tests.
"""
import copy

VIDEO_RESPONSE = {
    "kind": "youtube#videoListResponse",
    "items": [
        {
            "id": "dQw4w9WgXcQ",
            "snippet": {
                "publishedAt": "2009-10-25T06:57:33Z",
                "channelId": "UCuAXFkgsw1L7xaCfnd5JJOw",
                "title": "Never Gonna Give You Up",
                "description": "The official video.",
                "thumbnails": {"high": {"url": "https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg"}},
                "channelTitle": "Rick Astley",
                "tags": ["rick astley", "never gonna give you up"],
                "categoryId": "10",
            },
            "contentDetails": {"duration": "PT3M33S"},
            "statistics": {"viewCount": "1500000000", "likeCount": "17000000", "commentCount": "2300000"},
        }
    ],
}

SEARCH_RESPONSE = {
    "kind": "youtube#searchListResponse",
    "items": [
        {
            "id": {"kind": "youtube#video", "videoId": "dQw4w9WgXcQ"},
            "snippet": {
                "publishedAt": "2009-10-25T06:57:33Z",
                "title": "Never Gonna Give You Up",
                "description": "The official video.",
                "thumbnails": {"high": {"url": "https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg"}},
                "channelTitle": "Rick Astley",
            },
        },
        {
            "id": {"kind": "youtube#video", "videoId": "yPYZpwSpKmA"},
            "snippet": {
                "publishedAt": "2016-07-27T07:00:00Z",
                "title": "Together Forever",
                "description": "",
                "thumbnails": {"default": {"url": "https://i.ytimg.com/vi/yPYZpwSpKmA/default.jpg"}},
                "channelTitle": "Rick Astley",
            },
        },
    ],
}

CHANNEL_RESPONSE = {
    "kind": "youtube#channelListResponse",
    "items": [
        {
            "id": "UCBJycsmduvYEL83R_U4JriQ",
            "snippet": {
                "title": "Marques Brownlee",
                "description": "MKBHD: Quality Tech Videos",
                "customUrl": "@mkbhd",
                "publishedAt": "2008-03-21T15:25:54Z",
                "thumbnails": {"high": {"url": "https://yt3.ggpht.com/mkbhd.jpg"}},
                "country": "US",
            },
            "statistics": {"viewCount": "4000000000", "subscriberCount": "19000000", "videoCount": "1600"},
        }
    ],
}

COMMENTS_RESPONSE = {
    "kind": "youtube#commentThreadListResponse",
    "items": [
        {
            "snippet": {
                "videoId": "dQw4w9WgXcQ",
                "topLevelComment": {
                    "snippet": {
                        "authorDisplayName": "@viewer",
                        "textDisplay": "Still a classic",
                        "likeCount": 42,
                        "publishedAt": "2024-01-01T00:00:00Z",
                    }
                },
                "totalReplyCount": 3,
            }
        }
    ],
}


def response(name):
    """Return a deep copy of a sample response so tests can mutate it."""
    return copy.deepcopy(globals()[name])
