"""
Tests for the YouTubeToolService operations.
"""
import unittest
import sys
import os
import json
from unittest.mock import AsyncMock, MagicMock

# Add the parent directory to the path so we can import the application modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from services.operations import YouTubeToolService, NO_TRANSCRIPT_CONTENT
from services.transcript import TranscriptFetcher
from services.youtube_api import YouTubeAPIClient
from exceptions import TranscriptFetchError, UpstreamApiError
from fixtures import response

VIDEO_ID = "dQw4w9WgXcQ"


class ToolServiceTestCase(unittest.IsolatedAsyncioTestCase):
    """Shared fixtures: a service around mocked collaborators."""

    async def asyncSetUp(self):
        self.api_client = MagicMock(spec=YouTubeAPIClient)
        self.api_client.fetch_endpoint = AsyncMock()
        self.transcript_fetcher = MagicMock(spec=TranscriptFetcher)
        self.transcript_fetcher.fetch_fragments = AsyncMock()
        self.service = YouTubeToolService(self.api_client, self.transcript_fetcher)


class TestGetTranscript(ToolServiceTestCase):

    async def test_joins_fragments_with_spaces(self):
        self.transcript_fetcher.fetch_fragments.return_value = ["Never gonna", "give you up"]

        result = await self.service.get_transcript(f"https://youtu.be/{VIDEO_ID}")

        self.assertFalse(result.is_error)
        self.assertEqual(result.text, "Never gonna give you up")
        self.transcript_fetcher.fetch_fragments.assert_awaited_once_with(VIDEO_ID, "en")
        self.api_client.fetch_endpoint.assert_not_awaited()

    async def test_language_is_forwarded(self):
        self.transcript_fetcher.fetch_fragments.return_value = ["hola"]

        await self.service.get_transcript(VIDEO_ID, language="es")

        self.transcript_fetcher.fetch_fragments.assert_awaited_once_with(VIDEO_ID, "es")

    async def test_empty_transcript(self):
        self.transcript_fetcher.fetch_fragments.return_value = []

        result = await self.service.get_transcript(VIDEO_ID)

        self.assertFalse(result.is_error)
        self.assertEqual(result.text, NO_TRANSCRIPT_CONTENT)

    async def test_works_without_api_client(self):
        service = YouTubeToolService(None, self.transcript_fetcher)
        self.transcript_fetcher.fetch_fragments.return_value = ["hello"]

        result = await service.get_transcript(VIDEO_ID)

        self.assertEqual(result.text, "hello")

    async def test_invalid_url(self):
        result = await self.service.get_transcript("https://example.com/not-youtube")

        self.assertTrue(result.is_error)
        self.assertEqual(result.text, "Error: Could not extract a valid video ID from the provided URL.")
        self.transcript_fetcher.fetch_fragments.assert_not_awaited()

    async def test_fetch_error(self):
        self.transcript_fetcher.fetch_fragments.side_effect = TranscriptFetchError("Subtitles are disabled")

        result = await self.service.get_transcript(VIDEO_ID)

        self.assertTrue(result.is_error)
        self.assertEqual(result.text, "Error fetching transcript: Subtitles are disabled")


class TestGetVideoDetails(ToolServiceTestCase):

    async def test_success(self):
        self.api_client.fetch_endpoint.return_value = response("VIDEO_RESPONSE")

        result = await self.service.get_video_details(f"https://www.youtube.com/watch?v={VIDEO_ID}")

        self.assertFalse(result.is_error)
        payload = json.loads(result.text)
        self.assertEqual(payload["title"], "Never Gonna Give You Up")
        self.assertEqual(payload["viewCount"], "1500000000")
        self.api_client.fetch_endpoint.assert_awaited_once_with(
            "videos", {"part": "snippet,statistics,contentDetails", "id": VIDEO_ID}
        )

    async def test_not_found(self):
        self.api_client.fetch_endpoint.return_value = {"items": []}

        result = await self.service.get_video_details(VIDEO_ID)

        self.assertTrue(result.is_error)
        self.assertEqual(result.text, "Error fetching video details: Video not found or is private.")

    async def test_upstream_error(self):
        self.api_client.fetch_endpoint.side_effect = UpstreamApiError(400, "API key not valid")

        result = await self.service.get_video_details(VIDEO_ID)

        self.assertTrue(result.is_error)
        self.assertEqual(result.text, "Error fetching video details: YouTube API error (400): API key not valid")

    async def test_invalid_url_skips_network(self):
        result = await self.service.get_video_details("https://www.youtube.com/playlist?list=PL123")

        self.assertTrue(result.is_error)
        self.api_client.fetch_endpoint.assert_not_awaited()

    async def test_missing_api_client(self):
        service = YouTubeToolService(None, self.transcript_fetcher)

        result = await service.get_video_details(VIDEO_ID)

        self.assertTrue(result.is_error)
        self.assertIn("YOUTUBE_API_KEY", result.text)

    async def test_malformed_item(self):
        data = response("VIDEO_RESPONSE")
        del data["items"][0]["contentDetails"]
        self.api_client.fetch_endpoint.return_value = data

        result = await self.service.get_video_details(VIDEO_ID)

        self.assertTrue(result.is_error)
        self.assertTrue(result.text.startswith("Error fetching video details:"))

    async def test_idempotent(self):
        self.api_client.fetch_endpoint.return_value = response("VIDEO_RESPONSE")

        first = await self.service.get_video_details(VIDEO_ID)
        second = await self.service.get_video_details(VIDEO_ID)

        self.assertEqual(first, second)


class TestSearchVideos(ToolServiceTestCase):

    async def test_default_max_results(self):
        self.api_client.fetch_endpoint.return_value = response("SEARCH_RESPONSE")

        result = await self.service.search_videos("rick astley")

        self.assertFalse(result.is_error)
        self.assertEqual(len(json.loads(result.text)), 2)
        self.api_client.fetch_endpoint.assert_awaited_once_with(
            "search", {"part": "snippet", "q": "rick astley", "type": "video", "maxResults": 5}
        )

    async def test_max_results_above_cap_is_rejected(self):
        result = await self.service.search_videos("rick astley", max_results=30)

        self.assertTrue(result.is_error)
        self.assertIn("between 1 and 25", result.text)
        self.api_client.fetch_endpoint.assert_not_awaited()

    async def test_max_results_zero_is_rejected(self):
        result = await self.service.search_videos("rick astley", max_results=0)

        self.assertTrue(result.is_error)
        self.api_client.fetch_endpoint.assert_not_awaited()

    async def test_max_results_at_cap(self):
        self.api_client.fetch_endpoint.return_value = response("SEARCH_RESPONSE")

        await self.service.search_videos("rick astley", max_results=25)

        params = self.api_client.fetch_endpoint.await_args.args[1]
        self.assertEqual(params["maxResults"], 25)

    async def test_empty_query(self):
        result = await self.service.search_videos("   ")

        self.assertTrue(result.is_error)
        self.api_client.fetch_endpoint.assert_not_awaited()


class TestGetChannelDetails(ToolServiceTestCase):

    async def test_handle(self):
        self.api_client.fetch_endpoint.return_value = response("CHANNEL_RESPONSE")

        result = await self.service.get_channel_details("@mkbhd")

        self.assertFalse(result.is_error)
        self.assertEqual(json.loads(result.text)["customUrl"], "@mkbhd")
        self.api_client.fetch_endpoint.assert_awaited_once_with(
            "channels", {"part": "snippet,statistics", "forHandle": "@mkbhd"}
        )

    async def test_channel_id(self):
        self.api_client.fetch_endpoint.return_value = response("CHANNEL_RESPONSE")

        await self.service.get_channel_details("https://www.youtube.com/channel/UCBJycsmduvYEL83R_U4JriQ")

        self.api_client.fetch_endpoint.assert_awaited_once_with(
            "channels", {"part": "snippet,statistics", "id": "UCBJycsmduvYEL83R_U4JriQ"}
        )

    async def test_username(self):
        self.api_client.fetch_endpoint.return_value = response("CHANNEL_RESPONSE")

        await self.service.get_channel_details("GoogleDevelopers")

        self.api_client.fetch_endpoint.assert_awaited_once_with(
            "channels", {"part": "snippet,statistics", "forUsername": "GoogleDevelopers"}
        )

    async def test_empty_input(self):
        result = await self.service.get_channel_details("  ")

        self.assertTrue(result.is_error)
        self.assertEqual(result.text, "Error: Could not parse channel identifier.")
        self.api_client.fetch_endpoint.assert_not_awaited()

    async def test_not_found(self):
        self.api_client.fetch_endpoint.return_value = {"items": []}

        result = await self.service.get_channel_details("@nobody")

        self.assertTrue(result.is_error)
        self.assertEqual(result.text, "Error fetching channel info: Channel not found.")


class TestGetVideoComments(ToolServiceTestCase):

    async def test_default_parameters(self):
        self.api_client.fetch_endpoint.return_value = response("COMMENTS_RESPONSE")

        result = await self.service.get_video_comments(VIDEO_ID)

        self.assertFalse(result.is_error)
        self.assertEqual(json.loads(result.text)[0]["replyCount"], 3)
        self.api_client.fetch_endpoint.assert_awaited_once_with("commentThreads", {
            "part": "snippet",
            "videoId": VIDEO_ID,
            "maxResults": 20,
            "order": "relevance",
            "textFormat": "plainText",
        })

    async def test_max_results_above_cap_is_rejected(self):
        result = await self.service.get_video_comments(VIDEO_ID, max_results=101)

        self.assertTrue(result.is_error)
        self.api_client.fetch_endpoint.assert_not_awaited()

    async def test_comments_disabled(self):
        self.api_client.fetch_endpoint.side_effect = UpstreamApiError(403, "commentsDisabled")

        result = await self.service.get_video_comments(VIDEO_ID, max_results=100)

        self.assertTrue(result.is_error)
        self.assertEqual(result.text, "Error fetching comments: YouTube API error (403): commentsDisabled")


if __name__ == '__main__':
    unittest.main()
