"""Shared fixtures: video factories and an in-memory metadata fetcher."""

import asyncio
from datetime import datetime, timezone

import pytest

from insight_youtube_seo.errors import FetchError
from insight_youtube_seo.models.video import ChannelSnapshot, TargetVideo, VideoRecord


def make_video(
    title: str,
    description: str = "",
    keywords=(),
    hashtags=(),
    video_id: str = "abc12345678",
    day: int = 1,
) -> VideoRecord:
    return VideoRecord(
        id=video_id,
        title=title,
        description=description,
        published_at=datetime(2024, 1, day, tzinfo=timezone.utc),
        link=f"https://www.youtube.com/watch?v={video_id}",
        keywords=tuple(keywords),
        hashtags=tuple(hashtags),
    )


def make_snapshot(handle: str, videos=()) -> ChannelSnapshot:
    return ChannelSnapshot(
        handle=handle,
        channel_id=f"UC{handle.strip('@')}",
        channel_title=handle.strip("@"),
        videos=tuple(videos),
    )


class FakeFetcher:
    """
    In-memory MetadataFetcher.

    ``delays`` maps a handle/URL to seconds slept before answering, so tests
    can make fetches complete out of request order.
    """

    def __init__(self, snapshots=None, targets=None, failures=None, delays=None):
        self.snapshots = snapshots or {}
        self.targets = targets or {}
        self.failures = failures or {}
        self.delays = delays or {}
        self.calls = []
        self.cancelled = []

    async def _answer(self, key, table):
        self.calls.append(key)
        try:
            await asyncio.sleep(self.delays.get(key, 0))
        except asyncio.CancelledError:
            self.cancelled.append(key)
            raise
        if key in self.failures:
            raise self.failures[key]
        if key not in table:
            raise FetchError(key, "not found")
        return table[key]

    async def fetch_channel_snapshot(self, handle):
        return await self._answer(handle, self.snapshots)

    async def fetch_video_metadata(self, url):
        return await self._answer(url, self.targets)


@pytest.fixture
def gadget_snapshots():
    """Two channels whose titles share the "Top 5" opener."""
    videos = [
        make_video(
            "Top 5 Gadgets 2024",
            "Best gadgets of the year. Subscribe for more! https://example.com/deals #tech #gadgets",
            keywords=["gadgets", "tech review"],
            video_id="gadget00001",
            day=2,
        ),
        make_video(
            "Top 5 Apps 2024",
            "Apps you need. Comment below with your favorite app. #tech #apps",
            keywords=["apps", "Tech Review"],
            video_id="apps0000001",
            day=1,
        ),
    ]
    return {
        "@A": make_snapshot("@A", videos),
        "@B": make_snapshot("@B", videos),
    }


@pytest.fixture
def target_video():
    return TargetVideo(
        title="My Honest Phone Review",
        description="I tested this phone for a month.\nSubscribe for more!",
        keywords=("phone review", "smartphone"),
        author="Test Creator",
        video_id="dQw4w9WgXcQ",
        url="https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    )
