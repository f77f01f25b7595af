"""
Metadata fetcher interface and its yt-dlp implementation.

The planner only depends on the MetadataFetcher protocol; any object with
the two coroutine methods can be injected (tests use in-memory fakes).
"""

import asyncio
from typing import Optional, Protocol

from ..config import Settings, DEFAULT_SETTINGS
from ..models.video import ChannelSnapshot, TargetVideo
from .channel import ChannelExtractor
from .metadata import MetadataExtractor


class MetadataFetcher(Protocol):
    async def fetch_channel_snapshot(self, handle: str) -> ChannelSnapshot:
        """Fetch a channel's latest uploads. Raises FetchError."""
        ...

    async def fetch_video_metadata(self, url: str) -> TargetVideo:
        """Fetch a single video's metadata. Raises FetchError."""
        ...


class YtDlpFetcher:
    """
    MetadataFetcher backed by yt-dlp.

    yt-dlp is blocking, so each call runs in a worker thread and concurrent
    fetches overlap.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or DEFAULT_SETTINGS
        self.channel_extractor = ChannelExtractor(
            max_videos=self.settings.max_videos,
            quiet=self.settings.quiet_mode,
            socket_timeout=self.settings.socket_timeout,
        )
        self.metadata_extractor = MetadataExtractor(
            quiet=self.settings.quiet_mode,
            socket_timeout=self.settings.socket_timeout,
        )

    async def fetch_channel_snapshot(self, handle: str) -> ChannelSnapshot:
        return await asyncio.to_thread(self.channel_extractor.extract, handle)

    async def fetch_video_metadata(self, url: str) -> TargetVideo:
        return await asyncio.to_thread(self.metadata_extractor.extract, url)
