"""
Channel snapshot extraction using yt-dlp.
"""

import logging
from datetime import datetime, timezone

import yt_dlp

from ..errors import FetchError
from ..models.video import ChannelSnapshot
from .metadata import video_record_from_info
from .video_source import resolve_channel_url

logger = logging.getLogger(__name__)

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


class ChannelExtractor:
    """Extract a channel's latest uploads."""

    def __init__(self, max_videos: int = 15, quiet: bool = True, socket_timeout: float = 30.0):
        """
        Initialize the channel extractor.

        Args:
            max_videos: Number of latest uploads to extract.
            quiet: Suppress yt-dlp output.
            socket_timeout: Network timeout in seconds.
        """
        self.max_videos = max_videos
        self.quiet = quiet
        self.socket_timeout = socket_timeout

    def extract(self, handle: str) -> ChannelSnapshot:
        """
        Extract a snapshot of a channel's latest uploads.

        Args:
            handle: Channel handle (``@name``), channel ID or channel URL.

        Returns:
            ChannelSnapshot with videos newest first.

        Raises:
            FetchError: The handle cannot be resolved or yt-dlp failed.
        """
        channel_url = resolve_channel_url(handle)
        if not channel_url:
            raise FetchError(handle, "not a recognizable channel handle or URL")

        # Full extraction (not extract_flat) so entries carry descriptions and tags.
        ydl_opts = {
            'quiet': self.quiet,
            'no_warnings': self.quiet,
            'skip_download': True,
            'playlistend': self.max_videos,
            'ignoreerrors': True,
            'socket_timeout': self.socket_timeout,
        }

        logger.debug("Extracting channel uploads: %s", channel_url)
        try:
            with yt_dlp.YoutubeDL(ydl_opts) as ydl:
                info = ydl.extract_info(channel_url, download=False)
        except yt_dlp.utils.DownloadError as e:
            raise FetchError(handle, str(e)) from e

        if not info:
            raise FetchError(handle, "channel not found")

        return snapshot_from_info(handle, info, self.max_videos)


def snapshot_from_info(handle: str, info: dict, max_videos: int) -> ChannelSnapshot:
    """Map a yt-dlp channel tab info dict to a ChannelSnapshot."""
    # Unavailable videos come back as None entries under ignoreerrors.
    entries = [e for e in (info.get('entries') or []) if e]
    records = [video_record_from_info(entry) for entry in entries[:max_videos]]
    records.sort(key=lambda r: r.published_at or _OLDEST, reverse=True)

    return ChannelSnapshot(
        handle=handle,
        channel_id=info.get('channel_id') or info.get('id') or '',
        channel_title=info.get('channel') or info.get('uploader'),
        videos=tuple(records),
    )
