"""
Metadata extraction from YouTube videos using yt-dlp.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

import yt_dlp

from ..analyzer.hashtags import extract_hashtags, unique
from ..errors import FetchError
from ..models.video import TargetVideo, VideoRecord
from .video_source import extract_video_id, video_url

logger = logging.getLogger(__name__)


def parse_published_at(info: dict) -> Optional[datetime]:
    """Publish time from a yt-dlp info dict (epoch timestamp or YYYYMMDD)."""
    timestamp = info.get('timestamp')
    if timestamp:
        return datetime.fromtimestamp(timestamp, tz=timezone.utc)
    upload_date = info.get('upload_date') or ''
    if len(upload_date) == 8:
        try:
            return datetime.strptime(upload_date, '%Y%m%d').replace(tzinfo=timezone.utc)
        except ValueError:
            return None
    return None


def video_record_from_info(info: dict) -> VideoRecord:
    """Map a yt-dlp video info dict to a VideoRecord."""
    video_id = info.get('id', '') or ''
    title = info.get('title', '') or ''
    description = info.get('description', '') or ''
    tags = info.get('tags', []) or []
    tag_hashtags = [t.strip() for t in tags if t and t.strip().startswith('#')]

    return VideoRecord(
        id=video_id,
        title=title,
        description=description,
        published_at=parse_published_at(info),
        link=info.get('webpage_url') or video_url(video_id),
        keywords=tuple(unique(t.strip() for t in tags if t and t.strip())),
        hashtags=tuple(unique(
            extract_hashtags(title)
            + extract_hashtags(description)
            + [h for t in tag_hashtags for h in extract_hashtags(t)]
        )),
    )


class MetadataExtractor:
    """Extract metadata of a single YouTube video."""

    def __init__(self, quiet: bool = True, socket_timeout: float = 30.0):
        """
        Initialize the metadata extractor.

        Args:
            quiet: Suppress yt-dlp output.
            socket_timeout: Network timeout in seconds.
        """
        self.quiet = quiet
        self.socket_timeout = socket_timeout

    def extract(self, url: str) -> TargetVideo:
        """
        Extract metadata from a YouTube video.

        Args:
            url: YouTube video URL or bare video ID.

        Returns:
            TargetVideo with title, description, tags and author.

        Raises:
            FetchError: The URL is not a video URL or yt-dlp failed.
        """
        video_id = extract_video_id(url)
        if not video_id:
            raise FetchError(url, "not a YouTube video URL")

        ydl_opts = {
            'quiet': self.quiet,
            'no_warnings': self.quiet,
            'skip_download': True,
            'socket_timeout': self.socket_timeout,
        }

        logger.debug("Extracting video metadata: %s", video_id)
        try:
            with yt_dlp.YoutubeDL(ydl_opts) as ydl:
                info = ydl.extract_info(video_url(video_id), download=False)
        except yt_dlp.utils.DownloadError as e:
            raise FetchError(url, str(e)) from e

        if not info:
            raise FetchError(url, "no metadata returned")

        tags = info.get('tags', []) or []
        return TargetVideo(
            title=info.get('title', '') or '',
            description=info.get('description', '') or '',
            keywords=tuple(unique(t.strip() for t in tags if t and t.strip())),
            author=info.get('channel') or info.get('uploader'),
            video_id=info.get('id') or video_id,
            url=info.get('webpage_url') or url,
        )
