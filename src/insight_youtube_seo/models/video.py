"""
Video data models for fetched channel uploads and target videos.

Field names are snake_case; ``to_dict`` produces the camelCase wire shape
the presentation layer consumes.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class VideoRecord:
    """A single fetched upload. Immutable once fetched."""
    id: str
    title: str
    description: str
    published_at: Optional[datetime]
    link: str
    keywords: tuple[str, ...] = ()
    hashtags: tuple[str, ...] = ()

    @property
    def published_at_iso(self) -> Optional[str]:
        if self.published_at is None:
            return None
        return self.published_at.isoformat()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "publishedAt": self.published_at_iso,
            "link": self.link,
            "keywords": list(self.keywords),
            "hashtags": list(self.hashtags),
        }


@dataclass(frozen=True)
class ChannelSnapshot:
    """Point-in-time set of a channel's recent uploads, newest first."""
    handle: str
    channel_id: str
    channel_title: Optional[str] = None
    videos: tuple[VideoRecord, ...] = field(default_factory=tuple)

    @property
    def video_count(self) -> int:
        return len(self.videos)

    def to_dict(self) -> dict:
        result = {
            "handle": self.handle,
            "channelId": self.channel_id,
            "videos": [v.to_dict() for v in self.videos],
        }
        if self.channel_title is not None:
            result["channelTitle"] = self.channel_title
        return result


@dataclass(frozen=True)
class TargetVideo:
    """Existing metadata of the video the suggestions are generated for."""
    title: str
    description: str
    keywords: tuple[str, ...] = ()
    author: Optional[str] = None
    video_id: Optional[str] = None
    url: Optional[str] = None

    def to_dict(self) -> dict:
        result = {
            "title": self.title,
            "description": self.description,
            "keywords": list(self.keywords),
        }
        if self.author is not None:
            result["author"] = self.author
        return result
