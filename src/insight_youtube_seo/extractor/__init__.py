"""Extractors for YouTube channel and video data."""

from .channel import ChannelExtractor
from .metadata import MetadataExtractor
from .fetcher import MetadataFetcher, YtDlpFetcher
from .video_source import extract_video_id, resolve_channel_url

__all__ = [
    "ChannelExtractor",
    "MetadataExtractor",
    "MetadataFetcher",
    "YtDlpFetcher",
    "extract_video_id",
    "resolve_channel_url",
]
