"""
Resolution of channel handles and video URLs to canonical YouTube URLs.
"""

import re
from typing import Optional

YOUTUBE_BASE_URL = "https://www.youtube.com"

# URL patterns for video ID extraction
VIDEO_ID_PATTERNS = [
    r'(?:v=|/v/|youtu\.be/)([a-zA-Z0-9_-]{11})(?![a-zA-Z0-9_-])',
    r'(?:embed/|shorts/|live/)([a-zA-Z0-9_-]{11})(?![a-zA-Z0-9_-])',
    r'^([a-zA-Z0-9_-]{11})$',  # bare 11-char ID
]

CHANNEL_ID_PATTERN = re.compile(r'^UC[a-zA-Z0-9_-]{22}$')
HANDLE_PATTERN = re.compile(r'^@?([\w.\-]{3,100})$')
CHANNEL_URL_PATTERN = re.compile(
    r'^https?://(?:www\.|m\.)?youtube\.com/'
    r'(@[\w.\-]+|channel/UC[a-zA-Z0-9_-]{22}|c/[\w.\-]+|user/[\w.\-]+)'
)


def extract_video_id(url: str) -> Optional[str]:
    """
    Extract a single video ID from a URL.

    Args:
        url: YouTube video URL or bare video ID.

    Returns:
        Video ID (11 characters) or None.
    """
    url = url.strip()
    for pattern in VIDEO_ID_PATTERNS:
        match = re.search(pattern, url)
        if match:
            return match.group(1)
    return None


def video_url(video_id: str) -> str:
    return f"{YOUTUBE_BASE_URL}/watch?v={video_id}"


def resolve_channel_url(handle: str) -> Optional[str]:
    """
    Resolve a channel handle to the URL of its uploads tab.

    Accepts ``@name``, a bare ``name``, a ``UC...`` channel ID or a full
    channel URL (any tab).

    Returns:
        ``https://www.youtube.com/<channel>/videos`` or None when the input
        is not recognizable as a channel.
    """
    handle = handle.strip()

    match = CHANNEL_URL_PATTERN.match(handle)
    if match:
        return f"{YOUTUBE_BASE_URL}/{match.group(1)}/videos"

    if CHANNEL_ID_PATTERN.match(handle):
        return f"{YOUTUBE_BASE_URL}/channel/{handle}/videos"

    match = HANDLE_PATTERN.match(handle)
    if match:
        return f"{YOUTUBE_BASE_URL}/@{match.group(1)}/videos"

    return None
