"""
Hashtag and keyword extraction.
"""

import re
from typing import Iterable, Optional

from ..models.insight import HashtagInsights
from ..models.video import VideoRecord
from .text_stats import rank

# A hashtag starts after whitespace/punctuation (not inside a URL fragment
# or another word) and needs at least one letter, so "#1" is not a tag.
HASHTAG_PATTERN = re.compile(r"(?<![\w#/&])#(\w*[^\W\d_]\w*)")
LETTER_PATTERN = re.compile(r"[^\W\d_]")
NON_HASHTAG_CHARS = re.compile(r"\W+")


def unique(items: Iterable[str]) -> list[str]:
    """De-duplicate case-insensitively, keeping first-seen spelling and order."""
    seen = set()
    result = []
    for item in items:
        key = item.casefold()
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result


def as_hashtag(text: str) -> Optional[str]:
    """
    Normalize free text or a bare tag into ``#tag`` form.

    "tech review" becomes "#techreview"; text without any letter yields None.
    """
    body = NON_HASHTAG_CHARS.sub("", text.strip().lstrip("#"))
    if not LETTER_PATTERN.search(body):
        return None
    return f"#{body}"


def extract_hashtags(text: str) -> list[str]:
    """Hashtags in text, with ``#`` prefix, first-seen order, de-duplicated."""
    return unique(f"#{match}" for match in HASHTAG_PATTERN.findall(text))


def video_hashtags(video: VideoRecord) -> list[str]:
    """Union of a record's own hashtags and those written in its title/description."""
    declared = [tag for tag in (as_hashtag(h) for h in video.hashtags) if tag]
    return unique(
        declared
        + extract_hashtags(video.title)
        + extract_hashtags(video.description)
    )


def video_keywords(video: VideoRecord) -> list[str]:
    return unique(k.strip() for k in video.keywords if k.strip())


def hashtag_insights(videos: Iterable[VideoRecord], limit: int = 20) -> HashtagInsights:
    """
    Rank hashtags and keywords across a channel's videos.

    Each hashtag/keyword counts at most once per video, so the ranking is by
    the number of videos using it.
    """
    hashtags: list[str] = []
    keywords: list[str] = []
    for video in videos:
        hashtags.extend(video_hashtags(video))
        keywords.extend(video_keywords(video))

    return HashtagInsights(
        top_hashtags=rank(hashtags, limit),
        top_keywords=rank(keywords, limit),
    )
