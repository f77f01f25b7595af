"""
Per-channel insight builder.

Composes the text statistics, hashtag extraction and CTA detection over one
channel snapshot. A channel with no recent uploads is valid input and yields
zero-valued insights unless the caller explicitly requires videos.
"""

import math
import re
from typing import Iterable, Optional

from ..config import Settings, DEFAULT_SETTINGS
from ..errors import AnalysisError, InsufficientDataError
from ..models.insight import ChannelInsight, DescriptionInsights, TitleInsights
from ..models.video import ChannelSnapshot, VideoRecord
from .cta import common_calls_to_action
from .hashtags import hashtag_insights
from .text_stats import frequent_openers, summarize_texts

LINK_PATTERN = re.compile(r"(?:https?://|www\.)\S+", re.IGNORECASE)


def link_usage_rate(descriptions: Iterable[str]) -> int:
    """Percentage (0-100, rounded half up) of descriptions containing a link."""
    descriptions = list(descriptions)
    if not descriptions:
        return 0
    with_links = sum(1 for d in descriptions if LINK_PATTERN.search(d))
    return int(math.floor(with_links * 100 / len(descriptions) + 0.5))


def _check_record(video: VideoRecord, handle: str) -> None:
    for name in ("title", "description"):
        if not isinstance(getattr(video, name, None), str):
            raise AnalysisError(
                f"Malformed video record {getattr(video, 'id', None)!r} "
                f"in {handle}: {name} must be a string"
            )
    for name in ("keywords", "hashtags"):
        values = getattr(video, name, None)
        if values is None or isinstance(values, str) or not all(isinstance(v, str) for v in values):
            raise AnalysisError(
                f"Malformed video record {getattr(video, 'id', None)!r} "
                f"in {handle}: {name} must be a collection of strings"
            )


def build_channel_insight(
    snapshot: ChannelSnapshot,
    settings: Optional[Settings] = None,
    require_videos: bool = False,
) -> ChannelInsight:
    """
    Build the insight record for a channel snapshot.

    Args:
        snapshot: Fetched channel snapshot (not modified).
        settings: Limits for ranked lists. Uses defaults if not provided.
        require_videos: Raise InsufficientDataError instead of returning
            zero-valued insights when the snapshot has no videos.

    Returns:
        ChannelInsight for the snapshot.
    """
    settings = settings or DEFAULT_SETTINGS
    videos = list(snapshot.videos)

    if require_videos and not videos:
        raise InsufficientDataError(
            f"Channel {snapshot.handle} has no recent uploads to analyze."
        )
    for video in videos:
        _check_record(video, snapshot.handle)

    titles = [v.title for v in videos]
    descriptions = [v.description for v in videos]

    title_stats = summarize_texts(
        titles,
        limit=settings.top_words_limit,
        min_word_length=settings.min_word_length,
    )
    description_stats = summarize_texts(
        descriptions,
        limit=settings.top_words_limit,
        min_word_length=settings.min_word_length,
    )

    return ChannelInsight(
        snapshot=snapshot,
        title_insights=TitleInsights(
            average_length=title_stats.average_length,
            top_words=title_stats.top_words,
            frequent_openers=frequent_openers(
                titles,
                opener_words=settings.opener_words,
                limit=settings.openers_limit,
            ),
        ),
        description_insights=DescriptionInsights(
            average_length=description_stats.average_length,
            link_usage_rate=link_usage_rate(descriptions),
            top_words=description_stats.top_words,
            common_calls_to_action=common_calls_to_action(descriptions),
        ),
        hashtag_insights=hashtag_insights(videos, limit=settings.hashtag_insight_limit),
    )


def build_channel_insights(
    snapshots: Iterable[ChannelSnapshot],
    settings: Optional[Settings] = None,
) -> list[ChannelInsight]:
    return [build_channel_insight(snapshot, settings) for snapshot in snapshots]
