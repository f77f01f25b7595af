"""
Derived insight and suggestion models.

Nothing here is persisted: every instance is recomputed per request from
the fetched snapshots.
"""

from dataclasses import dataclass, field
from typing import Optional

from .video import ChannelSnapshot, TargetVideo


@dataclass
class TitleInsights:
    average_length: int = 0
    top_words: list[str] = field(default_factory=list)
    frequent_openers: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "averageLength": self.average_length,
            "topWords": list(self.top_words),
            "frequentOpeners": list(self.frequent_openers),
        }


@dataclass
class DescriptionInsights:
    average_length: int = 0
    link_usage_rate: int = 0  # percentage, 0-100
    top_words: list[str] = field(default_factory=list)
    common_calls_to_action: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "averageLength": self.average_length,
            "linkUsageRate": self.link_usage_rate,
            "topWords": list(self.top_words),
            "commonCallsToAction": list(self.common_calls_to_action),
        }


@dataclass
class HashtagInsights:
    top_hashtags: list[str] = field(default_factory=list)
    top_keywords: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "topHashtags": list(self.top_hashtags),
            "topKeywords": list(self.top_keywords),
        }


@dataclass
class ChannelInsight:
    """Statistical summary of one channel snapshot."""
    snapshot: ChannelSnapshot
    title_insights: TitleInsights
    description_insights: DescriptionInsights
    hashtag_insights: HashtagInsights

    @property
    def handle(self) -> str:
        return self.snapshot.handle

    def to_dict(self) -> dict:
        return {
            "snapshot": self.snapshot.to_dict(),
            "titleInsights": self.title_insights.to_dict(),
            "descriptionInsights": self.description_insights.to_dict(),
            "hashtagInsights": self.hashtag_insights.to_dict(),
        }


@dataclass
class SuggestionBundle:
    """Generated title/description/hashtag/tag recommendations."""
    optimized_titles: list[str]
    optimized_description: str
    recommended_hashtags: list[str]
    recommended_tags: list[str]

    def to_dict(self) -> dict:
        return {
            "optimizedTitles": list(self.optimized_titles),
            "optimizedDescription": self.optimized_description,
            "recommendedHashtags": list(self.recommended_hashtags),
            "recommendedTags": list(self.recommended_tags),
        }

    def to_clipboard_text(self) -> str:
        """Plain-text block with every suggestion, ready to paste."""
        lines = ["TITLE IDEAS:"]
        lines.extend(self.optimized_titles)
        lines += ["", "DESCRIPTION:", self.optimized_description]
        lines += ["", "HASHTAGS:", " ".join(self.recommended_hashtags)]
        lines += ["", "TAGS:", ", ".join(self.recommended_tags)]
        return "\n".join(lines)


@dataclass
class AnalysisResult:
    """
    Combined plan output.

    ``suggestions`` is set iff a target video was requested and fetched.
    """
    channels: list[ChannelInsight]
    target_video: Optional[TargetVideo] = None
    suggestions: Optional[SuggestionBundle] = None

    def to_dict(self) -> dict:
        result = {"channels": [c.to_dict() for c in self.channels]}
        if self.target_video is not None:
            result["targetVideo"] = self.target_video.to_dict()
        if self.suggestions is not None:
            result["suggestions"] = self.suggestions.to_dict()
        return result
