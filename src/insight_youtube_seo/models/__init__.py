"""Data models for channel snapshots, insights and plan requests."""

from .video import VideoRecord, ChannelSnapshot, TargetVideo
from .insight import (
    TitleInsights,
    DescriptionInsights,
    HashtagInsights,
    ChannelInsight,
    SuggestionBundle,
    AnalysisResult,
)
from .request import PlanRequest

__all__ = [
    "VideoRecord",
    "ChannelSnapshot",
    "TargetVideo",
    "TitleInsights",
    "DescriptionInsights",
    "HashtagInsights",
    "ChannelInsight",
    "SuggestionBundle",
    "AnalysisResult",
    "PlanRequest",
]
