"""
Insight YouTube SEO
===================

Channel SEO insights and suggestion bundles from recent YouTube uploads.

Fetches the latest uploads of a set of channels, derives lightweight text
statistics (title length, common words, title openers, hashtag/keyword
frequency, calls to action) and optionally generates optimized titles, a
description, hashtags and tags for a target video.

Example:
    >>> from insight_youtube_seo import run_seo_plan
    >>> result = run_seo_plan({
    ...     "channelHandles": ["@channelone", "@channeltwo"],
    ...     "targetVideoUrl": "https://www.youtube.com/watch?v=xxxxxxxxxxx",
    ... })
    >>> result.suggestions.optimized_titles
"""

__version__ = "1.0.0"
__author__ = "Harmonic Insight"

from .config import Settings, DEFAULT_SETTINGS
from .errors import (
    SeoPlannerError,
    InvalidInputError,
    FetchError,
    AnalysisError,
    InsufficientDataError,
)
from .models import (
    VideoRecord,
    ChannelSnapshot,
    TargetVideo,
    TitleInsights,
    DescriptionInsights,
    HashtagInsights,
    ChannelInsight,
    SuggestionBundle,
    AnalysisResult,
    PlanRequest,
)
from .analyzer import build_channel_insight, generate_suggestions
from .extractor import MetadataFetcher, YtDlpFetcher
from .planner import (
    SeoPlanner,
    build_seo_plan,
    handle_analyze_request,
    load_plan_request,
    parse_plan_request,
    run_seo_plan,
)

__all__ = [
    # Planner
    "SeoPlanner",
    "build_seo_plan",
    "handle_analyze_request",
    "load_plan_request",
    "parse_plan_request",
    "run_seo_plan",
    # Analyzer
    "build_channel_insight",
    "generate_suggestions",
    # Fetching
    "MetadataFetcher",
    "YtDlpFetcher",
    # Models
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
    # Errors
    "SeoPlannerError",
    "InvalidInputError",
    "FetchError",
    "AnalysisError",
    "InsufficientDataError",
    # Config
    "Settings",
    "DEFAULT_SETTINGS",
    # Meta
    "__version__",
]
