"""
Rule-based analysis of channel uploads.

- text_stats: tokenizer, average lengths, top words, title openers
- hashtags: hashtag/keyword extraction and ranking
- cta: call-to-action detection
- channel_insight: per-channel insight records
- suggestions: optimized titles/description/hashtags/tags for a target video
"""

from .channel_insight import build_channel_insight, build_channel_insights
from .cta import CALLS_TO_ACTION, common_calls_to_action, detect_calls_to_action
from .hashtags import extract_hashtags, hashtag_insights
from .suggestions import generate_suggestions
from .text_stats import average_length, frequent_openers, rank, tokenize, top_words

__all__ = [
    "build_channel_insight",
    "build_channel_insights",
    "generate_suggestions",
    "CALLS_TO_ACTION",
    "common_calls_to_action",
    "detect_calls_to_action",
    "extract_hashtags",
    "hashtag_insights",
    "average_length",
    "frequent_openers",
    "rank",
    "tokenize",
    "top_words",
]
