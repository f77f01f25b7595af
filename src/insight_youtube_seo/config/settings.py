"""
Configuration settings for Insight YouTube SEO.
"""

import json
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from ..errors import InvalidInputError


@dataclass
class Settings:
    """Configuration settings for fetching and analysis."""

    # Fetching
    max_videos: int = 15
    quiet_mode: bool = True
    socket_timeout: float = 30.0

    # Text statistics
    top_words_limit: int = 20
    min_word_length: int = 2
    opener_words: int = 2
    openers_limit: int = 10
    hashtag_insight_limit: int = 20

    # Suggestions
    title_max_length: int = 100
    max_title_suggestions: int = 5
    description_cta_limit: int = 3
    hashtag_limit: int = 15
    tag_limit: int = 20

    def to_dict(self) -> dict:
        return {
            "max_videos": self.max_videos,
            "quiet_mode": self.quiet_mode,
            "socket_timeout": self.socket_timeout,
            "top_words_limit": self.top_words_limit,
            "min_word_length": self.min_word_length,
            "opener_words": self.opener_words,
            "openers_limit": self.openers_limit,
            "hashtag_insight_limit": self.hashtag_insight_limit,
            "title_max_length": self.title_max_length,
            "max_title_suggestions": self.max_title_suggestions,
            "description_cta_limit": self.description_cta_limit,
            "hashtag_limit": self.hashtag_limit,
            "tag_limit": self.tag_limit,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """Create Settings from a dictionary, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidInputError(f"Unknown setting(s): {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_file(cls, path: str) -> "Settings":
        """Load Settings overrides from a YAML or JSON file."""
        path = Path(path)

        with open(path, 'r', encoding='utf-8') as f:
            if path.suffix in ('.yaml', '.yml'):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise InvalidInputError(f"Settings file must contain a mapping: {path}")
        return cls.from_dict(data)


DEFAULT_SETTINGS = Settings()
