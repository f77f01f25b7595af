"""
Call-to-action detection.

A fixed catalog maps each canonical CTA phrase to the case-insensitive
patterns that signal it and to the line suggested when a description lacks
it. Every template is detected as its own phrase and no other.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional

from .text_stats import rank


@dataclass(frozen=True)
class CallToAction:
    phrase: str
    template: str
    patterns: tuple[re.Pattern, ...]

    def found_in(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in self.patterns)


def _cta(phrase: str, template: str, *patterns: str) -> CallToAction:
    return CallToAction(
        phrase=phrase,
        template=template,
        patterns=tuple(re.compile(p, re.IGNORECASE) for p in patterns),
    )


CALLS_TO_ACTION = (
    _cta(
        "Subscribe",
        "Subscribe for more videos like this.",
        r"\bsubscrib(?:e|ed|ing)\b",
    ),
    _cta(
        "Like the video",
        "Like the video if it helped you.",
        r"\blike\s+(?:this|the)\s+video\b",
        r"\b(?:smash|hit|leave|drop)\s+(?:a|the|that)\s+like\b",
        r"\bgive\s+(?:it|this|us)\s+a\s+like\b",
        r"\blike\s+(?:and|&)\s+(?:subscribe|share|comment)\b",
    ),
    _cta(
        "Comment below",
        "Let us know in the comments below.",
        r"\bcomments?\s+below\b",
        r"\b(?:leave|drop|write)\s+a\s+comment\b",
        r"\blet\s+(?:me|us)\s+know\s+in\s+the\s+comments\b",
    ),
    _cta(
        "Share this video",
        "Share this video with a friend who needs it.",
        r"\bshare\s+(?:this|the)\s+video\b",
        r"\bshare\s+(?:it\s+)?with\s+(?:your\s+)?friends\b",
    ),
    _cta(
        "Turn on notifications",
        "Turn on notifications so you never miss an upload.",
        r"\b(?:turn\s+on|hit|ring|click|tap)\s+(?:the\s+)?(?:notifications?|(?:notification\s+)?bell)\b",
        r"\bbell\s+icon\b",
    ),
    _cta(
        "Follow us",
        "Follow us on social media for daily updates.",
        r"\bfollow\s+(?:us|me)\b",
    ),
    _cta(
        "Link in bio",
        "Link in bio for everything mentioned.",
        r"\blinks?\s+in\s+(?:the\s+|my\s+|our\s+)?bio\b",
    ),
    _cta(
        "Click the link",
        "Click the link below for the full guide.",
        r"\bclick\s+(?:the\s+|this\s+)?links?\b",
        r"\bclick\s+here\b",
        r"\blinks?\s+(?:is\s+|are\s+)?(?:below|in\s+the\s+description)\b",
    ),
    _cta(
        "Visit our website",
        "Visit our website for more resources.",
        r"\bvisit\s+(?:our|my|the)\s+(?:website|site|store|page)\b",
    ),
    _cta(
        "Join the membership",
        "Join the channel membership for exclusive perks.",
        r"\bjoin\s+(?:this\s+|the\s+|our\s+|my\s+)?(?:channel\s+)?(?:membership|members)\b",
        r"\bbecome\s+a\s+member\b",
    ),
    _cta(
        "Check out",
        "Check out the full playlist for more.",
        r"\bcheck\s+(?:it\s+|them\s+|this\s+|these\s+)?out\b",
    ),
    _cta(
        "Shop now",
        "Shop now and support the channel.",
        r"\bshop\s+now\b",
        r"\bbuy\s+now\b",
        r"\buse\s+(?:my\s+|our\s+)?(?:promo\s+)?code\b",
    ),
)

CTA_BY_PHRASE = {cta.phrase: cta for cta in CALLS_TO_ACTION}


def detect_calls_to_action(text: str) -> list[str]:
    """Canonical phrases of every CTA present in text, catalog order."""
    return [cta.phrase for cta in CALLS_TO_ACTION if cta.found_in(text)]


def mentions_call_to_action(text: str) -> bool:
    return any(cta.found_in(text) for cta in CALLS_TO_ACTION)


def common_calls_to_action(
    descriptions: Iterable[str],
    limit: Optional[int] = None,
) -> list[str]:
    """
    CTAs ranked by the number of descriptions containing them.

    Each phrase appears at most once; ties keep first-seen order.
    An empty list means the descriptions carry no recognizable CTA.
    """
    found = (
        phrase
        for description in descriptions
        for phrase in detect_calls_to_action(description)
    )
    return rank(found, limit)


def template_for(phrase: str) -> str:
    return CTA_BY_PHRASE[phrase].template
