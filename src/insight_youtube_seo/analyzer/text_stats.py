"""
Text statistics for video titles and descriptions.

Rule-based only: words are ASCII letter/digit runs. Punctuation and emoji
are separators; a letter run containing non-ASCII letters ("café", "naïve")
is dropped whole rather than split into fragments. URLs and hashtag
tokens are removed before splitting; hashtags are counted separately by
``hashtags.py``.

Every ranking here is deterministic: frequency descending, ties broken by
first occurrence, grouping case-insensitively while keeping the first-seen
spelling for display.
"""

import math
import re
import unicodedata
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Optional

URL_PATTERN = re.compile(r"(?:https?://|www\.)\S+", re.IGNORECASE)
HASHTAG_TOKEN_PATTERN = re.compile(r"#\w+")
APOSTROPHE_PATTERN = re.compile(r"['’]")
WORD_RUN_PATTERN = re.compile(r"[^\W_]+")

STOPWORDS = frozenset({
    "a", "about", "above", "after", "again", "against", "all", "am", "an",
    "and", "any", "are", "as", "at", "be", "because", "been", "before",
    "being", "below", "between", "both", "but", "by", "can", "could", "did",
    "do", "does", "doing", "dont", "down", "during", "each", "few", "for",
    "from", "further", "get", "got", "had", "has", "have", "having", "he",
    "her", "here", "hers", "herself", "him", "himself", "his", "how", "i",
    "if", "im", "in", "into", "is", "it", "its", "itself", "just", "let",
    "lets", "me", "more", "most", "my", "myself", "no", "nor", "not", "now",
    "of", "off", "on", "once", "only", "or", "other", "our", "ours",
    "ourselves", "out", "over", "own", "same", "she", "should", "so", "some",
    "such", "than", "that", "thats", "the", "their", "theirs", "them",
    "themselves", "then", "there", "these", "they", "this", "those",
    "through", "to", "too", "under", "until", "up", "us", "very", "vs",
    "was", "we", "were", "what", "when", "where", "which", "while", "who",
    "whom", "why", "will", "with", "would", "you", "youre", "your", "yours",
    "yourself", "yourselves",
    # link fragments that survive URL stripping in malformed text
    "http", "https", "www", "com",
})


@dataclass
class TextStatistics:
    """Average length and ranked words of a set of texts."""
    average_length: int = 0
    top_words: list[str] = field(default_factory=list)


def strip_noise(text: str) -> str:
    """Remove URLs and hashtag tokens from text."""
    text = URL_PATTERN.sub(" ", text)
    return HASHTAG_TOKEN_PATTERN.sub(" ", text)


def word_tokens(text: str) -> list[str]:
    """Split text into ASCII word tokens, keeping the original case."""
    text = unicodedata.normalize("NFC", text)
    text = APOSTROPHE_PATTERN.sub("", strip_noise(text))
    return [run for run in WORD_RUN_PATTERN.findall(text) if run.isascii()]


def tokenize(text: str) -> list[str]:
    """Split text into lowercase ASCII word tokens."""
    return [token.lower() for token in word_tokens(text)]


def is_stopword(word: str) -> bool:
    return word.lower() in STOPWORDS


def rank(items: Iterable[str], limit: Optional[int] = None) -> list[str]:
    """
    Rank items by frequency.

    Items are grouped case-insensitively; the first-seen spelling is
    returned. Ties keep first-occurrence order.

    Args:
        items: Items in occurrence order.
        limit: Maximum number of items returned (None for all).

    Returns:
        Ranked, de-duplicated items.
    """
    counts = Counter()
    display: dict[str, str] = {}
    for item in items:
        key = item.casefold()
        display.setdefault(key, item)
        counts[key] += 1

    # most_common is stable, so equal counts keep first-seen order
    return [display[key] for key, _ in counts.most_common(limit)]


def average_length(texts: Iterable[str]) -> int:
    """Mean character count, rounded half up. 0 for no texts."""
    lengths = [len(text) for text in texts]
    if not lengths:
        return 0
    return int(math.floor(sum(lengths) / len(lengths) + 0.5))


def top_words(
    texts: Iterable[str],
    limit: int = 20,
    min_word_length: int = 2,
) -> list[str]:
    """Most frequent non-stopword words across texts."""
    words = (
        word
        for text in texts
        for word in tokenize(text)
        if len(word) >= min_word_length
        and not word.isdigit()
        and word not in STOPWORDS
    )
    return rank(words, limit)


def frequent_openers(
    titles: Iterable[str],
    opener_words: int = 2,
    limit: int = 10,
) -> list[str]:
    """
    Leading word patterns of titles ranked by frequency.

    "Top 5 Gadgets 2024" and "Top 5 Apps 2024" both open with "Top 5".
    Titles shorter than ``opener_words`` tokens are skipped.
    """
    openers = []
    for title in titles:
        tokens = word_tokens(title)
        if len(tokens) < opener_words:
            continue
        openers.append(" ".join(tokens[:opener_words]))
    return rank(openers, limit)


def summarize_texts(
    texts: Iterable[str],
    limit: int = 20,
    min_word_length: int = 2,
) -> TextStatistics:
    texts = list(texts)
    return TextStatistics(
        average_length=average_length(texts),
        top_words=top_words(texts, limit=limit, min_word_length=min_word_length),
    )
