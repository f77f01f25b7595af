"""
Suggestion generator.

Blends the insights of competitor channels with a target video's existing
metadata into optimized titles, a description, hashtags and tags. Pure and
deterministic: no randomness and no I/O, so identical inputs always produce
identical bundles.

Ranked inputs are merged by rank weight: an item at position ``r`` of a list
of length ``n`` contributes ``n - r``, summed across channels. Ties keep
first-seen order.
"""

import string
from collections import Counter
from typing import Iterable, Optional, Sequence

from ..config import Settings, DEFAULT_SETTINGS
from ..models.insight import ChannelInsight, SuggestionBundle
from ..models.video import TargetVideo
from .cta import detect_calls_to_action, mentions_call_to_action, template_for
from .hashtags import as_hashtag, unique
from .text_stats import STOPWORDS, strip_noise, tokenize

TRIM_CHARS = string.punctuation + "“”‘’«»…–—|"
SEPARATORS = " |:-"

# (words before the subject, words after the subject)
FALLBACK_TITLE_PATTERNS = (
    ((), ("-", "Everything", "You", "Need", "to", "Know")),
    (("The", "Truth", "About"), ()),
    ((), ("Explained",)),
    (("Why", "Everyone", "Is", "Talking", "About"), ()),
)

DEFAULT_SUBJECT = ("Our", "Latest", "Upload")

DESCRIPTION_KEYWORD_COUNT = 8
DESCRIPTION_HASHTAG_COUNT = 5
TOPICAL_WORDS_PER_TITLE = 3
OPENER_TITLES = 2


def weighted_union(ranked_lists: Iterable[Sequence[str]]) -> list[str]:
    """Merge ranked lists by summed rank weight (case-insensitive)."""
    weights = Counter()
    display: dict[str, str] = {}
    for items in ranked_lists:
        size = len(items)
        for position, item in enumerate(items):
            key = item.casefold()
            display.setdefault(key, item)
            weights[key] += size - position

    return [display[key] for key, _ in weights.most_common()]


def plain_words(title: str) -> list[str]:
    """Every word of a title with surrounding punctuation, URLs and hashtags removed."""
    words = (raw.strip(TRIM_CHARS) for raw in strip_noise(title).split())
    return [word for word in words if word]


def subject_words(title: str) -> list[str]:
    """Core subject words of a title: stopwords, URLs and hashtags removed."""
    return unique(w for w in plain_words(title) if w.casefold() not in STOPWORDS)


def fit_words(words: Iterable[str], max_length: int) -> str:
    """
    Join words with spaces, stopping before the text would exceed max_length.

    Words are never cut; dangling separators at the end are dropped.
    """
    text = ""
    for word in words:
        candidate = f"{text} {word}" if text else word
        if len(candidate) > max_length:
            break
        text = candidate
    return text.rstrip(SEPARATORS)


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def build_titles(
    subject: list[str],
    openers: list[str],
    topical_words: list[str],
    settings: Settings,
) -> list[str]:
    """Candidate titles, each at most ``settings.title_max_length`` characters."""
    budget = settings.title_max_length
    # Leave room for the opener/suffix words around the subject.
    subject_budget = int(budget * 0.6)
    subject = [w for w in subject if len(w) <= subject_budget]
    subject = fit_words(subject, subject_budget).split() or list(DEFAULT_SUBJECT)
    subject_keys = {w.casefold() for w in subject}

    candidates = []
    for opener in openers[:OPENER_TITLES]:
        opener_words = opener.split()
        opener_keys = {w.casefold() for w in opener_words}
        rest = [w for w in subject if w.casefold() not in opener_keys]
        candidates.append(fit_words(opener_words + rest, budget))

    extra = [
        _capitalize(w) for w in topical_words
        if w.casefold() not in subject_keys and not mentions_call_to_action(w)
    ][:TOPICAL_WORDS_PER_TITLE]
    if extra:
        candidates.append(fit_words(subject + ["|"] + extra, budget))

    for before, after in FALLBACK_TITLE_PATTERNS:
        candidates.append(fit_words(list(before) + subject + list(after), budget))

    titles = unique(c for c in candidates if c)
    return titles[:settings.max_title_suggestions]


def build_hashtags(
    channel_hashtags: list[str],
    target: TargetVideo,
    subject: list[str],
    limit: int,
) -> list[str]:
    """
    Channel hashtags plus the target's own keywords as hashtags.

    Hashtags related to the target's keywords or subject come first.
    """
    terms = {
        token
        for text in list(target.keywords) + subject
        for token in tokenize(text)
        if len(token) >= 3 and token not in STOPWORDS
    }

    def is_relevant(hashtag: str) -> bool:
        body = hashtag.lstrip("#").casefold()
        return any(term in body or (len(body) >= 3 and body in term) for term in terms)

    own = [tag for tag in (as_hashtag(k) for k in target.keywords) if tag]
    candidates = unique(channel_hashtags + own)
    relevant = [h for h in candidates if is_relevant(h)]
    others = [h for h in candidates if not is_relevant(h)]
    return (relevant + others)[:limit]


def build_tags(channel_keywords: list[str], target: TargetVideo, limit: int) -> list[str]:
    """The target's own keywords first, then channel keywords by weight."""
    own = [k.strip() for k in target.keywords if k.strip()]
    return unique(own + channel_keywords)[:limit]


def _keyword_line(keywords: Iterable[str]) -> str:
    chosen: list[str] = []
    for keyword in keywords:
        if len(chosen) == DESCRIPTION_KEYWORD_COUNT:
            break
        if not mentions_call_to_action(", ".join(chosen + [keyword])):
            chosen.append(keyword)
    if not chosen:
        return ""
    return "Keywords: " + ", ".join(chosen)


def _hashtag_line(hashtags: Iterable[str]) -> str:
    chosen = [h for h in hashtags if not mentions_call_to_action(h)]
    return " ".join(chosen[:DESCRIPTION_HASHTAG_COUNT])


def build_description(
    target: TargetVideo,
    subject: list[str],
    calls_to_action: list[str],
    keywords: list[str],
    hashtags: list[str],
    cta_limit: int = 3,
) -> str:
    """
    Hook line, CTA block and keyword-dense closing lines.

    CTA lines already in the target description are kept verbatim and their
    CTAs are not repeated, so running this on its own output changes nothing.
    """
    topic = " ".join(subject) or target.title.strip() or " ".join(DEFAULT_SUBJECT)
    hook = f"In this video: {topic}."
    keyword_line = _keyword_line(keywords)
    hashtag_line = _hashtag_line(hashtags)
    generated = {hook, keyword_line, hashtag_line}

    cta_lines = []
    present: set[str] = set()
    for line in target.description.splitlines():
        line = line.strip()
        if not line or line in generated:
            continue
        found = detect_calls_to_action(line)
        if found:
            cta_lines.append(line)
            present.update(found)

    for phrase in calls_to_action[:cta_limit]:
        if phrase not in present:
            cta_lines.append(template_for(phrase))
            present.add(phrase)

    blocks = [[hook], unique(cta_lines), [line for line in (keyword_line, hashtag_line) if line]]
    return "\n\n".join("\n".join(block) for block in blocks if block)


def generate_suggestions(
    channel_insights: Sequence[ChannelInsight],
    target: TargetVideo,
    settings: Optional[Settings] = None,
) -> SuggestionBundle:
    """
    Generate the suggestion bundle for a target video.

    Args:
        channel_insights: Insights of the competitor channels.
        target: Existing metadata of the video to optimize.
        settings: Budgets and limits. Uses defaults if not provided.

    Returns:
        SuggestionBundle with titles, description, hashtags and tags.
    """
    settings = settings or DEFAULT_SETTINGS

    openers = weighted_union(c.title_insights.frequent_openers for c in channel_insights)
    title_words = weighted_union(c.title_insights.top_words for c in channel_insights)
    description_words = weighted_union(c.description_insights.top_words for c in channel_insights)
    channel_hashtags = weighted_union(c.hashtag_insights.top_hashtags for c in channel_insights)
    channel_keywords = weighted_union(c.hashtag_insights.top_keywords for c in channel_insights)
    calls_to_action = weighted_union(
        c.description_insights.common_calls_to_action for c in channel_insights
    )

    subject = subject_words(target.title)
    if not subject:
        subject = [_capitalize(w) for w in title_words[:4]]
    if not subject:
        subject = unique(plain_words(target.title)) or list(DEFAULT_SUBJECT)

    titles = build_titles(subject, openers, title_words, settings)
    hashtags = build_hashtags(channel_hashtags, target, subject, settings.hashtag_limit)
    tags = build_tags(channel_keywords, target, settings.tag_limit)
    description = build_description(
        target,
        subject,
        calls_to_action,
        keywords=unique(tags + title_words + description_words),
        hashtags=hashtags,
        cta_limit=settings.description_cta_limit,
    )

    return SuggestionBundle(
        optimized_titles=titles,
        optimized_description=description,
        recommended_hashtags=hashtags,
        recommended_tags=tags,
    )
