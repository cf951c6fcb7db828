"""
Comment cleaning and filtering pipeline.

Hard filters (emoji-only, spam/promo, duplicates) drop a comment; soft
filters (generic praise, off-topic noise) only tag it so later stages can
deprioritize it.
"""
import logging
import re
from typing import Iterable, Optional

from social_sense.config import COMMENT_CHAR_LIMIT, GENERIC_PRAISE_MAX_CHARS
from social_sense.domain.lexicon import LexiconStore, get_lexicon
from social_sense.domain.models import FilterResult, FilterStats, ProcessedComment
from social_sense.services.sentiment import score_sentiment

logger = logging.getLogger(__name__)

ALNUM_RE = re.compile(r"[a-zA-Z0-9]")
PUNCT_RE = re.compile(r"[^\w\s]", re.ASCII)
WHITESPACE_RE = re.compile(r"\s+")
MENTION_RE = re.compile(r"@\w+")

CSV_DANGEROUS_PREFIXES = ("=", "+", "-", "@", "\t", "\r", "\n")


def is_emoji_only(text: str) -> bool:
    return not ALNUM_RE.search(text or "")


def is_spam_or_promo(text: str, lexicon: Optional[LexiconStore] = None) -> bool:
    return (lexicon or get_lexicon()).is_spam(text or "")


def is_generic_short_praise(text: str, lexicon: Optional[LexiconStore] = None) -> bool:
    if not text or len(text) > GENERIC_PRAISE_MAX_CHARS:
        return False
    return (lexicon or get_lexicon()).is_generic_praise(text.strip())


def is_off_topic_noise(text: str, lexicon: Optional[LexiconStore] = None) -> bool:
    return (lexicon or get_lexicon()).is_off_topic((text or "").strip())


def normalize_for_dedup(text: str) -> str:
    text = PUNCT_RE.sub("", (text or "").lower())
    return WHITESPACE_RE.sub(" ", text).strip()


def clean_comment_text(text: str) -> str:
    cleaned = MENTION_RE.sub("", text or "")
    cleaned = WHITESPACE_RE.sub(" ", cleaned).strip()
    return cleaned[:COMMENT_CHAR_LIMIT]


def sanitize_csv_text(text) -> str:
    """Neutralize spreadsheet formula injection and pipe separators."""
    if not text:
        return ""
    sanitized = str(text).strip()
    if sanitized.startswith(CSV_DANGEROUS_PREFIXES):
        sanitized = "'" + sanitized
    return sanitized.replace("|", " ")


def _as_int(value) -> int:
    try:
        return max(0, int(value or 0))
    except (TypeError, ValueError):
        return 0


def filter_comments(raw_comments: Iterable, lexicon: Optional[LexiconStore] = None) -> FilterResult:
    """
    Run the hard and soft filters over a batch, in order.

    Accepts RawComment or ProcessedComment records (anything with ``author``,
    ``text``, ``like_count`` and ``published_at`` attributes). Missing text is
    treated as an empty string and counted as emoji-only.
    """
    lexicon = lexicon or get_lexicon()
    stats = FilterStats()
    seen = set()
    processed = []

    for comment in raw_comments:
        stats.original += 1
        text = getattr(comment, "text", None) or ""

        if is_emoji_only(text):
            stats.emoji_only += 1
            continue

        if lexicon.is_spam(text):
            stats.spam_promo += 1
            continue

        normalized = normalize_for_dedup(text)
        if normalized in seen:
            stats.duplicates += 1
            continue
        seen.add(normalized)

        generic = is_generic_short_praise(text, lexicon)
        off_topic = is_off_topic_noise(text, lexicon)
        if generic:
            stats.generic_praise += 1
        if off_topic:
            stats.off_topic += 1

        cleaned = clean_comment_text(text)
        processed.append(ProcessedComment(
            author=getattr(comment, "author", None) or "",
            text=text,
            like_count=_as_int(getattr(comment, "like_count", 0)),
            published_at=getattr(comment, "published_at", None),
            clean_text=cleaned,
            normalized_text=normalized,
            is_generic_praise=generic,
            is_off_topic=off_topic,
            sentiment=score_sentiment(cleaned, lexicon),
        ))

    stats.after_hard_filters = len(processed)
    logger.debug("Filtered %d comments down to %d", stats.original, stats.after_hard_filters)
    return FilterResult(comments=processed, stats=stats)
