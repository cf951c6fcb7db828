"""
Rule-based sentiment scoring for short social-media comments.

Lexicon hits count +1 / -1. A negator within the three preceding tokens flips
the sign (and which counter is bumped); an intensifier right before the word
multiplies its weight by 1.5.
"""
import logging
import re
from typing import Iterable, Optional

from social_sense.domain.lexicon import LexiconStore, get_lexicon
from social_sense.domain.models import NEUTRAL_SENTIMENT, AggregateSentiment, SentimentScore

logger = logging.getLogger(__name__)

TOKEN_RE = re.compile(r"\b[\w']+\b")
NEGATION_WINDOW = 3
INTENSIFIER_WEIGHT = 1.5
LABEL_THRESHOLD = 0.1


def _label_for(score: float) -> str:
    if score > LABEL_THRESHOLD:
        return "positive"
    if score < -LABEL_THRESHOLD:
        return "negative"
    return "neutral"


def score_sentiment(text, lexicon: Optional[LexiconStore] = None) -> SentimentScore:
    """Score a single cleaned comment. Non-string or empty input is neutral."""
    if not text or not isinstance(text, str):
        return NEUTRAL_SENTIMENT

    lexicon = lexicon or get_lexicon()
    words = TOKEN_RE.findall(text.lower())
    total = 0.0
    positive_hits = 0
    negative_hits = 0

    for i, word in enumerate(words):
        if word in lexicon.positive:
            weight = 1.0
        elif word in lexicon.negative:
            weight = -1.0
        else:
            continue

        window = words[max(0, i - NEGATION_WINDOW):i]
        if any(w in lexicon.negators for w in window):
            weight = -weight

        if weight > 0:
            positive_hits += 1
        else:
            negative_hits += 1

        if i > 0 and words[i - 1] in lexicon.intensifiers:
            weight *= INTENSIFIER_WEIGHT

        total += weight

    normalized = total / max(1, positive_hits + negative_hits)
    normalized = max(-1.0, min(1.0, normalized))

    return SentimentScore(
        value=round(normalized, 2),
        label=_label_for(normalized),
        positive_hits=positive_hits,
        negative_hits=negative_hits,
    )


def _percent(part: int, total: int) -> int:
    return int(part * 100 / total + 0.5)


def aggregate_sentiment(scores: Iterable[SentimentScore]) -> AggregateSentiment:
    scores = [s for s in scores if s is not None]
    if not scores:
        return AggregateSentiment()

    counts = {"positive": 0, "negative": 0, "neutral": 0}
    for s in scores:
        counts[s.label] = counts.get(s.label, 0) + 1
    total = len(scores)
    average = sum(s.value for s in scores) / total

    logger.debug("Aggregated %d sentiment scores: %s", total, counts)
    return AggregateSentiment(
        positive=counts["positive"],
        negative=counts["negative"],
        neutral=counts["neutral"],
        total=total,
        average_score=round(average, 2),
        positive_pct=_percent(counts["positive"], total),
        negative_pct=_percent(counts["negative"], total),
        neutral_pct=_percent(counts["neutral"], total),
    )
