"""
Stratified down-sampling for large comment batches.

Questions, objections, purchase intent and well-liked comments fill the
high-priority slice (80% of the target); the rest is a uniform random tail.
"""
import logging
import math
import random
from typing import List, Optional, Sequence

from social_sense.config import HIGH_PRIORITY_SHARE, LIKE_PERCENTILE, default_sample_size
from social_sense.domain.lexicon import LexiconStore, get_lexicon
from social_sense.domain.models import PrioritizedComment, ProcessedComment, SampleResult

logger = logging.getLogger(__name__)

ENGAGEMENT_BONUS = 3
QUESTION_BONUS = 4
OBJECTION_BONUS = 5
PURCHASE_INTENT_BONUS = 4


def percentile(values: Sequence[int], p: float) -> Optional[int]:
    """Nearest-rank percentile; None for an empty sequence."""
    if not values:
        return None
    ordered = sorted(values)
    index = math.ceil(p / 100 * len(ordered)) - 1
    index = max(0, min(index, len(ordered) - 1))
    return ordered[index]


def priority_score(
    comment: ProcessedComment,
    like_threshold: Optional[int],
    lexicon: Optional[LexiconStore] = None,
) -> int:
    if comment.is_generic_praise or comment.is_off_topic:
        return 0

    lexicon = lexicon or get_lexicon()
    text = comment.text or ""
    score = 0
    if like_threshold is not None and comment.like_count >= like_threshold:
        score += ENGAGEMENT_BONUS
    if "?" in text:
        score += QUESTION_BONUS
    if lexicon.objection.search(text):
        score += OBJECTION_BONUS
    if lexicon.purchase_intent.search(text):
        score += PURCHASE_INTENT_BONUS
    return score


def prioritize(comments: Sequence[ProcessedComment], lexicon: Optional[LexiconStore] = None) -> List[PrioritizedComment]:
    """Score and sort descending; ties keep their original order."""
    threshold = percentile([c.like_count for c in comments], LIKE_PERCENTILE)
    scored = [PrioritizedComment(c, priority_score(c, threshold, lexicon)) for c in comments]
    return sorted(scored, key=lambda pc: -pc.priority_score)


def sample_comments(
    comments: Sequence[ProcessedComment],
    target_size: Optional[int] = None,
    rng: Optional[random.Random] = None,
    lexicon: Optional[LexiconStore] = None,
) -> SampleResult:
    target_size = target_size if target_size is not None else default_sample_size()
    comments = list(comments)
    if len(comments) <= target_size:
        return SampleResult(sampled=comments, size=len(comments))

    rng = rng or random.Random()
    ranked = prioritize(comments, lexicon)

    high_priority_count = math.floor(target_size * HIGH_PRIORITY_SHARE)
    high_priority = [pc.comment for pc in ranked[:high_priority_count]]
    remaining = [pc.comment for pc in ranked[high_priority_count:]]
    tail_count = min(target_size - high_priority_count, len(remaining))
    tail = rng.sample(remaining, tail_count)

    sampled = high_priority + tail
    logger.debug(
        "Sampled %d of %d comments (%d priority, %d random)",
        len(sampled), len(comments), len(high_priority), len(tail),
    )
    return SampleResult(sampled=sampled, size=len(sampled))
