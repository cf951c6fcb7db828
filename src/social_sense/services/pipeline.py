import logging
import random
from typing import Iterable, Optional

from social_sense.domain.lexicon import LexiconStore, get_lexicon
from social_sense.domain.models import ProcessedBatch
from social_sense.services.comment_filter import filter_comments
from social_sense.services.keywords import extract_keywords_and_themes
from social_sense.services.sampler import sample_comments
from social_sense.services.sentiment import aggregate_sentiment

logger = logging.getLogger(__name__)


def process_batch(
    raw_comments: Iterable,
    target_size: Optional[int] = None,
    top_n: Optional[int] = None,
    rng: Optional[random.Random] = None,
    lexicon: Optional[LexiconStore] = None,
) -> ProcessedBatch:
    """
    Filter, score, sample and summarize one batch of comments.

    Sentiment is aggregated over every comment that survived the hard filters;
    keywords and themes come from their cleaned text. The sample is what an
    LLM prompt or report would receive.
    """
    lexicon = lexicon or get_lexicon()
    filtered = filter_comments(raw_comments, lexicon)
    sentiment = aggregate_sentiment(c.sentiment for c in filtered.comments)
    sample = sample_comments(filtered.comments, target_size, rng=rng, lexicon=lexicon)
    report = extract_keywords_and_themes([c.clean_text for c in filtered.comments], top_n, lexicon)

    logger.info(
        "Processed %d comments: %d kept, %d sampled",
        filtered.stats.original, filtered.stats.after_hard_filters, sample.size,
    )
    return ProcessedBatch(
        stats=filtered.stats,
        comments=filtered.comments,
        sampled=sample.sampled,
        sentiment=sentiment,
        keywords=report.keywords,
        themes=report.themes,
    )
