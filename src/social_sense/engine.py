# src/social_sense/engine.py
# Entry points called by the API, worker and reporting layers. Pure functions:
# plain data in, plain data out.

from social_sense.services.authenticity.scorer import score_authenticity
from social_sense.services.comment_filter import filter_comments
from social_sense.services.keywords import extract_keywords_and_themes
from social_sense.services.pipeline import process_batch
from social_sense.services.sampler import sample_comments
from social_sense.services.sentiment import aggregate_sentiment, score_sentiment

__all__ = [
    "aggregate_sentiment",
    "extract_keywords_and_themes",
    "filter_comments",
    "process_batch",
    "sample_comments",
    "score_authenticity",
    "score_sentiment",
]
