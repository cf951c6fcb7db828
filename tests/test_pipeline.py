import random
from social_sense.domain.models import RawComment
from social_sense.services.pipeline import process_batch


def test_process_batch_end_to_end():
    texts = [
        "🔥🔥",
        "check out my channel",
        "The camera quality is amazing",
        "The camera quality is amazing!",
        "Battery life is terrible though",
        "Where can I buy the camera?",
        "nice",
    ]
    raw = [RawComment(author=f"viewer{i}", text=t, like_count=i) for i, t in enumerate(texts)]

    batch = process_batch(raw, target_size=2, top_n=5, rng=random.Random(3))

    assert batch.stats.original == 7
    assert batch.stats.after_hard_filters == 4
    assert len(batch.comments) == 4
    assert len(batch.sampled) == 2
    assert batch.sentiment.total == 4
    assert batch.sentiment.positive == 2
    assert batch.sentiment.negative == 1
    assert batch.keywords[0].word == "camera"
    assert batch.to_dict()["sampleSize"] == 2
    assert batch.to_dict()["stats"]["afterHardFilters"] == 4


def test_process_batch_empty():
    batch = process_batch([])
    assert batch.stats.original == 0
    assert batch.sampled == []
    assert batch.sentiment.total == 0
    assert batch.keywords == []
