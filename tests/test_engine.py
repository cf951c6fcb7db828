import random
from datetime import datetime, timezone
from social_sense import engine
from social_sense.domain.models import RawComment


def test_engine_exposes_every_operation():
    for name in engine.__all__:
        assert callable(getattr(engine, name))


def test_engine_round_trip_through_dicts():
    raw = [
        RawComment(author="ann", text="Is the @shop link still working?", like_count=3,
                   published_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)),
        RawComment(author="bob", text="nice"),
    ]
    filtered = engine.filter_comments(raw)
    sample = engine.sample_comments(filtered.comments, target_size=10, rng=random.Random(0))

    data = sample.sampled[0].to_dict()
    assert data["author"] == "ann"
    assert data["cleanText"] == "Is the link still working?"
    assert data["likeCount"] == 3
    assert data["publishedAt"] == "2024-05-01T12:00:00+00:00"
    assert data["isGenericPraise"] is False
    assert set(data["sentiment"]) == {"value", "label", "positiveHits", "negativeHits"}
    assert sample.sampled[1].to_dict()["isGenericPraise"] is True

    report = engine.extract_keywords_and_themes([c.clean_text for c in filtered.comments], top_n=3)
    assert report.to_dict()["keywords"][0]["word"] == "link"
    assert engine.aggregate_sentiment([c.sentiment for c in filtered.comments]).total == 2
