import random
import pytest
from social_sense.domain.models import RawComment
from social_sense.services.comment_filter import filter_comments
from social_sense.services.sampler import percentile, prioritize, priority_score, sample_comments


def processed(texts, likes=None):
    likes = likes or [0] * len(texts)
    raws = [RawComment(author=f"viewer{i}", text=t, like_count=n) for i, (t, n) in enumerate(zip(texts, likes))]
    return filter_comments(raws).comments


@pytest.fixture
def batch():
    questions = [f"How do I set up part {i}?" for i in range(5)]
    pricing = [f"What is the price of kit {i}" for i in range(3)]
    plain = [f"plain remark {i}" for i in range(12)]
    return processed(questions + pricing + plain)


def test_small_batch_is_passed_through():
    comments = processed(["one comment", "another comment", "third comment"])
    result = sample_comments(comments, target_size=5)
    assert result.sampled == comments
    assert result.size == 3


def test_priority_slice_comes_first(batch):
    result = sample_comments(batch, target_size=10, rng=random.Random(7))
    assert result.size == 10
    assert result.sampled[:8] == batch[:8]
    assert all(c.text.startswith("plain remark") for c in result.sampled[8:])
    assert len(set(result.sampled)) == 10


def test_seeded_sampling_is_deterministic(batch):
    first = sample_comments(batch, target_size=10, rng=random.Random(42))
    second = sample_comments(batch, target_size=10, rng=random.Random(42))
    assert first.sampled == second.sampled


@pytest.mark.parametrize("target", [1, 4, 10, 19])
def test_sample_never_exceeds_target(batch, target):
    result = sample_comments(batch, target_size=target, rng=random.Random(0))
    assert result.size == len(result.sampled) <= target


def test_target_size_from_environment(batch, monkeypatch):
    monkeypatch.setenv("SOCIAL_SENSE_SAMPLE_SIZE", "5")
    assert sample_comments(batch, rng=random.Random(1)).size == 5


def test_soft_filtered_comments_get_zero_priority():
    generic, question = processed(["nice", "Why does the price go up?"], likes=[500, 0])
    assert generic.is_generic_praise
    assert priority_score(generic, like_threshold=0) == 0
    # question + objection ("why") + purchase intent ("price")
    assert priority_score(question, like_threshold=None) == 4 + 5 + 4


def test_liked_comments_get_engagement_bonus():
    comments = processed(["first remark here", "second remark here", "third remark here", "fourth remark here"],
                         likes=[1, 2, 3, 50])
    ranked = prioritize(comments)
    # 75th percentile of [1, 2, 3, 50] is 3
    assert [pc.comment.like_count for pc in ranked] == [3, 50, 1, 2]
    assert [pc.priority_score for pc in ranked] == [3, 3, 0, 0]


def test_percentile():
    assert percentile([], 75) is None
    assert percentile([5], 75) == 5
    assert percentile([4, 1, 3, 2], 75) == 3
    assert percentile(list(range(1, 101)), 75) == 75
