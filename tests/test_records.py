import pytest
from datetime import datetime, timezone
from unittest.mock import MagicMock
from social_sense.adapters.scrapers.records import comments_from_records
from social_sense.domain.models import RawComment

def test_comments_from_records():
    comment_mock = MagicMock()
    comment_mock.author.name = "testuser"
    comment_mock.text = "Test comment"
    comment_mock.like_count = 10
    comment_mock.published_at = datetime(2024, 5, 1, tzinfo=timezone.utc)

    comments = comments_from_records([comment_mock])
    assert isinstance(comments[0], RawComment)
    assert comments[0].author == "testuser"
    assert comments[0].text == "Test comment"
    assert comments[0].like_count == 10
    assert comments[0].published_at.year == 2024

def test_likes_alias_and_epoch_timestamp():
    record = MagicMock(spec=["author", "text", "likes", "published_at"])
    record.author = "creator_fan"
    record.text = "Where can I buy this?"
    record.likes = 7
    record.published_at = 1690000000

    comment = comments_from_records([record])[0]
    assert comment.author == "creator_fan"
    assert comment.like_count == 7
    assert comment.published_at == datetime.fromtimestamp(1690000000, tz=timezone.utc)


def test_missing_fields_default_to_empty_and_zero():
    record = MagicMock(spec=["author", "text", "like_count", "published_at"])
    record.author = None
    record.text = None
    record.like_count = None
    record.published_at = None

    comment = comments_from_records([record])[0]
    assert comment.author == "[deleted]"
    assert comment.text == ""
    assert comment.like_count == 0
