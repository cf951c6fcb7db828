import pytest
from social_sense.domain.models import RawComment
from social_sense.services.comment_filter import (
    clean_comment_text,
    filter_comments,
    is_emoji_only,
    is_generic_short_praise,
    is_off_topic_noise,
    is_spam_or_promo,
    normalize_for_dedup,
    sanitize_csv_text,
)


def raw(text, author="viewer", likes=0):
    return RawComment(author=author, text=text, like_count=likes)


def test_mixed_batch_counts():
    result = filter_comments([
        raw("nice"),
        raw("Check out my channel http://x.com"),
        raw("This was genuinely helpful, thank you!"),
        raw("This was genuinely helpful, thank you!"),
    ])
    stats = result.stats
    assert stats.original == 4
    assert stats.spam_promo == 1
    assert stats.duplicates == 1
    assert stats.generic_praise == 1
    assert stats.after_hard_filters == 2
    assert [c.text for c in result.comments] == ["nice", "This was genuinely helpful, thank you!"]
    assert result.comments[0].is_generic_praise
    assert not result.comments[1].is_generic_praise


def test_emoji_only_comments_are_dropped():
    result = filter_comments([raw("🔥🔥🔥"), raw("!!!"), raw("nice video 🔥")])
    assert result.stats.emoji_only == 2
    assert result.stats.after_hard_filters == 1


def test_missing_text_counts_as_emoji_only():
    result = filter_comments([RawComment(author="x", text=None)])
    assert result.stats.emoji_only == 1
    assert result.comments == []


def test_duplicates_ignore_case_and_punctuation():
    result = filter_comments([raw("Great tutorial!!"), raw("great tutorial"), raw("GREAT   tutorial.")])
    assert result.stats.duplicates == 2
    assert result.comments[0].normalized_text == "great tutorial"


def test_soft_filters_tag_but_keep():
    result = filter_comments([raw("First!"), raw("who's here in 2024"), raw("love it")])
    assert result.stats.off_topic == 2
    assert result.stats.generic_praise == 1
    assert result.stats.after_hard_filters == 3
    assert [c.is_off_topic for c in result.comments] == [True, True, False]


def test_stats_add_up():
    texts = ["🔥", "follow me for more", "ok cool", "ok cool", "What lens did you use?", "First", "nice"]
    stats = filter_comments([raw(t) for t in texts]).stats
    assert stats.after_hard_filters == stats.original - stats.emoji_only - stats.spam_promo - stats.duplicates
    assert stats.after_hard_filters == 4


def test_filtering_twice_removes_nothing_more():
    texts = ["🔥", "dm me now", "Same here", "same here!", "Really clear explanation", "Thanks"]
    first = filter_comments([raw(t) for t in texts])
    second = filter_comments(first.comments)
    assert second.stats.emoji_only == 0
    assert second.stats.spam_promo == 0
    assert second.stats.duplicates == 0
    assert second.stats.after_hard_filters == len(first.comments)


def test_processed_comment_carries_cleaned_text_and_sentiment():
    result = filter_comments([raw("  @user123 Great video!  ", author="fan", likes=-4)])
    comment = result.comments[0]
    assert comment.clean_text == "Great video!"
    assert comment.text == "  @user123 Great video!  "
    assert comment.like_count == 0
    assert comment.sentiment.label == "positive"


def test_clean_truncates_long_comments():
    assert len(clean_comment_text("word " * 100)) == 200


@pytest.mark.parametrize("text,expected", [
    ("nice", True),
    ("  Great Video  ", True),
    ("❤️❤️", True),
    ("nice, but the audio is off", False),
    ("x" * 31, False),
])
def test_generic_short_praise(text, expected):
    assert is_generic_short_praise(text) is expected


@pytest.mark.parametrize("text,expected", [
    ("Visit https://spam.example", True),
    ("dm me for a collab", True),
    ("Make money from home", True),
    ("How did you edit this?", False),
])
def test_spam_or_promo(text, expected):
    assert is_spam_or_promo(text) is expected


def test_predicates():
    assert is_emoji_only("👍👍")
    assert not is_emoji_only("ok 👍")
    assert is_off_topic_noise("notification squad where you at")
    assert not is_off_topic_noise("the second half was slow")
    assert normalize_for_dedup("  Hello,   World!! ") == "hello world"


def test_sanitize_csv_text():
    assert sanitize_csv_text("=SUM(A1:A3)") == "'=SUM(A1:A3)"
    assert sanitize_csv_text("@cmd") == "'@cmd"
    assert sanitize_csv_text("left|right") == "left right"
    assert sanitize_csv_text(None) == ""
    assert sanitize_csv_text("  plain  ") == "plain"
