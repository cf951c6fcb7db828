from social_sense.services.keywords import extract_keywords_and_themes


def test_counts_words_and_bigrams():
    report = extract_keywords_and_themes([
        "great camera quality",
        "camera quality amazing",
        "battery life camera",
    ])
    assert (report.keywords[0].word, report.keywords[0].count) == ("camera", 3)
    assert (report.keywords[1].word, report.keywords[1].count) == ("quality", 2)
    assert (report.themes[0].theme, report.themes[0].count) == ("camera quality", 2)


def test_skips_stop_words_and_short_words():
    report = extract_keywords_and_themes(["this really works for me and you"])
    assert [k.word for k in report.keywords] == ["works"]
    assert report.themes == []


def test_bigrams_do_not_cross_comments():
    report = extract_keywords_and_themes(["alpha bravo", "charlie delta"])
    assert {t.theme for t in report.themes} == {"alpha bravo", "charlie delta"}


def test_top_n_limits_keywords():
    report = extract_keywords_and_themes(["apple banana cherry grape mango"], top_n=2)
    assert [k.word for k in report.keywords] == ["apple", "banana"]


def test_empty_input():
    report = extract_keywords_and_themes([])
    assert report.keywords == []
    assert report.themes == []
    assert report.to_dict() == {"keywords": [], "themes": []}
