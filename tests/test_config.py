from social_sense.config import default_sample_size, default_top_keywords, log_level


def test_defaults(monkeypatch):
    monkeypatch.delenv("SOCIAL_SENSE_SAMPLE_SIZE", raising=False)
    monkeypatch.delenv("SOCIAL_SENSE_TOP_KEYWORDS", raising=False)
    monkeypatch.delenv("SOCIAL_SENSE_LOG_LEVEL", raising=False)
    assert default_sample_size() == 2500
    assert default_top_keywords() == 20
    assert log_level() == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SOCIAL_SENSE_SAMPLE_SIZE", "300")
    monkeypatch.setenv("SOCIAL_SENSE_LOG_LEVEL", "debug")
    assert default_sample_size() == 300
    assert log_level() == "DEBUG"


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("SOCIAL_SENSE_SAMPLE_SIZE", "lots")
    monkeypatch.setenv("SOCIAL_SENSE_TOP_KEYWORDS", "-3")
    assert default_sample_size() == 2500
    assert default_top_keywords() == 20
