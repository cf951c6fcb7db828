import logging
import os

logger = logging.getLogger(__name__)

COMMENT_CHAR_LIMIT = 200
GENERIC_PRAISE_MAX_CHARS = 30
HIGH_PRIORITY_SHARE = 0.8
LIKE_PERCENTILE = 75
THEME_TOP_N = 15


def _int_from_env(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or str(raw).strip() == "":
        return default
    try:
        value = int(raw)
        return value if value > 0 else default
    except ValueError:
        logger.warning("Invalid int value for %s=%s; using default %s", key, raw, default)
        return default


def default_sample_size() -> int:
    return _int_from_env("SOCIAL_SENSE_SAMPLE_SIZE", 2500)


def default_top_keywords() -> int:
    return _int_from_env("SOCIAL_SENSE_TOP_KEYWORDS", 20)


def log_level() -> str:
    return os.getenv("SOCIAL_SENSE_LOG_LEVEL", "INFO").upper()
