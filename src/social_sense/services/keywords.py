import re
from collections import Counter
from typing import Iterable, Optional

from social_sense.config import THEME_TOP_N, default_top_keywords
from social_sense.domain.lexicon import LexiconStore, get_lexicon
from social_sense.domain.models import KeywordEntry, KeywordReport, ThemeEntry

WORD_RE = re.compile(r"\b[a-zA-Z]{4,}\b")


def extract_keywords_and_themes(
    texts: Iterable[str],
    top_n: Optional[int] = None,
    lexicon: Optional[LexiconStore] = None,
) -> KeywordReport:
    """Top unigrams (4+ letters, no stop-words) and top within-comment bigrams."""
    top_n = top_n if top_n is not None else default_top_keywords()
    lexicon = lexicon or get_lexicon()
    word_counts: Counter = Counter()
    bigram_counts: Counter = Counter()

    for text in texts or []:
        words = [w for w in WORD_RE.findall((text or "").lower()) if w not in lexicon.stop_words]
        word_counts.update(words)
        bigram_counts.update(f"{a} {b}" for a, b in zip(words, words[1:]))

    return KeywordReport(
        keywords=[KeywordEntry(word, count) for word, count in word_counts.most_common(top_n)],
        themes=[ThemeEntry(theme, count) for theme, count in bigram_counts.most_common(THEME_TOP_N)],
    )
