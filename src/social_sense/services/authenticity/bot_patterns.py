import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from social_sense.domain.benchmarks import (
    BOT_DUPLICATE_PENALTY,
    BOT_DUPLICATE_RATE,
    BOT_EMOJI_PENALTY,
    BOT_EMOJI_RATE,
    BOT_EXAMPLE_CHARS,
    BOT_EXAMPLE_LIMIT,
    BOT_MAX,
    BOT_PERCENTAGE_BANDS,
    DUPLICATE_MIN_CHARS,
    SHORT_COMMENT_CHARS,
    SHORT_COMMENT_WORDS,
)
from social_sense.domain.lexicon import LexiconStore, get_lexicon
from social_sense.domain.models import CommentSample, PositiveSignal, RedFlag, SubScore
from social_sense.services.comment_filter import is_emoji_only, normalize_for_dedup

logger = logging.getLogger(__name__)


@dataclass
class CommentPatternCounts:
    total: int = 0
    suspicious: int = 0
    emoji_only: int = 0
    generic: int = 0
    promo: int = 0
    short: int = 0
    duplicates: int = 0
    suspicious_usernames: int = 0
    examples: List[Dict[str, object]] = field(default_factory=list)

    def pct(self, count: int) -> float:
        return 100.0 * count / self.total if self.total else 0.0

    @property
    def bot_percentage(self) -> float:
        return self.pct(self.suspicious)


class BotPatternDetector:
    max_score = BOT_MAX

    def __init__(self, lexicon: Optional[LexiconStore] = None):
        self.lexicon = lexicon or get_lexicon()

    def classify(self, sample: CommentSample, seen: Dict[str, int]) -> List[str]:
        """Return the names of every bot rule this comment trips."""
        text = (sample.text or "").strip()
        user = (sample.user or "").strip()
        reasons = []

        if is_emoji_only(text):
            reasons.append("emoji_only")
        if self.lexicon.is_bot_phrase(text):
            reasons.append("generic_phrase")
        if self.lexicon.is_spam(text):
            reasons.append("promo")
        if len(text.split()) < SHORT_COMMENT_WORDS and len(text) < SHORT_COMMENT_CHARS:
            reasons.append("very_short")

        normalized = normalize_for_dedup(text)
        if len(normalized) > DUPLICATE_MIN_CHARS:
            if normalized in seen:
                reasons.append("duplicate")
            seen[normalized] = seen.get(normalized, 0) + 1

        if user and self.lexicon.is_bot_username(user):
            reasons.append("suspicious_username")
        return reasons

    def count_patterns(self, samples: Sequence[CommentSample]) -> CommentPatternCounts:
        counts = CommentPatternCounts(total=len(samples))
        seen: Dict[str, int] = {}
        for sample in samples:
            reasons = self.classify(sample, seen)
            counts.emoji_only += "emoji_only" in reasons
            counts.generic += "generic_phrase" in reasons
            counts.promo += "promo" in reasons
            counts.short += "very_short" in reasons
            counts.duplicates += "duplicate" in reasons
            counts.suspicious_usernames += "suspicious_username" in reasons
            if reasons:
                counts.suspicious += 1
                if len(counts.examples) < BOT_EXAMPLE_LIMIT:
                    counts.examples.append({
                        "text": (sample.text or "")[:BOT_EXAMPLE_CHARS],
                        "user": sample.user or "",
                        "reasons": reasons,
                    })
        return counts

    def analyze(self, samples: Sequence[CommentSample]) -> SubScore:
        samples = list(samples or [])
        if not samples:
            return SubScore(
                score=self.max_score,
                max_score=self.max_score,
                reason="No comment samples provided",
                details={"botPercentage": 0.0, "suspectedBotPercentage": 0.0, "analyzed": False},
            )

        counts = self.count_patterns(samples)
        bot_pct = counts.bot_percentage
        flags = []
        positives = []

        score = self.max_score
        for threshold, band_score, severity, flag, details in BOT_PERCENTAGE_BANDS:
            if bot_pct > threshold:
                score = band_score
                flags.append(RedFlag(severity=severity, flag=flag, details=f"{details} ({bot_pct:.1f}%)"))
                break
        else:
            positives.append(PositiveSignal(
                signal="Comments appear organic",
                details=f"Only {bot_pct:.1f}% of sampled comments match bot patterns",
            ))

        duplicate_pct = counts.pct(counts.duplicates)
        if duplicate_pct > BOT_DUPLICATE_RATE:
            score -= BOT_DUPLICATE_PENALTY
            flags.append(RedFlag(
                severity="medium",
                flag="Duplicate comments detected",
                details=f"{duplicate_pct:.1f}% of comments repeat earlier comments word for word",
            ))

        emoji_pct = counts.pct(counts.emoji_only)
        if emoji_pct > BOT_EMOJI_RATE:
            score -= BOT_EMOJI_PENALTY
            flags.append(RedFlag(
                severity="low",
                flag="High share of emoji-only comments",
                details=f"{emoji_pct:.1f}% of comments contain no words",
            ))

        score = max(0, score)
        logger.debug("Bot detection: %d/%d suspicious (%.1f%%) -> %d", counts.suspicious, counts.total, bot_pct, score)
        return SubScore(
            score=score,
            max_score=self.max_score,
            flags=tuple(flags),
            positives=tuple(positives),
            reason=f"{bot_pct:.1f}% of {counts.total} sampled comments look bot-like",
            details={
                "analyzed": True,
                "total": counts.total,
                "botPercentage": bot_pct,
                "suspectedBotPercentage": round(bot_pct, 1),
                "emojiOnlyPct": round(emoji_pct, 1),
                "genericPct": round(counts.pct(counts.generic), 1),
                "duplicatePct": round(duplicate_pct, 1),
                "flaggedExamples": counts.examples,
            },
        )
