from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple


# ----------------------------
# Comment pipeline
# ----------------------------
@dataclass(frozen=True)
class RawComment:
    author: str
    text: str
    like_count: int = 0
    published_at: Optional[datetime] = None


@dataclass(frozen=True)
class SentimentScore:
    value: float
    label: str
    positive_hits: int
    negative_hits: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value,
            "label": self.label,
            "positiveHits": self.positive_hits,
            "negativeHits": self.negative_hits,
        }


NEUTRAL_SENTIMENT = SentimentScore(value=0.0, label="neutral", positive_hits=0, negative_hits=0)


@dataclass(frozen=True)
class ProcessedComment:
    author: str
    text: str
    like_count: int
    published_at: Optional[datetime]
    clean_text: str
    normalized_text: str
    is_generic_praise: bool
    is_off_topic: bool
    sentiment: SentimentScore

    def to_dict(self) -> Dict[str, Any]:
        return {
            "author": self.author,
            "text": self.text,
            "likeCount": self.like_count,
            "publishedAt": self.published_at.isoformat() if self.published_at else None,
            "cleanText": self.clean_text,
            "normalizedText": self.normalized_text,
            "isGenericPraise": self.is_generic_praise,
            "isOffTopic": self.is_off_topic,
            "sentiment": self.sentiment.to_dict(),
        }


@dataclass(frozen=True)
class PrioritizedComment:
    comment: ProcessedComment
    priority_score: int


@dataclass
class FilterStats:
    original: int = 0
    emoji_only: int = 0
    spam_promo: int = 0
    duplicates: int = 0
    generic_praise: int = 0
    off_topic: int = 0
    after_hard_filters: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "original": self.original,
            "emojiOnly": self.emoji_only,
            "spamPromo": self.spam_promo,
            "duplicates": self.duplicates,
            "genericPraise": self.generic_praise,
            "offTopic": self.off_topic,
            "afterHardFilters": self.after_hard_filters,
        }


@dataclass(frozen=True)
class FilterResult:
    comments: List[ProcessedComment]
    stats: FilterStats


@dataclass(frozen=True)
class AggregateSentiment:
    positive: int = 0
    negative: int = 0
    neutral: int = 0
    total: int = 0
    average_score: float = 0.0
    positive_pct: int = 0
    negative_pct: int = 0
    neutral_pct: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "positive": self.positive,
            "negative": self.negative,
            "neutral": self.neutral,
            "total": self.total,
            "averageScore": self.average_score,
            "positivePct": self.positive_pct,
            "negativePct": self.negative_pct,
            "neutralPct": self.neutral_pct,
        }


@dataclass(frozen=True)
class SampleResult:
    sampled: List[ProcessedComment]
    size: int


@dataclass(frozen=True)
class KeywordEntry:
    word: str
    count: int


@dataclass(frozen=True)
class ThemeEntry:
    theme: str
    count: int


@dataclass(frozen=True)
class KeywordReport:
    keywords: List[KeywordEntry]
    themes: List[ThemeEntry]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keywords": [{"word": k.word, "count": k.count} for k in self.keywords],
            "themes": [{"theme": t.theme, "count": t.count} for t in self.themes],
        }


@dataclass(frozen=True)
class ProcessedBatch:
    """Everything the comment pipeline hands to reporting/LLM collaborators."""
    stats: FilterStats
    comments: List[ProcessedComment]
    sampled: List[ProcessedComment]
    sentiment: AggregateSentiment
    keywords: List[KeywordEntry]
    themes: List[ThemeEntry]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stats": self.stats.to_dict(),
            "sampleSize": len(self.sampled),
            "sentiment": self.sentiment.to_dict(),
            **KeywordReport(self.keywords, self.themes).to_dict(),
        }


# ----------------------------
# Authenticity inputs
# ----------------------------
@dataclass(frozen=True)
class ProfileMetrics:
    followers: int = 0
    following: int = 0


@dataclass(frozen=True)
class ContentMetric:
    likes: int = 0
    comments: int = 0
    shares: int = 0
    views: int = 0


@dataclass(frozen=True)
class CommentSample:
    text: str = ""
    user: str = ""


@dataclass(frozen=True)
class FollowerSnapshot:
    date: Any
    count: int


@dataclass(frozen=True)
class AuthenticityInputs:
    platform: str
    profile_metrics: ProfileMetrics
    content_metrics: Tuple[ContentMetric, ...] = ()
    comment_samples: Tuple[CommentSample, ...] = ()
    follower_history: Optional[Tuple[FollowerSnapshot, ...]] = None


# ----------------------------
# Authenticity outputs
# ----------------------------
@dataclass(frozen=True)
class RedFlag:
    severity: str
    flag: str
    details: str

    def to_dict(self) -> Dict[str, str]:
        return {"severity": self.severity, "flag": self.flag, "details": self.details}


@dataclass(frozen=True)
class PositiveSignal:
    signal: str
    details: str

    def to_dict(self) -> Dict[str, str]:
        return {"signal": self.signal, "details": self.details}


@dataclass(frozen=True)
class SubScore:
    score: int
    max_score: int
    flags: Tuple[RedFlag, ...] = ()
    positives: Tuple[PositiveSignal, ...] = ()
    reason: str = ""
    details: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not 0 <= self.score <= self.max_score:
            raise ValueError(f"score {self.score} outside [0, {self.max_score}]")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "maxScore": self.max_score,
            "flags": [f.to_dict() for f in self.flags],
            "positives": [p.to_dict() for p in self.positives],
            "reason": self.reason,
            "details": dict(self.details),
        }


@dataclass(frozen=True)
class ComponentBreakdown:
    score: int
    max: int
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "max": self.max, "reason": self.reason}


@dataclass(frozen=True)
class AuthenticityResult:
    score: int
    verdict: str
    verdict_color: str
    breakdown: Dict[str, ComponentBreakdown]
    red_flags: Tuple[RedFlag, ...]
    positive_signals: Tuple[PositiveSignal, ...]
    recommendations: Tuple[str, ...]
    components: Dict[str, SubScore] = field(default_factory=dict)
    metrics_analysis: Dict[str, float] = field(default_factory=dict)
    comment_analysis: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "verdict": self.verdict,
            "verdictColor": self.verdict_color,
            "breakdown": {name: part.to_dict() for name, part in self.breakdown.items()},
            "redFlags": [f.to_dict() for f in self.red_flags],
            "positiveSignals": [p.to_dict() for p in self.positive_signals],
            "recommendations": list(self.recommendations),
            "metricsAnalysis": dict(self.metrics_analysis),
            "commentAnalysis": dict(self.comment_analysis),
            "components": {name: sub.to_dict() for name, sub in self.components.items()},
        }
