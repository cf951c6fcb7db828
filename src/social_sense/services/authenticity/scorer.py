"""
Composite authenticity score.

Sums the four component scores into a 0-100 score, applies the severity caps
in table order, and derives verdict and recommendations.
"""
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from social_sense.domain.benchmarks import (
    FLAG_KEYWORD_RECOMMENDATIONS,
    RECOMMENDATION_BANDS,
    SEVERITY_CAPS,
    SEVERITY_ORDER,
    VERDICT_BANDS,
)
from social_sense.domain.lexicon import LexiconStore
from social_sense.domain.models import (
    AuthenticityInputs,
    AuthenticityResult,
    ComponentBreakdown,
    ContentMetric,
    RedFlag,
    SubScore,
)
from social_sense.services.authenticity.bot_patterns import BotPatternDetector
from social_sense.services.authenticity.engagement_rate import EngagementRateAnalyzer, as_number
from social_sense.services.authenticity.growth import GrowthPatternAnalyzer
from social_sense.services.authenticity.ratios import RatioAnomalyAnalyzer

logger = logging.getLogger(__name__)


def verdict_for(score: int) -> Tuple[str, str]:
    for minimum, verdict, color in VERDICT_BANDS:
        if score >= minimum:
            return verdict, color
    return VERDICT_BANDS[-1][1], VERDICT_BANDS[-1][2]


def sort_flags(flags: Sequence[RedFlag]) -> List[RedFlag]:
    return sorted(flags, key=lambda f: SEVERITY_ORDER.get(f.severity, len(SEVERITY_ORDER)))


def apply_caps(score: int, verdict: str, color: str, high_flags: int, bot_percentage: float) -> Tuple[int, str, str]:
    observed = {"high_flags": high_flags, "bot_percentage": bot_percentage}
    for kind, threshold, cap, cap_verdict, cap_color in SEVERITY_CAPS:
        value = observed[kind]
        tripped = value >= threshold if kind == "high_flags" else value > threshold
        if tripped:
            logger.debug("Severity cap %s tripped (%s); capping %d at %d", kind, value, score, cap)
            score, verdict, color = min(score, cap), cap_verdict, cap_color
    return score, verdict, color


def build_recommendations(score: int, flags: Sequence[RedFlag]) -> List[str]:
    recommendations: List[str] = []
    for minimum, items in RECOMMENDATION_BANDS:
        if score >= minimum:
            recommendations.extend(items)
            break

    high_flag_text = [f"{f.flag} {f.details}".lower() for f in flags if f.severity == "high"]
    for keyword, recommendation in FLAG_KEYWORD_RECOMMENDATIONS:
        if any(keyword in text for text in high_flag_text):
            recommendations.append(recommendation)
    return recommendations


def metrics_analysis(content_metrics: Sequence[ContentMetric]) -> Dict[str, float]:
    """Headline ratios (as percentages) across all posts."""
    views = sum(as_number(m.views) for m in content_metrics)
    likes = sum(as_number(m.likes) for m in content_metrics)
    comments = sum(as_number(m.comments) for m in content_metrics)
    return {
        "engagementRate": round((likes + comments) / views * 100, 2) if views > 0 else 0.0,
        "likesToViews": round(likes / views * 100, 2) if views > 0 else 0.0,
        "commentsToLikes": round(comments / likes * 100, 2) if likes > 0 else 0.0,
    }


class AuthenticityScorer:
    def __init__(self, lexicon: Optional[LexiconStore] = None):
        self.engagement = EngagementRateAnalyzer()
        self.ratios = RatioAnomalyAnalyzer()
        self.bots = BotPatternDetector(lexicon)
        self.growth = GrowthPatternAnalyzer()

    def score(self, inputs: AuthenticityInputs) -> AuthenticityResult:
        platform = (inputs.platform or "").lower()
        content = list(inputs.content_metrics or ())
        components: Dict[str, SubScore] = {
            "engagementRate": self.engagement.analyze(inputs.profile_metrics.followers, content, platform),
            "ratioAnalysis": self.ratios.analyze(inputs.profile_metrics, content, platform),
            "botDetection": self.bots.analyze(inputs.comment_samples or ()),
            "growthPattern": self.growth.analyze(inputs.follower_history),
        }

        total = sum(c.score for c in components.values())
        max_total = sum(c.max_score for c in components.values())
        score = round(100 * total / max_total) if max_total else 0
        verdict, color = verdict_for(score)

        red_flags = sort_flags([f for c in components.values() for f in c.flags])
        positives = [p for c in components.values() for p in c.positives]
        high_flags = sum(1 for f in red_flags if f.severity == "high")
        bot_details = components["botDetection"].details
        # caps compare against the unrounded share; the rounded one is for display
        bot_percentage = float(bot_details.get("botPercentage", 0.0))

        score, verdict, color = apply_caps(score, verdict, color, high_flags, bot_percentage)
        score = max(0, min(100, score))

        logger.debug("Authenticity for %s: %d/%d -> %d (%s)", platform, total, max_total, score, verdict)
        return AuthenticityResult(
            score=score,
            verdict=verdict,
            verdict_color=color,
            breakdown={
                name: ComponentBreakdown(score=c.score, max=c.max_score, reason=c.reason)
                for name, c in components.items()
            },
            red_flags=tuple(red_flags),
            positive_signals=tuple(positives),
            recommendations=tuple(build_recommendations(score, red_flags)),
            components=components,
            metrics_analysis=metrics_analysis(content),
            comment_analysis={
                key: bot_details[key]
                for key in ("total", "emojiOnlyPct", "genericPct", "duplicatePct",
                            "suspectedBotPercentage", "flaggedExamples")
                if key in bot_details
            },
        )


def score_authenticity(inputs: AuthenticityInputs, lexicon: Optional[LexiconStore] = None) -> AuthenticityResult:
    return AuthenticityScorer(lexicon).score(inputs)
