import logging
from typing import Sequence

import numpy as np

from social_sense.domain.benchmarks import (
    ENGAGEMENT_FLOOR_SCORE,
    ENGAGEMENT_MAX,
    ENGAGEMENT_SCORE_BANDS,
    TIKTOK,
    VIEW_BASED_PLATFORMS,
    benchmark_for,
)
from social_sense.domain.models import ContentMetric, PositiveSignal, RedFlag, SubScore

logger = logging.getLogger(__name__)


def as_number(value) -> float:
    try:
        return max(0.0, float(value or 0))
    except (TypeError, ValueError):
        return 0.0


def post_engagement(metric: ContentMetric, platform: str) -> float:
    engagement = as_number(metric.likes) + as_number(metric.comments)
    if platform == TIKTOK:
        engagement += as_number(metric.shares)
    return engagement


def engagement_rate(followers: int, content_metrics: Sequence[ContentMetric], platform: str) -> float:
    """100 * mean(engagement) / mean(base); views for video platforms, followers otherwise."""
    if not content_metrics:
        return 0.0
    engagement = np.mean([post_engagement(m, platform) for m in content_metrics])
    if platform in VIEW_BASED_PLATFORMS:
        base = np.mean([as_number(m.views) for m in content_metrics])
    else:
        base = as_number(followers)
    if base <= 0:
        return 0.0
    return float(100 * engagement / base)


class EngagementRateAnalyzer:
    max_score = ENGAGEMENT_MAX

    def analyze(self, followers: int, content_metrics: Sequence[ContentMetric], platform: str) -> SubScore:
        platform = (platform or "").lower()
        if not content_metrics:
            return SubScore(
                score=0,
                max_score=self.max_score,
                reason="No content metrics provided",
                details={"engagementRate": 0.0, "assessment": "unknown"},
            )

        bands = benchmark_for(platform).engagement_rate
        rate = engagement_rate(followers, content_metrics, platform)
        flags = []
        positives = []

        score, assessment = ENGAGEMENT_FLOOR_SCORE, "suspicious_low"
        for attr, band_score, band_assessment in ENGAGEMENT_SCORE_BANDS:
            if rate >= getattr(bands, attr):
                score, assessment = band_score, band_assessment
                break

        if rate > bands.suspicious_high:
            score, assessment = ENGAGEMENT_FLOOR_SCORE, "suspicious_high"
            flags.append(RedFlag(
                severity="high",
                flag="Abnormally high engagement rate",
                details=f"{rate:.2f}% exceeds the {bands.suspicious_high}% ceiling for {platform}; "
                        "possible purchased engagement",
            ))
        elif assessment == "suspicious_low":
            flags.append(RedFlag(
                severity="high",
                flag="Abnormally low engagement rate",
                details=f"{rate:.2f}% is below the {bands.suspicious_low}% floor for {platform}; "
                        "audience may be inactive or purchased",
            ))
        elif assessment in ("excellent", "good"):
            positives.append(PositiveSignal(
                signal="Healthy engagement rate",
                details=f"{rate:.2f}% is {assessment} for {platform}",
            ))

        logger.debug("Engagement rate %.2f%% on %s -> %s (%d)", rate, platform, assessment, score)
        return SubScore(
            score=score,
            max_score=self.max_score,
            flags=tuple(flags),
            positives=tuple(positives),
            reason=f"Engagement rate {rate:.2f}% ({assessment.replace('_', ' ')})",
            details={"engagementRate": round(rate, 2), "assessment": assessment},
        )
