import logging
from typing import Optional, Sequence

import numpy as np

from social_sense.domain.benchmarks import (
    FOLLOW_FOR_FOLLOW_RANGE,
    HEALTHY_FOLLOW_RATIO,
    INSTAGRAM,
    MASS_FOLLOW_HIGH_SEVERITY_RATIO,
    MASS_FOLLOW_RATIO,
    MIN_POSTS_FOR_VARIANCE,
    RATIO_MAX,
    RATIO_PENALTIES,
    REACH_BEYOND_FOLLOWERS_RATIO,
    VARIANCE_HIGH_CV,
    VARIANCE_LOW_CV,
    benchmark_for,
)
from social_sense.domain.models import ContentMetric, PositiveSignal, ProfileMetrics, RedFlag, SubScore
from social_sense.services.authenticity.engagement_rate import as_number, post_engagement

logger = logging.getLogger(__name__)


def _safe_ratio(numerator: float, denominator: float) -> Optional[float]:
    if denominator <= 0:
        return None
    return numerator / denominator


def coefficient_of_variation(values: Sequence[float]) -> Optional[float]:
    """Population std / mean, as a percentage."""
    if len(values) < MIN_POSTS_FOR_VARIANCE:
        return None
    mean = float(np.mean(values))
    if mean <= 0:
        return None
    return float(np.std(values) / mean * 100)


class RatioAnomalyAnalyzer:
    max_score = RATIO_MAX

    def analyze(self, profile: ProfileMetrics, content_metrics: Sequence[ContentMetric], platform: str) -> SubScore:
        platform = (platform or "").lower()
        benchmark = benchmark_for(platform)
        followers = as_number(profile.followers)
        following = as_number(profile.following)
        deductions = 0
        flags = []
        positives = []
        details = {}

        follow_ratio = _safe_ratio(following, followers)
        details["followingToFollowers"] = round(follow_ratio, 3) if follow_ratio is not None else None
        if follow_ratio is not None:
            low, high = FOLLOW_FOR_FOLLOW_RANGE
            if follow_ratio > MASS_FOLLOW_RATIO:
                deductions += RATIO_PENALTIES["mass_follow"]
                flags.append(RedFlag(
                    severity="high" if follow_ratio >= MASS_FOLLOW_HIGH_SEVERITY_RATIO else "medium",
                    flag="High following-to-followers ratio",
                    details=f"Follows {follow_ratio:.1f}x as many accounts as follow back; typical of mass-follow growth",
                ))
            elif low < follow_ratio <= high:
                deductions += RATIO_PENALTIES["follow_for_follow"]
                flags.append(RedFlag(
                    severity="medium",
                    flag="Follow-for-follow pattern",
                    details=f"Following-to-followers ratio of {follow_ratio:.2f} suggests reciprocal follow schemes",
                ))
            elif follow_ratio < HEALTHY_FOLLOW_RATIO:
                positives.append(PositiveSignal(
                    signal="Healthy follower ratio",
                    details=f"Follows only {follow_ratio:.2f}x the accounts that follow it",
                ))

        if content_metrics:
            mean_likes = float(np.mean([as_number(m.likes) for m in content_metrics]))
            mean_comments = float(np.mean([as_number(m.comments) for m in content_metrics]))
            mean_views = float(np.mean([as_number(m.views) for m in content_metrics]))

            if platform == INSTAGRAM:
                likes_ratio, base_name = _safe_ratio(mean_likes, followers), "followers"
            else:
                likes_ratio, base_name = _safe_ratio(mean_likes, mean_views), "views"
            details["likesRatio"] = round(likes_ratio, 4) if likes_ratio is not None else None
            if likes_ratio is not None:
                band = benchmark.likes_ratio
                if likes_ratio < band.min:
                    deductions += RATIO_PENALTIES["likes_below_min"]
                    flags.append(RedFlag(
                        severity="medium",
                        flag=f"Low likes-to-{base_name} ratio",
                        details=f"{likes_ratio:.2%} is below the {band.min:.0%} minimum for {platform}",
                    ))
                elif likes_ratio > band.max:
                    deductions += RATIO_PENALTIES["likes_above_max"]
                    flags.append(RedFlag(
                        severity="high",
                        flag=f"Unusually high likes-to-{base_name} ratio",
                        details=f"{likes_ratio:.2%} exceeds the {band.max:.0%} maximum for {platform}; possible purchased likes",
                    ))

            comments_ratio = _safe_ratio(mean_comments, mean_likes)
            details["commentsToLikes"] = round(comments_ratio, 4) if comments_ratio is not None else None
            if comments_ratio is not None:
                band = benchmark.comments_to_likes
                if comments_ratio < band.min:
                    deductions += RATIO_PENALTIES["comments_below_min"]
                    flags.append(RedFlag(
                        severity="low",
                        flag="Low comment-to-like ratio",
                        details=f"{comments_ratio:.2%} of likes turn into comments; likes may be inflated",
                    ))
                elif comments_ratio > band.max:
                    deductions += RATIO_PENALTIES["comments_above_max"]
                    flags.append(RedFlag(
                        severity="medium",
                        flag="Unusually high comment-to-like ratio",
                        details=f"{comments_ratio:.2%} is above the {band.max:.0%} maximum; possible comment pods or bots",
                    ))
                else:
                    positives.append(PositiveSignal(
                        signal="Natural comment-to-like ratio",
                        details=f"{comments_ratio:.2%} is within the expected range for {platform}",
                    ))

            if platform != INSTAGRAM:
                views_ratio = _safe_ratio(mean_views, followers)
                details["viewsToFollowers"] = round(views_ratio, 4) if views_ratio is not None else None
                if views_ratio is not None:
                    if views_ratio < benchmark.views_to_followers.min:
                        deductions += RATIO_PENALTIES["views_below_min"]
                        flags.append(RedFlag(
                            severity="medium",
                            flag="Low views relative to follower count",
                            details=f"Average views are {views_ratio:.2%} of followers; followers may be inactive or purchased",
                        ))
                    elif views_ratio > REACH_BEYOND_FOLLOWERS_RATIO:
                        positives.append(PositiveSignal(
                            signal="Reach beyond follower base",
                            details=f"Average views are {views_ratio:.1f}x the follower count",
                        ))

            cv = coefficient_of_variation([post_engagement(m, platform) for m in content_metrics])
            details["engagementVariation"] = round(cv, 1) if cv is not None else None
            if cv is not None:
                if cv > VARIANCE_HIGH_CV:
                    deductions += RATIO_PENALTIES["variance_high"]
                    flags.append(RedFlag(
                        severity="medium",
                        flag="Highly variable engagement",
                        details=f"Engagement varies {cv:.0f}% across posts; consistent with selective boosting",
                    ))
                elif cv < VARIANCE_LOW_CV:
                    deductions += RATIO_PENALTIES["variance_low"]
                    flags.append(RedFlag(
                        severity="low",
                        flag="Suspiciously consistent engagement",
                        details=f"Engagement varies only {cv:.1f}% across posts",
                    ))

        score = max(0, self.max_score - deductions)
        logger.debug("Ratio analysis on %s: -%d -> %d", platform, deductions, score)
        return SubScore(
            score=score,
            max_score=self.max_score,
            flags=tuple(flags),
            positives=tuple(positives),
            reason=f"{len(flags)} ratio anomal{'y' if len(flags) == 1 else 'ies'} detected" if flags else "Ratios within expected ranges",
            details=details,
        )
