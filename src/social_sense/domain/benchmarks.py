# src/social_sense/domain/benchmarks.py
# Scoring tables for the authenticity analyzers. Ratios are fractions,
# engagement-rate bands are percentages.

from dataclasses import dataclass
from typing import Dict, Tuple

YOUTUBE = "youtube"
TIKTOK = "tiktok"
INSTAGRAM = "instagram"

PLATFORMS = (YOUTUBE, TIKTOK, INSTAGRAM)
VIEW_BASED_PLATFORMS = (YOUTUBE, TIKTOK)


@dataclass(frozen=True)
class EngagementBands:
    excellent: float
    good: float
    average: float
    suspicious_low: float
    suspicious_high: float


@dataclass(frozen=True)
class RatioBand:
    min: float
    typical: float
    max: float


@dataclass(frozen=True)
class PlatformBenchmark:
    engagement_rate: EngagementBands
    likes_ratio: RatioBand  # likes/views, or likes/followers on Instagram
    comments_to_likes: RatioBand
    views_to_followers: RatioBand


PLATFORM_BENCHMARKS: Dict[str, PlatformBenchmark] = {
    YOUTUBE: PlatformBenchmark(
        engagement_rate=EngagementBands(excellent=5.0, good=3.0, average=1.5, suspicious_low=0.5, suspicious_high=12.0),
        likes_ratio=RatioBand(min=0.02, typical=0.04, max=0.15),
        comments_to_likes=RatioBand(min=0.01, typical=0.03, max=0.10),
        views_to_followers=RatioBand(min=0.05, typical=0.20, max=2.0),
    ),
    TIKTOK: PlatformBenchmark(
        engagement_rate=EngagementBands(excellent=6.0, good=4.0, average=2.5, suspicious_low=1.0, suspicious_high=15.0),
        likes_ratio=RatioBand(min=0.05, typical=0.10, max=0.35),
        comments_to_likes=RatioBand(min=0.005, typical=0.02, max=0.08),
        views_to_followers=RatioBand(min=0.10, typical=0.50, max=2.0),
    ),
    INSTAGRAM: PlatformBenchmark(
        engagement_rate=EngagementBands(excellent=6.0, good=3.5, average=1.0, suspicious_low=0.3, suspicious_high=20.0),
        likes_ratio=RatioBand(min=0.01, typical=0.03, max=0.20),
        comments_to_likes=RatioBand(min=0.005, typical=0.02, max=0.10),
        views_to_followers=RatioBand(min=0.0, typical=0.0, max=0.0),
    ),
}


def benchmark_for(platform: str) -> PlatformBenchmark:
    return PLATFORM_BENCHMARKS.get((platform or "").lower(), PLATFORM_BENCHMARKS[YOUTUBE])


# ----------------------------
# Component maxima
# ----------------------------
ENGAGEMENT_MAX = 25
RATIO_MAX = 25
BOT_MAX = 30
GROWTH_MAX = 20

# (threshold attribute, score, assessment), checked top-down with ">="
ENGAGEMENT_SCORE_BANDS: Tuple[Tuple[str, int, str], ...] = (
    ("excellent", 25, "excellent"),
    ("good", 22, "good"),
    ("average", 18, "average"),
    ("suspicious_low", 12, "below_average"),
)
ENGAGEMENT_FLOOR_SCORE = 5

# ----------------------------
# Ratio deductions
# ----------------------------
RATIO_PENALTIES: Dict[str, int] = {
    "mass_follow": 8,
    "follow_for_follow": 4,
    "likes_below_min": 6,
    "likes_above_max": 10,
    "comments_below_min": 3,
    "comments_above_max": 6,
    "views_below_min": 6,
    "variance_high": 5,
    "variance_low": 3,
}
MASS_FOLLOW_RATIO = 1.5
MASS_FOLLOW_HIGH_SEVERITY_RATIO = 3.0
FOLLOW_FOR_FOLLOW_RANGE = (0.8, 1.2)
HEALTHY_FOLLOW_RATIO = 0.3
REACH_BEYOND_FOLLOWERS_RATIO = 2.0
VARIANCE_HIGH_CV = 150.0
VARIANCE_LOW_CV = 10.0
MIN_POSTS_FOR_VARIANCE = 3

# ----------------------------
# Bot detection
# ----------------------------
# (bot percentage strictly above, score, severity, flag, details)
BOT_PERCENTAGE_BANDS: Tuple[Tuple[float, int, str, str, str], ...] = (
    (50.0, 5, "high", "Majority of comments appear bot-generated",
     "More than half of sampled comments match bot patterns"),
    (30.0, 12, "high", "High proportion of bot-like comments",
     "Over 30% of sampled comments match bot patterns"),
    (15.0, 20, "medium", "Elevated bot-like comment activity",
     "Over 15% of sampled comments match bot patterns"),
    (5.0, 25, "low", "Some bot-like comments detected",
     "A small share of comments match bot patterns"),
)
BOT_DUPLICATE_RATE = 10.0
BOT_DUPLICATE_PENALTY = 5
BOT_EMOJI_RATE = 25.0
BOT_EMOJI_PENALTY = 3
BOT_EXAMPLE_LIMIT = 10
BOT_EXAMPLE_CHARS = 100
SHORT_COMMENT_WORDS = 3
SHORT_COMMENT_CHARS = 15
DUPLICATE_MIN_CHARS = 5

# ----------------------------
# Growth pattern
# ----------------------------
GROWTH_MIN_SAMPLES = 3
SPIKE_AVG_MULTIPLIER = 5
SPIKE_MIN_GAIN = 1000
SPIKE_PENALTY = 10
DROP_RATE = -5.0
DROP_MIN_LOSS = -500
DROP_PENALTY = 8
FLAT_RATE = 0.5
FLAT_SHARE = 0.4
STEP_SPIKE_RATE = 10.0
STEP_MIN_SPIKES = 2
STEP_PENALTY = 5
STEADY_GROWTH_RANGE = (0.0, 5.0)

# ----------------------------
# Composite verdict
# ----------------------------
# (minimum score, verdict, color)
VERDICT_BANDS: Tuple[Tuple[int, str, str], ...] = (
    (90, "Highly Authentic", "success"),
    (75, "Likely Authentic", "success"),
    (60, "Some Concerns", "warning"),
    (40, "Significant Red Flags", "warning"),
    (0, "High Fraud Risk", "error"),
)

SEVERITY_ORDER: Dict[str, int] = {"high": 0, "medium": 1, "low": 2}

# Applied in this order; each caps the score and forces the verdict.
# (kind, threshold, score cap, verdict, color)
SEVERITY_CAPS: Tuple[Tuple[str, float, int, str, str], ...] = (
    ("high_flags", 3, 45, "Significant Red Flags", "warning"),
    ("bot_percentage", 50.0, 35, "High Fraud Risk", "error"),
)

RECOMMENDATION_BANDS: Tuple[Tuple[int, Tuple[str, ...]], ...] = (
    (75, (
        "Engagement appears organic; the account is a reasonable partnership candidate",
        "Re-run this check periodically to confirm engagement stays consistent",
    )),
    (60, (
        "Request audience analytics screenshots directly from the creator",
        "Start with a small trial campaign before committing a larger budget",
    )),
    (40, (
        "Verify metrics with a third-party analytics tool before any deal",
        "Prefer performance-based compensation over flat fees",
        "Review a larger sample of recent posts for consistency",
    )),
    (0, (
        "Avoid partnership until engagement can be independently verified",
        "Consider alternative creators with demonstrably organic engagement",
        "Report the account if the platform offers a fraud channel",
    )),
)

FLAG_KEYWORD_RECOMMENDATIONS: Tuple[Tuple[str, str], ...] = (
    ("bot", "Manually review the comment section for bot activity before committing"),
    ("follower", "Request follower growth history to check for purchased followers"),
)
