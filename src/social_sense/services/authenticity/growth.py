import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from social_sense.domain.benchmarks import (
    DROP_MIN_LOSS,
    DROP_PENALTY,
    DROP_RATE,
    FLAT_RATE,
    FLAT_SHARE,
    GROWTH_MAX,
    GROWTH_MIN_SAMPLES,
    SPIKE_AVG_MULTIPLIER,
    SPIKE_MIN_GAIN,
    SPIKE_PENALTY,
    STEADY_GROWTH_RANGE,
    STEP_MIN_SPIKES,
    STEP_PENALTY,
    STEP_SPIKE_RATE,
)
from social_sense.domain.models import FollowerSnapshot, PositiveSignal, RedFlag, SubScore

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400.0


def _to_timestamp(value) -> Optional[pd.Timestamp]:
    """Parse a snapshot date; bare numbers are epoch seconds."""
    if isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, bool):
        ts = pd.to_datetime(value, unit="s", utc=True, errors="coerce")
    else:
        ts = pd.to_datetime(value, utc=True, errors="coerce")
    if ts is None or pd.isna(ts):
        return None
    return ts


def _sorted_history(history: Sequence[FollowerSnapshot]) -> List[Tuple[pd.Timestamp, float]]:
    points = []
    for snapshot in history or []:
        ts = _to_timestamp(snapshot.date)
        try:
            count = float(snapshot.count)
        except (TypeError, ValueError):
            continue
        if ts is None or np.isnan(count):
            continue
        points.append((ts, count))
    return sorted(points, key=lambda p: p[0])


def daily_growth_rates(history: Sequence[FollowerSnapshot]) -> List[Tuple[float, float]]:
    """(daily growth %, absolute change) per interval with a positive gap and base."""
    points = _sorted_history(history)
    intervals = []
    for (prev_ts, prev), (curr_ts, curr) in zip(points, points[1:]):
        days = (curr_ts - prev_ts).total_seconds() / SECONDS_PER_DAY
        if days > 0 and prev > 0:
            intervals.append((((curr - prev) / prev) / days * 100, curr - prev))
    return intervals


class GrowthPatternAnalyzer:
    max_score = GROWTH_MAX

    def _unanalyzed(self, reason: str) -> SubScore:
        return SubScore(
            score=self.max_score,
            max_score=self.max_score,
            reason=reason,
            details={"analyzed": False},
        )

    def analyze(self, history: Optional[Sequence[FollowerSnapshot]]) -> SubScore:
        if not history or len(_sorted_history(history)) < GROWTH_MIN_SAMPLES:
            return self._unanalyzed("Not enough follower history to analyze growth")

        intervals = daily_growth_rates(history)
        if not intervals:
            return self._unanalyzed("Follower history has no usable intervals")

        rates = [rate for rate, _ in intervals]
        avg = float(np.mean(rates))
        score = self.max_score
        flags = []
        positives = []

        spikes = [(r, gain) for r, gain in intervals if r > SPIKE_AVG_MULTIPLIER * avg and gain > SPIKE_MIN_GAIN]
        if spikes:
            score -= SPIKE_PENALTY
            flags.append(RedFlag(
                severity="high",
                flag="Sudden follower spikes",
                details=f"{len(spikes)} interval(s) gained followers far faster than the {avg:.2f}%/day average",
            ))

        drops = [(r, change) for r, change in intervals if r < DROP_RATE and change < DROP_MIN_LOSS]
        if drops:
            score -= DROP_PENALTY
            flags.append(RedFlag(
                severity="high",
                flag="Sharp follower drops",
                details=f"{len(drops)} interval(s) lost followers quickly; often a platform purge of fake accounts",
            ))

        flat = sum(1 for r in rates if abs(r) < FLAT_RATE)
        jumps = sum(1 for r in rates if r > STEP_SPIKE_RATE)
        if flat / len(rates) > FLAT_SHARE and jumps > STEP_MIN_SPIKES:
            score -= STEP_PENALTY
            flags.append(RedFlag(
                severity="medium",
                flag="Step-pattern follower growth",
                details=f"Long flat stretches broken by {jumps} sharp jumps suggest purchased follower batches",
            ))

        low, high = STEADY_GROWTH_RANGE
        if not spikes and not drops and low < avg < high:
            positives.append(PositiveSignal(
                signal="Steady organic growth",
                details=f"Followers grow about {avg:.2f}% per day without spikes or drops",
            ))

        score = max(0, score)
        logger.debug("Growth analysis over %d intervals: avg %.2f%%/day -> %d", len(rates), avg, score)
        return SubScore(
            score=score,
            max_score=self.max_score,
            flags=tuple(flags),
            positives=tuple(positives),
            reason=f"Average daily growth {avg:.2f}% across {len(rates)} intervals",
            details={
                "analyzed": True,
                "averageDailyGrowth": round(avg, 3),
                "intervals": len(rates),
                "spikes": len(spikes),
                "drops": len(drops),
            },
        )
