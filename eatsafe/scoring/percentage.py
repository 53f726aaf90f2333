"""Percentage and letter-grade scoring."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

from eatsafe.models import PenaltyWeights, ScoringTier, SeverityCounts

# Dubai Municipality: any critical keeps the venue on Grade D (0-54).
DEFAULT_CRITICAL_CAP = 54


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (82.5 -> 83)."""
    return math.floor(value + 0.5)


def critical_cap(tiers: Sequence[ScoringTier] | None) -> int:
    """Highest score a critical non-compliance may still produce.

    This is the top of the worst tier, i.e. the second-lowest tier minimum
    minus one. With fewer than two tiers there is no passing band to guard.
    """
    if not tiers:
        return DEFAULT_CRITICAL_CAP
    mins = sorted({tier.min for tier in tiers})
    if len(mins) < 2:
        return mins[0]
    return mins[1] - 1


def percentage_score(
    answers: Mapping[str, Any],
    tiers: Sequence[ScoringTier] | None = None,
    weights: PenaltyWeights | None = None,
) -> int:
    """Severity-weighted compliance percentage.

    Each non-compliance deducts its severity weight from the attainable
    points (one per applicable item). Any critical non-compliance caps the
    result at the worst tier instead, so a critical failure can never pass
    by arithmetic.

    Args:
        answers: Item code to answer (``Answer``, mapping or bool).
        tiers: Display tiers used to derive the critical cap.
        weights: Penalty weights; defaults to major=3, minor=1.

    Returns:
        Integer score in [0, 100]; 0 for an empty answer set.
    """
    weights = weights or PenaltyWeights()
    counts = SeverityCounts.from_answers(answers)
    if counts.total == 0:
        return 0

    if counts.critical > 0:
        compliant_pct = round_half_up(counts.compliant / counts.total * 100)
        return min(critical_cap(tiers), compliant_pct)

    penalty = counts.major * weights.major + counts.minor * weights.minor
    raw = round_half_up((counts.total - penalty) / counts.total * 100)
    return max(0, min(100, raw))


def letter_grade_score(answers: Mapping[str, Any], grade_scale: int = 100) -> int:
    """Unweighted compliant share, scaled to ``grade_scale`` and floored."""
    counts = SeverityCounts.from_answers(answers)
    if counts.total == 0:
        return 0
    return math.floor(counts.compliant / counts.total * grade_scale)
