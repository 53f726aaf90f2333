"""Star-rating algorithms.

Cascading regimes (Eat Safe, Scores on Doors) share one shape: a table of
rules evaluated top down, first match wins. Each rule fires when any of its
severity thresholds is met.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from eatsafe.models import PenaltyWeights, SeverityCounts
from eatsafe.scoring.percentage import round_half_up


@dataclass(frozen=True)
class StarRule:
    """One row of a star cascade."""

    stars: int
    min_criticals: int | None = None
    min_majors: int | None = None
    min_minors: int | None = None

    def matches(self, counts: SeverityCounts) -> bool:
        return (
            (self.min_criticals is not None and counts.critical >= self.min_criticals)
            or (self.min_majors is not None and counts.major >= self.min_majors)
            or (self.min_minors is not None and counts.minor >= self.min_minors)
        )


def cascade_stars(counts: SeverityCounts, rules: Sequence[StarRule], best: int) -> int:
    """Evaluate a cascade; ``best`` applies when no rule fires."""
    for rule in rules:
        if rule.matches(counts):
            return rule.stars
    return best


# Brisbane City Council Eat Safe (also QLD, NSW, SA, WA, ACT)
BCC_STAR_RULES: tuple[StarRule, ...] = (
    StarRule(0, min_criticals=2, min_majors=3),
    StarRule(2, min_criticals=1, min_majors=1, min_minors=6),
    StarRule(3, min_minors=4),
    StarRule(4, min_minors=1),
)

# Victoria Scores on Doors: same cascade, 1-5 bands
VIC_STAR_RULES: tuple[StarRule, ...] = (
    StarRule(1, min_criticals=2, min_majors=3),
    StarRule(2, min_criticals=1, min_majors=1, min_minors=6),
    StarRule(3, min_minors=4),
    StarRule(4, min_minors=1),
)


def bcc_star_rating(answers: Mapping[str, Any]) -> int:
    """Eat Safe star rating (0, 2, 3, 4 or 5)."""
    return cascade_stars(SeverityCounts.from_answers(answers), BCC_STAR_RULES, best=5)


def vic_star_rating(answers: Mapping[str, Any]) -> int:
    """Scores on Doors star rating (1 to 5)."""
    return cascade_stars(SeverityCounts.from_answers(answers), VIC_STAR_RULES, best=5)


def adafsa_star_rating(answers: Mapping[str, Any]) -> int:
    """Abu Dhabi Zadna star rating.

    Two or more criticals give 1 star; a single critical limits the rating to
    at most 2 (scaled from the compliant share). Otherwise the weighted
    percentage is banded: 90+ 5 stars, 75+ 4, 60+ 3, 45+ 2, else 1.
    """
    counts = SeverityCounts.from_answers(answers)
    if counts.total == 0:
        return 0

    if counts.critical >= 2:
        return 1
    if counts.critical >= 1:
        return min(2, round_half_up(counts.compliant / counts.total * 5))

    weights = PenaltyWeights()
    penalty = counts.major * weights.major + counts.minor * weights.minor
    pct = round_half_up((counts.total - penalty) / counts.total * 100)
    if pct >= 90:
        return 5
    if pct >= 75:
        return 4
    if pct >= 60:
        return 3
    if pct >= 45:
        return 2
    return 1
