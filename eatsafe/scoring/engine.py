"""Scoring dispatch: turn a checklist answer set into a displayable grade."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from eatsafe.models import (
    Answer,
    ComplianceFrameworkConfig,
    ScoringModel,
    ScoringTier,
    SeverityCounts,
)
from eatsafe.scoring.percentage import letter_grade_score, percentage_score
from eatsafe.scoring.star import bcc_star_rating
from eatsafe.tracing import log_config_event


@dataclass(frozen=True)
class ScoreResult:
    """Outcome of scoring one self-assessment."""

    framework_id: str
    model: ScoringModel
    score: int  # stars, percentage or grade-scale points depending on model
    tier: ScoringTier
    counts: SeverityCounts

    @property
    def label(self) -> str:
        return self.tier.label

    @property
    def color(self) -> str:
        return self.tier.color

    def to_dict(self) -> dict[str, Any]:
        return {
            "framework_id": self.framework_id,
            "model": self.model.value,
            "score": self.score,
            "label": self.label,
            "color": self.color,
            "counts": self.counts.to_dict(),
        }


def select_tier(tiers: Sequence[ScoringTier], score: float) -> ScoringTier:
    """Pick the first tier (descending by ``min``) the score meets.

    Raises:
        ValueError: If ``tiers`` is empty.
    """
    if not tiers:
        raise ValueError("Cannot select a tier from an empty tier list")
    for tier in tiers:
        if score >= tier.min:
            return tier
    return tiers[-1]


def compute_score(config: ComplianceFrameworkConfig, answers: Mapping[str, Any]) -> int:
    """Raw score for ``answers`` under the framework's scoring model."""
    scoring = config.scoring
    if scoring.model == ScoringModel.STAR_RATING:
        compute = scoring.compute_star_rating or bcc_star_rating
        return compute(answers)
    if scoring.model == ScoringModel.PERCENTAGE:
        return percentage_score(answers, scoring.tiers, scoring.penalty_weights)
    return letter_grade_score(answers, scoring.grade_scale)


def _trace_unmatched_answers(
    config: ComplianceFrameworkConfig,
    answers: Mapping[str, Any],
) -> None:
    """Log answers that do not fit the framework's checklist.

    Such answers are still scored; the event only flags them.
    """
    items = {item.code: item for item in config.get_all_items()}
    unknown = []
    bad_severity = []
    for code, raw in answers.items():
        item = items.get(code)
        if item is None:
            unknown.append(code)
            continue
        severity = Answer.coerce(raw).effective_severity
        if severity is not None and severity not in item.severities:
            bad_severity.append(code)

    if unknown or bad_severity:
        log_config_event(
            "unmatched",
            "scoring",
            f"Answers outside the '{config.id}' checklist",
            {"unknown_codes": sorted(unknown), "unexpected_severity": sorted(bad_severity)},
            level=logging.DEBUG,
        )


def score_assessment(
    config: ComplianceFrameworkConfig,
    answers: Mapping[str, Any] | None,
) -> ScoreResult:
    """Score a self-assessment against a framework.

    Args:
        config: The resolved framework configuration.
        answers: Item code to answer. Values may be ``Answer`` objects,
            ``{"status", "severity"}`` mappings or legacy booleans.

    Returns:
        ScoreResult with the raw score and its display tier. An answer set
        with no applicable answers scores 0 in the lowest tier.
    """
    answers = answers or {}
    _trace_unmatched_answers(config, answers)
    counts = SeverityCounts.from_answers(answers)
    tiers = config.scoring.tiers

    if counts.total == 0:
        log_config_event(
            "score",
            "scoring",
            f"No applicable answers for '{config.id}', using lowest tier",
            level=logging.DEBUG,
        )
        return ScoreResult(config.id, config.scoring.model, 0, tiers[-1], counts)

    score = compute_score(config, answers)
    tier = select_tier(tiers, score)
    log_config_event(
        "score",
        "scoring",
        f"Scored '{config.id}' assessment",
        {"model": config.scoring.model.value, "score": score, "tier": tier.label},
        level=logging.DEBUG,
    )
    return ScoreResult(config.id, config.scoring.model, score, tier, counts)
