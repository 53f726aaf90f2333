"""Checklist answer models consumed by the scoring engine."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from eatsafe.models.framework import Severity


class AnswerStatus(str, Enum):
    """Compliance status recorded for a checklist item."""

    COMPLIANT = "compliant"
    NON_COMPLIANT = "non_compliant"
    NOT_APPLICABLE = "not_applicable"


@dataclass(frozen=True)
class Answer:
    """The answer given for one assessment item."""

    status: AnswerStatus
    severity: Severity | None = None  # only meaningful when non-compliant

    @property
    def is_applicable(self) -> bool:
        return self.status != AnswerStatus.NOT_APPLICABLE

    @property
    def effective_severity(self) -> Severity | None:
        """Severity used for counting; unflagged non-compliances count as minor."""
        if self.status != AnswerStatus.NON_COMPLIANT:
            return None
        return self.severity or Severity.MINOR

    @classmethod
    def coerce(cls, value: Any) -> "Answer":
        """Build an Answer from the shapes the checklist UI stores.

        Accepts an ``Answer``, a mapping with ``status``/``severity`` keys, or
        a boolean (legacy pass/fail responses). Anything unrecognised is
        treated as not applicable.
        """
        if isinstance(value, Answer):
            return value
        if isinstance(value, bool):
            return cls(AnswerStatus.COMPLIANT if value else AnswerStatus.NON_COMPLIANT)
        if isinstance(value, Mapping):
            try:
                status = AnswerStatus(value.get("status"))
            except ValueError:
                return cls(AnswerStatus.NOT_APPLICABLE)
            try:
                severity = Severity(value["severity"]) if value.get("severity") else None
            except ValueError:
                severity = None
            return cls(status, severity)
        return cls(AnswerStatus.NOT_APPLICABLE)


@dataclass(frozen=True)
class SeverityCounts:
    """Tally of an answer set."""

    total: int = 0  # applicable answers
    compliant: int = 0
    minor: int = 0
    major: int = 0
    critical: int = 0

    @property
    def non_compliant(self) -> int:
        return self.minor + self.major + self.critical

    @classmethod
    def from_answers(cls, answers: Mapping[str, Any]) -> "SeverityCounts":
        """Count applicable answers by compliance status and severity."""
        total = compliant = minor = major = critical = 0
        for raw in answers.values():
            answer = Answer.coerce(raw)
            if not answer.is_applicable:
                continue
            total += 1
            severity = answer.effective_severity
            if severity is None:
                compliant += 1
            elif severity == Severity.CRITICAL:
                critical += 1
            elif severity == Severity.MAJOR:
                major += 1
            else:
                minor += 1
        return cls(total=total, compliant=compliant, minor=minor, major=major, critical=critical)

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "compliant": self.compliant,
            "minor": self.minor,
            "major": self.major,
            "critical": self.critical,
        }
