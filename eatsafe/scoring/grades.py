"""Published grade tables of the regulators."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DMGrade:
    grade: str
    label: str
    label_ar: str
    min_score: int
    max_score: int
    color: str


@dataclass(frozen=True)
class AdafsaStar:
    stars: int
    label: str
    label_ar: str
    min_score: int
    color: str


@dataclass(frozen=True)
class AUStarGrade:
    stars: int
    label: str
    color: str


# Dubai Municipality letter grades
DM_GRADES: tuple[DMGrade, ...] = (
    DMGrade("A", "Excellent", "ممتاز", 85, 100, "#22c55e"),
    DMGrade("B", "Good", "جيد", 70, 84, "#3b82f6"),
    DMGrade("C", "Acceptable", "مقبول", 55, 69, "#f59e0b"),
    DMGrade("D", "Poor", "ضعيف", 0, 54, "#ef4444"),
)

# Abu Dhabi Zadna stars
ADAFSA_STARS: tuple[AdafsaStar, ...] = (
    AdafsaStar(5, "Outstanding", "متميز", 90, "#f59e0b"),
    AdafsaStar(4, "Very Good", "جيد جداً", 75, "#22c55e"),
    AdafsaStar(3, "Good", "جيد", 60, "#3b82f6"),
    AdafsaStar(2, "Acceptable", "مقبول", 45, "#f97316"),
    AdafsaStar(1, "Needs Improvement", "يحتاج تحسين", 0, "#ef4444"),
)

# Eat Safe star grades (QLD, NSW, SA, WA, ACT)
AU_STAR_GRADES: tuple[AUStarGrade, ...] = (
    AUStarGrade(5, "Excellent Performer", "#10B981"),
    AUStarGrade(4, "Very Good Performer", "#22C55E"),
    AUStarGrade(3, "Good Performer", "#F59E0B"),
    AUStarGrade(2, "Poor Performer", "#EF4444"),
    AUStarGrade(0, "Non-Compliant", "#DC2626"),
)

# Victoria Scores on Doors
VIC_SCORES_ON_DOORS: tuple[AUStarGrade, ...] = (
    AUStarGrade(5, "Excellent", "#10B981"),
    AUStarGrade(4, "Very Good", "#22C55E"),
    AUStarGrade(3, "Satisfactory", "#F59E0B"),
    AUStarGrade(2, "Needs Improvement", "#F97316"),
    AUStarGrade(1, "Action Required", "#EF4444"),
)


def get_dm_grade(score: float) -> DMGrade:
    """Dubai Municipality grade for a percentage score."""
    for grade in DM_GRADES:
        if score >= grade.min_score:
            return grade
    return DM_GRADES[-1]


def get_adafsa_stars(score: float) -> AdafsaStar:
    """Zadna star band for a percentage score."""
    for band in ADAFSA_STARS:
        if score >= band.min_score:
            return band
    return ADAFSA_STARS[-1]


def get_au_star_grade(stars: int, state: str | None = None) -> AUStarGrade:
    """Star grade label; Victoria uses its Scores on Doors wording."""
    scale = VIC_SCORES_ON_DOORS if state == "vic" else AU_STAR_GRADES
    for grade in scale:
        if stars >= grade.stars:
            return grade
    return scale[-1]
