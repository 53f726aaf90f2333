"""Scoring engine: star ratings, percentage grades and letter grades."""

from eatsafe.scoring.engine import ScoreResult, compute_score, score_assessment, select_tier
from eatsafe.scoring.grades import (
    ADAFSA_STARS,
    AU_STAR_GRADES,
    DM_GRADES,
    VIC_SCORES_ON_DOORS,
    AdafsaStar,
    AUStarGrade,
    DMGrade,
    get_adafsa_stars,
    get_au_star_grade,
    get_dm_grade,
)
from eatsafe.scoring.percentage import (
    critical_cap,
    letter_grade_score,
    percentage_score,
    round_half_up,
)
from eatsafe.scoring.star import (
    BCC_STAR_RULES,
    VIC_STAR_RULES,
    StarRule,
    adafsa_star_rating,
    bcc_star_rating,
    cascade_stars,
    vic_star_rating,
)

__all__ = [
    # Engine
    "ScoreResult",
    "compute_score",
    "score_assessment",
    "select_tier",
    # Star
    "BCC_STAR_RULES",
    "VIC_STAR_RULES",
    "StarRule",
    "adafsa_star_rating",
    "bcc_star_rating",
    "cascade_stars",
    "vic_star_rating",
    # Percentage
    "critical_cap",
    "letter_grade_score",
    "percentage_score",
    "round_half_up",
    # Published grades
    "ADAFSA_STARS",
    "AU_STAR_GRADES",
    "DM_GRADES",
    "VIC_SCORES_ON_DOORS",
    "AdafsaStar",
    "AUStarGrade",
    "DMGrade",
    "get_adafsa_stars",
    "get_au_star_grade",
    "get_dm_grade",
]
