"""Scoring engine tests."""

import pytest

from eatsafe.frameworks.au_states import TAS_DOH_CONFIG, VIC_DH_CONFIG
from eatsafe.frameworks.bcc import BCC_CONFIG
from eatsafe.frameworks.fda import FDA_CONFIG
from eatsafe.frameworks.fsa import FSA_CONFIG
from eatsafe.frameworks.fssai import FSSAI_CONFIG
from eatsafe.frameworks.gcc import ADAFSA_CONFIG, DM_CONFIG, SM_SHARJAH_CONFIG
from eatsafe.frameworks.sfa import SFA_CONFIG
from eatsafe.models import Answer, AnswerStatus, ScoringModel, Severity, SeverityCounts
from eatsafe.scoring import (
    adafsa_star_rating,
    bcc_star_rating,
    critical_cap,
    get_adafsa_stars,
    get_au_star_grade,
    get_dm_grade,
    letter_grade_score,
    percentage_score,
    round_half_up,
    score_assessment,
    select_tier,
    vic_star_rating,
)
from eatsafe.tracing import get_tracer


def make_answers(compliant=0, minor=0, major=0, critical=0, na=0):
    """Build an answer map with the given tallies."""
    answers = {}
    n = 0

    def add(value):
        nonlocal n
        n += 1
        answers[f"Q{n}"] = value

    for _ in range(compliant):
        add({"status": "compliant"})
    for severity, count in (("minor", minor), ("major", major), ("critical", critical)):
        for _ in range(count):
            add({"status": "non_compliant", "severity": severity})
    for _ in range(na):
        add({"status": "not_applicable"})
    return answers


class TestAnswers:
    """Answer coercion and counting."""

    def test_missing_severity_counts_as_minor(self):
        """Test a non-compliance without severity is minor."""
        counts = SeverityCounts.from_answers({"A1": {"status": "non_compliant"}})
        assert counts.minor == 1
        assert counts.total == 1

    def test_not_applicable_excluded(self):
        """Test N/A answers are left out of the totals."""
        counts = SeverityCounts.from_answers(make_answers(compliant=3, na=4))
        assert counts.total == 3
        assert counts.compliant == 3

    def test_legacy_booleans(self):
        """Test boolean answers map to compliant/non-compliant."""
        counts = SeverityCounts.from_answers({"A1": True, "A2": False})
        assert counts.compliant == 1
        assert counts.minor == 1

    def test_unrecognised_answers_are_not_applicable(self):
        """Test garbage answers do not count."""
        assert Answer.coerce("yes").status == AnswerStatus.NOT_APPLICABLE
        assert Answer.coerce({"status": "maybe"}).status == AnswerStatus.NOT_APPLICABLE

    def test_answer_objects_pass_through(self):
        """Test Answer instances are used as-is."""
        answer = Answer(AnswerStatus.NON_COMPLIANT, Severity.MAJOR)
        counts = SeverityCounts.from_answers({"A1": answer})
        assert counts.major == 1


class TestStarRatings:
    """Cascading and percentage star ratings."""

    @pytest.mark.parametrize(
        "tallies,expected",
        [
            ({"compliant": 40}, 5),
            ({"compliant": 39, "minor": 1}, 4),
            ({"compliant": 36, "minor": 4}, 3),
            ({"compliant": 34, "minor": 6}, 2),
            ({"compliant": 39, "major": 1}, 2),
            ({"compliant": 39, "critical": 1}, 2),
            ({"compliant": 37, "major": 3}, 0),
            ({"compliant": 38, "critical": 2}, 0),
        ],
    )
    def test_bcc_cascade(self, tallies, expected):
        """Test the Eat Safe cascade bands."""
        assert bcc_star_rating(make_answers(**tallies)) == expected

    def test_vic_cascade_floor_is_one_star(self):
        """Test Scores on Doors never drops below one star."""
        assert vic_star_rating(make_answers(compliant=10, critical=2)) == 1
        assert vic_star_rating(make_answers(compliant=10, major=5)) == 1
        assert vic_star_rating(make_answers(compliant=10)) == 5
        assert vic_star_rating(make_answers(compliant=10, minor=4)) == 3

    def test_adafsa_no_answers(self):
        """Test an empty assessment gives no stars."""
        assert adafsa_star_rating({}) == 0

    def test_adafsa_two_criticals(self):
        """Test two criticals give one star."""
        assert adafsa_star_rating(make_answers(compliant=50, critical=2)) == 1

    def test_adafsa_single_critical_capped(self):
        """Test a single critical caps the rating at two stars."""
        assert adafsa_star_rating(make_answers(compliant=9, critical=1)) == 2

    def test_adafsa_weighted_bands(self):
        """Test the weighted percentage bands."""
        assert adafsa_star_rating(make_answers(compliant=10)) == 5
        # 20 items, penalty 4 -> 80%
        assert adafsa_star_rating(make_answers(compliant=18, major=1, minor=1)) == 4
        # 10 items, penalty 6 -> 40%
        assert adafsa_star_rating(make_answers(compliant=8, major=2)) == 1


class TestPercentage:
    """Severity-weighted percentage scoring."""

    def test_all_compliant(self):
        """Test a clean assessment scores 100."""
        assert percentage_score(make_answers(compliant=20)) == 100

    def test_weighted_penalty(self):
        """Test minors deduct one point and majors three."""
        # 20 items, 3 minors -> 17/20
        assert percentage_score(make_answers(compliant=17, minor=3)) == 85
        # 20 items, 1 major -> 17/20
        assert percentage_score(make_answers(compliant=19, major=1)) == 85

    def test_half_rounds_up(self):
        """Test halves round up rather than to even."""
        # 8 items, penalty 7 -> 1/8 = 12.5%
        assert percentage_score(make_answers(compliant=1, minor=7)) == 13
        assert round_half_up(82.5) == 83
        assert round_half_up(2.4) == 2

    def test_clamped_at_zero(self):
        """Test heavy penalties never go negative."""
        assert percentage_score(make_answers(major=2)) == 0

    def test_critical_caps_at_worst_tier(self):
        """Test any critical keeps the score in the worst tier."""
        answers = make_answers(compliant=9, critical=1)
        assert percentage_score(answers, DM_CONFIG.scoring.tiers) == 54

    def test_critical_below_cap_keeps_compliant_share(self):
        """Test a low compliant share stays below the cap."""
        answers = make_answers(compliant=1, critical=3)
        assert percentage_score(answers, DM_CONFIG.scoring.tiers) == 25

    def test_empty_scores_zero(self):
        """Test no applicable answers scores 0."""
        assert percentage_score({}) == 0
        assert percentage_score(make_answers(na=5)) == 0

    @pytest.mark.parametrize(
        "config,cap",
        [
            (DM_CONFIG, 54),
            (SM_SHARJAH_CONFIG, 59),
            (TAS_DOH_CONFIG, 59),
            (FDA_CONFIG, 69),
            (FSSAI_CONFIG, 20),
        ],
    )
    def test_critical_cap_per_regime(self, config, cap):
        """Test the cap is the top of each regime's worst tier."""
        assert critical_cap(config.scoring.tiers) == cap

    def test_critical_cap_defaults(self):
        """Test the cap without tiers is Dubai's."""
        assert critical_cap(None) == 54


class TestLetterGrade:
    """Unweighted letter-grade scoring."""

    def test_fsa_five_point_scale(self):
        """Test FSA scores on a 0-5 scale, floored."""
        assert letter_grade_score(make_answers(compliant=9, major=1), FSA_CONFIG.scoring.grade_scale) == 4

    def test_severity_is_ignored(self):
        """Test severity does not change letter-grade scores."""
        a = letter_grade_score(make_answers(compliant=3, minor=1))
        b = letter_grade_score(make_answers(compliant=3, critical=1))
        assert a == b == 75


class TestEngine:
    """score_assessment dispatch and tier selection."""

    def test_select_tier(self):
        """Test the first tier the score meets wins."""
        tiers = DM_CONFIG.scoring.tiers
        assert select_tier(tiers, 85).label.startswith("Grade A")
        assert select_tier(tiers, 84).label.startswith("Grade B")
        assert select_tier(tiers, 0).label.startswith("Grade D")

    def test_select_tier_empty_raises(self):
        """Test an empty tier list is an error."""
        with pytest.raises(ValueError):
            select_tier((), 50)

    def test_star_model(self):
        """Test the baseline scores with the Eat Safe cascade."""
        result = score_assessment(BCC_CONFIG, make_answers(compliant=39, minor=1))
        assert result.model == ScoringModel.STAR_RATING
        assert result.score == 4
        assert result.label == "Very Good Performer"

    def test_vic_uses_scores_on_doors(self):
        """Test Victoria swaps in its own star function."""
        result = score_assessment(VIC_DH_CONFIG, make_answers(compliant=10, critical=2))
        assert result.score == 1
        assert result.label == "Action Required"

    def test_adafsa_star_model(self):
        """Test ADAFSA uses Zadna stars."""
        result = score_assessment(ADAFSA_CONFIG, make_answers(compliant=10))
        assert result.score == 5
        assert result.label == "Outstanding"

    def test_percentage_model(self):
        """Test Dubai scores a percentage and picks a grade tier."""
        result = score_assessment(DM_CONFIG, make_answers(compliant=17, minor=3))
        assert result.score == 85
        assert result.label == "Grade A — Excellent"
        assert result.counts.minor == 3

    def test_percentage_critical_lands_in_worst_tier(self):
        """Test a critical on Sharjah forces Non-Compliant."""
        result = score_assessment(SM_SHARJAH_CONFIG, make_answers(compliant=49, critical=1))
        assert result.score == 59
        assert result.label == "Non-Compliant"

    def test_letter_grade_model(self):
        """Test Singapore scores unweighted 0-100."""
        result = score_assessment(SFA_CONFIG, make_answers(compliant=3, major=1))
        assert result.model == ScoringModel.LETTER_GRADE
        assert result.score == 75

    def test_empty_answers(self):
        """Test an empty assessment gets the lowest tier."""
        result = score_assessment(DM_CONFIG, {})
        assert result.score == 0
        assert result.tier == DM_CONFIG.scoring.tiers[-1]

        result = score_assessment(BCC_CONFIG, None)
        assert result.tier == BCC_CONFIG.scoring.tiers[-1]

    def test_unmatched_answers_are_traced(self):
        """Test unknown codes and disallowed severities leave a trace event."""
        tracer = get_tracer()
        tracer.clear()
        answers = {
            "A1": {"status": "non_compliant", "severity": "critical"},
            "A2": {"status": "compliant"},
            "ZZ9": {"status": "compliant"},
        }
        result = score_assessment(BCC_CONFIG, answers)

        # Still scored as given
        assert result.counts.total == 3
        events = [e for e in tracer.get_events("scoring") if e["event_type"] == "unmatched"]
        assert len(events) == 1
        assert events[0]["data"] == {"unknown_codes": ["ZZ9"], "unexpected_severity": ["A1"]}

    def test_matched_answers_not_flagged(self):
        """Test a clean answer set logs no unmatched event."""
        tracer = get_tracer()
        tracer.clear()
        score_assessment(BCC_CONFIG, {"A1": {"status": "non_compliant", "severity": "minor"}})
        assert not [e for e in tracer.get_events("scoring") if e["event_type"] == "unmatched"]

    def test_to_dict(self):
        """Test the result serialises to plain values."""
        data = score_assessment(FSA_CONFIG, make_answers(compliant=10)).to_dict()
        assert data["framework_id"] == "fsa"
        assert data["model"] == "letter_grade"
        assert data["score"] == 5
        assert data["counts"]["total"] == 10


class TestGradeTables:
    """Published grade lookups."""

    def test_dm_grades(self):
        """Test Dubai Municipality letter grades."""
        assert get_dm_grade(95).grade == "A"
        assert get_dm_grade(70).grade == "B"
        assert get_dm_grade(60).grade == "C"
        assert get_dm_grade(30).grade == "D"

    def test_adafsa_stars(self):
        """Test Zadna star bands."""
        assert get_adafsa_stars(95).stars == 5
        assert get_adafsa_stars(50).stars == 2
        assert get_adafsa_stars(10).stars == 1

    def test_au_star_grades(self):
        """Test Eat Safe and Scores on Doors labels."""
        assert get_au_star_grade(5).label == "Excellent Performer"
        assert get_au_star_grade(3, "vic").label == "Satisfactory"
        assert get_au_star_grade(1).label == "Non-Compliant"
