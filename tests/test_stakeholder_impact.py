import pytest

from signal_intel.core.signal import Magnitude, ConcernLevel
from signal_intel.synthesis.pattern_recognizer import PatternType
from signal_intel.synthesis.stakeholder_impact import (
    assess_stakeholder_impact,
    assess_customers,
    assess_investors,
    assess_media,
    assess_employees,
)


@pytest.mark.parametrize("high_impact, concern, perception", [
    (0, ConcernLevel.LOW, "Stable but watching"),
    (2, ConcernLevel.MEDIUM, "Stable but watching"),
    (3, ConcernLevel.MEDIUM, "Questioning our market position"),
    (4, ConcernLevel.HIGH, "Questioning our market position"),
])
def test_customer_concern_scales(make_analysis, high_impact, concern, perception):
    analyses = [make_analysis(magnitude=Magnitude.CRITICAL) for _ in range(high_impact)]
    analyses.append(make_analysis(magnitude=Magnitude.MEDIUM))

    impact = assess_customers(analyses, [])

    assert impact.concern_level == concern
    assert impact.perception_shift == perception


def test_investor_concern(make_pattern):
    one = [make_pattern(PatternType.COMPETITIVE_ACCELERATION)]
    two = one * 2

    assert assess_investors([], []).perception_shift == "Monitoring market dynamics"
    assert assess_investors([], []).concern_level == ConcernLevel.MEDIUM
    assert assess_investors([], one).perception_shift == "Concerned about competitive position"
    assert assess_investors([], one).concern_level == ConcernLevel.MEDIUM
    assert assess_investors([], two).concern_level == ConcernLevel.HIGH


def test_media_follows_narrative_shifts(make_pattern):
    shifted = assess_media([], [make_pattern(PatternType.NARRATIVE_SHIFT)])
    steady = assess_media([], [make_pattern(PatternType.CASCADE_RISK)])

    assert shifted.perception_shift == "Looking for fresh angles"
    assert steady.perception_shift == "Following established narratives"
    assert shifted.concern_level == steady.concern_level == ConcernLevel.MEDIUM


def test_employee_concern_counts_competitor_mentions(make_analysis):
    three = [make_analysis(title=f"Competitor {i} poaches engineers") for i in range(3)]
    four = three + [make_analysis(title="Another competitor raises wages")]

    assert assess_employees(three, []).concern_level == ConcernLevel.LOW
    assert assess_employees(three, []).perception_shift == "Worried about company direction"
    assert assess_employees(four, []).concern_level == ConcernLevel.HIGH
    assert assess_employees([], []).perception_shift == "Confident in leadership"


def test_partners_and_regulators_are_fixed(make_analysis, make_pattern):
    busy = assess_stakeholder_impact(
        [make_analysis(magnitude=Magnitude.CRITICAL) for _ in range(5)],
        [make_pattern(PatternType.COMPETITIVE_ACCELERATION)] * 2,
    )
    quiet = assess_stakeholder_impact([], [])

    assert busy.partners == quiet.partners
    assert busy.regulators == quiet.regulators
    assert quiet.partners.concern_level == ConcernLevel.LOW
    assert quiet.regulators.concern_level == ConcernLevel.LOW


def test_matrix_counts_high_concern(make_analysis, make_pattern):
    analyses = [
        make_analysis(title=f"Competitor {i} wins deal", magnitude=Magnitude.HIGH)
        for i in range(4)
    ]
    patterns = [make_pattern(PatternType.COMPETITIVE_ACCELERATION)] * 2

    matrix = assess_stakeholder_impact(analyses, patterns)

    assert matrix.customers.concern_level == ConcernLevel.HIGH
    assert matrix.investors.concern_level == ConcernLevel.HIGH
    assert matrix.employees.concern_level == ConcernLevel.HIGH
    assert matrix.count_at(ConcernLevel.HIGH) == 3
    assert len(matrix.groups()) == 6
