"""Stakeholder Impact Assessor - projects the batch onto six stakeholder groups"""

from typing import List, Sequence

from pydantic import BaseModel, Field
from loguru import logger

from ..core.signal import SignalAnalysis, ConcernLevel
from .pattern_recognizer import Pattern, PatternType, count_patterns


class StakeholderImpact(BaseModel):
    """Projected impact on one stakeholder group"""

    perception_shift: str
    concern_level: ConcernLevel
    likely_questions: List[str] = Field(default_factory=list)
    messaging_needs: List[str] = Field(default_factory=list)
    proof_points_required: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


class StakeholderMatrix(BaseModel):
    """Impact projection for every stakeholder group"""

    customers: StakeholderImpact
    investors: StakeholderImpact
    media: StakeholderImpact
    employees: StakeholderImpact
    partners: StakeholderImpact
    regulators: StakeholderImpact

    class Config:
        frozen = True

    def groups(self) -> List[StakeholderImpact]:
        return [
            self.customers,
            self.investors,
            self.media,
            self.employees,
            self.partners,
            self.regulators,
        ]

    def count_at(self, level: ConcernLevel) -> int:
        """Number of groups at exactly the given concern level"""
        return sum(1 for group in self.groups() if group.concern_level == level)


def _count_high_impact(analyses: Sequence[SignalAnalysis]) -> int:
    return sum(1 for a in analyses if a.is_high_impact)


def assess_customers(analyses: Sequence[SignalAnalysis], patterns: Sequence[Pattern]) -> StakeholderImpact:
    high_impact = _count_high_impact(analyses)

    if high_impact > 3:
        concern = ConcernLevel.HIGH
    elif high_impact > 1:
        concern = ConcernLevel.MEDIUM
    else:
        concern = ConcernLevel.LOW

    return StakeholderImpact(
        perception_shift="Questioning our market position" if high_impact > 2 else "Stable but watching",
        concern_level=concern,
        likely_questions=[
            "How does this affect our product roadmap?",
            "Are you still the right choice for us?",
            "What are you doing to stay competitive?",
        ],
        messaging_needs=[
            "Reassurance about continued innovation",
            "Proof of customer success",
            "Clear differentiation from competitors",
        ],
        proof_points_required=[
            "Recent customer wins",
            "Product roadmap highlights",
            "ROI metrics",
        ],
    )


def assess_investors(analyses: Sequence[SignalAnalysis], patterns: Sequence[Pattern]) -> StakeholderImpact:
    competitive_threats = count_patterns(patterns, PatternType.COMPETITIVE_ACCELERATION)

    return StakeholderImpact(
        perception_shift=(
            "Concerned about competitive position" if competitive_threats > 0
            else "Monitoring market dynamics"
        ),
        concern_level=ConcernLevel.HIGH if competitive_threats > 1 else ConcernLevel.MEDIUM,
        likely_questions=[
            "What's your competitive moat?",
            "How are you responding to market changes?",
            "What investments are you making?",
        ],
        messaging_needs=[
            "Clear strategic vision",
            "Competitive advantages",
            "Growth trajectory",
        ],
        proof_points_required=[
            "Market share data",
            "Financial performance",
            "Strategic partnerships",
        ],
    )


def assess_media(analyses: Sequence[SignalAnalysis], patterns: Sequence[Pattern]) -> StakeholderImpact:
    narrative_shifts = count_patterns(patterns, PatternType.NARRATIVE_SHIFT)

    return StakeholderImpact(
        perception_shift=(
            "Looking for fresh angles" if narrative_shifts > 0
            else "Following established narratives"
        ),
        concern_level=ConcernLevel.MEDIUM,
        likely_questions=[
            "What's your take on [trending topic]?",
            "How are you different from competitors?",
            "What's next for your industry?",
        ],
        messaging_needs=[
            "Thought leadership positioning",
            "Unique perspective on trends",
            "Executive availability for comment",
        ],
        proof_points_required=[
            "Data and research",
            "Customer stories",
            "Expert commentary",
        ],
    )


def assess_employees(analyses: Sequence[SignalAnalysis], patterns: Sequence[Pattern]) -> StakeholderImpact:
    competitive_threats = sum(1 for a in analyses if a.mentions("competitor"))

    return StakeholderImpact(
        perception_shift=(
            "Worried about company direction" if competitive_threats > 2
            else "Confident in leadership"
        ),
        concern_level=ConcernLevel.HIGH if competitive_threats > 3 else ConcernLevel.LOW,
        likely_questions=[
            "How are we responding to competition?",
            "Is my job secure?",
            "What's our strategy?",
        ],
        messaging_needs=[
            "Clear internal communication",
            "Leadership visibility",
            "Rally the troops messaging",
        ],
        proof_points_required=[
            "Strategic plan",
            "Investment in employees",
            "Company strengths",
        ],
    )


# Partners and regulators are fixed defaults; no batch-driven rules exist for them yet.

def assess_partners(analyses: Sequence[SignalAnalysis], patterns: Sequence[Pattern]) -> StakeholderImpact:
    return StakeholderImpact(
        perception_shift="Evaluating partnership value",
        concern_level=ConcernLevel.LOW,
        likely_questions=[
            "How does this affect our partnership?",
            "Are you still a strategic partner?",
        ],
        messaging_needs=[
            "Partnership value prop",
            "Continued commitment",
        ],
        proof_points_required=[
            "Partnership success metrics",
            "Joint roadmap",
        ],
    )


def assess_regulators(analyses: Sequence[SignalAnalysis], patterns: Sequence[Pattern]) -> StakeholderImpact:
    return StakeholderImpact(
        perception_shift="Monitoring for compliance",
        concern_level=ConcernLevel.LOW,
        likely_questions=[
            "Are you compliant with new regulations?",
            "What measures are you taking?",
        ],
        messaging_needs=[
            "Compliance commitment",
            "Proactive measures",
        ],
        proof_points_required=[
            "Compliance certifications",
            "Audit results",
        ],
    )


def assess_stakeholder_impact(
    analyses: Sequence[SignalAnalysis],
    patterns: Sequence[Pattern],
) -> StakeholderMatrix:
    """
    Derive the stakeholder matrix.

    Args:
        analyses: Per-signal analyses
        patterns: Patterns recognized across the batch

    Returns:
        StakeholderMatrix with one StakeholderImpact per group
    """
    matrix = StakeholderMatrix(
        customers=assess_customers(analyses, patterns),
        investors=assess_investors(analyses, patterns),
        media=assess_media(analyses, patterns),
        employees=assess_employees(analyses, patterns),
        partners=assess_partners(analyses, patterns),
        regulators=assess_regulators(analyses, patterns),
    )

    logger.info(f"Stakeholder matrix: {matrix.count_at(ConcernLevel.HIGH)} groups at high concern")

    return matrix
