"""
Strategic Implications Deriver

Rolls analyses, patterns and the stakeholder matrix up into three views:
1. Reputation - state, trajectory and how much intervention is needed
2. Competitive position - relative strength, momentum, advantages and flanks
3. Market narrative - who controls which part of the story
"""

from typing import List, Sequence
from enum import Enum

from pydantic import BaseModel, Field
from loguru import logger

from ..core.signal import SignalAnalysis, Magnitude, Velocity, ConcernLevel
from .pattern_recognizer import Pattern, PatternType, count_patterns, has_pattern
from .stakeholder_impact import StakeholderMatrix


class Trajectory(str, Enum):
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"
    CRISIS = "crisis"


class Intervention(str, Enum):
    NONE = "none"
    MONITOR = "monitor"
    RESPOND = "respond"
    URGENT = "urgent"


class RelativeStrength(str, Enum):
    LEADER = "leader"
    CHALLENGER = "challenger"
    FOLLOWER = "follower"
    AT_RISK = "at_risk"


class Momentum(str, Enum):
    GAINING = "gaining"
    MAINTAINING = "maintaining"
    LOSING = "losing"


class ReputationAssessment(BaseModel):
    current_state: str
    trajectory: Trajectory
    intervention_required: Intervention
    key_vulnerabilities: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


class CompetitivePosition(BaseModel):
    relative_strength: RelativeStrength
    momentum: Momentum
    defendable_advantages: List[str] = Field(default_factory=list)
    exposed_flanks: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


class MarketNarrative(BaseModel):
    we_control: List[str] = Field(default_factory=list)
    they_control: List[str] = Field(default_factory=list)
    contested_ground: List[str] = Field(default_factory=list)
    narrative_opportunities: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


class StrategicImplications(BaseModel):
    reputation: ReputationAssessment
    competitive_position: CompetitivePosition
    market_narrative: MarketNarrative

    class Config:
        frozen = True


STATE_UNDER_PRESSURE = "Under pressure from multiple stakeholders"
STATE_LOCALIZED = "Localized reputation challenges"
STATE_POSITIVE = "Generally positive reputation"

HIGH_RELEVANCE_THRESHOLD = 90
THREAT_RELEVANCE_THRESHOLD = 80
MAX_COMPETITOR_NARRATIVES = 3

DEFENDABLE_ADVANTAGES = [
    "Established customer base",
    "Strong brand recognition",
    "Technical expertise",
]

CONTROLLED_NARRATIVES = [
    "Customer success stories",
    "Company culture",
    "Leadership vision",
]

CONTESTED_NARRATIVES = [
    "Market leadership",
    "Innovation pace",
    "Customer satisfaction",
]


def _count_magnitude(analyses: Sequence[SignalAnalysis], magnitude: Magnitude) -> int:
    return sum(1 for a in analyses if a.magnitude == magnitude)


# ============================================================================
# REPUTATION
# ============================================================================

def assess_reputation_state(stakeholders: StakeholderMatrix) -> str:
    high_concern = stakeholders.count_at(ConcernLevel.HIGH)

    if high_concern >= 3:
        return STATE_UNDER_PRESSURE
    if high_concern >= 1:
        return STATE_LOCALIZED
    return STATE_POSITIVE


def assess_trajectory(analyses: Sequence[SignalAnalysis], patterns: Sequence[Pattern]) -> Trajectory:
    if _count_magnitude(analyses, Magnitude.CRITICAL) > 0:
        return Trajectory.CRISIS

    high_velocity = sum(1 for a in analyses if a.velocity in (Velocity.FAST, Velocity.VIRAL))
    if high_velocity > 3:
        return Trajectory.DECLINING

    if count_patterns(patterns, PatternType.CASCADE_RISK) > 2:
        return Trajectory.DECLINING

    return Trajectory.STABLE


def assess_intervention(analyses: Sequence[SignalAnalysis]) -> Intervention:
    if _count_magnitude(analyses, Magnitude.CRITICAL) > 0:
        return Intervention.URGENT

    high_count = _count_magnitude(analyses, Magnitude.HIGH)
    if high_count > 2:
        return Intervention.RESPOND
    if high_count > 0:
        return Intervention.MONITOR
    return Intervention.NONE


def identify_vulnerabilities(analyses: Sequence[SignalAnalysis], patterns: Sequence[Pattern]) -> List[str]:
    vulnerabilities = []

    if has_pattern(patterns, PatternType.COMPETITIVE_ACCELERATION):
        vulnerabilities.append("Falling behind competitive innovation cycle")

    if has_pattern(patterns, PatternType.NARRATIVE_SHIFT):
        vulnerabilities.append("Not part of emerging industry conversation")

    if any(a.relevance > THREAT_RELEVANCE_THRESHOLD and a.magnitude == Magnitude.HIGH for a in analyses):
        vulnerabilities.append("Direct competitive threat to core business")

    return vulnerabilities


# ============================================================================
# COMPETITIVE POSITION
# ============================================================================

def assess_relative_strength(analyses: Sequence[SignalAnalysis]) -> RelativeStrength:
    """
    Compare how often competitors are in the news against how often we are.

    "Ours" are analyses with relevance above 90; "theirs" are analyses whose
    title mentions a competitor.
    """
    competitor_mentions = sum(1 for a in analyses if a.mentions("competitor"))
    our_mentions = sum(1 for a in analyses if a.relevance > HIGH_RELEVANCE_THRESHOLD)

    if our_mentions > competitor_mentions * 2:
        return RelativeStrength.LEADER
    if our_mentions > competitor_mentions:
        return RelativeStrength.CHALLENGER
    if competitor_mentions > our_mentions * 2:
        return RelativeStrength.AT_RISK
    return RelativeStrength.FOLLOWER


def assess_momentum(analyses: Sequence[SignalAnalysis]) -> Momentum:
    recent_high_impact = sum(
        1 for a in analyses
        if a.magnitude == Magnitude.HIGH and a.velocity == Velocity.FAST
    )

    if recent_high_impact > 3:
        return Momentum.LOSING
    if recent_high_impact > 1:
        return Momentum.MAINTAINING
    return Momentum.GAINING


def identify_exposed_flanks(analyses: Sequence[SignalAnalysis], patterns: Sequence[Pattern]) -> List[str]:
    flanks = []

    if has_pattern(patterns, PatternType.COMPETITIVE_ACCELERATION):
        flanks.append("Innovation speed")

    if any(a.mentions("pricing") or a.mentions("cost") for a in analyses):
        flanks.append("Pricing competitiveness")

    return flanks


# ============================================================================
# MARKET NARRATIVE
# ============================================================================

def identify_competitor_narratives(analyses: Sequence[SignalAnalysis]) -> List[str]:
    titles = [a.signal for a in analyses if a.mentions("competitor")]
    return titles[:MAX_COMPETITOR_NARRATIVES]


def identify_narrative_opportunities(patterns: Sequence[Pattern]) -> List[str]:
    return [
        f"Lead conversation on: {p.insight}"
        for p in patterns
        if p.type == PatternType.NARRATIVE_SHIFT.value
    ]


def derive_strategic_implications(
    analyses: Sequence[SignalAnalysis],
    patterns: Sequence[Pattern],
    stakeholders: StakeholderMatrix,
) -> StrategicImplications:
    """
    Derive reputation, competitive position and narrative control.

    Args:
        analyses: Per-signal analyses
        patterns: Patterns recognized across the batch
        stakeholders: Stakeholder matrix for the batch

    Returns:
        StrategicImplications
    """
    implications = StrategicImplications(
        reputation=ReputationAssessment(
            current_state=assess_reputation_state(stakeholders),
            trajectory=assess_trajectory(analyses, patterns),
            intervention_required=assess_intervention(analyses),
            key_vulnerabilities=identify_vulnerabilities(analyses, patterns),
        ),
        competitive_position=CompetitivePosition(
            relative_strength=assess_relative_strength(analyses),
            momentum=assess_momentum(analyses),
            defendable_advantages=list(DEFENDABLE_ADVANTAGES),
            exposed_flanks=identify_exposed_flanks(analyses, patterns),
        ),
        market_narrative=MarketNarrative(
            we_control=list(CONTROLLED_NARRATIVES),
            they_control=identify_competitor_narratives(analyses),
            contested_ground=list(CONTESTED_NARRATIVES),
            narrative_opportunities=identify_narrative_opportunities(patterns),
        ),
    )

    logger.info(
        f"Reputation {implications.reputation.trajectory.value} "
        f"(intervention: {implications.reputation.intervention_required.value}), "
        f"position {implications.competitive_position.relative_strength.value}"
    )

    return implications
