from datetime import datetime, timezone

import pytest

from signal_intel.core.signal import (
    Signal,
    Organization,
    SignalAnalysis,
    Magnitude,
    Velocity,
)
from signal_intel.synthesis.pattern_recognizer import Pattern, PatternType
from signal_intel.synthesis.strategic_implications import (
    StrategicImplications,
    ReputationAssessment,
    CompetitivePosition,
    MarketNarrative,
    Trajectory,
    Intervention,
    RelativeStrength,
    Momentum,
    CONTESTED_NARRATIVES,
)


NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def org():
    return Organization(name="Acme", industry="logistics", keywords=["freight", "warehouse", "delivery"])


@pytest.fixture
def make_signal():
    def _make(title="Quiet week in the sector", **fields):
        return Signal(title=title, **fields)
    return _make


@pytest.fixture
def make_analysis():
    def _make(
        title="Quiet week in the sector",
        magnitude=Magnitude.LOW,
        velocity=Velocity.MODERATE,
        relevance=0,
        credibility=50,
    ):
        return SignalAnalysis(
            signal=title,
            what_happened=title,
            so_what="Market signal indicating potential opportunity or threat",
            now_what="Track for pattern development",
            magnitude=magnitude,
            velocity=velocity,
            credibility=credibility,
            relevance=relevance,
        )
    return _make


@pytest.fixture
def make_pattern():
    def _make(pattern_type=PatternType.CASCADE_RISK, insight="Something is happening", confidence=70):
        return Pattern(type=pattern_type.value, signals_connected=[], insight=insight, confidence=confidence)
    return _make


@pytest.fixture
def make_implications():
    def _make(
        intervention=Intervention.NONE,
        strength=RelativeStrength.FOLLOWER,
        opportunities=(),
        contested=tuple(CONTESTED_NARRATIVES),
    ):
        return StrategicImplications(
            reputation=ReputationAssessment(
                current_state="Generally positive reputation",
                trajectory=Trajectory.STABLE,
                intervention_required=intervention,
            ),
            competitive_position=CompetitivePosition(
                relative_strength=strength,
                momentum=Momentum.GAINING,
            ),
            market_narrative=MarketNarrative(
                contested_ground=list(contested),
                narrative_opportunities=list(opportunities),
            ),
        )
    return _make
