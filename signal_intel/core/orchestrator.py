"""
Analysis Orchestration Engine

Composes the analysis stages into a single pure pipeline:

    signals ─► analyses ─► patterns ─► stakeholders ─► implications ─┬─► response strategy
                                                                     └─► elite insights

Response strategy and elite insights both read the implications but not each
other, so either can be computed (or tested) on its own.
"""

from typing import Any, Dict, List, Optional, Sequence, Union
from datetime import datetime, timezone

from loguru import logger
from pydantic import BaseModel, ValidationError

from .signal import Signal, Organization, SignalAnalysis, as_utc
from .signal_analyzer import analyze_batch
from ..synthesis.pattern_recognizer import Pattern, recognize_patterns
from ..synthesis.stakeholder_impact import StakeholderMatrix, assess_stakeholder_impact
from ..synthesis.strategic_implications import StrategicImplications, derive_strategic_implications
from ..synthesis.response_strategy import ResponseStrategy, plan_response
from ..synthesis.elite_insights import EliteInsights, generate_elite_insights


SignalInput = Union[Signal, Dict[str, Any]]
OrganizationInput = Union[Organization, Dict[str, Any]]


class AnalysisResult(BaseModel):
    """Full intelligence report for one batch"""

    signal_analysis: List[SignalAnalysis]
    pattern_recognition: List[Pattern]
    stakeholder_impact: StakeholderMatrix
    strategic_implications: StrategicImplications
    response_strategy: ResponseStrategy
    elite_insights: EliteInsights

    class Config:
        frozen = True

    def __str__(self):
        reputation = self.strategic_implications.reputation
        position = self.strategic_implications.competitive_position
        immediate = self.response_strategy.immediate_24h

        lines = [
            "=" * 80,
            "SIGNAL INTELLIGENCE REPORT",
            "=" * 80,
            f"Reputation: {reputation.current_state} | trajectory {reputation.trajectory.value} "
            f"| intervention {reputation.intervention_required.value}",
            f"Competitive position: {position.relative_strength.value} ({position.momentum.value})",
            f"Signals analyzed: {len(self.signal_analysis)} | Patterns: {len(self.pattern_recognition)}",
            "",
        ]

        if self.pattern_recognition:
            lines.append("Patterns:")
            for pattern in self.pattern_recognition:
                lines.append(f"  - [{pattern.confidence}] {pattern.insight}")
            lines.append("")

        lines.append(f"Next 24h ({immediate.priority.value} priority):")
        for action in immediate.actions:
            lines.append(f"  - {action}")

        lines.append("=" * 80)
        return "\n".join(lines)


class SignalAnalysisOrchestrator:
    """
    Runs the full analysis pipeline for one organization.

    Usage:
        orchestrator = SignalAnalysisOrchestrator(organization)
        result = orchestrator.run(signals)
    """

    def __init__(self, organization: OrganizationInput):
        self.organization = self._validate_organization(organization)

    @staticmethod
    def _validate_organization(organization: OrganizationInput) -> Organization:
        if isinstance(organization, Organization):
            return organization

        try:
            return Organization.model_validate(organization)
        except ValidationError as e:
            logger.error(f"Invalid organization: {e}")
            raise

    @staticmethod
    def _coerce_signals(signals: Optional[Sequence[SignalInput]]) -> List[Signal]:
        return [
            s if isinstance(s, Signal) else Signal.model_validate(s)
            for s in (signals or [])
        ]

    def run(
        self,
        signals: Optional[Sequence[SignalInput]],
        now: Optional[datetime] = None,
    ) -> AnalysisResult:
        """
        Analyze a batch of signals.

        Args:
            signals: Signals (models or plain dicts); may be empty
            now: Reference time for recency rules. Defaults to the current UTC
                 time; pass a fixed value for reproducible reports.

        Returns:
            AnalysisResult aggregating every stage
        """
        batch = self._coerce_signals(signals)
        reference = as_utc(now) if now else datetime.now(timezone.utc)

        if not batch:
            logger.warning(f"No signals to analyze for {self.organization.name}")

        logger.info(f"Analyzing {len(batch)} signals for {self.organization.name}")

        analyses = analyze_batch(batch, self.organization, reference)
        patterns = recognize_patterns(batch, analyses)
        stakeholders = assess_stakeholder_impact(analyses, patterns)
        implications = derive_strategic_implications(analyses, patterns, stakeholders)

        # Independent branches
        response = plan_response(implications)
        insights = generate_elite_insights(batch, patterns, implications, reference)

        logger.info(
            f"✓ Analysis complete for {self.organization.name}: "
            f"{len(analyses)} signals, {len(patterns)} patterns, "
            f"trajectory {implications.reputation.trajectory.value}"
        )

        return AnalysisResult(
            signal_analysis=analyses,
            pattern_recognition=patterns,
            stakeholder_impact=stakeholders,
            strategic_implications=implications,
            response_strategy=response,
            elite_insights=insights,
        )


# Convenience function
def analyze_signals(
    signals: Optional[Sequence[SignalInput]],
    organization: OrganizationInput,
    now: Optional[datetime] = None,
) -> AnalysisResult:
    """
    Analyze a signal batch for an organization.

    Args:
        signals: Signals (models or plain dicts)
        organization: Organization model or dict with at least a name
        now: Optional fixed reference time

    Returns:
        AnalysisResult

    Raises:
        pydantic.ValidationError: If the organization has no name
    """
    return SignalAnalysisOrchestrator(organization).run(signals, now=now)
