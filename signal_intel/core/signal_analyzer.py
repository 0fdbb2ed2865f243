"""Signal Analyzer - turns each raw signal into a what / so-what / now-what assessment"""

from typing import List, Optional, Sequence
from datetime import datetime, timezone

from loguru import logger

from .signal import Signal, Organization, SignalAnalysis, Magnitude, Velocity
from .scoring import (
    score_credibility,
    score_relevance,
    classify_magnitude,
    classify_velocity,
)


UNKNOWN_EVENT = "Unknown event occurred"

MEANING_COMPETITOR = "Competitive landscape shift requiring strategic response"
MEANING_REGULATORY = "Compliance implications requiring immediate review"
MEANING_GENERAL = "Market signal indicating potential opportunity or threat"

ACTION_WAR_ROOM = "Immediate crisis response required - activate war room"
ACTION_RAPID = "Rapid response needed - prepare statement within 2 hours"
ACTION_STRATEGIC = "Strategic response required within 24 hours"
ACTION_MONITOR = "Monitor and prepare contingency messaging"
ACTION_TRACK = "Track for pattern development"


def extract_fact(signal: Signal) -> str:
    return signal.title or UNKNOWN_EVENT


def extract_meaning(signal: Signal) -> str:
    """What the signal means for the organization"""
    if signal.is_competitor:
        return MEANING_COMPETITOR
    if signal.type == "regulatory":
        return MEANING_REGULATORY
    return MEANING_GENERAL


def recommend_action(magnitude: Magnitude, velocity: Velocity) -> str:
    """Action recommendation from severity and spread"""
    if magnitude == Magnitude.CRITICAL and velocity == Velocity.VIRAL:
        return ACTION_WAR_ROOM
    if magnitude == Magnitude.HIGH and velocity in (Velocity.FAST, Velocity.VIRAL):
        return ACTION_RAPID
    if magnitude == Magnitude.HIGH:
        return ACTION_STRATEGIC
    if magnitude == Magnitude.MEDIUM:
        return ACTION_MONITOR
    return ACTION_TRACK


def analyze_signal(
    signal: Signal,
    organization: Organization,
    now: Optional[datetime] = None,
) -> SignalAnalysis:
    """
    Run all scorers against one signal.

    Args:
        signal: Signal to analyze
        organization: Monitored organization
        now: Reference time for velocity

    Returns:
        SignalAnalysis for the signal
    """
    magnitude = classify_magnitude(signal)
    velocity = classify_velocity(signal, now)

    analysis = SignalAnalysis(
        signal=signal.title,
        what_happened=extract_fact(signal),
        so_what=extract_meaning(signal),
        now_what=recommend_action(magnitude, velocity),
        magnitude=magnitude,
        velocity=velocity,
        credibility=score_credibility(signal.source),
        relevance=score_relevance(signal, organization),
    )

    logger.debug(
        f"Analyzed '{signal.title[:60]}': {magnitude.value}/{velocity.value} "
        f"(credibility={analysis.credibility}, relevance={analysis.relevance})"
    )

    return analysis


def analyze_batch(
    signals: Sequence[Signal],
    organization: Organization,
    now: Optional[datetime] = None,
) -> List[SignalAnalysis]:
    """One analysis per signal, in input order"""
    now = now or datetime.now(timezone.utc)
    return [analyze_signal(signal, organization, now) for signal in signals]
