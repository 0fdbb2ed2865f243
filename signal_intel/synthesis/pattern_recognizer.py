"""
Pattern Recognizer

Scans a whole analyzed batch for cross-signal patterns:
1. Competitive acceleration - several competitors moving at once
2. Narrative shift - one trend keyword dominating coverage
3. Cascade risk - a severe signal likely to trigger follow-on coverage

Every detected pattern is emitted; nothing is merged or suppressed.
"""

from typing import List, Sequence, Tuple
from enum import Enum
import re

from pydantic import BaseModel, Field
from loguru import logger

from ..core.signal import Signal, SignalAnalysis, Velocity


class PatternType(str, Enum):
    COMPETITIVE_ACCELERATION = "competitive_acceleration"
    NARRATIVE_SHIFT = "narrative_shift"
    CASCADE_RISK = "cascade_risk"


class Pattern(BaseModel):
    """Cross-signal correlation detected across the batch"""

    type: str = Field(..., description="Pattern type (see PatternType)")
    signals_connected: List[str] = Field(default_factory=list, description="Titles of signals involved")
    insight: str
    confidence: int = Field(..., ge=0, le=100)
    implications: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


MIN_COMPETITOR_SIGNALS = 3
COMPETITIVE_ACCELERATION_CONFIDENCE = 85

MIN_NARRATIVE_MENTIONS = 3
NARRATIVE_BASE_CONFIDENCE = 70
NARRATIVE_CONFIDENCE_STEP = 5

CASCADE_VIRAL_CONFIDENCE = 90
CASCADE_CONFIDENCE = 70


def _keyword_pattern(keyword: str) -> re.Pattern:
    # Short acronyms must stand alone ("AI" but not "said"); words match anywhere
    escaped = re.escape(keyword.lower())
    if len(keyword) <= 3:
        return re.compile(rf"\b{escaped}\b")
    return re.compile(escaped)


TREND_KEYWORDS: Tuple[str, ...] = (
    "AI",
    "sustainability",
    "privacy",
    "security",
    "innovation",
    "transformation",
    "disruption",
    "recession",
    "growth",
    "layoffs",
)

_TREND_PATTERNS: Tuple[Tuple[str, re.Pattern], ...] = tuple(
    (keyword, _keyword_pattern(keyword)) for keyword in TREND_KEYWORDS
)

COMPETITIVE_ACCELERATION_IMPLICATIONS = [
    "Industry consolidation accelerating",
    "Window for differentiation closing",
    "Need to establish position now or risk being left behind",
]

NARRATIVE_SHIFT_IMPLICATIONS = [
    "Media looking for stories on this topic",
    "Opportunity to lead conversation",
    "Risk of being seen as behind if not addressing",
]

CASCADE_IMPLICATIONS = [
    "Media will seek industry response",
    "Competitors likely to comment",
    "Analysts will publish takes",
    "Social media amplification expected",
]


def find_competitive_acceleration(signals: Sequence[Signal]) -> List[Pattern]:
    competitor_signals = [s for s in signals if s.is_competitor]

    if len(competitor_signals) < MIN_COMPETITOR_SIGNALS:
        return []

    return [
        Pattern(
            type=PatternType.COMPETITIVE_ACCELERATION.value,
            signals_connected=[s.title for s in competitor_signals],
            insight="Multiple competitors moving simultaneously - market inflection point",
            confidence=COMPETITIVE_ACCELERATION_CONFIDENCE,
            implications=list(COMPETITIVE_ACCELERATION_IMPLICATIONS),
        )
    ]


def count_trending_topics(signals: Sequence[Signal]) -> List[Tuple[str, List[str]]]:
    """
    Titles of the signals mentioning each trend keyword.

    Returns:
        [(keyword, [title, ...]), ...] in TREND_KEYWORDS order, keywords with
        no mentions omitted
    """
    topics = []

    for keyword, pattern in _TREND_PATTERNS:
        titles = [s.title for s in signals if pattern.search(s.text)]
        if titles:
            topics.append((keyword, titles))

    return topics


def find_narrative_shifts(signals: Sequence[Signal]) -> List[Pattern]:
    patterns = []

    for keyword, titles in count_trending_topics(signals):
        count = len(titles)
        if count < MIN_NARRATIVE_MENTIONS:
            continue

        patterns.append(Pattern(
            type=PatternType.NARRATIVE_SHIFT.value,
            signals_connected=titles,
            insight=f'"{keyword}" emerging as dominant narrative',
            confidence=min(100, NARRATIVE_BASE_CONFIDENCE + NARRATIVE_CONFIDENCE_STEP * count),
            implications=list(NARRATIVE_SHIFT_IMPLICATIONS),
        ))

    return patterns


def find_cascade_risks(analyses: Sequence[SignalAnalysis]) -> List[Pattern]:
    """One cascade-risk pattern per high/critical signal"""
    return [
        Pattern(
            type=PatternType.CASCADE_RISK.value,
            signals_connected=[analysis.signal],
            insight=f"{analysis.signal} likely to trigger media cascade within 24-48 hours",
            confidence=CASCADE_VIRAL_CONFIDENCE if analysis.velocity == Velocity.VIRAL else CASCADE_CONFIDENCE,
            implications=list(CASCADE_IMPLICATIONS),
        )
        for analysis in analyses
        if analysis.is_high_impact
    ]


def recognize_patterns(
    signals: Sequence[Signal],
    analyses: Sequence[SignalAnalysis],
) -> List[Pattern]:
    """
    Detect all cross-signal patterns in a batch.

    Args:
        signals: The raw batch
        analyses: Per-signal analyses of the same batch

    Returns:
        Competitive acceleration, narrative shift and cascade risk patterns,
        in that order
    """
    patterns: List[Pattern] = []
    patterns.extend(find_competitive_acceleration(signals))
    patterns.extend(find_narrative_shifts(signals))
    patterns.extend(find_cascade_risks(analyses))

    logger.info(f"Recognized {len(patterns)} patterns across {len(signals)} signals")

    return patterns


def count_patterns(patterns: Sequence[Pattern], pattern_type: PatternType) -> int:
    return sum(1 for p in patterns if p.type == pattern_type.value)


def has_pattern(patterns: Sequence[Pattern], pattern_type: PatternType) -> bool:
    return count_patterns(patterns, pattern_type) > 0
