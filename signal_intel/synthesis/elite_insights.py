"""
Elite Insight Generator

Synthesis-level observations that no single signal or pattern states outright.
Five independent rule sets, each evaluated once over already-computed stages:

1. Hidden connections - timing clusters, neglected topics, supply/pricing links
2. Non-obvious risks - second-order effects of the patterns
3. Asymmetric opportunities - cheap moves with outsized upside
4. Narrative leverage points - where a single voice can shape the story
5. Strategic blind spots - what the intelligence itself is missing
"""

from typing import List, Optional, Sequence, Tuple
from collections import defaultdict
from datetime import datetime, timezone
import re

from pydantic import BaseModel, Field
from loguru import logger

from ..core.signal import Signal, as_utc
from .pattern_recognizer import Pattern, PatternType, has_pattern
from .strategic_implications import StrategicImplications, RelativeStrength


class EliteInsights(BaseModel):
    hidden_connections: List[str] = Field(default_factory=list)
    non_obvious_risks: List[str] = Field(default_factory=list)
    asymmetric_opportunities: List[str] = Field(default_factory=list)
    narrative_leverage_points: List[str] = Field(default_factory=list)
    strategic_blindspots: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


MAX_SIGNALS_PER_HOUR = 2
MAX_CONTESTED_NARRATIVES = 2
MAX_COMPETITOR_SIGNALS = 3
MIN_ENTITY_TYPES = 3

NEGLECTABLE_TOPICS: Tuple[str, ...] = ("AI", "sustainability", "privacy", "customer experience", "pricing")
REGION_KEYWORDS: Tuple[str, ...] = ("Asia", "Europe", "America", "Africa", "LATAM", "EMEA", "APAC")
COMMON_THREAT_KEYWORDS: Tuple[str, ...] = ("regulation", "disruption")

YEAR_PATTERN = re.compile(r"\b(20\d{2})\b")


def _mentions(text: str, term: str) -> bool:
    # Acronyms stand alone ("AI" not "said"); longer terms match at a word start
    suffix = r"\b" if len(term) <= 3 else ""
    return re.search(rf"\b{re.escape(term)}{suffix}", text, re.IGNORECASE) is not None


# ============================================================================
# HIDDEN CONNECTIONS
# ============================================================================

def find_simultaneous_events(signals: Sequence[Signal]) -> List[Signal]:
    """Signals sharing a UTC publish hour with at least two others"""
    buckets = defaultdict(list)

    for signal in signals:
        published = signal.published_utc
        if published is not None:
            buckets[published.strftime("%Y-%m-%dT%H")].append(signal)

    simultaneous = []
    for group in buckets.values():
        if len(group) > MAX_SIGNALS_PER_HOUR:
            simultaneous.extend(group)

    return simultaneous


def find_neglected_topics(signals: Sequence[Signal]) -> List[str]:
    """Topics no competitor signal mentions (empty when there are no competitor signals)"""
    competitor_texts = [s.text for s in signals if s.is_competitor]
    if not competitor_texts:
        return []

    return [
        topic for topic in NEGLECTABLE_TOPICS
        if not any(_mentions(text, topic) for text in competitor_texts)
    ]


def find_hidden_connections(signals: Sequence[Signal]) -> List[str]:
    connections = []

    if find_simultaneous_events(signals):
        connections.append("Coordinated competitive moves suggest industry collusion or shared intel")

    neglected = find_neglected_topics(signals)
    if neglected:
        connections.append(
            f"Competitors are not addressing {neglected[0]} - opportunity exists in neglected areas"
        )

    titles = [s.title.lower() for s in signals]
    if any("supply" in t for t in titles) and any("pricing" in t for t in titles):
        connections.append("Supply chain signals predict pricing pressure in 30-60 days")

    return connections


# ============================================================================
# RISKS AND OPPORTUNITIES
# ============================================================================

def identify_non_obvious_risks(
    signals: Sequence[Signal],
    patterns: Sequence[Pattern],
    implications: StrategicImplications,
) -> List[str]:
    risks = []

    if has_pattern(patterns, PatternType.COMPETITIVE_ACCELERATION):
        risks.append("Talent poaching likely as competitors scale - protect key employees now")

    if len(implications.market_narrative.contested_ground) > MAX_CONTESTED_NARRATIVES:
        risks.append("Vulnerable to narrative hijacking - one misstep could flip the story")

    if sum(1 for s in signals if s.is_competitor) > MAX_COMPETITOR_SIGNALS:
        risks.append("Competitors may form coalition against market leader")

    return risks


def identify_common_threats(signals: Sequence[Signal]) -> List[str]:
    """Distinct titles about threats that hit every player, in first-seen order"""
    threats = []

    for signal in signals:
        title = signal.title
        if title in threats:
            continue
        if any(keyword in title.lower() for keyword in COMMON_THREAT_KEYWORDS):
            threats.append(title)

    return threats


def find_asymmetric_opportunities(signals: Sequence[Signal], patterns: Sequence[Pattern]) -> List[str]:
    opportunities = []

    if has_pattern(patterns, PatternType.NARRATIVE_SHIFT):
        opportunities.append("While everyone zigs on trendy topic, zag with contrarian but credible position")

    # Competitors that have not formally announced are still telegraphing
    if any(s.is_competitor and "announces" not in s.title.lower() for s in signals):
        opportunities.append(
            "Competitors telegraphing moves - fast execution can capture position before they act"
        )

    common_threats = identify_common_threats(signals)
    if common_threats:
        opportunities.append(f"Form unexpected alliance against common threat: {common_threats[0]}")

    return opportunities


# ============================================================================
# LEVERAGE AND BLIND SPOTS
# ============================================================================

def identify_leverage_points(patterns: Sequence[Pattern], implications: StrategicImplications) -> List[str]:
    points = [
        f"Narrative void: {opportunity} - first credible voice wins"
        for opportunity in implications.market_narrative.narrative_opportunities
    ]

    points.extend(
        f"Pre-position for cascade: {p.insight}"
        for p in patterns
        if p.type == PatternType.CASCADE_RISK.value
    )

    if implications.competitive_position.relative_strength == RelativeStrength.LEADER:
        points.append("Use market leader position to set industry standards")

    return points


def _mentions_future(title: str, reference_year: int) -> bool:
    if "future" in title.lower():
        return True
    return any(int(year) >= reference_year for year in YEAR_PATTERN.findall(title))


def identify_blindspots(signals: Sequence[Signal], reference_year: int) -> List[str]:
    blindspots = []

    if not any(_mentions(s.title, region) for s in signals for region in REGION_KEYWORDS):
        blindspots.append("No geographic diversity in intelligence - missing regional threats/opportunities")

    entity_types = {s.entity_type for s in signals if s.entity_type}
    if len(entity_types) < MIN_ENTITY_TYPES:
        blindspots.append("Limited stakeholder coverage - missing signals from key audiences")

    if not any(_mentions_future(s.title, reference_year) for s in signals):
        blindspots.append("All signals are present-focused - missing long-term strategic shifts")

    return blindspots


def generate_elite_insights(
    signals: Sequence[Signal],
    patterns: Sequence[Pattern],
    implications: StrategicImplications,
    now: Optional[datetime] = None,
) -> EliteInsights:
    """
    Derive all five insight lists.

    Args:
        signals: The raw batch
        patterns: Patterns recognized across the batch
        implications: Strategic implications for the batch
        now: Reference time; years from this one onward count as "future"

    Returns:
        EliteInsights (all lists empty for an empty batch)
    """
    if not signals:
        return EliteInsights()

    reference = as_utc(now) if now else datetime.now(timezone.utc)

    insights = EliteInsights(
        hidden_connections=find_hidden_connections(signals),
        non_obvious_risks=identify_non_obvious_risks(signals, patterns, implications),
        asymmetric_opportunities=find_asymmetric_opportunities(signals, patterns),
        narrative_leverage_points=identify_leverage_points(patterns, implications),
        strategic_blindspots=identify_blindspots(signals, reference.year),
    )

    total = sum(
        len(items) for items in (
            insights.hidden_connections,
            insights.non_obvious_risks,
            insights.asymmetric_opportunities,
            insights.narrative_leverage_points,
            insights.strategic_blindspots,
        )
    )
    logger.info(f"Generated {total} elite insights")

    return insights
