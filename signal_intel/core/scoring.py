"""
Signal Scoring

Leaf scorers used by the signal analyzer:
1. Credibility - how much to trust the source
2. Relevance - how pertinent the signal is to the organization
3. Magnitude - how severe the described event is
4. Velocity - how fast the signal is spreading

All scorers are pure and never raise on partially-populated signals.
"""

from typing import Optional, Tuple
from datetime import datetime, timezone

from .signal import Signal, Organization, Magnitude, Velocity, as_utc


# Ordered (key, score) pairs - first substring match wins
CREDIBILITY_SCORES: Tuple[Tuple[str, int], ...] = (
    ("reuters", 95),
    ("bloomberg", 95),
    ("wall street journal", 90),
    ("financial times", 90),
    ("wsj", 90),
    ("ft", 90),
    ("techcrunch", 80),
    ("forbes", 75),
    ("businessinsider", 70),
    ("reddit", 40),
    ("twitter", 30),
    ("unknown", 50),
)
DEFAULT_CREDIBILITY = 50

# Checked most severe first
MAGNITUDE_KEYWORDS: Tuple[Tuple[Magnitude, Tuple[str, ...]], ...] = (
    (Magnitude.CRITICAL, ("crisis", "scandal", "lawsuit", "bankruptcy", "acquisition", "merger")),
    (Magnitude.HIGH, ("major", "significant", "breakthrough", "disruption", "launch")),
    (Magnitude.MEDIUM, ("update", "announces", "reveals", "partnership")),
)

# Upper age bound (hours, exclusive) for each velocity
VELOCITY_THRESHOLDS: Tuple[Tuple[float, Velocity], ...] = (
    (1, Velocity.VIRAL),
    (6, Velocity.FAST),
    (24, Velocity.MODERATE),
)

# Relevance weights
NAME_IN_TITLE = 40
NAME_IN_CONTENT = 20
COMPETITOR_ENTITY = 30
INDUSTRY_IN_TITLE = 20
KEYWORD_IN_TITLE = 10


def score_credibility(source: Optional[str]) -> int:
    """Trust score (0-100) for a source name"""
    source_lower = (source or "").lower()

    for key, score in CREDIBILITY_SCORES:
        if key in source_lower:
            return score

    return DEFAULT_CREDIBILITY


def score_relevance(signal: Signal, organization: Organization) -> int:
    """
    Additive relevance score, clamped to [0, 100].

    Args:
        signal: Signal to score
        organization: Monitored organization

    Returns:
        Relevance from 0 (unrelated) to 100 (directly about us)
    """
    title = signal.title.lower()
    content = (signal.content or "").lower()
    name = organization.name.lower()

    score = 0

    if name in title:
        score += NAME_IN_TITLE
    if name in content:
        score += NAME_IN_CONTENT

    if signal.is_competitor:
        score += COMPETITOR_ENTITY

    if organization.industry and organization.industry.lower() in title:
        score += INDUSTRY_IN_TITLE

    for keyword in organization.keywords:
        if keyword and keyword.lower() in title:
            score += KEYWORD_IN_TITLE

    return max(0, min(100, score))


def classify_magnitude(signal: Signal) -> Magnitude:
    """Severity from title + content keywords"""
    text = signal.text

    for magnitude, keywords in MAGNITUDE_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return magnitude

    return Magnitude.LOW


def classify_velocity(signal: Signal, now: Optional[datetime] = None) -> Velocity:
    """
    Spread speed inferred from recency.

    Args:
        signal: Signal to classify
        now: Reference time (defaults to current UTC time)

    Returns:
        VIRAL (<1h), FAST (<6h), MODERATE (<24h) or SLOW. Signals without a
        publish time are MODERATE.
    """
    published = signal.published_utc
    if published is None:
        return Velocity.MODERATE

    reference = as_utc(now) if now else datetime.now(timezone.utc)
    hours_ago = max((reference - published).total_seconds(), 0) / 3600

    for limit, velocity in VELOCITY_THRESHOLDS:
        if hours_ago < limit:
            return velocity

    return Velocity.SLOW
