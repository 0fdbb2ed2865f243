"""
Sample signal batch for demos and smoke tests.

Publish times are offsets from a reference time so the batch exercises every
velocity band no matter when it is generated.
"""

from typing import List, Optional
from datetime import datetime, timedelta, timezone

from .core.signal import Signal, Organization, as_utc


SAMPLE_ORGANIZATION = Organization(
    name="Acme",
    industry="logistics",
    keywords=["freight", "warehouse", "delivery"],
)

# (minutes ago, signal fields)
_SAMPLE_SIGNALS = [
    (20, {
        "type": "competitor",
        "title": "Globex launches AI routing platform for freight carriers",
        "content": "Globex says its AI system cuts delivery times by 18% in Europe pilots",
        "source": "TechCrunch",
        "entity": "Globex",
        "entity_type": "competitor",
    }),
    (45, {
        "type": "competitor",
        "title": "Initech announces partnership with major warehouse robotics firm",
        "content": "The partnership targets AI-driven automation and sustainability goals",
        "source": "Reuters",
        "entity": "Initech",
        "entity_type": "competitor",
    }),
    (180, {
        "type": "competitor",
        "title": "Umbrella Freight weighs acquisition of regional delivery startup",
        "content": "Sources say the deal would accelerate Umbrella's growth in Asia",
        "source": "Bloomberg",
        "entity": "Umbrella Freight",
        "entity_type": "competitor",
    }),
    (300, {
        "type": "news",
        "title": "Acme named top logistics employer for 2027",
        "content": "Acme was recognized for its AI training programs and workforce growth",
        "source": "Forbes",
        "entity": "Acme",
        "entity_type": "organization",
    }),
    (720, {
        "type": "regulatory",
        "title": "New regulation on freight emissions reporting takes effect",
        "content": "Carriers must disclose sustainability metrics quarterly",
        "source": "Financial Times",
        "entity": "EU Commission",
        "entity_type": "regulator",
    }),
    (2880, {
        "type": "market",
        "title": "Analysts see supply constraints pushing up warehouse pricing",
        "content": "Rising costs could slow growth across the logistics sector",
        "source": "reddit r/logistics",
    }),
]


def sample_signals(now: Optional[datetime] = None) -> List[Signal]:
    """
    Build the sample batch.

    Args:
        now: Reference time the publish offsets are measured from

    Returns:
        Six signals spanning competitor, regulatory, market and own-brand news
    """
    reference = as_utc(now) if now else datetime.now(timezone.utc)

    return [
        Signal(published=reference - timedelta(minutes=minutes_ago), **fields)
        for minutes_ago, fields in _SAMPLE_SIGNALS
    ]
