from datetime import timedelta

import pytest

from signal_intel.core.signal import Signal, Magnitude, Velocity
from signal_intel.core.signal_analyzer import (
    UNKNOWN_EVENT,
    MEANING_COMPETITOR,
    MEANING_REGULATORY,
    MEANING_GENERAL,
    analyze_signal,
    analyze_batch,
    recommend_action,
)


def test_analysis_fields(make_signal, org, now):
    signal = make_signal(
        title="Acme announces freight partnership",
        source="Reuters",
        published=now - timedelta(minutes=10),
    )

    analysis = analyze_signal(signal, org, now)

    assert analysis.signal == "Acme announces freight partnership"
    assert analysis.what_happened == "Acme announces freight partnership"
    assert analysis.so_what == MEANING_GENERAL
    assert analysis.now_what == "Monitor and prepare contingency messaging"
    assert analysis.magnitude == Magnitude.MEDIUM
    assert analysis.velocity == Velocity.VIRAL
    assert analysis.credibility == 95
    assert analysis.relevance == 50


def test_missing_title_uses_fallback(org, now):
    analysis = analyze_signal(Signal(), org, now)

    assert analysis.signal == ""
    assert analysis.what_happened == UNKNOWN_EVENT


def test_partial_signal_gets_defaults(org, now):
    signal = Signal.model_validate({"title": None, "source": None})

    analysis = analyze_signal(signal, org, now)

    assert analysis.credibility == 50
    assert analysis.velocity == Velocity.MODERATE
    assert analysis.magnitude == Magnitude.LOW
    assert analysis.relevance == 0


def test_meaning_by_entity_and_type(make_signal, org, now):
    competitor = make_signal(entity_type="competitor", type="regulatory")
    regulatory = make_signal(type="regulatory")

    assert analyze_signal(competitor, org, now).so_what == MEANING_COMPETITOR
    assert analyze_signal(regulatory, org, now).so_what == MEANING_REGULATORY


@pytest.mark.parametrize("magnitude, velocity, expected", [
    (Magnitude.CRITICAL, Velocity.VIRAL, "activate war room"),
    (Magnitude.HIGH, Velocity.FAST, "prepare statement within 2 hours"),
    (Magnitude.HIGH, Velocity.VIRAL, "prepare statement within 2 hours"),
    (Magnitude.HIGH, Velocity.SLOW, "within 24 hours"),
    (Magnitude.MEDIUM, Velocity.VIRAL, "contingency"),
    (Magnitude.LOW, Velocity.VIRAL, "Track for pattern development"),
    (Magnitude.CRITICAL, Velocity.SLOW, "Track for pattern development"),
])
def test_recommend_action(magnitude, velocity, expected):
    assert expected in recommend_action(magnitude, velocity)


def test_batch_preserves_order(make_signal, org, now):
    titles = ["First", "Second", "Third"]
    analyses = analyze_batch([make_signal(title=t) for t in titles], org, now)

    assert [a.signal for a in analyses] == titles


def test_empty_batch(org, now):
    assert analyze_batch([], org, now) == []
