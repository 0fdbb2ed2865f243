import json
from datetime import timedelta

import pytest
from pydantic import ValidationError

from signal_intel import analyze_signals, SignalAnalysisOrchestrator, Organization
from signal_intel.core.signal import Magnitude, Priority
from signal_intel.samples import SAMPLE_ORGANIZATION, sample_signals
from signal_intel.synthesis.response_strategy import plan_response
from signal_intel.synthesis.elite_insights import generate_elite_insights
from signal_intel.synthesis.strategic_implications import Trajectory, Intervention


def test_empty_batch_is_well_formed(now):
    result = analyze_signals([], {"name": "Acme"}, now=now)

    assert result.signal_analysis == []
    assert result.pattern_recognition == []
    assert result.strategic_implications.reputation.trajectory == Trajectory.STABLE
    assert result.strategic_implications.reputation.intervention_required == Intervention.NONE
    assert result.response_strategy.immediate_24h.priority == Priority.LOW

    insights = result.elite_insights
    assert insights.hidden_connections == []
    assert insights.non_obvious_risks == []
    assert insights.asymmetric_opportunities == []
    assert insights.narrative_leverage_points == []
    assert insights.strategic_blindspots == []


def test_none_batch_treated_as_empty(now):
    assert analyze_signals(None, {"name": "Acme"}, now=now).signal_analysis == []


def test_competitor_trio_with_lawsuit(now):
    signals = [
        {"type": "competitor", "title": "major lawsuit filed", "source": "Reuters", "entity_type": "competitor"},
        {"type": "competitor", "title": "Globex hires CTO", "source": "Forbes", "entity_type": "competitor"},
        {"type": "competitor", "title": "Initech opens office", "source": "Twitter", "entity_type": "competitor"},
    ]

    result = analyze_signals(signals, {"name": "Acme"}, now=now)

    acceleration = [p for p in result.pattern_recognition if p.type == "competitive_acceleration"]
    assert len(acceleration) == 1
    assert acceleration[0].confidence == 85
    assert acceleration[0].signals_connected == [s["title"] for s in signals]
    assert result.signal_analysis[0].magnitude == Magnitude.CRITICAL


def test_fresh_critical_signal_triggers_crisis(now):
    signals = [{
        "type": "news",
        "title": "Acme faces data breach scandal",
        "source": "Bloomberg",
        "published": (now - timedelta(seconds=30)).isoformat(),
    }]

    result = analyze_signals(signals, {"name": "Acme"}, now=now)
    reputation = result.strategic_implications.reputation

    assert reputation.trajectory == Trajectory.CRISIS
    assert reputation.intervention_required == Intervention.URGENT
    assert result.response_strategy.immediate_24h.priority == Priority.CRITICAL
    assert result.response_strategy.short_term_7d.priority == Priority.HIGH
    assert "war room" in result.signal_analysis[0].now_what


def test_runs_are_identical(now):
    signals = sample_signals(now)

    first = analyze_signals(signals, SAMPLE_ORGANIZATION, now=now)
    second = analyze_signals(signals, SAMPLE_ORGANIZATION, now=now)

    assert first.model_dump_json() == second.model_dump_json()


def test_sample_batch_end_to_end(now):
    result = analyze_signals(sample_signals(now), SAMPLE_ORGANIZATION, now=now)

    insights = {p.insight for p in result.pattern_recognition}
    types = [p.type for p in result.pattern_recognition]

    assert len(result.signal_analysis) == 6
    assert "competitive_acceleration" in types
    assert '"AI" emerging as dominant narrative' in insights
    assert '"growth" emerging as dominant narrative' in insights
    assert result.strategic_implications.reputation.trajectory == Trajectory.CRISIS


@pytest.mark.parametrize("organization", [{}, {"name": ""}, {"name": "   "}, {"industry": "logistics"}])
def test_invalid_organization_fails_fast(organization):
    with pytest.raises(ValidationError):
        analyze_signals([{"title": "Anything"}], organization)


def test_invalid_organization_is_a_value_error():
    with pytest.raises(ValueError):
        SignalAnalysisOrchestrator({"name": None})


def test_partial_signals_never_raise(now):
    result = analyze_signals([{}, {"title": "Only a title"}, {"source": "Reuters"}], Organization(name="Acme"), now=now)

    assert [a.credibility for a in result.signal_analysis] == [50, 50, 95]
    assert all(a.magnitude == Magnitude.LOW for a in result.signal_analysis)


def test_explicit_nulls_and_odd_payloads_never_raise(now):
    signals = [
        {"title": "Null type", "type": None},
        {"title": None, "source": None, "content": None, "entity_type": None, "published": None},
        {"title": "Scraped page", "raw": "<html>payload</html>"},
        {"title": "Listed payload", "raw": [1, 2, 3]},
    ]

    result = analyze_signals(signals, {"name": "Acme"}, now=now)

    assert [a.signal for a in result.signal_analysis] == ["Null type", "", "Scraped page", "Listed payload"]
    assert [a.credibility for a in result.signal_analysis] == [50, 50, 50, 50]


def test_result_is_json_serializable(now):
    result = analyze_signals(sample_signals(now), SAMPLE_ORGANIZATION, now=now)

    payload = json.loads(json.dumps(result.model_dump(mode="json")))

    assert set(payload) == {
        "signal_analysis",
        "pattern_recognition",
        "stakeholder_impact",
        "strategic_implications",
        "response_strategy",
        "elite_insights",
    }
    assert set(payload["stakeholder_impact"]) == {
        "customers", "investors", "media", "employees", "partners", "regulators",
    }
    assert payload["response_strategy"]["immediate_24h"]["priority"] == "critical"


def test_final_branches_recompute_independently(now):
    signals = sample_signals(now)
    result = analyze_signals(signals, SAMPLE_ORGANIZATION, now=now)
    implications = result.strategic_implications

    assert plan_response(implications) == result.response_strategy
    assert generate_elite_insights(signals, result.pattern_recognition, implications, now) == result.elite_insights


def test_report_text(now):
    text = str(analyze_signals(sample_signals(now), SAMPLE_ORGANIZATION, now=now))

    assert "SIGNAL INTELLIGENCE REPORT" in text
    assert "trajectory crisis" in text
    assert "Executive team briefing" in text
