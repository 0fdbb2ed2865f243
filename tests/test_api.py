from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "analyze" in response.json()["endpoints"]


def test_analyze(client, now):
    body = {
        "organization": {"name": "Acme"},
        "signals": [{
            "type": "news",
            "title": "Acme faces data breach scandal",
            "source": "Bloomberg",
            "published": (now - timedelta(seconds=30)).isoformat(),
        }],
        "reference_time": now.isoformat(),
    }

    response = client.post("/api/analyze", json=body)

    assert response.status_code == 200
    data = response.json()
    assert data["strategic_implications"]["reputation"]["trajectory"] == "crisis"
    assert data["response_strategy"]["immediate_24h"]["priority"] == "critical"
    assert data["signal_analysis"][0]["credibility"] == 95


def test_analyze_empty_batch(client):
    response = client.post("/api/analyze", json={"organization": {"name": "Acme"}})

    assert response.status_code == 200
    assert response.json()["signal_analysis"] == []


def test_analyze_rejects_missing_name(client):
    response = client.post("/api/analyze", json={"organization": {"industry": "logistics"}, "signals": []})
    assert response.status_code == 422


def test_sample(client):
    response = client.get("/api/sample")

    assert response.status_code == 200
    assert len(response.json()["signal_analysis"]) == 6
