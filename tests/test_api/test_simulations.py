"""
API integration tests for /simulations endpoints.

These use the test HTTP client from conftest.py, which talks to the
FastAPI app in-process. No network — runs in milliseconds.
"""

import pytest

WORKLOAD = [
    {"name": "A", "start_time": 0, "total_time_needed": 4},
    {"name": "B", "start_time": 0, "total_time_needed": 2},
]


@pytest.mark.asyncio
async def test_simulate_round_robin(client):
    """POST /simulations/ should return the per-tick decisions and statistics."""
    response = await client.post("/simulations/", json={
        "policy": "round_robin",
        "time_quantum": 2,
        "processes": WORKLOAD,
    })

    assert response.status_code == 200
    data = response.json()
    assert data["policy"] == "round_robin"
    assert data["time_quantum"] == 2
    assert data["timeline"] == [0, 0, 1, 1, 0, 0]
    assert data["total_ticks"] == 6
    assert data["idle_ticks"] == 0
    assert data["avg_waiting_time"] == 2.0
    assert [p["finish_time"] for p in data["processes"]] == [6, 4]
    assert data["segments"][0] == {"process_index": 0, "start": 0, "end": 2}


@pytest.mark.asyncio
async def test_simulate_srt_preemption(client):
    response = await client.post("/simulations/", json={
        "policy": "srt",
        "processes": [
            {"name": "A", "start_time": 0, "total_time_needed": 5},
            {"name": "B", "start_time": 2, "total_time_needed": 2},
        ],
    })

    assert response.status_code == 200
    data = response.json()
    assert data["timeline"] == [0, 0, 1, 1, 0, 0, 0]
    assert data["time_quantum"] is None


@pytest.mark.asyncio
async def test_unnamed_processes_get_default_names(client):
    response = await client.post("/simulations/", json={
        "policy": "spn",
        "processes": [{"start_time": 0, "total_time_needed": 1}],
    })

    assert response.status_code == 200
    assert response.json()["processes"][0]["name"] == "P0"


@pytest.mark.asyncio
async def test_unknown_policy_rejected(client):
    response = await client.post("/simulations/", json={
        "policy": "lottery",
        "processes": WORKLOAD,
    })

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_zero_quantum_rejected(client):
    response = await client.post("/simulations/", json={
        "policy": "round_robin",
        "time_quantum": 0,
        "processes": WORKLOAD,
    })

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_invalid_process_rejected(client):
    response = await client.post("/simulations/", json={
        "policy": "hrrn",
        "processes": [{"start_time": -1, "total_time_needed": 0}],
    })

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_empty_workload_rejected(client):
    response = await client.post("/simulations/", json={"policy": "hrrn", "processes": []})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_compare_returns_every_policy(client):
    response = await client.post("/simulations/compare", json={
        "time_quantum": 2,
        "processes": WORKLOAD,
    })

    assert response.status_code == 200
    data = response.json()
    assert [run["policy"] for run in data] == ["round_robin", "spn", "srt", "hrrn"]
    for run in data:
        assert run["total_ticks"] == 6
        assert sorted(d for d in run["timeline"] if d is not None) == [0, 0, 0, 0, 1, 1]


@pytest.mark.asyncio
async def test_simulation_too_long_rejected(client, monkeypatch):
    from config.settings import settings

    monkeypatch.setattr(settings, "MAX_SIMULATION_TICKS", 3)
    response = await client.post("/simulations/", json={
        "policy": "spn",
        "processes": WORKLOAD,
    })

    assert response.status_code == 422
    assert "exceeded" in response.json()["detail"]
