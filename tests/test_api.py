"""
Test suite for the Pair Partition Total HTTP service.

Tests cover:
- Totals and breakdowns over submitted pairs
- The built-in sample endpoint
- Validation errors (422) and the per-request pair limit
- Unhandled errors (500), health and metrics
"""

import warnings
from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient

from pairsum.config import Settings, get_settings
from pairsum.main import app
from pairsum.middleware import metrics

SAMPLE_BODY = {"pairs": [[20, 60], [10, 50], [30, 190], [30, 300]]}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _reset_state():
    """Every test starts with empty metrics and default settings."""
    metrics.reset()
    app.dependency_overrides.clear()
    yield
    app.dependency_overrides.clear()
    metrics.reset()


@pytest.fixture()
async def client():
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ---------------------------------------------------------------------------
# Totals
# ---------------------------------------------------------------------------

class TestTotals:

    @pytest.mark.anyio
    async def test_sample_body(self, client: AsyncClient):
        resp = await client.post("/totals", json=SAMPLE_BODY)
        assert resp.status_code == 200
        assert resp.json() == {"total": 170, "count": 4}

    @pytest.mark.anyio
    async def test_empty_pairs(self, client: AsyncClient):
        resp = await client.post("/totals", json={"pairs": []})
        assert resp.status_code == 200
        assert resp.json() == {"total": 0, "count": 0}

    @pytest.mark.anyio
    async def test_missing_pairs_defaults_to_empty(self, client: AsyncClient):
        resp = await client.post("/totals", json={})
        assert resp.status_code == 200
        assert resp.json()["total"] == 0

    @pytest.mark.anyio
    async def test_odd_count(self, client: AsyncClient):
        resp = await client.post("/totals", json={"pairs": [[1, 1], [10, 0], [0, 10]]})
        assert resp.json()["total"] == 1

    @pytest.mark.anyio
    async def test_breakdown(self, client: AsyncClient):
        resp = await client.post("/totals/breakdown", json=SAMPLE_BODY)
        assert resp.status_code == 200
        data = resp.json()
        assert data["sorted_pairs"] == [[30, 300], [30, 190], [20, 60], [10, 50]]
        assert data["midpoint"] == 2
        assert data["first_half"] == [[30, 300], [30, 190]]
        assert data["second_half"] == [[20, 60], [10, 50]]
        assert data["first_half_sum"] == 60
        assert data["second_half_sum"] == 110
        assert data["total"] == 170

    @pytest.mark.anyio
    async def test_sample_endpoint(self, client: AsyncClient):
        resp = await client.get("/totals/sample")
        assert resp.status_code == 200
        assert resp.json()["total"] == 170


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class TestErrors:

    @pytest.mark.anyio
    @pytest.mark.parametrize("pairs", [
        [[1, 2, 3]],
        [[1]],
        [["1", 2]],
        [[True, 2]],
        [[1.5, 2]],
        "not-a-list",
    ])
    async def test_malformed_pairs_rejected(self, client: AsyncClient, pairs):
        resp = await client.post("/totals", json={"pairs": pairs})
        assert resp.status_code == 422

    @pytest.mark.anyio
    async def test_too_many_pairs(self, client: AsyncClient):
        app.dependency_overrides[get_settings] = lambda: Settings(max_pairs=3)
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            resp = await client.post("/totals", json=SAMPLE_BODY)
        assert resp.status_code == 422
        assert "exceeds the limit of 3" in resp.json()["detail"]
        # The 422 handler must not touch deprecated status constants
        assert not [w for w in caught if issubclass(w.category, DeprecationWarning)
                    and "HTTP_422" in str(w.message)]

    @pytest.mark.anyio
    async def test_limit_applies_to_breakdown(self, client: AsyncClient):
        app.dependency_overrides[get_settings] = lambda: Settings(max_pairs=1)
        resp = await client.post("/totals/breakdown", json=SAMPLE_BODY)
        assert resp.status_code == 422

    @pytest.mark.anyio
    async def test_unhandled_error_returns_500(self, client: AsyncClient):
        with patch("pairsum.routes.compute_total", side_effect=RuntimeError("boom")):
            resp = await client.post("/totals", json=SAMPLE_BODY)
        assert resp.status_code == 500
        assert resp.json() == {"detail": "Internal server error"}
        assert metrics.snapshot()["status_counts"] == {500: 1}


# ---------------------------------------------------------------------------
# System routes
# ---------------------------------------------------------------------------

class TestSystem:

    @pytest.mark.anyio
    async def test_health(self, client: AsyncClient):
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "healthy"}

    @pytest.mark.anyio
    async def test_request_id_header(self, client: AsyncClient):
        resp = await client.get("/health", headers={"x-request-id": "abc123"})
        assert resp.headers["x-request-id"] == "abc123"

        resp = await client.get("/health")
        assert resp.headers["x-request-id"]

    @pytest.mark.anyio
    async def test_metrics_count_requests(self, client: AsyncClient):
        await client.post("/totals", json=SAMPLE_BODY)
        await client.post("/totals", json={"pairs": [[1, 2, 3]]})

        resp = await client.get("/metrics")
        data = resp.json()
        # The /metrics request itself is recorded after the snapshot is taken
        assert data["total_requests"] == 2
        assert data["status_counts"] == {"200": 1, "422": 1}
        assert data["avg_duration_ms"] >= 0
