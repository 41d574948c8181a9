"""
Integration tests: verify that the direct service path and the FastAPI
path produce consistent outputs for the same inputs.
"""
import numpy as np
import pytest

from elnet.core.schemas import NetworkConfig
from elnet.core.service import NetworkService

# Skip API tests if fastapi/httpx are not installed.
fastapi = pytest.importorskip("fastapi")
httpx = pytest.importorskip("httpx")

from fastapi.testclient import TestClient
from elnet.api.app import create_app


# ------------------------------------------------------------------ #
#  Fixtures
# ------------------------------------------------------------------ #

RING_REQUEST = {
    "coordinates": [[-4.9], [4.9], [0.0]],
    "cutoff": 1.0,
    "spring_constant": 2.0,
    "box": [10.0, -1.0, -1.0],
    "dim": 1,
}


def random_request(seed: int = 0) -> dict:
    rng = np.random.default_rng(seed)
    return {
        "coordinates": rng.uniform(-4.0, 4.0, size=(60, 3)).tolist(),
        "cutoff": 1.2,
        "spring_constant": 1.0,
        "box": [8.0, -1.0, 8.0],
        "dim": 3,
    }


@pytest.fixture
def direct_service():
    return NetworkService()


@pytest.fixture
def api_client():
    app = create_app()
    return TestClient(app)


# ------------------------------------------------------------------ #
#  Tests
# ------------------------------------------------------------------ #


class TestHealth:

    def test_health(self, api_client):
        resp = api_client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestNetworkConsistency:
    """build_network must produce the same bonds via both paths."""

    def test_build_api(self, api_client):
        resp = api_client.post("/api/network", json=RING_REQUEST)
        assert resp.status_code == 200
        body = resp.json()
        assert body["ok"] is True
        assert body["summary"]["n_particles"] == 3
        assert body["summary"]["periodic"] == [True]
        assert len(body["bonds"]) == 1
        bond = body["bonds"][0]
        assert (bond["i"], bond["j"], bond["k"]) == (1, 0, 2.0)
        assert bond["r0"] == pytest.approx(0.2)

    def test_same_bonds(self, direct_service, api_client):
        req = random_request()
        cfg = NetworkConfig(
            cutoff=req["cutoff"],
            spring_constant=req["spring_constant"],
            box=req["box"],
            dim=req["dim"],
        )
        direct_service.build_network(cfg, req["coordinates"])
        direct = [b.to_dict() for b in direct_service.get_bonds()]

        api = api_client.post("/api/network", json=req).json()["bonds"]

        assert [(b["i"], b["j"]) for b in api] == [(b["i"], b["j"]) for b in direct]
        assert [b["r0"] for b in api] == pytest.approx([b["r0"] for b in direct])

    def test_warnings_reported(self, api_client):
        req = {"coordinates": [[0.0], [1.0], [2.0]], "cutoff": 1.5, "dim": 1}
        body = api_client.post("/api/network", json=req).json()
        assert any("L[0]" in w for w in body["warnings"])

    def test_bonds_endpoints(self, api_client):
        api_client.post("/api/network", json=RING_REQUEST)

        resp = api_client.get("/api/bonds")
        assert resp.status_code == 200
        assert len(resp.json()["bonds"]) == 1

        resp = api_client.get("/api/bonds/text")
        assert resp.status_code == 200
        assert resp.text == "1\t0\t2.000000\t0.200000\n"


class TestValidation:
    """Invalid requests are rejected."""

    @pytest.mark.parametrize("override", [
        {"dim": 4},
        {"cutoff": 0.0},
        {"method": "verlet"},
        {"coordinates": [[0.0, 1.0], [2.0]], "dim": 2},
        {"box": [10.0], "dim": 2, "coordinates": [[0.0, 0.0]]},
    ])
    def test_rejected(self, api_client, override):
        resp = api_client.post("/api/network", json={**RING_REQUEST, **override})
        assert resp.status_code == 422

    def test_extra_columns_are_ignored(self, api_client):
        req = {**RING_REQUEST, "coordinates": [[-4.9, 100.0], [4.9, -100.0], [0.0, 0.0]]}
        body = api_client.post("/api/network", json=req).json()
        assert len(body["bonds"]) == 1


class TestErrors:
    """Service errors surface as HTTP 400."""

    def test_bonds_before_build(self, api_client, monkeypatch):
        from elnet.api import routes

        monkeypatch.setattr(routes, "_service", NetworkService())
        resp = api_client.get("/api/bonds")
        assert resp.status_code == 400
        assert "No network built" in resp.json()["detail"]
