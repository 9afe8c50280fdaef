"""
Tests for the HTTP and WebSocket API

Run with: pytest tests/test_api.py -v
"""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from api.main import app
from core.profiles import ChannelKind

CHILLER = "1hOSwPNfz2Bw_3Z7ePjS2T"


@pytest.fixture
def client(monkeypatch):
    """Client with the seed database, no latency and no automatic ticks."""
    monkeypatch.setenv("BMS_SIMULATE_LATENCY", "false")
    monkeypatch.setenv("BMS_RANDOM_SEED", "7")
    monkeypatch.setenv("BMS_TICK_INTERVAL_SECONDS", "3600")
    monkeypatch.setenv("BMS_LOAD_SEED_DATA", "true")
    with TestClient(app) as c:
        yield c


@pytest.fixture
def engine(client):
    """The engine owned by the running app."""
    return client.app.state.engine


class TestSystemEndpoints:
    """Test root and health endpoints."""

    def test_root(self, client):
        """Root endpoint points at the API base path."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["api_base"] == "/api/v1"

    def test_health(self, client):
        """Health reports a running clock and the seeded assets."""
        data = client.get("/health").json()

        assert data["status"] == "ok"
        assert data["simulation_running"] is True
        assert data["tick_interval"] == 3600
        assert data["asset_count"] == 24

    def test_live(self, client):
        """Liveness check always answers."""
        assert client.get("/live").json() == {"alive": True}


class TestAssetEndpoints:
    """Test asset lookup and registration."""

    def test_list_assets(self, client):
        """Every seeded asset id is listed."""
        data = client.get("/api/v1/assets").json()

        assert data["count"] == 24
        assert CHILLER in data["asset_ids"]

    def test_get_asset(self, client):
        """One asset is returned with formatted readings."""
        data = client.get(f"/api/v1/assets/{CHILLER}").json()

        assert data["display_name"] == "Chiller CH-01"
        assert [r["channel"] for r in data["readings"]] == ["temperature", "energy", "pressure"]
        for reading in data["readings"]:
            assert reading["severity"] in ("normal", "warning", "alarm")
            assert reading["formatted"] == f"{reading['value']} {reading['unit']}"
            assert reading["color"].startswith("#")

    def test_get_unknown_asset(self, client):
        """Unknown asset ids give 404."""
        response = client.get("/api/v1/assets/unknown")

        assert response.status_code == 404
        assert response.json()["error"] is True

    def test_batch_partial_match(self, client):
        """Bulk lookup omits ids without BMS data."""
        response = client.post(
            "/api/v1/assets/batch",
            json={"asset_ids": [CHILLER, "unknown"]}
        )
        data = response.json()

        assert response.status_code == 200
        assert data["requested"] == 2
        assert data["found"] == 1
        assert list(data["assets"].keys()) == [CHILLER]

    def test_batch_requires_ids(self, client):
        """An empty id list is rejected."""
        response = client.post("/api/v1/assets/batch", json={"asset_ids": []})
        assert response.status_code == 422

    def test_register_asset(self, client, engine):
        """Registering an asset makes it queryable."""
        response = client.post(
            "/api/v1/assets",
            json={
                "asset_id": "A1",
                "display_name": "Pump-01",
                "channels": ["temperature", "pressure", "temperature"]
            }
        )
        data = response.json()

        assert response.status_code == 201
        assert [r["channel"] for r in data["readings"]] == ["temperature", "pressure"]
        assert engine.has("A1")

    def test_register_unknown_channel(self, client):
        """Unknown channel names are rejected."""
        response = client.post(
            "/api/v1/assets",
            json={"asset_id": "A1", "display_name": "Pump-01", "channels": ["radiation"]}
        )
        assert response.status_code == 422


class TestHistoryEndpoint:
    """Test channel history."""

    def test_history_shape(self, client):
        """History covers the requested hours at 15-minute spacing."""
        data = client.get(f"/api/v1/assets/{CHILLER}/history/temperature?hours=24").json()

        assert data["count"] == 97
        assert data["unit"] == "°C"
        timestamps = [p["timestamp"] for p in data["points"]]
        assert timestamps == sorted(timestamps)

    def test_history_hours_validated(self, client):
        """Hours outside 1-720 are rejected."""
        response = client.get(f"/api/v1/assets/{CHILLER}/history/temperature?hours=0")
        assert response.status_code == 422

    def test_history_unknown_channel(self, client):
        """Unknown channels are rejected."""
        response = client.get(f"/api/v1/assets/{CHILLER}/history/radiation")
        assert response.status_code == 422


class TestAlertsEndpoint:
    """Test alerting assets."""

    def test_alert_surfaces_and_clears(self, client, engine):
        """A forced alarm appears in alerts until cleared."""
        engine.registry.set_value(CHILLER, ChannelKind.TEMPERATURE, 33.0)

        data = client.get("/api/v1/alerts").json()
        assert CHILLER in data["assets"]
        assert data["assets"][CHILLER]["has_alert"] is True

        engine.registry.set_value(CHILLER, ChannelKind.TEMPERATURE, 20.0)
        engine.registry.set_value(CHILLER, ChannelKind.ENERGY, 100.0)
        engine.registry.set_value(CHILLER, ChannelKind.PRESSURE, 100.0)

        data = client.get("/api/v1/alerts").json()
        assert CHILLER not in data["assets"]


class TestProfileEndpoints:
    """Test channel profiles."""

    def test_list_profiles(self, client):
        """Every channel kind has a profile."""
        data = client.get("/api/v1/profiles").json()
        assert [p["kind"] for p in data] == [k.value for k in ChannelKind]

    def test_get_profile(self, client):
        """CO2 profile has the expected bounds and unit."""
        data = client.get("/api/v1/profiles/co2").json()

        assert data["min_value"] == 400
        assert data["max_value"] == 2000
        assert data["unit"] == "ppm"

    def test_unknown_profile(self, client):
        """Unknown channel kinds are rejected."""
        assert client.get("/api/v1/profiles/radiation").status_code == 422


class TestLiveUpdates:
    """Test the WebSocket stream."""

    def test_snapshot_then_tick_updates(self, client, engine):
        """Client gets the current snapshot, then one per tick."""
        with client.websocket_connect(f"/ws/assets/{CHILLER}") as ws:
            first = ws.receive_json()
            assert first["asset_id"] == CHILLER

            engine.clock.tick()
            update = ws.receive_json()
            assert update["asset_id"] == CHILLER
            assert datetime.fromisoformat(update["last_updated"]) >= datetime.fromisoformat(first["last_updated"])

    def test_unknown_asset_refused(self, client):
        """Unknown assets are closed with code 4404."""
        with pytest.raises(WebSocketDisconnect) as exc_info:
            with client.websocket_connect("/ws/assets/unknown") as ws:
                ws.receive_json()

        assert exc_info.value.code == 4404

    def test_disconnect_cancels_subscription(self, client, engine):
        """Leaving the session ends the handler and drops its subscription."""
        with client.websocket_connect(f"/ws/assets/{CHILLER}") as ws:
            ws.receive_json()
            assert engine.subscriptions.subscriber_count(CHILLER) == 1

        assert engine.subscriptions.subscriber_count(CHILLER) == 0
        assert engine.clock.tick() == 24

    def test_sessions_open_and_close_repeatedly(self, client, engine):
        """Back-to-back sessions each close cleanly and leave no subscribers."""
        for _ in range(5):
            with client.websocket_connect(f"/ws/assets/{CHILLER}") as ws:
                ws.receive_json()
                engine.clock.tick()
                assert ws.receive_json()["asset_id"] == CHILLER

        assert engine.subscriptions.subscriber_count() == 0

    def test_two_clients_each_receive_the_tick(self, client, engine):
        """Every connected client gets its own copy of the update."""
        with client.websocket_connect(f"/ws/assets/{CHILLER}") as first, \
                client.websocket_connect(f"/ws/assets/{CHILLER}") as second:
            first.receive_json()
            second.receive_json()
            assert engine.subscriptions.subscriber_count(CHILLER) == 2

            engine.clock.tick()

            assert first.receive_json() == second.receive_json()

        assert engine.subscriptions.subscriber_count(CHILLER) == 0
