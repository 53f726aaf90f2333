"""API endpoint tests."""

import pytest
from fastapi.testclient import TestClient

from api.main import app
from config.settings import settings


@pytest.fixture
def client():
    return TestClient(app)


class TestHealth:
    """Tests for /health."""

    def test_health(self, client):
        """Test the health check reports the framework count."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["frameworks"] >= 15


class TestFrameworkEndpoints:
    """Tests for /frameworks."""

    def test_list(self, client):
        """Test listing all frameworks."""
        data = client.get("/frameworks").json()
        ids = {f["id"] for f in data["frameworks"]}
        assert {"bcc", "dm", "fsa", "fssai"} <= ids

    def test_list_by_region(self, client):
        """Test filtering the list by region."""
        data = client.get("/frameworks", params={"region": "uae"}).json()
        assert {f["id"] for f in data["frameworks"]} == {"dm", "adafsa", "sm_sharjah"}
        assert all(f["item_count"] > 0 for f in data["frameworks"])

    def test_get_framework(self, client):
        """Test fetching a full framework config."""
        response = client.get("/frameworks/dm")
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "dm"
        assert data["scoring"]["model"] == "percentage"
        assert data["features"]["has_halal_tracking"] is True
        assert "compute_star_rating" not in data["scoring"]

    def test_deployed_variant_framework(self, client, monkeypatch):
        """Test /framework serves the configured variant's framework."""
        monkeypatch.setattr(settings, "app_variant", "eatsafe_melbourne")
        assert client.get("/framework").json()["id"] == "vic_dh"

        monkeypatch.setattr(settings, "app_variant", "gcc_uae")
        assert client.get("/framework").json()["id"] == "dm"

    def test_variant_framework_override(self, client, monkeypatch):
        """Test an explicit variant wins over the configured one."""
        monkeypatch.setattr(settings, "app_variant", "gcc_uae")
        data = client.get("/framework", params={"variant": "eatsafe_sydney"}).json()
        assert data["id"] == "nsw_fa"
        assert client.get("/framework", params={"variant": "nope"}).json()["id"] == "bcc"

    def test_unknown_framework_is_baseline(self, client):
        """Test unknown codes serve the baseline."""
        assert client.get("/frameworks/atlantis").json()["id"] == "bcc"

    def test_score(self, client):
        """Test scoring a self-assessment."""
        answers = {f"Q{i}": {"status": "compliant"} for i in range(17)}
        answers.update({f"M{i}": {"status": "non_compliant", "severity": "minor"} for i in range(3)})
        response = client.post("/frameworks/dm/score", json={"answers": answers})
        assert response.status_code == 200
        data = response.json()
        assert data["score"] == 85
        assert data["counts"]["minor"] == 3
        assert data["model"] == "percentage"

    def test_score_star_model(self, client):
        """Test the baseline scores stars."""
        answers = {"A1": {"status": "non_compliant"}, "A2": {"status": "compliant"}}
        data = client.post("/frameworks/bcc/score", json={"answers": answers}).json()
        assert data["model"] == "star_rating"
        assert data["counts"]["minor"] == 1

    def test_score_rejects_bad_status(self, client):
        """Test invalid answer statuses are a validation error."""
        response = client.post(
            "/frameworks/dm/score", json={"answers": {"Q1": {"status": "maybe"}}}
        )
        assert response.status_code == 422


class TestVariantEndpoints:
    """Tests for /variants."""

    def test_get_variant(self, client):
        """Test resolving a city variant."""
        data = client.get("/variants/eatsafe_sydney").json()
        assert data["framework_code"] == "nsw_fa"
        assert data["layout"] == "compliance"
        assert data["currency"] == "AUD"
        assert data["brand"]["bundle_id"] == "com.eatsafe.sydney"

    def test_all_features(self, client):
        """Test ChefOS reports no feature restriction."""
        assert client.get("/variants/chefos").json()["base_features"] is None

    def test_unknown_variant(self, client):
        """Test unknown variants are 404."""
        assert client.get("/variants/nope").status_code == 404


class TestGeoAndTemperature:
    """Tests for /geo and /temperature."""

    def test_detect_au(self, client):
        """Test an Australian address."""
        data = client.get("/geo/detect", params={"address": "Hobart TAS 7000"}).json()
        assert data == {"region": "au", "jurisdiction": "tas", "framework_code": "tas_doh"}

    def test_detect_uae(self, client):
        """Test a UAE address."""
        data = client.get(
            "/geo/detect", params={"address": "Al Majaz", "region": "uae"}
        ).json()
        assert data["framework_code"] == "sm_sharjah"

    def test_temperature(self, client):
        """Test classifying a reading."""
        data = client.get("/temperature/uae/fridge_temp", params={"reading": 7}).json()
        assert data["status"] == "warning"
        assert data["known_log_type"] is True

    def test_unknown_log_type(self, client):
        """Test unknown log types pass."""
        data = client.get("/temperature/au/mystery", params={"reading": 99}).json()
        assert data["status"] == "pass"
        assert data["known_log_type"] is False

    def test_unknown_family(self, client):
        """Test unknown families are 404."""
        assert client.get("/temperature/mars/fridge_temp", params={"reading": 1}).status_code == 404


class TestTrace:
    """Tests for /trace."""

    def test_clear_trace(self, client):
        """Test clearing the trace."""
        assert client.delete("/trace").json() == {"status": "cleared"}
        assert client.get("/trace").json() == {"events": []}
