# File: tests/test_map_api.py

"""
Smoke tests for the HTTP surface.

These use FastAPI's TestClient. To run:
    pytest -q
"""

from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)


def test_health_endpoint():
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_location_map():
    resp = client.get("/api/v1/map/location", params={"lng": 10, "lat": 20})
    assert resp.status_code == 200

    data = resp.json()
    assert data["center"] == [20.0, 10.0]
    assert data["zoom"] == 13
    assert data["marker"]["position"] == [20.0, 10.0]
    assert data["marker"]["open_popup"] is True
    assert "Exact Location" in data["marker"]["popup_html"]


def test_location_map_needs_both_coordinates():
    resp = client.get("/api/v1/map/location", params={"lng": 10})
    assert resp.status_code == 422


def test_map_script_is_served():
    resp = client.get("/static/js/map.js")
    assert resp.status_code == 200
    assert "coordinates[1], coordinates[0]" in resp.text
    assert ".openPopup()" in resp.text
