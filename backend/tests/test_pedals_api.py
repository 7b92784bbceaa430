import pytest
from fastapi.testclient import TestClient

from app.catalog import get_catalog
from app.main import app

client = TestClient(app)


@pytest.fixture(autouse=True)
def override_catalog(catalog):
    app.dependency_overrides[get_catalog] = lambda: catalog
    yield
    app.dependency_overrides.clear()


def test_list_pedals():
    res = client.get("/api/pedals")
    assert res.status_code == 200
    body = res.json()
    assert body["kind"] == "grid"
    assert body["heading"] == "All Pedals"
    assert [p["slug"] for p in body["pedals"]] == ["tree-fiddy", "son-of-a-b", "super-dolt"]
    first = body["pedals"][0]
    assert first["price_formatted"] == "$100.00"
    assert first["checkout_eligible"] is True
    assert "stripe_price_id" not in first


def test_list_pedals_by_line_and_type():
    res = client.get("/api/pedals", params={"productLine": "Tarot", "type": "Fuzz"})
    body = res.json()
    assert body["heading"] == "Tarot Series"
    assert body["selected_filter"] == "Fuzz"
    assert [p["slug"] for p in body["pedals"]] == ["son-of-a-b"]


def test_unknown_line_shows_everything_with_notice():
    body = client.get("/api/pedals", params={"productLine": "Boutique"}).json()
    assert body["notice"]
    assert len(body["pedals"]) == 3


def test_empty_line_and_custom_line():
    body = client.get("/api/pedals", params={"productLine": "Handwired"}).json()
    assert body["empty"] is True
    assert body["recovery_url"] == "/pedals"

    body = client.get("/api/pedals", params={"productLine": "Custom"}).json()
    assert body["kind"] == "custom"
    assert body["pedals"] == []


def test_filter_types():
    res = client.get("/api/pedals/types")
    assert res.json() == {"filters": ["All", "Overdrive", "Fuzz"]}


def test_get_pedal_by_slug():
    res = client.get("/api/pedals/slow-moon")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "coming_soon"
    assert body["price_formatted"] == "$175.00"
    assert body["checkout_eligible"] is False

    res = client.get("/api/pedals/does-not-exist")
    assert res.status_code == 404
    assert res.json() == {"error": "Pedal not found"}
