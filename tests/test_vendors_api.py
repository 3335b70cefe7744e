"""
HTTP tests for /api/v1/vendors — record store endpoints and the stateless
filtered listing seeded from query parameters.
"""

from __future__ import annotations

from fastapi.testclient import TestClient


def listed_ids(resp) -> list[str]:
    assert resp.status_code == 200, resp.text
    return [item["id"] for item in resp.json()["data"]]


def test_health(client: TestClient):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


class TestRecordStore:
    def test_create_and_fetch(self, client, create_vendor):
        created = create_vendor(
            "P1",
            name="Dafa Plumbing",
            taxId="12345678",
            categories=["Plumbing"],
            serviceArea=["Taipei"],
            rating=4.8,
            contactLogs=[{"date": "2024-05-01", "status": "busy"}],
            transactions=[{"date": "2024-04-01", "amount": 1200}],
        )
        assert created["taxId"] == "12345678"
        assert created["isFavorite"] is False
        assert len(created["contactLogs"]) == 1

        resp = client.get("/api/v1/vendors/P1")
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["name"] == "Dafa Plumbing"
        assert data["transactions"][0]["date"] == "2024-04-01"

    def test_missing_vendor_is_404(self, client):
        resp = client.get("/api/v1/vendors/nope")
        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "NOT_FOUND"

    def test_duplicate_id_is_409(self, client, create_vendor):
        create_vendor("P1")
        resp = client.post("/api/v1/vendors", json={"id": "P1", "name": "Again"})
        assert resp.status_code == 409
        assert resp.json()["error"]["code"] == "DUPLICATE_VENDOR"

    def test_invalid_rating_is_422(self, client):
        resp = client.post("/api/v1/vendors", json={"name": "Too good", "rating": 7})
        assert resp.status_code == 422
        assert resp.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_toggle_favorite_returns_new_record(self, client, create_vendor):
        create_vendor("P1")
        first = client.post("/api/v1/vendors/P1/favorite")
        assert first.status_code == 200
        assert first.json()["data"]["isFavorite"] is True

        second = client.post("/api/v1/vendors/P1/favorite")
        assert second.json()["data"]["isFavorite"] is False

    def test_toggle_favorite_missing_vendor(self, client):
        assert client.post("/api/v1/vendors/nope/favorite").status_code == 404


class TestListing:
    def test_excludes_blacklisted_by_default(self, client, create_vendor):
        """Scenario A through HTTP."""
        create_vendor("P1", rating=5)
        create_vendor("P2", rating=2, isBlacklisted=True)

        assert listed_ids(client.get("/api/v1/vendors")) == ["P1"]
        assert listed_ids(client.get("/api/v1/vendors?blacklisted=true")) == ["P2"]

    def test_sort_and_rating_threshold(self, client, create_vendor):
        create_vendor("X", rating=3)
        create_vendor("Y", rating=5)
        create_vendor("Z", rating=5)
        create_vendor("W", rating=1)

        resp = client.get("/api/v1/vendors?sort=rating-desc&minRating=2")
        assert listed_ids(resp) == ["Y", "Z", "X"]

    def test_special_filter_aliases(self, client, create_vendor):
        create_vendor("A", missedContactLogCount=2)
        create_vendor("B", contactLogs=[{"date": "2024-01-01"}])
        create_vendor("C")

        assert listed_ids(client.get("/api/v1/vendors?filter=missed")) == ["A"]
        assert listed_ids(client.get("/api/v1/vendors?filter=contacting")) == ["B"]
        assert listed_ids(client.get("/api/v1/vendors?filter=unknown")) == ["A", "B", "C"]

    def test_text_query_and_region(self, client, create_vendor):
        create_vendor("A", name="Shunda Glass", region="taiwan")
        create_vendor("B", name="Yongxing HVAC", region="taiwan", tags=["glass doors"])
        create_vendor("C", name="Shanghai Glass", region="china")

        assert listed_ids(client.get("/api/v1/vendors?q=GLASS&region=taiwan")) == ["A", "B"]

    def test_invalid_sort_is_422(self, client):
        assert client.get("/api/v1/vendors?sort=alphabetical").status_code == 422

    def test_pagination_meta(self, client, create_vendor):
        for vendor_id in ("A", "B", "C", "D", "E"):
            create_vendor(vendor_id)

        resp = client.get("/api/v1/vendors?page=2&limit=2")
        assert listed_ids(resp) == ["C", "D"]
        assert resp.json()["meta"] == {"total": 5, "page": 2, "limit": 2, "pages": 3}

    def test_summary(self, client, create_vendor):
        create_vendor("A", rating=4.0, region="china", entityType="individual")
        create_vendor("B", rating=5.0, isFavorite=True)

        resp = client.get("/api/v1/vendors/summary")
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["total"] == 2
        assert data["byRegion"] == {"taiwan": 1, "china": 1}
        assert data["companies"] == 1
        assert data["favorites"] == 1
        assert data["averageRating"] == 4.5
