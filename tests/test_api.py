from fastapi.testclient import TestClient

from velokit.main import app


client = TestClient(app)


def test_list_bikes():
    resp = client.get("/api/bikes")

    assert resp.status_code == 200
    payload = resp.json()
    assert [b["name"] for b in payload] == ["road", "mountain", "recumbent"]
    mountain = payload[1]
    assert len(mountain["parts"]) == 4
    assert [p["name"] for p in mountain["spares"]] == ["chain", "tire_size", "rear_shock"]


def test_bike_spares():
    resp = client.get("/api/bikes/road/spares")

    assert resp.status_code == 200
    assert [p["description"] for p in resp.json()] == ["10-speed", "23", "red"]


def test_unknown_bike_is_404():
    resp = client.get("/api/bikes/tandem/spares")

    assert resp.status_code == 404


def test_build_parts_defaults_needs_spare():
    resp = client.post("/api/parts", json={"parts": [["chain", "10-speed"]]})

    assert resp.status_code == 200
    assert resp.json() == [{"name": "chain", "description": "10-speed", "needs_spare": True}]


def test_spares_filters_out_front_shock():
    resp = client.post(
        "/api/spares",
        json={
            "parts": [
                {"name": "front_shock", "description": "Manitou", "needsSpare": False},
                {"name": "rear_shock", "description": "Fox"},
            ]
        },
    )

    assert resp.status_code == 200
    assert [p["name"] for p in resp.json()] == ["rear_shock"]


def test_empty_parts():
    resp = client.post("/api/spares", json={"parts": []})

    assert resp.status_code == 200
    assert resp.json() == []


def test_malformed_descriptor_is_422():
    resp = client.post("/api/parts", json={"parts": [{"description": "10-speed"}]})

    assert resp.status_code == 422
    detail = resp.json()["detail"]
    assert detail[0]["type"] == "missing"
    assert detail[0]["loc"] == ["name"]


def test_bad_positional_descriptor_is_422():
    resp = client.post("/api/spares", json={"parts": [["chain", "10-speed", True, "x"]]})

    assert resp.status_code == 422
    assert resp.json()["detail"][0]["type"] == "descriptor_shape"


def test_zero_cog_is_400():
    resp = client.post("/api/gear-inches", json={"chainring": 52, "cog": 0, "rim": 26, "tire": 1.5})

    assert resp.status_code == 400
    assert "cog must be positive" in resp.json()["detail"]


def test_gear_inches():
    resp = client.post("/api/gear-inches", json={"chainring": 52, "cog": 11, "rim": 26, "tire": 1.5})

    assert resp.status_code == 200
    body = resp.json()
    assert abs(body["gear_inches"] - 137.09) < 0.01
    assert body["diameter"] == 29
