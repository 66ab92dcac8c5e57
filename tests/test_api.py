"""Tests for the HTTP API."""

from uuid import uuid4

from fastapi.testclient import TestClient

from nutrify.api.app import create_app
from nutrify.services.tagging import StaticTagExtractor

IMAGE_DATA_URL = "data:image/jpeg;base64,/9j/AAAA"


def _food_payload(name: str = "Apple", calories: float = 95) -> dict[str, object]:
    return {
        "id": str(uuid4()),
        "name": name,
        "calories": calories,
        "protein": 0.5,
        "carbs": 25,
        "fat": 0.3,
        "portion": "1 medium (182g)",
        "timestamp": 1714550400000,
    }


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_recognize_returns_main_result(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/recognize", json={"imageDataUrl": IMAGE_DATA_URL})

    assert response.status_code == 200
    data = response.json()
    assert data["mainResult"]["name"] == "Apple"
    assert data["mainResult"]["confidence"] == 100
    assert data["alternatives"][0]["name"] == "Banana"


def test_recognize_returns_error_variant(
    container, tag_extractor: StaticTagExtractor
) -> None:
    tag_extractor.tags = frozenset()
    client = TestClient(create_app(container))

    response = client.post("/recognize", json={"imageDataUrl": IMAGE_DATA_URL})

    assert response.status_code == 200
    data = response.json()
    assert "error" in data
    assert data["reason"] == "no_tags"
    assert "mainResult" not in data


def test_recognize_rejects_non_image_payload(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/recognize", json={"imageDataUrl": "hello"})

    assert response.status_code == 422


def test_search_foods(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/foods/search", params={"q": "salmon"})

    assert response.status_code == 200
    foods = response.json()["foods"]
    assert [food["name"] for food in foods] == ["Salmon"]
    assert foods[0]["protein"] == 22


def test_add_entry_updates_log_and_recent(container) -> None:
    client = TestClient(create_app(container))

    client.post("/log/2024-05-01/entries", json=_food_payload("Apple", 95))
    response = client.post("/log/2024-05-01/entries", json=_food_payload("Banana", 105))

    assert response.status_code == 200
    log = response.json()
    assert log["date"] == "2024-05-01"
    assert log["totalCalories"] == 200
    assert [item["name"] for item in log["foodItems"]] == ["Apple", "Banana"]

    recent = client.get("/recent").json()["foods"]
    assert [item["name"] for item in recent] == ["Banana", "Apple"]

    fetched = client.get("/log/2024-05-01").json()
    assert fetched == log


def test_get_log_for_new_day_is_empty(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/log/2024-06-01")

    assert response.json() == {
        "date": "2024-06-01",
        "foodItems": [],
        "totalCalories": 0.0,
        "totalProtein": 0.0,
        "totalCarbs": 0.0,
        "totalFat": 0.0,
    }


def test_favorites_round_trip(container) -> None:
    client = TestClient(create_app(container))
    payload = _food_payload()

    first = client.post("/favorites", json=payload).json()
    second = client.post("/favorites", json=payload).json()
    listed = client.get("/favorites").json()["foods"]
    client.delete(f"/favorites/{payload['id']}")
    after = client.get("/favorites").json()["foods"]

    assert first == {"added": True}
    assert second == {"added": False}
    assert [item["id"] for item in listed] == [payload["id"]]
    assert after == []


def test_profile_and_progress(container) -> None:
    client = TestClient(create_app(container))

    missing = client.get("/progress/2024-05-01")
    profile = client.put(
        "/profile",
        json={
            "name": "Sam",
            "goal": "maintain",
            "age": 30,
            "heightCm": 180,
            "weightKg": 80,
            "gender": "male",
            "activityLevel": "moderate",
        },
    ).json()
    client.post("/log/2024-05-01/entries", json=_food_payload("Apple", 95))
    progress = client.get("/progress/2024-05-01").json()

    assert missing.status_code == 404
    assert profile["dailyCalorieGoal"] == round(1780 * 1.55)
    assert progress["consumedCalories"] == 95
    assert progress["remainingCalories"] == profile["dailyCalorieGoal"] - 95


def test_profile_defaults_calorie_goal(container) -> None:
    client = TestClient(create_app(container))

    profile = client.put("/profile", json={"name": "Sam"}).json()

    assert profile["dailyCalorieGoal"] == 2000
    assert profile["goal"] == "maintain"
