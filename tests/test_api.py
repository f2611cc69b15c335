"""Tests for the HTTP controller."""

from fastapi.testclient import TestClient

from nutrilog.api.app import create_app
from nutrilog.containers import AppContainer
from nutrilog.domain.foods import Food
from tests.conftest import RecordingObserver


def _client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def test_health(container: AppContainer) -> None:
    response = _client(container).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_state_reports_targets_and_totals(container: AppContainer) -> None:
    container.model.add_meal_from_entry("Chicken Breast #protein 40p 200cal")

    response = _client(container).get("/state")

    assert response.status_code == 200
    data = response.json()
    assert data["log_date"] == "2024-03-15"
    assert data["meals"][0]["name"] == "Chicken Breast"
    assert data["totals"]["calories"] == 200
    requirements = container.model.get_daily_requirements()
    assert data["requirements"]["calories"] == requirements.calories
    assert data["remaining_calories"] == requirements.calories - 200


def test_add_meal_entry(container: AppContainer, observer: RecordingObserver) -> None:
    response = _client(container).post(
        "/meals/entry", json={"entry": "Oats #breakfast 5p 27c 3f 150cal"}
    )

    assert response.status_code == 201
    data = response.json()
    assert data["category_tag"] == "#breakfast"
    assert data["carbs"] == 27
    assert len(container.model.meal_log) == 1
    assert len(observer.calls) == 1


def test_invalid_entry_is_bad_request(
    container: AppContainer, observer: RecordingObserver
) -> None:
    response = _client(container).post("/meals/entry", json={"entry": "not valid"})

    assert response.status_code == 400
    assert "not valid" in response.json()["detail"]
    assert observer.calls == []


def test_add_meal_with_portion(container: AppContainer) -> None:
    response = _client(container).post(
        "/meals",
        json={"name": "Rice", "protein": 2.5, "carbs": 28, "calories": 130, "portion": 2},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["calories"] == 260
    assert data["category_tag"] == "#uncategorized"
    assert data["consumed_on"] == "2024-03-15"


def test_negative_meal_values_are_bad_request(container: AppContainer) -> None:
    response = _client(container).post(
        "/meals", json={"name": "Rice", "calories": -1}
    )

    assert response.status_code == 400
    assert len(container.model.meal_log) == 0


def test_update_and_remove_meal(container: AppContainer) -> None:
    meal = container.model.add_meal_from_entry("Apple #snack 95cal")
    client = _client(container)

    update = client.put(
        f"/meals/{meal.id}",
        json={"name": "Pear", "protein": 0.5, "carbs": 21, "fat": 0.2, "calories": 85},
    )
    removal = client.delete(f"/meals/{meal.id}")

    assert update.status_code == 200
    assert update.json()["name"] == "Pear"
    assert removal.status_code == 200
    assert len(container.model.meal_log) == 0


def test_unknown_meal_is_not_found(container: AppContainer) -> None:
    client = _client(container)

    assert client.delete("/meals/missing").status_code == 404
    assert client.post("/meals/missing/save-as-food").status_code == 404


def test_custom_food_lifecycle(container: AppContainer) -> None:
    client = _client(container)

    created = client.post(
        "/foods",
        json={"name": "Greek Yogurt", "protein": 10, "carbs": 4, "fat": 0, "calories": 60},
    )
    logged = client.post("/foods/greek yogurt/log", json={"portion": 1.5})
    listed = client.get("/foods")
    removed = client.delete("/foods/GREEK YOGURT")
    missing = client.delete("/foods/GREEK YOGURT")

    assert created.status_code == 201
    assert logged.status_code == 201
    assert logged.json()["calories"] == 90
    assert listed.json()["foods"][0]["name"] == "Greek Yogurt"
    assert removed.status_code == 200
    assert missing.status_code == 404


def test_save_meal_as_food(container: AppContainer) -> None:
    meal = container.model.add_meal_from_entry("Protein Shake #snack 30p 160cal")

    response = _client(container).post(f"/meals/{meal.id}/save-as-food")

    assert response.status_code == 201
    assert container.model.food_database.get_food("protein shake") == Food(
        "Protein Shake", 0, 0, 0, 0
    )


def test_update_profile(container: AppContainer) -> None:
    response = _client(container).put(
        "/profile",
        json={
            "weight_kg": 60,
            "height_cm": 165,
            "age": 25,
            "activity_level": "LIGHTLY_ACTIVE",
            "goal": "GAIN_WEIGHT",
        },
    )

    assert response.status_code == 200
    assert container.model.user_profile.weight_kg == 60
    assert container.model.user_profile.goal.value == "GAIN_WEIGHT"


def test_invalid_profile_is_bad_request(container: AppContainer) -> None:
    response = _client(container).put(
        "/profile",
        json={
            "weight_kg": 0,
            "height_cm": 165,
            "age": 25,
            "activity_level": "LIGHTLY_ACTIVE",
            "goal": "GAIN_WEIGHT",
        },
    )

    assert response.status_code == 400
    assert container.model.user_profile.weight_kg == 70


def test_today_summary(container: AppContainer) -> None:
    container.model.add_meal_from_entry("Apple #snack 95cal")

    response = _client(container).get("/today")

    assert response.status_code == 200
    assert "2024-03-15 totals:" in response.text
    assert "Apple #snack" in response.text
    assert "Remaining:" in response.text


def test_export_writes_csv(container: AppContainer) -> None:
    container.model.add_meal_from_entry("Apple #snack 95cal")

    response = _client(container).post("/export", json={"filename": "day"})

    assert response.status_code == 200
    path = container.settings.export_dir / "day.csv"
    assert response.json()["path"] == str(path)
    assert path.read_text(encoding="utf-8").startswith("Log Date,Meal ID")


def test_export_failure_is_reported(container: AppContainer) -> None:
    container.settings.export_dir.parent.mkdir(parents=True, exist_ok=True)
    container.settings.export_dir.write_text("not a directory", encoding="utf-8")

    response = _client(container).post("/export", json={})

    assert response.status_code == 500
    assert "Failed to export data" in response.json()["detail"]


def test_non_finite_profile_is_bad_request(container: AppContainer) -> None:
    response = _client(container).put(
        "/profile",
        content=(
            '{"weight_kg": NaN, "height_cm": 165, "age": 25, '
            '"activity_level": "LIGHTLY_ACTIVE", "goal": "GAIN_WEIGHT"}'
        ),
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert container.model.user_profile.weight_kg == 70


def test_names_are_stripped(container: AppContainer) -> None:
    client = _client(container)

    client.post(
        "/foods",
        json={"name": "Apple", "protein": 0.3, "carbs": 25, "fat": 0.2, "calories": 95},
    )
    created = client.post(
        "/foods",
        json={"name": " Apple ", "protein": 0.3, "carbs": 25, "fat": 0.2, "calories": 95},
    )
    meal = client.post("/meals", json={"name": "  Rice ", "calories": 130})

    assert created.json()["name"] == "Apple"
    assert len(client.get("/foods").json()["foods"]) == 1
    assert meal.json()["name"] == "Rice"
