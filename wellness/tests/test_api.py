"""
Tests for the HTTP routes.
"""
import pytest
from datetime import date

from fastapi.testclient import TestClient

from wellness.constants import API_KEY
from wellness.database import get_db, get_session_factory
from wellness.main import app
from wellness.models import HappinessScore
from wellness.services.catalog_service import CatalogService
from wellness.tests.conftest import USER_ID, add_activity, add_goal, add_habit, at

HEADERS = {"X-API-Key": API_KEY}


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestAuth:
    """Tests for API key protection"""

    def test_health_check_is_public(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "active"

    def test_missing_key_rejected(self, client):
        response = client.post(f"/api/happiness/{USER_ID}/compute")

        assert response.status_code == 401


class TestComputeRoute:
    """Tests for POST /api/happiness/{user_id}/compute"""

    def test_returns_breakdown(self, client, db_session, today):
        add_activity(db_session, "completed", at(today))
        add_goal(db_session, 10, 5)

        response = client.post(
            f"/api/happiness/{USER_ID}/compute",
            params={"score_date": today.isoformat()},
            headers=HEADERS
        )

        assert response.status_code == 200
        body = response.json()
        assert body["score_date"] == today.isoformat()
        assert body["activity_score"] == 100
        assert body["goal_score"] == 50
        assert body["overall_score"] == 40

    def test_malformed_date_is_bad_request(self, client):
        response = client.post(
            f"/api/happiness/{USER_ID}/compute",
            params={"score_date": "15/03/2026"},
            headers=HEADERS
        )

        assert response.status_code == 400

    def test_data_failure_is_service_unavailable(self, client, db_session, today):
        add_activity(db_session, "cancelled", at(today))

        response = client.post(
            f"/api/happiness/{USER_ID}/compute",
            params={"score_date": today.isoformat()},
            headers=HEADERS
        )

        assert response.status_code == 503


class TestTrackingRoutes:
    """Tests for tracking routes and the recompute they trigger"""

    def test_log_mood_recomputes_score(self, client, session_factory, today):
        response = client.post(
            f"/api/moods/{USER_ID}",
            json={"mood": "happy", "log_date": today.isoformat()},
            headers=HEADERS
        )
        assert response.status_code == 201
        assert response.json()["mood_score"] == 8

        check = session_factory()
        try:
            score = check.query(HappinessScore).filter_by(user_id=USER_ID, score_date=today).one()
        finally:
            check.close()
        assert score.mood_score == 80

    def test_log_mood_requires_mood_or_score(self, client):
        response = client.post(f"/api/moods/{USER_ID}", json={}, headers=HEADERS)

        assert response.status_code == 400

    def test_unknown_mood_is_bad_request(self, client):
        response = client.post(f"/api/moods/{USER_ID}", json={"mood": "grumpy"}, headers=HEADERS)

        assert response.status_code == 400

    def test_activity_lifecycle(self, client, today):
        created = client.post(
            f"/api/activities/{USER_ID}",
            json={"title": "Swim", "scheduled_start": at(today, 7).isoformat(), "duration_minutes": 40},
            headers=HEADERS
        )
        assert created.status_code == 201
        activity_id = created.json()["id"]

        updated = client.put(
            f"/api/activities/{activity_id}/status",
            json={"status": "completed"},
            headers=HEADERS
        )
        assert updated.status_code == 200
        assert updated.json()["completion_percentage"] == 100

        score = client.post(
            f"/api/happiness/{USER_ID}/compute",
            params={"score_date": today.isoformat()},
            headers=HEADERS
        )
        assert score.json()["activity_score"] == 100

    def test_missing_activity_is_not_found(self, client):
        response = client.put("/api/activities/999/status", json={"status": "completed"}, headers=HEADERS)

        assert response.status_code == 404

    def test_goal_progress(self, client, db_session):
        goal = add_goal(db_session, 10, 0)

        response = client.put(f"/api/goals/{goal.id}/progress", json={"current_value": 10}, headers=HEADERS)

        assert response.status_code == 200
        assert response.json()["is_completed"] is True

    def test_create_goal_and_habit(self, client):
        goal = client.post(
            f"/api/goals/{USER_ID}",
            json={"title": "Save", "target_value": 100, "unit": "USD"},
            headers=HEADERS
        )
        habit = client.post(f"/api/habits/{USER_ID}", json={"title": "Journal"}, headers=HEADERS)

        assert goal.status_code == 201
        assert goal.json()["is_completed"] is False
        assert habit.status_code == 201
        assert habit.json()["is_active"] is True

    def test_log_habit(self, client, db_session, today):
        habit = add_habit(db_session)

        response = client.post(
            f"/api/habits/{habit.id}/logs",
            json={"status": "partial", "log_date": today.isoformat()},
            headers=HEADERS
        )

        assert response.status_code == 201
        assert response.json()["status"] == "partial"

    def test_summary(self, client):
        response = client.get(f"/api/happiness/{USER_ID}/summary", headers=HEADERS)

        assert response.status_code == 200
        body = response.json()
        assert body["today_score"] == 0
        assert body["weekly_average"] == 0
        assert body["level"]["name"] == "Brave Warrior"
        assert body["active_habits"] == 0


def stored_score(session_factory, score_date):
    db = session_factory()
    try:
        return db.query(HappinessScore).filter_by(user_id=USER_ID, score_date=score_date).one()
    finally:
        db.close()


class TestEditRoutes:
    """Tests for editing and deleting goals and habits"""

    def test_deactivating_habit_recomputes_score(self, client, db_session, session_factory):
        habit = add_habit(db_session, ["completed"], start=date.today())
        client.post(f"/api/happiness/{USER_ID}/compute", headers=HEADERS)
        assert stored_score(session_factory, date.today()).habit_score == 100

        response = client.put(f"/api/habits/{habit.id}", json={"is_active": False}, headers=HEADERS)

        assert response.status_code == 200
        assert response.json()["is_active"] is False
        assert stored_score(session_factory, date.today()).habit_score == 0

    def test_delete_habit(self, client, db_session):
        habit = add_habit(db_session, ["completed"])

        first = client.delete(f"/api/habits/{habit.id}", headers=HEADERS)
        second = client.delete(f"/api/habits/{habit.id}", headers=HEADERS)

        assert first.status_code == 204
        assert second.status_code == 404

    def test_unknown_frequency_rejected(self, client, db_session):
        habit = add_habit(db_session)

        response = client.put(f"/api/habits/{habit.id}", json={"frequency": "hourly"}, headers=HEADERS)

        assert response.status_code == 422

    def test_edit_goal(self, client, db_session):
        goal = add_goal(db_session, 10, 6)

        response = client.put(f"/api/goals/{goal.id}", json={"target_value": 5, "unit": "km"}, headers=HEADERS)

        assert response.status_code == 200
        assert response.json()["unit"] == "km"
        assert response.json()["is_completed"] is True

    def test_delete_goal_recomputes_score(self, client, db_session, session_factory):
        add_goal(db_session, 10, 10)
        stalled = add_goal(db_session, 10, 0, title="Stalled")

        response = client.delete(f"/api/goals/{stalled.id}", headers=HEADERS)

        assert response.status_code == 204
        assert stored_score(session_factory, date.today()).goal_score == 100

    def test_missing_goal_is_not_found(self, client):
        response = client.delete("/api/goals/999", headers=HEADERS)

        assert response.status_code == 404

    def test_habit_streak(self, client, db_session):
        habit = add_habit(db_session, ["completed", "completed", "missed"], start=date.today())

        response = client.get(f"/api/habits/{habit.id}/streak", headers=HEADERS)

        assert response.status_code == 200
        assert response.json() == {"habit_id": habit.id, "streak": 2}


class TestCatalogRoutes:
    """Tests for the activity catalog routes"""

    def test_list_categories_and_subcategories(self, client, db_session):
        CatalogService(db_session).seed_defaults()

        categories = client.get("/api/categories", headers=HEADERS)
        assert categories.status_code == 200
        first = categories.json()[0]
        assert first["name"] == "Fitness"

        subcategories = client.get(f"/api/categories/{first['id']}/subcategories", headers=HEADERS)
        assert subcategories.status_code == 200
        assert subcategories.json()[0]["name"] == "Running"

    def test_unknown_subcategory_is_bad_request(self, client, today):
        response = client.post(
            f"/api/activities/{USER_ID}",
            json={"title": "Swim", "scheduled_start": at(today, 7).isoformat(), "subcategory_id": 42},
            headers=HEADERS
        )

        assert response.status_code == 400
