"""
Tests for the defense scheduling API endpoints.
"""

from datetime import datetime
from datetime import time
from datetime import timedelta
from uuid import uuid4

import pytest
from django.test import Client
from django.utils import timezone

from capstone_tracker.projects.models import ProjectStatus
from capstone_tracker.projects.tests.factories import ProjectFactory


def at(day_offset: int, hour: int) -> datetime:
    day = timezone.localdate() + timedelta(days=day_offset)
    return timezone.make_aware(datetime.combine(day, time(hour)))


@pytest.fixture
def client():
    return Client()


@pytest.fixture
def schedule_payload():
    return {
        "date_time": at(4, 9).isoformat(),
        "venue": "ICS Room 101",
        "panel_members": ["Joseph Sieras", "Reymark Delena"],
        "documenter": "Llewelyn Elcana",
    }


@pytest.mark.django_db
class TestScheduleEndpoint:
    """Tests for POST /api/defenses/{project_id}."""

    def test_schedule_defense(self, client, schedule_payload):
        project = ProjectFactory()

        response = client.post(f"/api/defenses/{project.id}", data=schedule_payload, content_type="application/json")

        assert response.status_code == 200
        data = response.json()
        assert data["project"]["status"] == ProjectStatus.APPROVED
        assert data["project"]["venue"] == "ICS Room 101"
        assert data["defenses_on_day"] == 0
        assert data["warning"] is None

    def test_past_date_conflict(self, client, schedule_payload):
        project = ProjectFactory()
        schedule_payload["date_time"] = (timezone.now() - timedelta(days=1)).isoformat()

        response = client.post(f"/api/defenses/{project.id}", data=schedule_payload, content_type="application/json")

        assert response.status_code == 409
        assert response.json()["message"] == "Cannot schedule defense for past dates."

    def test_missing_venue(self, client, schedule_payload):
        project = ProjectFactory()
        schedule_payload["venue"] = ""

        response = client.post(f"/api/defenses/{project.id}", data=schedule_payload, content_type="application/json")

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_full_day_conflict(self, client, schedule_payload):
        for hour in (9, 10, 11, 13):
            ProjectFactory(status=ProjectStatus.APPROVED, defense_schedule=at(4, hour))
        project = ProjectFactory()
        schedule_payload["date_time"] = at(4, 15).isoformat()

        response = client.post(f"/api/defenses/{project.id}", data=schedule_payload, content_type="application/json")

        assert response.status_code == 409
        project.refresh_from_db()
        assert project.defense_schedule is None

    def test_unknown_project(self, client, schedule_payload):
        response = client.post(f"/api/defenses/{uuid4()}", data=schedule_payload, content_type="application/json")

        assert response.status_code == 404


@pytest.mark.django_db
class TestAvailabilityEndpoint:
    """Tests for GET /api/defenses/availability."""

    def test_free_day(self, client):
        response = client.get("/api/defenses/availability", {"date_time": at(4, 9).isoformat()})

        assert response.status_code == 200
        data = response.json()
        assert data["scheduled"] == 0
        assert data["available"] is True
        assert data["day"] == at(4, 9).date().isoformat()

    def test_full_day(self, client):
        for hour in (9, 10, 11, 13):
            ProjectFactory(status=ProjectStatus.APPROVED, defense_schedule=at(4, hour))

        response = client.get("/api/defenses/availability", {"date_time": at(4, 8).isoformat()})

        data = response.json()
        assert data["scheduled"] == 4
        assert data["available"] is False
