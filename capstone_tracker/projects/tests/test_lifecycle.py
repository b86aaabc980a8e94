"""
Tests for the project lifecycle engine and the Project FSM transitions.
"""

from datetime import timedelta
from uuid import uuid4

import pytest
from django.utils import timezone

from capstone_tracker.core.exceptions import NotFoundError
from capstone_tracker.core.exceptions import ValidationError
from capstone_tracker.faculty.tests.factories import CS_DEPARTMENT
from capstone_tracker.faculty.tests.factories import ICS_COLLEGE
from capstone_tracker.faculty.tests.factories import FacultyMemberFactory
from capstone_tracker.projects.lifecycle import LifecycleEngine
from capstone_tracker.projects.lifecycle import validate_project_data
from capstone_tracker.projects.models import DefenseResult
from capstone_tracker.projects.models import Project
from capstone_tracker.projects.models import ProjectProgress
from capstone_tracker.projects.models import ProjectStatus
from capstone_tracker.projects.models import ProjectType
from capstone_tracker.projects.tests.factories import ProjectFactory


@pytest.fixture
def engine():
    return LifecycleEngine()


@pytest.fixture
def project_data():
    return {
        "project_type": ProjectType.PROPOSAL,
        "title": "Flood Monitoring With LoRa Sensors",
        "college": ICS_COLLEGE,
        "department": CS_DEPARTMENT,
        "adviser": "Janice Wade",
        "members": ["Ana Cruz", "Ben Santos", "Carla Reyes"],
        "description": "Early warning system for riverside barangays.",
    }


@pytest.fixture
def defended_final(db):
    """A final project whose defense was scheduled and passed."""
    return ProjectFactory(
        project_type=ProjectType.FINAL,
        status=ProjectStatus.APPROVED,
        progress=ProjectProgress.FINAL_DEFENDED,
        defense_schedule=timezone.now() - timedelta(days=1),
        venue="ICS Room 101",
        panel_members=["Joseph Sieras", "Reymark Delena"],
        documenter="Llewelyn Elcana",
        defense_result=DefenseResult.PASSED,
    )


def scheduled(**kwargs):
    return ProjectFactory(
        defense_schedule=timezone.now() + timedelta(days=2),
        venue="ICS Room 101",
        panel_members=["Joseph Sieras", "Reymark Delena"],
        documenter="Llewelyn Elcana",
        **kwargs,
    )


class TestValidateProjectData:
    """Tests for validate_project_data."""

    def test_valid_data_is_cleaned(self, project_data):
        project_data["title"] = "  Flood Monitoring  "
        project_data["members"] = ["Ana Cruz", "  ", "Ben Santos "]

        record = validate_project_data(project_data)

        assert record["title"] == "Flood Monitoring"
        assert record["members"] == ["Ana Cruz", "Ben Santos"]

    @pytest.mark.parametrize(
        ("field", "value", "message"),
        [
            ("title", "  ", "Project title is required."),
            ("college", "", "College is required."),
            ("college", "COLLEGE OF MAGIC", "Invalid college selected."),
            ("department", "", "Department is required."),
            ("department", "Department of Nursing", "Invalid department selected."),
            ("adviser", "", "Adviser is required."),
            ("members", [], "At least one group member is required."),
            ("project_type", "thesis", "Project type is required."),
        ],
    )
    def test_invalid_field(self, project_data, field, value, message):
        project_data[field] = value

        with pytest.raises(ValidationError) as exc_info:
            validate_project_data(project_data)
        assert exc_info.value.message == message

    def test_members_must_be_a_list(self, project_data):
        project_data["members"] = "Ana Cruz"

        with pytest.raises(ValidationError) as exc_info:
            validate_project_data(project_data)
        assert exc_info.value.message == "Group members must be a list of names."


@pytest.mark.django_db
class TestAddProject:
    """Tests for LifecycleEngine.add_project."""

    def test_add_project_roundtrip(self, engine, project_data):
        result = engine.add_project(project_data)

        listed = {p.id: p for p in engine.repository.list_projects()}
        project = listed[result.project.id]
        for name, value in project_data.items():
            assert getattr(project, name) == value
        assert project.status == ProjectStatus.PENDING
        assert project.progress == ProjectProgress.IN_PROGRESS
        assert project.defense_schedule is None

    def test_inventory_import_starts_defended(self, engine, project_data):
        project_data["project_type"] = ProjectType.INVENTORY

        project = engine.add_project(project_data).project

        assert project.status == ProjectStatus.APPROVED
        assert project.progress == ProjectProgress.FINAL_DEFENDED

    def test_title_contained_in_existing_rejected(self, engine, project_data):
        ProjectFactory(title="Flood Monitoring With LoRa Sensors and Drones")

        with pytest.raises(ValidationError) as exc_info:
            engine.add_project(project_data)
        assert exc_info.value.message == "A similar project title already exists."

    def test_title_containing_existing_rejected(self, engine, project_data):
        ProjectFactory(title="flood monitoring")

        with pytest.raises(ValidationError):
            engine.add_project(project_data)
        assert Project.objects.count() == 1

    def test_unrelated_title_accepted(self, engine, project_data):
        ProjectFactory(title="Crop Yield Forecasting")

        engine.add_project(project_data)

        assert Project.objects.count() == 2

    def test_unknown_adviser_allowed_by_default(self, engine, project_data):
        project_data["adviser"] = "Visiting Professor"

        assert engine.add_project(project_data).project.adviser == "Visiting Professor"

    def test_unknown_adviser_rejected_in_strict_mode(self, engine, project_data, settings):
        settings.CAPSTONE_STRICT_FACULTY_REFERENCES = True

        with pytest.raises(ValidationError):
            engine.add_project(project_data)

        FacultyMemberFactory(name="Janice Wade")
        assert engine.add_project(project_data).project.adviser == "Janice Wade"


@pytest.mark.django_db
class TestStatusAndProgress:
    """Tests for update_status and update_progress."""

    @pytest.mark.parametrize(
        ("start", "target"),
        [
            (ProjectStatus.PENDING, ProjectStatus.APPROVED),
            (ProjectStatus.PENDING, ProjectStatus.REJECTED),
            (ProjectStatus.REJECTED, ProjectStatus.APPROVED),
            (ProjectStatus.APPROVED, ProjectStatus.PENDING),
        ],
    )
    def test_status_is_overwritten(self, engine, start, target):
        project = ProjectFactory(status=start)

        result = engine.update_status(project.id, target)

        assert result.project.status == target
        assert Project.objects.get(id=project.id).status == target

    def test_update_status_is_idempotent(self, engine):
        project = ProjectFactory()

        engine.update_status(project.id, ProjectStatus.APPROVED)
        once = Project.objects.values("status", "progress", "defense_result").get(id=project.id)
        engine.update_status(project.id, ProjectStatus.APPROVED)
        twice = Project.objects.values("status", "progress", "defense_result").get(id=project.id)

        assert once == twice

    def test_invalid_status(self, engine):
        project = ProjectFactory()

        with pytest.raises(ValidationError):
            engine.update_status(project.id, "archived")

    def test_status_of_missing_project(self, engine):
        with pytest.raises(NotFoundError):
            engine.update_status(uuid4(), ProjectStatus.APPROVED)

    def test_update_progress(self, engine):
        project = ProjectFactory()

        engine.update_progress(project.id, "Chapter 3 Revisions")

        assert Project.objects.get(id=project.id).progress == "Chapter 3 Revisions"

    def test_empty_progress_rejected(self, engine):
        project = ProjectFactory()

        with pytest.raises(ValidationError):
            engine.update_progress(project.id, " ")

    def test_delete_project(self, engine):
        project = ProjectFactory()

        result = engine.delete_project(project.id)

        assert result.projects == []


@pytest.mark.django_db
class TestSetDefenseResult:
    """Tests for set_defense_result."""

    def test_passed_proposal(self, engine):
        project = scheduled(status=ProjectStatus.APPROVED)

        result = engine.set_defense_result(project.id, DefenseResult.PASSED)

        project.refresh_from_db()
        assert result.project.status == ProjectStatus.APPROVED
        assert project.status == ProjectStatus.APPROVED
        assert project.progress == ProjectProgress.PROPOSAL_DEFENDED
        assert project.defense_result == DefenseResult.PASSED

    def test_passed_final(self, engine):
        project = scheduled(project_type=ProjectType.FINAL, status=ProjectStatus.APPROVED)

        engine.set_defense_result(project.id, DefenseResult.PASSED)

        project.refresh_from_db()
        assert project.progress == ProjectProgress.FINAL_DEFENDED

    def test_failed_keeps_progress(self, engine):
        project = scheduled(status=ProjectStatus.APPROVED, progress="Chapter 2")

        engine.set_defense_result(project.id, DefenseResult.FAILED)

        project.refresh_from_db()
        assert project.status == ProjectStatus.REJECTED
        assert project.progress == "Chapter 2"
        assert project.defense_result == DefenseResult.FAILED

    def test_requires_scheduled_defense(self, engine):
        project = ProjectFactory()

        with pytest.raises(ValidationError) as exc_info:
            engine.set_defense_result(project.id, DefenseResult.PASSED)
        assert exc_info.value.message == "No defense has been scheduled for this project."

    def test_invalid_result(self, engine):
        project = scheduled()

        with pytest.raises(ValidationError):
            engine.set_defense_result(project.id, "postponed")

    def test_missing_project(self, engine):
        with pytest.raises(NotFoundError):
            engine.set_defense_result(uuid4(), DefenseResult.PASSED)


@pytest.mark.django_db
class TestMoveToFinals:
    """Tests for move_to_finals."""

    def test_move_to_finals(self, engine):
        proposal = scheduled(
            status=ProjectStatus.APPROVED,
            progress=ProjectProgress.PROPOSAL_DEFENDED,
            defense_result=DefenseResult.PASSED,
        )

        result = engine.move_to_finals(proposal.id)

        ids = [p.id for p in result.projects]
        assert proposal.id not in ids
        finals = Project.objects.filter(project_type=ProjectType.FINAL)
        assert finals.count() == 1
        final = finals.get()
        assert final.id == result.project.id
        assert final.status == ProjectStatus.PENDING
        assert final.progress == ProjectProgress.IN_PROGRESS
        assert final.proposal_id == proposal.id
        assert final.title == proposal.title
        assert final.members == proposal.members
        assert final.adviser == proposal.adviser
        assert final.defense_schedule is None
        assert final.panel_members == []
        assert final.defense_result == ""

    def test_only_proposals_move_to_finals(self, engine):
        final = ProjectFactory(project_type=ProjectType.FINAL)

        with pytest.raises(ValidationError):
            engine.move_to_finals(final.id)
        assert Project.objects.filter(id=final.id).exists()

    def test_missing_proposal(self, engine):
        with pytest.raises(NotFoundError):
            engine.move_to_finals(uuid4())


@pytest.mark.django_db
class TestMoveToInventory:
    """Tests for move_to_inventory."""

    def test_move_to_inventory_keeps_defense(self, engine, defended_final):
        result = engine.move_to_inventory(defended_final.id)

        assert not Project.objects.filter(id=defended_final.id).exists()
        inventory = Project.objects.get(project_type=ProjectType.INVENTORY)
        assert inventory.id == result.project.id
        assert inventory.status == ProjectStatus.APPROVED
        assert inventory.progress == ProjectProgress.FINAL_DEFENDED
        assert inventory.original_id == defended_final.id
        assert inventory.defense_schedule == defended_final.defense_schedule
        assert inventory.venue == defended_final.venue
        assert inventory.panel_members == defended_final.panel_members
        assert inventory.documenter == defended_final.documenter

    def test_only_finals_move_to_inventory(self, engine):
        proposal = ProjectFactory()

        with pytest.raises(ValidationError):
            engine.move_to_inventory(proposal.id)
        assert Project.objects.count() == 1


@pytest.mark.django_db
class TestProjectTransitions:
    """Tests for the FSM transitions on Project."""

    def test_approve_for_defense_from_rejected(self):
        project = ProjectFactory(status=ProjectStatus.REJECTED)

        project.approve_for_defense()

        assert project.status == ProjectStatus.APPROVED

    def test_pass_defense_on_inventory_leaves_progress(self):
        project = ProjectFactory(project_type=ProjectType.INVENTORY, progress=ProjectProgress.FINAL_DEFENDED)

        project.pass_defense()

        assert project.progress == ProjectProgress.FINAL_DEFENDED
        assert project.defense_result == DefenseResult.PASSED

    def test_has_defense(self):
        assert not ProjectFactory().has_defense
        assert scheduled().has_defense
