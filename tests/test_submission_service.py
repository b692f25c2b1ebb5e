"""
Unit tests for SubmissionService - filing, search, tracking and status updates.
"""

import pytest
from django.db import DatabaseError

from grievances.models import Submission
from grievances.services.submission_service import SubmissionService


@pytest.mark.django_db
class TestSubmissionServiceFiling:
    """Test cases for filing submissions."""

    def setup_method(self):
        """Set up test dependencies."""
        self.service = SubmissionService()

    def test_file_submission_success(self, sample_submission_data):
        result = self.service.file_submission(sample_submission_data)

        assert result == {"success": True, "id": "TNK-001"}
        submission = Submission.objects.get(pk="TNK-001")
        assert submission.status == "pending"
        assert len(submission.history) == 1
        assert submission.resolved_at is None

    def test_file_submission_blank_status_defaults_to_pending(self, sample_submission_data):
        self.service.file_submission({**sample_submission_data, "status": ""})

        assert Submission.objects.get(pk="TNK-001").status == "pending"

    @pytest.mark.parametrize(
        "field", ["id", "name", "phone", "taluk", "firka", "village", "description"]
    )
    def test_file_submission_missing_required_field(self, sample_submission_data, field):
        data = {**sample_submission_data, field: ""}

        result = self.service.file_submission(data)

        assert result["success"] is False
        assert result["error"] == "validation"
        assert field in result["message"]
        assert not Submission.objects.exists()

    def test_file_submission_invalid_type(self, sample_submission_data):
        result = self.service.file_submission({**sample_submission_data, "type": "request"})

        assert result["success"] is False
        assert result["error"] == "validation"

    def test_file_submission_duplicate(self, sample_submission_data):
        self.service.file_submission(sample_submission_data)

        result = self.service.file_submission(sample_submission_data)

        assert result["success"] is False
        assert result["error"] == "duplicate"
        assert "TNK-001" in result["message"]

    def test_file_submission_ignores_unknown_fields(self, sample_submission_data):
        result = self.service.file_submission({**sample_submission_data, "priority": 1})

        assert result["success"] is True

    def test_file_submission_database_error(self, sample_submission_data, mocker):
        store = mocker.Mock()
        store.create_submission.side_effect = DatabaseError("connection refused")
        service = SubmissionService(store=store)

        result = service.file_submission(sample_submission_data)

        assert result == {"success": False, "error": "database", "message": "connection refused"}


@pytest.mark.django_db
class TestSubmissionServiceLookup:
    """Test cases for fetching and tracking submissions."""

    def setup_method(self):
        """Set up test dependencies."""
        self.service = SubmissionService()

    def test_get_submission(self, create_submission):
        create_submission()

        result = self.service.get_submission("TNK-001")

        assert result["success"] is True
        assert result["submission"].id == "TNK-001"

    def test_get_submission_unknown_id_is_none(self):
        result = self.service.get_submission("missing")

        assert result == {"success": True, "submission": None}

    def test_get_submission_twice_is_identical(self, create_submission):
        create_submission()

        first = self.service.get_submission("TNK-001")["submission"]
        second = self.service.get_submission("TNK-001")["submission"]

        assert first.history == second.history
        assert first.last_updated == second.last_updated
        assert first.description == second.description

    def test_track_phone_formats_are_equivalent(self, create_submission):
        create_submission(phone="9876543210")

        formatted = self.service.track("TNK-001", "+91 98765-43210")["submission"]
        plain = self.service.track("TNK-001", "9876543210")["submission"]

        assert formatted is not None
        assert formatted == plain

    def test_track_wrong_phone_returns_none(self, create_submission):
        create_submission()

        result = self.service.track("TNK-001", "9000000001")

        assert result == {"success": True, "submission": None}

    def test_track_unknown_id_looks_like_wrong_phone(self):
        assert self.service.track("NOPE", "9876543210") == {"success": True, "submission": None}

    def test_track_database_error(self, mocker):
        store = mocker.Mock()
        store.get_by_id_and_phone.side_effect = DatabaseError("timeout")

        result = SubmissionService(store=store).track("TNK-001", "9876543210")

        assert result["success"] is False
        assert result["error"] == "database"


@pytest.mark.django_db
class TestSubmissionServiceSearch:
    """Test cases for searching submissions."""

    def setup_method(self):
        """Set up test dependencies."""
        self.service = SubmissionService()

    def test_search_by_status(self, create_submission):
        create_submission(id="S-1")
        create_submission(id="S-2")
        self.service.update_status("S-2", "in-progress")

        result = self.service.search({"status": "pending"})

        assert result["success"] is True
        assert [s.id for s in result["submissions"]] == ["S-1"]

    def test_search_free_text(self, create_submission):
        create_submission(id="S-1", description="Flood water entered houses")
        create_submission(id="S-2", description="Broken handpump")

        result = self.service.search({"q": "flood"})

        assert [s.id for s in result["submissions"]] == ["S-1"]

    def test_search_without_criteria_returns_all(self, create_submission):
        create_submission(id="S-1")
        create_submission(id="S-2")

        assert len(self.service.search({})["submissions"]) == 2

    def test_search_no_matches(self, create_submission):
        create_submission()

        assert self.service.search({"village": "Elsewhere"}) == {"success": True, "submissions": []}


@pytest.mark.django_db
class TestSubmissionServiceStatus:
    """Test cases for status updates."""

    def setup_method(self):
        """Set up test dependencies."""
        self.service = SubmissionService()

    def test_update_status_scenario(self, create_submission):
        create_submission(id="OTHER-1")
        create_submission()

        result = self.service.update_status("TNK-001", "in-progress", "Inspector assigned")

        assert result == {"success": True}
        submission = self.service.get_submission("TNK-001")["submission"]
        assert submission.description.endswith("Inspector assigned")
        assert submission.history[-1]["status"] == "in-progress"
        assert submission.history[-1]["response"] == "Inspector assigned"
        listed = self.service.search({})["submissions"]
        assert listed[0].id == "TNK-001"

    def test_resolved_is_sticky(self, create_submission):
        create_submission()

        self.service.update_status("TNK-001", "resolved")
        resolved_at = Submission.objects.get(pk="TNK-001").resolved_at
        assert resolved_at is not None

        self.service.update_status("TNK-001", "reopened")
        submission = Submission.objects.get(pk="TNK-001")
        assert submission.resolved_at == resolved_at
        assert submission.status == "reopened"
        assert len(submission.history) == 3

    def test_blank_response_is_not_appended(self, create_submission):
        create_submission()

        self.service.update_status("TNK-001", "in-progress", "")

        submission = Submission.objects.get(pk="TNK-001")
        assert submission.description == "Drainage overflow near the bus stand"
        assert submission.history[-1]["response"] is None

    def test_update_status_missing_status(self, create_submission):
        create_submission()

        result = self.service.update_status("TNK-001", "")

        assert result["error"] == "validation"
        assert len(Submission.objects.get(pk="TNK-001").history) == 1

    def test_update_status_unknown_id(self):
        result = self.service.update_status("missing", "resolved")

        assert result["success"] is False
        assert result["error"] == "not_found"
