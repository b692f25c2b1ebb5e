import logging

from django.db import DatabaseError

from grievances.exceptions import DuplicateId, NotFound, ValidationError
from grievances.filters import build_criteria
from grievances.models import Submission

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("id", "name", "phone", "taluk", "firka", "village", "description")

SUBMISSION_FIELDS = (
    "id",
    "type",
    "name",
    "phone",
    "email",
    "department",
    "category",
    "taluk",
    "firka",
    "village",
    "description",
    "urgency",
    "status",
    "photos",
)


def _failure(error: str, message: str) -> dict:
    return {"success": False, "error": error, "message": message}


class SubmissionService:
    """Service class for filing, searching, tracking and updating submissions."""

    def __init__(self, store=None):
        self.store = store if store is not None else Submission.objects

    def file_submission(self, data: dict) -> dict:
        """
        File a new complaint or petition.

        Args:
            data: Submission fields as sent by the citizen. Timestamps and
                history are ignored; the store sets them.

        Returns:
            dict: 'success' and the assigned 'id', or 'error' and 'message'
        """
        missing = [field for field in REQUIRED_FIELDS if not data.get(field)]
        if missing:
            return _failure("validation", f"Missing required fields: {', '.join(missing)}")

        fields = {key: data.get(key) for key in SUBMISSION_FIELDS if key in data}
        fields["status"] = data.get("status") or Submission.STATUS_PENDING
        submission_id = fields["id"]

        try:
            self.store.create_submission(**fields)
        except ValidationError as e:
            return _failure("validation", str(e))
        except DuplicateId as e:
            logger.warning(f"Rejected duplicate submission {submission_id}")
            return _failure("duplicate", str(e))
        except DatabaseError as e:
            logger.error(f"Error filing submission {submission_id}: {str(e)}")
            return _failure("database", str(e))

        logger.info(f"Filed {fields.get('type')} {submission_id}")
        return {"success": True, "id": submission_id}

    def search(self, params) -> dict:
        """
        List submissions matching the given filter parameters.

        Args:
            params: Mapping with any of type, status, category, department,
                taluk, firka, village and the free-text term q

        Returns:
            dict: 'success' and 'submissions' (most recently updated first)
        """
        try:
            submissions = self.store.list_filtered(build_criteria(params))
        except DatabaseError as e:
            logger.error(f"Error searching submissions: {str(e)}")
            return _failure("database", str(e))
        return {"success": True, "submissions": submissions}

    def get_submission(self, submission_id: str) -> dict:
        """Fetch one submission. An unknown id gives a None payload."""
        try:
            submission = self.store.get_by_id(submission_id)
        except NotFound:
            submission = None
        except DatabaseError as e:
            logger.error(f"Error fetching submission {submission_id}: {str(e)}")
            return _failure("database", str(e))
        return {"success": True, "submission": submission}

    def track(self, submission_id: str, phone: str) -> dict:
        """
        Citizen tracking by id and phone number.

        A wrong phone and an unknown id both give a None payload, so the
        response never reveals whether the id exists.
        """
        try:
            submission = self.store.get_by_id_and_phone(submission_id, phone)
        except DatabaseError as e:
            logger.error(f"Error tracking submission {submission_id}: {str(e)}")
            return _failure("database", str(e))
        return {"success": True, "submission": submission}

    def update_status(self, submission_id: str, status: str, response: str | None = None) -> dict:
        """
        Record a status change, optionally with an official response.

        Returns:
            dict: 'success', or 'error' and 'message'
        """
        if not status:
            return _failure("validation", "Missing required field: status")

        try:
            self.store.transition_status(submission_id, status, response or None)
        except NotFound as e:
            logger.warning(f"Status update for unknown submission {submission_id}")
            return _failure("not_found", str(e))
        except DatabaseError as e:
            logger.error(f"Error updating status of submission {submission_id}: {str(e)}")
            return _failure("database", str(e))

        return {"success": True}
