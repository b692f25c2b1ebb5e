import logging

from django.db import IntegrityError, models, transaction
from django.utils import timezone

from grievances.exceptions import DuplicateId, NotFound, ValidationError
from grievances.filters import compile_criteria
from grievances.history import append_event, append_response, make_event
from grievances.phone import same_phone

logger = logging.getLogger(__name__)

LIST_LIMIT = 500


class SubmissionManager(models.Manager):
    """Persistence operations for submissions."""

    def create_submission(self, **fields):
        """
        Insert a new submission with its initial history event.

        Raises:
            ValidationError: type or urgency is not an allowed value
            DuplicateId: a submission with this id already exists
        """
        if fields.get("type") not in Submission.TYPE_VALUES:
            raise ValidationError(f"Invalid type: {fields.get('type')!r}")
        if fields.get("urgency") not in Submission.URGENCY_VALUES:
            raise ValidationError(f"Invalid urgency: {fields.get('urgency')!r}")

        now = timezone.now()
        for managed in ("history", "timestamp", "last_updated", "resolved_at"):
            fields.pop(managed, None)
        status = fields.pop("status", None) or Submission.STATUS_PENDING
        fields["photos"] = fields.get("photos") or []

        try:
            with transaction.atomic():
                return self.create(
                    **fields,
                    status=status,
                    history=[make_event(now, status)],
                    timestamp=now,
                    last_updated=now,
                    resolved_at=None,
                )
        except IntegrityError as e:
            if self.filter(pk=fields.get("id")).exists():
                raise DuplicateId(f"Submission {fields.get('id')} already exists") from e
            raise

    def get_by_id(self, submission_id: str):
        try:
            return self.get(pk=submission_id)
        except Submission.DoesNotExist:
            raise NotFound(f"Submission {submission_id} not found")

    def get_by_id_and_phone(self, submission_id: str, phone: str):
        """
        Find a submission by case-insensitive id and matching phone.

        Returns None when nothing matches, whether or not the id exists.
        """
        for submission in self.filter(id__iexact=submission_id):
            if same_phone(submission.phone, phone):
                return submission
        return None

    def list_filtered(self, criteria=()):
        """Most recently updated first, capped at LIST_LIMIT rows."""
        queryset = self.filter(compile_criteria(criteria)).order_by("-last_updated", "-timestamp")
        return list(queryset[:LIST_LIMIT])

    def transition_status(self, submission_id: str, new_status: str, response: str | None = None):
        """
        Move a submission to a new status and record it in the history.

        Status, description, history and resolved_at are written in a single
        UPDATE while the row is locked.
        """
        with transaction.atomic():
            submission = self.select_for_update().filter(pk=submission_id).first()
            if submission is None:
                raise NotFound(f"Submission {submission_id} not found")

            now = timezone.now()
            submission.status = new_status
            submission.last_updated = now
            submission.description = append_response(submission.description, response)
            submission.history = append_event(submission.history, now, new_status, response)
            if new_status == Submission.STATUS_RESOLVED and submission.resolved_at is None:
                submission.resolved_at = now

            submission.save(
                update_fields=["status", "last_updated", "description", "history", "resolved_at"]
            )

        logger.info(f"Submission {submission_id} moved to status {new_status!r}")
        return submission


class Submission(models.Model):
    """A complaint or petition filed by a citizen."""

    TYPE_COMPLAINT = "complaint"
    TYPE_PETITION = "petition"

    TYPE_CHOICES = [
        (TYPE_COMPLAINT, "Complaint"),
        (TYPE_PETITION, "Petition"),
    ]

    URGENCY_CHOICES = [
        ("low", "Low"),
        ("medium", "Medium"),
        ("high", "High"),
    ]

    TYPE_VALUES = [value for value, _ in TYPE_CHOICES]
    URGENCY_VALUES = [value for value, _ in URGENCY_CHOICES]

    STATUS_PENDING = "pending"
    # Reaching this status stamps resolved_at once; it is not cleared afterwards.
    STATUS_RESOLVED = "resolved"

    id = models.CharField(max_length=100, primary_key=True, help_text="Client-supplied identifier")
    type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    name = models.CharField(max_length=255)
    phone = models.CharField(max_length=50)
    email = models.CharField(max_length=255, blank=True, null=True)
    department = models.CharField(max_length=255, blank=True, null=True)
    category = models.CharField(max_length=255, blank=True, null=True)
    taluk = models.CharField(max_length=255)
    firka = models.CharField(max_length=255)
    village = models.CharField(max_length=255)
    description = models.TextField()
    urgency = models.CharField(max_length=20, choices=URGENCY_CHOICES)
    status = models.CharField(max_length=100, default=STATUS_PENDING, db_index=True)
    photos = models.JSONField(default=list, blank=True, help_text="Opaque attachment references")
    history = models.JSONField(default=list, help_text="Append-only status events")
    timestamp = models.DateTimeField(default=timezone.now)
    last_updated = models.DateTimeField(default=timezone.now)
    resolved_at = models.DateTimeField(blank=True, null=True)

    objects = SubmissionManager()

    class Meta:
        db_table = "submissions"
        ordering = ["-last_updated", "-timestamp"]
        indexes = [
            models.Index(fields=["last_updated", "timestamp"], name="submissions_updated_idx"),
            models.Index(fields=["taluk", "firka", "village"], name="submissions_location_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(type__in=["complaint", "petition"]),
                name="submission_type_valid",
            ),
            models.CheckConstraint(
                condition=models.Q(urgency__in=["low", "medium", "high"]),
                name="submission_urgency_valid",
            ),
        ]

    def __str__(self):
        return f"{self.id} - {self.name} ({self.status})"
