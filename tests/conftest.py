"""
Pytest configuration and shared fixtures for the test suite.
"""

import pytest
from grievances.models import Official, Submission


@pytest.fixture
def sample_submission_data():
    """Sample complaint payload as a citizen would file it."""
    return {
        "id": "TNK-001",
        "type": "complaint",
        "name": "Murugan S",
        "phone": "9876543210",
        "email": "murugan@example.com",
        "department": "Public Works",
        "category": "Drainage",
        "taluk": "Tenkasi",
        "firka": "Ayikudi",
        "village": "Kadayanallur",
        "description": "Drainage overflow near the bus stand",
        "urgency": "high",
        "photos": ["data:image/png;base64,iVBORw0KGgo="],
    }


@pytest.fixture
def create_submission(db, sample_submission_data):
    """Factory fixture to create a submission through the store."""

    def _create_submission(**kwargs):
        data = {**sample_submission_data, **kwargs}
        return Submission.objects.create_submission(**data)

    return _create_submission


@pytest.fixture
def official(db):
    """An official account with a known password."""
    official, _ = Official.objects.ensure_default_official("Tenkasi Admin", "s3cret-pass")
    return official
