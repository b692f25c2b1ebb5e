import logging

from django.conf import settings
from django.db import DatabaseError
from django.utils.crypto import constant_time_compare

from grievances.models import Official

logger = logging.getLogger(__name__)


class AuthService:
    """Stateless credential checks for the DC/DM PIN and official accounts."""

    def check_pin(self, pin) -> bool:
        expected = settings.DCDM_PIN
        if not expected or not pin:
            return False
        return constant_time_compare(str(pin), expected)

    def check_official(self, username: str, password: str) -> dict:
        """
        Verify an official's username and password.

        Returns:
            dict: 'success', plus 'error' ('missing', 'invalid' or 'database')
            and 'message' on failure
        """
        if not username or not password:
            return {"success": False, "error": "missing", "message": "Missing"}

        try:
            official = Official.objects.filter(username=username).first()
        except DatabaseError as e:
            logger.error(f"Error checking official {username!r}: {str(e)}")
            return {"success": False, "error": "database", "message": str(e)}

        if official is None:
            # Unknown usernames still cost one hash.
            Official().set_password(password)
        elif official.check_password(password):
            return {"success": True}

        logger.warning(f"Failed official login for {username!r}")
        return {"success": False, "error": "invalid", "message": "Invalid credentials"}

    def seed_default_official(self) -> dict:
        """
        Create the configured default official if absent.

        Returns:
            dict: 'success', 'created' and 'message'
        """
        username = settings.DEFAULT_OFFICIAL_USERNAME
        password = settings.DEFAULT_OFFICIAL_PASSWORD
        if not username or not password:
            return {
                "success": False,
                "created": False,
                "message": "DEFAULT_OFFICIAL_USERNAME and DEFAULT_OFFICIAL_PASSWORD must be set",
            }

        official, created = Official.objects.ensure_default_official(username, password)
        if created:
            logger.info(f"Seeded default official {official.username!r}")
            return {"success": True, "created": True, "message": f"Created official {username}"}
        return {"success": True, "created": False, "message": f"Official {username} already exists"}
