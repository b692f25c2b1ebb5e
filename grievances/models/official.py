from django.contrib.auth.hashers import check_password, make_password
from django.db import models


class OfficialManager(models.Manager):
    def ensure_default_official(self, username: str, password: str):
        """Create the official if nobody holds this username. Returns (official, created)."""
        official = self.filter(username=username).first()
        if official:
            return official, False
        official = self.model(username=username)
        official.set_password(password)
        official.save()
        return official, True


class Official(models.Model):
    """Administrative account allowed to update submission status."""

    username = models.CharField(max_length=150, unique=True)
    password = models.CharField(max_length=255, help_text="Password hash, never the raw value")

    objects = OfficialManager()

    class Meta:
        db_table = "officials"
        ordering = ["username"]

    def __str__(self):
        return self.username

    def set_password(self, raw_password: str):
        self.password = make_password(raw_password)

    def check_password(self, raw_password: str) -> bool:
        return check_password(raw_password, self.password)
