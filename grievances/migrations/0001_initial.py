import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Official",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("username", models.CharField(max_length=150, unique=True)),
                ("password", models.CharField(help_text="Password hash, never the raw value", max_length=255)),
            ],
            options={
                "db_table": "officials",
                "ordering": ["username"],
            },
        ),
        migrations.CreateModel(
            name="Submission",
            fields=[
                (
                    "id",
                    models.CharField(
                        help_text="Client-supplied identifier",
                        max_length=100,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "type",
                    models.CharField(
                        choices=[("complaint", "Complaint"), ("petition", "Petition")],
                        max_length=20,
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("phone", models.CharField(max_length=50)),
                ("email", models.CharField(blank=True, max_length=255, null=True)),
                ("department", models.CharField(blank=True, max_length=255, null=True)),
                ("category", models.CharField(blank=True, max_length=255, null=True)),
                ("taluk", models.CharField(max_length=255)),
                ("firka", models.CharField(max_length=255)),
                ("village", models.CharField(max_length=255)),
                ("description", models.TextField()),
                (
                    "urgency",
                    models.CharField(
                        choices=[("low", "Low"), ("medium", "Medium"), ("high", "High")],
                        max_length=20,
                    ),
                ),
                ("status", models.CharField(db_index=True, default="pending", max_length=100)),
                (
                    "photos",
                    models.JSONField(blank=True, default=list, help_text="Opaque attachment references"),
                ),
                ("history", models.JSONField(default=list, help_text="Append-only status events")),
                ("timestamp", models.DateTimeField(default=django.utils.timezone.now)),
                ("last_updated", models.DateTimeField(default=django.utils.timezone.now)),
                ("resolved_at", models.DateTimeField(blank=True, null=True)),
            ],
            options={
                "db_table": "submissions",
                "ordering": ["-last_updated", "-timestamp"],
                "indexes": [
                    models.Index(fields=["last_updated", "timestamp"], name="submissions_updated_idx"),
                    models.Index(fields=["taluk", "firka", "village"], name="submissions_location_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("type__in", ["complaint", "petition"])),
                        name="submission_type_valid",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("urgency__in", ["low", "medium", "high"])),
                        name="submission_urgency_valid",
                    ),
                ],
            },
        ),
    ]
