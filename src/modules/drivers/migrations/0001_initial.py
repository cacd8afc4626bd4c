from decimal import Decimal

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("accounts", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Driver",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "vehicle_type",
                    models.CharField(blank=True, default="", max_length=50),
                ),
                ("is_available", models.BooleanField(default=True)),
                (
                    "latitude",
                    models.FloatField(blank=True, default=None, null=True),
                ),
                (
                    "longitude",
                    models.FloatField(blank=True, default=None, null=True),
                ),
                (
                    "service_area",
                    models.CharField(blank=True, default="", max_length=255),
                ),
                (
                    "rating",
                    models.DecimalField(
                        decimal_places=2, default=Decimal("0.00"), max_digits=5
                    ),
                ),
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="driver_profile",
                        to="accounts.account",
                    ),
                ),
            ],
            options={
                "db_table": "drivers",
                "ordering": ["id"],
                "indexes": [
                    models.Index(
                        fields=["is_available"], name="drivers_available_idx"
                    ),
                    models.Index(fields=["-rating"], name="drivers_rating_idx"),
                ],
            },
        ),
    ]
