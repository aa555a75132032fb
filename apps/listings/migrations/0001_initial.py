import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("portal", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Listing",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("mls_id", models.CharField(max_length=50, unique=True)),
                ("internal_mls_id", models.CharField(blank=True, max_length=50, null=True)),
                ("mls_board", models.CharField(blank=True, max_length=100, null=True)),
                ("street_address", models.CharField(max_length=255)),
                ("unit_number", models.CharField(blank=True, max_length=50, null=True)),
                ("city", models.CharField(max_length=100)),
                ("state", models.CharField(max_length=2)),
                ("zip", models.CharField(max_length=10)),
                ("latitude", models.FloatField(blank=True, null=True)),
                ("longitude", models.FloatField(blank=True, null=True)),
                ("status", models.CharField(default="Active", max_length=50)),
                ("price", models.DecimalField(decimal_places=2, max_digits=12)),
                ("listing_url", models.URLField(blank=True, null=True)),
                ("property_type", models.CharField(blank=True, max_length=50, null=True)),
                ("description", models.TextField(blank=True, null=True)),
                ("bedrooms", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("bathrooms", models.DecimalField(blank=True, decimal_places=1, max_digits=3, null=True)),
                ("living_area", models.PositiveIntegerField(blank=True, null=True)),
                ("year_built", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "agent",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="listings",
                        to="portal.agent",
                    ),
                ),
                (
                    "office",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="listings",
                        to="portal.office",
                    ),
                ),
            ],
            options={
                "verbose_name": "Listing",
                "verbose_name_plural": "Listings",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["city", "state"], name="listing_city_state_idx"),
                    models.Index(fields=["status"], name="listing_status_idx"),
                ],
            },
        ),
    ]
