from django.db import migrations
from django.db import models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="PublicHoliday",
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
                (
                    "name",
                    models.CharField(help_text="e.g. Labour Day", max_length=100),
                ),
                ("start_date", models.DateField(help_text="First holiday date")),
                (
                    "end_date",
                    models.DateField(help_text="Last holiday date, inclusive"),
                ),
                (
                    "year",
                    models.IntegerField(
                        db_index=True, help_text="Year of the first date"
                    ),
                ),
            ],
            options={
                "ordering": ["start_date", "name"],
            },
        ),
    ]
