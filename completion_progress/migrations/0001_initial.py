from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("courses", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="ProgressBlock",
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
                    "page_type_pattern",
                    models.CharField(default="course-view-*", max_length=64),
                ),
                ("default_region", models.CharField(default="side-post", max_length=16)),
                ("default_weight", models.IntegerField(default=0)),
                ("config", models.JSONField(blank=True, default=dict)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "course",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="progress_blocks",
                        to="courses.course",
                    ),
                ),
            ],
            options={
                "verbose_name": "Completion progress block",
                "verbose_name_plural": "Completion progress blocks",
                "ordering": ("course", "default_region", "default_weight", "id"),
            },
        ),
    ]
