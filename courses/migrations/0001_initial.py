from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Course",
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
                ("slug", models.SlugField(unique=True)),
                ("title", models.CharField(max_length=255)),
                (
                    "enable_completion",
                    models.BooleanField(
                        default=True,
                        help_text="Track activity completion for this course.",
                    ),
                ),
            ],
            options={
                "ordering": ("title",),
            },
        ),
        migrations.CreateModel(
            name="CourseModule",
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
                    "module_name",
                    models.CharField(
                        choices=[
                            ("assign", "Assignment"),
                            ("quiz", "Quiz"),
                            ("page", "Page"),
                            ("forum", "Forum"),
                            ("url", "URL"),
                        ],
                        max_length=20,
                    ),
                ),
                ("instance_id", models.PositiveIntegerField(default=0)),
                ("name", models.CharField(max_length=255)),
                ("section", models.PositiveIntegerField(default=0)),
                ("position", models.PositiveIntegerField(default=0)),
                ("visible", models.BooleanField(default=True)),
                (
                    "completion",
                    models.PositiveSmallIntegerField(
                        choices=[
                            (0, "Do not indicate activity completion"),
                            (1, "Students can manually mark the activity as completed"),
                            (2, "Show activity as complete when conditions are met"),
                        ],
                        default=0,
                    ),
                ),
                (
                    "completion_expected",
                    models.DateTimeField(
                        blank=True,
                        help_text="Date the activity is expected to be completed by",
                        null=True,
                    ),
                ),
                (
                    "course",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="modules",
                        to="courses.course",
                    ),
                ),
            ],
            options={
                "ordering": ("course", "section", "position", "id"),
                "unique_together": {("module_name", "instance_id")},
                "indexes": [
                    models.Index(
                        fields=["course", "section", "position"],
                        name="courses_module_position",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="CourseEnrollment",
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
                    "role",
                    models.CharField(
                        choices=[("teacher", "Teacher"), ("student", "Student")],
                        default="student",
                        max_length=20,
                    ),
                ),
                ("enrolled_at", models.DateTimeField(auto_now_add=True)),
                (
                    "course",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="enrollments",
                        to="courses.course",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="course_enrollments",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Course enrollment",
                "verbose_name_plural": "Course enrollments",
                "unique_together": {("course", "user")},
            },
        ),
        migrations.CreateModel(
            name="ActivityCompletion",
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
                    "state",
                    models.PositiveSmallIntegerField(
                        choices=[
                            (0, "Incomplete"),
                            (1, "Complete"),
                            (2, "Complete (pass)"),
                            (3, "Complete (fail)"),
                        ],
                        default=0,
                    ),
                ),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "course_module",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="completions",
                        to="courses.coursemodule",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="activity_completions",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Activity completion",
                "verbose_name_plural": "Activity completions",
                "unique_together": {("course_module", "user")},
            },
        ),
    ]
