from django.conf import settings
from django.db import models


class TimeStampedModel(models.Model):
    """Reusable timestamped base model for course entities."""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class Course(TimeStampedModel):
    slug = models.SlugField(unique=True, db_index=True)
    title = models.CharField(max_length=255)
    enable_completion = models.BooleanField(
        default=True,
        help_text="Track activity completion for this course.",
    )

    class Meta:
        ordering = ("title",)

    def __str__(self) -> str:
        return self.title


class CourseEnrollment(models.Model):
    class Role(models.TextChoices):
        TEACHER = "teacher", "Teacher"
        STUDENT = "student", "Student"

    course = models.ForeignKey(
        Course,
        on_delete=models.CASCADE,
        related_name="enrollments",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="course_enrollments",
    )
    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.STUDENT,
    )
    enrolled_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ("course", "user")
        verbose_name = "Course enrollment"
        verbose_name_plural = "Course enrollments"

    def __str__(self) -> str:
        return f"{self.user} → {self.course} ({self.role})"


class CourseModule(TimeStampedModel):
    """An activity placed in a course."""

    class ModuleName(models.TextChoices):
        ASSIGN = "assign", "Assignment"
        QUIZ = "quiz", "Quiz"
        PAGE = "page", "Page"
        FORUM = "forum", "Forum"
        URL = "url", "URL"

    class Tracking(models.IntegerChoices):
        NONE = 0, "Do not indicate activity completion"
        MANUAL = 1, "Students can manually mark the activity as completed"
        AUTOMATIC = 2, "Show activity as complete when conditions are met"

    course = models.ForeignKey(
        Course,
        on_delete=models.CASCADE,
        related_name="modules",
    )
    module_name = models.CharField(max_length=20, choices=ModuleName.choices)
    instance_id = models.PositiveIntegerField(default=0)
    name = models.CharField(max_length=255)
    section = models.PositiveIntegerField(default=0)
    position = models.PositiveIntegerField(default=0)
    visible = models.BooleanField(default=True)
    completion = models.PositiveSmallIntegerField(
        choices=Tracking.choices,
        default=Tracking.NONE,
    )
    completion_expected = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Date the activity is expected to be completed by",
    )

    class Meta:
        ordering = ("course", "section", "position", "id")
        unique_together = ("module_name", "instance_id")
        indexes = [
            models.Index(
                fields=["course", "section", "position"],
                name="courses_module_position",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.course}: {self.name}"

    @property
    def is_tracked(self) -> bool:
        return self.completion != self.Tracking.NONE


class ActivityCompletion(models.Model):
    """Stored completion state of a course module for one user."""

    class State(models.IntegerChoices):
        INCOMPLETE = 0, "Incomplete"
        COMPLETE = 1, "Complete"
        COMPLETE_PASS = 2, "Complete (pass)"
        COMPLETE_FAIL = 3, "Complete (fail)"

    course_module = models.ForeignKey(
        CourseModule,
        on_delete=models.CASCADE,
        related_name="completions",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="activity_completions",
    )
    state = models.PositiveSmallIntegerField(
        choices=State.choices,
        default=State.INCOMPLETE,
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        unique_together = ("course_module", "user")
        verbose_name = "Activity completion"
        verbose_name_plural = "Activity completions"

    def __str__(self) -> str:
        return f"{self.user} -> {self.course_module} ({self.get_state_display()})"
