"""Models for assignment activities and student submissions."""

from django.conf import settings
from django.db import models

from courses.models import Course, CourseModule


class Assignment(models.Model):
    """An assignment activity that belongs to a course."""

    course = models.ForeignKey(
        Course, related_name="assignments", on_delete=models.CASCADE
    )
    course_module = models.OneToOneField(
        CourseModule, related_name="assignment", on_delete=models.CASCADE
    )
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    due_date = models.DateTimeField(null=True, blank=True)
    completion_submit = models.BooleanField(
        default=False,
        help_text="Student must submit to this activity to complete it",
    )
    submission_drafts = models.BooleanField(
        default=False,
        help_text="Require students to click the submit button",
    )

    def __str__(self) -> str:  # pragma: no cover - simple representation
        return self.title


class Submission(models.Model):
    """A student's submission for a particular assignment."""

    class Status(models.TextChoices):
        NEW = "new", "No submission"
        DRAFT = "draft", "Draft (not submitted)"
        SUBMITTED = "submitted", "Submitted for grading"
        REOPENED = "reopened", "Reopened"

    assignment = models.ForeignKey(
        Assignment, related_name="submissions", on_delete=models.CASCADE
    )
    student = models.ForeignKey(
        settings.AUTH_USER_MODEL, related_name="submissions", on_delete=models.CASCADE
    )
    status = models.CharField(
        max_length=20, choices=Status.choices, default=Status.NEW
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        unique_together = ("assignment", "student")

    def __str__(self) -> str:  # pragma: no cover - simple representation
        return f"{self.student} - {self.assignment} ({self.status})"
