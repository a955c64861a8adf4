"""Tests for the assignments app."""

from datetime import timedelta

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.utils import timezone

from courses.models import ActivityCompletion, Course, CourseModule

from . import services
from .models import Submission


class AssignmentServiceTests(TestCase):
    def setUp(self):
        self.student = get_user_model().objects.create_user("student", password="pass")
        self.course = Course.objects.create(slug="math", title="Math")

    def test_create_assignment_places_course_module(self):
        due = timezone.now() + timedelta(days=7)
        first = services.create_assignment(self.course, title="HW1", due_date=due)
        second = services.create_assignment(self.course, title="HW2")

        module = first.course_module
        self.assertEqual(module.module_name, CourseModule.ModuleName.ASSIGN)
        self.assertEqual(module.instance_id, first.id)
        self.assertEqual(module.name, "HW1")
        self.assertEqual(module.completion_expected, due)
        self.assertEqual(second.course_module.position, module.position + 1)

    def test_completion_state_without_submit_rule_returns_default(self):
        assignment = services.create_assignment(self.course, completion_submit=False)
        for default in (True, False):
            self.assertIs(
                services.get_completion_state(
                    self.course, assignment.course_module, self.student.id, default
                ),
                default,
            )

    def test_completion_state_follows_submission_status(self):
        assignment = services.create_assignment(self.course, completion_submit=True)
        module = assignment.course_module

        self.assertFalse(services.get_completion_state(self.course, module, self.student.id, False))

        submission = services.get_user_submission(assignment, self.student.id, create=True)
        self.assertEqual(submission.status, Submission.Status.NEW)
        submission.status = Submission.Status.DRAFT
        submission.save()
        self.assertFalse(services.get_completion_state(self.course, module, self.student.id, False))

        submission.status = Submission.Status.SUBMITTED
        submission.save()
        self.assertTrue(services.get_completion_state(self.course, module, self.student.id, False))

    def test_get_user_submission_without_create(self):
        assignment = services.create_assignment(self.course)
        self.assertIsNone(services.get_user_submission(assignment, self.student.id))

    def test_submit_for_grading_stores_completion_for_automatic_tracking(self):
        assignment = services.create_assignment(
            self.course,
            completion_submit=True,
            completion=CourseModule.Tracking.AUTOMATIC,
        )
        submission = services.submit_for_grading(assignment, self.student.id)

        self.assertEqual(submission.status, Submission.Status.SUBMITTED)
        completion = ActivityCompletion.objects.get(
            course_module=assignment.course_module, user=self.student
        )
        self.assertEqual(completion.state, ActivityCompletion.State.COMPLETE)

    def test_submit_for_grading_with_manual_tracking_leaves_state(self):
        assignment = services.create_assignment(
            self.course,
            completion_submit=True,
            completion=CourseModule.Tracking.MANUAL,
        )
        services.submit_for_grading(assignment, self.student.id)
        self.assertFalse(ActivityCompletion.objects.exists())
