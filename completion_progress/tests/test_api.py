from django.test import TestCase

from assignments import services as assignment_services
from courses.models import CourseEnrollment

from . import factories


class BlockProgressApiTests(TestCase):
    def setUp(self):
        self.course = factories.create_course()
        self.student = factories.create_user()
        factories.enrol(self.course, self.student, CourseEnrollment.Role.STUDENT)
        self.assignment = factories.create_assignment(self.course, title="Essay")
        self.block = factories.create_block(self.course)
        self.url = f"/api/completion-progress/{self.block.id}/"

    def test_requires_authentication(self):
        response = self.client.get(self.url)
        self.assertIn(response.status_code, (401, 403))

    def test_payload_after_submission(self):
        assignment_services.submit_for_grading(self.assignment, self.student.id)
        self.client.force_login(self.student)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(payload["user_id"], self.student.id)
        self.assertEqual(payload["percentage"], 100)
        activity = payload["activities"][0]
        self.assertEqual(activity["id"], self.assignment.course_module_id)
        self.assertEqual(activity["type"], "assign")
        self.assertEqual(activity["status"], "complete")
        self.assertEqual(activity["colour"], "#73A839")
        self.assertIsNone(activity["expected"])

    def test_not_enrolled_user_gets_404(self):
        self.client.force_login(factories.create_user())
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 404)
