from django.template import Context, Template
from django.test import TestCase
from django.urls import reverse

from courses.models import CourseEnrollment

from . import factories


class ProgressViewTests(TestCase):
    def setUp(self):
        self.course = factories.create_course(title="Biology")
        self.teacher = factories.create_user("teacher")
        self.student = factories.create_user("student")
        self.outsider = factories.create_user("outsider")
        factories.enrol(self.course, self.teacher, CourseEnrollment.Role.TEACHER)
        factories.enrol(self.course, self.student, CourseEnrollment.Role.STUDENT)
        self.assignment = factories.create_assignment(self.course, title="Lab report")
        self.block = factories.create_block(
            self.course, {"title": "My progress", "show_percentage": True}
        )
        self.detail_url = reverse("completion_progress:block-detail", args=[self.block.id])
        self.overview_url = reverse("completion_progress:overview", args=[self.block.id])

    def test_login_required(self):
        response = self.client.get(self.detail_url)
        self.assertEqual(response.status_code, 302)

    def test_student_sees_own_bar(self):
        self.client.force_login(self.student)
        response = self.client.get(self.detail_url)
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "My progress")
        self.assertContains(response, "Lab report")
        self.assertContains(response, "Progress: 0%")
        self.assertNotContains(response, self.overview_url)
        self.assertEqual(response.context["progress"].user_id, self.student.id)

    def test_not_enrolled_user_gets_404(self):
        self.client.force_login(self.outsider)
        response = self.client.get(self.detail_url)
        self.assertEqual(response.status_code, 404)

    def test_student_cannot_open_overview(self):
        self.client.force_login(self.student)
        response = self.client.get(self.overview_url)
        self.assertEqual(response.status_code, 403)

    def test_teacher_overview_lists_students(self):
        self.client.force_login(self.teacher)
        response = self.client.get(self.overview_url)
        self.assertEqual(response.status_code, 200)
        rows = response.context["rows"]
        self.assertEqual([row["student"] for row in rows], [self.student])
        self.assertEqual(rows[0]["progress"].percentage, 0)
        self.assertContains(response, "student")

    def test_teacher_detail_links_to_overview(self):
        self.client.force_login(self.teacher)
        response = self.client.get(self.detail_url)
        self.assertContains(response, self.overview_url)


class ProgressTemplateTagTests(TestCase):
    def test_tag_renders_block(self):
        course = factories.create_course()
        student = factories.create_user()
        factories.enrol(course, student)
        factories.create_assignment(course, title="Quick essay")
        block = factories.create_block(course, {"title": "Tracker"})

        template = Template("{% load completion_progress %}{% completion_progress_bar block user %}")
        html = template.render(Context({"block": block, "user": student}))

        self.assertIn("Tracker", html)
        self.assertIn('data-activity-type="assign"', html)


class InvalidBlockConfigViewTests(TestCase):
    def test_detail_renders_with_default_settings(self):
        course = factories.create_course()
        student = factories.create_user()
        factories.enrol(course, student)
        factories.create_assignment(course, title="Field notes")
        block = factories.create_block(course, {"order_by": "bogus"})
        self.client.force_login(student)

        with self.assertLogs("completion_progress.models", level="ERROR"):
            response = self.client.get(
                reverse("completion_progress:block-detail", args=[block.id])
            )
            api_response = self.client.get(f"/api/completion-progress/{block.id}/")

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Field notes")
        self.assertEqual(api_response.status_code, 200)
        self.assertEqual(api_response.json()["percentage"], 0)
