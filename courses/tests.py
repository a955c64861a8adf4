from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings

from courses import services
from courses.models import (
    ActivityCompletion,
    Course,
    CourseEnrollment,
    CourseModule,
)


class CompletionApiTests(TestCase):
    def setUp(self):
        self.user = get_user_model().objects.create_user(
            username="student", password="secret"
        )
        self.course = Course.objects.create(slug="chemistry", title="Chemistry")
        self.module = CourseModule.objects.create(
            course=self.course,
            module_name=CourseModule.ModuleName.PAGE,
            instance_id=1,
            name="Safety rules",
            completion=CourseModule.Tracking.MANUAL,
        )

    def test_state_defaults_to_incomplete(self):
        self.assertEqual(
            services.get_completion_state(self.module, self.user.id),
            ActivityCompletion.State.INCOMPLETE,
        )
        self.assertEqual(services.get_completion_states([self.module.id], self.user.id), {})

    def test_update_state_upserts(self):
        services.update_completion_state(
            self.module, self.user.id, ActivityCompletion.State.COMPLETE_FAIL
        )
        services.update_completion_state(
            self.module, self.user.id, ActivityCompletion.State.COMPLETE_PASS
        )
        self.assertEqual(ActivityCompletion.objects.count(), 1)
        self.assertEqual(
            services.get_completion_states([self.module.id], self.user.id),
            {self.module.id: ActivityCompletion.State.COMPLETE_PASS},
        )

    def test_untracked_module_does_not_store_state(self):
        self.module.completion = CourseModule.Tracking.NONE
        self.module.save(update_fields=["completion"])
        services.update_completion_state(
            self.module, self.user.id, ActivityCompletion.State.COMPLETE
        )
        self.assertFalse(ActivityCompletion.objects.exists())

    @override_settings(ENABLE_COMPLETION=False)
    def test_site_switch_disables_completion(self):
        self.assertFalse(services.is_completion_enabled(self.course))
        self.assertFalse(services.is_completion_enabled(self.course, self.module))


class EnrolmentTests(TestCase):
    def setUp(self):
        User = get_user_model()
        self.course = Course.objects.create(slug="physics", title="Physics")
        self.teacher = User.objects.create_user("teacher", password="pass")
        self.first = User.objects.create_user("first", password="pass")
        self.second = User.objects.create_user("second", password="pass")

    def test_roles_split_enrolled_users(self):
        services.enrol_user(self.course, self.teacher, CourseEnrollment.Role.TEACHER)
        services.enrol_user(self.course, self.first)
        services.enrol_user(self.course, self.second)

        self.assertEqual(
            list(services.get_enrolled_users(self.course, CourseEnrollment.Role.STUDENT)),
            [self.first, self.second],
        )
        self.assertEqual(services.get_enrolled_users(self.course).count(), 3)
        self.assertTrue(services.is_course_teacher(self.course, self.teacher.id))
        self.assertFalse(services.is_course_teacher(self.course, self.first.id))

    def test_enrol_is_idempotent_and_updates_role(self):
        services.enrol_user(self.course, self.first)
        services.enrol_user(self.course, self.first, CourseEnrollment.Role.TEACHER)
        enrollment = CourseEnrollment.objects.get(course=self.course, user=self.first)
        self.assertEqual(enrollment.role, CourseEnrollment.Role.TEACHER)
