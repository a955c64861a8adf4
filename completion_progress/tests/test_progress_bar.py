from datetime import timedelta

from django.test import SimpleTestCase, TestCase, override_settings
from django.utils import timezone

from courses.models import ActivityCompletion, CourseEnrollment
from courses import services as course_services
from completion_progress import services
from completion_progress.config import DEFAULT_COLOURS
from completion_progress.services import Activity

from . import factories


def make_activity(activity_id: int, expected=None, name: str = "Page") -> Activity:
    return Activity(
        id=activity_id,
        type="page",
        instance=activity_id,
        name=name,
        expected=expected,
        section=0,
        position=activity_id,
    )


class ActivityStatusTests(SimpleTestCase):
    def setUp(self):
        self.now = timezone.now()

    def test_complete_states(self):
        activity = make_activity(1)
        for state in (ActivityCompletion.State.COMPLETE, ActivityCompletion.State.COMPLETE_PASS):
            self.assertEqual(services.activity_status(activity, state, self.now), "complete")

    def test_failed(self):
        status = services.activity_status(
            make_activity(1), ActivityCompletion.State.COMPLETE_FAIL, self.now
        )
        self.assertEqual(status, "failed")

    def test_submitted_wins_over_past_deadline(self):
        activity = make_activity(1, expected=self.now - timedelta(days=1))
        self.assertEqual(
            services.activity_status(activity, services.SUBMITTED, self.now), "submitted"
        )

    def test_incomplete_past_and_future(self):
        past = make_activity(1, expected=self.now - timedelta(days=1))
        future = make_activity(2, expected=self.now + timedelta(days=1))
        undated = make_activity(3)
        incomplete = ActivityCompletion.State.INCOMPLETE
        self.assertEqual(services.activity_status(past, incomplete, self.now), "notCompleted")
        self.assertEqual(
            services.activity_status(future, incomplete, self.now), "futureNotCompleted"
        )
        self.assertEqual(
            services.activity_status(undated, incomplete, self.now), "futureNotCompleted"
        )


class PercentageTests(SimpleTestCase):
    def test_empty_list_is_zero(self):
        self.assertEqual(services.percentage([], {}), 0)

    def test_counts_complete_and_pass_only(self):
        activities = [make_activity(i) for i in range(1, 5)]
        completions = {
            1: ActivityCompletion.State.COMPLETE,
            2: ActivityCompletion.State.COMPLETE_PASS,
            3: ActivityCompletion.State.COMPLETE_FAIL,
            4: services.SUBMITTED,
        }
        self.assertEqual(services.percentage(activities, completions), 50)

    def test_rounds_to_integer(self):
        activities = [make_activity(i) for i in range(1, 4)]
        completions = {1: ActivityCompletion.State.COMPLETE}
        self.assertEqual(services.percentage(activities, completions), 33)

    def test_halves_round_up(self):
        activities = [make_activity(i) for i in range(1, 9)]
        completions = {1: ActivityCompletion.State.COMPLETE}
        self.assertEqual(services.percentage(activities, completions), 13)


class ProgressBarRenderingTests(TestCase):
    def setUp(self):
        self.course = factories.create_course()
        self.student = factories.create_user()
        factories.enrol(self.course, self.student, CourseEnrollment.Role.STUDENT)
        self.block = factories.create_block(self.course)
        now = timezone.now()
        self.past = factories.create_activity(
            self.course, name="Past page", position=0,
            completion_expected=now - timedelta(days=2),
        )
        self.done = factories.create_activity(
            self.course, name="Done page", position=1,
            completion_expected=now - timedelta(days=1),
        )
        self.future = factories.create_activity(
            self.course, name="Future page", position=2,
            completion_expected=now + timedelta(days=3),
        )
        course_services.update_completion_state(
            self.done, self.student.id, ActivityCompletion.State.COMPLETE
        )

    def _render(self, config):
        activities = services.get_activities(self.course.id, config)
        completions = services.completions(activities, self.student.id, self.course, set())
        return services.progress_bar(
            activities, completions, config, self.student.id, self.course, self.block.id
        )

    def test_each_status_gets_its_colour(self):
        text = self._render({})
        self.assertIn("background-color:" + DEFAULT_COLOURS["notCompleted_colour"], text)
        self.assertIn("background-color:" + DEFAULT_COLOURS["completed_colour"], text)
        self.assertIn("background-color:" + DEFAULT_COLOURS["futureNotCompleted_colour"], text)
        self.assertIn("Past page", text)

    def test_now_marker_only_when_ordered_by_time(self):
        self.assertIn("completion-progress__now", self._render({"order_by": "orderbytime"}))
        self.assertNotIn("completion-progress__now", self._render({"order_by": "orderbycourse"}))

        past_due = timezone.now() - timedelta(hours=1)
        self.future.completion_expected = past_due
        self.future.save(update_fields=["completion_expected"])
        self.assertNotIn("completion-progress__now", self._render({"order_by": "orderbytime"}))

    def test_squeeze_sets_cell_width(self):
        self.assertIn("width:33.3333%", self._render({"long_bars": "squeeze"}))
        self.assertNotIn("width:", self._render({"long_bars": "scroll"}))

    def test_icons_and_percentage_are_optional(self):
        plain = self._render({})
        self.assertNotIn("✔", plain)
        self.assertNotIn("Progress: ", plain)

        decorated = self._render({"show_icons": True, "show_percentage": True})
        self.assertIn("✔", decorated)
        self.assertIn("✖", decorated)
        self.assertIn("Progress: 33%", decorated)

    def test_no_activities_message(self):
        empty_course = factories.create_course()
        text = services.progress_bar([], {}, {}, self.student.id, empty_course, self.block.id)
        self.assertIn("No activities are being monitored", text)
        self.assertNotIn("background-color:", text)

    @override_settings(COMPLETION_PROGRESS={"COLOURS": {"completed_colour": "#000000"}})
    def test_colours_can_be_overridden(self):
        text = self._render({})
        self.assertIn("background-color:#000000", text)
        self.assertNotIn("background-color:" + DEFAULT_COLOURS["completed_colour"], text)


class BuildUserProgressTests(TestCase):
    def setUp(self):
        self.course = factories.create_course()
        self.student = factories.create_user()
        factories.enrol(self.course, self.student, CourseEnrollment.Role.STUDENT)
        self.block = factories.create_block(self.course, {"order_by": "orderbycourse"})
        self.assignment = factories.create_assignment(self.course, title="Essay")
        self.hidden = factories.create_activity(self.course, position=5, visible=False)

    def test_pipeline_combines_every_step(self):
        factories.create_assignment(self.course, title="Report")
        submission = self.assignment.submissions.create(
            student=self.student, status="submitted"
        )
        self.assertEqual(submission.status, "submitted")

        progress = services.build_user_progress(self.block, self.student.id)

        self.assertNotIn(self.hidden.id, [activity.id for activity in progress.activities])
        self.assertEqual(
            [entry.status for entry in progress.entries],
            ["submitted", "futureNotCompleted"],
        )
        self.assertEqual(progress.percentage, 0)
        self.assertIn("Essay", progress.bar)
