from __future__ import annotations

import logging

from django.db import transaction
from django.db.models import Max

from courses import services as completion_api
from courses.models import ActivityCompletion, Course, CourseModule

from .models import Assignment, Submission

logger = logging.getLogger(__name__)


@transaction.atomic
def create_assignment(
    course: Course,
    *,
    title: str | None = None,
    description: str = "",
    due_date=None,
    completion_submit: bool = False,
    submission_drafts: bool = False,
    completion: int = CourseModule.Tracking.NONE,
    completion_expected=None,
    section: int = 0,
    visible: bool = True,
) -> Assignment:
    """Create an assignment together with the course module that places it."""

    last_position = (
        CourseModule.objects.filter(course=course, section=section)
        .aggregate(last=Max("position"))
        .get("last")
    )
    position = 0 if last_position is None else last_position + 1
    title = title or f"Assignment {position + 1}"

    course_module = CourseModule.objects.create(
        course=course,
        module_name=CourseModule.ModuleName.ASSIGN,
        name=title,
        section=section,
        position=position,
        visible=visible,
        completion=completion,
        completion_expected=completion_expected or due_date,
    )
    assignment = Assignment.objects.create(
        course=course,
        course_module=course_module,
        title=title,
        description=description,
        due_date=due_date,
        completion_submit=completion_submit,
        submission_drafts=submission_drafts,
    )
    course_module.instance_id = assignment.id
    course_module.save(update_fields=["instance_id"])
    return assignment


def get_completion_state(course: Course, course_module: CourseModule, user_id: int, default):
    """Return whether ``user_id`` satisfies the assignment's own completion rule.

    Assignments that do not require a submission leave the decision to the
    caller and ``default`` is returned unchanged.
    """

    assignment = Assignment.objects.get(course=course, course_module=course_module)
    if not assignment.completion_submit:
        return default

    return Submission.objects.filter(
        assignment=assignment,
        student_id=user_id,
        status=Submission.Status.SUBMITTED,
    ).exists()


def get_user_submission(assignment: Assignment, user_id: int, create: bool = False) -> Submission | None:
    if create:
        submission, _ = Submission.objects.get_or_create(
            assignment=assignment, student_id=user_id
        )
        return submission
    return Submission.objects.filter(assignment=assignment, student_id=user_id).first()


@transaction.atomic
def submit_for_grading(assignment: Assignment, user_id: int) -> Submission:
    """Mark the user's submission as submitted and record completion."""

    submission = get_user_submission(assignment, user_id, create=True)
    submission.status = Submission.Status.SUBMITTED
    submission.save(update_fields=["status", "updated_at"])

    course_module = assignment.course_module
    if (
        assignment.completion_submit
        and course_module.completion == CourseModule.Tracking.AUTOMATIC
    ):
        completion_api.update_completion_state(
            course_module, user_id, ActivityCompletion.State.COMPLETE
        )

    logger.info(
        "Assignment submitted",
        extra={"assignment_id": assignment.id, "user_id": user_id},
    )
    return submission
