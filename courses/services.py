from __future__ import annotations

import logging

from django.conf import settings
from django.contrib.auth import get_user_model

from .models import ActivityCompletion, Course, CourseEnrollment, CourseModule

logger = logging.getLogger(__name__)


def is_completion_enabled(course: Course, course_module: CourseModule | None = None) -> bool:
    if not getattr(settings, "ENABLE_COMPLETION", True):
        return False
    if not course.enable_completion:
        return False
    if course_module is not None:
        return course_module.is_tracked
    return True


def get_completion_state(course_module: CourseModule, user_id: int) -> int:
    state = (
        ActivityCompletion.objects.filter(course_module=course_module, user_id=user_id)
        .values_list("state", flat=True)
        .first()
    )
    if state is None:
        return ActivityCompletion.State.INCOMPLETE
    return state


def get_completion_states(course_module_ids, user_id: int) -> dict[int, int]:
    """Return stored states keyed by course module id; missing rows are omitted."""
    return dict(
        ActivityCompletion.objects.filter(
            course_module_id__in=list(course_module_ids), user_id=user_id
        ).values_list("course_module_id", "state")
    )


def update_completion_state(course_module: CourseModule, user_id: int, state: int) -> None:
    if not is_completion_enabled(course_module.course, course_module):
        logger.debug(
            "Completion tracking disabled, state not stored",
            extra={"course_module_id": course_module.id, "user_id": user_id},
        )
        return

    ActivityCompletion.objects.update_or_create(
        course_module=course_module,
        user_id=user_id,
        defaults={"state": state},
    )
    logger.info(
        "Completion state updated",
        extra={"course_module_id": course_module.id, "user_id": user_id, "state": state},
    )


def enrol_user(course: Course, user, role: str = CourseEnrollment.Role.STUDENT) -> CourseEnrollment:
    enrollment, _ = CourseEnrollment.objects.update_or_create(
        course=course, user=user, defaults={"role": role}
    )
    return enrollment


def get_enrolled_users(course: Course, role: str | None = None):
    enrollments = CourseEnrollment.objects.filter(course=course)
    if role is not None:
        enrollments = enrollments.filter(role=role)
    return get_user_model().objects.filter(
        id__in=enrollments.values("user_id")
    ).order_by("id")


def is_course_teacher(course: Course, user_id: int) -> bool:
    return CourseEnrollment.objects.filter(
        course=course, user_id=user_id, role=CourseEnrollment.Role.TEACHER
    ).exists()
