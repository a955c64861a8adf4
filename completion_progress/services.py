from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Mapping, Sequence

from django.template.loader import render_to_string
from django.utils import timezone
from django.utils.safestring import SafeString

from assignments.models import Submission
from courses import services as completion_api
from courses.models import ActivityCompletion, Course, CourseModule

from .config import (
    ACTIVITIES_SELECTED,
    LONG_BARS_SQUEEZE,
    ORDER_BY_TIME,
    STATUS_COMPLETE,
    STATUS_FAILED,
    STATUS_FUTURE_NOT_COMPLETED,
    STATUS_LABELS,
    STATUS_NOT_COMPLETED,
    STATUS_SUBMITTED,
    BlockConfig,
    colour_for_status,
)

logger = logging.getLogger(__name__)

SUBMITTED = "submitted"

_COMPLETE_STATES = frozenset(
    {ActivityCompletion.State.COMPLETE, ActivityCompletion.State.COMPLETE_PASS}
)

_STATUS_ICONS = {
    STATUS_COMPLETE: "✔",
    STATUS_FAILED: "✖",
    STATUS_NOT_COMPLETED: "✖",
}


@dataclass(frozen=True)
class Activity:
    id: int
    type: str
    instance: int
    name: str
    expected: datetime | None
    section: int
    position: int
    visible: bool = True

    @property
    def key(self) -> str:
        return f"{self.type}-{self.instance}"

    @classmethod
    def from_course_module(cls, course_module: CourseModule) -> "Activity":
        return cls(
            id=course_module.id,
            type=course_module.module_name,
            instance=course_module.instance_id,
            name=course_module.name,
            expected=course_module.completion_expected,
            section=course_module.section,
            position=course_module.position,
            visible=course_module.visible,
        )


@dataclass(frozen=True)
class ActivityProgress:
    activity: Activity
    status: str
    colour: str
    label: str
    icon: str


def _as_config(config: BlockConfig | Mapping | None) -> BlockConfig:
    if isinstance(config, BlockConfig):
        return config
    return BlockConfig.from_mapping(config)


def _sort_by_expected(activities: Sequence[Activity]) -> list[Activity]:
    # Activities without an expected date go last; ties keep course order.
    indexed = list(enumerate(activities))
    indexed.sort(
        key=lambda pair: (
            pair[1].expected is None,
            pair[1].expected.timestamp() if pair[1].expected else 0.0,
            pair[0],
        )
    )
    return [activity for _, activity in indexed]


def get_activities(course_id: int, config: BlockConfig | Mapping | None = None) -> list[Activity]:
    """Return the activities with completion tracking the block should show."""

    config = _as_config(config)
    course = Course.objects.get(pk=course_id)
    if not completion_api.is_completion_enabled(course):
        logger.info("Completion tracking disabled", extra={"course_id": course_id})
        return []

    course_modules = (
        CourseModule.objects.filter(course=course)
        .exclude(completion=CourseModule.Tracking.NONE)
        .order_by("section", "position", "id")
    )
    activities = [Activity.from_course_module(cm) for cm in course_modules]

    if config.activities_included == ACTIVITIES_SELECTED:
        selected = set(config.selected_activities)
        missing = selected.difference(activity.key for activity in activities)
        if missing:
            logger.warning(
                "Selected activities are not tracked in course",
                extra={"course_id": course_id, "missing": sorted(missing)},
            )
        activities = [activity for activity in activities if activity.key in selected]

    if config.order_by == ORDER_BY_TIME:
        activities = _sort_by_expected(activities)

    logger.debug(
        "Activities listed",
        extra={"course_id": course_id, "count": len(activities)},
    )
    return activities


def filter_visibility(activities: Iterable[Activity], user_id: int, course: Course) -> list[Activity]:
    if completion_api.is_course_teacher(course, user_id):
        return list(activities)
    return [activity for activity in activities if activity.visible]


def student_submissions(course_id: int, user_id: int) -> set[int]:
    """Return ids of course modules the user has submitted work for."""
    return set(
        Submission.objects.filter(
            assignment__course_id=course_id,
            student_id=user_id,
            status=Submission.Status.SUBMITTED,
        ).values_list("assignment__course_module_id", flat=True)
    )


def completions(
    activities: Sequence[Activity],
    user_id: int,
    course: Course,
    submissions: Iterable[int],
) -> dict[int, int | str]:
    """Map each activity id to its stored completion state.

    An incomplete activity the user has already submitted work for is
    reported as ``"submitted"``.
    """

    submissions = set(submissions)
    states = completion_api.get_completion_states(
        [activity.id for activity in activities], user_id
    )

    result: dict[int, int | str] = {}
    for activity in activities:
        state = states.get(activity.id, ActivityCompletion.State.INCOMPLETE)
        if state == ActivityCompletion.State.INCOMPLETE and activity.id in submissions:
            result[activity.id] = SUBMITTED
        else:
            result[activity.id] = state
    return result


def activity_status(activity: Activity, completion, now: datetime | None = None) -> str:
    now = now or timezone.now()
    if completion in _COMPLETE_STATES:
        return STATUS_COMPLETE
    if completion == ActivityCompletion.State.COMPLETE_FAIL:
        return STATUS_FAILED
    if completion == SUBMITTED:
        return STATUS_SUBMITTED
    if activity.expected is not None and activity.expected < now:
        return STATUS_NOT_COMPLETED
    return STATUS_FUTURE_NOT_COMPLETED


def percentage(activities: Sequence[Activity], completions: Mapping[int, int | str]) -> int:
    if not activities:
        return 0
    completed = sum(
        1 for activity in activities if completions.get(activity.id) in _COMPLETE_STATES
    )
    # Halves round up.
    share = Decimal(100 * completed) / len(activities)
    return int(share.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def describe_progress(
    activities: Sequence[Activity],
    completions: Mapping[int, int | str],
    now: datetime | None = None,
) -> list[ActivityProgress]:
    now = now or timezone.now()
    entries = []
    for activity in activities:
        status = activity_status(activity, completions.get(activity.id), now)
        entries.append(
            ActivityProgress(
                activity=activity,
                status=status,
                colour=colour_for_status(status),
                label=STATUS_LABELS[status],
                icon=_STATUS_ICONS.get(status, ""),
            )
        )
    return entries


def _now_index(config: BlockConfig, activities: Sequence[Activity], now: datetime) -> int | None:
    if config.order_by != ORDER_BY_TIME:
        return None
    if not any(activity.expected for activity in activities):
        return None
    for index, activity in enumerate(activities):
        if activity.expected is None or activity.expected > now:
            return index
    return None


def progress_bar(
    activities: Sequence[Activity],
    completions: Mapping[int, int | str],
    config: BlockConfig | Mapping | None,
    user_id: int,
    course: Course,
    block_instance_id: int,
) -> SafeString:
    """Render the progress bar markup for one user."""

    config = _as_config(config)
    now = timezone.now()
    cells = describe_progress(activities, completions, now)

    cell_width = None
    if cells and config.long_bars == LONG_BARS_SQUEEZE:
        cell_width = f"{100 / len(cells):.4f}"

    context = {
        "config": config,
        "course": course,
        "user_id": user_id,
        "block_id": block_instance_id,
        "cells": cells,
        "cell_width": cell_width,
        "now_index": _now_index(config, activities, now),
        "percentage": percentage(activities, completions),
    }
    return render_to_string("completion_progress/bar.html", context)


@dataclass(frozen=True)
class UserProgress:
    user_id: int
    activities: list[Activity]
    completions: dict[int, int | str]
    entries: list[ActivityProgress]
    percentage: int
    bar: SafeString


def build_user_progress(block, user_id: int, activities: Sequence[Activity] | None = None) -> UserProgress:
    """Run the whole pipeline for one block and one user."""

    config = block.get_config()
    course = block.course
    if activities is None:
        activities = get_activities(course.id, config)
    visible = filter_visibility(activities, user_id, course)
    submitted = student_submissions(course.id, user_id)
    user_completions = completions(visible, user_id, course, submitted)
    return UserProgress(
        user_id=user_id,
        activities=visible,
        completions=user_completions,
        entries=describe_progress(visible, user_completions),
        percentage=percentage(visible, user_completions),
        bar=progress_bar(visible, user_completions, config, user_id, course, block.id),
    )
