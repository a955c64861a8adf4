"""Views that show the completion progress block outside a course page."""

from django.contrib.auth.decorators import login_required
from django.http import Http404, HttpResponseForbidden
from django.shortcuts import get_object_or_404, render

from courses import services as course_services
from courses.models import CourseEnrollment

from .models import ProgressBlock
from .services import build_user_progress, get_activities


@login_required
def block_detail(request, block_id: int):
    """Display the current user's own progress bar."""

    block = get_object_or_404(ProgressBlock.objects.select_related("course"), pk=block_id)
    enrollment = CourseEnrollment.objects.filter(
        course=block.course, user=request.user
    ).first()
    if enrollment is None:
        raise Http404()

    context = {
        "block": block,
        "course": block.course,
        "config": block.get_config(),
        "progress": build_user_progress(block, request.user.id),
        "is_teacher": enrollment.role == CourseEnrollment.Role.TEACHER,
    }
    return render(request, "completion_progress/block_detail.html", context)


@login_required
def overview(request, block_id: int):
    """Display every student's progress to the course teachers."""

    block = get_object_or_404(ProgressBlock.objects.select_related("course"), pk=block_id)
    if not course_services.is_course_teacher(block.course, request.user.id):
        return HttpResponseForbidden()

    activities = get_activities(block.course_id, block.get_config())
    students = course_services.get_enrolled_users(
        block.course, role=CourseEnrollment.Role.STUDENT
    )
    rows = [
        {
            "student": student,
            "progress": build_user_progress(block, student.id, activities=activities),
        }
        for student in students
    ]
    return render(
        request,
        "completion_progress/overview.html",
        {"block": block, "course": block.course, "rows": rows},
    )
