from __future__ import annotations

from datetime import timedelta

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from assignments import services as assignment_services
from courses import services as course_services
from courses.models import Course, CourseEnrollment, CourseModule

from completion_progress.config import ACTIVITIES_COMPLETION, ORDER_BY_TIME
from completion_progress.models import ProgressBlock

DEFAULT_STUDENT_COUNT = 3
DEFAULT_TEACHER_COUNT = 1


class Command(BaseCommand):
    help = "Creates a demo course with assignments and a completion progress block"

    def add_arguments(self, parser):
        parser.add_argument(
            "--slug",
            default="progress-demo",
            help="Course slug",
        )
        parser.add_argument(
            "--password",
            default="testpass123",
            help="Password for the created users",
        )
        parser.add_argument(
            "--students",
            type=int,
            default=DEFAULT_STUDENT_COUNT,
            help="Number of students to enrol",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        slug: str = options["slug"]
        password: str = options["password"]
        student_count: int = options["students"]

        User = get_user_model()

        def get_user(username: str):
            user, created = User.objects.get_or_create(
                username=username, defaults={"email": "", "is_active": True}
            )
            if created:
                user.set_password(password)
                user.save(update_fields=["password"])
            return user

        course, _ = Course.objects.update_or_create(
            slug=slug,
            defaults={"title": "Progress demo course", "enable_completion": True},
        )

        # Start from a clean course so the command is idempotent
        CourseModule.objects.filter(course=course).delete()
        ProgressBlock.objects.filter(course=course).delete()

        for index in range(DEFAULT_TEACHER_COUNT):
            course_services.enrol_user(
                course, get_user(f"{slug}-teacher{index + 1}"), CourseEnrollment.Role.TEACHER
            )
        for index in range(student_count):
            course_services.enrol_user(
                course, get_user(f"{slug}-student{index + 1}"), CourseEnrollment.Role.STUDENT
            )

        now = timezone.now()
        for weeks, title in enumerate(("Essay outline", "First draft", "Final essay"), start=-1):
            assignment_services.create_assignment(
                course,
                title=title,
                due_date=now + timedelta(weeks=weeks),
                completion_submit=True,
                completion=CourseModule.Tracking.AUTOMATIC,
            )

        block = ProgressBlock.objects.create(
            course=course,
            config={
                "order_by": ORDER_BY_TIME,
                "long_bars": "squeeze",
                "show_icons": True,
                "show_percentage": True,
                "title": "",
                "activities_included": ACTIVITIES_COMPLETION,
            },
        )

        self.stdout.write(self.style.SUCCESS("Demo course is ready."))
        self.stdout.write(
            f"Course: {course.title} (/{course.slug}) | Activities: {CourseModule.objects.filter(course=course).count()}"
        )
        self.stdout.write(f"Open the block: /progress/blocks/{block.id}/")
