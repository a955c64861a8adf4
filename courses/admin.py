from django.contrib import admin

from .models import (
    ActivityCompletion,
    Course,
    CourseEnrollment,
    CourseModule,
)


class CourseModuleInline(admin.TabularInline):
    model = CourseModule
    extra = 0
    fields = (
        "section",
        "position",
        "module_name",
        "instance_id",
        "name",
        "visible",
        "completion",
        "completion_expected",
    )
    ordering = ("section", "position")


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ("title", "slug", "enable_completion", "created_at")
    list_filter = ("enable_completion",)
    search_fields = ("title", "slug")
    prepopulated_fields = {"slug": ("title",)}
    readonly_fields = ("created_at", "updated_at")
    inlines = (CourseModuleInline,)


@admin.register(CourseEnrollment)
class CourseEnrollmentAdmin(admin.ModelAdmin):
    list_display = ("user", "course", "role", "enrolled_at")
    list_filter = ("role", "course")
    search_fields = ("user__username", "course__title")
    autocomplete_fields = ("course",)
    readonly_fields = ("enrolled_at",)


@admin.register(CourseModule)
class CourseModuleAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "course",
        "module_name",
        "section",
        "position",
        "visible",
        "completion",
    )
    list_filter = ("course", "module_name", "completion", "visible")
    search_fields = ("name", "course__title")
    autocomplete_fields = ("course",)


@admin.register(ActivityCompletion)
class ActivityCompletionAdmin(admin.ModelAdmin):
    list_display = ("course_module", "user", "state", "updated_at")
    list_filter = ("state",)
    search_fields = ("user__username", "course_module__name")
