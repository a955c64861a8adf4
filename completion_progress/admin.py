from django.contrib import admin

from .models import ProgressBlock


@admin.register(ProgressBlock)
class ProgressBlockAdmin(admin.ModelAdmin):
    list_display = ("course", "default_region", "default_weight", "updated_at")
    list_filter = ("default_region",)
    search_fields = ("course__title",)
    autocomplete_fields = ("course",)
    readonly_fields = ("created_at", "updated_at")
