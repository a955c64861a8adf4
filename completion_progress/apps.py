from django.apps import AppConfig


class CompletionProgressConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "completion_progress"
    verbose_name = "Completion progress"
