"""URL configuration for the completion progress block."""

from django.urls import path

from .views import block_detail, overview

app_name = "completion_progress"

urlpatterns = [
    path("blocks/<int:block_id>/", block_detail, name="block-detail"),
    path("blocks/<int:block_id>/overview/", overview, name="overview"),
]
