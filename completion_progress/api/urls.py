from django.urls import path

from .views import BlockProgressView


urlpatterns = [
    path(
        "api/completion-progress/<int:block_id>/",
        BlockProgressView.as_view(),
        name="completion-progress-api",
    ),
]
