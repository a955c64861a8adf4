from django.test import TestCase
from django.urls import reverse


class UrlConfTests(TestCase):
    def test_admin_redirects_to_login(self) -> None:
        response = self.client.get(reverse("admin:index"))
        self.assertEqual(response.status_code, 302)

    def test_progress_routes_are_namespaced(self) -> None:
        self.assertEqual(
            reverse("completion_progress:block-detail", args=[1]),
            "/progress/blocks/1/",
        )
        self.assertEqual(
            reverse("completion-progress-api", args=[1]),
            "/api/completion-progress/1/",
        )
