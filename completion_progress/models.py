"""Block instances that show completion progress on a course page."""

import logging

from django.core.exceptions import ValidationError
from django.db import models

from courses.models import Course

from .config import BlockConfig, BlockConfigError

logger = logging.getLogger(__name__)


class ProgressBlock(models.Model):
    course = models.ForeignKey(
        Course,
        on_delete=models.CASCADE,
        related_name="progress_blocks",
    )
    page_type_pattern = models.CharField(max_length=64, default="course-view-*")
    default_region = models.CharField(max_length=16, default="side-post")
    default_weight = models.IntegerField(default=0)
    config = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("course", "default_region", "default_weight", "id")
        verbose_name = "Completion progress block"
        verbose_name_plural = "Completion progress blocks"

    def __str__(self) -> str:  # pragma: no cover - simple representation
        return f"Completion progress for {self.course}"

    def clean(self):
        super().clean()
        try:
            BlockConfig.from_mapping(self.config)
        except BlockConfigError as exc:
            raise ValidationError({"config": str(exc)}) from exc

    def get_config(self) -> BlockConfig:
        """Return parsed settings; invalid stored settings fall back to defaults."""
        try:
            return BlockConfig.from_mapping(self.config)
        except BlockConfigError:
            logger.exception("Invalid block config, using defaults", extra={"block_id": self.pk})
            return BlockConfig()
