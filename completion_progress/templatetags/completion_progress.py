from __future__ import annotations

from django import template

from ..services import build_user_progress

register = template.Library()


@register.inclusion_tag("completion_progress/block.html")
def completion_progress_bar(block, user):
    return {
        "block": block,
        "config": block.get_config(),
        "progress": build_user_progress(block, user.id),
    }
