from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping

from django.conf import settings

ORDER_BY_TIME = "orderbytime"
ORDER_BY_COURSE = "orderbycourse"

LONG_BARS_SQUEEZE = "squeeze"
LONG_BARS_SCROLL = "scroll"
LONG_BARS_WRAP = "wrap"

ACTIVITIES_COMPLETION = "activitycompletion"
ACTIVITIES_SELECTED = "selectedactivities"

STATUS_COMPLETE = "complete"
STATUS_FAILED = "failed"
STATUS_SUBMITTED = "submitted"
STATUS_NOT_COMPLETED = "notCompleted"
STATUS_FUTURE_NOT_COMPLETED = "futureNotCompleted"

DEFAULT_COLOURS = {
    "completed_colour": "#73A839",
    "submittednotcomplete_colour": "#FFCC00",
    "notCompleted_colour": "#C71C22",
    "futureNotCompleted_colour": "#025187",
}

_STATUS_COLOUR_KEYS = {
    STATUS_COMPLETE: "completed_colour",
    STATUS_SUBMITTED: "submittednotcomplete_colour",
    STATUS_FAILED: "notCompleted_colour",
    STATUS_NOT_COMPLETED: "notCompleted_colour",
    STATUS_FUTURE_NOT_COMPLETED: "futureNotCompleted_colour",
}

STATUS_LABELS = {
    STATUS_COMPLETE: "Completed",
    STATUS_FAILED: "Failed",
    STATUS_SUBMITTED: "Submitted and awaiting completion",
    STATUS_NOT_COMPLETED: "Not completed",
    STATUS_FUTURE_NOT_COMPLETED: "Not completed",
}


class BlockConfigError(ValueError):
    """Raised when stored block settings hold an unsupported value."""


def get_colour(key: str) -> str:
    overrides = getattr(settings, "COMPLETION_PROGRESS", {}).get("COLOURS", {})
    return overrides.get(key) or DEFAULT_COLOURS[key]


def colour_for_status(status: str) -> str:
    return get_colour(_STATUS_COLOUR_KEYS[status])


def _choice(data: Mapping[str, Any], key: str, allowed: tuple[str, ...], default: str) -> str:
    value = data.get(key) or default
    if value not in allowed:
        raise BlockConfigError(
            f"Unsupported value {value!r} for {key!r}; expected one of {', '.join(allowed)}"
        )
    return value


def _flag(value: Any) -> bool:
    # Settings forms post "0"/"1" strings.
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


@dataclass(frozen=True)
class BlockConfig:
    order_by: str = ORDER_BY_TIME
    long_bars: str = LONG_BARS_SQUEEZE
    show_icons: bool = False
    show_percentage: bool = False
    title: str = ""
    activities_included: str = ACTIVITIES_COMPLETION
    selected_activities: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "BlockConfig":
        data = data or {}
        selected = data.get("selected_activities") or ()
        if isinstance(selected, str):
            selected = [selected]
        return cls(
            order_by=_choice(data, "order_by", (ORDER_BY_TIME, ORDER_BY_COURSE), ORDER_BY_TIME),
            long_bars=_choice(
                data,
                "long_bars",
                (LONG_BARS_SQUEEZE, LONG_BARS_SCROLL, LONG_BARS_WRAP),
                LONG_BARS_SQUEEZE,
            ),
            show_icons=_flag(data.get("show_icons", False)),
            show_percentage=_flag(data.get("show_percentage", False)),
            title=str(data.get("title") or ""),
            activities_included=_choice(
                data,
                "activities_included",
                (ACTIVITIES_COMPLETION, ACTIVITIES_SELECTED),
                ACTIVITIES_COMPLETION,
            ),
            selected_activities=tuple(str(item) for item in selected),
        )

    def to_mapping(self) -> dict[str, Any]:
        data = asdict(self)
        data["selected_activities"] = list(self.selected_activities)
        return data
