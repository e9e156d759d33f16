"""Events that prompt a style refresh."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

# Moderation log action recorded when a moderator edits community styling
STYLING_ACTION = "community_styling"


class EventType(str, Enum):
    APP_INSTALL = "AppInstall"
    APP_UPGRADE = "AppUpgrade"
    MOD_ACTION = "ModAction"


@dataclass(frozen=True)
class TriggerEvent:
    type: EventType
    subreddit: str
    action: str | None = None  # only set for MOD_ACTION

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> TriggerEvent:
        try:
            event_type = EventType(payload["type"])
            subreddit = payload["subreddit"]
        except KeyError as exc:
            raise ValueError(f"trigger payload is missing {exc.args[0]!r}") from None
        if not isinstance(subreddit, str) or not subreddit:
            raise ValueError("trigger payload has no subreddit name")
        return cls(type=event_type, subreddit=subreddit, action=payload.get("action"))


def is_styling_event(event: TriggerEvent) -> bool:
    """Installs and upgrades always qualify; mod actions only when they touch styling."""
    if event.type is EventType.MOD_ACTION:
        return event.action == STYLING_ACTION
    return True
