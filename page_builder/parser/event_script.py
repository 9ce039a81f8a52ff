"""Read a recorded sequence of builder UI events and replay it against a session."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from page_builder.model.errors import EventScriptError
from page_builder.session import BuilderSession
from page_builder.utils.logger import get_logger

LOGGER = get_logger(__name__)

ACTION_DROP = "drop"
ACTION_CLICK = "click"
ACTION_DELETE = "delete"
ACTION_INPUT = "input"
ACTION_CHANGE = "change"
ACTION_PANEL_DELETE = "panel_delete"

# Keys each action requires, in addition to "action".
REQUIRED_KEYS: Mapping[str, Tuple[str, ...]] = {
    ACTION_DROP: ("kind",),
    ACTION_CLICK: ("id",),
    ACTION_DELETE: ("id",),
    ACTION_INPUT: ("name", "value"),
    ACTION_CHANGE: ("name", "value"),
    ACTION_PANEL_DELETE: (),
}

NULLABLE_KEYS = frozenset({(ACTION_CLICK, "id")})


@dataclass(frozen=True)
class SessionEvent:
    """A single UI event captured from the builder."""

    action: str
    kind: Optional[str] = None
    element_id: Optional[str] = None
    name: Optional[str] = None
    value: Optional[str] = None


class EventScriptParser:
    """Validate decoded JSON and turn it into :class:`SessionEvent` objects."""

    def __init__(self, data: Any) -> None:
        self._data = data

    def parse(self) -> List[SessionEvent]:
        raw_events = self._raw_events()
        return [self._parse_event(index, raw) for index, raw in enumerate(raw_events)]

    def _raw_events(self) -> Sequence[Any]:
        data = self._data
        if isinstance(data, dict):
            if "events" not in data:
                raise EventScriptError("script object has no 'events' list")
            data = data["events"]
        if not isinstance(data, list):
            raise EventScriptError("events must be a JSON list")
        return data

    def _parse_event(self, index: int, raw: Any) -> SessionEvent:
        if not isinstance(raw, dict):
            raise EventScriptError("event must be an object", index)
        action = raw.get("action")
        if action not in REQUIRED_KEYS:
            raise EventScriptError(f"unknown action {action!r}", index)

        values: Dict[str, Optional[str]] = {}
        for key in REQUIRED_KEYS[action]:
            if key not in raw:
                raise EventScriptError(f"{action} event is missing {key!r}", index)
            value = raw[key]
            if value is None and (action, key) in NULLABLE_KEYS:
                values[key] = None
                continue
            if not isinstance(value, str):
                raise EventScriptError(f"{action} event field {key!r} must be a string", index)
            values[key] = value

        return SessionEvent(
            action=action,
            kind=values.get("kind"),
            element_id=values.get("id"),
            name=values.get("name"),
            value=values.get("value"),
        )


def load_event_script(path: Path) -> List[SessionEvent]:
    """Read a UTF-8 JSON event script from disk."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise EventScriptError(f"{path.name} is not valid JSON: {exc.msg}") from exc
    events = EventScriptParser(data).parse()
    LOGGER.debug("Loaded %d event(s) from %s", len(events), path.name)
    return events


def replay(session: BuilderSession, events: Sequence[SessionEvent]) -> BuilderSession:
    """Apply ``events`` to ``session`` in order."""
    for event in events:
        if event.action == ACTION_DROP:
            session.on_element_dropped(event.kind or "")
        elif event.action == ACTION_CLICK:
            session.on_element_clicked(event.element_id)
        elif event.action == ACTION_DELETE:
            session.on_delete_requested(event.element_id or "")
        elif event.action == ACTION_INPUT:
            session.on_field_input(event.name or "", event.value or "")
        elif event.action == ACTION_CHANGE:
            session.on_field_changed(event.name or "", event.value or "")
        elif event.action == ACTION_PANEL_DELETE:
            session.on_panel_delete()
    return session
