# SPDX-License-Identifier: MIT

from typing import Any, Optional

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from calgrid import configuration, time
from calgrid.model.event import Event


class EventRepository:
    """Read-only access to the events file."""

    def __init__(self) -> None:
        self._events: Optional[list[Event]] = None

    @property
    def events(self) -> list[Event]:
        if self._events is None:
            self.__load_data()
        if self._events is None:
            raise ValueError()
        return self._events

    def __load_data(self) -> None:
        self._events = []
        if not configuration.DATA_EVENTS_PATH.is_file():
            return

        raw = load(configuration.DATA_EVENTS_PATH.read_text(), Loader=Loader)
        if raw is None:
            return

        raw_events = raw.get("events") if isinstance(raw, dict) else raw
        if not isinstance(raw_events, list):
            raise ValueError(
                f"{configuration.DATA_EVENTS_PATH} must contain a list of events"
            )

        for index, raw_event in enumerate(raw_events):
            self._events.append(self.__convert_event_for_deserialization(index, raw_event))

    def __convert_event_for_deserialization(self, index: int, raw_event: Any) -> Event:
        if not isinstance(raw_event, dict):
            raise ValueError(f"Event #{index} is not a mapping")
        for key in ("id", "start", "end"):
            if raw_event.get(key) is None:
                raise ValueError(f"Event #{index} is missing '{key}'")

        try:
            start = time.datetime_from_value(raw_event["start"])
            end = time.datetime_from_value(raw_event["end"])
        except ValueError as e:
            raise ValueError(f"Event #{index} ({raw_event['id']}): {e}") from e

        group_key = raw_event.get("group_key")
        event: Event = {
            "id": str(raw_event["id"]),
            "start": start,
            "end": end,
            "group_key": None if group_key is None else str(group_key),
            "title": raw_event.get("title"),
        }
        return event

    def get_all_events(self) -> list[Event]:
        return list(self.events)

    def get_group_keys(self) -> list[str]:
        return sorted(
            {event["group_key"] for event in self.events if event["group_key"] is not None}
        )

    def reset(self) -> None:
        self._events = None


EVENT_REPO = EventRepository()
