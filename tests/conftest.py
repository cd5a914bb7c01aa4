# SPDX-License-Identifier: MIT

import random
from pathlib import Path
from typing import Iterator, Optional

import pendulum
import pytest

from calgrid import configuration
from calgrid.layout.calendar_math import CalendarSystem
from calgrid.model.event import Event
from calgrid.repository.configuration import CONFIGURATION_REPO
from calgrid.repository.event import EVENT_REPO


def make_event(
    event_id: str,
    start: str,
    end: str,
    group_key: Optional[str] = None,
    day: str = "2024-03-04",
    tz: str = "UTC",
) -> Event:
    """Build an event from HH:mm times on the given day."""
    return {
        "id": event_id,
        "start": pendulum.parse(f"{day}T{start}", tz=tz),
        "end": pendulum.parse(f"{day}T{end}", tz=tz),
        "group_key": group_key,
        "title": f"Event {event_id}",
    }


def random_events(rng: random.Random, count: int) -> list[Event]:
    day_start = pendulum.datetime(2024, 3, 4, tz="UTC")
    events: list[Event] = []
    for index in range(count):
        start = rng.randrange(0, 22 * 60, 15)
        duration = rng.choice([15, 30, 45, 60, 90, 120])
        events.append(
            {
                "id": f"e{index:03d}",
                "start": day_start.add(minutes=start),
                "end": day_start.add(minutes=start + duration),
                "group_key": None,
            }
        )
    return events


@pytest.fixture
def utc_calendar() -> CalendarSystem:
    return CalendarSystem(timezone="UTC", week_start=pendulum.MONDAY)


@pytest.fixture
def app_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration and events at a temporary directory."""
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    config_path.mkdir()
    data_path.mkdir()
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_EVENTS_PATH", data_path / "events.yaml")
    CONFIGURATION_REPO.reset()
    EVENT_REPO.reset()
    yield tmp_path
    CONFIGURATION_REPO.reset()
    EVENT_REPO.reset()
