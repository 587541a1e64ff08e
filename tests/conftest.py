# SPDX-License-Identifier: MIT

"""
Shared fixtures.

Every test runs against a private config and data directory so the
repositories never touch the user's real calendar.
"""

from typing import Callable, Optional

import pytest

from kalendar import configuration
from kalendar import state as app_state
from kalendar.model.event import Event
from kalendar.repository.configuration import CONFIGURATION_REPO
from kalendar.repository.event import EVENT_REPO
from kalendar.repository.id_map import ID_MAP_REPO
from kalendar.view import state as view_state


@pytest.fixture(autouse=True)
def isolated_storage(tmp_path, monkeypatch):
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_EVENTS_DIR", data_path / "events")
    monkeypatch.setattr(configuration, "DATA_ID_MAP_PATH", data_path / "id_map.yaml")

    for repository in (CONFIGURATION_REPO, EVENT_REPO, ID_MAP_REPO):
        repository.reset()
    view_state.set_show_header(True)
    app_state.set_clear_ids(True)

    yield tmp_path

    for repository in (CONFIGURATION_REPO, EVENT_REPO, ID_MAP_REPO):
        repository.reset()


@pytest.fixture
def make_event() -> Callable[..., Event]:
    counter = {"next": 0}

    def _make_event(
        date: str = "2025-06-10",
        start_time: str = "9:00 AM",
        end_time: str = "10:00 AM",
        title: str = "Event",
        description: Optional[str] = None,
        attendee: Optional[str] = None,
        color: str = "#BCD8EC",
        id: Optional[str] = None,
    ) -> Event:
        counter["next"] += 1
        return Event(
            id=id if id is not None else f"event-{counter['next']}",
            date=date,
            start_time=start_time,
            end_time=end_time,
            title=title,
            description=description,
            attendee=attendee,
            color=color,
        )

    return _make_event
