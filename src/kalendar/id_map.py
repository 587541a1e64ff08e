# SPDX-License-Identifier: MIT

import typer

from kalendar import state as app_state
from kalendar.model.event import EventId
from kalendar.repository.id_map import ID_MAP_REPO


def clear_id_map_if_required() -> None:
    if app_state.get_clear_ids():
        ID_MAP_REPO.clear_ids()


def resolve_event_id(synthetic_id: int) -> EventId:
    """Map a short id typed on the command line to the stored event id."""
    try:
        return ID_MAP_REPO.get_real_id(synthetic_id)
    except KeyError:
        raise typer.BadParameter(
            f"Unknown event id {synthetic_id}; list events to refresh ids"
        )
