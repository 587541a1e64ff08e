# SPDX-License-Identifier: MIT

from typing import TypedDict

from kalendar.model.event import EventId


class IdMap(TypedDict):
    """
    Short ids typed on the command line, mapped to real event ids.

    Example:

    Event with an id of "9b1d...".
    Synthetic id for that event is 7.

    real_event_id = id_map["synthetic_to_real"][7] # returns "9b1d..."
    """

    synthetic_to_real: dict[int, EventId]
    real_to_synthetic: dict[EventId, int]
