# SPDX-License-Identifier: MIT

from kalendar.model.event import EventRecord
from kalendar.time import now_utc


def get_event_record_template() -> EventRecord:
    now = now_utc()
    return {
        "id": None,
        "title": "",
        "description": None,
        "attendee": None,
        "start_time": "",
        "end_time": "",
        "color": None,
        "is_recurring": False,
        "created": now,
        "updated": now,
    }
