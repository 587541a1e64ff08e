# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from kalendar import configuration, time
from kalendar.color import DEFAULT_EVENT_COLOR, resolve_event_color
from kalendar.model.event import Event, EventId, EventRecord, generate_event_id

logger = logging.getLogger(__name__)

REQUIRED_RECORD_KEYS = {"id", "title", "start_time", "end_time", "created", "updated"}


def _is_record_shaped(raw_record: Any) -> bool:
    return isinstance(raw_record, dict) and REQUIRED_RECORD_KEYS <= set(raw_record)


def event_from_record(
    record: EventRecord, default_color: str = DEFAULT_EVENT_COLOR
) -> Event:
    """
    Convert a stored record into a loaded event.

    The date comes from the start timestamp and both times become 12-hour
    display strings. An overnight record keeps its next-day end only as a
    time of day, which is what marks it as overnight once loaded.
    """
    return Event(
        id=cast(EventId, record["id"]),
        date=time.timestamp_date(record["start_time"]),
        start_time=time.to_12h(time.timestamp_time(record["start_time"])),
        end_time=time.to_12h(time.timestamp_time(record["end_time"])),
        title=record["title"],
        description=record["description"],
        attendee=record.get("attendee"),
        color=resolve_event_color(record["color"], default_color),
    )


class EventRepository:
    def __init__(self) -> None:
        self._records: Optional[list[EventRecord]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def records(self) -> list[EventRecord]:
        if self._records is None:
            self.__load_data()
        if self._records is None:
            raise ValueError()
        return self._records

    def __load_data(self) -> None:
        self._records = []
        if not configuration.DATA_EVENTS_DIR.is_dir():
            return

        for file_path in sorted(configuration.DATA_EVENTS_DIR.iterdir()):
            if file_path.suffix != ".yaml":
                continue
            try:
                raw_record = load(file_path.read_text(), Loader=Loader)
            except YAMLError:
                logger.warning("skipping unreadable event file %s", file_path)
                continue
            if raw_record is None:
                continue
            if not _is_record_shaped(raw_record):
                logger.warning("skipping malformed event file %s", file_path)
                continue
            try:
                record = self.__convert_record_for_deserialization(raw_record)
            except (KeyError, TypeError, ValueError):
                logger.warning("skipping malformed event file %s", file_path)
                continue
            self._records.append(record)
        logger.debug(
            "loaded %d events from %s",
            len(self._records),
            configuration.DATA_EVENTS_DIR,
        )

    def __save_data(self) -> None:
        configuration.DATA_EVENTS_DIR.mkdir(parents=True, exist_ok=True)

        # Write dirty records
        for record in self.records:
            if record["id"] in self._dirty_ids:
                serializable_record = self.__convert_record_for_serialization(
                    deepcopy(record)
                )
                file_path = configuration.DATA_EVENTS_DIR / f"{record['id']}.yaml"
                file_path.write_text(dump(serializable_record, Dumper=Dumper))

        # Remove deleted record files
        for event_id in self._deleted_ids:
            file_path = configuration.DATA_EVENTS_DIR / f"{event_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        logger.debug(
            "flushed %d changed and %d deleted events",
            len(self._dirty_ids),
            len(self._deleted_ids),
        )
        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._records is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        self._records = None
        self.is_dirty = False
        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def __convert_record_for_serialization(self, record: EventRecord) -> dict[str, Any]:
        serializable_record = cast(dict[str, Any], record)
        serializable_record["created"] = time.datetime_to_iso_str(
            serializable_record["created"]
        )
        serializable_record["updated"] = time.datetime_to_iso_str(
            serializable_record["updated"]
        )
        return serializable_record

    def __convert_record_for_deserialization(
        self, record: dict[str, Any]
    ) -> EventRecord:
        deserializable_record = record
        deserializable_record["created"] = time.datetime_from_value(
            deserializable_record["created"]
        )
        deserializable_record["updated"] = time.datetime_from_value(
            deserializable_record["updated"]
        )
        deserializable_record["start_time"] = time.timestamp_from_value(
            deserializable_record["start_time"]
        )
        deserializable_record["end_time"] = time.timestamp_from_value(
            deserializable_record["end_time"]
        )
        for key in ("start_time", "end_time"):
            if not isinstance(deserializable_record[key], str):
                raise TypeError(f"{key} must be a timestamp string")
        deserializable_record.setdefault("attendee", None)
        deserializable_record.setdefault("description", None)
        deserializable_record.setdefault("color", None)
        deserializable_record.setdefault("is_recurring", False)
        return cast(EventRecord, deserializable_record)

    def __find_record(self, id: EventId) -> EventRecord:
        matching = [record for record in self.records if record["id"] == id]
        if len(matching) == 0:
            raise KeyError(id)
        return matching[0]

    def save_new_event(self, record: EventRecord) -> EventId:
        self.is_dirty = True

        record["id"] = generate_event_id()
        self.records.append(record)
        self._dirty_ids.add(record["id"])

        return record["id"]

    def modify_event(
        self,
        id: EventId,
        title: Optional[str] = None,
        description: Optional[str] = None,
        attendee: Optional[str] = None,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        color: Optional[str] = None,
        remove_description: bool = False,
        remove_attendee: bool = False,
        remove_color: bool = False,
    ) -> None:
        record = self.__find_record(id)

        self.is_dirty = True
        self._dirty_ids.add(id)

        # Set updated timestamp to current moment
        record["updated"] = time.now_utc()
        if title is not None:
            record["title"] = title
        if description is not None:
            record["description"] = description
        if attendee is not None:
            record["attendee"] = attendee
        if start_time is not None:
            record["start_time"] = start_time
        if end_time is not None:
            record["end_time"] = end_time
        if color is not None:
            record["color"] = color

        if remove_description:
            record["description"] = None
        if remove_attendee:
            record["attendee"] = None
        if remove_color:
            record["color"] = None

    def delete_event(self, id: EventId) -> None:
        self.__find_record(id)

        self.is_dirty = True
        self._records = [record for record in self.records if record["id"] != id]
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)

    def get_record(self, id: EventId) -> EventRecord:
        return deepcopy(self.__find_record(id))

    def get_event(self, id: EventId, default_color: str = DEFAULT_EVENT_COLOR) -> Event:
        return event_from_record(self.__find_record(id), default_color)

    def get_all_events(self, default_color: str = DEFAULT_EVENT_COLOR) -> list[Event]:
        """All events ordered by start timestamp."""
        ordered = sorted(self.records, key=lambda record: record["start_time"])
        return [event_from_record(record, default_color) for record in ordered]


EVENT_REPO = EventRepository()
