# SPDX-License-Identifier: MIT

import atexit

from kalendar.repository.configuration import CONFIGURATION_REPO
from kalendar.repository.event import EVENT_REPO
from kalendar.repository.id_map import ID_MAP_REPO


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()
    ID_MAP_REPO.flush()
    EVENT_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
