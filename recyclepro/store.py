"""In-process holder for the single saved location.

The record is replaced wholesale or cleared, never edited in place. Readers
get the frozen record itself, so nothing they do can change the stored copy.
"""

from __future__ import annotations

import logging
import threading

from recyclepro.logging_utils import log_event
from recyclepro.models import SavedLocation

logger = logging.getLogger(__name__)


class LocationStore:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._location: SavedLocation | None = None

    def get(self) -> SavedLocation | None:
        with self._lock:
            return self._location

    def save(self, location: SavedLocation) -> None:
        with self._lock:
            self._location = location
        log_event(logger, "location_saved", town_id=location.town_id, zone_id=location.zone_id)

    def clear(self) -> None:
        with self._lock:
            self._location = None
        log_event(logger, "location_cleared")


location_store = LocationStore()
