from typing import Optional

from loguru import logger

import config
from core.record_store import RecordStore
from core.utils import format_member_id


class IdAllocator:
    """
    Hands out sequential, zero-padded membership IDs.

    The counter is read from the roster once and then kept in memory, so a
    second process allocating against the same file will issue the same IDs.
    """

    def __init__(self, store: RecordStore, default_start: int = config.DEFAULT_STARTING_MEMBER_ID):
        self.store = store
        self.default_start = default_start
        self._last_id: Optional[int] = None

    @property
    def last_id(self) -> int:
        if self._last_id is None:
            self.initialize()
        return self._last_id

    def initialize(self) -> int:
        """
        Scans the roster for the highest numeric ID.
        Rows with an empty or non-numeric ID are skipped.

        Returns:
            int: The highest ID found, or `default_start` for an empty roster.
        """
        highest = self.default_start
        for row in self.store.read_all():
            raw = row[config.COL_MEMBER_ID].strip() if row else ""
            if not raw:
                continue
            if not (raw.isascii() and raw.isdigit()):
                logger.debug(f"Skipping row with unparsable member ID {raw!r}")
                continue
            highest = max(highest, int(raw))

        self._last_id = highest
        logger.info(f"ID allocator ready for {self.store.path}: last issued {format_member_id(highest)}")
        return highest

    def next_id(self) -> str:
        """Consumes and returns the next ID (e.g. '00000043')."""
        self._last_id = self.last_id + 1
        return format_member_id(self._last_id)
