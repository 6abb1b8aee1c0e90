"""Task ID and confirmation token generation."""
import time
import uuid
from typing import Callable, Iterable, Optional


class TaskIdGenerator:
    """Issues time-derived task IDs that never repeat within a process.

    IDs are milliseconds since the epoch. Two requests within the same
    millisecond, or a clock that steps backwards, bump the ID past the last
    one issued.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        """Initialize the generator.

        Args:
            clock: Returns seconds since the epoch; defaults to time.time
        """
        self._clock = clock or time.time
        self._last_id = 0

    def next_id(self, existing_ids: Iterable[int] = ()) -> int:
        """Get a fresh task ID.

        Args:
            existing_ids: IDs already in the collection, which must be skipped

        Returns:
            An ID greater than every ID issued so far and every existing ID
        """
        candidate = int(self._clock() * 1000)
        floor = max([self._last_id, *existing_ids], default=0)
        if candidate <= floor:
            candidate = floor + 1
        self._last_id = candidate
        return candidate


def new_confirmation_token() -> str:
    """Get a token for a pending delete confirmation."""
    return str(uuid.uuid4())
