# bank_api/core/numbering.py
"""
Sequential account-number allocation.

Numbers start at a fixed base and only ever go up. The lock guards the
read-and-increment and nothing else; callers hash passwords and write to the
database outside of it.
"""
import threading

from bank_api.config import settings


class AccountNumberAllocator:
    def __init__(self, start: int):
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> int:
        """Hand out the next number; never returns the same value twice."""
        with self._lock:
            number = self._next
            self._next += 1
        return number

    def advance_past(self, number: int | None) -> int:
        """
        Make sure the next number is greater than ``number``.

        Called at startup with the highest number already stored so a restart
        does not re-issue numbers. Never moves the counter backwards.
        """
        with self._lock:
            if number is not None and number >= self._next:
                self._next = number + 1
            return self._next


# Process-wide allocator used by account creation
allocator = AccountNumberAllocator(settings.account_number_start)
