"""Singleton: one shared counter hands out unique interview numbers."""

from __future__ import annotations

import threading


class InterviewNumber:
    """A counter of interview numbers, starting from 1."""

    def __init__(self) -> None:
        self.id = 0
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Advance the counter and return the new number."""
        with self._lock:
            self.id += 1
            return self.id


_instance = InterviewNumber()


def get_instance() -> InterviewNumber:
    """Return the one shared counter."""
    return _instance


def main(argv=None) -> int:
    first = get_instance()
    print(first.next_id())

    second = get_instance()
    print(second.next_id())

    print(hex(id(first)))
    print(hex(id(second)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())