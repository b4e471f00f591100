"""Small demonstration that fills a queue and prints it in priority order."""

from __future__ import annotations

from collections.abc import Sequence

from bstpqueue.priorityqueue import PriorityQueue

_SAMPLE = [
    ("Dolores", 5),
    ("Bernard", 4),
    ("Ford", 2),
    ("Arnold", 8),
    ("William", 8),
    ("Teddy", 8),
    ("Curry", 2),
    ("James", 2),
    ("Harden", 4),
]


def _sample_queue() -> PriorityQueue[str]:
    queue: PriorityQueue[str] = PriorityQueue()
    for value, priority in _SAMPLE:
        queue.enqueue(value, priority)
    return queue


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sample queue, one ``priority value: name`` line per entry."""
    for priority, value in _sample_queue():
        print(f"{priority} value: {value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())