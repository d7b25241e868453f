"""A bounded first-in first-out queue with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator, Sequence

MENU = "\n\n1. Enqueue \n2. Dequeue \n3. Display \n4. Peek\n5. Exit\n"
EMPTY_MESSAGE = "\nCircular Queue is Empty.\n"


class QueueOverflow(Exception):
    """Raised when adding to a full queue."""


class QueueUnderflow(Exception):
    """Raised when reading from an empty queue."""


class CircularQueue:
    """A FIFO queue holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: deque[int] = deque()

    def enqueue(self, value: int) -> None:
        """Add a value at the rear."""
        if len(self._items) >= self.capacity:
            raise QueueOverflow("Circular Queue Overflow")
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the front value."""
        if not self._items:
            raise QueueUnderflow("Circular Queue Underflow")
        return self._items.popleft()

    def peek(self) -> int:
        """The front value, left in place."""
        if not self._items:
            raise QueueUnderflow("Circular Queue is Empty.")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)


def _integers(text: str) -> Iterator[int]:
    for token in text.split():
        try:
            yield int(token)
        except ValueError:
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Run the menu, reading numbers from standard input."""
    parser = argparse.ArgumentParser(description="Interactive bounded queue.")
    parser.parse_args(argv)
    out = sys.stdout
    numbers = _integers(sys.stdin.read())

    out.write("Enter the size of queue.\n")
    size = next(numbers, None)
    if size is None:
        return 1
    queue = CircularQueue(max(size, 0))
    out.write(MENU)

    while True:
        out.write("\nEnter your choice:")
        choice = next(numbers, None)
        if choice is None or choice == 5:
            break
        if choice == 1:
            out.write("\nEnter value to be inserted.")
            value = next(numbers, None)
            if value is None:
                break
            try:
                queue.enqueue(value)
            except QueueOverflow:
                out.write("Circular Queue Overflow\n")
            else:
                out.write(f"{value} enqueued into Circular Queue\n")
        elif choice == 2:
            try:
                value = queue.dequeue()
            except QueueUnderflow:
                out.write("Circular Queue Underflow\n")
            else:
                out.write(f"{value} dequeued from the Circular Queue\n.")
        elif choice == 3:
            if not queue:
                out.write(EMPTY_MESSAGE)
            else:
                out.write("\nElements in Circular Queue are: ")
                out.write("->".join(str(v) for v in queue))
        elif choice == 4:
            try:
                value = queue.peek()
            except QueueUnderflow:
                out.write(EMPTY_MESSAGE)
            else:
                out.write(f"{value} is the peek element.\n")
        else:
            out.write("Enter the choices b/w (1-5).")
    return 0