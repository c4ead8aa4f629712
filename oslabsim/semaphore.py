"""Producer-consumer over a bounded buffer guarded by counting semaphores."""

from __future__ import annotations

import sys
from collections.abc import Sequence


class BufferFull(RuntimeError):
    """Raised when producing into a full buffer."""


class BufferEmpty(RuntimeError):
    """Raised when consuming from an empty buffer."""


class BoundedBuffer:
    """A buffer with mutex, full and empty semaphore counts."""

    def __init__(self, capacity: int = 3) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self.mutex = 1
        self.full = 0
        self.empty = capacity
        self.items = 0

    def __len__(self) -> int:
        return self.items

    def produce(self) -> int:
        """Add an item and return its number."""
        if self.mutex != 1 or self.empty == 0:
            raise BufferFull("Buffer is Full")
        self.empty -= 1
        self.full += 1
        self.items += 1
        return self.items

    def consume(self) -> int:
        """Remove the latest item and return its number."""
        if self.mutex != 1 or self.full == 0:
            raise BufferEmpty("Buffer is empty")
        self.full -= 1
        self.empty += 1
        self.items -= 1
        return self.items + 1


def main(argv: Sequence[str] | None = None) -> int:
    buffer = BoundedBuffer()
    print("\n 1 : Producer\n 2 : Consumer\n 3 : Exit")
    tokens = (token for line in sys.stdin for token in line.split())
    while True:
        print("\nChose one option 1 , 2 or 3 : ", end="", flush=True)
        token = next(tokens, None)
        if token is None:
            print()
            return 0
        try:
            choice = int(token)
        except ValueError:
            raise SystemExit(f"not a number: {token}") from None
        try:
            if choice == 1:
                print(f"\nProducer produced item {buffer.produce()}")
            elif choice == 2:
                print(f"\nconsumer consumed the item {buffer.consume()}")
            elif choice == 3:
                return 0
        except (BufferFull, BufferEmpty) as error:
            print(f"{error}\n")


if __name__ == "__main__":
    sys.exit(main())