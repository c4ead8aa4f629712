"""C-SCAN disk scheduling."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class SeekResult:
    """Total head movement and the order requests were served in."""

    seek_time: int
    sequence: tuple[int, ...]

    def __str__(self) -> str:
        order = "".join(f"{cylinder}->" for cylinder in self.sequence)
        return f"Seektime ={self.seek_time}\nSeek Sequence : {order}"


def c_scan(requests: Iterable[int], head: int, cylinders: int) -> SeekResult:
    """Serve requests moving up from the head, then jump to 0 and continue up.

    A request at the head's own position is served after the wrap-around.
    """
    pending = sorted(requests)
    last = cylinders - 1
    if any(request > last for request in pending):
        raise ValueError("Process cannot complete")
    if not pending:
        return SeekResult(0, ())

    upper = [r for r in pending if r > head]
    lower = [r for r in pending if r <= head]

    seek = 0
    position = head
    for request in upper:
        seek += request - position
        position = request
    seek += last - position
    seek += last
    position = 0
    for request in lower:
        seek += request - position
        position = request
    return SeekResult(seek, tuple(upper + lower))


def _tokens(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _ask(reader: Iterator[int], prompt: str = "") -> int:
    if prompt:
        print(prompt, end="", flush=True)
    try:
        return next(reader)
    except StopIteration:
        raise SystemExit("unexpected end of input") from None


def main(argv: Sequence[str] | None = None) -> int:
    reader = _tokens(sys.stdin)
    cylinders = _ask(reader, "Enter the Max number of Cylinders : ")
    count = _ask(reader, "Enter the Number of Requests : ")
    print("Enter the requests : ", end="", flush=True)
    requests = [_ask(reader) for _ in range(count)]
    if any(request > cylinders - 1 for request in requests):
        print("Process cannot complete")
        return 1
    head = _ask(reader, "Enter the current position of the head : ")
    print(c_scan(requests, head, cylinders))
    return 0


if __name__ == "__main__":
    sys.exit(main())