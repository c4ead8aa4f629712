"""Least-recently-used page replacement."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class PagingResult:
    """Fault count for a reference string and the frames left at the end."""

    references: int
    faults: int
    frames: tuple[int, ...]

    @property
    def miss_ratio(self) -> float:
        return self.faults / self.references * 100

    @property
    def hit_ratio(self) -> float:
        return (self.references - self.faults) / self.references * 100

    def __str__(self) -> str:
        return (
            f"Total number of faults = {self.faults}\n"
            f"Total number of references = {self.references}\n"
            f"Miss ratio = {self.miss_ratio:.2f}%\n"
            f"Hit ratio = {self.hit_ratio:.2f}%"
        )


def simulate_lru(references: Iterable[int], frame_size: int) -> PagingResult:
    """Run the reference string through ``frame_size`` frames.

    The first ``frame_size`` references fill the frames, each one a fault.
    """
    pages = list(references)
    if not 1 <= frame_size <= len(pages):
        raise ValueError("frame size must be between 1 and the number of references")
    frames = pages[:frame_size]
    recency = list(frames)
    faults = frame_size
    for page in pages[frame_size:]:
        if page in recency:
            recency.remove(page)
        recency.append(page)
        if page not in frames:
            faults += 1
            victim = next((p for p in recency if p in frames), None)
            if victim is not None:
                frames[frames.index(victim)] = page
    return PagingResult(len(pages), faults, tuple(frames))


def main(argv: Sequence[str] | None = None) -> int:
    numbers = (int(token) for line in sys.stdin for token in line.split())
    try:
        print("Enter the number of reference : ", end="", flush=True)
        count = next(numbers)
        print("Enter the references : ", end="", flush=True)
        references = [next(numbers) for _ in range(count)]
        print("Enter the frame size : ", end="", flush=True)
        frame_size = next(numbers)
    except StopIteration:
        raise SystemExit("unexpected end of input") from None
    try:
        print(simulate_lru(references, frame_size))
    except ValueError as error:
        print(error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())