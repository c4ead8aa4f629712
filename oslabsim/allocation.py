"""Contiguous memory allocation: first fit, best fit and worst fit."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO

# Best fit only considers blocks whose leftover space is below this bound.
BEST_FIT_CEILING = 999


@dataclass(frozen=True)
class Placement:
    """Where one file went: the block index and the block's size before it."""

    file_size: int
    block: int | None = None
    block_size: int | None = None

    @property
    def placed(self) -> bool:
        return self.block is not None

    def __str__(self) -> str:
        if self.placed:
            return f"File size {self.file_size} is put in {self.block_size} partition"
        return f"File size {self.file_size} must wait"


_Chooser = Callable[[Sequence[int], int], "int | None"]


def _allocate(blocks: Iterable[int], files: Iterable[int], choose: _Chooser) -> list[Placement]:
    free = list(blocks)
    placements = []
    for size in files:
        index = choose(free, size)
        if index is None:
            placements.append(Placement(size))
        else:
            placements.append(Placement(size, index, free[index]))
            free[index] -= size
    return placements


def _first(free: Sequence[int], size: int) -> int | None:
    return next((i for i, block in enumerate(free) if block - size >= 0), None)


def _best(free: Sequence[int], size: int) -> int | None:
    candidates = [
        (block - size, i)
        for i, block in enumerate(free)
        if 0 <= block - size < BEST_FIT_CEILING
    ]
    if not candidates:
        return None
    return min(candidates, key=lambda item: item[0])[1]


def _worst(free: Sequence[int], size: int) -> int | None:
    candidates = [(block - size, i) for i, block in enumerate(free) if block - size >= 0]
    if not candidates:
        return None
    return max(candidates, key=lambda item: item[0])[1]


def first_fit(blocks: Iterable[int], files: Iterable[int]) -> list[Placement]:
    """Put each file into the first block with room for it."""
    return _allocate(blocks, files, _first)


def best_fit(blocks: Iterable[int], files: Iterable[int]) -> list[Placement]:
    """Put each file into the block that leaves the least space over."""
    return _allocate(blocks, files, _best)


def worst_fit(blocks: Iterable[int], files: Iterable[int]) -> list[Placement]:
    """Put each file into the block that leaves the most space over."""
    return _allocate(blocks, files, _worst)


def format_placements(placements: Iterable[Placement]) -> str:
    """One line per file, saying where it went or that it must wait."""
    return "\n".join(str(placement) for placement in placements)


_STRATEGIES = {
    "first": ("First Fit", first_fit),
    "best": ("Best Fit", best_fit),
    "worst": ("Worst Fit", worst_fit),
}


def _tokens(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _ask(reader: Iterator[int], prompt: str) -> int:
    print(prompt, end="", flush=True)
    try:
        return next(reader)
    except StopIteration:
        raise SystemExit("unexpected end of input") from None


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate contiguous memory allocation.")
    parser.add_argument("strategy", nargs="?", choices=sorted(_STRATEGIES), default="first")
    args = parser.parse_args(argv)
    title, allocate = _STRATEGIES[args.strategy]
    reader = _tokens(sys.stdin)

    print(f"\n{title}\n")
    block_count = _ask(reader, "\nEnter no of block : ")
    file_count = _ask(reader, "\nEnter no of files : ")
    print("\n_____________________________")
    print("\nEnter size of blocks")
    blocks = [_ask(reader, f"\nBlock {n} : ") for n in range(1, block_count + 1)]
    print("\n_____________________________")
    print("\nEnter size of files")
    files = [_ask(reader, f"\nfile {n} : ") for n in range(1, file_count + 1)]
    print("\n_____________________________")
    for placement in allocate(blocks, files):
        print(f"\n{placement}")
    return 0


if __name__ == "__main__":
    sys.exit(main())