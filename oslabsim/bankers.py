"""Banker's algorithm safety check."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import TextIO


@dataclass(frozen=True)
class Process:
    """A process with its maximum claim and current allocation."""

    pid: int
    maximum: tuple[int, ...]
    allocation: tuple[int, ...]

    @property
    def need(self) -> tuple[int, ...]:
        return tuple(m - a for m, a in zip(self.maximum, self.allocation))

    def can_run(self, work: Sequence[int]) -> bool:
        return all(n <= w for n, w in zip(self.need, work))


@dataclass(frozen=True)
class SafetyReport:
    """Outcome of a safety check."""

    processes: tuple[Process, ...]
    total_allocation: tuple[int, ...]
    available: tuple[int, ...]
    sequence: tuple[int, ...]
    safe: bool
    work_after: dict[int, tuple[int, ...]] = field(default_factory=dict)


def _build(
    total: Sequence[int],
    allocation: Sequence[Sequence[int]],
    maximum: Sequence[Sequence[int]],
) -> tuple[tuple[Process, ...], tuple[int, ...], tuple[int, ...]]:
    width = len(total)
    if len(allocation) != len(maximum):
        raise ValueError("allocation and maximum must list the same processes")
    for row in (*allocation, *maximum):
        if len(row) != width:
            raise ValueError(f"each row must have {width} resources")
    processes = tuple(
        Process(pid, tuple(maxrow), tuple(allocrow))
        for pid, (allocrow, maxrow) in enumerate(zip(allocation, maximum))
    )
    total_alloc = tuple(sum(column) for column in zip(*allocation)) if allocation else (0,) * width
    available = tuple(t - a for t, a in zip(total, total_alloc))
    return processes, total_alloc, available


def _release(work: list[int], process: Process) -> None:
    for index, amount in enumerate(process.allocation):
        work[index] += amount


def check_safety(
    total: Sequence[int],
    allocation: Sequence[Sequence[int]],
    maximum: Sequence[Sequence[int]],
) -> SafetyReport:
    """Sweep the processes until all finish or a sweep makes no progress."""
    processes, total_alloc, available = _build(total, allocation, maximum)
    work = list(available)
    sequence: list[int] = []
    finished: set[int] = set()
    while len(sequence) < len(processes):
        progressed = False
        for process in processes:
            if process.pid not in finished and process.can_run(work):
                _release(work, process)
                sequence.append(process.pid)
                finished.add(process.pid)
                progressed = True
        if not progressed:
            break
    return SafetyReport(
        processes,
        total_alloc,
        available,
        tuple(sequence),
        len(sequence) == len(processes),
    )


def check_safety_passes(
    total: Sequence[int],
    allocation: Sequence[Sequence[int]],
    maximum: Sequence[Sequence[int]],
) -> SafetyReport:
    """Make one sweep per resource type, recording the work vector after each process."""
    processes, total_alloc, available = _build(total, allocation, maximum)
    work = list(available)
    sequence: list[int] = []
    work_after: dict[int, tuple[int, ...]] = {}
    for _ in range(len(available)):
        for process in processes:
            if process.pid not in work_after and process.can_run(work):
                _release(work, process)
                sequence.append(process.pid)
                work_after[process.pid] = tuple(work)
    return SafetyReport(
        processes,
        total_alloc,
        available,
        tuple(sequence),
        len(work_after) == len(processes),
        work_after,
    )


def _row(values: Sequence[int]) -> str:
    return " ".join(str(v) for v in values)


def format_report(report: SafetyReport) -> str:
    """Render the allocation tables and the verdict."""
    lines = [
        "Matrix of Total Allocation",
        "\t".join(str(v) for v in report.total_allocation),
        "AVAILABLE MATRIX",
        "\t".join(str(v) for v in report.available),
        "",
        "PROCESS\tMAXIMUM\t\tALLOCATED\tNEED\t\tAVAIL",
    ]
    for process in report.processes:
        avail = report.work_after.get(process.pid, report.available if not report.work_after else ())
        lines.append(
            "\t".join(
                [
                    str(process.pid),
                    _row(process.maximum),
                    _row(process.allocation),
                    _row(process.need),
                    _row(avail),
                ]
            )
        )
    lines.append("")
    if report.safe:
        lines.append("Sequence of Execution")
        lines.append("".join(f"P{pid} -> " for pid in report.sequence))
        lines.append("System is Safe")
    else:
        lines.append("System is Not Safe")
    return "\n".join(lines)


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
    parser = argparse.ArgumentParser(description="Run the banker's safety check.")
    parser.add_argument(
        "--passes",
        action="store_true",
        help="sweep once per resource type instead of until no progress",
    )
    args = parser.parse_args(argv)
    reader = _tokens(sys.stdin)

    resources = _ask(reader, "ENTER THE NUMBER OF RESOURCES: ")
    print("MAXIMUM RESOURCE COUNT FOR:")
    total = [_ask(reader, f"RESOURCE {j}: ") for j in range(resources)]
    count = _ask(reader, "ENTER THE NUMBER OF PROCESSES: ")
    allocation, maximum = [], []
    for pid in range(count):
        print(f"\nPROCESS {pid}:")
        print("MAX Alloc: ", end="", flush=True)
        allocation.append([_ask(reader) for _ in range(resources)])
        print("MAX Requirement: ", end="", flush=True)
        maximum.append([_ask(reader) for _ in range(resources)])

    check = check_safety_passes if args.passes else check_safety
    print()
    print(format_report(check(total, allocation, maximum)))
    return 0


if __name__ == "__main__":
    sys.exit(main())