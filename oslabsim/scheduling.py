"""CPU scheduling: non-preemptive priority and round robin."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import accumulate


@dataclass(frozen=True)
class ProcessTiming:
    """Waiting and turnaround time of one process (pids start at 1)."""

    pid: int
    burst: int
    waiting: int
    turnaround: int
    priority: int | None = None
    arrival: int = 0


@dataclass(frozen=True)
class ScheduleResult:
    """Per-process timings in reporting order, with averages."""

    timings: tuple[ProcessTiming, ...]
    average_waiting: float
    average_turnaround: float

    @property
    def order(self) -> tuple[int, ...]:
        return tuple(t.pid for t in self.timings)


def _truncating_mean(total: int, count: int) -> float:
    return float(int(total / count)) if abs(total) < 2**52 else float(abs(total) // count * (1 if total >= 0 else -1))


def priority_schedule(bursts: Iterable[int], priorities: Iterable[int]) -> ScheduleResult:
    """Run processes in ascending priority order, all arriving at time 0.

    Ties follow a selection sort. Averages are whole-number quotients, and the
    turnaround average is taken over waiting and turnaround times together.
    """
    burst_list, priority_list = list(bursts), list(priorities)
    if len(burst_list) != len(priority_list) or not burst_list:
        raise ValueError("need one priority per burst and at least one process")
    jobs = [(pr, bt, pid) for pid, (bt, pr) in enumerate(zip(burst_list, priority_list), start=1)]
    for i in range(len(jobs) - 1):
        pos = min(range(i, len(jobs)), key=lambda k: jobs[k][0])
        jobs[i], jobs[pos] = jobs[pos], jobs[i]
    waits = [0, *accumulate(bt for _, bt, _ in jobs[:-1])]
    timings = tuple(
        ProcessTiming(pid, bt, wait, wait + bt, priority=pr)
        for (pr, bt, pid), wait in zip(jobs, waits)
    )
    total_wait = sum(t.waiting for t in timings)
    total_all = total_wait + sum(t.turnaround for t in timings)
    return ScheduleResult(
        timings, _truncating_mean(total_wait, len(jobs)), _truncating_mean(total_all, len(jobs))
    )


def round_robin(arrivals: Iterable[int], bursts: Iterable[int], quantum: int) -> ScheduleResult:
    """Round-robin scheduling; timings are listed in completion order.

    After each turn the next process runs if it has arrived, otherwise the
    scan restarts at the first process.
    """
    arrival_list, burst_list = list(arrivals), list(bursts)
    if len(arrival_list) != len(burst_list) or not burst_list:
        raise ValueError("need one arrival per burst and at least one process")
    if quantum < 1 or min(burst_list) < 1:
        raise ValueError("quantum and burst times must be at least 1")
    count = len(burst_list)
    remaining = list(burst_list)
    time = index = time_at_restart = 0
    done: list[ProcessTiming] = []
    while len(done) < count:
        rest = remaining[index]
        if rest > 0:
            step = min(rest, quantum)
            remaining[index] -= step
            time += step
            if remaining[index] == 0:
                turnaround = time - arrival_list[index]
                burst = burst_list[index]
                done.append(
                    ProcessTiming(index + 1, burst, turnaround - burst, turnaround,
                                  arrival=arrival_list[index])
                )
        if index == count - 1 or arrival_list[index + 1] > time:
            index = 0
            if len(done) < count:
                if time == time_at_restart:
                    raise ValueError("remaining processes never arrive")
                time_at_restart = time
        else:
            index += 1
    return ScheduleResult(
        tuple(done),
        sum(t.waiting for t in done) / count,
        sum(t.turnaround for t in done) / count,
    )


def _ask(numbers: Iterator[int], prompt: str) -> int:
    print(prompt, end="", flush=True)
    try:
        return next(numbers)
    except StopIteration:
        raise SystemExit("unexpected end of input") from None


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate CPU scheduling.")
    parser.add_argument("algorithm", choices=["priority", "rr"])
    args = parser.parse_args(argv)
    numbers = (int(token) for line in sys.stdin for token in line.split())
    first, second = [], []
    try:
        if args.algorithm == "priority":
            count = _ask(numbers, "Enter the total number of process: ")
            print("Enter burst time and priority ")
            for pid in range(1, count + 1):
                first.append(_ask(numbers, f"P[{pid}] Burst time:"))
                second.append(_ask(numbers, "Priority:"))
            result = priority_schedule(first, second)
            print("Process\tPriority\tBT\tWT\tTAT\t")
            rows = [f"{t.pid}\t{t.priority}\t\t{t.burst}\t{t.waiting}\t{t.turnaround}"
                    for t in result.timings]
        else:
            count = _ask(numbers, "Enter total process : ")
            for pid in range(1, count + 1):
                print(f"Enter arrival time and burst time for process number P[{pid}]")
                first.append(_ask(numbers, "Arrival Time:"))
                second.append(_ask(numbers, "Burst Time:"))
            result = round_robin(first, second, _ask(numbers, "Enter time Quantum : "))
            print("Process\t\tTAT\t\tWT")
            rows = [f"P[{t.pid}]\t\t{t.turnaround}\t\t{t.waiting}" for t in result.timings]
    except ValueError as error:
        print(error)
        return 1
    print("\n".join(rows))
    print(f"Average Waiting Time={result.average_waiting:f}")
    print(f"Average Turnaround Time={result.average_turnaround:f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())