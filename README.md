# oslabsim

Small, dependency-free simulations of the algorithms met in an operating-systems
course. Each one can be used as a library function or run as an interactive
command.

| Module                  | What it simulates                                   |
|-------------------------|-----------------------------------------------------|
| `oslabsim.allocation`   | First fit, best fit and worst fit memory placement  |
| `oslabsim.bankers`      | Banker's algorithm safety check                     |
| `oslabsim.disk`         | C-SCAN disk scheduling                              |
| `oslabsim.lru`          | LRU page replacement, faults and hit/miss ratios    |
| `oslabsim.scheduling`   | Non-preemptive priority and round-robin scheduling  |
| `oslabsim.semaphore`    | Producer/consumer over a bounded buffer             |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Every command prompts for its input and reads whitespace-separated integers
from standard input, so values can be typed in or piped:

```
oslab-allocation [first|best|worst]   # default: first
oslab-bankers [--passes]
oslab-disk
oslab-lru
oslab-scheduling {priority,rr}
oslab-semaphore
```

`oslab-semaphore` shows a menu: `1` produces an item, `2` consumes one and `3`
(or end of input) exits.

Example:

```
printf '5 4 100 500 200 300 600 212 417 112 426' | oslab-allocation best
```

## Library use

### Memory allocation

```python
from oslabsim.allocation import first_fit, best_fit, worst_fit, format_placements

blocks = [100, 500, 200, 300, 600]
files = [212, 417, 112, 426]

print(format_placements(first_fit(blocks, files)))
print(format_placements(best_fit(blocks, files)))
print(format_placements(worst_fit(blocks, files)))
```

Each function returns a list of `Placement` records, one per file, in file
order. A `Placement` holds `file_size`, the index of the chosen `block` and the
`block_size` it had before the file went in; `placed` is false for a file that
fits nowhere and must wait. Space taken by a file is removed from its block,
so later files see what is left. Best fit only considers blocks whose leftover
space would be below `BEST_FIT_CEILING` (999).

### Banker's algorithm

```python
from oslabsim.bankers import check_safety, format_report

total = [10, 5, 7]
allocation = [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]]
maximum = [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]]

report = check_safety(total, allocation, maximum)
print(report.safe, report.sequence)
print(format_report(report))
```

`check_safety` sweeps over the processes until all have finished or a sweep
makes no progress. It returns a `SafetyReport` with every `Process` (its
`maximum`, `allocation` and `need`), the total allocation, the available
resources, the execution `sequence` and whether the system is `safe`.

`check_safety_passes` instead makes exactly one sweep per resource type and
also records, in `work_after`, the work vector after each process finished;
`oslab-bankers --passes` uses it. Rows of mismatched length raise `ValueError`.

### C-SCAN disk scheduling

```python
from oslabsim.disk import c_scan

result = c_scan([98, 183, 37, 122, 14, 124, 65, 67], head=53, cylinders=200)
print(result.seek_time, result.sequence)
```

The head serves requests above its position in ascending order, travels to
the last cylinder, jumps back to cylinder 0 (the jump is counted as head
movement) and serves the rest. A request at the head's own position is served
after the wrap-around. A request beyond the last cylinder raises `ValueError`.

### LRU page replacement

```python
from oslabsim.lru import simulate_lru

result = simulate_lru([7, 0, 1, 2, 0, 3, 0, 4, 2, 3], frame_size=3)
print(result.faults, result.miss_ratio, result.hit_ratio)
```

The first `frame_size` references fill the frames and each counts as a fault.
The `PagingResult` gives the number of references, the faults, the final
frames and the miss and hit ratios as percentages. A frame size below 1 or
above the number of references raises `ValueError`.

### CPU scheduling

```python
from oslabsim.scheduling import priority_schedule, round_robin

print(priority_schedule(bursts=[10, 1, 2, 1, 5], priorities=[3, 1, 4, 5, 2]))
print(round_robin(arrivals=[0, 1, 2], bursts=[5, 3, 1], quantum=2))
```

Both return a `ScheduleResult` with a `ProcessTiming` per process (process ids
start at 1), the average waiting and turnaround times, and the `order` of the
process ids.

`priority_schedule` runs every process from time 0 in ascending priority
value. Its averages are whole-number quotients, and its turnaround average is
taken over the waiting and turnaround times together.

`round_robin` lists timings in completion order. After each turn the next
process runs if it has arrived; otherwise the scan restarts at the first
process. A quantum or burst below 1, or processes that never arrive, raise
`ValueError`.

### Producer and consumer

```python
from oslabsim.semaphore import BoundedBuffer, BufferEmpty, BufferFull

buffer = BoundedBuffer()          # capacity 3
print(buffer.produce())           # 1
print(buffer.consume())           # 1
try:
    buffer.consume()
except BufferEmpty:
    print("Buffer is empty")
```

`produce` returns the number of the new item; `consume` returns the number of
the item removed. Producing into a full buffer raises `BufferFull`; consuming
from an empty one raises `BufferEmpty`.

## What it does not do

These are single-threaded, step-by-step simulations for study. The semaphore
module keeps counts only; it does not run real producer and consumer threads.
No results are saved: the commands print to standard output and nothing else.