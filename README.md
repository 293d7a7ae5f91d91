# cpusched

Small console programs that step through classic CPU scheduling
algorithms. They are meant for operating-systems coursework.

## Installation

```
pip install .
```

## Commands

Each scheduler reads whitespace-separated input from standard input.
It writes the prompts below to standard output as it goes:

1. the number of processes;
2. for each process, an id, an arrival time and a burst time.

- `cpusched-fcfs` runs the processes in the order they were entered
  (first come, first served). For each process it prints a report block:
  its start time, id, arrival time, burst time and waiting time. It ends
  with the average waiting time.
- `cpusched-sjf` prints the same report with the shortest burst first.
  Processes with equal bursts keep the order they were entered in.
- `cpusched-rr` then asks for an integer time quantum. It prints one line
  for every turn the round-robin scheduler hands out:
  `Process Id:- P1,Burst Time:- 5.000000,Status:- Running`. Each line
  shows the burst time still left when that turn began. A process that
  still has more than the quantum left goes back to the end of the queue.
  The command stops when every process has had its last turn.
- `cpusched-threads` starts three threads. Each thread prints one message
  (`From Thread 1` and so on), in whatever order the threads run. The
  command then prints `Thread N Returns: 0` for each thread.

Example session:

```
$ cpusched-fcfs
Enter The Number Of Process:- 3
...
Average Waiting Time:- 3.666667
```

The commands handle bad input as follows:

- Missing or malformed input, such as a count or time that is not a
  number, prints `error: ...` to standard error. The command exits with
  status 1.
- A time quantum of zero or less is reported the same way.
- With zero processes, the average waiting time is printed as `nan`.

## Library use

The schedulers can also be called from Python:

```python
from cpusched.model import Process, format_dispatch, average_waiting_time
from cpusched.fcfs import fcfs
from cpusched.sjf import sjf, sjf_order
from cpusched.round_robin import round_robin

procs = [Process("P1", 0, 4), Process("P2", 0, 3), Process("P3", 0, 5)]
dispatches = fcfs(procs)            # list of Dispatch(process, start)
for d in dispatches:
    print(format_dispatch(d), end="")
print(average_waiting_time(dispatches))   # 3.666...

for turn in round_robin(procs, 4):  # list of Slice(pid, burst)
    print(turn)
```

The library provides these functions:

- `sjf_order(processes)` returns the processes in shortest-job-first
  order, without building the dispatch records.
- `sjf(processes)` returns the dispatch records in that order.
- `average_waiting_time` raises `ValueError` for an empty schedule.
- `round_robin` raises `ValueError` for a time slice that is not positive.
- `cpusched.model.read_processes(tokens, out)` runs the input dialogue
  over any iterable of string tokens. It writes the prompts to `out`. It
  raises `ValueError` when input is missing or malformed.
- `cpusched.threads.run_threads(messages, out)` prints each message from
  its own thread and returns a list of `0` statuses.

## What it does not do

All schedulers start at time zero and run the processes back to back.
The arrival time is recorded and printed, but no scheduler uses it to
delay or reorder a process. There is no preemption beyond the
round-robin quantum. No schedule is saved anywhere, and there are no
charts or other graphical output.

## Running the tests

```
pip install .[test]
pytest
```