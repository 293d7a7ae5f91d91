"""First-come, first-served scheduling."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable

from .model import Dispatch, Process, average_waiting_time, format_dispatch, read_processes


def fcfs(processes: Iterable[Process]) -> list[Dispatch]:
    """Run processes in the order given, each starting when the previous ends."""
    dispatches = []
    time = 0.0
    for process in processes:
        dispatches.append(Dispatch(process, time))
        time += process.burst
    return dispatches


def main(argv: list[str] | None = None) -> int:
    """Read processes from standard input and print their FCFS schedule."""
    argparse.ArgumentParser(
        prog="cpusched-fcfs",
        description="First-come, first-served CPU scheduling.",
    ).parse_args(argv)
    try:
        processes = read_processes(sys.stdin.read().split(), sys.stdout)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    dispatches = fcfs(processes)
    for dispatch in dispatches:
        sys.stdout.write(format_dispatch(dispatch))
    average = average_waiting_time(dispatches) if dispatches else math.nan
    print(f"Average Waiting Time:- {average:f}")
    return 0