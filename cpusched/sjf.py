"""Shortest-job-first scheduling."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable

from .fcfs import fcfs
from .model import Dispatch, Process, average_waiting_time, format_dispatch, read_processes


def sjf_order(processes: Iterable[Process]) -> list[Process]:
    """Order processes by burst time; equal bursts keep their input order."""
    return sorted(processes, key=lambda process: process.burst)


def sjf(processes: Iterable[Process]) -> list[Dispatch]:
    """Run the shortest jobs first, back to back from time zero."""
    return fcfs(sjf_order(processes))


def main(argv: list[str] | None = None) -> int:
    """Read processes from standard input and print their SJF schedule."""
    argparse.ArgumentParser(
        prog="cpusched-sjf",
        description="Shortest-job-first CPU scheduling.",
    ).parse_args(argv)
    try:
        processes = read_processes(sys.stdin.read().split(), sys.stdout)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    dispatches = sjf(processes)
    for dispatch in dispatches:
        sys.stdout.write(format_dispatch(dispatch))
    average = average_waiting_time(dispatches) if dispatches else math.nan
    print(f"Average Waiting Time:- {average:f}")
    return 0