"""Round-robin scheduling with a fixed time slice."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

from .model import RULE, Process, read_processes


@dataclass(frozen=True)
class Slice:
    """One turn on the CPU, with the burst time still left when it began."""

    pid: str
    burst: float

    def __str__(self) -> str:
        return f"Process Id:- {self.pid},Burst Time:- {self.burst:f},Status:- Running"


def round_robin(processes: Iterable[Process], time_slice: int) -> list[Slice]:
    """Cycle through the processes until every one has finished."""
    if time_slice <= 0:
        raise ValueError(f"time slice must be positive, got {time_slice}")
    queue = deque((process.pid, process.burst) for process in processes)
    slices = []
    while queue:
        pid, remaining = queue.popleft()
        slices.append(Slice(pid, remaining))
        if remaining > time_slice:
            queue.append((pid, remaining - time_slice))
    return slices


def main(argv: list[str] | None = None) -> int:
    """Read processes and a time slice from standard input and print each turn."""
    argparse.ArgumentParser(
        prog="cpusched-rr",
        description="Round-robin CPU scheduling.",
    ).parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    try:
        processes = read_processes(tokens, sys.stdout)
        print(RULE)
        sys.stdout.write("Enter The Time Quantum Or Time Slice:- ")
        token = next(tokens, None)
        if token is None:
            raise ValueError("missing time slice")
        try:
            time_slice = int(token)
        except ValueError:
            raise ValueError(f"invalid time slice: {token!r}") from None
        print(RULE)
        slices = round_robin(processes, time_slice)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for turn in slices:
        print(turn)
    return 0