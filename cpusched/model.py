"""Process records and the console dialogue shared by the schedulers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO, TypeVar

RULE = "-" * 58

_T = TypeVar("_T")


@dataclass(frozen=True)
class Process:
    """A process waiting to be scheduled."""

    pid: str
    arrival: float
    burst: float


@dataclass(frozen=True)
class Dispatch:
    """A process handed the CPU at ``start``, which is also its waiting time."""

    process: Process
    start: float


def _take(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"missing {what}") from None


def _parse(convert: Callable[[str], _T], tokens: Iterator[str], what: str) -> _T:
    token = _take(tokens, what)
    try:
        return convert(token)
    except ValueError:
        raise ValueError(f"invalid {what}: {token!r}") from None


def read_processes(tokens: Iterable[str], out: TextIO) -> list[Process]:
    """Read a process count and that many processes, writing prompts to ``out``.

    When ``tokens`` is an iterator, whatever follows the processes is left in it.
    """
    tokens = iter(tokens)
    out.write("Enter The Number Of Process:- ")
    count = _parse(int, tokens, "process count")
    processes = []
    for _ in range(count):
        out.write(f"{RULE}\n")
        out.write("Enter The Process Id:- ")
        pid = _take(tokens, "process id")
        out.write("Enter The Arrival time:- ")
        arrival = _parse(float, tokens, "arrival time")
        out.write("Enter The Burst Time:- ")
        burst = _parse(float, tokens, "burst time")
        out.write(f"{RULE}\n")
        processes.append(Process(pid, arrival, burst))
    return processes


def format_dispatch(dispatch: Dispatch) -> str:
    """Render one dispatch as the report block the schedulers print."""
    process = dispatch.process
    return (
        f"At Time:- {dispatch.start:f}\n"
        f"{RULE}\n"
        f"Process ID:- {process.pid}\n"
        f"Arrival Time:- {process.arrival:f}\n"
        f"Burst Time:- {process.burst:f}\n"
        f"Wating Time:- {dispatch.start:f}\n"
        f"\n{RULE}\n"
    )


def average_waiting_time(dispatches: Sequence[Dispatch]) -> float:
    """Mean waiting time over a schedule; an empty schedule has none."""
    if not dispatches:
        raise ValueError("no dispatches to average")
    return sum(d.start for d in dispatches) / len(dispatches)