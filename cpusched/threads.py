"""Print messages from several threads at once."""

from __future__ import annotations

import argparse
import sys
import threading
from collections.abc import Iterable
from typing import TextIO

MESSAGES = ("From Thread 1", "From Thread 2", "From Thread 3")

_output_lock = threading.Lock()


def print_function(message: str, out: TextIO) -> None:
    """Write one message on its own line."""
    with _output_lock:
        out.write(f"{message}\n")


def run_threads(messages: Iterable[str], out: TextIO) -> list[int]:
    """Print each message from its own thread and wait for all of them.

    Returns the creation status of each thread in order, 0 for every thread
    that was started; a thread that cannot be started raises instead.
    """
    workers = [
        threading.Thread(target=print_function, args=(message, out))
        for message in messages
    ]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return [0 for _ in workers]


def main(argv: list[str] | None = None) -> int:
    """Run the three message threads and report how each was created."""
    argparse.ArgumentParser(
        prog="cpusched-threads",
        description="Print a message from each of three threads.",
    ).parse_args(argv)
    statuses = run_threads(MESSAGES, sys.stdout)
    for number, status in enumerate(statuses, start=1):
        print(f"Thread {number} Returns: {status}")
    return 0