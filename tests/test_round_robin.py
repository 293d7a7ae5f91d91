import io
import sys

import pytest

from cpusched.model import Process
from cpusched.round_robin import Slice, main, round_robin

PROCS = [Process("P1", 0.0, 5.0), Process("P2", 0.0, 8.0), Process("P3", 0.0, 2.0)]


def test_round_robin_worked_example():
    assert round_robin(PROCS, 4) == [
        Slice("P1", 5.0),
        Slice("P2", 8.0),
        Slice("P3", 2.0),
        Slice("P1", 1.0),
        Slice("P2", 4.0),
    ]


def test_slice_text():
    assert str(Slice("P1", 5.0)) == "Process Id:- P1,Burst Time:- 5.000000,Status:- Running"


def test_each_process_runs_down_its_burst():
    procs = [Process("A", 0.0, 7.0), Process("B", 0.0, 3.0), Process("C", 0.0, 10.0)]
    slices = round_robin(procs, 3)
    for process in procs:
        turns = [s.burst for s in slices if s.pid == process.pid]
        assert turns[0] == process.burst
        for prev, cur in zip(turns, turns[1:]):
            assert cur == prev - 3
        assert turns[-1] <= 3
        assert all(t > 3 for t in turns[:-1])


def test_single_process_runs_to_completion():
    turns = round_robin([Process("A", 0.0, 2.0)], 5)
    assert turns == [Slice("A", 2.0)]


def test_empty_queue():
    assert round_robin([], 4) == []


@pytest.mark.parametrize("time_slice", [0, -1])
def test_non_positive_time_slice(time_slice):
    with pytest.raises(ValueError):
        round_robin(PROCS, time_slice)


def test_main_worked_example(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\nP1 0 5\nP2 0 8\nP3 0 2\n4\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Enter The Time Quantum Or Time Slice:- " in out
    lines = out.splitlines()
    assert lines[-2:] == [
        "Process Id:- P1,Burst Time:- 1.000000,Status:- Running",
        "Process Id:- P2,Burst Time:- 4.000000,Status:- Running",
    ]


def test_main_missing_time_slice(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\nP1 0 5\n"))
    assert main([]) == 1
    assert "time slice" in capsys.readouterr().err