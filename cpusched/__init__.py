"""Console demonstrations of FCFS, SJF and round-robin CPU scheduling, and a threading demo."""

__version__ = "0.1.0"
__all__ = ["model", "fcfs", "sjf", "round_robin", "threads"]