"""Worker-thread scheduling for parse batches."""

from .scheduler import ParseTask, SchedulerError, TaskScheduler

__all__ = ["ParseTask", "SchedulerError", "TaskScheduler"]
