"""Metrics tracking for a batch of test cases."""

import time


class BatchMetrics:
    """Counts solved/failed cases and times the batch."""

    def __init__(self):
        self.start_time = None
        self.end_time = None
        self.solved = 0
        self.failed = 0

    def start(self):
        self.start_time = time.time()

    def stop(self):
        self.end_time = time.time()

    def record(self, result):
        if result.ok:
            self.solved += 1
        else:
            self.failed += 1

    @property
    def total(self) -> int:
        return self.solved + self.failed

    @property
    def elapsed(self):
        if self.start_time is None:
            return 0.0
        end = self.end_time if self.end_time else time.time()
        return end - self.start_time
