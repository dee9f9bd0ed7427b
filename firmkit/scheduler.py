"""A cooperative, tick-driven task scheduler."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

Callback = Callable[[], None]


def milliseconds() -> int:
    """Return a monotonic clock reading in whole milliseconds."""
    return time.monotonic_ns() // 1_000_000


@dataclass
class Task:
    """A periodic job and the bookkeeping the scheduler keeps for it."""

    task: Callback
    period: int
    init: Callback | None = None
    elapsed: int = 0
    active: bool = True


class Scheduler:
    """Runs registered tasks every *period* milliseconds, checked once per *tick*.

    Tasks are identified by the 1-based id that ``register_task`` returns.
    ``run`` stops after a number of ticks, or once *timeout* milliseconds have
    passed; with neither it runs forever.
    """

    def __init__(
        self,
        tick: int,
        capacity: int,
        timeout: int | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        if tick <= 0:
            raise ValueError("tick must be positive")
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        if timeout is not None and timeout < 0:
            raise ValueError("timeout must not be negative")
        self.tick = tick
        self.capacity = capacity
        self.timeout = timeout
        self._clock = clock if clock is not None else milliseconds
        self.tasks: list[Task] = []
        self.ticks = 0
        self._initialised: set[int] = set()

    def register_task(self, init: Callback | None, task: Callback, period: int) -> int:
        """Add a task and return its id."""
        if len(self.tasks) >= self.capacity:
            raise ValueError(f"scheduler already holds {self.capacity} tasks")
        if period < 0:
            raise ValueError("period must not be negative")
        self.tasks.append(Task(task=task, period=period, init=init))
        return len(self.tasks)

    def _task(self, task_id: int) -> Task:
        if not 1 <= task_id <= len(self.tasks):
            raise ValueError(f"no task with id {task_id}")
        return self.tasks[task_id - 1]

    def stop_task(self, task_id: int) -> None:
        """Keep the task from running until it is started again."""
        self._task(task_id).active = False

    def start_task(self, task_id: int) -> None:
        """Let a stopped task run again."""
        self._task(task_id).active = True

    def set_period(self, task_id: int, period: int) -> None:
        """Change how often the task runs."""
        if period < 0:
            raise ValueError("period must not be negative")
        self._task(task_id).period = period

    def step(self) -> list[int]:
        """Advance one tick and return the ids of the tasks that ran."""
        self.ticks += 1
        ran: list[int] = []
        for task_id, entry in enumerate(self.tasks, start=1):
            if entry.elapsed >= entry.period:
                if entry.active:
                    entry.task()
                    ran.append(task_id)
                entry.elapsed = 0
            entry.elapsed += self.tick
        return ran

    def _initialise(self) -> None:
        for task_id, entry in enumerate(self.tasks, start=1):
            if task_id in self._initialised:
                continue
            self._initialised.add(task_id)
            if entry.init is not None:
                entry.init()

    def run(self, ticks: int | None = None) -> int:
        """Call pending init functions, then step once per tick; return the ticks run."""
        if ticks is not None and ticks < 0:
            raise ValueError("ticks must not be negative")
        self._initialise()
        started = last = self._clock()
        done = 0
        while ticks is None or done < ticks:
            now = self._clock()
            if ticks is None and self.timeout is not None and now - started >= self.timeout:
                break
            waited = now - last
            if waited >= self.tick:
                last = now
                self.step()
                done += 1
            else:
                time.sleep((self.tick - waited) / 1000)
        return done


class _CountingTask:
    """A demo task that reports how many times it has run."""

    def __init__(self, period: int) -> None:
        self.period = period
        self.runs = 0
        self.initialised = False

    def init(self) -> None:
        self.initialised = True
        self.runs = 0
        print(f"Init task {self.period} millisecond")

    def __call__(self) -> None:
        current = self.runs
        self.runs += 1
        print(f"This is a counter from task {self.period}ms: {current}")


def main(argv: list[str] | None = None) -> int:
    """Run three counting tasks, with the second one stopped, until the timeout."""
    scheduler = Scheduler(tick=100, capacity=3, timeout=6000)
    print(f"Tick: {scheduler.tick}")
    print(f"Timeout: {scheduler.timeout}")

    jobs = [_CountingTask(period) for period in (500, 1000, 1500)]
    ids = [scheduler.register_task(job.init, job, job.period) for job in jobs]
    scheduler.stop_task(ids[1])
    scheduler.run()
    return 0