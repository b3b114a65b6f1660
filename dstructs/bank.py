"""Event-driven simulation of customers queuing at bank windows."""

from __future__ import annotations

import argparse
import random as _random
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

from .linkedlist import LinkedList
from .linkqueue import LinkQueue

CLOSE_TIME = 480
DURATION_TIME = 20
INTERVAL_TIME = 10
WINDOWS = 4


class EventType(IntEnum):
    """Arrival, or departure from window 1 to 4."""

    ARRIVE = 0
    LEAVE_1 = 1
    LEAVE_2 = 2
    LEAVE_3 = 3
    LEAVE_4 = 4


@dataclass(frozen=True)
class Event:
    """An event at minute ``occur_time``; ``kind`` 0 is an arrival, k > 0 a departure from window k."""

    occur_time: int
    kind: int


@dataclass(frozen=True)
class Customer:
    """A queued customer: arrival minute, service time, and arrival number."""

    arrived_time: int
    duration: int
    count: int


def compare_events(a: Event, b: Event) -> int:
    """Return -1, 0 or 1 as ``a`` happens before, with or after ``b``."""
    if a.occur_time < b.occur_time:
        return -1
    if a.occur_time == b.occur_time:
        return 0
    return 1


def order_insert(events: LinkedList, event: Event) -> None:
    """Insert ``event`` before the first event not earlier than it."""
    pos = events.locate(event, lambda e, x: compare_events(e, x) != 1)
    events.insert(pos if pos is not None else len(events) + 1, event)


class BankSimulation:
    """One working day at a bank with several windows, each with its own queue."""

    def __init__(
        self,
        close_time: int = CLOSE_TIME,
        duration_time: int = DURATION_TIME,
        interval_time: int = INTERVAL_TIME,
        windows: int = WINDOWS,
        rng: _random.Random | None = None,
    ) -> None:
        if duration_time < 1 or interval_time < 1:
            raise ValueError("durations and intervals must be positive")
        if windows < 1:
            raise ValueError("at least one window is needed")
        self.close_time = close_time
        self.duration_time = duration_time
        self.interval_time = interval_time
        self.windows = windows
        self.rng = rng if rng is not None else _random.Random()
        self.open_for_day()

    def open_for_day(self) -> None:
        """Reset counters and queues and schedule the first arrival at minute 0."""
        self.total_time = 0
        self.customer_num = 0
        self.events = LinkedList()
        self.current = Event(0, EventType.ARRIVE)
        order_insert(self.events, self.current)
        self.queues = [LinkQueue() for _ in range(self.windows)]

    def more_events(self) -> bool:
        return not self.events.is_empty()

    def next_event(self) -> Event:
        """Take the earliest event off the event list and make it current."""
        self.current = self.events.delete(1)
        return self.current

    def _queue(self, window: int) -> LinkQueue:
        if not 1 <= window <= self.windows:
            raise ValueError(f"invalid window {window}")
        return self.queues[window - 1]

    def customer_arrived(self) -> None:
        """Handle the current arrival: schedule the next one and queue the customer."""
        self.customer_num += 1
        duration = self.rng.randint(1, self.duration_time)
        interval = self.rng.randint(1, self.interval_time)
        arrival = self.current.occur_time
        following = Event(arrival + interval, EventType.ARRIVE)
        if following.occur_time < self.close_time:
            order_insert(self.events, following)
        window = self.shortest_queue()
        queue = self._queue(window)
        customer = Customer(arrival, duration, self.customer_num)
        queue.enqueue(customer)
        if len(queue) == 1:
            order_insert(self.events, Event(arrival + duration, window))

    def customer_departure(self) -> None:
        """Handle the current departure and schedule the next one at that window."""
        window = self.current.kind
        queue = self._queue(window)
        customer = queue.dequeue()
        self.total_time += self.current.occur_time - customer.arrived_time
        if not queue.is_empty():
            nxt = queue.head()
            self.current = Event(self.current.occur_time + nxt.duration, window)
            order_insert(self.events, self.current)

    def shortest_queue(self) -> int:
        """Number (from 1) of the first window with the shortest queue."""
        lengths = [len(q) for q in self.queues]
        return lengths.index(min(lengths)) + 1

    def close_for_day(self) -> float:
        """Average minutes a customer spent in the bank."""
        if not self.customer_num:
            return 0.0
        return self.total_time / self.customer_num

    def run(self) -> float:
        """Simulate the whole day and return the average stay."""
        self.open_for_day()
        while self.more_events():
            event = self.next_event()
            if event.kind == EventType.ARRIVE:
                self.customer_arrived()
            else:
                self.customer_departure()
        return self.close_for_day()


def main(argv: Sequence[str] | None = None) -> int:
    """Run one simulated day and report the customer count and average stay."""
    parser = argparse.ArgumentParser(description="Bank queuing simulation.")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--close-time", type=int, default=CLOSE_TIME)
    parser.add_argument("--windows", type=int, default=WINDOWS)
    args = parser.parse_args(argv)
    sim = BankSimulation(
        close_time=args.close_time,
        windows=args.windows,
        rng=_random.Random(args.seed),
    )
    average = sim.run()
    print(
        f"{sim.customer_num} customers today, "
        f"average stay {average:.2f} minutes."
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())