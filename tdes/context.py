"""The simulation context: clock, event queue, peers and random source."""

from __future__ import annotations

import heapq
import itertools
import random
from typing import Optional

from tdes.events import Event
from tdes.peer import Peer


class SimulationError(RuntimeError):
    """Raised when the simulation reaches an inconsistent state."""


class Context:
    """Holds all state of a discrete-event simulation and drives it."""

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = random.SystemRandom().getrandbits(64)
        self._seed = seed
        self.rng = random.Random(seed)
        self.clock = 0.0
        self.peers: list[Peer] = []
        self.event_q: list[tuple[float, int, Event]] = []
        self._counter = itertools.count()

    def seed(self) -> int:
        """Return the seed the random source was initialised with."""
        return self._seed

    def add_event(self, event: Event) -> None:
        """Schedule ``event``; events with equal timestamps run in insertion order."""
        heapq.heappush(self.event_q, (event.timestamp, next(self._counter), event))

    def add_peer(self, peer: Peer) -> int:
        """Register ``peer``, assign it the next id and return that id."""
        new_id = len(self.peers)
        peer.id = new_id
        print(f"Adding peer with id {peer.id} on position {peer.position}")
        self.peers.append(peer)
        return new_id

    def run(self) -> None:
        """Process events until the queue is empty."""
        self.run_for(-1.0)

    def run_for(self, deadline: float) -> None:
        """Process events up to ``deadline``; a negative deadline means no limit.

        The first event past the deadline is discarded and the clock is set to
        the deadline.
        """
        print(">> STARTING SIMULATION")
        has_deadline = deadline >= 0.0

        while self.event_q:
            timestamp, _, event = heapq.heappop(self.event_q)

            if has_deadline and timestamp > deadline:
                self.clock = float(deadline)
                print("Simulation reached the deadline")
                break

            if timestamp < self.clock:
                raise SimulationError("An event was earlier than the simulation clock")

            self.clock = timestamp
            event.process(self)

        print(f'Finished simulation with seed "{self.seed()}".')
        print(">> FINISHED SIMULATION")