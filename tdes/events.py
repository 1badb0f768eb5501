"""Messages and the events processed by the simulation loop."""

from __future__ import annotations

import abc
import logging
import math
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from tdes.context import Context

logger = logging.getLogger(__name__)


def _format_time(value: float) -> str:
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


class Message:
    """Base class for everything that can be sent between peers."""


class Event(abc.ABC):
    """Something that happens at a point in simulated time."""

    def __init__(self, timestamp: float) -> None:
        self.timestamp = float(timestamp)

    @abc.abstractmethod
    def process(self, ctx: "Context") -> None:
        """Apply this event to the simulation."""

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.timestamp < other.timestamp

    def __repr__(self) -> str:
        return f"{type(self).__name__}(timestamp={self.timestamp!r})"


class SampleEvent(Event):
    """An event that only reports its value when processed."""

    def __init__(self, timestamp: float, value: int) -> None:
        super().__init__(timestamp)
        self.value = value

    def process(self, ctx: "Context") -> None:
        print(f"[{_format_time(ctx.clock)}]: SampleEvent triggered with value {self.value}!")


class Timer(abc.ABC):
    """Behaviour run when a timer event fires."""

    @abc.abstractmethod
    def fire(self, ctx: "Context") -> None:
        """Run the timer's action against the simulation."""


class TimerEvent(Event):
    """An event that fires a timer."""

    def __init__(self, timestamp: float, timer: Timer) -> None:
        super().__init__(timestamp)
        self.timer = timer

    def process(self, ctx: "Context") -> None:
        self.timer.fire(ctx)


class MessageDeliveryEvent(Event):
    """Delivery of a message to a peer."""

    def __init__(self, timestamp: float, receiver: int, message: Optional[Message]) -> None:
        super().__init__(timestamp)
        self.receiver = receiver
        self.message = message

    def process(self, ctx: "Context") -> None:
        if not 0 <= self.receiver < len(ctx.peers):
            logger.debug("dropping message for unknown peer %s", self.receiver)
            return
        message, self.message = self.message, None
        ctx.peers[self.receiver].on_message_receive(ctx, self.receiver, message)