"""Sending messages between peers with distance-based latency."""

from __future__ import annotations

from typing import Optional

from tdes.context import Context
from tdes.events import Message, MessageDeliveryEvent
from tdes.utils import distance_between_points


def send_message_to(ctx: Context, sender: int, receiver: int, msg: Optional[Message]) -> bool:
    """Schedule delivery of ``msg`` from ``sender`` to ``receiver``.

    The message arrives after a delay equal to the distance between the two
    peers. Returns False, scheduling nothing, if either peer does not exist.
    """
    count = len(ctx.peers)
    if not (0 <= sender < count and 0 <= receiver < count):
        return False

    arrival_time = ctx.clock + distance_between_points(
        ctx.peers[sender].position, ctx.peers[receiver].position
    )
    ctx.add_event(MessageDeliveryEvent(arrival_time, receiver, msg))
    return True