"""A minimal peer that bounces messages back and forth, counting each one."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from tdes.context import Context
from tdes.events import Message
from tdes.message_passing import send_message_to
from tdes.peer import Peer

logger = logging.getLogger(__name__)

MAX_VALUE = 5


@dataclass
class ExampleMessage(Message):
    """Message exchanged between example peers."""

    sender: int
    receiver: int


@dataclass
class ExampleMessage2(Message):
    """A second message type that example peers ignore."""

    sender: int
    receiver: int


def _on_message_receive(ctx: Context, receiver_id: int, msg: Optional[Message]) -> None:
    peer = ctx.peers[receiver_id]
    if not isinstance(peer, ExamplePeer):
        logger.debug("peer %s is not an ExamplePeer", receiver_id)
        return

    if not isinstance(msg, ExampleMessage):
        return

    reply = ExampleMessage(sender=receiver_id, receiver=msg.sender)
    peer.value += 1
    print(f"peer with id {receiver_id} has value {peer.value}")

    if peer.value < MAX_VALUE:
        send_message_to(ctx, receiver_id, msg.sender, reply)


class ExamplePeer(Peer):
    """Peer that counts received messages and answers until it has seen five."""

    def __init__(self, x: float, y: float, z: float) -> None:
        super().__init__(x, y, z)
        self.on_message_receive = _on_message_receive
        self.value = 0