"""Peers: the simulated nodes that receive messages."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional, TypeVar

if TYPE_CHECKING:
    from tdes.context import Context
    from tdes.events import Message

OnMessageReceive = Callable[["Context", int, Optional["Message"]], None]

P = TypeVar("P", bound="Peer")

_log = logging.getLogger(__name__)


def _ignore_message(ctx: "Context", receiver_id: int, msg: "Optional[Message]") -> None:
    """Default handler: log the message and otherwise drop it."""
    _log.debug(
        "[%s] peer %s has no message handler; dropped %r",
        ctx.clock,
        receiver_id,
        msg,
    )


class Peer:
    """A node in the simulation with a position and a message handler.

    Specialised peers subclass this and install their own handler through
    ``on_message_receive``, which is called as ``handler(ctx, receiver_id, msg)``.
    """

    def __init__(self, x: float, y: float, z: float) -> None:
        self.id: Optional[int] = None
        self.position: tuple[float, float, float] = (float(x), float(y), float(z))
        self.on_message_receive: OnMessageReceive = _ignore_message

    def with_on_message_receive(self: P, callback: OnMessageReceive) -> P:
        """Install ``callback`` as the message handler and return this peer."""
        self.on_message_receive = callback
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, position={self.position!r})"


def peer_of_type(ctx: "Context", peer_id: int, peer_type: type[P]) -> P:
    """Return peer ``peer_id`` of ``ctx``, checking that it is a ``peer_type``.

    Raises IndexError if there is no such peer and TypeError if it has another type.
    """
    if not 0 <= peer_id < len(ctx.peers):
        raise IndexError(f"Peer {peer_id} does not exist")
    peer = ctx.peers[peer_id]
    if not isinstance(peer, peer_type):
        raise TypeError(f"Peer {peer_id} is not of required type {peer_type.__name__}")
    return peer