"""Pairwise flow-updating averaging peers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from tdes.context import Context
from tdes.events import Message, Timer, TimerEvent
from tdes.message_passing import send_message_to
from tdes.peer import Peer, peer_of_type

TICK_THRESHOLD = 50


def _fmt(value: float) -> str:
    value = float(value)
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass
class FlowUpdatingPairwiseMessage(Message):
    """Flow and estimate sent from one peer to a neighbour."""

    sender: int
    flow: float
    estimate: float


def _on_message_receive(ctx: Context, receiver_id: int, msg: Optional[Message]) -> None:
    peer = peer_of_type(ctx, receiver_id, FlowUpdatingPairwisePeer)
    if not isinstance(msg, FlowUpdatingPairwiseMessage):
        return
    peer.estimates[msg.sender] = msg.estimate
    peer.flows[msg.sender] = -msg.flow
    avg_and_send(ctx, receiver_id, msg.sender)


class FlowUpdatingPairwisePeer(Peer):
    """Peer that estimates the network-wide average of its values."""

    def __init__(self, x: float, y: float, z: float, value: int) -> None:
        print(f"Instantiated FlowUpdatingPairwisePeer with value {value}")
        super().__init__(x, y, z)
        self.on_message_receive = _on_message_receive
        self.value = value
        self.flows: dict[int, float] = {}
        self.estimates: dict[int, float] = {}
        self.ticks_since_last_avg: dict[int, int] = {}
        self.last_avg = 0.0


def avg_and_send(ctx: Context, peer_id: int, neigh_id: int) -> None:
    """Average with neighbour ``neigh_id`` and send it the updated flow."""
    peer = peer_of_type(ctx, peer_id, FlowUpdatingPairwisePeer)

    print(
        f"[{_fmt(ctx.clock)}] peer with id {peer_id} has value {peer.value}, "
        f"last_avg is {_fmt(peer.last_avg)}"
    )

    estimate = peer.value - sum(peer.flows.values())
    neigh_estimate = peer.estimates.get(neigh_id, 0.0)
    avg = (neigh_estimate + estimate) / 2.0

    peer.last_avg = avg
    peer.flows[neigh_id] = peer.flows.get(neigh_id, 0.0) + avg - neigh_estimate
    peer.estimates[neigh_id] = avg
    peer.ticks_since_last_avg[neigh_id] = 0

    payload = FlowUpdatingPairwiseMessage(
        sender=peer_id, flow=peer.flows[neigh_id], estimate=avg
    )
    send_message_to(ctx, peer_id, neigh_id, payload)


def tick(ctx: Context, peer_id: int) -> None:
    """Advance the tick counters of ``peer_id``, averaging with stale neighbours."""
    for neigh_id in range(len(ctx.peers)):
        if neigh_id == peer_id:
            continue
        peer = peer_of_type(ctx, peer_id, FlowUpdatingPairwisePeer)
        neigh_ticks = peer.ticks_since_last_avg.get(neigh_id, 0)
        if neigh_ticks > TICK_THRESHOLD:
            avg_and_send(ctx, peer_id, neigh_id)
        else:
            peer.ticks_since_last_avg[neigh_id] = neigh_ticks + 1


@dataclass(frozen=True)
class TickTimer(Timer):
    """Periodic timer that ticks every peer."""

    interval: float

    def fire(self, ctx: Context) -> None:
        ctx.add_event(TimerEvent(ctx.clock + self.interval, self))
        for peer_id in range(len(ctx.peers)):
            tick(ctx, peer_id)