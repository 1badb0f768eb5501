"""Command that runs the flow-updating demonstration simulation."""

from __future__ import annotations

import argparse
import math
from typing import Optional, Sequence

from tdes.context import Context
from tdes.events import TimerEvent
from tdes.flow_updating import FlowUpdatingPairwiseMessage, FlowUpdatingPairwisePeer, TickTimer
from tdes.message_passing import send_message_to

DEFAULT_SEED = 559464190120120835
RANDOM_PEERS = 20
MAX_VALUE = 80
AREA = 100.0


def _fmt(value: float) -> str:
    value = float(value)
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def build_simulation(seed: Optional[int] = DEFAULT_SEED) -> Context:
    """Create the demonstration context with its peers, timer and first messages."""
    ctx = Context(seed)

    val1 = ctx.rng.randrange(0, MAX_VALUE)
    val2 = ctx.rng.randrange(0, MAX_VALUE)
    val3 = ctx.rng.randrange(0, MAX_VALUE)

    peer1 = ctx.add_peer(FlowUpdatingPairwisePeer(0.35, 0.0, 0.0, val1))
    peer2 = ctx.add_peer(FlowUpdatingPairwisePeer(0.0, 1.0, 0.0, val2))
    peer3 = ctx.add_peer(FlowUpdatingPairwisePeer(0.0, 0.3, 0.0, val3))

    for _ in range(RANDOM_PEERS):
        value = ctx.rng.randrange(0, MAX_VALUE)
        x = ctx.rng.uniform(-AREA, AREA)
        y = ctx.rng.uniform(-AREA, AREA)
        ctx.add_peer(FlowUpdatingPairwisePeer(x, y, 0.0, value))

    ctx.add_event(TimerEvent(ctx.clock, TickTimer(interval=0.1)))

    send_message_to(ctx, peer1, peer2, FlowUpdatingPairwiseMessage(peer1, 0.0, 0.0))
    send_message_to(ctx, peer1, peer3, FlowUpdatingPairwiseMessage(peer1, 0.0, 0.0))
    send_message_to(ctx, peer2, peer3, FlowUpdatingPairwiseMessage(peer2, 0.0, 0.0))
    return ctx


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build and run the demonstration simulation."""
    parser = argparse.ArgumentParser(prog="tdes", description=__doc__)
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="random seed")
    parser.add_argument(
        "--deadline",
        type=float,
        default=0.0,
        help="simulated time to stop at; negative runs until no events remain",
    )
    args = parser.parse_args(argv)

    ctx = build_simulation(args.seed)
    ctx.run_for(args.deadline)
    print(f"Finished with clock {_fmt(ctx.clock)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())