# tdes

`tdes` is a small discrete-event simulator for peers that exchange messages.
Each peer has a position in 3D space. A message takes as long to arrive as the
Euclidean distance between its sender and its receiver. Events run in timestamp
order from a priority queue. Events with equal timestamps run in the order they
were added. A simulation clock follows the events. A seeded random generator
(`random.Random`) makes runs repeatable.

The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests, install the test extra and then run pytest:

```
pip install ".[test]"
pytest
```

## Running the bundled simulation

```
tdes
tdes --seed 42 --deadline 5.0
```

The `tdes` command builds a network of 23 flow-updating averaging peers. Three
of them sit at fixed positions. Twenty are placed at random in the square from
-100 to 100, with random values from 0 to 79. The command starts a periodic tick
timer with an interval of 0.1 and sends three first messages. It then runs the
simulation up to the deadline and prints `Finished with clock <clock>`.

Options:

- `--seed N`: the random seed. The default is a fixed seed, so runs repeat.
- `--deadline T`: the simulated time to stop at. The default is `0.0`, which
  runs only the events at time 0. A negative value means no deadline. The tick
  timer schedules itself again every time it fires, so with no deadline the run
  never ends.

While it runs, the simulation prints progress lines. These include each peer as
it is added and each averaging step, with its clock, peer id, value and last
average.

## Using the library

```python
from tdes.context import Context
from tdes.events import SampleEvent
from tdes.example_peer import ExamplePeer, ExampleMessage
from tdes.message_passing import send_message_to

ctx = Context(seed=42)
a = ctx.add_peer(ExamplePeer(0.0, 0.0, 0.0))
b = ctx.add_peer(ExamplePeer(3.0, 4.0, 0.0))

ctx.add_event(SampleEvent(1.0, 7))
send_message_to(ctx, a, b, ExampleMessage(sender=a, receiver=b))

ctx.run_for(100.0)   # a negative deadline, or ctx.run(), means no deadline
print(ctx.clock)
```

The two example peers are 5.0 apart, so each message takes 5.0 time units to
arrive. Each peer adds one to its `value` for every `ExampleMessage` it
receives. It answers while its value is below 5.

Main building blocks:

- `tdes.context.Context(seed=None)`: holds the event queue, the clock, the
  peers and the random generator `rng`. With no seed, it draws a random 64-bit
  seed, which `seed()` returns.
  - `add_event(event)` schedules an event.
  - `add_peer(peer)` gives the peer the next id and returns that id.
  - `run()` processes events until the queue is empty.
  - `run_for(deadline)` stops at the first event later than the deadline. It
    drops that event and sets the clock to the deadline.
  - If an event is earlier than the clock, `run_for` raises `SimulationError`.
- `tdes.peer.Peer(x, y, z)`: a peer's `id`, its `position`, and its
  `on_message_receive(ctx, receiver_id, msg)` callback. The default callback
  logs the message and drops it. `with_on_message_receive(callback)` installs a
  callback and returns the peer.
- `tdes.peer.peer_of_type(ctx, peer_id, peer_type)`: returns the peer. It raises
  `IndexError` if there is no such peer, and `TypeError` if the peer is of
  another type.
- `tdes.events`:
  - `Message`: the base class for messages.
  - `Event`: the abstract base class for events, ordered by `timestamp`.
  - `SampleEvent`: prints its value when processed.
  - `Timer`: the abstract base class for timers, with `fire(ctx)`.
  - `TimerEvent`: fires a timer.
  - `MessageDeliveryEvent`: calls the receiver's callback. It drops messages
    for unknown peers.
- `tdes.message_passing.send_message_to(ctx, sender, receiver, msg)`: schedules
  delivery after the distance delay. It returns `False`, and schedules nothing,
  if either peer id is unknown.
- `tdes.utils.distance_between_points(a, b)`: the Euclidean distance between two
  3D points.
- `tdes.example_peer`: `ExamplePeer`, `ExampleMessage`, and `ExampleMessage2`.
  Example peers ignore `ExampleMessage2`.
- `tdes.flow_updating`: the flow-updating pairwise averaging peer
  (`FlowUpdatingPairwisePeer`), `FlowUpdatingPairwiseMessage`, the periodic
  `TickTimer(interval)`, and the functions `avg_and_send` and `tick`.
  - `tick` counts ticks for every other peer.
  - Once a peer has gone more than 50 ticks without averaging with a neighbour,
    `tick` averages with that neighbour and sends it a message.
- `tdes.main.build_simulation(seed)`: sets up the bundled scenario and returns
  it without running it.

## Limitations

Peers cannot be removed. Every `FlowUpdatingPairwisePeer` treats every other
peer in the context as its neighbour; there is no neighbourhood or range limit.
Progress is reported by printing to standard output, not by a configurable
logger.