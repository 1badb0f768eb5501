from dataclasses import dataclass

import pytest

from tdes.context import Context
from tdes.events import (
    Event,
    Message,
    MessageDeliveryEvent,
    SampleEvent,
    Timer,
    TimerEvent,
)
from tdes.peer import Peer


@dataclass
class Note(Message):
    text: str


class RecordingTimer(Timer):
    def __init__(self):
        self.fired_at = []

    def fire(self, ctx):
        self.fired_at.append(ctx.clock)


class RecordingPeer(Peer):
    def __init__(self, x, y, z):
        super().__init__(x, y, z)
        self.received = []
        self.on_message_receive = self._record

    def _record(self, ctx, receiver_id, msg):
        self.received.append((receiver_id, msg))


def test_event_base_is_abstract():
    with pytest.raises(TypeError):
        Event(1.0)


def test_timer_base_is_abstract():
    with pytest.raises(TypeError):
        Timer()


def test_events_order_by_timestamp():
    early = SampleEvent(1.0, 10)
    late = TimerEvent(2.5, RecordingTimer())
    assert early < late
    assert not late < early
    assert sorted([late, early]) == [early, late]


def test_equal_timestamps_are_not_less():
    a = SampleEvent(3.0, 1)
    b = SampleEvent(3.0, 2)
    assert not a < b
    assert not b < a


def test_comparison_with_non_event_is_rejected():
    with pytest.raises(TypeError):
        SampleEvent(1.0, 1) < 5


def test_timestamp_is_kept():
    event = MessageDeliveryEvent(4.25, 0, None)
    assert event.timestamp == 4.25


def test_sample_event_prints_value(capsys):
    ctx = Context(3)
    SampleEvent(0.0, 7).process(ctx)
    assert capsys.readouterr().out == "[0]: SampleEvent triggered with value 7!\n"


def test_timer_event_fires_timer_with_context():
    ctx = Context(3)
    timer = RecordingTimer()
    ctx.clock = 2.0
    TimerEvent(2.0, timer).process(ctx)
    assert timer.fired_at == [2.0]


def test_message_delivery_calls_receiver_handler():
    ctx = Context(3)
    ctx.add_peer(RecordingPeer(0.0, 0.0, 0.0))
    receiver = RecordingPeer(1.0, 0.0, 0.0)
    ctx.add_peer(receiver)
    note = Note("hello")
    MessageDeliveryEvent(0.0, 1, note).process(ctx)
    assert receiver.received == [(1, note)]


def test_message_is_taken_on_delivery():
    ctx = Context(3)
    receiver = RecordingPeer(0.0, 0.0, 0.0)
    ctx.add_peer(receiver)
    note = Note("once")
    event = MessageDeliveryEvent(0.0, 0, note)
    event.process(ctx)
    event.process(ctx)
    assert receiver.received == [(0, note), (0, None)]
    assert event.message is None


@pytest.mark.parametrize("receiver_id", [1, 42, -1])
def test_message_to_unknown_peer_is_dropped(receiver_id):
    ctx = Context(3)
    peer = RecordingPeer(0.0, 0.0, 0.0)
    ctx.add_peer(peer)
    note = Note("lost")
    event = MessageDeliveryEvent(0.0, receiver_id, note)
    event.process(ctx)
    assert peer.received == []
    assert event.message is note