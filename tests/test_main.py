from tdes.events import MessageDeliveryEvent, TimerEvent
from tdes.flow_updating import FlowUpdatingPairwisePeer
from tdes.main import DEFAULT_SEED, MAX_VALUE, RANDOM_PEERS, build_simulation, main


def test_build_simulation_peers():
    ctx = build_simulation(DEFAULT_SEED)
    assert len(ctx.peers) == 3 + RANDOM_PEERS
    assert all(isinstance(p, FlowUpdatingPairwisePeer) for p in ctx.peers)
    assert all(0 <= p.value < MAX_VALUE for p in ctx.peers)
    assert [p.id for p in ctx.peers] == list(range(len(ctx.peers)))
    assert ctx.peers[0].position == (0.35, 0.0, 0.0)
    assert ctx.peers[1].position == (0.0, 1.0, 0.0)
    assert ctx.peers[2].position == (0.0, 0.3, 0.0)


def test_random_positions_within_area():
    ctx = build_simulation(3)
    for peer in ctx.peers[3:]:
        x, y, z = peer.position
        assert -100.0 <= x <= 100.0
        assert -100.0 <= y <= 100.0
        assert z == 0.0


def test_build_simulation_events():
    ctx = build_simulation(DEFAULT_SEED)
    events = [entry[2] for entry in ctx.event_q]
    assert sum(isinstance(e, TimerEvent) for e in events) == 1
    deliveries = [e for e in events if isinstance(e, MessageDeliveryEvent)]
    assert sorted(e.receiver for e in deliveries) == [1, 2, 2]


def test_same_seed_is_deterministic():
    first = build_simulation(42)
    second = build_simulation(42)
    assert [p.value for p in first.peers] == [p.value for p in second.peers]
    assert [p.position for p in first.peers] == [p.position for p in second.peers]
    assert first.seed() == 42


def test_main_runs_until_deadline(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Finished with clock 0\n" in out
    assert f'Finished simulation with seed "{DEFAULT_SEED}".' in out


def test_main_with_seed_and_deadline(capsys):
    assert main(["--seed", "5", "--deadline", "0.5"]) == 0
    out = capsys.readouterr().out
    assert "Finished with clock 0.5\n" in out
    assert 'Finished simulation with seed "5".' in out