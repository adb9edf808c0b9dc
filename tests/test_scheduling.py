import pytest

from oslabsim.scheduling import fcfs, priority_schedule, round_robin, sjf

BURSTS = [24, 3, 3]


def test_fcfs_textbook_average_waiting():
    assert fcfs(BURSTS).average_waiting == 17


def test_fcfs_keeps_arrival_order_and_chains_times():
    bursts = [5, 2, 8, 1]
    result = fcfs(bursts)
    assert [p.pid for p in result.processes] == list(range(len(bursts)))
    assert result.processes[0].waiting == 0
    for prev, cur in zip(result.processes, result.processes[1:]):
        assert cur.waiting == prev.turnaround
    for p in result.processes:
        assert p.turnaround == p.waiting + p.burst
    assert result.processes[-1].turnaround == sum(bursts)


def test_averages_are_means():
    result = fcfs([5, 2, 8, 1])
    waits = [p.waiting for p in result.processes]
    tats = [p.turnaround for p in result.processes]
    assert result.average_waiting == pytest.approx(sum(waits) / len(waits))
    assert result.average_turnaround == pytest.approx(sum(tats) / len(tats))


def test_sjf_orders_by_burst():
    bursts = [6, 8, 7, 3]
    result = sjf(bursts)
    assert [p.burst for p in result.processes] == sorted(bursts)
    assert sorted(p.pid for p in result.processes) == list(range(len(bursts)))
    for p in result.processes:
        assert bursts[p.pid] == p.burst


def test_sjf_never_waits_longer_than_fcfs():
    bursts = [6, 8, 7, 3]
    assert sjf(bursts).average_waiting <= fcfs(bursts).average_waiting


def test_priority_orders_by_priority_and_keeps_pairs():
    bursts = [10, 1, 2, 1, 5]
    priorities = [3, 1, 4, 5, 2]
    result = priority_schedule(bursts, priorities)
    ranks = [p.priority for p in result.processes]
    assert ranks == sorted(ranks)
    for p in result.processes:
        assert bursts[p.pid] == p.burst
        assert priorities[p.pid] == p.priority


def test_priority_exchange_sort_reorders_ties():
    result = priority_schedule([5, 6, 7], [2, 2, 1])
    assert [p.pid for p in result.processes] == [2, 1, 0]


def test_priority_length_mismatch():
    with pytest.raises(ValueError):
        priority_schedule([1, 2], [1])


def test_round_robin_with_large_quantum_matches_fcfs():
    bursts = [4, 9, 2, 6]
    rr = round_robin(bursts, max(bursts))
    plain = fcfs(bursts)
    assert [(p.waiting, p.turnaround) for p in rr.processes] == [
        (p.waiting, p.turnaround) for p in plain.processes
    ]


def test_round_robin_textbook_turnaround():
    result = round_robin(BURSTS, 4)
    assert [p.turnaround for p in result.processes] == [30, 7, 10]


def test_round_robin_invariants():
    bursts = [7, 3, 12, 5]
    result = round_robin(bursts, 2)
    assert [p.pid for p in result.processes] == list(range(len(bursts)))
    assert max(p.turnaround for p in result.processes) == sum(bursts)
    for p in result.processes:
        assert p.waiting == p.turnaround - p.burst
        assert p.waiting >= 0


@pytest.mark.parametrize("quantum", [0, -3])
def test_round_robin_rejects_bad_quantum(quantum):
    with pytest.raises(ValueError):
        round_robin([1, 2], quantum)


def test_round_robin_rejects_zero_burst():
    with pytest.raises(ValueError):
        round_robin([0, 2], 1)


@pytest.mark.parametrize("schedule", [fcfs, sjf])
def test_empty_and_negative_rejected(schedule):
    with pytest.raises(ValueError):
        schedule([])
    with pytest.raises(ValueError):
        schedule([3, -1])