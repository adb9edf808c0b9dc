import pytest

from oslabsim.replacement import fifo, lru, move_to_front, optimal

STRINGS = [
    [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2],
    [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5],
    [1, 2, 3, 1, 4],
]


def _check_steps(result, refs):
    assert [step.page for step in result.steps] == refs
    assert result.faults == sum(1 for step in result.steps if step.fault)
    for step in result.steps:
        assert step.page in step.frames
        loaded = [f for f in step.frames if f is not None]
        assert len(loaded) == len(set(loaded))


def test_fifo_evicts_oldest():
    assert fifo([1, 2, 3, 4], 3).steps[-1].frames == (4, 2, 3)


def test_lru_evicts_least_recent():
    assert lru([1, 2, 3, 1, 4], 3).steps[-1].frames == (1, 4, 3)


def test_optimal_evicts_unused_page():
    assert optimal([1, 2, 3, 4, 1, 2], 3).steps[-1].frames == (1, 2, 4)


@pytest.mark.parametrize("frame_count", [3, 4])
def test_enough_frames_only_cold_misses(frame_count):
    refs = [3, 1, 3, 2, 1, 2]
    distinct = len(set(refs))
    assert fifo(refs, frame_count).faults == distinct
    assert lru(refs, frame_count).faults == distinct
    assert optimal(refs, frame_count).faults == distinct


@pytest.mark.parametrize("refs", STRINGS)
def test_fifo_steps_hold_current_page_without_duplicates(refs):
    _check_steps(fifo(refs, 3), refs)


@pytest.mark.parametrize("refs", STRINGS)
def test_lru_steps_hold_current_page_without_duplicates(refs):
    _check_steps(lru(refs, 3), refs)


@pytest.mark.parametrize("refs", STRINGS)
def test_optimal_steps_hold_current_page_without_duplicates(refs):
    _check_steps(optimal(refs, 3), refs)


@pytest.mark.parametrize("refs", STRINGS)
def test_optimal_is_best(refs):
    best = optimal(refs, 3).faults
    assert best <= fifo(refs, 3).faults
    assert best <= lru(refs, 3).faults


def test_fifo_belady_anomaly():
    refs = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]
    assert fifo(refs, 4).faults > fifo(refs, 3).faults


def test_fifo_no_frames_rejected():
    with pytest.raises(ValueError):
        fifo([1, 2], 0)


def test_lru_no_frames_rejected():
    with pytest.raises(ValueError):
        lru([1, 2], 0)


def test_optimal_no_frames_rejected():
    with pytest.raises(ValueError):
        optimal([1, 2], 0)


def test_move_to_front_brings_indexed_item_first():
    items = [6, 1, 9, 5, 3]
    result = move_to_front(items, 3)
    assert result[0] == items[3]
    assert result[1:] == items[:3] + items[4:]


def test_move_to_front_wraps_and_keeps_input():
    items = [6, 1, 9, 5, 3]
    original = list(items)
    assert move_to_front(items, len(items)) == original
    assert items == original


def test_move_to_front_empty():
    with pytest.raises(ValueError):
        move_to_front([], 1)