import pytest

from oslabsim.philosophers import DiningTable


def test_first_round_of_four():
    table = DiningTable(4)
    assert table.run_round() == [
        "Fork 1 taken by Philosopher 1",
        "Fork 2 taken by Philosopher 2",
        "Fork 3 taken by Philosopher 3",
        "Philosopher 4 is waiting for fork 3",
        "Till now num of philosophers completed dinner are 0",
    ]


def test_dinner_finishes_for_four():
    table = DiningTable()
    log = table.dine()
    assert table.completed == 4
    assert log[-1] == "Till now num of philosophers completed dinner are 4"
    assert sum(" released fork " in line for line in log) == 4
    assert table.forks_in_use == 0


@pytest.mark.parametrize("count", [2, 3, 5, 7])
def test_dinner_finishes_for_any_size(count):
    table = DiningTable(count)
    log = table.dine()
    assert table.completed == count
    for number in range(1, count + 1):
        assert sum(line.startswith(f"Philosopher {number} released") for line in log) == 1
    assert table.forks_in_use == 0


def test_finished_philosopher_repeats_completion():
    table = DiningTable(3)
    table.dine()
    assert table.attempt(0) == ["Philosopher 1 completed his dinner"]
    assert table.completed == 3


def test_invalid_philosopher_rejected():
    with pytest.raises(ValueError):
        DiningTable(4).attempt(4)


def test_too_few_philosophers_rejected():
    with pytest.raises(ValueError):
        DiningTable(1)