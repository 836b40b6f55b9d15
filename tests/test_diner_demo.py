import pytest

from sysexamples.diner_demo import Configuration, main, make_table, parse_command_line
from sysexamples.diners import DiningPolicy


def test_defaults():
    config = parse_command_line([])
    assert config == Configuration(5, 2, 3, False)


def test_all_options():
    config = parse_command_line(["-n", "3", "-t", "1", "-e", "0", "-r"])
    assert config.num_philosophers == 3
    assert config.think_time == 1
    assert config.eat_time == 0
    assert config.enumerate_resources is True


def test_attached_values():
    config = parse_command_line(["-n4", "-t7", "-e7"])
    assert (config.num_philosophers, config.think_time, config.eat_time) == (4, 7, 7)


@pytest.mark.parametrize("value", ["6", "0", "-1", "abc"])
def test_bad_philosopher_count(value):
    with pytest.raises(ValueError, match="Number of philosophers must be between 1 and 5"):
        parse_command_line(["-n", value])


@pytest.mark.parametrize("value", ["8", "-1"])
def test_bad_think_time(value):
    with pytest.raises(ValueError, match="Think time must be between 0 and 7 seconds"):
        parse_command_line(["-t", value])


@pytest.mark.parametrize("value", ["8", "-1"])
def test_bad_eat_time(value):
    with pytest.raises(ValueError, match="Eat time must be between 0 and 7 seconds"):
        parse_command_line(["-e", value])


def test_unknown_option_gives_usage():
    with pytest.raises(ValueError, match="Usage"):
        parse_command_line(["-x"])


def test_missing_argument_gives_usage():
    with pytest.raises(ValueError, match="Usage"):
        parse_command_line(["-n"])


def test_table_without_reordering_uses_neighbour_forks():
    diners = make_table(5, DiningPolicy.NO_FORK_REORDERING, rounds=1)
    assert [d.id for d in diners] == ["0", "1", "2", "3", "4"]
    assert [(d.left.id, d.right.id) for d in diners][-1] == ("4", "0")
    for index, diner in enumerate(diners):
        assert diner.right is diners[(index + 1) % 5].left


def test_table_with_reordering_swaps_last_diner(capsys):
    diners = make_table(5, DiningPolicy.FORK_REORDERING, rounds=1)
    assert (diners[-1].left.id, diners[-1].right.id) == ("0", "4")
    assert "Reordered forks 4 and 0" in capsys.readouterr().out
    assert all(d.left.id < d.right.id for d in diners)


def test_reordered_table_runs_to_completion():
    diners = make_table(5, DiningPolicy.FORK_REORDERING, rounds=3)
    for diner in diners:
        diner.start()
    for diner in diners:
        diner.join()
    assert {d.state for d in diners} == {"d"}


def test_make_table_rejects_empty_table():
    with pytest.raises(ValueError):
        make_table(0, DiningPolicy.FORK_REORDERING)


def test_main_reports_bad_option(capsys):
    assert main(["-n", "9"]) == 1
    assert "Number of philosophers" in capsys.readouterr().err