import pytest

from sortlab.pointers import main, split_minutes, swap


def test_swap_exchanges_values():
    assert swap(5, 9) == (9, 5)


def test_swap_twice_is_identity():
    assert swap(*swap("x", 3)) == ("x", 3)


def test_split_minutes_example():
    assert split_minutes(265) == (4, 25)


@pytest.mark.parametrize("minutes", [0, 1, 59, 60, 61, 265, 1439, 10_000])
def test_split_minutes_round_trip(minutes):
    hours, rest = split_minutes(minutes)
    assert hours * 60 + rest == minutes
    assert 0 <= rest < 60


@pytest.mark.parametrize("minutes", [-1, -59, -60, -265])
def test_split_minutes_negative_truncates(minutes):
    hours, rest = split_minutes(minutes)
    assert hours * 60 + rest == minutes
    assert -60 < rest <= 0
    assert hours <= 0


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("p = 0x")
    assert lines[0].split(" = ")[1] == lines[1].split(" = ")[1]
    assert lines[0].split(" = ")[1] == lines[4].split(" = ")[1]
    assert lines[5] == "**r = 5"
    assert lines[6:] == ["14", "19", "A = 9 ", "B = 5", "horas = 4", "minutos = 25"]


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])