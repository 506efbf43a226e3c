import io

import pytest

from sortlab.cli import main
from sortlab.sorting import format_values

SIZE_PROMPT = "Digite o tamanho do vetor: "
VALUE_PROMPT = "Digite o vetor: "
INSERT_PROMPT = "Insira um elemento(ou digite 99 para sair): \n"


def _run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(argv)
    return code, capsys.readouterr()


def test_bubble_prints_only_sorted(monkeypatch, capsys):
    code, captured = _run(monkeypatch, capsys, ["bubble"], "3\n3 1 2\n")
    assert code == 0
    prompts = SIZE_PROMPT + VALUE_PROMPT * 3
    assert captured.out == prompts + format_values([1, 2, 3]) + "\n"


@pytest.mark.parametrize("command", ["merge", "quick", "selection"])
def test_plain_sorts_print_before_and_after(monkeypatch, capsys, command):
    code, captured = _run(monkeypatch, capsys, [command], "4 5 -1 5 0")
    assert code == 0
    prompts = SIZE_PROMPT + VALUE_PROMPT * 4
    expected = (
        prompts
        + format_values([5, -1, 5, 0])
        + "\n"
        + format_values([-1, 0, 5, 5])
        + "\n"
    )
    assert captured.out == expected


def test_insertion_prints_with_leading_newlines(monkeypatch, capsys):
    code, captured = _run(monkeypatch, capsys, ["insertion"], "2\n9\n4\n")
    assert code == 0
    body = captured.out[len(SIZE_PROMPT + VALUE_PROMPT * 2):]
    assert body == (
        "\n" + format_values([9, 4]) + "\n" + "\n" + format_values([4, 9]) + "\n"
    )


def test_empty_input_size(monkeypatch, capsys):
    code, captured = _run(monkeypatch, capsys, ["merge"], "0\n")
    assert code == 0
    assert captured.out == SIZE_PROMPT + "\n\n"


def test_missing_values_is_error(monkeypatch, capsys):
    code, captured = _run(monkeypatch, capsys, ["quick"], "3\n1\n")
    assert code == 1
    assert "error" in captured.err


def test_non_integer_is_error(monkeypatch, capsys):
    code, captured = _run(monkeypatch, capsys, ["selection"], "abc\n")
    assert code == 1
    assert "error" in captured.err


def test_insert_sorted_session(monkeypatch, capsys):
    code, captured = _run(monkeypatch, capsys, ["insert-sorted"], "5\n2\n8\n99\n")
    assert code == 0
    expected = (
        INSERT_PROMPT
        + "\n" + format_values([5]) + "\n1\n"
        + INSERT_PROMPT
        + "\n" + format_values([2, 5]) + "\n2\n"
        + INSERT_PROMPT
        + "\n" + format_values([2, 5, 8]) + "\n3\n"
        + INSERT_PROMPT
    )
    assert captured.out == expected


def test_insert_sorted_stops_at_end_of_input(monkeypatch, capsys):
    code, captured = _run(monkeypatch, capsys, ["insert-sorted"], "3\n")
    assert code == 0
    assert captured.out.count(INSERT_PROMPT) == 2


def test_unknown_command_rejected(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as info:
        main(["heap"])
    assert info.value.code == 2