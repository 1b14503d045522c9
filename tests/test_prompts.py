import pytest

from dropfour.core.board import Board
from dropfour.game.state import GameState
from dropfour.types import Move
from dropfour.ui.prompts import Command, HumanAgent, parse_command


def test_columns_are_one_based():
    assert parse_command("1", 7) == Command("move", 0)
    assert parse_command(" 7 \n", 7) == Command("move", 6)


@pytest.mark.parametrize("raw,kind", [("u", "undo"), ("U", "undo"), ("h", "hint"), ("q", "quit"), ("exit", "quit")])
def test_letter_commands(raw, kind):
    assert parse_command(raw, 7).kind == kind


@pytest.mark.parametrize("raw", ["0", "8", "42"])
def test_out_of_range_column_rejected(raw):
    with pytest.raises(ValueError, match="between 1 and 7"):
        parse_command(raw, 7)


@pytest.mark.parametrize("raw", ["", "x", "-1", "2.5"])
def test_garbage_rejected(raw):
    with pytest.raises(ValueError, match="Invalid input"):
        parse_command(raw, 7)


def test_human_agent_reads_one_command(monkeypatch):
    prompts = []

    def fake_input(prompt=""):
        prompts.append(prompt)
        return " 5 "

    monkeypatch.setattr("builtins.input", fake_input)
    state = GameState(board=Board.from_moves([3]))

    assert HumanAgent().read_command(state) == Command("move", Move(4))
    assert prompts == ["Player O move: "]
