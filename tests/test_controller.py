import pytest

from dropfour.ai.minimax_agent import MinimaxAgent
from dropfour.game import controller
from dropfour.game.results import Outcome
from dropfour.types import Player
from dropfour.ui.prompts import HumanAgent


@pytest.fixture
def statuses(monkeypatch):
    seen = []
    monkeypatch.setattr(controller, "render", lambda board, status="", highlight=None: seen.append(status))
    return seen


def _feed(monkeypatch, *lines):
    it = iter(lines)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


def test_human_game_until_vertical_win(monkeypatch, statuses):
    _feed(monkeypatch, "1", "2", "1", "2", "1", "2", "1", "")
    state = controller.run_game(HumanAgent(), HumanAgent(), depth=1, show_thinking=False)

    assert state.result.outcome is Outcome.WON
    assert state.result.winner is Player.ONE
    assert "Player X wins!" in statuses[-1]


def test_undo_then_quit(monkeypatch, statuses):
    _feed(monkeypatch, "4", "u", "q")
    state = controller.run_game(HumanAgent(), HumanAgent(), depth=1, show_thinking=False)

    assert state.board.move_count == 0
    assert state.current is Player.ONE
    assert state.last_status == "Game quit."
    assert any("Move undone" in s for s in statuses)


def test_undo_on_empty_board(monkeypatch, statuses):
    _feed(monkeypatch, "u", "q")
    controller.run_game(HumanAgent(), HumanAgent(), depth=1, show_thinking=False)
    assert any("Nothing to undo." in s for s in statuses)


def test_hint_names_the_winning_column(monkeypatch, statuses):
    _feed(monkeypatch, "1", "2", "1", "2", "1", "2", "h", "q")
    state = controller.run_game(HumanAgent(), HumanAgent(), depth=2, show_thinking=False)

    assert state.board.move_count == 6
    assert any("The best move for X is to play column 1" in s for s in statuses)


def test_bad_input_and_full_column_reprompt(monkeypatch, statuses):
    _feed(monkeypatch, "9", "x", *["3"] * 7, "q")
    state = controller.run_game(HumanAgent(), HumanAgent(), depth=1, show_thinking=False)

    assert state.board.move_count == 6
    assert any("Column must be between 1 and 7." in s for s in statuses)
    assert any("Invalid input" in s for s in statuses)
    assert any("Column is full." in s for s in statuses)


def test_undo_after_win_resumes_game(monkeypatch, statuses):
    _feed(monkeypatch, "1", "2", "1", "2", "1", "2", "1", "u", "q")
    state = controller.run_game(HumanAgent(), HumanAgent(), depth=1, show_thinking=False)

    assert state.result.outcome is Outcome.IN_PROGRESS
    assert state.board.move_count == 6


def test_undo_against_ai_rewinds_to_human_turn(monkeypatch, statuses):
    _feed(monkeypatch, "4", "u", "q")
    ai = MinimaxAgent(name="Minimax", depth=1)
    state = controller.run_game(HumanAgent(), ai, depth=1, show_thinking=False)

    assert state.board.move_count == 0
    assert state.current is Player.ONE
    assert ai.last_info["depth"] == 1


def test_ai_vs_ai_finishes(monkeypatch, statuses):
    _feed(monkeypatch, "")
    one = MinimaxAgent(name="A", depth=1)
    two = MinimaxAgent(name="B", depth=1)
    state = controller.run_game(one, two, depth=1, show_thinking=False)

    assert state.finished
