from __future__ import annotations

from typing import List, Optional, Union

from loguru import logger

from dropfour.ai.minimax import SearchError
from dropfour.ai.minimax_agent import MinimaxAgent
from dropfour.config import SEARCH_DEPTH
from dropfour.core.rules import Coord, winning_line
from dropfour.game.results import Outcome, evaluate_result
from dropfour.game.state import GameState
from dropfour.types import Move, Player
from dropfour.ui.effects import pad_search_time
from dropfour.ui.prompts import HumanAgent
from dropfour.ui.render import glyph, render

Agent = Union[HumanAgent, MinimaxAgent]


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _is_human(agent: Agent) -> bool:
    return isinstance(agent, HumanAgent)


def _status_with_agents(status: str, agent_one: Agent, agent_two: Agent, current: Player) -> str:
    """
    Prepend a persistent header showing who plays X and O.
    """
    one = _agent_name(agent_one, "Player X")
    two = _agent_name(agent_two, "Player O")

    header = f"X: {one} | O: {two} | Turn: {glyph(current)}"
    if status:
        return f"{header}\n{status}"
    return header


def _undo(state: GameState, agent_one: Agent, agent_two: Agent) -> None:
    board = state.board
    if not board.undo():
        state.last_status = "Nothing to undo."
        return

    # Against an AI, rewind to the human's previous turn.
    to_play = agent_one if board.turn is Player.ONE else agent_two
    waiting = agent_two if board.turn is Player.ONE else agent_one
    if not _is_human(to_play) and _is_human(waiting) and board.history:
        board.undo()

    state.result = evaluate_result(board)
    state.last_status = f"Move undone. Player {glyph(board.turn)}'s turn."
    logger.info("undo -> {} moves on board", board.move_count)


def _hint(state: GameState, hinter: MinimaxAgent) -> None:
    report = hinter.analyse(state)
    col = report.result.column
    if col is None:
        state.last_status = "No moves left."
        return
    state.last_status = (
        f"The best move for {glyph(state.current)} is to play column {int(col) + 1} "
        f"(evaluation of {report.result.score})"
    )
    logger.info("hint for {}: column {} score {} ({} nodes)", glyph(state.current), int(col) + 1, report.result.score, report.nodes)


def run_game(
    agent_one: Agent,
    agent_two: Agent,
    depth: int = SEARCH_DEPTH,
    workers: Optional[int] = None,
    show_thinking: bool = True,
) -> GameState:
    hinter = MinimaxAgent(name="Hint", depth=depth, workers=workers)
    try:
        return _play(agent_one, agent_two, hinter, show_thinking)
    finally:
        hinter.close()


def _play(agent_one: Agent, agent_two: Agent, hinter: MinimaxAgent, show_thinking: bool) -> GameState:
    state = GameState(last_status="Player X starts.")
    highlight: Optional[List[Coord]] = None

    while True:
        render(
            state.board,
            _status_with_agents(state.last_status, agent_one, agent_two, state.current),
            highlight=highlight,
        )

        if state.finished:
            raw = input("Enter u to undo, anything else to exit: ")
            if raw.strip().lower() in {"u", "undo"}:
                _undo(state, agent_one, agent_two)
                highlight = None
                continue
            logger.info("game over: {}", state.result.outcome.value)
            return state

        current_agent = agent_one if state.current is Player.ONE else agent_two
        me = glyph(state.current)

        try:
            if _is_human(current_agent):
                cmd = current_agent.read_command(state)

                if cmd.kind == "quit":
                    state.last_status = "Game quit."
                    render(
                        state.board,
                        _status_with_agents(state.last_status, agent_one, agent_two, state.current),
                        highlight=highlight,
                    )
                    return state
                if cmd.kind == "undo":
                    _undo(state, agent_one, agent_two)
                    continue
                if cmd.kind == "hint":
                    _hint(state, hinter)
                    continue

                move = Move(cmd.column)
                status = f"Player {me} chose {int(move) + 1}"

            else:
                move = current_agent.choose_move(state)
                info = current_agent.last_info
                if show_thinking:
                    pad_search_time(current_agent.name, current_agent.depth, info["time_ms"])

                status = (
                    f"{current_agent.name} chose {info.get('move_col')} | "
                    f"d={info.get('depth')} | "
                    f"nodes={info.get('nodes')} | "
                    f"eval={info.get('eval')} | "
                    f"{info.get('time_ms')}ms"
                )

            if not state.board.place(move):
                state.last_status = "Column is full."
                continue

            logger.info("player {} -> column {}", me, int(move) + 1)
            state.result = evaluate_result(state.board)

            if state.result.outcome is Outcome.WON:
                highlight = winning_line(state.board, state.result.winner)
                state.last_status = f"Player {me} wins!"
            elif state.result.outcome is Outcome.DRAW:
                state.last_status = "Draw game."
            else:
                state.last_status = f"{status} | Next: Player {glyph(state.current)}"

        except (ValueError, SearchError) as e:
            state.last_status = str(e)
