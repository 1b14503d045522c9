from __future__ import annotations

from typing import Optional

from dropfour.ai.minimax_agent import MinimaxAgent
from dropfour.config import SEARCH_DEPTH
from dropfour.game.controller import run_game
from dropfour.ui.prompts import HumanAgent


def run_menu(depth: int = SEARCH_DEPTH, workers: Optional[int] = None) -> None:
    print("Select mode:")
    print("1) Human vs Human")
    print("2) Human vs Minimax AI")
    print("3) Minimax AI vs Human")
    print("4) Minimax AI vs Minimax AI")

    choice = input("Choice: ").strip()

    def ai(name: str) -> MinimaxAgent:
        return MinimaxAgent(name=f"{name} (d{depth})", depth=depth, workers=workers)

    if choice == "2":
        one, two = HumanAgent(), ai("Minimax")
    elif choice == "3":
        one, two = ai("Minimax"), HumanAgent()
    elif choice == "4":
        one, two = ai("Minimax X"), ai("Minimax O")
    else:
        if choice != "1":
            print("\nInvalid choice. Defaulting to Human vs Human.\n")
        one, two = HumanAgent(), HumanAgent()

    print(f"\nStarting game: {one.name} vs {two.name}\n")
    try:
        run_game(one, two, depth=depth, workers=workers)
    finally:
        for agent in (one, two):
            if isinstance(agent, MinimaxAgent):
                agent.close()
