from __future__ import annotations
import sys
import time

from dropfour.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC

FRAME_SEC = 0.1


def pad_search_time(label: str, depth: int, elapsed_ms: float) -> float:
    """
    Hold an AI move back until AI_THINK_DELAY_SEC has passed since its search
    started. Searches that already took that long are not delayed.
    Returns the seconds waited.
    """
    remaining = AI_THINK_DELAY_SEC - elapsed_ms / 1000.0
    if remaining <= 0:
        return 0.0

    if not AI_THINKING_SPINNER:
        time.sleep(remaining)
        return remaining

    text = f"{label} searched {depth} plies"
    frames = max(1, round(remaining / FRAME_SEC))
    for i in range(frames):
        sys.stdout.write(f"\r{text}{'.' * (i % 4):<4}")
        sys.stdout.flush()
        time.sleep(remaining / frames)
    sys.stdout.write("\r" + " " * (len(text) + 4) + "\r")
    sys.stdout.flush()
    return remaining
