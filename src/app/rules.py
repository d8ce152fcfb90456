from __future__ import annotations

from typing import Literal

from tabulate import tabulate

from moves import MoveSet

Outcome = Literal["WIN", "LOSE", "DRAW"]


def decide(move_set: MoveSet, player_move: str, computer_move: str) -> Outcome:
    """Decide a round from the player's point of view.

    Moves sit on a circle in the order of ``move_set``. Each move beats the
    next ``(N - 1) // 2`` moves after it and loses to the rest, so any two
    distinct moves have exactly one winner. Only valid for an odd-sized set.
    """
    p = move_set.index_of(player_move)
    c = move_set.index_of(computer_move)
    if p == c:
        return "DRAW"

    n = len(move_set)
    distance = (c - p) % n
    return "WIN" if distance <= (n - 1) // 2 else "LOSE"


def full_matrix(move_set: MoveSet) -> dict[tuple[str, str], Outcome]:
    return {(row, col): decide(move_set, row, col) for row in move_set for col in move_set}


def format_matrix(move_set: MoveSet) -> str:
    matrix = full_matrix(move_set)
    headers = ["User v PC >"] + list(move_set)
    # Rows are the player's move, columns the computer's.
    rows = [[user] + [matrix[(user, pc)] for pc in move_set] for user in move_set]
    return tabulate(rows, headers=headers, tablefmt="grid")
