from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Literal

from commit_reveal import commit, generate_key, reveal
from errors import InvalidChoice, RoundAlreadyResolved
from moves import MoveSet, select_move
from rules import Outcome, decide, format_matrix, full_matrix

RoundStatus = Literal["CREATED", "COMMITTED", "RESOLVED"]


@dataclass(frozen=True)
class RoundResult:
    outcome: Outcome
    player_move: str
    computer_move: str
    key: str
    commitment: str


class RoundController:
    """One round against the computer.

    The computer's move is chosen and committed to in the constructor, before
    the player can act. The key and the computer's move stay private until
    ``submit_move`` resolves the round. Play again with a new instance.
    """

    def __init__(self, move_set: MoveSet, *, rng: random.Random | None = None) -> None:
        self.move_set = move_set
        self._status: RoundStatus = "CREATED"
        self._computer_move = select_move(move_set, rng)
        self._key = generate_key()
        self._commitment = commit(self._key, self._computer_move)
        self._result: RoundResult | None = None
        self._status = "COMMITTED"

    @property
    def status(self) -> RoundStatus:
        return self._status

    @property
    def commitment(self) -> str:
        return self._commitment

    @property
    def move_names(self) -> list[tuple[int, str]]:
        return [(i, name) for i, name in enumerate(self.move_set, start=1)]

    @property
    def result(self) -> RoundResult | None:
        return self._result

    def outcome_matrix(self) -> dict[tuple[str, str], Outcome]:
        return full_matrix(self.move_set)

    def help_table(self) -> str:
        return format_matrix(self.move_set)

    def submit_move(self, choice: int) -> RoundResult:
        if self._status == "RESOLVED":
            raise RoundAlreadyResolved("round already resolved; start a new round to play again")

        n = len(self.move_set)
        # bool is an int subclass but never a menu choice.
        if isinstance(choice, bool) or not isinstance(choice, int) or not 1 <= choice <= n:
            raise InvalidChoice(choice, n)

        player_move = self.move_set.by_choice(choice)
        self._result = RoundResult(
            outcome=decide(self.move_set, player_move, self._computer_move),
            player_move=player_move,
            computer_move=self._computer_move,
            key=reveal(self._key),
            commitment=self._commitment,
        )
        self._status = "RESOLVED"
        return self._result

    def __repr__(self) -> str:
        return f"RoundController(status={self.status!r}, moves={len(self.move_set)}, commitment={self._commitment!r})"
