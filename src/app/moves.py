from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Iterator

from errors import ConfigurationError, InvalidMove

MIN_MOVES = 3


@dataclass(frozen=True)
class MoveSet:
    """Ordered, immutable list of move names.

    A move's position in ``names`` is its identity for the rules, so the order
    given on the command line is the cyclic order of the game.
    """

    names: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", tuple(self.names))
        validate_moves(self.names)

    @classmethod
    def of(cls, names: Iterable[str]) -> "MoveSet":
        return cls(names=tuple(names))

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __contains__(self, move: object) -> bool:
        return move in self.names

    def index_of(self, move: str) -> int:
        try:
            return self.names.index(move)
        except ValueError:
            raise InvalidMove(move) from None

    def by_choice(self, choice: int) -> str:
        # Menu choices are 1-based.
        return self.names[choice - 1]


def validate_moves(names: tuple[str, ...]) -> None:
    if len(names) < MIN_MOVES:
        raise ConfigurationError(f"Please provide at least {MIN_MOVES} moves (got {len(names)})")
    if len(names) % 2 != 1:
        raise ConfigurationError(f"Please provide an odd number of moves (got {len(names)})")

    seen: set[str] = set()
    for name in names:
        if not isinstance(name, str) or not name:
            raise ConfigurationError(f"Moves must be non-empty strings, got {name!r}")
        if name in seen:
            raise ConfigurationError(f"Please provide unique moves. '{name}' is used more than once.")
        seen.add(name)


def select_move(move_set: MoveSet, rng: random.Random | None = None) -> str:
    # A general-purpose generator is enough here: the HMAC commitment, not the
    # quality of this choice, is what stops the computer from cheating.
    return (rng or random).choice(move_set.names)
