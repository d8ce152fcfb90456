from __future__ import annotations


class RpsError(Exception):
    """Base class for every error raised by the game core."""


class ConfigurationError(RpsError, ValueError):
    """The move list cannot be played: too short, even-sized or with duplicates."""


class InvalidChoice(RpsError, ValueError):
    def __init__(self, choice: object, move_count: int) -> None:
        self.choice = choice
        self.move_count = move_count
        super().__init__(f"choice must be an integer in 1..{move_count}, got {choice!r}")


class InvalidMove(RpsError, LookupError):
    def __init__(self, move: str) -> None:
        self.move = move
        super().__init__(f"unknown move: {move!r}")


class EntropyUnavailable(RpsError, RuntimeError):
    """The operating system could not supply secure random bytes."""


class RoundAlreadyResolved(RpsError, RuntimeError):
    pass
