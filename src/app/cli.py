from __future__ import annotations

import argparse
import sys

from commit_reveal import verify_commitment
from errors import ConfigurationError, InvalidChoice
from moves import MoveSet
from round_controller import RoundController, RoundResult

_COLORS = {"WIN": "\x1b[32m", "LOSE": "\x1b[31m", "DRAW": "\x1b[33m"}
_RESET = "\x1b[0m"
_MESSAGES = {"WIN": "You win!", "LOSE": "You lose!", "DRAW": "It's a draw!"}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="rps")
    sub = parser.add_subparsers(dest="cmd", required=True)

    play = sub.add_parser("play", help="Play against the computer with the given moves")
    play.add_argument("moves", nargs="*", help="Odd number (>= 3) of unique moves, e.g. ROCK PAPER SCISSORS")

    verify = sub.add_parser("verify", help="Check a revealed key against the HMAC shown before your move")
    verify.add_argument("--key", required=True, help="HMAC key revealed after the round (hex)")
    verify.add_argument("--move", required=True, help="Computer move revealed after the round")
    verify.add_argument("--hmac", required=True, help="HMAC shown before you chose your move (hex)")

    args = parser.parse_args(argv)

    if args.cmd == "verify":
        if verify_commitment(expected_commitment=args.hmac, key_hex=args.key, move=args.move):
            print(f"✅ HMAC matches: the computer committed to {args.move} before your move.")
            return 0
        print("❌ HMAC does not match this key and move.")
        return 1

    if args.cmd == "play":
        try:
            move_set = MoveSet.of(args.moves)
        except ConfigurationError as exc:
            print(f"{exc}\nExample: rps play ROCK PAPER SCISSORS", file=sys.stderr)
            return 1
        try:
            _play(move_set)
        except (KeyboardInterrupt, EOFError):
            print("\nGoodbye!")
        return 0

    raise SystemExit("unhandled command")


def _play(move_set: MoveSet) -> None:
    game = RoundController(move_set)
    _show_menu(game)

    while True:
        choice = input("Enter your move: ").strip()

        if choice == "0":
            print("Goodbye!")
            return

        if choice == "?":
            print(game.help_table())
            input("Press Enter to continue...")
            _show_menu(game)
            continue

        try:
            result = game.submit_move(_parse_choice(choice))
        except InvalidChoice:
            print("Invalid input. Please choose a valid move or enter '?' for help.")
            continue

        _show_result(result)
        if input("Do you want to play again? (y/n): ").strip().lower() != "y":
            print("Goodbye!")
            return

        # Fresh key, commitment and computer move for every round.
        game = RoundController(move_set)
        _show_menu(game)


def _parse_choice(choice: str) -> int | str:
    return int(choice) if choice.isascii() and choice.isdigit() else choice


def _show_menu(game: RoundController) -> None:
    print(f"HMAC: {game.commitment}")
    print("Available moves:")
    for index, name in game.move_names:
        print(f"{index} - {name}")
    print("0 - exit")
    print("? - help")


def _show_result(result: RoundResult) -> None:
    print(f"Your move: {result.player_move}")
    print(f"Computer move: {result.computer_move}")
    print(f"{_COLORS[result.outcome]}{_MESSAGES[result.outcome]}{_RESET}")
    print(f"HMAC key: {result.key}")


if __name__ == "__main__":
    raise SystemExit(main())
