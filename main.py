"""CLI entrypoint for playing Korean crossword puzzles in a terminal."""

from __future__ import annotations

import argparse
import json
import logging
import shlex
import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from wordpuzzle.core.constants import Direction
from wordpuzzle.core.exceptions import PuzzleError
from wordpuzzle.core.models import Puzzle, Word
from wordpuzzle.data.loader import load_puzzle
from wordpuzzle.engine.session import PuzzleSession
from wordpuzzle.io.puzzle_client import PuzzleClient
from wordpuzzle.utils.logger import configure_logging
from wordpuzzle.utils.pretty import format_board, format_hints, print_session

COMMANDS_HELP = """Commands:
  click R C               select cell (click again to switch direction)
  key NAME                ArrowUp/ArrowDown/ArrowLeft/ArrowRight, Space, Backspace
  type TEXT               type TEXT into the selected cell
  compose TEXT            commit TEXT through an IME composition
  number R C across|down  click the word number printed in cell R C
  hint across|down N      select word N from the hint list
  chosung across|down N   toggle the chosung hint of word N
  show                    print the board and hints
  quit                    leave"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Korean crossword puzzles in the terminal",
    )
    parser.add_argument(
        "--file",
        type=Path,
        help="Load the puzzle from a JSON file instead of requesting one from the backend",
    )
    parser.add_argument("--grid-size", type=int, default=15, help="Grid size for a fetched puzzle")
    parser.add_argument("--word-count", type=int, default=10, help="Word count for a fetched puzzle")
    parser.add_argument(
        "--api-base",
        type=str,
        default=None,
        help="Backend base URL (defaults to $WORDPUZZLE_API_BASE or http://localhost:8080/api)",
    )
    parser.add_argument("--output", type=Path, help="Optional path to save the puzzle JSON")
    parser.add_argument(
        "--script",
        type=Path,
        help="Read commands from this file instead of stdin",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def parse_direction(text: str) -> Direction:
    try:
        return Direction(text.upper())
    except ValueError:
        raise ValueError(f"direction must be 'across' or 'down', got {text!r}") from None


def _find_word(puzzle: Puzzle, direction_text: str, number_text: str) -> Word:
    direction = parse_direction(direction_text)
    word = puzzle.find_word(int(number_text), direction)
    if word is None:
        raise ValueError(f"no {direction.value.lower()} word numbered {number_text}")
    return word


def execute_command(session: PuzzleSession, line: str, stream: TextIO) -> bool:
    """Run one command line. Returns False when the loop should stop."""

    parts = shlex.split(line)
    if not parts:
        return True
    command, args = parts[0].lower(), parts[1:]
    cell = session.selected_cell

    if command in {"quit", "exit"}:
        return False
    if command == "help":
        print(COMMANDS_HELP, file=stream)
    elif command == "show":
        print_session(session, stream=stream)
    elif command == "click" and len(args) == 2:
        row, col = int(args[0]), int(args[1])
        if not session.puzzle.in_bounds(row, col):
            raise ValueError(f"cell ({row},{col}) is outside the grid")
        session.handle_cell_click(row, col)
        print(format_board(session), file=stream)
    elif command == "key" and len(args) == 1:
        key = " " if args[0].lower() == "space" else args[0]
        if cell is not None:
            session.handle_key_down(key, cell.row, cell.col)
            if key == "Backspace" and session.user_inputs[cell.row][cell.col]:
                # A terminal has no field that clears itself; emit the input event it would.
                session.handle_input(cell.row, cell.col, "")
        print(format_board(session), file=stream)
    elif command == "type" and len(args) == 1:
        if cell is None:
            raise ValueError("select a cell first")
        # The field already holds the buffered value; typed text is appended.
        current = session.user_inputs[cell.row][cell.col]
        session.handle_input(cell.row, cell.col, current + args[0])
        print(format_board(session), file=stream)
    elif command == "compose" and len(args) == 1:
        if cell is None:
            raise ValueError("select a cell first")
        session.handle_composition_start()
        session.handle_composition_end(cell.row, cell.col, args[0])
        print(format_board(session), file=stream)
    elif command == "number" and len(args) == 3:
        session.click_word_number(int(args[0]), int(args[1]), parse_direction(args[2]))
        print(format_board(session), file=stream)
    elif command == "hint" and len(args) == 2:
        session.select_word_from_hint(_find_word(session.puzzle, args[0], args[1]))
        print(format_board(session), file=stream)
    elif command == "chosung" and len(args) == 2:
        session.hint_panel.toggle_chosung(_find_word(session.puzzle, args[0], args[1]))
        print(format_hints(session), file=stream)
    else:
        print(f"Unknown command: {line.strip()}", file=stream)
        print(COMMANDS_HELP, file=stream)
    return True


def run_commands(session: PuzzleSession, lines: Iterable[str], stream: TextIO) -> None:
    for line in lines:
        try:
            if not execute_command(session, line, stream):
                break
        except ValueError as exc:
            print(f"Error: {exc}", file=stream)


def _announce_completion(stream: TextIO):
    def announce() -> None:
        print("Congratulations! The puzzle is complete!", file=stream)

    return announce


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    try:
        if args.file:
            puzzle = load_puzzle(args.file)
        else:
            client = PuzzleClient(base_url=args.api_base)
            puzzle = client.generate(args.grid_size, args.word_count)
    except ValueError as exc:
        parser.error(str(exc))
    except (OSError, PuzzleError) as exc:
        print(f"Failed to load puzzle: {exc}", file=sys.stderr)
        return 1

    if args.output:
        args.output.write_text(
            json.dumps(puzzle.to_jsonable(), ensure_ascii=False, indent=2), encoding="utf-8"
        )

    stream = sys.stdout
    session = PuzzleSession(puzzle)
    session.on_complete = _announce_completion(stream)
    print(f"{puzzle.total_words} words | {puzzle.grid_size}x{puzzle.grid_size} grid", file=stream)
    print_session(session, stream=stream)

    if args.script:
        lines = args.script.read_text(encoding="utf-8").splitlines()
        run_commands(session, lines, stream)
    else:
        print(COMMANDS_HELP, file=stream)
        run_commands(session, sys.stdin, stream)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
