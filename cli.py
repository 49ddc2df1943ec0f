"""
cli.py
======
Command-line interface for Detective Quest: The Mansion of Clues.

Provides the text-based game loop. All game logic is delegated to
DetectiveQuestGame; this module only reads commands, maps them to navigation
tokens and prints what happened.

Usage:
    python cli.py [--seed mansion.json]
    detective-quest [--seed mansion.json]

Commands during exploration:
    left  / l / e     — go to the room on the left
    right / r / d     — go to the room on the right
    back  / b         — return to the previous room
    exit  / q / s     — stop exploring and move on to the accusation
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from dotenv import load_dotenv

from case_data import load_seed_file
from config import COMMAND_ALIASES, load_game_config
from game_engine import DetectiveQuestGame
from models import AccusationResult, MansionSeed, SeedDataError
from ui_helpers import (
    NAVIGATION_HELP,
    format_clue_list,
    format_navigation,
    format_suspect_list,
    format_verdict,
)

logger = logging.getLogger("detective_quest.cli")


def to_token(raw: str) -> str:
    """Map a word typed by the player to a navigation token; unknown words pass through."""
    return COMMAND_ALIASES.get(raw.strip().lower(), raw.strip())


def run_cli(
    input_fn: Optional[Callable[[str], str]] = None,
    output_fn: Optional[Callable[[str], None]] = None,
    seed: Optional[MansionSeed] = None,
) -> Optional[AccusationResult]:
    """
    Main CLI game loop.

    Builds the game, shows the start room, processes commands until the
    player exits (or input ends), lists the collected clues and the known
    suspects, then asks for the accused's name and prints the verdict.

    Args:
        input_fn:  Prompt-and-read function; ``input`` when None.
        output_fn: Line printer; ``print`` when None.
        seed:      Mansion to play; the reference mansion when None.

    Returns:
        The AccusationResult, or None if no suspect name was given.
    """
    input_fn = input_fn or input
    output_fn = output_fn or print
    game = DetectiveQuestGame(seed)

    def emit(lines: List[str]) -> None:
        for line in lines:
            output_fn(line)

    # --- Banner ---
    output_fn("=" * 60)
    output_fn(f"   {game.seed.title.upper()}")
    output_fn("=" * 60)
    output_fn("Explore the mansion and collect clues. When you leave, you may accuse a suspect.")
    emit(format_navigation(game.session.opening))

    while game.is_exploring:
        output_fn("")
        output_fn(NAVIGATION_HELP)
        try:
            raw = input_fn("Command: ")
        except EOFError:
            logger.info("Input closed during exploration.")
            output_fn("Input closed; ending the exploration.")
            break
        if not raw.strip():
            continue
        emit(format_navigation(game.command(to_token(raw))))

    # --- Case summary ---
    output_fn("")
    output_fn("Collected clues:")
    emit(format_clue_list(game.collected_clues()))
    output_fn("")
    output_fn("Known suspects:")
    emit(format_suspect_list(game.known_suspects()))

    # --- Accusation ---
    output_fn("")
    try:
        name = input_fn("Who do you accuse? (type the exact name): ").strip()
    except EOFError:
        name = ""
    if not name:
        output_fn("No suspect named. Closing the case file.")
        return None

    result = game.make_accusation(name)
    output_fn("")
    emit(format_verdict(result))
    output_fn("")
    output_fn("Thanks for playing.")
    return result


def main(argv: Optional[List[str]] = None) -> int:
    """
    Console entry point.

    Loads ``.env``, configures logging, resolves the mansion (``--seed`` beats
    DETECTIVE_QUEST_SEED_FILE, which beats the reference mansion) and runs
    the game. Returns the process exit status.
    """
    load_dotenv()
    cfg = load_game_config()

    parser = argparse.ArgumentParser(
        prog="detective-quest",
        description="Explore a mansion, collect clues and accuse a suspect.",
    )
    parser.add_argument(
        "--seed",
        default=cfg.seed_file,
        help="JSON file describing the mansion (default: the reference mansion)",
    )
    args = parser.parse_args(argv)

    # Configure logging at the entry point so all detective_quest.* loggers
    # share one handler. Core modules never configure logging themselves.
    logging.basicConfig(
        level=cfg.level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    seed = None
    if args.seed:
        try:
            seed = load_seed_file(args.seed)
        except SeedDataError as exc:
            logger.error("Cannot load mansion: %s", exc)
            print(f"Error: {exc}", file=sys.stderr)
            return 2

    run_cli(seed=seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
