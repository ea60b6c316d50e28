#!/usr/bin/env python
"""Hot-seat Werewolf on one shared terminal.

Usage:
    wolfden                              # Normal game, 120s discussion each day
    wolfden --seed 42                    # Reproducible deal and reveals
    wolfden --developer                  # Skip the discussion timer
    wolfden --log-file game_log.txt      # Save the full (spoiler) log at the end
"""

import argparse
import asyncio
import logging
import random
import sys
from typing import Optional, Sequence

# Enable Windows console colors
if sys.platform == "win32":
    import colorama
    colorama.init()

from rich.console import Console
from rich.panel import Panel

from wolfden.config import GameConfig, DEFAULT_DISCUSSION_SECONDS
from wolfden.engine import Roster, WerewolfGame, create_validator
from wolfden.models import GameSetup, SetupError
from wolfden.ui import SetupWizard, TerminalTable
from wolfden.validation import ValidationError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Wolfden - hot-seat Werewolf for one shared terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible role deals",
    )
    parser.add_argument(
        "--discussion-seconds",
        type=int,
        default=DEFAULT_DISCUSSION_SECONDS,
        help=f"Discussion time before each vote (default: {DEFAULT_DISCUSSION_SECONDS})",
    )
    parser.add_argument(
        "--developer",
        action="store_true",
        help="Skip the discussion timer",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write the complete event log here when the game ends",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check roster invariants after every phase and abort on a violation",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Debug logging (reveals hidden roles on stderr)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        seed=args.seed,
        discussion_seconds=args.discussion_seconds,
        developer=args.developer,
        log_file=args.log_file or None,
        validate_rules=args.validate,
    )


async def run_game(
    setup: GameSetup,
    config: GameConfig,
    console: Console,
    rng: random.Random,
) -> None:
    """Deal the roster, play until someone wins, save the log."""
    roster = Roster.from_setup(setup, rng)
    validator = create_validator(config.validate_rules, strict=True)

    game = WerewolfGame(
        roster=roster,
        table=TerminalTable(console),
        config=config,
        rng=rng,
        validator=validator,
    )
    event_log, winner = await game.run()

    console.print(Panel(
        f"[bold]Game Over[/bold]\n\n"
        f"[blue]The winner is[/blue] [red]{winner.value}[/red]",
        title="Result",
    ))

    if config.log_file:
        try:
            with open(config.log_file, "w", encoding="utf-8") as f:
                f.write(str(event_log))
            console.print(f"Event log saved to {config.log_file}")
        except OSError as e:
            console.print(f"Failed to save log: {e}", style="red", markup=False)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    console = Console()
    if args.discussion_seconds < 0:
        console.print("Error: --discussion-seconds must not be negative", style="red")
        return 1

    config = config_from_args(args)
    rng = random.Random(config.seed)

    try:
        setup = SetupWizard(console).run()
        asyncio.run(run_game(setup, config, console, rng))
    except SetupError as e:
        console.print(str(e), style="red", markup=False)
        return 1
    except ValidationError as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Game aborted[/yellow]")
        return 130
    except EOFError:
        console.print("\n[yellow]Input closed, game aborted[/yellow]")
        return 1

    return 0


if __name__ == "__main__":
    exit(main())
