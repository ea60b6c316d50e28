"""Rich-based shared terminal for hot-seat play.

Every screen that shows private information is preceded by a hand-off
screen, and the terminal is cleared between players. Players are trusted
to look away while someone else is at the keyboard.
"""

import asyncio
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from wolfden.engine.roster import RosterSnapshot
from wolfden.events.event_formatter import EventFormatter
from wolfden.events.game_events import GameEvent

MESSAGE_STYLE = "magenta"
LABEL_STYLE = "blue"
NAME_STYLE = "red"
ERROR_STYLE = "red"

IDLE_PROMPT = "Please input anything and press enter"
PRESS_ENTER = "Press enter"


class TerminalTable:
    """The Table implementation used by the ``wolfden`` command."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the terminal table.

        Args:
            console: Rich Console instance. Creates one if None.
        """
        self._console = console or Console()
        self._formatter = EventFormatter(markup=True)

    # ------------------------------------------------------------------
    # Screen helpers
    # ------------------------------------------------------------------

    def clear(self) -> None:
        self._console.clear()

    def message(self, text: str) -> None:
        self._console.print(text, style=MESSAGE_STYLE, markup=False)

    def error(self, text: str) -> None:
        self._console.print(text, style=ERROR_STYLE, markup=False)

    def _join_names(self, names: Sequence[str]) -> str:
        return self._formatter.names(list(names))

    def status(self, snapshot: RosterSnapshot) -> None:
        """Print the alive and dead name lists."""
        self._console.print(
            f"[{LABEL_STYLE}]The Alives[/{LABEL_STYLE}]: {self._join_names(snapshot.alive)}"
        )
        self._console.print(
            f"[{LABEL_STYLE}]The Deads[/{LABEL_STYLE}]: {self._join_names(snapshot.dead)}"
        )

    def read_line(self, prompt: str = "") -> str:
        return self._console.input(prompt).strip()

    # ------------------------------------------------------------------
    # Table protocol
    # ------------------------------------------------------------------

    async def handoff(self, name: str, snapshot: RosterSnapshot) -> None:
        self.clear()
        self._console.print(
            f"[{MESSAGE_STYLE}]You are [{NAME_STYLE}]{escape(name)}[/{NAME_STYLE}] right?\n"
            f"Then press enter[/{MESSAGE_STYLE}]"
        )
        self.status(snapshot)
        self.read_line()

    async def choose_target(
        self,
        actor: str,
        prompt: str,
        candidates: Sequence[str],
        snapshot: RosterSnapshot,
        invalid_message: str = "The person is dead or not exist",
    ) -> str:
        self.clear()
        self.message(prompt)
        self.status(snapshot)

        name = self.read_line("> ")
        while name not in candidates:
            self.error(invalid_message)
            self.error("Try again")
            name = self.read_line("> ")
        return name

    async def idle_turn(self, actor: str, snapshot: RosterSnapshot) -> None:
        self.clear()
        self.message(IDLE_PROMPT)
        self.status(snapshot)
        self.read_line("> ")
        self._console.print(PRESS_ENTER, style=LABEL_STYLE)
        self.read_line()

    async def show(self, event: GameEvent, snapshot: Optional[RosterSnapshot] = None) -> None:
        """Print an event.

        Private events are appended to the acting player's screen. Public
        events get a fresh screen followed by the status block.
        """
        text = self._formatter.format(event)
        if event.is_private:
            self._console.print(text)
            return
        self.clear()
        self._console.print(text)
        if snapshot is not None:
            self._console.print()
            self.status(snapshot)

    async def banner(self, message: str, snapshot: RosterSnapshot) -> None:
        self.clear()
        self.message(message)
        self.status(snapshot)

    async def pause(self) -> None:
        self.read_line()

    async def discussion(self, seconds: int) -> None:
        if seconds <= 0:
            return
        with self._console.status(f"Discussion time ({seconds}s)...") as spinner:
            for remaining in range(seconds, 0, -1):
                spinner.update(f"Discussion time ({remaining}s left)...")
                await asyncio.sleep(1)
