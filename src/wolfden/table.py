"""The shared table: the interface between the rules engine and the players.

Every player uses the same terminal, so one Table object stands for all of
them. The engine hands it prompts and events; the Table is responsible for
hiding one player's screen from the others and for re-prompting until the
answer is legal.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, TYPE_CHECKING

from wolfden.events.game_events import GameEvent

# Import for type hints only (the engine imports this module)
if TYPE_CHECKING:
    from wolfden.engine.roster import RosterSnapshot


class Table(Protocol):
    """Input and display collaborator for the engine."""

    async def handoff(self, name: str, snapshot: RosterSnapshot) -> None:
        """Clear the screen and wait until ``name`` confirms they are at the keyboard."""
        ...

    async def choose_target(
        self,
        actor: str,
        prompt: str,
        candidates: Sequence[str],
        snapshot: RosterSnapshot,
        invalid_message: str = "The person is dead or not exist",
    ) -> str:
        """Ask ``actor`` to name a player.

        Returns:
            A name in ``candidates``. Implementations re-prompt on anything else.
        """
        ...

    async def idle_turn(self, actor: str, snapshot: RosterSnapshot) -> None:
        """Give a player with no night action a turn that looks like everyone else's."""
        ...

    async def show(self, event: GameEvent, snapshot: Optional[RosterSnapshot] = None) -> None:
        """Display one event, optionally followed by the alive/dead status."""
        ...

    async def banner(self, message: str, snapshot: RosterSnapshot) -> None:
        """Clear the screen and show a headline above the alive/dead status."""
        ...

    async def pause(self) -> None:
        """Wait for enter."""
        ...

    async def discussion(self, seconds: int) -> None:
        """Let the table talk for ``seconds`` before voting."""
        ...


class InvalidTargetError(Exception):
    """Raised when a Table returns a name that is not a legal target.

    Tables must re-prompt until the answer is legal, so this signals a broken
    Table implementation rather than a player typo.
    """

    def __init__(self, actor: str, target: str, candidates: Sequence[str]):
        self.actor = actor
        self.target = target
        self.candidates = list(candidates)
        super().__init__(
            f"{actor} chose {target!r}, expected one of {self.candidates}"
        )


def check_target(actor: str, target: str, candidates: Sequence[str]) -> str:
    """Return ``target`` if it is one of ``candidates``, else raise InvalidTargetError."""
    if target not in candidates:
        raise InvalidTargetError(actor, target, candidates)
    return target
