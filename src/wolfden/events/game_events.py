"""Event types for game logging and display."""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from wolfden.models.player import Role, RoleKind


class Phase(str, Enum):
    """Macro phases of the game."""

    SETUP = "SETUP"
    DAY = "DAY"
    NIGHT = "NIGHT"
    GAME_OVER = "GAME_OVER"


class GameEvent(BaseModel):
    """Base class for all game events."""

    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())
    day: int = 0
    phase: Phase

    @property
    def is_private(self) -> bool:
        """True if only the acting player may see this event."""
        return False

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(day={self.day}, phase={self.phase.value})"


# ============================================================================
# Character Actions (events with an actor, shown only to that player)
# ============================================================================


class CharacterAction(GameEvent):
    """Base class for events with a character actor."""

    actor: str

    @property
    def is_private(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(actor={self.actor}, day={self.day})"


class TargetAction(CharacterAction):
    """Action aimed at another player."""

    target: str

    def __str__(self) -> str:
        return (
            f"{self.__class__.__name__}(actor={self.actor}, "
            f"target={self.target}, day={self.day})"
        )


class RoleAssigned(CharacterAction):
    """A player learns their own role."""

    phase: Phase = Phase.SETUP
    role: Role


class StartReveal(TargetAction):
    """The Fortune Teller's free look at one player before the first day."""

    phase: Phase = Phase.SETUP
    kind: RoleKind


class Vote(TargetAction):
    """One day vote. Secret until tallied."""

    phase: Phase = Phase.DAY


class IdleTurn(CharacterAction):
    """A night turn with no effect (Villager, Maniac, Medium with no dead)."""

    phase: Phase = Phase.NIGHT


class FortuneTellerAction(TargetAction):
    """Fortune Teller inspects a living player's alignment."""

    phase: Phase = Phase.NIGHT
    kind: RoleKind


class MediumAction(TargetAction):
    """Medium inspects a dead player's exact role."""

    phase: Phase = Phase.NIGHT
    role: Role


class WerewolfKill(TargetAction):
    """Werewolf marks a living player for death."""

    phase: Phase = Phase.NIGHT


class HunterGuard(TargetAction):
    """Hunter protects a living player."""

    phase: Phase = Phase.NIGHT


# ============================================================================
# Public outcomes
# ============================================================================


class GameStart(GameEvent):
    """Game dealt. roles_secret is for the log only, never displayed."""

    phase: Phase = Phase.SETUP
    player_count: int
    roles_secret: dict[str, Role] = Field(default_factory=dict)


class Banishment(GameEvent):
    """Result of the day vote."""

    phase: Phase = Phase.DAY
    votes: dict[str, int] = Field(default_factory=dict)
    tied_players: list[str] = Field(default_factory=list)
    banished: Optional[str] = None

    def __str__(self) -> str:
        return f"Banishment(day={self.day}, banished={self.banished}, votes={self.votes})"


class NightResolution(GameEvent):
    """Result of the night: who was targeted, saved and killed."""

    phase: Phase = Phase.NIGHT
    kill_intents: list[str] = Field(default_factory=list)
    saved: list[str] = Field(default_factory=list)
    killed: list[str] = Field(default_factory=list)

    def __str__(self) -> str:
        return f"NightResolution(day={self.day}, killed={self.killed})"


class GameOver(GameEvent):
    """Terminal outcome."""

    phase: Phase = Phase.GAME_OVER
    winner: RoleKind
    alive: list[str] = Field(default_factory=list)
    dead: list[str] = Field(default_factory=list)

    def __str__(self) -> str:
        return f"GameOver(winner={self.winner.value}, day={self.day})"
