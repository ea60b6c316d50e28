"""Events package."""

from wolfden.events.game_events import (
    # Base
    GameEvent,
    CharacterAction,
    TargetAction,
    Phase,
    # Setup
    GameStart,
    RoleAssigned,
    StartReveal,
    # Day
    Vote,
    Banishment,
    # Night
    IdleTurn,
    FortuneTellerAction,
    MediumAction,
    WerewolfKill,
    HunterGuard,
    NightResolution,
    # End
    GameOver,
)
from wolfden.events.event_formatter import EventFormatter
from wolfden.events.event_log import GameEventLog

__all__ = [
    "GameEvent",
    "CharacterAction",
    "TargetAction",
    "Phase",
    "GameStart",
    "RoleAssigned",
    "StartReveal",
    "Vote",
    "Banishment",
    "IdleTurn",
    "FortuneTellerAction",
    "MediumAction",
    "WerewolfKill",
    "HunterGuard",
    "NightResolution",
    "GameOver",
    "EventFormatter",
    "GameEventLog",
]
