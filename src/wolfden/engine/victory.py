"""Victory check, run after every change to the roster."""

from typing import Optional

from wolfden.engine.roster import Roster
from wolfden.models.player import Role, RoleKind


def evaluate_winner(roster: Roster) -> Optional[RoleKind]:
    """Check if the game has ended and return the winning side.

    Only living players count. Werewolves win once they are at least as
    many as everyone else, since they can no longer be outvoted. The
    Maniac counts as a non-werewolf here.

    Returns:
        RoleKind.VILLAGER if no werewolf is alive, RoleKind.WEREWOLF if
        werewolves are at least half the living players, otherwise None.
    """
    werewolves = roster.count_alive(Role.WEREWOLF)
    others = len(roster.alive) - werewolves

    if werewolves == 0:
        return RoleKind.VILLAGER
    if werewolves >= others:
        return RoleKind.WEREWOLF
    return None
