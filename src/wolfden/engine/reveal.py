"""The Fortune Teller's free reveal before the first day."""

import random
from typing import Optional

from wolfden.engine.roster import Roster
from wolfden.models.player import RoleKind


def start_reveal_candidates(roster: Roster, teller: str) -> list[str]:
    """Players the opening reveal may show: never a werewolf, never the teller."""
    return [
        name
        for name, player in roster.alive.items()
        if player.role.kind is not RoleKind.WEREWOLF and name != teller
    ]


def pick_start_reveal(roster: Roster, teller: str, rng: random.Random) -> Optional[str]:
    """Pick the player whose alignment the Fortune Teller learns at game start.

    Returns:
        A name, or None when nobody is eligible (every other player is a werewolf).
    """
    candidates = start_reveal_candidates(roster, teller)
    if not candidates:
        return None
    return rng.choice(candidates)
