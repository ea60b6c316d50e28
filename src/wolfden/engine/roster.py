"""Roster: who is alive, who is dead, and what each of them is."""

import logging
import random

from pydantic import BaseModel, Field

from wolfden.models.player import Player, Role, assign_roles
from wolfden.models.setup import GameSetup

logger = logging.getLogger(__name__)


class RosterSnapshot(BaseModel):
    """Names only, safe to put on the shared screen."""

    alive: list[str] = Field(default_factory=list)
    dead: list[str] = Field(default_factory=list)


class Roster(BaseModel):
    """The authoritative player table, split into alive and dead partitions.

    A name lives in exactly one partition, and no name is ever added once the
    roster is built. Players only move from ``alive`` to ``dead``.
    """

    alive: dict[str, Player] = Field(default_factory=dict)
    dead: dict[str, Player] = Field(default_factory=dict)

    @classmethod
    def from_setup(cls, setup: GameSetup, rng: random.Random) -> "Roster":
        """Deal a new game.

        Args:
            setup: Names and role counts. Checked before anything is dealt.
            rng: Source of randomness for the shuffle.

        Raises:
            SetupError: If the setup is not playable.
        """
        setup.check()
        dealt = assign_roles(setup.names, setup.roles, rng)
        roster = cls(alive={name: Player.new(role) for name, role in dealt})
        logger.debug("Dealt roles: %s", {name: role.value for name, role in dealt})
        return roster

    @property
    def size(self) -> int:
        return len(self.alive) + len(self.dead)

    @property
    def names(self) -> list[str]:
        return [*self.alive, *self.dead]

    def get(self, name: str) -> Player:
        """Look up a player in either partition (KeyError if unknown)."""
        if name in self.alive:
            return self.alive[name]
        return self.dead[name]

    def is_alive(self, name: str) -> bool:
        return name in self.alive

    def is_dead(self, name: str) -> bool:
        return name in self.dead

    def kill(self, name: str) -> Player:
        """Move a living player to the dead partition.

        Raises:
            KeyError: If ``name`` is not alive.
        """
        player = self.alive.pop(name)
        self.dead[name] = player
        logger.debug("%s (%s) moved to dead", name, player.role.value)
        return player

    def count_alive(self, role: Role) -> int:
        """Count living players with a specific role."""
        return sum(1 for player in self.alive.values() if player.role is role)

    def snapshot(self) -> RosterSnapshot:
        return RosterSnapshot(alive=list(self.alive), dead=list(self.dead))
