"""Game setup: the validated input needed to deal a new game."""

from typing import Sequence
from pydantic import BaseModel, Field

from wolfden.models.player import Role, RoleConfig

MIN_PLAYERS = 3


class SetupError(Exception):
    """Raised when a game configuration cannot be played.

    These are operator errors. The game aborts before any state exists.
    """


class GameSetup(BaseModel):
    """Player names and role counts collected by the setup wizard."""

    names: list[str] = Field(default_factory=list)
    roles: list[RoleConfig] = Field(default_factory=list)

    @classmethod
    def from_counts(cls, names: Sequence[str], counts: dict[Role, int]) -> "GameSetup":
        """Build a setup from a role -> count mapping."""
        return cls(
            names=list(names),
            roles=[RoleConfig(role=role, count=count) for role, count in counts.items()],
        )

    @property
    def player_count(self) -> int:
        return len(self.names)

    @property
    def role_total(self) -> int:
        return sum(role_config.count for role_config in self.roles)

    def count_of(self, role: Role) -> int:
        return sum(rc.count for rc in self.roles if rc.role is role)

    def check(self) -> None:
        """Raise SetupError if this setup violates a game rule."""
        if self.player_count < MIN_PLAYERS:
            raise SetupError(
                f"The number of players must be greater than {MIN_PLAYERS - 1}"
                f" (got {self.player_count})"
            )

        seen: set[str] = set()
        for name in self.names:
            if not name.strip():
                raise SetupError("Player names must not be empty")
            if name in seen:
                raise SetupError(f"Player name {name!r} is used more than once")
            seen.add(name)

        if self.role_total != self.player_count:
            raise SetupError(
                "The number of players differs from the number of roles"
                f" ({self.player_count} players, {self.role_total} roles)"
            )

        if self.count_of(Role.WEREWOLF) < 1:
            raise SetupError("The number of Werewolf must be greater than 0")
