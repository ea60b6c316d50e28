"""Player and Role models."""

import random
from enum import Enum
from typing import Sequence
from pydantic import BaseModel, Field


class RoleKind(str, Enum):
    """Alignment a role shows to inspection abilities."""

    VILLAGER = "Villager"
    WEREWOLF = "Werewolf"

    def __str__(self) -> str:
        return self.value


class Role(str, Enum):
    """Player roles in the game.

    Values double as the display name and the text accepted when parsing.
    """

    VILLAGER = "Villager"
    FORTUNE_TELLER = "FortuneTeller"
    MEDIUM = "Medium"
    HUNTER = "Hunter"
    MANIAC = "Maniac"
    WEREWOLF = "Werewolf"

    @property
    def kind(self) -> RoleKind:
        """Alignment reported to the Fortune Teller.

        The Maniac sides with nobody but still reads as a villager.
        """
        if self is Role.WEREWOLF:
            return RoleKind.WEREWOLF
        return RoleKind.VILLAGER

    def __str__(self) -> str:
        return self.value


class Player(BaseModel):
    """Per-player mutable state.

    Identity (the player's name) is the key in the roster, not a field here.
    """

    role: Role
    guarded: bool = False

    @classmethod
    def new(cls, role: Role) -> "Player":
        """Create a player as dealt at game start (werewolves start guarded)."""
        return cls(role=role, guarded=role is Role.WEREWOLF)

    def killed(self) -> bool:
        """Resolve one kill attempt against this player.

        Returns:
            True if the player dies. Werewolves never die this way. A guard
            cancels exactly one attempt and is used up by it.
        """
        if self.role is Role.WEREWOLF:
            return False
        if self.guarded:
            self.guarded = False
            return False
        return True


class RoleConfig(BaseModel):
    """How many copies of a role are dealt."""

    role: Role
    count: int = Field(default=0, ge=0)


def build_role_list(roles: Sequence[RoleConfig]) -> list[Role]:
    """Expand (role, count) pairs into a flat list of roles."""
    role_list: list[Role] = []
    for role_config in roles:
        role_list.extend([role_config.role] * role_config.count)
    return role_list


def assign_roles(
    names: Sequence[str],
    roles: Sequence[RoleConfig],
    rng: random.Random,
) -> list[tuple[str, Role]]:
    """Shuffle the role deck and deal it 1:1 onto names.

    Args:
        names: Player names, in table order.
        roles: Role counts; their total must equal len(names).
        rng: random.Random instance for reproducible shuffling.

    Returns:
        List of (name, Role) tuples in the order of ``names``.
    """
    role_list = build_role_list(roles)
    if len(role_list) != len(names):
        raise ValueError(
            f"{len(names)} players but {len(role_list)} roles"
        )
    rng.shuffle(role_list)
    return list(zip(names, role_list))
