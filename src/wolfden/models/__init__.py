"""Models package."""

from wolfden.models.player import (
    Role,
    RoleKind,
    Player,
    RoleConfig,
    build_role_list,
    assign_roles,
)
from wolfden.models.setup import GameSetup, SetupError

__all__ = [
    "Role",
    "RoleKind",
    "Player",
    "RoleConfig",
    "build_role_list",
    "assign_roles",
    "GameSetup",
    "SetupError",
]
