"""Hot-seat Werewolf: a shared-terminal social deduction game."""

__version__ = "0.1.0"
