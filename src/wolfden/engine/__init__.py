"""Engine package - the rules of the game."""

from .roster import Roster, RosterSnapshot
from .tally import unique_max, tally_votes, top_candidates
from .vote_resolver import VoteResolver
from .night_resolver import NightResolver
from .victory import evaluate_winner
from .reveal import pick_start_reveal, start_reveal_candidates
from .werewolf_game import WerewolfGame
from .validator import (
    GameValidator,
    NoOpValidator,
    CollectingValidator,
    StrictValidator,
    create_validator,
)

__all__ = [
    "Roster",
    "RosterSnapshot",
    "unique_max",
    "tally_votes",
    "top_candidates",
    "VoteResolver",
    "NightResolver",
    "evaluate_winner",
    "pick_start_reveal",
    "start_reveal_candidates",
    "WerewolfGame",
    "GameValidator",
    "NoOpValidator",
    "CollectingValidator",
    "StrictValidator",
    "create_validator",
]
