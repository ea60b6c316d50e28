"""Roster consistency rules (R.1-R.4).

Rules:
- R.1: alive and dead must be disjoint
- R.2: alive union dead must equal the names dealt at game start
- R.3: a werewolf never dies in the night resolution
- R.4: a banishment happens exactly when the vote has a unique maximum
"""

from typing import Iterable

from wolfden.engine.roster import Roster
from wolfden.engine.tally import unique_max
from wolfden.events.game_events import Banishment, GameEvent, NightResolution
from wolfden.models.player import Role
from .types import ValidationViolation

CATEGORY = "Roster Consistency"


def validate_roster(roster: Roster, dealt: Iterable[str]) -> list[ValidationViolation]:
    """Validate the partition rules R.1-R.2.

    Args:
        roster: Current roster.
        dealt: Every name dealt a role at game start.
    """
    violations: list[ValidationViolation] = []
    alive = set(roster.alive)
    dead = set(roster.dead)
    everyone = set(dealt)

    # R.1: alive ∩ dead == ∅
    if alive & dead:
        violations.append(ValidationViolation(
            rule_id="R.1",
            category=CATEGORY,
            message="alive and dead must be disjoint",
            context={"overlap": sorted(alive & dead)},
        ))

    # R.2: alive ∪ dead == dealt
    if alive | dead != everyone:
        violations.append(ValidationViolation(
            rule_id="R.2",
            category=CATEGORY,
            message="alive union dead must equal the players dealt at game start",
            context={
                "missing": sorted(everyone - (alive | dead)),
                "extra": sorted((alive | dead) - everyone),
            },
        ))

    return violations


def validate_outcome(roster: Roster, event: GameEvent) -> list[ValidationViolation]:
    """Validate a phase outcome event against rules R.3-R.4."""
    violations: list[ValidationViolation] = []

    # R.3: werewolves are immune to the night kill
    if isinstance(event, NightResolution):
        for name in event.killed:
            if roster.get(name).role is Role.WEREWOLF:
                violations.append(ValidationViolation(
                    rule_id="R.3",
                    category=CATEGORY,
                    message=f"Werewolf {name} was killed at night",
                    context={"name": name, "day": event.day},
                ))

    # R.4: unique maximum or nobody
    if isinstance(event, Banishment):
        expected = unique_max(event.votes.items())
        if expected != event.banished:
            violations.append(ValidationViolation(
                rule_id="R.4",
                category=CATEGORY,
                message=f"Banished {event.banished}, votes say {expected}",
                context={"votes": event.votes, "day": event.day},
            ))

    return violations


__all__ = ["validate_roster", "validate_outcome"]
