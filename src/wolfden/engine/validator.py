"""GameValidator - runtime validation hooks for game rules.

Hooks are awaited at the phase boundaries of WerewolfGame so invariant
breaches surface right where they happen.

Usage:
    # In tests or development
    validator = CollectingValidator()
    game = WerewolfGame(roster, table, validator=validator)
    violations = validator.get_violations()

    # No overhead in production (validator=None)
    game = WerewolfGame(roster, table)
"""

from typing import Optional, Protocol

from wolfden.engine.roster import Roster
from wolfden.events.game_events import GameEvent, Phase
from wolfden.models.player import RoleKind
from wolfden.validation.exceptions import ValidationError
from wolfden.validation.types import ValidationViolation


class GameValidator(Protocol):
    """Hooks for runtime validation at key game points."""

    async def on_game_start(self, roster: Roster) -> None:
        """Called once the roster is dealt. Records the starting names."""
        ...

    async def on_phase_end(
        self,
        phase: Phase,
        day: int,
        roster: Roster,
        events: list[GameEvent],
    ) -> None:
        """Called after each day vote and each night."""
        ...

    async def on_victory_check(self, roster: Roster, winner: Optional[RoleKind]) -> None:
        """Called after every victory check."""
        ...


class NoOpValidator:
    """Validator that does nothing."""

    async def on_game_start(self, roster: Roster) -> None:
        pass

    async def on_phase_end(
        self,
        phase: Phase,
        day: int,
        roster: Roster,
        events: list[GameEvent],
    ) -> None:
        pass

    async def on_victory_check(self, roster: Roster, winner: Optional[RoleKind]) -> None:
        pass


class CollectingValidator:
    """Runs every check and keeps the violations for later inspection."""

    def __init__(self) -> None:
        self._dealt: list[str] = []
        self._violations: list[ValidationViolation] = []

    async def on_game_start(self, roster: Roster) -> None:
        from wolfden.validation import validate_roster

        self._dealt = roster.names
        self._record(validate_roster(roster, self._dealt))

    async def on_phase_end(
        self,
        phase: Phase,
        day: int,
        roster: Roster,
        events: list[GameEvent],
    ) -> None:
        from wolfden.validation import validate_roster, validate_outcome

        self._record(validate_roster(roster, self._dealt))
        for event in events:
            self._record(validate_outcome(roster, event))

    async def on_victory_check(self, roster: Roster, winner: Optional[RoleKind]) -> None:
        from wolfden.engine.victory import evaluate_winner

        expected = evaluate_winner(roster)
        if expected != winner:
            self._record([ValidationViolation(
                rule_id="V.1",
                category="Victory",
                message=f"Reported winner {winner}, roster says {expected}",
            )])

    def _record(self, violations: list[ValidationViolation]) -> None:
        self._violations.extend(violations)

    def get_violations(self) -> list[ValidationViolation]:
        return list(self._violations)


class StrictValidator(CollectingValidator):
    """Fail-fast validator: raises ValidationError on the first violation."""

    def _record(self, violations: list[ValidationViolation]) -> None:
        super()._record(violations)
        if violations:
            raise ValidationError(violations)


def create_validator(enabled: bool, strict: bool = False) -> GameValidator:
    """Pick a validator for the given mode."""
    if not enabled:
        return NoOpValidator()
    if strict:
        return StrictValidator()
    return CollectingValidator()
