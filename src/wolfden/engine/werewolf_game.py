"""WerewolfGame - main game controller that runs the complete game loop."""

import logging
import random
from typing import Optional, TYPE_CHECKING

from wolfden.config import GameConfig
from wolfden.engine.roster import Roster
from wolfden.engine.vote_resolver import VoteResolver
from wolfden.engine.night_resolver import NightResolver
from wolfden.engine.victory import evaluate_winner
from wolfden.engine.reveal import pick_start_reveal
from wolfden.events import (
    GameEventLog,
    GameEvent,
    GameStart,
    GameOver,
    RoleAssigned,
    StartReveal,
    Phase,
)
from wolfden.models.player import Role, RoleKind
from wolfden.table import Table

# Import validator for type hints (avoid circular import)
if TYPE_CHECKING:
    from wolfden.engine.validator import GameValidator

logger = logging.getLogger(__name__)

DAY_START_MESSAGE = "The day start"
VOTING_START_MESSAGE = "Voting start"
NIGHT_START_MESSAGE = "The night start"


class WerewolfGame:
    """Main game controller.

    Game Flow:
        0. Setup: every player privately sees their role; the Fortune
           Teller also sees one safe player's alignment
        1. Day N: discussion -> vote -> victory check
        2. Night N: every living player acts -> kills resolve -> victory check
        3. ... until a victory check returns a winner
    """

    def __init__(
        self,
        roster: Roster,
        table: Table,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        validator: Optional["GameValidator"] = None,
    ):
        """Initialize the WerewolfGame.

        Args:
            roster: A freshly dealt roster. The game owns and mutates it.
            table: Shared terminal (or a scripted stand-in for tests).
            config: Session settings; defaults to GameConfig().
            rng: Random source for the Fortune Teller's opening reveal.
                 Defaults to one seeded from config.seed.
            validator: Optional runtime rule checker.
        """
        self.roster = roster
        self.table = table
        self.config = config or GameConfig()
        self._rng = rng or random.Random(self.config.seed)
        self._validator = validator

        self._log = GameEventLog(player_count=roster.size)
        self._vote_resolver = VoteResolver()
        self._night_resolver = NightResolver()
        self.day = 0

    @property
    def event_log(self) -> GameEventLog:
        return self._log

    async def run(self) -> tuple[GameEventLog, RoleKind]:
        """Run the game until one side wins.

        Returns:
            Tuple of (event_log, winner).
        """
        self._log.add(GameStart(
            player_count=self.roster.size,
            roles_secret={name: p.role for name, p in self.roster.alive.items()},
        ))
        if self._validator:
            await self._validator.on_game_start(self.roster)

        await self.announce_roles()

        winner: Optional[RoleKind] = None
        while winner is None:
            self.day += 1
            winner = await self.play_day()
            if winner is not None:
                break
            await self.table.pause()
            winner = await self.play_night()
            if winner is None:
                await self.table.pause()

        game_over = GameOver(
            day=self.day,
            winner=winner,
            alive=list(self.roster.alive),
            dead=list(self.roster.dead),
        )
        self._log.add(game_over)
        await self.table.show(game_over, self.roster.snapshot())
        logger.info("Game over after %d day(s): %s wins", self.day, winner.value)
        return self._log, winner

    async def announce_roles(self) -> None:
        """Give every player a private look at their own role."""
        for name, player in list(self.roster.alive.items()):
            await self.table.handoff(name, self.roster.snapshot())

            assigned = RoleAssigned(actor=name, role=player.role)
            self._log.add(assigned)
            await self.table.show(assigned)

            if player.role is Role.FORTUNE_TELLER:
                target = pick_start_reveal(self.roster, name, self._rng)
                if target is not None:
                    reveal = StartReveal(
                        actor=name,
                        target=target,
                        kind=self.roster.alive[target].role.kind,
                    )
                    self._log.add(reveal)
                    await self.table.show(reveal)

            await self.table.pause()

    async def play_day(self) -> Optional[RoleKind]:
        """Discussion and vote for the current day, then a victory check."""
        logger.debug("Day %d begins with %d alive", self.day, len(self.roster.alive))
        await self.table.banner(DAY_START_MESSAGE, self.roster.snapshot())
        await self.table.discussion(self.config.effective_discussion_seconds)
        await self.table.banner(VOTING_START_MESSAGE, self.roster.snapshot())
        await self.table.pause()
        events = await self._vote_resolver.run(self.roster, self.table, self.day)
        return await self._end_phase(Phase.DAY, events)

    async def play_night(self) -> Optional[RoleKind]:
        """Every living player's night turn, kill resolution, victory check."""
        logger.debug("Night %d begins", self.day)
        await self.table.banner(NIGHT_START_MESSAGE, self.roster.snapshot())
        events = await self._night_resolver.run(self.roster, self.table, self.day)
        return await self._end_phase(Phase.NIGHT, events)

    async def _end_phase(self, phase: Phase, events: list[GameEvent]) -> Optional[RoleKind]:
        self._log.extend(events)
        if self._validator:
            await self._validator.on_phase_end(phase, self.day, self.roster, events)

        winner = evaluate_winner(self.roster)
        if self._validator:
            await self._validator.on_victory_check(self.roster, winner)
        return winner
