"""Night: every living player takes a private turn, then attacks resolve.

Night actions by role:
- Villager, Maniac: no action (a dummy turn so nobody can tell roles apart)
- FortuneTeller: learns the alignment (RoleKind) of a living player
- Medium: learns the exact role of a dead player
- Werewolf: marks a living player for death
- Hunter: guards a living player

Resolution (after everyone has acted): each marked player still alive gets
one kill attempt. Werewolves shrug it off. A guarded player survives and
loses the guard. Anyone else dies. A guard nobody attacked carries over.
"""

import logging
from typing import Iterable, assert_never

from wolfden.engine.roster import Roster
from wolfden.events.game_events import (
    GameEvent,
    IdleTurn,
    FortuneTellerAction,
    MediumAction,
    WerewolfKill,
    HunterGuard,
    NightResolution,
)
from wolfden.models.player import Role
from wolfden.table import Table, check_target

logger = logging.getLogger(__name__)

FORTUNE_TELLER_PROMPT = "Who do you see through?"
MEDIUM_PROMPT = "Who do you see through?"
WEREWOLF_PROMPT = "Who will you kill?"
HUNTER_PROMPT = "Who will you defend?"

NOT_ALIVE_MESSAGE = "The person is dead or not exist"
NOT_DEAD_MESSAGE = "The person is alive or not exist"


class NightResolver:
    """Runs the night turns and resolves the werewolves' attacks."""

    async def run(self, roster: Roster, table: Table, day: int) -> list[GameEvent]:
        """Run one night.

        Everyone alive at nightfall acts exactly once, in roster order.

        Returns:
            One action event per player followed by the NightResolution.
        """
        kill_intents: set[str] = set()
        events: list[GameEvent] = []

        for name, player in list(roster.alive.items()):
            await table.handoff(name, roster.snapshot())
            event = await self.act(name, player.role, roster, table, kill_intents, day)
            events.append(event)

        resolution = self.resolve_kills(roster, kill_intents, day=day)
        events.append(resolution)
        await table.show(resolution, roster.snapshot())
        return events

    async def act(
        self,
        name: str,
        role: Role,
        roster: Roster,
        table: Table,
        kill_intents: set[str],
        day: int,
    ) -> GameEvent:
        """Play one player's night turn and return what they did."""
        if role is Role.VILLAGER or role is Role.MANIAC:
            await table.idle_turn(name, roster.snapshot())
            return IdleTurn(actor=name, day=day)

        elif role is Role.FORTUNE_TELLER:
            target = await self._choose(
                table, name, FORTUNE_TELLER_PROMPT, list(roster.alive), roster, NOT_ALIVE_MESSAGE
            )
            event = FortuneTellerAction(
                actor=name, target=target, kind=roster.alive[target].role.kind, day=day
            )

        elif role is Role.MEDIUM:
            candidates = list(roster.dead)
            if not candidates:
                # Nobody to contact yet
                await table.idle_turn(name, roster.snapshot())
                return IdleTurn(actor=name, day=day)
            target = await self._choose(
                table, name, MEDIUM_PROMPT, candidates, roster, NOT_DEAD_MESSAGE
            )
            event = MediumAction(actor=name, target=target, role=roster.dead[target].role, day=day)

        elif role is Role.WEREWOLF:
            target = await self._choose(
                table, name, WEREWOLF_PROMPT, list(roster.alive), roster, NOT_ALIVE_MESSAGE
            )
            kill_intents.add(target)
            event = WerewolfKill(actor=name, target=target, day=day)

        elif role is Role.HUNTER:
            target = await self._choose(
                table, name, HUNTER_PROMPT, list(roster.alive), roster, NOT_ALIVE_MESSAGE
            )
            roster.alive[target].guarded = True
            event = HunterGuard(actor=name, target=target, day=day)

        else:
            assert_never(role)

        await table.show(event)
        await table.pause()
        return event

    async def _choose(
        self,
        table: Table,
        actor: str,
        prompt: str,
        candidates: list[str],
        roster: Roster,
        invalid_message: str,
    ) -> str:
        target = await table.choose_target(
            actor, prompt, candidates, roster.snapshot(), invalid_message=invalid_message
        )
        return check_target(actor, target, candidates)

    def resolve_kills(
        self,
        roster: Roster,
        kill_intents: Iterable[str],
        day: int = 0,
    ) -> NightResolution:
        """Apply one kill attempt to every marked player who is still alive.

        Players are resolved in roster order so the killed list is stable.
        """
        intents = set(kill_intents)
        targeted = [name for name in roster.alive if name in intents]
        killed: list[str] = []
        saved: list[str] = []

        for name in targeted:
            if roster.alive[name].killed():
                roster.kill(name)
                killed.append(name)
            else:
                saved.append(name)

        logger.debug("Night %d: targeted=%s saved=%s killed=%s", day, targeted, saved, killed)
        return NightResolution(day=day, kill_intents=targeted, saved=saved, killed=killed)
