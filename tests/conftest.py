"""Shared test helpers: a scripted Table and roster builders."""

import random
from typing import Optional, Sequence

import pytest

from wolfden.engine.roster import Roster, RosterSnapshot
from wolfden.events.game_events import GameEvent
from wolfden.models.player import Player, Role


class ScriptedTable:
    """A Table that replays scripted answers instead of reading a terminal.

    Each player has a queue of names to answer with. When a queue is empty
    the table falls back to a random candidate (if an rng was given) or to
    the first candidate.
    """

    def __init__(
        self,
        choices: Optional[dict[str, list[str]]] = None,
        rng: Optional[random.Random] = None,
        max_prompts: int = 10_000,
    ):
        self.choices = {name: list(queue) for name, queue in (choices or {}).items()}
        self.rng = rng
        self.max_prompts = max_prompts

        self.handoffs: list[str] = []
        self.prompts: list[tuple[str, str, list[str]]] = []
        self.idle: list[str] = []
        self.shown: list[tuple[GameEvent, Optional[RosterSnapshot]]] = []
        self.banners: list[str] = []
        self.discussions: list[int] = []
        self.pauses = 0

    async def handoff(self, name: str, snapshot: RosterSnapshot) -> None:
        self.handoffs.append(name)

    async def choose_target(
        self,
        actor: str,
        prompt: str,
        candidates: Sequence[str],
        snapshot: RosterSnapshot,
        invalid_message: str = "The person is dead or not exist",
    ) -> str:
        self.prompts.append((actor, prompt, list(candidates)))
        if len(self.prompts) > self.max_prompts:
            raise RuntimeError("scripted game did not finish")
        queue = self.choices.get(actor)
        if queue:
            return queue.pop(0)
        if self.rng is not None:
            return self.rng.choice(list(candidates))
        return candidates[0]

    async def idle_turn(self, actor: str, snapshot: RosterSnapshot) -> None:
        self.idle.append(actor)

    async def show(self, event: GameEvent, snapshot: Optional[RosterSnapshot] = None) -> None:
        self.shown.append((event, snapshot))

    async def banner(self, message: str, snapshot: RosterSnapshot) -> None:
        self.banners.append(message)

    async def pause(self) -> None:
        self.pauses += 1

    async def discussion(self, seconds: int) -> None:
        self.discussions.append(seconds)

    def shown_events(self, event_type: type) -> list:
        return [event for event, _ in self.shown if isinstance(event, event_type)]


def make_roster(roles: dict[str, Role], dead: Optional[dict[str, Role]] = None) -> Roster:
    """Build a roster with fixed roles, in the given name order."""
    return Roster(
        alive={name: Player.new(role) for name, role in roles.items()},
        dead={name: Player.new(role) for name, role in (dead or {}).items()},
    )


@pytest.fixture
def five_player_roster() -> Roster:
    """Villager x3, Werewolf x1, FortuneTeller x1."""
    return make_roster({
        "Ann": Role.WEREWOLF,
        "Bob": Role.VILLAGER,
        "Cat": Role.VILLAGER,
        "Dan": Role.VILLAGER,
        "Eve": Role.FORTUNE_TELLER,
    })
