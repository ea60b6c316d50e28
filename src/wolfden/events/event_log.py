"""Chronological event log for one game."""

import uuid
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from .game_events import GameEvent, GameOver, Phase
from .event_formatter import EventFormatter


class GameEventLog(BaseModel):
    """Every event of a game in the order it happened.

    The log holds private events too, so it is a spoiler for anyone who
    reads it before the game ends.
    """

    game_id: str = Field(default_factory=lambda: uuid.uuid4().hex[:12])
    created_at: str = Field(default_factory=lambda: datetime.now().isoformat())
    player_count: int = 0
    events: list[GameEvent] = Field(default_factory=list)
    game_over: Optional[GameOver] = None

    def add(self, event: GameEvent) -> None:
        """Append an event; a GameOver also becomes the log's result."""
        self.events.append(event)
        if isinstance(event, GameOver):
            self.game_over = event

    def extend(self, events: list[GameEvent]) -> None:
        for event in events:
            self.add(event)

    def events_in(self, phase: Phase, day: Optional[int] = None) -> list[GameEvent]:
        """Events of one phase, optionally limited to one day number."""
        return [
            e for e in self.events
            if e.phase == phase and (day is None or e.day == day)
        ]

    def __str__(self) -> str:
        formatter = EventFormatter(markup=False)
        lines = [
            "=" * 60,
            "WEREWOLF GAME - COMPLETE EVENT LOG",
            "=" * 60,
            f"Game ID: {self.game_id}",
            f"Created: {self.created_at}",
            f"Players: {self.player_count}",
        ]
        if self.game_over is not None:
            lines.append(f"Winner: {self.game_over.winner.value}")
        lines.append("-" * 60)
        for event in self.events:
            lines.append(formatter.describe(event))
        return "\n".join(lines)
