"""Event formatter for terminal screens and the plain-text game log.

Markup uses rich's [style]...[/style] syntax; EventFormatter(markup=False)
produces the same sentences without styles.
"""

from rich.markup import escape

from .game_events import (
    GameEvent,
    GameStart,
    RoleAssigned,
    StartReveal,
    Vote,
    IdleTurn,
    FortuneTellerAction,
    MediumAction,
    WerewolfKill,
    HunterGuard,
    Banishment,
    NightResolution,
    GameOver,
)

NAME_STYLE = "red"
TEXT_STYLE = "blue"


class EventFormatter:
    """Turn game events into one-line sentences."""

    def __init__(self, markup: bool = True):
        self.markup = markup

    def name(self, value: object) -> str:
        """Highlight a name or role."""
        if self.markup:
            return f"[{NAME_STYLE}]{escape(str(value))}[/{NAME_STYLE}]"
        return str(value)

    def names(self, values: list[str]) -> str:
        sep = f"[{TEXT_STYLE}], [/{TEXT_STYLE}]" if self.markup else ", "
        return sep.join(self.name(v) for v in values)

    def text(self, value: str) -> str:
        if self.markup:
            return f"[{TEXT_STYLE}]{value}[/{TEXT_STYLE}]"
        return value

    def format(self, event: GameEvent) -> str:
        """Format a single event."""
        if isinstance(event, GameStart):
            return self.text(f"The game starts with {event.player_count} players")
        elif isinstance(event, RoleAssigned):
            return self.text("Your role is ") + self.name(event.role.value)
        elif isinstance(event, StartReveal):
            return self.name(event.target) + self.text("'s role is ") + self.name(event.kind.value)
        elif isinstance(event, Vote):
            return self.name(event.actor) + self.text(" voted for ") + self.name(event.target)
        elif isinstance(event, IdleTurn):
            return self.name(event.actor) + self.text(" waited for the morning")
        elif isinstance(event, FortuneTellerAction):
            return self.text("The role is ") + self.name(event.kind.value)
        elif isinstance(event, MediumAction):
            return self.text("The role is ") + self.name(event.role.value)
        elif isinstance(event, WerewolfKill):
            return self.name(event.actor) + self.text(" will attack ") + self.name(event.target)
        elif isinstance(event, HunterGuard):
            return self.name(event.actor) + self.text(" will defend ") + self.name(event.target)
        elif isinstance(event, Banishment):
            return self._format_banishment(event)
        elif isinstance(event, NightResolution):
            return self._format_night_resolution(event)
        elif isinstance(event, GameOver):
            return self.text("The winner is ") + self.name(event.winner.value)
        return str(event)

    def _format_banishment(self, event: Banishment) -> str:
        if event.banished is None:
            if event.tied_players:
                return self.text("The vote was tied between ") + self.names(event.tied_players) + self.text(
                    ", nobody was banished"
                )
            return self.text("Nobody was banished")
        return self.name(event.banished) + self.text(" was killed")

    def _format_night_resolution(self, event: NightResolution) -> str:
        if not event.killed:
            return self.text("Nobody was killed")
        return self.text("The killed people are these: ") + self.names(event.killed)

    def describe(self, event: GameEvent) -> str:
        """Log line: the formatted sentence prefixed with its phase."""
        label = f"{event.phase.value} {event.day}" if event.day else event.phase.value
        return f"{label:<12} {self.format(event)}"
