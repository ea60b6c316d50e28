"""Interactive setup: player count, names and role counts."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import IntPrompt, Prompt

from wolfden.models.player import Role
from wolfden.models.setup import GameSetup, SetupError, MIN_PLAYERS

LABEL_STYLE = "blue"
NAME_STYLE = "red"
MESSAGE_STYLE = "magenta"


class SetupWizard:
    """Collects a GameSetup from the terminal.

    A too-small player count and a game without werewolves abort with
    SetupError as soon as they are entered. Blank or repeated names are
    re-prompted.
    """

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console()
        self._names: list[str] = []
        self._counts: dict[Role, int] = {}

    def show_status(self, message: str) -> None:
        """Clear the screen and show what has been entered so far."""
        self._console.clear()
        self._console.print(message, style=MESSAGE_STYLE, markup=False)
        names = f"[{LABEL_STYLE}], [/{LABEL_STYLE}]".join(
            f"[{NAME_STYLE}]{escape(name)}[/{NAME_STYLE}]" for name in self._names
        )
        self._console.print(f"[{LABEL_STYLE}]Players[/{LABEL_STYLE}]: {names}")
        self._console.print(f"[{LABEL_STYLE}]Roles[/{LABEL_STYLE}]:")
        for role, count in self._counts.items():
            self._console.print(f"  {role.value}: {count}", style=LABEL_STYLE)

    def ask_player_count(self) -> int:
        self.show_status("Input the number of players")
        count = IntPrompt.ask("Players", console=self._console)
        if count < MIN_PLAYERS:
            raise SetupError(
                f"The number of players must be greater than {MIN_PLAYERS - 1}"
            )
        return count

    def ask_names(self, count: int) -> list[str]:
        self.show_status("Input their names")
        names: list[str] = []
        while len(names) < count:
            name = Prompt.ask(f"Name {len(names) + 1}", console=self._console).strip()
            if not name:
                self._console.print("Names must not be empty", style="red")
            elif name in names:
                self._console.print(f"{name} is already playing", style="red", markup=False)
            else:
                names.append(name)
        self._names = names
        return names

    def ask_role_counts(self) -> dict[Role, int]:
        self.show_status("Input the number of these roles")
        for role in Role:
            while True:
                count = IntPrompt.ask(f"  [{NAME_STYLE}]{role.value}[/{NAME_STYLE}]", console=self._console)
                if count >= 0:
                    break
                self._console.print("Counts must not be negative", style="red")
            self._counts[role] = count

        if self._counts.get(Role.WEREWOLF, 0) < 1:
            raise SetupError("The number of Werewolf must be greater than 0")
        return dict(self._counts)

    def run(self) -> GameSetup:
        """Run every step and return the (fully checked) setup.

        Raises:
            SetupError: If the configuration is not playable.
        """
        count = self.ask_player_count()
        names = self.ask_names(count)
        counts = self.ask_role_counts()
        setup = GameSetup.from_counts(names, counts)
        setup.check()
        return setup
