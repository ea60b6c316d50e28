"""Tests for the rich terminal table and the setup wizard."""

import io

import pytest
from rich.console import Console
from rich.prompt import IntPrompt, Prompt

from wolfden.engine.roster import RosterSnapshot
from wolfden.events import NightResolution, RoleAssigned
from wolfden.models import Role, SetupError
from wolfden.ui import SetupWizard, TerminalTable
from wolfden.ui.terminal import IDLE_PROMPT
import wolfden.ui.terminal as terminal

SNAPSHOT = RosterSnapshot(alive=["Ann", "Bob"], dead=["Cat"])


def make_console() -> tuple[Console, io.StringIO]:
    output = io.StringIO()
    return Console(file=output, width=120, color_system=None), output


class ScriptedTerminal(TerminalTable):
    """TerminalTable reading from a list instead of stdin."""

    def __init__(self, lines: list[str]):
        console, self.output = make_console()
        super().__init__(console)
        self.lines = list(lines)

    def read_line(self, prompt: str = "") -> str:
        return self.lines.pop(0)

    @property
    def text(self) -> str:
        return self.output.getvalue()


class TestTerminalTable:
    """Screen output and re-prompt loops."""

    @pytest.mark.asyncio
    async def test_choose_target_reprompts_until_valid(self):
        table = ScriptedTerminal(["Zed", "Cat", "Bob"])

        name = await table.choose_target("Ann", "Who will you kill?", ["Ann", "Bob"], SNAPSHOT)

        assert name == "Bob"
        assert table.lines == []
        assert table.text.count("The person is dead or not exist") == 2
        assert table.text.count("Try again") == 2

    @pytest.mark.asyncio
    async def test_choose_target_custom_message(self):
        table = ScriptedTerminal(["Ann", "Cat"])

        name = await table.choose_target(
            "Fay", "Who do you see through?", ["Cat"], SNAPSHOT,
            invalid_message="The person is alive or not exist",
        )

        assert name == "Cat"
        assert "The person is alive or not exist" in table.text

    @pytest.mark.asyncio
    async def test_handoff_shows_name_and_status(self):
        table = ScriptedTerminal([""])

        await table.handoff("Ann", SNAPSHOT)

        assert "You are Ann right?" in table.text
        assert "The Alives: Ann, Bob" in table.text
        assert "The Deads: Cat" in table.text

    @pytest.mark.asyncio
    async def test_idle_turn_reads_two_lines(self):
        table = ScriptedTerminal(["whatever", ""])

        await table.idle_turn("Bob", SNAPSHOT)

        assert table.lines == []
        assert IDLE_PROMPT in table.text

    @pytest.mark.asyncio
    async def test_show_private_and_public(self):
        table = ScriptedTerminal([])

        await table.show(RoleAssigned(actor="Ann", role=Role.HUNTER))
        await table.show(NightResolution(day=1, killed=["Cat"]), SNAPSHOT)

        assert "Your role is Hunter" in table.text
        assert "The killed people are these: Cat" in table.text
        assert "The Deads: Cat" in table.text

    @pytest.mark.asyncio
    async def test_private_event_never_shows_status(self):
        table = ScriptedTerminal([])

        await table.show(RoleAssigned(actor="Ann", role=Role.WEREWOLF), SNAPSHOT)

        assert "Your role is Werewolf" in table.text
        assert "The Alives" not in table.text

    @pytest.mark.asyncio
    async def test_handoff_prints_bracketed_names_literally(self):
        snapshot = RosterSnapshot(alive=["Zed[/red]", "[bold]"], dead=[])
        table = ScriptedTerminal(["", ""])

        await table.handoff("Zed[/red]", snapshot)
        await table.handoff("[bold]", snapshot)

        assert "You are Zed[/red] right?" in table.text
        assert "You are [bold] right?" in table.text
        assert "The Alives: Zed[/red], [bold]" in table.text

    @pytest.mark.asyncio
    async def test_discussion_counts_down(self, monkeypatch):
        slept: list[float] = []

        async def fake_sleep(seconds: float) -> None:
            slept.append(seconds)

        monkeypatch.setattr(terminal.asyncio, "sleep", fake_sleep)
        table = ScriptedTerminal([])

        await table.discussion(3)
        await table.discussion(0)

        assert slept == [1, 1, 1]


def patch_prompts(monkeypatch, ints: list[int], texts: list[str]) -> None:
    int_answers = iter(ints)
    text_answers = iter(texts)
    monkeypatch.setattr(IntPrompt, "ask", lambda *args, **kwargs: next(int_answers))
    monkeypatch.setattr(Prompt, "ask", lambda *args, **kwargs: next(text_answers))


class TestSetupWizard:
    """Setup collection from the terminal."""

    def test_full_setup(self, monkeypatch):
        # count, then Villager FortuneTeller Medium Hunter Maniac Werewolf
        patch_prompts(
            monkeypatch,
            [5, 3, 1, 0, 0, 0, 1],
            ["Ann", "Bob", "Ann", "", "Cat", "Dan", "Eve"],
        )
        console, _ = make_console()

        setup = SetupWizard(console).run()

        assert setup.names == ["Ann", "Bob", "Cat", "Dan", "Eve"]
        assert setup.count_of(Role.VILLAGER) == 3
        assert setup.count_of(Role.FORTUNE_TELLER) == 1
        assert setup.count_of(Role.WEREWOLF) == 1

    def test_bracketed_names_listed_literally(self, monkeypatch):
        patch_prompts(
            monkeypatch,
            [3, 2, 0, 0, 0, 0, 1],
            ["Zed[/blue]", "Zed[/blue]", "[bold]", "Ann"],
        )
        console, output = make_console()

        setup = SetupWizard(console).run()

        assert setup.names == ["Zed[/blue]", "[bold]", "Ann"]
        assert "Players: Zed[/blue], [bold], Ann" in output.getvalue()
        assert "Zed[/blue] is already playing" in output.getvalue()

    def test_negative_count_reprompted(self, monkeypatch):
        patch_prompts(monkeypatch, [3, -1, 2, 0, 0, 0, 0, 1], ["Ann", "Bob", "Cat"])
        console, _ = make_console()

        setup = SetupWizard(console).run()

        assert setup.count_of(Role.VILLAGER) == 2

    def test_too_few_players_aborts(self, monkeypatch):
        patch_prompts(monkeypatch, [2], [])
        console, _ = make_console()

        with pytest.raises(SetupError, match="greater than 2"):
            SetupWizard(console).run()

    def test_no_werewolf_aborts(self, monkeypatch):
        patch_prompts(monkeypatch, [3, 3, 0, 0, 0, 0, 0], ["Ann", "Bob", "Cat"])
        console, _ = make_console()

        with pytest.raises(SetupError, match="Werewolf"):
            SetupWizard(console).run()

    def test_count_mismatch_aborts(self, monkeypatch):
        patch_prompts(monkeypatch, [3, 3, 0, 0, 0, 0, 1], ["Ann", "Bob", "Cat"])
        console, _ = make_console()

        with pytest.raises(SetupError, match="differs"):
            SetupWizard(console).run()
