"""Terminal UI: the shared screen and the setup wizard."""

from .terminal import TerminalTable
from .setup_wizard import SetupWizard

__all__ = [
    "TerminalTable",
    "SetupWizard",
]
