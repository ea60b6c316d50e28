"""Runtime configuration for one game session."""

from typing import Optional
from pydantic import BaseModel, Field

# Seconds of free discussion before each day's vote
DEFAULT_DISCUSSION_SECONDS = 120


class GameConfig(BaseModel):
    """Settings chosen on the command line.

    developer skips the discussion timer so a test game moves quickly.
    """

    seed: Optional[int] = None
    discussion_seconds: int = Field(default=DEFAULT_DISCUSSION_SECONDS, ge=0)
    developer: bool = False
    log_file: Optional[str] = None
    validate_rules: bool = False

    @property
    def effective_discussion_seconds(self) -> int:
        return 0 if self.developer else self.discussion_seconds
