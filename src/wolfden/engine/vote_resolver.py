"""Day vote: every living player names someone, a unique top vote-getter dies.

Rules:
- One vote per living player, for a living player (self-votes allowed)
- Votes are secret until tallied
- Tie for the most votes = nobody is banished
"""

import logging
from typing import Mapping

from wolfden.engine.roster import Roster
from wolfden.engine.tally import tally_votes, top_candidates, unique_max
from wolfden.events.game_events import Banishment, GameEvent, Vote
from wolfden.table import Table, check_target

logger = logging.getLogger(__name__)

VOTE_PROMPT = "Input the name of the person you will vote for"


class VoteResolver:
    """Collects the day vote and applies its result to the roster."""

    async def run(self, roster: Roster, table: Table, day: int) -> list[GameEvent]:
        """Run the whole voting round.

        Args:
            roster: Live roster; loses at most one player.
            table: Collects one vote from each living player.
            day: Current day number, stamped on the events.

        Returns:
            The Vote events in voting order followed by the Banishment.
        """
        candidates = list(roster.alive)
        votes: dict[str, str] = {}
        events: list[GameEvent] = []

        for voter in candidates:
            await table.handoff(voter, roster.snapshot())
            target = await table.choose_target(
                voter, VOTE_PROMPT, candidates, roster.snapshot()
            )
            votes[voter] = check_target(voter, target, candidates)
            events.append(Vote(actor=voter, target=target, day=day))

        banishment = self.resolve(roster, votes, day=day)
        events.append(banishment)
        await table.show(banishment, roster.snapshot())
        return events

    def resolve(self, roster: Roster, votes: Mapping[str, str], day: int = 0) -> Banishment:
        """Tally ``votes`` and banish the unique top vote-getter, if any.

        Votes naming someone who is not alive are not counted.
        """
        tally = tally_votes(votes, roster.alive)
        banished = unique_max(tally.items())
        tied_players = top_candidates(tally) if banished is None else []

        if banished is not None:
            roster.kill(banished)
            logger.debug("Day %d: %s banished with %d votes", day, banished, tally[banished])
        else:
            logger.debug("Day %d: tie between %s, nobody banished", day, tied_players)

        return Banishment(
            day=day,
            votes=tally,
            tied_players=tied_players,
            banished=banished,
        )
