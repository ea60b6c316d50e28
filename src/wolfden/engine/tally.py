"""Vote counting and the "unique maximum or nobody" rule."""

from collections import Counter
from typing import Hashable, Iterable, Mapping, Optional, TypeVar

K = TypeVar("K", bound=Hashable)


def unique_max(pairs: Iterable[tuple[K, int]]) -> Optional[K]:
    """Return the key with the strictly greatest count, or None on a tie.

    Any number of keys sharing the top count means there is no winner.
    An empty input also yields None.

    >>> unique_max([("a", 3), ("b", 1)])
    'a'
    >>> unique_max([("a", 2), ("b", 2), ("c", 1)]) is None
    True
    """
    best: Optional[K] = None
    best_count: Optional[int] = None
    is_only = False

    for key, count in pairs:
        if best_count is None or count > best_count:
            best, best_count, is_only = key, count, True
        elif count == best_count:
            is_only = False

    return best if is_only else None


def tally_votes(votes: Mapping[str, str], candidates: Iterable[str]) -> dict[str, int]:
    """Count votes per candidate.

    Args:
        votes: voter -> target.
        candidates: Everyone who can receive votes; they start at zero.

    Returns:
        candidate -> vote count, in candidate order.
    """
    counter = Counter(votes.values())
    return {name: counter[name] for name in candidates}


def top_candidates(tally: Mapping[str, int]) -> list[str]:
    """Everyone sharing the highest count."""
    if not tally:
        return []
    top = max(tally.values())
    return [name for name, count in tally.items() if count == top]
