"""Tests for the unique-maximum reducer and vote tallies."""

from wolfden.engine.tally import unique_max, tally_votes, top_candidates


class TestUniqueMax:
    """unique_max returns the single strict maximum or None."""

    def test_unique_maximum(self):
        assert unique_max([("A", 3), ("B", 1)]) == "A"

    def test_tie_at_maximum(self):
        assert unique_max([("A", 2), ("B", 2), ("C", 1)]) is None

    def test_tie_below_maximum_is_fine(self):
        assert unique_max([("A", 1), ("B", 1), ("C", 4)]) == "C"

    def test_later_larger_value_breaks_earlier_tie(self):
        assert unique_max([("A", 2), ("B", 2), ("C", 3)]) == "C"

    def test_single_entry(self):
        assert unique_max([("A", 0)]) == "A"

    def test_empty(self):
        assert unique_max([]) is None

    def test_works_for_any_keys(self):
        """The reducer is not tied to names or votes."""
        assert unique_max(iter([(1, 10), (2, 20), (3, 5)])) == 2
        assert unique_max([((0, 0), 1), ((1, 1), 1)]) is None


class TestTallyVotes:
    """tally_votes counts per candidate."""

    def test_every_candidate_listed(self):
        tally = tally_votes({"Ann": "Bob", "Bob": "Bob", "Cat": "Ann"}, ["Ann", "Bob", "Cat"])
        assert tally == {"Ann": 1, "Bob": 2, "Cat": 0}

    def test_non_candidates_ignored(self):
        tally = tally_votes({"Ann": "Zed"}, ["Ann"])
        assert tally == {"Ann": 0}

    def test_top_candidates(self):
        assert top_candidates({"A": 2, "B": 2, "C": 1}) == ["A", "B"]
        assert top_candidates({}) == []
