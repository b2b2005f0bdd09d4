"""Unit tests for vote aggregation rules."""

from datetime import datetime

from teamboard.domain.policy import (
    apply_vote_delta,
    has_voted,
    index_votes_by_idea,
    sort_ideas,
    validate_vote,
    vote_delta,
    vote_eligibility,
)
from teamboard.domain.value import IdeaId, IdeaSortKey, VoteKind, VoteRejectionReason
from tests.conftest import make_idea, make_vote


class TestHasVoted:
    """Tests for has_voted."""

    def test_upvote_recorded_does_not_mark_downvote(self):
        """Recording an upvote should only affect the upvote check."""
        # Arrange
        index = index_votes_by_idea([make_vote("idea-1", "u1", VoteKind.UPVOTE)])

        # Act & Assert
        assert has_voted(index, IdeaId("idea-1"), VoteKind.UPVOTE) is True
        assert has_voted(index, IdeaId("idea-1"), VoteKind.DOWNVOTE) is False

    def test_unknown_idea_has_no_votes(self):
        """Ideas missing from the index should report no votes."""
        assert has_voted({}, IdeaId("idea-1"), VoteKind.UPVOTE) is False

    def test_votes_on_other_ideas_are_ignored(self):
        """A vote on one idea should not count for another."""
        index = index_votes_by_idea([make_vote("idea-1", "u1", VoteKind.UPVOTE)])

        assert has_voted(index, IdeaId("idea-2"), VoteKind.UPVOTE) is False


class TestIndexVotesByIdea:
    """Tests for index_votes_by_idea."""

    def test_groups_votes_and_keeps_order(self):
        """Votes should be grouped per idea in input order."""
        # Arrange
        up = make_vote("idea-1", "u1", VoteKind.UPVOTE)
        other = make_vote("idea-2", "u1", VoteKind.UPVOTE)
        down = make_vote("idea-1", "u1", VoteKind.DOWNVOTE)

        # Act
        index = index_votes_by_idea([up, other, down])

        # Assert
        assert index[IdeaId("idea-1")] == [up, down]
        assert index[IdeaId("idea-2")] == [other]


class TestValidateVote:
    """Tests for validate_vote."""

    def test_first_upvote_and_first_downvote_accepted_independently(self):
        """First vote of each kind should be accepted."""
        # Arrange
        index = index_votes_by_idea([make_vote("idea-1", "u1", VoteKind.DOWNVOTE)])

        # Act
        upvote = validate_vote({}, IdeaId("idea-1"), VoteKind.UPVOTE)
        downvote_first = validate_vote({}, IdeaId("idea-1"), VoteKind.DOWNVOTE)
        upvote_after_downvote = validate_vote(index, IdeaId("idea-1"), VoteKind.UPVOTE)

        # Assert
        assert upvote.accepted is True
        assert downvote_first.accepted is True
        assert upvote_after_downvote.accepted is True

    def test_second_upvote_rejected(self):
        """Second upvote by the same voter should be rejected."""
        # Arrange
        index = index_votes_by_idea([make_vote("idea-1", "u1", VoteKind.UPVOTE)])

        # Act
        decision = validate_vote(index, IdeaId("idea-1"), VoteKind.UPVOTE)

        # Assert
        assert decision.accepted is False
        assert decision.reason == VoteRejectionReason.ALREADY_VOTED


class TestVoteEligibility:
    """Tests for vote_eligibility."""

    def test_both_available_without_votes(self):
        eligibility = vote_eligibility({}, IdeaId("idea-1"))

        assert eligibility.can_upvote is True
        assert eligibility.can_downvote is True

    def test_both_disabled_after_both_votes(self):
        index = index_votes_by_idea(
            [
                make_vote("idea-1", "u1", VoteKind.UPVOTE),
                make_vote("idea-1", "u1", VoteKind.DOWNVOTE),
            ]
        )

        eligibility = vote_eligibility(index, IdeaId("idea-1"))

        assert eligibility.can_upvote is False
        assert eligibility.can_downvote is False


class TestApplyVoteDelta:
    """Tests for apply_vote_delta."""

    def test_upvote_adds_one(self):
        assert apply_vote_delta(10, VoteKind.UPVOTE) == 11

    def test_downvote_subtracts_one(self):
        assert apply_vote_delta(10, VoteKind.DOWNVOTE) == 9

    def test_count_can_go_negative(self):
        """Net score is not clamped at zero."""
        assert apply_vote_delta(0, VoteKind.DOWNVOTE) == -1

    def test_vote_delta_sign(self):
        assert vote_delta(VoteKind.UPVOTE) == 1
        assert vote_delta(VoteKind.DOWNVOTE) == -1


class TestSortIdeas:
    """Tests for sort_ideas."""

    def test_votes_sort_is_stable_for_ties(self):
        """Tied ideas should keep their input order."""
        # Arrange
        a = make_idea("A", votes=5)
        b = make_idea("B", votes=5)
        c = make_idea("C", votes=3)

        # Act
        result = sort_ideas([a, b, c], IdeaSortKey.VOTES)

        # Assert
        assert [i.title for i in result] == ["A", "B", "C"]

    def test_votes_sort_descending(self):
        ideas = [make_idea("low", votes=-2), make_idea("high", votes=7), make_idea("mid", votes=1)]

        result = sort_ideas(ideas, IdeaSortKey.VOTES)

        assert [i.title for i in result] == ["high", "mid", "low"]

    def test_newest_sort_puts_missing_timestamps_last(self):
        """Ideas without a creation time should sort as oldest."""
        # Arrange
        old = make_idea("old", created_at=datetime(2024, 1, 1))
        undated = make_idea("undated", created_at=None)
        new = make_idea("new", created_at=datetime(2024, 6, 1))

        # Act
        result = sort_ideas([old, undated, new], IdeaSortKey.NEWEST)

        # Assert
        assert [i.title for i in result] == ["new", "old", "undated"]

    def test_sort_is_repeatable_and_does_not_mutate_input(self):
        """Sorting the same snapshot twice should give identical output."""
        # Arrange
        ideas = [make_idea("A", votes=1), make_idea("B", votes=4), make_idea("C", votes=4)]
        snapshot = list(ideas)

        # Act
        first = sort_ideas(ideas, IdeaSortKey.VOTES)
        second = sort_ideas(ideas, IdeaSortKey.VOTES)

        # Assert
        assert first == second
        assert ideas == snapshot
