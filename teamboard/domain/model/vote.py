"""Vote entity.

Each voter can cast at most one upvote and at most one downvote per idea.
"""

from datetime import datetime, timezone

from pydantic import Field

from teamboard.domain.model.common import DomainModel
from teamboard.domain.value import IdeaId, VoteId, VoteKind, VoterId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - A (voter, idea, kind) triple is unique (checked before persistence,
      backed by a database unique constraint)
    - Votes are never edited, only created
    """

    id: VoteId
    idea_id: IdeaId
    voter_id: VoterId
    vote_type: VoteKind
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
