"""Idea entity.

Ideas are content proposals the team votes on.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from teamboard.domain.model.common import DomainModel
from teamboard.domain.value import IdeaId
from teamboard.domain.value.dates import lenient_timestamp


class Idea(DomainModel):
    """Idea entity.

    The vote count is a running net tally (upvotes minus downvotes) and is
    not clamped at zero.
    """

    id: IdeaId
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1)
    proposer: str = Field(min_length=1, max_length=255)
    votes: int = 0
    created_at: Optional[datetime] = None

    @field_validator("created_at", mode="before")
    @classmethod
    def drop_invalid_created_at(cls, v: Any) -> Optional[datetime]:
        """Treat an unparsable creation timestamp as missing."""
        return lenient_timestamp(v, field="idea.created_at")
