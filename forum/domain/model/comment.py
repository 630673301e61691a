"""Comment entity.

Comments are stored as flat records with a parent reference; the thread
tree is rebuilt from parent_id at read time.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import ReactableModel, utcnow
from forum.domain.value import CommentId, TopicId, UserId

MAX_CONTENT_LENGTH = 10000


class Comment(ReactableModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - depth: Nesting level (0 for top-level, parent depth + 1 for replies)
    """

    id: CommentId
    topic_id: TopicId
    author_id: UserId
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    parent_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
