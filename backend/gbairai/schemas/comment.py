"""
GBAIRAI - Comment Schemas
Réponses à un commentaire et leur affichage en fil
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from gbairai.schemas.base import CamelModel


class ReplyRecord(CamelModel):
    """
    Réponse à un commentaire principal

    Les réponses sont des interactions de type 'comment'
    dont parent_comment_id pointe vers un commentaire principal.
    """
    id: int
    content: str
    created_at: datetime
    user_id: Optional[int] = None
    username: Optional[str] = None
    parent_comment_id: Optional[int] = None
    reply_to_id: Optional[int] = Field(
        None,
        description="Réponse ciblée explicitement (prioritaire sur le tag @username)",
    )


class ThreadedReply(ReplyRecord):
    """Réponse positionnée dans le fil d'affichage"""
    is_direct_reply: bool
    thread_root_id: int = Field(description="Réponse directe sous laquelle elle est affichée")


class OrganizeRepliesRequest(CamelModel):
    """Réponses à organiser pour un commentaire parent"""
    parent_username: Optional[str] = None
    replies: List[ReplyRecord] = Field(default_factory=list)


class OrganizeRepliesResponse(CamelModel):
    replies: List[ThreadedReply]
