"""
GBAIRAI - Comment Endpoints
Organisation des réponses d'un commentaire en fil
"""
from fastapi import APIRouter

from gbairai.core.logger import get_traced_logger
from gbairai.schemas.comment import OrganizeRepliesRequest, OrganizeRepliesResponse
from gbairai.services.comments.reply_threading import organize_replies

logger = get_traced_logger("CommentsAPI")

router = APIRouter()


@router.post("/organize-replies", response_model=OrganizeRepliesResponse)
async def organize_comment_replies(request: OrganizeRepliesRequest):
    """
    Ordonne les réponses d'un commentaire

    Réponses directes par ordre chronologique, chacune suivie des
    réponses qui la ciblent (tag @username ou replyToId).
    """
    organized = organize_replies(request.parent_username, request.replies)
    logger.debug(
        "replies organized",
        metadata={
            "reply_count": len(organized),
            "direct_count": sum(1 for reply in organized if reply.is_direct_reply),
        },
    )
    return OrganizeRepliesResponse(replies=organized)
