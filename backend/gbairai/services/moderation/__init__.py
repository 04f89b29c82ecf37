"""
GBAIRAI - Moderation Services
Liste noire locale + modération par LLM
"""
from gbairai.services.moderation.blacklist import BlacklistFilter, WordCategory, default_blacklist
from gbairai.services.moderation.content_moderation import ContentModerator
from gbairai.services.moderation.rejection_policy import RejectionMessagePolicy

__all__ = [
    "BlacklistFilter",
    "ContentModerator",
    "RejectionMessagePolicy",
    "WordCategory",
    "default_blacklist",
]
