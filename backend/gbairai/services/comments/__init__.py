"""
GBAIRAI - Comment Services
"""
from gbairai.services.comments.reply_threading import extract_tag, organize_replies

__all__ = ["extract_tag", "organize_replies"]
