"""
GBAIRAI - Validation Services
"""
from gbairai.services.validation.content_validation import ContentValidationService

__all__ = ["ContentValidationService"]
