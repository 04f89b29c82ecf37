"""
GBAIRAI - Validation Endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status

from gbairai.api.deps import get_validation_service
from gbairai.core.logger import get_traced_logger
from gbairai.schemas.validation import ValidationRequest, ValidationResult
from gbairai.services.validation.content_validation import ContentValidationService

logger = get_traced_logger("ValidationAPI")

router = APIRouter()


@router.post("/validate-content", response_model=ValidationResult)
async def validate_content(
    request: ValidationRequest,
    validator: ContentValidationService = Depends(get_validation_service),
):
    """Heuristiques de forme: longueur, spam, langage, répétitions"""
    if not isinstance(request.content, str) or not request.content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Contenu requis"},
        )

    try:
        return validator.validate_content(request.content)
    except Exception:
        logger.exception("POST /api/validate-content - validation failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Erreur lors de la validation"},
        )
