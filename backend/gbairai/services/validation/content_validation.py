"""
GBAIRAI - Content Validation Service
Heuristiques de forme: longueur, spam, langage inapproprié, répétitions

Entièrement déterministe, sans I/O.
"""
import re
from typing import List

from gbairai.schemas.validation import ValidationResult

MIN_LENGTH = 5
MAX_LENGTH = 280

ISSUE_TOO_SHORT = "Contenu trop court"
ISSUE_TOO_LONG = f"Contenu trop long (max {MAX_LENGTH} caractères)"
ISSUE_SPAM = "Contenu potentiellement spam"
ISSUE_INAPPROPRIATE = "Contenu potentiellement inapproprié"
ISSUE_REPETITION = "Répétition excessive de caractères"

SPAM_KEYWORDS = (
    "viagra", "casino", "promo", "gratuit", "urgent", "cliquez",
    "gagner", "argent facile", "opportunité", "business", "mlm",
)

INAPPROPRIATE_KEYWORDS = (
    "connard", "salope", "putain", "merde", "bordel",
    "violence", "tuer", "mort", "suicide", "haine",
)

HATE_PATTERNS = (
    re.compile(r"je déteste", re.IGNORECASE),
    re.compile(r"je hais", re.IGNORECASE),
    re.compile(r"crève", re.IGNORECASE),
    re.compile(r"va mourir", re.IGNORECASE),
)

_REPEATED_CHAR_SPAM = re.compile(r"(.)\1{4,}")
_REPEATED_CHAR = re.compile(r"(.)\1{3,}")
_REPEATED_WORD = re.compile(r"(\w+)\s+\1\s+\1")
_UPPERCASE = re.compile(r"[A-Z]")


def text_length(content: str) -> int:
    """Longueur en unités UTF-16, comme le compteur du client"""
    # un emoji hors BMP compte pour deux
    return len(content.encode("utf-16-le")) // 2

_SUGGESTIONS = {
    ISSUE_TOO_SHORT: "Ajoutez plus de détails à votre message",
    ISSUE_TOO_LONG: "Raccourcissez votre message",
    ISSUE_REPETITION: "Évitez de répéter les mêmes caractères",
    ISSUE_SPAM: "Évitez les termes promotionnels",
    ISSUE_INAPPROPRIATE: "Utilisez un langage plus respectueux",
}


class ContentValidationService:
    """
    Content Validation Service

    La confiance part de 1.0 et chaque problème détecté la pénalise.
    Le contenu est valide s'il n'a aucun problème et une confiance > 0.5.
    """

    def validate_content(self, content: str) -> ValidationResult:
        issues: List[str] = []
        confidence = 1.0

        length = text_length(content)
        if length < MIN_LENGTH:
            issues.append(ISSUE_TOO_SHORT)
            confidence -= 0.3

        if length > MAX_LENGTH:
            issues.append(ISSUE_TOO_LONG)
            confidence -= 0.5

        if self.detect_spam(content) > 0.7:
            issues.append(ISSUE_SPAM)
            confidence -= 0.4

        if self.detect_inappropriate(content) > 0.6:
            issues.append(ISSUE_INAPPROPRIATE)
            confidence -= 0.6

        if self.has_excessive_repetition(content):
            issues.append(ISSUE_REPETITION)
            confidence -= 0.2

        return ValidationResult(
            is_valid=not issues and confidence > 0.5,
            issues=issues,
            confidence=round(max(confidence, 0.0), 4),
            suggested_changes=self.generate_suggestions(issues),
        )

    @staticmethod
    def detect_spam(content: str) -> float:
        normalized = content.lower()
        score = 0.0

        for keyword in SPAM_KEYWORDS:
            if keyword in normalized:
                score += 0.2

        if _REPEATED_CHAR_SPAM.search(content):
            score += 0.3

        if content and len(_UPPERCASE.findall(content)) / text_length(content) > 0.5:
            score += 0.2

        if "http" in content or "www." in content:
            score += 0.1

        return min(score, 1.0)

    @staticmethod
    def detect_inappropriate(content: str) -> float:
        normalized = content.lower()
        score = 0.0

        for keyword in INAPPROPRIATE_KEYWORDS:
            if keyword in normalized:
                score += 0.3

        for pattern in HATE_PATTERNS:
            if pattern.search(content):
                score += 0.2

        return min(score, 1.0)

    @staticmethod
    def has_excessive_repetition(content: str) -> bool:
        return bool(_REPEATED_CHAR.search(content) or _REPEATED_WORD.search(content))

    @staticmethod
    def generate_suggestions(issues: List[str]) -> List[str]:
        # ordre fixe, indépendant de l'ordre des problèmes
        return [suggestion for issue, suggestion in _SUGGESTIONS.items() if issue in issues]
