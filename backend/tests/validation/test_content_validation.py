"""
ContentValidationService - tests unitaires

Heuristiques déterministes: longueur, spam, langage, répétitions.
"""
import pytest

from gbairai.services.validation.content_validation import (
    ISSUE_INAPPROPRIATE,
    ISSUE_REPETITION,
    ISSUE_SPAM,
    ISSUE_TOO_LONG,
    ISSUE_TOO_SHORT,
    ContentValidationService,
    text_length,
)


@pytest.fixture
def validator():
    return ContentValidationService()


class TestValidateContent:
    """validate_content"""

    def test_valid_content(self, validator):
        result = validator.validate_content("Bonjour à tous, belle journée!")
        assert result.is_valid is True
        assert result.issues == []
        assert result.confidence == 1.0
        assert result.suggested_changes == []

    def test_five_characters_is_long_enough(self, validator):
        assert validator.validate_content("Salut").is_valid is True

    def test_too_short(self, validator):
        result = validator.validate_content("Yo")
        assert result.is_valid is False
        assert result.issues == [ISSUE_TOO_SHORT]
        assert result.confidence == pytest.approx(0.7)
        assert result.suggested_changes == ["Ajoutez plus de détails à votre message"]

    def test_too_long(self, validator):
        result = validator.validate_content("abcdefghij" * 29)
        assert result.is_valid is False
        assert result.issues == [ISSUE_TOO_LONG]
        assert result.confidence == pytest.approx(0.5)
        assert result.suggested_changes == ["Raccourcissez votre message"]

    def test_exactly_max_length_is_accepted(self, validator):
        assert ISSUE_TOO_LONG not in validator.validate_content("abcdefghij" * 28).issues

    def test_emoji_counts_as_two_characters(self, validator):
        at_limit = "😀🎉" * 70
        assert ISSUE_TOO_LONG not in validator.validate_content(at_limit).issues
        assert ISSUE_TOO_LONG in validator.validate_content(at_limit + "😀").issues

    def test_two_emoji_are_still_too_short(self, validator):
        assert validator.validate_content("😀🎉").issues == [ISSUE_TOO_SHORT]
        assert ISSUE_TOO_SHORT not in validator.validate_content("😀🎉!").issues

    def test_spam(self, validator):
        result = validator.validate_content("PROMO GRATUIT CLIQUEZ URGENT http://x.co")
        assert result.is_valid is False
        assert result.issues == [ISSUE_SPAM]
        assert result.confidence == pytest.approx(0.6)

    def test_inappropriate(self, validator):
        result = validator.validate_content("je déteste ce putain de bordel")
        assert result.is_valid is False
        assert ISSUE_INAPPROPRIATE in result.issues
        assert result.confidence == pytest.approx(0.4)

    def test_repetition(self, validator):
        result = validator.validate_content("Nooooon pas ça")
        assert result.issues == [ISSUE_REPETITION]
        assert result.is_valid is False
        assert result.confidence == pytest.approx(0.8)

    def test_confidence_never_negative(self, validator):
        content = "PROMO GRATUIT CLIQUEZ URGENT putain bordel je déteste " + "abcdefghij" * 26
        result = validator.validate_content(content)
        assert result.issues == [ISSUE_TOO_LONG, ISSUE_SPAM, ISSUE_INAPPROPRIATE]
        assert result.confidence == 0.0
        assert len(result.suggested_changes) == 3


class TestHeuristics:
    """Heuristiques individuelles"""

    @pytest.mark.parametrize(
        "content, expected",
        [("salut", 5), ("éàç", 3), ("😀", 2), ("on est 🔥", 9), ("", 0)],
    )
    def test_text_length_counts_utf16_units(self, content, expected):
        assert text_length(content) == expected

    def test_detect_spam_keywords_are_cumulative(self):
        assert ContentValidationService.detect_spam("promo casino") == pytest.approx(0.4)

    def test_detect_spam_is_capped(self):
        assert ContentValidationService.detect_spam("PROMO GRATUIT CLIQUEZ URGENT http://x.co") == 1.0

    def test_detect_spam_on_empty_string(self):
        assert ContentValidationService.detect_spam("") == 0.0

    def test_detect_inappropriate_hate_pattern(self):
        assert ContentValidationService.detect_inappropriate("Je hais les lundis") == pytest.approx(0.2)

    @pytest.mark.parametrize(
        "content, expected",
        [
            ("Nooooon", True),
            ("trop trop trop bien", True),
            ("Bonjour", False),
            ("aaa", False),
        ],
    )
    def test_has_excessive_repetition(self, content, expected):
        assert ContentValidationService.has_excessive_repetition(content) is expected

    def test_generate_suggestions_uses_fixed_order(self):
        suggestions = ContentValidationService.generate_suggestions([ISSUE_SPAM, ISSUE_REPETITION])
        assert suggestions == [
            "Évitez de répéter les mêmes caractères",
            "Évitez les termes promotionnels",
        ]

    def test_generate_suggestions_order_ignores_input_order(self):
        every_issue = [ISSUE_INAPPROPRIATE, ISSUE_SPAM, ISSUE_REPETITION, ISSUE_TOO_LONG, ISSUE_TOO_SHORT]
        assert ContentValidationService.generate_suggestions(every_issue) == [
            "Ajoutez plus de détails à votre message",
            "Raccourcissez votre message",
            "Évitez de répéter les mêmes caractères",
            "Évitez les termes promotionnels",
            "Utilisez un langage plus respectueux",
        ]
