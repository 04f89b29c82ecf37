"""
RejectionMessagePolicy - tests unitaires
"""
import pytest

from gbairai.services.moderation.rejection_policy import (
    DEFAULT_REJECTION_MESSAGES,
    RejectionMessagePolicy,
)


class TestRejectionMessagePolicy:

    def test_default_messages(self):
        policy = RejectionMessagePolicy()
        assert len(policy.messages) == 7
        assert policy.pick() in DEFAULT_REJECTION_MESSAGES

    def test_injected_selector_is_used(self):
        policy = RejectionMessagePolicy(selector=lambda messages: messages[-1])
        assert policy.pick() == DEFAULT_REJECTION_MESSAGES[-1]

    def test_custom_messages(self):
        policy = RejectionMessagePolicy(messages=["Non merci"])
        assert policy.pick() == "Non merci"

    def test_empty_messages_are_rejected(self):
        with pytest.raises(ValueError):
            RejectionMessagePolicy(messages=[])

    def test_seeded_policy_is_reproducible(self):
        first = RejectionMessagePolicy.seeded(42)
        second = RejectionMessagePolicy.seeded(42)
        assert [first.pick() for _ in range(10)] == [second.pick() for _ in range(10)]
