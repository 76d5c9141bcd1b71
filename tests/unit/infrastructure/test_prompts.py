"""
Unit tests for insight prompt builders.

Usage:
    pytest tests/unit/infrastructure/test_prompts.py
"""

from augure.domain.value_objects.blockchain import Blockchain
from augure.infrastructure.ai.prompts import build_insights_prompt, build_summary_prompt
from tests.helpers import make_preferences


class TestBuildInsightsPrompt:
    """Tests for build_insights_prompt."""

    def test_includes_profile_and_scores(self):
        prefs = make_preferences(
            risk_aversion=9, volatility_tolerance=2, growth_focus=2, advice_openness=7
        )

        prompt = build_insights_prompt({"costBasis": 1.0}, prefs, Blockchain.BITCOIN)

        assert "bitcoin wallet data" in prompt
        assert "- Investor Type: conservative" in prompt
        assert "- Risk Aversion: 9/10" in prompt
        assert "- Diversification Preference: 5/10" in prompt
        assert "- Advice Openness: 7/10" in prompt
        assert "max 300 words" in prompt

    def test_deterministic_for_key_order(self):
        prefs = make_preferences()

        first = build_insights_prompt({"b": 1, "a": 2}, prefs, Blockchain.ETHEREUM)
        second = build_insights_prompt({"a": 2, "b": 1}, prefs, Blockchain.ETHEREUM)

        assert first == second
        assert '{\n  "a": 2,\n  "b": 1\n}' in first


class TestBuildSummaryPrompt:
    """Tests for build_summary_prompt."""

    def test_profit(self):
        prompt = build_summary_prompt(150.0, Blockchain.ETHEREUM)

        assert "150.0 ETH net profit" in prompt
        assert "ethereum wallet" in prompt

    def test_loss_uses_absolute_value(self):
        prompt = build_summary_prompt(-2.5, Blockchain.BITCOIN)

        assert "2.5 BIT net loss" in prompt
        assert "-2.5" not in prompt
