"""
Prompt builders for investment insight generation.

Prompts are deterministic for identical inputs: analysis data is
rendered as indented JSON with sorted keys.
"""

import json
from typing import Any

from augure.domain.entities.investment_preferences import InvestmentPreferences
from augure.domain.value_objects.blockchain import Blockchain

MAX_INSIGHT_WORDS = 300
MAX_SUMMARY_WORDS = 50
QUICK_SUMMARY_FALLBACK = "Analysis complete."

_PREFERENCE_LABELS: tuple[tuple[str, str], ...] = (
    ("risk_aversion", "Risk Aversion"),
    ("volatility_tolerance", "Volatility Tolerance"),
    ("growth_focus", "Growth Focus"),
    ("crypto_experience", "Crypto Experience"),
    ("innovation_trust", "Innovation Trust"),
    ("impact_interest", "Impact Interest"),
    ("diversification", "Diversification Preference"),
    ("holding_patience", "Holding Patience"),
    ("monitoring_frequency", "Monitoring Frequency"),
    ("advice_openness", "Advice Openness"),
)


def build_insights_prompt(
    analysis_data: dict[str, Any],
    preferences: InvestmentPreferences,
    blockchain: Blockchain,
) -> str:
    """
    Build the personalised insights prompt.

    Args:
        analysis_data: Wallet metrics
        preferences: Investor profile scores
        blockchain: Chain the wallet lives on

    Returns:
        Prompt text
    """
    blockchain = Blockchain(blockchain)
    profile_lines = [f"- Investor Type: {preferences.investor_profile}"]
    profile_lines.extend(
        f"- {label}: {getattr(preferences, name)}/10"
        for name, label in _PREFERENCE_LABELS
    )

    return "\n".join(
        [
            "You are an expert cryptocurrency investment advisor. Analyze the "
            f"following {blockchain.value} wallet data and provide personalized "
            "investment insights.",
            "",
            "USER PROFILE:",
            *profile_lines,
            "",
            "WALLET ANALYSIS DATA:",
            json.dumps(analysis_data, indent=2, sort_keys=True, default=str),
            "",
            "Please provide:",
            "1. A brief assessment of the wallet's investment performance",
            "2. Risk analysis tailored to the user's profile",
            "3. 2-3 specific, actionable recommendations based on their preferences",
            "4. A risk score (1-10) for this portfolio given the user's profile",
            "",
            "Format your response in a clear, professional manner. "
            f"Keep it concise (max {MAX_INSIGHT_WORDS} words).",
        ]
    )


def build_summary_prompt(profit_loss: float, blockchain: Blockchain) -> str:
    """
    Build the one-sentence summary prompt.

    Args:
        profit_loss: Net profit (positive) or loss (negative)
        blockchain: Chain the wallet lives on

    Returns:
        Prompt text
    """
    blockchain = Blockchain(blockchain)
    performance = "profit" if profit_loss >= 0 else "loss"
    return (
        f"In one sentence (under {MAX_SUMMARY_WORDS} words), summarize a "
        f"{blockchain.value} wallet with a {abs(profit_loss)} {blockchain.ticker} "
        f"net {performance}. Be neutral and professional."
    )
