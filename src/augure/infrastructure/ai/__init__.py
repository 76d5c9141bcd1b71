"""
Text generation integrations.
"""

from augure.infrastructure.ai.gemini_insight_generator import GeminiInsightGenerator

__all__ = ["GeminiInsightGenerator"]
