"""API routes."""
from augure.presentation.api.routes import analysis, auth, health, users, wallets

__all__ = [
    "analysis",
    "auth",
    "health",
    "users",
    "wallets",
]
