"""Application use cases."""

from augure.application.use_cases.connect_wallet import ConnectWallet
from augure.application.use_cases.delete_account import DeleteAccount
from augure.application.use_cases.disconnect_wallet import DisconnectWallet
from augure.application.use_cases.generate_full_analysis import (
    GenerateFullAnalysis,
)
from augure.application.use_cases.get_analysis import GetAnalysis
from augure.application.use_cases.get_analysis_history import (
    GetAnalysisHistory,
)
from augure.application.use_cases.get_preferences import GetPreferences
from augure.application.use_cases.get_user_profile import GetUserProfile
from augure.application.use_cases.list_wallets import ListWallets
from augure.application.use_cases.login_user import LoginUser
from augure.application.use_cases.register_user import RegisterUser
from augure.application.use_cases.set_primary_wallet import SetPrimaryWallet
from augure.application.use_cases.update_password import UpdatePassword
from augure.application.use_cases.update_preferences import (
    UpdatePreferences,
)
from augure.application.use_cases.validate_token import ValidateToken

__all__ = [
    "RegisterUser",
    "LoginUser",
    "ValidateToken",
    "UpdatePassword",
    "DeleteAccount",
    "GetUserProfile",
    "GetPreferences",
    "UpdatePreferences",
    "ListWallets",
    "ConnectWallet",
    "DisconnectWallet",
    "SetPrimaryWallet",
    "GenerateFullAnalysis",
    "GetAnalysisHistory",
    "GetAnalysis",
]
