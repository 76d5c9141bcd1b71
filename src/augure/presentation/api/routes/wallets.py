"""
Connected wallet API routes.

- GET /wallets - List wallets
- POST /wallets/connect - Connect a wallet
- DELETE /wallets/{wallet_id} - Disconnect a wallet
- PATCH /wallets/{wallet_id}/primary - Make a wallet primary
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from augure.application.use_cases.connect_wallet import (
    ConnectWallet,
    ConnectWalletCommand,
)
from augure.application.use_cases.disconnect_wallet import DisconnectWallet
from augure.application.use_cases.list_wallets import ListWallets
from augure.application.use_cases.set_primary_wallet import SetPrimaryWallet
from augure.di.dependencies import (
    get_connect_wallet,
    get_disconnect_wallet,
    get_list_wallets,
    get_set_primary_wallet,
)
from augure.domain.entities.user import User
from augure.presentation.api.middleware.auth import get_current_user
from augure.presentation.schemas.base import SuccessResponse
from augure.presentation.schemas.wallet_schemas import (
    ConnectWalletRequest,
    WalletEnvelope,
    WalletListResponse,
    WalletResponse,
)

router = APIRouter(prefix="/wallets", tags=["Wallets"])


@router.get(
    "",
    response_model=WalletListResponse,
    summary="List connected wallets",
)
async def list_wallets(
    current_user: User = Depends(get_current_user),
    use_case: ListWallets = Depends(get_list_wallets),
) -> WalletListResponse:
    """Newest first, each with lastSync from its latest analysis."""
    wallets = await use_case.execute(current_user.id)
    return WalletListResponse(wallets=[WalletResponse.from_entity(w) for w in wallets])


@router.post(
    "/connect",
    response_model=WalletEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Connect a wallet",
)
async def connect_wallet(
    request: ConnectWalletRequest,
    current_user: User = Depends(get_current_user),
    use_case: ConnectWallet = Depends(get_connect_wallet),
) -> WalletEnvelope:
    wallet = await use_case.execute(
        ConnectWalletCommand(
            user_id=current_user.id,
            wallet_address=request.wallet_address,
            blockchain=request.blockchain,
            nickname=request.nickname,
        )
    )
    return WalletEnvelope(wallet=WalletResponse.from_entity(wallet))


@router.delete(
    "/{wallet_id}",
    response_model=SuccessResponse,
    summary="Disconnect a wallet",
)
async def disconnect_wallet(
    wallet_id: UUID,
    current_user: User = Depends(get_current_user),
    use_case: DisconnectWallet = Depends(get_disconnect_wallet),
) -> SuccessResponse:
    await use_case.execute(current_user.id, wallet_id)
    return SuccessResponse()


@router.patch(
    "/{wallet_id}/primary",
    response_model=WalletEnvelope,
    summary="Set primary wallet",
)
async def set_primary_wallet(
    wallet_id: UUID,
    current_user: User = Depends(get_current_user),
    use_case: SetPrimaryWallet = Depends(get_set_primary_wallet),
) -> WalletEnvelope:
    wallet = await use_case.execute(current_user.id, wallet_id)
    return WalletEnvelope(wallet=WalletResponse.from_entity(wallet))
