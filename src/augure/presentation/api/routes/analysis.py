"""
Wallet analysis API routes.

- POST /analysis/generate - Analyse a wallet and store the result
- GET /analysis/history - Page through stored analyses
- GET /analysis/{analysis_id} - Get one stored analysis
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from augure.application.use_cases.generate_full_analysis import (
    GenerateFullAnalysis,
    GenerateFullAnalysisCommand,
)
from augure.application.use_cases.get_analysis import GetAnalysis
from augure.application.use_cases.get_analysis_history import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    GetAnalysisHistory,
    GetAnalysisHistoryQuery,
)
from augure.di.dependencies import (
    get_generate_full_analysis,
    get_get_analysis,
    get_get_analysis_history,
)
from augure.domain.entities.user import User
from augure.domain.value_objects.blockchain import Blockchain
from augure.presentation.api.middleware.auth import get_current_user
from augure.presentation.schemas.analysis_schemas import (
    AnalysisEnvelope,
    AnalysisHistoryResponse,
    AnalysisResponse,
    GenerateAnalysisRequest,
    PaginationResponse,
)

router = APIRouter(prefix="/analysis", tags=["Analysis"])


@router.post(
    "/generate",
    response_model=AnalysisEnvelope,
    summary="Generate wallet analysis",
)
async def generate_analysis(
    request: GenerateAnalysisRequest,
    current_user: User = Depends(get_current_user),
    use_case: GenerateFullAnalysis = Depends(get_generate_full_analysis),
) -> AnalysisEnvelope:
    """
    Analyse a wallet.

    Flow:
    1. Fetch transactions (400 on invalid address)
    2. Fetch spot price
    3. Compute profit/loss
    4. Generate insights if the user has preferences
    5. Store, overwriting any previous analysis of the wallet
    """
    analysis = await use_case.execute(
        GenerateFullAnalysisCommand(
            user_id=current_user.id,
            wallet_address=request.wallet_address,
            blockchain=request.blockchain,
        )
    )
    return AnalysisEnvelope(analysis=AnalysisResponse.from_entity(analysis))


# Registered before /{analysis_id} so "history" is not parsed as an id
@router.get(
    "/history",
    response_model=AnalysisHistoryResponse,
    summary="List analysis history",
)
async def get_history(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    blockchain: Optional[Blockchain] = Query(default=None),
    current_user: User = Depends(get_current_user),
    use_case: GetAnalysisHistory = Depends(get_get_analysis_history),
) -> AnalysisHistoryResponse:
    result = await use_case.execute(
        GetAnalysisHistoryQuery(
            user_id=current_user.id,
            page=page,
            limit=limit,
            blockchain=blockchain,
        )
    )

    return AnalysisHistoryResponse(
        analyses=[AnalysisResponse.from_entity(a) for a in result.analyses],
        pagination=PaginationResponse(**result.pagination()),
    )


@router.get(
    "/{analysis_id}",
    response_model=AnalysisEnvelope,
    summary="Get analysis",
)
async def get_analysis(
    analysis_id: UUID,
    current_user: User = Depends(get_current_user),
    use_case: GetAnalysis = Depends(get_get_analysis),
) -> AnalysisEnvelope:
    analysis = await use_case.execute(current_user.id, analysis_id)
    return AnalysisEnvelope(analysis=AnalysisResponse.from_entity(analysis))
