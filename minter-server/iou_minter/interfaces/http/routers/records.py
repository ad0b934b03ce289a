"""Mint journal listing."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from iou_minter.domain.journal import MintJournalService
from iou_minter.interfaces.http.deps import get_db_session
from iou_minter.schemas import MintRecordListResponse, MintRecordResponse

router = APIRouter()


@router.get(
    "/mint-records",
    response_model=MintRecordListResponse,
    response_model_exclude_none=True,
    summary="获取发行记录",
)
async def list_mint_records(
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db_session),
) -> MintRecordListResponse:
    service = MintJournalService.with_session(db)
    entries = await service.list_records(limit, offset)
    return MintRecordListResponse(
        records=[
            MintRecordResponse(
                id=entry.id,
                batch_id=entry.batch_id,
                index=entry.item_index,
                to=entry.recipient,
                amount=entry.amount,
                currency=entry.currency,
                ok=entry.ok,
                hash=entry.tx_hash,
                ledger_index=entry.ledger_index,
                error_code=entry.error_code,
                error=entry.error_message,
                created_at=entry.created_at,
            )
            for entry in entries
        ]
    )
