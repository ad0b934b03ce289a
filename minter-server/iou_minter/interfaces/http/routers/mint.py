"""Single and batch minting endpoints."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from iou_minter.domain.issuance import IssuanceError, IssuanceService, MintResult
from iou_minter.domain.journal import MintJournalService
from iou_minter.interfaces.http.deps import get_db_session, get_issuance_service
from iou_minter.schemas import (
    MintBatchRequest,
    MintBatchResponse,
    MintErrorResponse,
    MintItemResult,
    MintSingleRequest,
    MintSingleResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(exc: IssuanceError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=MintErrorResponse(message=exc.message, code=exc.code).model_dump(),
    )


def _text(value: Any) -> str:
    return "" if value is None else str(value)


async def _journal(db: AsyncSession, results: Sequence[MintResult], currency: str, *, batch: bool) -> None:
    """Persist outcomes; a journal failure never changes what the caller is told."""
    service = MintJournalService.with_session(db)
    try:
        if batch:
            await service.record_batch(results, currency)
        else:
            for result in results:
                await service.record(result, currency)
        await db.commit()
    except SQLAlchemyError as exc:
        logger.error("写入发行记录失败: %s", exc)
        await db.rollback()


def _to_item(result: MintResult) -> MintItemResult:
    receipt = result.receipt
    return MintItemResult(
        index=result.index,
        to=result.recipient,
        amount=result.amount,
        ok=result.ok,
        hash=receipt.transaction_hash if receipt else None,
        ledger_index=receipt.ledger_index if receipt else None,
        error=result.error,
    )


@router.post(
    "/mint-single",
    response_model=MintSingleResponse,
    response_model_exclude_none=True,
    responses={400: {"model": MintErrorResponse}},
    summary="单笔发行",
)
async def mint_single(
    payload: MintSingleRequest,
    issuance: IssuanceService = Depends(get_issuance_service),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        result = await issuance.mint_single(payload.to, payload.amount)
    except IssuanceError as exc:
        logger.error("mint-single 失败: %s", exc.message)
        failure = MintResult.failure(0, _text(payload.to), _text(payload.amount), exc.message, exc.code)
        await _journal(db, [failure], issuance.currency, batch=False)
        return _error(exc)

    await _journal(db, [result], issuance.currency, batch=False)
    return MintSingleResponse(hash=result.receipt.transaction_hash, ledger_index=result.receipt.ledger_index)


@router.post(
    "/mint-batch",
    response_model=MintBatchResponse,
    response_model_exclude_none=True,
    responses={400: {"model": MintErrorResponse}},
    summary="批量发行（逐笔回报，不中断）",
)
async def mint_batch(
    payload: MintBatchRequest,
    issuance: IssuanceService = Depends(get_issuance_service),
    db: AsyncSession = Depends(get_db_session),
):
    items = payload.items if isinstance(payload.items, list) else []
    try:
        batch = await issuance.mint_batch(items)
    except IssuanceError as exc:
        return _error(exc)

    await _journal(db, batch.results, issuance.currency, batch=True)
    return MintBatchResponse(
        status=batch.status,
        ok_count=batch.ok_count,
        err_count=batch.err_count,
        results=[_to_item(result) for result in batch.results],
    )
