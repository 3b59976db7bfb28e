from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, HTTPException

from hanfu.config import settings
from hanfu.errors import ScoringError
from hanfu.hand_scoring import Score, score_hand
from hanfu.logging import setup_logging
from hanfu.payment import Payment, calculate, point_label
from hanfu.schemas import (
    CalculateRequest,
    CalculateResponse,
    ErrorBody,
    FuBreakdownItem,
    Points,
    ScoreRequest,
    ScoreResponse,
    ScoreResult,
    YakuItem,
)
from hanfu.validators import round_context_from_input

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    setup_logging()
    yield


app = FastAPI(title=settings.app_title, version="0.1.0", lifespan=lifespan)


def _unprocessable(exc: ScoringError) -> HTTPException:
    return HTTPException(status_code=422, detail=ErrorBody(code=exc.code, message=str(exc)).model_dump())


def _points(payment: Payment) -> Points:
    return Points(**payment.model_dump())


def _score_result(score: Score) -> ScoreResult:
    if score.is_yakuman:
        yaku: list[YakuItem] = []
        yakuman = [y.label for y in score.yaku]
    else:
        yaku = [YakuItem(name=y.label, han=y.han(score.is_open)) for y in score.yaku]
        if score.dora > 0:
            yaku.append(YakuItem(name="ドラ", han=score.dora))
        yakuman = []
    return ScoreResult(
        han=score.han,
        fu=score.fu_score,
        yaku=yaku,
        yakuman=yakuman,
        fu_breakdown=[FuBreakdownItem(name=f.label, fu=f.points) for f in score.fu],
        dora=score.dora,
        honba=score.honba,
        is_open=score.is_open,
        point_label=score.point_label,
        points=_points(score.payment_with_honba()),
    )


@app.get("/")
def root() -> dict[str, str]:
    return {
        "message": settings.app_title,
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/api/v1/score", response_model=ScoreResponse)
def score(req: ScoreRequest) -> ScoreResponse:
    context = req.context
    try:
        ctx = round_context_from_input(context)
        result = score_hand(
            req.hand.tiles,
            req.hand.win_tile,
            ctx,
            seat=context.seat_wind.notation,
            prev=context.round_wind.notation,
            dora=context.dora,
            honba=context.honba,
        )
    except ScoringError as exc:
        logger.warning("score.rejected", code=exc.code, reason=str(exc), tiles=req.hand.tiles)
        raise _unprocessable(exc) from exc

    logger.info("score.accepted", han=result.han, fu=result.fu_score, yaku=result.yaku, honba=result.honba)
    return ScoreResponse(status="ok", result=_score_result(result))


@app.post("/api/v1/calculate", response_model=CalculateResponse)
def calculate_points(req: CalculateRequest) -> CalculateResponse:
    try:
        payment = calculate(req.han, req.fu)
    except ScoringError as exc:
        logger.warning("calculate.rejected", code=exc.code, han=req.han, fu=req.fu)
        raise _unprocessable(exc) from exc

    logger.info("calculate.accepted", han=req.han, fu=req.fu, honba=req.honba)
    return CalculateResponse(
        han=req.han,
        fu=req.fu,
        honba=req.honba,
        point_label=point_label(req.han, req.fu),
        points=_points(payment.with_honba(req.honba)),
    )
