from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from hanfu.errors import NoYakuError, RiichiOpenHandError, RinshanKanWithoutKanError
from hanfu.fu import Fu, compute_fu
from hanfu.hand import Hand
from hanfu.payment import LimitHand, Payment, calculate, calculate_yakuman, limit_hand, yakuman_label
from hanfu.round_context import RoundContext
from hanfu.validators import validate_round_context
from hanfu.yaku import Yaku, detect


class Score(BaseModel):
    """Final result of scoring one hand. ``payment`` does not include honba."""

    payment: Payment
    yaku: tuple[Yaku, ...]
    fu: tuple[Fu, ...]
    han: int
    fu_score: int
    honba: int
    is_open: bool
    dora: int = 0
    limit: LimitHand | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_yakuman(self) -> bool:
        return any(y.is_yakuman for y in self.yaku)

    @property
    def point_label(self) -> str:
        if self.is_yakuman:
            return yakuman_label(self.han)
        return self.limit.label if self.limit is not None else "通常"

    def payment_with_honba(self) -> Payment:
        return self.payment.with_honba(self.honba)


def score_hand(
    tiles: Sequence[str],
    win: str,
    ctx: RoundContext,
    *,
    seat: str = "Ew",
    prev: str = "Ew",
    dora: int = 0,
    honba: int = 0,
) -> Score:
    """Hand notation + round context -> score."""
    validate_round_context(ctx)
    hand = Hand.build(tiles, win, seat, prev)
    if ctx.rinshan and not hand.kans():
        raise RinshanKanWithoutKanError()
    if ctx.has_riichi and hand.is_open:
        raise RiichiOpenHandError()

    yaku_han, yaku = detect(hand, ctx)
    if yaku_han == 0:
        raise NoYakuError()

    if any(y.is_yakuman for y in yaku):
        return Score(
            payment=calculate_yakuman(yaku_han),
            yaku=tuple(yaku),
            fu=(),
            han=yaku_han,
            fu_score=0,
            honba=honba,
            is_open=hand.is_open,
        )

    fu_score, fu = compute_fu(hand, ctx.tsumo, pinfu=Yaku.PINFU in yaku)
    han = yaku_han + dora
    return Score(
        payment=calculate(han, fu_score),
        yaku=tuple(yaku),
        fu=tuple(fu),
        han=han,
        fu_score=fu_score,
        honba=honba,
        is_open=hand.is_open,
        dora=dora,
        limit=limit_hand(han, fu_score),
    )
