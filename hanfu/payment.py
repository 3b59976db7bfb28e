from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from hanfu.errors import NoFuError, NoHanError, NoYakuError

DEALER_RON_MULTIPLIER = 6
DEALER_TSUMO_MULTIPLIER = 2
NON_DEALER_RON_MULTIPLIER = 4
NON_DEALER_TSUMO_TO_NON_DEALER_MULTIPLIER = 1
NON_DEALER_TSUMO_TO_DEALER_MULTIPLIER = 2

HONBA_RON_BONUS = 300
HONBA_TSUMO_BONUS = 100

YAKUMAN_BASE_POINTS = 8000


class LimitHand(Enum):
    MANGAN = ("満貫", 2000)
    HANEMAN = ("跳満", 3000)
    BAIMAN = ("倍満", 4000)
    SANBAIMAN = ("三倍満", 6000)
    KAZOE_YAKUMAN = ("数え役満", 8000)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def base_points(self) -> int:
        return self.value[1]


def _round_up_100(points: int) -> int:
    return ((points + 99) // 100) * 100


class Payment(BaseModel):
    dealer_ron: int
    dealer_tsumo: int
    non_dealer_ron: int
    non_dealer_tsumo_to_non_dealer: int
    non_dealer_tsumo_to_dealer: int

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_base_points(cls, base: int) -> Payment:
        return cls(
            dealer_ron=_round_up_100(base * DEALER_RON_MULTIPLIER),
            dealer_tsumo=_round_up_100(base * DEALER_TSUMO_MULTIPLIER),
            non_dealer_ron=_round_up_100(base * NON_DEALER_RON_MULTIPLIER),
            non_dealer_tsumo_to_non_dealer=_round_up_100(base * NON_DEALER_TSUMO_TO_NON_DEALER_MULTIPLIER),
            non_dealer_tsumo_to_dealer=_round_up_100(base * NON_DEALER_TSUMO_TO_DEALER_MULTIPLIER),
        )

    def with_honba(self, honba: int) -> Payment:
        ron_bonus = honba * HONBA_RON_BONUS
        tsumo_bonus = honba * HONBA_TSUMO_BONUS
        return Payment(
            dealer_ron=self.dealer_ron + ron_bonus,
            dealer_tsumo=self.dealer_tsumo + tsumo_bonus,
            non_dealer_ron=self.non_dealer_ron + ron_bonus,
            non_dealer_tsumo_to_non_dealer=self.non_dealer_tsumo_to_non_dealer + tsumo_bonus,
            non_dealer_tsumo_to_dealer=self.non_dealer_tsumo_to_dealer + tsumo_bonus,
        )


def is_limit_hand(han: int, fu: int) -> bool:
    return han >= 5 or (han == 4 and fu >= 40) or (han == 3 and fu >= 70)


def limit_hand(han: int, fu: int) -> LimitHand | None:
    if not is_limit_hand(han, fu):
        # Manual input can carry more fu than any real hand; cap at mangan.
        if fu * 2 ** (2 + han) > LimitHand.MANGAN.base_points:
            return LimitHand.MANGAN
        return None
    if han <= 5:
        return LimitHand.MANGAN
    if han <= 7:
        return LimitHand.HANEMAN
    if han <= 10:
        return LimitHand.BAIMAN
    if han <= 12:
        return LimitHand.SANBAIMAN
    return LimitHand.KAZOE_YAKUMAN


def base_points(han: int, fu: int) -> int:
    limit = limit_hand(han, fu)
    if limit is not None:
        return limit.base_points
    return fu * 2 ** (2 + han)


def calculate(han: int, fu: int) -> Payment:
    """Payment table for an ordinary hand; honba is applied separately."""
    if han == 0:
        raise NoHanError()
    if fu == 0:
        raise NoFuError()
    return Payment.from_base_points(base_points(han, fu))


def calculate_yakuman(units: int) -> Payment:
    if units == 0:
        raise NoYakuError()
    return Payment.from_base_points(YAKUMAN_BASE_POINTS * units)


def yakuman_label(units: int) -> str:
    if units <= 1:
        return "役満"
    if units == 2:
        return "ダブル役満"
    return f"{units}倍役満"


def point_label(han: int, fu: int) -> str:
    limit = limit_hand(han, fu)
    return limit.label if limit is not None else "通常"
