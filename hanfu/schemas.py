from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field, conint

from hanfu.config import settings


class Wind(str, Enum):
    E = "E"
    S = "S"
    W = "W"
    N = "N"

    @property
    def notation(self) -> str:
        return f"{self.value}w"


# Group notation such as "123m", "EEEw", "rrrd" or "555po" (trailing "o" = called).
TileCode = str


class ErrorBody(BaseModel):
    code: str
    message: str


class HandInput(BaseModel):
    tiles: list[TileCode]
    win_tile: TileCode


class ContextInput(BaseModel):
    tsumo: bool = False
    riichi: bool = False
    double_riichi: bool = False
    ippatsu: bool = False
    haitei: bool = False
    rinshan: bool = False
    chankan: bool = False
    tenhou: bool = False
    seat_wind: Wind = Field(default_factory=lambda: Wind(settings.default_seat_wind))
    round_wind: Wind = Field(default_factory=lambda: Wind(settings.default_round_wind))
    dora: conint(ge=0) = 0
    honba: conint(ge=0) = 0


class ScoreRequest(BaseModel):
    hand: HandInput
    context: ContextInput = Field(default_factory=ContextInput)


class YakuItem(BaseModel):
    name: str
    han: int


class FuBreakdownItem(BaseModel):
    name: str
    fu: int


class Points(BaseModel):
    dealer_ron: int
    dealer_tsumo: int
    non_dealer_ron: int
    non_dealer_tsumo_to_non_dealer: int
    non_dealer_tsumo_to_dealer: int


class ScoreResult(BaseModel):
    han: int
    fu: int
    yaku: list[YakuItem] = Field(default_factory=list)
    yakuman: list[str] = Field(default_factory=list)
    fu_breakdown: list[FuBreakdownItem] = Field(default_factory=list)
    dora: int
    honba: int
    is_open: bool
    point_label: str
    points: Points


class ScoreResponse(BaseModel):
    status: Literal["ok"]
    result: ScoreResult


class CalculateRequest(BaseModel):
    han: conint(ge=0)
    fu: conint(ge=0)
    honba: conint(ge=0) = 0


class CalculateResponse(BaseModel):
    han: int
    fu: int
    honba: int
    point_label: str
    points: Points
