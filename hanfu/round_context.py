from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Riichi(str, Enum):
    NONE = "none"
    RIICHI = "riichi"
    DOUBLE_RIICHI = "double_riichi"


class RoundContext(BaseModel):
    """Situational flags of a win, independent of the tiles."""

    tsumo: bool = False
    riichi: Riichi = Riichi.NONE
    # won on the first uninterrupted draw after riichi
    ippatsu: bool = False
    # won on the replacement tile drawn after a kan
    rinshan: bool = False
    # won by robbing another player's added kan
    chankan: bool = False
    # won on the last tile of the wall
    haitei: bool = False
    # won on the very first draw (tenhou for the dealer, chiihou otherwise)
    tenhou: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def has_riichi(self) -> bool:
        return self.riichi != Riichi.NONE
