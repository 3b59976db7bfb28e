from __future__ import annotations


class ScoringError(ValueError):
    """Base class for every failure raised while scoring a hand."""

    code = "scoring_error"
    message = "Hand could not be scored"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class InvalidGroupError(ScoringError):
    code = "invalid_group"
    message = "Invalid tile group"


class InvalidSuitError(ScoringError):
    code = "invalid_suit"
    message = "Invalid suit"


class InvalidShapeError(ScoringError):
    code = "invalid_shape"
    message = "Hand is not a valid winning shape"


class NoYakuError(ScoringError):
    code = "no_yaku"
    message = "No yaku: dora-only hands cannot win"


class NoHanError(ScoringError):
    code = "no_han"
    message = "No han provided"


class NoFuError(ScoringError):
    code = "no_fu"
    message = "No fu provided"


class RinshanKanWithoutKanError(ScoringError):
    code = "rinshan_without_kan"
    message = "Rinshan requires at least one kan in the hand"


class RiichiOpenHandError(ScoringError):
    code = "riichi_open_hand"
    message = "Riichi cannot be declared with an open hand"


class ContextError(ScoringError):
    """Situational flags that cannot occur together."""

    code = "invalid_context"
    message = "Contradictory round context"


class DuplicateRiichiError(ContextError):
    code = "duplicate_riichi"
    message = "riichi and double_riichi cannot both be true"


class ChankanTsumoError(ContextError):
    code = "chankan_tsumo"
    message = "chankan cannot be won by tsumo"


class RinshanWithoutTsumoError(ContextError):
    code = "rinshan_without_tsumo"
    message = "rinshan requires tsumo"


class RinshanIppatsuError(ContextError):
    code = "rinshan_ippatsu"
    message = "rinshan and ippatsu cannot both be true"


class IppatsuWithoutRiichiError(ContextError):
    code = "ippatsu_without_riichi"
    message = "ippatsu cannot be true when riichi/double_riichi is false"


class DoubleRiichiHaiteiIppatsuError(ContextError):
    code = "double_riichi_haitei_ippatsu"
    message = "double riichi, haitei and ippatsu cannot all be true"


class DoubleRiichiHaiteiChankanError(ContextError):
    code = "double_riichi_haitei_chankan"
    message = "double riichi, haitei and chankan cannot all be true"


class TenhouWithoutTsumoError(ContextError):
    code = "tenhou_without_tsumo"
    message = "tenhou/chiihou require tsumo"
