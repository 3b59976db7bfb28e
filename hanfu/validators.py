from __future__ import annotations

from hanfu.errors import (
    ChankanTsumoError,
    DoubleRiichiHaiteiChankanError,
    DoubleRiichiHaiteiIppatsuError,
    DuplicateRiichiError,
    IppatsuWithoutRiichiError,
    RinshanIppatsuError,
    RinshanWithoutTsumoError,
    TenhouWithoutTsumoError,
)
from hanfu.round_context import Riichi, RoundContext
from hanfu.schemas import ContextInput


def validate_round_context(ctx: RoundContext) -> None:
    if ctx.tsumo and ctx.chankan:
        raise ChankanTsumoError()
    if ctx.rinshan and not ctx.tsumo:
        raise RinshanWithoutTsumoError()
    if ctx.rinshan and ctx.ippatsu:
        raise RinshanIppatsuError()
    if ctx.ippatsu and not ctx.has_riichi:
        raise IppatsuWithoutRiichiError()
    if ctx.riichi == Riichi.DOUBLE_RIICHI and ctx.haitei and ctx.ippatsu:
        raise DoubleRiichiHaiteiIppatsuError()
    if ctx.riichi == Riichi.DOUBLE_RIICHI and ctx.haitei and ctx.chankan:
        raise DoubleRiichiHaiteiChankanError()
    if ctx.tenhou and not ctx.tsumo:
        raise TenhouWithoutTsumoError()


def round_context_from_input(context: ContextInput) -> RoundContext:
    if context.riichi and context.double_riichi:
        raise DuplicateRiichiError()

    riichi = Riichi.NONE
    if context.double_riichi:
        riichi = Riichi.DOUBLE_RIICHI
    elif context.riichi:
        riichi = Riichi.RIICHI

    ctx = RoundContext(
        tsumo=context.tsumo,
        riichi=riichi,
        ippatsu=context.ippatsu,
        rinshan=context.rinshan,
        chankan=context.chankan,
        haitei=context.haitei,
        tenhou=context.tenhou,
    )
    validate_round_context(ctx)
    return ctx
