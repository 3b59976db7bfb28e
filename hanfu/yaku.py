from __future__ import annotations

from collections import Counter
from collections.abc import Callable
from enum import Enum

from hanfu.fu import is_single_wait
from hanfu.hand import Hand
from hanfu.round_context import Riichi, RoundContext
from hanfu.tiles import GREEN_CODES, NUMBERED_SUITS, GroupKind, Suit, TileGroup


class Yaku(Enum):
    # (name, closed han, open han, yakuman); open han 0 means concealed only
    RIICHI = ("立直", 1, 0, False)
    DOUBLE_RIICHI = ("ダブル立直", 2, 0, False)
    IPPATSU = ("一発", 1, 0, False)
    MENZEN_TSUMO = ("門前清自摸和", 1, 0, False)
    HAITEI = ("海底摸月", 1, 1, False)
    HOUTEI = ("河底撈魚", 1, 1, False)
    RINSHAN_KAIHOU = ("嶺上開花", 1, 1, False)
    CHANKAN = ("槍槓", 1, 1, False)
    TANYAO = ("断么九", 1, 1, False)
    PINFU = ("平和", 1, 0, False)
    IIPEIKOU = ("一盃口", 1, 0, False)
    RYANPEIKOU = ("二盃口", 3, 0, False)
    YAKUHAI = ("役牌", 1, 1, False)
    SANSHOKU_DOUJUN = ("三色同順", 2, 1, False)
    ITTSUU = ("一気通貫", 2, 1, False)
    CHANTAIYAO = ("混全帯么九", 2, 1, False)
    JUNCHAN_TAIYAO = ("純全帯么九", 3, 2, False)
    TOITOI = ("対々和", 2, 2, False)
    SANANKOU = ("三暗刻", 2, 2, False)
    SANSHOKU_DOUKOU = ("三色同刻", 2, 2, False)
    SANKANTSU = ("三槓子", 2, 2, False)
    SHOUSANGEN = ("小三元", 2, 2, False)
    HONROUTOU = ("混老頭", 2, 2, False)
    CHIITOITSU = ("七対子", 2, 0, False)
    HONITSU = ("混一色", 3, 2, False)
    CHINITSU = ("清一色", 6, 5, False)

    TENHOU = ("天和", 1, 1, True)
    CHIIHOU = ("地和", 1, 1, True)
    KOKUSHI_MUSOU = ("国士無双", 1, 1, True)
    KOKUSHI_MUSOU_13_SIDED = ("国士無双十三面待ち", 1, 1, True)
    SUUANKOU = ("四暗刻", 1, 1, True)
    SUUANKOU_TANKI = ("四暗刻単騎", 1, 1, True)
    DAISANGEN = ("大三元", 1, 1, True)
    SHOUSUUSHII = ("小四喜", 1, 1, True)
    DAISUUSHII = ("大四喜", 1, 1, True)
    TSUUIISOU = ("字一色", 1, 1, True)
    DAICHIISHIN = ("大七星", 1, 1, True)
    RYUUIISOU = ("緑一色", 1, 1, True)
    CHINROUTOU = ("清老頭", 1, 1, True)
    CHUUREN_POUTOU = ("九蓮宝燈", 1, 1, True)
    CHUUREN_POUTOU_9_SIDED = ("純正九蓮宝燈", 1, 1, True)
    SUUKANTSU = ("四槓子", 1, 1, True)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def is_yakuman(self) -> bool:
        return self.value[3]

    def han(self, is_open: bool) -> int:
        return self.value[2] if is_open else self.value[1]


Check = Callable[[Hand, RoundContext], bool]


def _concealed_melds(hand: Hand) -> list[TileGroup]:
    return [g for g in hand.melds() if not g.is_open]


def _sequence_starts(hand: Hand, suit: Suit) -> set[int]:
    return {g.number for g in hand.sequences() if g.suit == suit}


def _meld_numbers(hand: Hand, suit: Suit) -> set[int]:
    return {g.number for g in hand.melds() if g.suit == suit}


def _count_suit_melds(hand: Hand, suit: Suit) -> int:
    return sum(1 for g in hand.melds() if g.suit == suit)


def _numbered_suits(hand: Hand) -> set[Suit]:
    return {g.suit for g in hand.groups if not g.is_honor}


def _has_honor(hand: Hand) -> bool:
    return any(g.is_honor for g in hand.groups)


def _has_tenhou(hand: Hand, ctx: RoundContext) -> bool:
    return ctx.tenhou and not hand.is_open and hand.is_dealer


def _has_chiihou(hand: Hand, ctx: RoundContext) -> bool:
    return ctx.tenhou and not hand.is_open and not hand.is_dealer


def _has_kokushi(hand: Hand, ctx: RoundContext) -> bool:
    return hand.is_thirteen_orphans and hand.winning_group.kind != GroupKind.PAIR


def _has_kokushi_13_sided(hand: Hand, ctx: RoundContext) -> bool:
    return hand.is_thirteen_orphans and hand.winning_group.kind == GroupKind.PAIR


def _has_suuankou(hand: Hand, ctx: RoundContext) -> bool:
    # On ron the winning triplet counts as called, so only tsumo completes it.
    return (
        len(_concealed_melds(hand)) == 4
        and hand.winning_group.kind == GroupKind.TRIPLET
        and ctx.tsumo
    )


def _has_suuankou_tanki(hand: Hand, ctx: RoundContext) -> bool:
    return len(_concealed_melds(hand)) == 4 and hand.winning_group.kind == GroupKind.PAIR


def _has_daisangen(hand: Hand, ctx: RoundContext) -> bool:
    return _count_suit_melds(hand, Suit.DRAGON) == 3


def _has_shousuushii(hand: Hand, ctx: RoundContext) -> bool:
    return _count_suit_melds(hand, Suit.WIND) == 3 and any(p.suit == Suit.WIND for p in hand.pairs())


def _has_daisuushii(hand: Hand, ctx: RoundContext) -> bool:
    return _count_suit_melds(hand, Suit.WIND) == 4


def _has_tsuuiisou(hand: Hand, ctx: RoundContext) -> bool:
    return not hand.is_seven_pairs and all(g.is_honor for g in hand.groups)


def _has_daichiishin(hand: Hand, ctx: RoundContext) -> bool:
    return hand.is_seven_pairs and all(g.is_honor for g in hand.groups)


def _has_ryuuiisou(hand: Hand, ctx: RoundContext) -> bool:
    return all(code in GREEN_CODES for code in hand.tile_codes())


def _has_chinroutou(hand: Hand, ctx: RoundContext) -> bool:
    return all(
        g.kind in (GroupKind.TRIPLET, GroupKind.KAN, GroupKind.PAIR) and g.is_terminal and not g.is_honor
        for g in hand.groups
    )


def _chuuren_extra_tile(hand: Hand) -> str | None:
    """The tile on top of 1112345678999 in one suit, or None if not nine gates."""
    if hand.is_open or hand.kans() or len(_numbered_suits(hand)) != 1 or _has_honor(hand):
        return None
    codes = hand.tile_codes()
    suit = codes[0][1]
    counts = Counter(int(code[0]) for code in codes)
    base = {1: 3, 9: 3, 2: 1, 3: 1, 4: 1, 5: 1, 6: 1, 7: 1, 8: 1}
    if any(counts[n] < base[n] for n in range(1, 10)):
        return None
    extras = [n for n in range(1, 10) for _ in range(counts[n] - base[n])]
    if len(extras) != 1:
        return None
    return f"{extras[0]}{suit}"


def _has_chuuren(hand: Hand, ctx: RoundContext) -> bool:
    extra = _chuuren_extra_tile(hand)
    return extra is not None and extra != hand.win_tile.code


def _has_chuuren_9_sided(hand: Hand, ctx: RoundContext) -> bool:
    extra = _chuuren_extra_tile(hand)
    return extra is not None and extra == hand.win_tile.code


def _has_suukantsu(hand: Hand, ctx: RoundContext) -> bool:
    return len(hand.kans()) == 4


def _has_riichi(hand: Hand, ctx: RoundContext) -> bool:
    return ctx.riichi == Riichi.RIICHI


def _has_double_riichi(hand: Hand, ctx: RoundContext) -> bool:
    return ctx.riichi == Riichi.DOUBLE_RIICHI


def _has_menzen_tsumo(hand: Hand, ctx: RoundContext) -> bool:
    return ctx.tsumo and not hand.is_open


def _has_haitei(hand: Hand, ctx: RoundContext) -> bool:
    return ctx.haitei and ctx.tsumo


def _has_houtei(hand: Hand, ctx: RoundContext) -> bool:
    return ctx.haitei and not ctx.tsumo


def _has_tanyao(hand: Hand, ctx: RoundContext) -> bool:
    return not any(g.is_terminal_or_honor for g in hand.groups)


def has_pinfu(hand: Hand) -> bool:
    """Concealed, four sequences, a pair worth no fu and a two-sided wait."""
    if hand.is_open or len(hand.sequences()) != 4:
        return False
    if any(hand.is_value_tile(p) for p in hand.pairs()):
        return False
    return hand.winning_group.kind == GroupKind.SEQUENCE and not is_single_wait(hand)


def _has_pinfu(hand: Hand, ctx: RoundContext) -> bool:
    return has_pinfu(hand)


def _sequence_counts(hand: Hand) -> Counter:
    return Counter(g.code for g in hand.sequences())


def _has_ryanpeikou(hand: Hand, ctx: RoundContext) -> bool:
    counts = _sequence_counts(hand)
    return not hand.is_open and len(hand.sequences()) == 4 and all(c % 2 == 0 for c in counts.values())


def _has_iipeikou(hand: Hand, ctx: RoundContext) -> bool:
    if hand.is_open or _has_ryanpeikou(hand, ctx):
        return False
    return any(c >= 2 for c in _sequence_counts(hand).values())


def _has_sanshoku_doujun(hand: Hand, ctx: RoundContext) -> bool:
    starts = [_sequence_starts(hand, suit) for suit in NUMBERED_SUITS]
    return bool(starts[0] & starts[1] & starts[2])


def _has_ittsuu(hand: Hand, ctx: RoundContext) -> bool:
    return any({1, 4, 7} <= _sequence_starts(hand, suit) for suit in NUMBERED_SUITS)


def _has_chanta(hand: Hand, ctx: RoundContext) -> bool:
    return (
        bool(hand.sequences())
        and all(g.is_terminal_or_honor for g in hand.groups)
        and _has_honor(hand)
    )


def _has_junchan(hand: Hand, ctx: RoundContext) -> bool:
    return bool(hand.sequences()) and all(g.is_terminal and not g.is_honor for g in hand.groups)


def _has_toitoi(hand: Hand, ctx: RoundContext) -> bool:
    return len(hand.melds()) == 4


def _has_sanankou(hand: Hand, ctx: RoundContext) -> bool:
    concealed = len(_concealed_melds(hand))
    winning = hand.winning_group
    if not ctx.tsumo and winning.kind == GroupKind.TRIPLET and not winning.is_open:
        concealed -= 1
    return concealed == 3


def _has_sanshoku_doukou(hand: Hand, ctx: RoundContext) -> bool:
    numbers = [_meld_numbers(hand, suit) for suit in NUMBERED_SUITS]
    return bool(numbers[0] & numbers[1] & numbers[2])


def _has_sankantsu(hand: Hand, ctx: RoundContext) -> bool:
    return len(hand.kans()) == 3


def _has_shousangen(hand: Hand, ctx: RoundContext) -> bool:
    # Only a four-sets-and-a-pair hand has a single pair to inspect.
    pairs = hand.pairs()
    if len(pairs) != 1:
        return False
    return _count_suit_melds(hand, Suit.DRAGON) == 2 and pairs[0].suit == Suit.DRAGON


def _has_honroutou(hand: Hand, ctx: RoundContext) -> bool:
    if hand.sequences() or not all(g.is_terminal_or_honor for g in hand.groups):
        return False
    return _has_honor(hand) and any(g.is_terminal for g in hand.groups)


def _has_chiitoitsu(hand: Hand, ctx: RoundContext) -> bool:
    return hand.is_seven_pairs


def _has_honitsu(hand: Hand, ctx: RoundContext) -> bool:
    return len(_numbered_suits(hand)) == 1 and _has_honor(hand)


def _has_chinitsu(hand: Hand, ctx: RoundContext) -> bool:
    return len(_numbered_suits(hand)) == 1 and not _has_honor(hand)


def count_yakuhai(hand: Hand) -> int:
    """One unit per satisfied condition; a double wind triplet counts twice."""
    count = 0
    for meld in hand.melds():
        if meld.suit == Suit.DRAGON:
            count += 1
        elif meld.suit == Suit.WIND:
            count += meld.value == hand.prev_tile.value
            count += meld.value == hand.seat_tile.value
    return count


YAKUMAN_CHECKS: tuple[tuple[Check, Yaku], ...] = (
    (_has_tenhou, Yaku.TENHOU),
    (_has_chiihou, Yaku.CHIIHOU),
    (_has_kokushi, Yaku.KOKUSHI_MUSOU),
    (_has_kokushi_13_sided, Yaku.KOKUSHI_MUSOU_13_SIDED),
    (_has_suuankou, Yaku.SUUANKOU),
    (_has_suuankou_tanki, Yaku.SUUANKOU_TANKI),
    (_has_daisangen, Yaku.DAISANGEN),
    (_has_shousuushii, Yaku.SHOUSUUSHII),
    (_has_daisuushii, Yaku.DAISUUSHII),
    (_has_tsuuiisou, Yaku.TSUUIISOU),
    (_has_daichiishin, Yaku.DAICHIISHIN),
    (_has_ryuuiisou, Yaku.RYUUIISOU),
    (_has_chinroutou, Yaku.CHINROUTOU),
    (_has_chuuren, Yaku.CHUUREN_POUTOU),
    (_has_chuuren_9_sided, Yaku.CHUUREN_POUTOU_9_SIDED),
    (_has_suukantsu, Yaku.SUUKANTSU),
)

YAKU_CHECKS: tuple[tuple[Check, Yaku], ...] = (
    (_has_riichi, Yaku.RIICHI),
    (_has_double_riichi, Yaku.DOUBLE_RIICHI),
    (lambda hand, ctx: ctx.ippatsu, Yaku.IPPATSU),
    (_has_menzen_tsumo, Yaku.MENZEN_TSUMO),
    (_has_haitei, Yaku.HAITEI),
    (_has_houtei, Yaku.HOUTEI),
    (lambda hand, ctx: ctx.rinshan, Yaku.RINSHAN_KAIHOU),
    (lambda hand, ctx: ctx.chankan, Yaku.CHANKAN),
    (_has_tanyao, Yaku.TANYAO),
    (_has_pinfu, Yaku.PINFU),
    (_has_iipeikou, Yaku.IIPEIKOU),
    (_has_ryanpeikou, Yaku.RYANPEIKOU),
    (_has_sanshoku_doujun, Yaku.SANSHOKU_DOUJUN),
    (_has_ittsuu, Yaku.ITTSUU),
    (_has_chanta, Yaku.CHANTAIYAO),
    (_has_junchan, Yaku.JUNCHAN_TAIYAO),
    (_has_toitoi, Yaku.TOITOI),
    (_has_sanankou, Yaku.SANANKOU),
    (_has_sanshoku_doukou, Yaku.SANSHOKU_DOUKOU),
    (_has_sankantsu, Yaku.SANKANTSU),
    (_has_shousangen, Yaku.SHOUSANGEN),
    (_has_honroutou, Yaku.HONROUTOU),
    (_has_chiitoitsu, Yaku.CHIITOITSU),
    (_has_honitsu, Yaku.HONITSU),
    (_has_chinitsu, Yaku.CHINITSU),
)


def yakuman_hits(hand: Hand, ctx: RoundContext) -> list[Yaku]:
    return [yaku for check, yaku in YAKUMAN_CHECKS if check(hand, ctx)]


def detect(hand: Hand, ctx: RoundContext) -> tuple[int, list[Yaku]]:
    """Yaku han (dora excluded) and the matching yaku.

    Any yakuman replaces every ordinary yaku; each yakuman is worth one unit.
    """
    yakuman = yakuman_hits(hand, ctx)
    if yakuman:
        return len(yakuman), yakuman

    yaku = [yaku for check, yaku in YAKU_CHECKS if check(hand, ctx)]
    yaku.extend([Yaku.YAKUHAI] * count_yakuhai(hand))
    return sum(y.han(hand.is_open) for y in yaku), yaku
