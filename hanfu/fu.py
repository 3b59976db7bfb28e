from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from hanfu.hand import Hand
from hanfu.tiles import GroupKind


class Fu(Enum):
    BASE = ("副底", 20)
    BASE_CHIITOITSU = ("七対子", 25)
    CLOSED_RON = ("門前ロン", 10)
    TSUMO = ("ツモ", 2)
    SIMPLE_OPEN_TRIPLET = ("明刻", 2)
    SIMPLE_CLOSED_TRIPLET = ("暗刻", 4)
    NON_SIMPLE_OPEN_TRIPLET = ("么九牌明刻", 4)
    NON_SIMPLE_CLOSED_TRIPLET = ("么九牌暗刻", 8)
    SIMPLE_OPEN_KAN = ("明槓", 8)
    SIMPLE_CLOSED_KAN = ("暗槓", 16)
    NON_SIMPLE_OPEN_KAN = ("么九牌明槓", 16)
    NON_SIMPLE_CLOSED_KAN = ("么九牌暗槓", 32)
    VALUE_PAIR = ("雀頭", 2)
    SINGLE_WAIT = ("待ち", 2)
    OPEN_PINFU = ("喰い平和", 10)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def points(self) -> int:
        return self.value[1]


# (kind, terminal or honor, scored as open)
MELD_FU: dict[tuple[GroupKind, bool, bool], Fu] = {
    (GroupKind.TRIPLET, False, True): Fu.SIMPLE_OPEN_TRIPLET,
    (GroupKind.TRIPLET, False, False): Fu.SIMPLE_CLOSED_TRIPLET,
    (GroupKind.TRIPLET, True, True): Fu.NON_SIMPLE_OPEN_TRIPLET,
    (GroupKind.TRIPLET, True, False): Fu.NON_SIMPLE_CLOSED_TRIPLET,
    (GroupKind.KAN, False, True): Fu.SIMPLE_OPEN_KAN,
    (GroupKind.KAN, False, False): Fu.SIMPLE_CLOSED_KAN,
    (GroupKind.KAN, True, True): Fu.NON_SIMPLE_OPEN_KAN,
    (GroupKind.KAN, True, False): Fu.NON_SIMPLE_CLOSED_KAN,
}


def total_fu(reasons: Iterable[Fu]) -> int:
    return sum(fu.points for fu in reasons)


def round_up_fu(fu: int) -> int:
    return ((fu + 9) // 10) * 10


def is_single_wait(hand: Hand) -> bool:
    """Tanki, kanchan or penchan on the winning group."""
    group = hand.winning_group
    if group.kind == GroupKind.PAIR:
        return True
    if group.kind != GroupKind.SEQUENCE:
        return False
    win = hand.win_tile.number
    if win == group.number + 1:
        return True
    return (group.number == 1 and win == 3) or (group.number == 7 and win == 7)


def compute_fu(hand: Hand, is_self_draw: bool, pinfu: bool = False) -> tuple[int, list[Fu]]:
    if hand.is_seven_pairs:
        return Fu.BASE_CHIITOITSU.points, [Fu.BASE_CHIITOITSU]
    if pinfu:
        reasons = [Fu.BASE] if is_self_draw else [Fu.BASE, Fu.CLOSED_RON]
        return total_fu(reasons), reasons

    reasons = [Fu.BASE]
    if is_self_draw:
        reasons.append(Fu.TSUMO)
    elif not hand.is_open:
        reasons.append(Fu.CLOSED_RON)

    last = len(hand.groups) - 1
    for index, group in enumerate(hand.groups):
        if not group.is_meld:
            continue
        scored_open = group.is_open
        # A triplet finished on a discard counts as called.
        if index == last and group.kind == GroupKind.TRIPLET:
            scored_open = not is_self_draw
        reasons.append(MELD_FU[(group.kind, group.is_terminal_or_honor, scored_open)])

    for pair in hand.pairs():
        if hand.is_value_tile(pair):
            reasons.append(Fu.VALUE_PAIR)

    if is_single_wait(hand):
        reasons.append(Fu.SINGLE_WAIT)

    if hand.is_open and total_fu(reasons) == Fu.BASE.points:
        reasons.append(Fu.OPEN_PINFU)

    return round_up_fu(total_fu(reasons)), reasons
