import pytest

from hanfu.hand import Hand
from hanfu.round_context import Riichi, RoundContext
from hanfu.yaku import Yaku, count_yakuhai, detect, has_pinfu

KOKUSHI_SINGLES = ["1m", "9m", "1p", "9p", "1s", "9s", "Ew", "Sw", "Ww", "Nw", "rd", "gd"]
PINFU_TILES = ["22m", "234m", "567p", "345s", "678s"]


def detect_for(tiles: list[str], win: str, seat: str = "Sw", prev: str = "Sw", **ctx) -> tuple[int, list[Yaku]]:
    hand = Hand.build(tiles, win, seat, prev)
    return detect(hand, RoundContext(**ctx))


def test_tanyao_pinfu_ron():
    assert detect_for(PINFU_TILES, "6s") == (2, [Yaku.TANYAO, Yaku.PINFU])


def test_tanyao_pinfu_tsumo():
    assert detect_for(PINFU_TILES, "6s", tsumo=True) == (3, [Yaku.MENZEN_TSUMO, Yaku.TANYAO, Yaku.PINFU])


def test_riichi_and_situational_yaku():
    han, yaku = detect_for(PINFU_TILES, "6s", riichi=Riichi.RIICHI, ippatsu=True, tsumo=True, haitei=True)
    assert yaku == [Yaku.RIICHI, Yaku.IPPATSU, Yaku.MENZEN_TSUMO, Yaku.HAITEI, Yaku.TANYAO, Yaku.PINFU]
    assert han == 6

    han, yaku = detect_for(PINFU_TILES, "6s", riichi=Riichi.DOUBLE_RIICHI, haitei=True)
    assert yaku == [Yaku.DOUBLE_RIICHI, Yaku.HOUTEI, Yaku.TANYAO, Yaku.PINFU]
    assert han == 5


def test_pinfu_holds_with_a_non_value_wind_pair():
    assert has_pinfu(Hand.build(["NNw", "234m", "567p", "345s", "678s"], "6s", "Sw", "Ew"))


@pytest.mark.parametrize(
    ("tiles", "win", "seat"),
    [
        (["22m", "234mo", "567p", "345s", "678s"], "6s", "Sw"),
        (["22m", "234m", "555p", "345s", "678s"], "6s", "Sw"),
        (["SSw", "234m", "567p", "345s", "678s"], "6s", "Sw"),
        (["rrd", "234m", "567p", "345s", "678s"], "6s", "Sw"),
        (["22m", "234m", "567p", "345s", "789s"], "7s", "Sw"),
        (["22m", "234m", "567p", "345s", "678s"], "7s", "Sw"),
        (["234m", "567p", "345s", "678s", "22m"], "2m", "Sw"),
    ],
    ids=["open", "triplet", "seat_wind_pair", "dragon_pair", "edge_wait", "closed_wait", "pair_wait"],
)
def test_pinfu_rejected(tiles, win, seat):
    assert not has_pinfu(Hand.build(tiles, win, seat, "Ew"))


def test_double_wind_triplet_counts_twice():
    hand = Hand.build(["EEEw", "123m", "456p", "789s", "22p"], "2p", "Ew", "Ew")
    assert count_yakuhai(hand) == 2
    assert detect(hand, RoundContext()) == (2, [Yaku.YAKUHAI, Yaku.YAKUHAI])


def test_dragon_and_seat_wind_yakuhai():
    assert detect_for(["rrrd", "SSSwo", "123m", "456p", "99s"], "9s", "Sw", "Ew") == (2, [Yaku.YAKUHAI, Yaku.YAKUHAI])


def test_no_yaku():
    assert detect_for(["123mo", "456p", "789s", "EEEw", "22p"], "2p") == (0, [])


def test_toitoi_sanankou_on_ron():
    assert detect_for(["111m", "999p", "EEEw", "55s", "777s"], "7s") == (4, [Yaku.TOITOI, Yaku.SANANKOU])


def test_iipeikou_and_ryanpeikou():
    assert detect_for(["234m", "234m", "567p", "789s", "55s"], "5s") == (1, [Yaku.IIPEIKOU])
    assert detect_for(["234m", "234m", "567p", "567p", "55s"], "5s") == (4, [Yaku.TANYAO, Yaku.RYANPEIKOU])


def test_sanshoku_doujun_with_chanta():
    assert detect_for(["EEw", "123m", "123p", "789s", "123s"], "3s") == (
        4,
        [Yaku.SANSHOKU_DOUJUN, Yaku.CHANTAIYAO],
    )


def test_junchan():
    assert detect_for(["123m", "789p", "123s", "999s", "11p"], "1p") == (3, [Yaku.JUNCHAN_TAIYAO])


def test_sanshoku_doukou():
    assert detect_for(["222m", "222p", "222s", "345m", "88s"], "8s") == (
        5,
        [Yaku.TANYAO, Yaku.SANANKOU, Yaku.SANSHOKU_DOUKOU],
    )


def test_sankantsu():
    assert detect_for(["1111mo", "2222po", "3333so", "456m", "77p"], "7p") == (2, [Yaku.SANKANTSU])


def test_shousangen_with_honitsu():
    assert detect_for(["rrrd", "gggd", "123m", "456m", "wwd"], "wd") == (
        7,
        [Yaku.SHOUSANGEN, Yaku.HONITSU, Yaku.YAKUHAI, Yaku.YAKUHAI],
    )


def test_open_hand_han_reduction():
    assert detect_for(["123mo", "456m", "789m", "EEEw", "55m"], "5m") == (3, [Yaku.ITTSUU, Yaku.HONITSU])


def test_chinitsu():
    assert detect_for(["123p", "345p", "567p", "789p", "99p"], "9p") == (6, [Yaku.CHINITSU])


def test_chiitoitsu():
    assert detect_for(["11m", "33m", "55p", "77p", "99s", "EEw", "rrd"], "rd") == (2, [Yaku.CHIITOITSU])


@pytest.mark.parametrize(
    ("tiles", "win", "ctx", "expected"),
    [
        (["111m", "999p", "EEEw", "55s", "777s"], "7s", {"tsumo": True}, [Yaku.SUUANKOU]),
        (["111m", "999p", "EEEw", "777s", "55s"], "5s", {}, [Yaku.SUUANKOU_TANKI]),
        (["rrrd", "gggd", "wwwd", "123m", "55p"], "5p", {}, [Yaku.DAISANGEN]),
        (["EEEw", "SSSw", "WWWw", "NNw", "123m"], "1m", {}, [Yaku.SHOUSUUSHII]),
        (["EEEwo", "SSSw", "WWWw", "NNNw", "11m"], "1m", {}, [Yaku.DAISUUSHII]),
        (["EEw", "SSw", "WWw", "NNw", "rrd", "ggd", "wwd"], "wd", {}, [Yaku.DAICHIISHIN]),
        (["234s", "234s", "666s", "888s", "ggd"], "gd", {}, [Yaku.RYUUIISOU]),
        (["111m", "999m", "111po", "999s", "11s"], "1s", {}, [Yaku.CHINROUTOU]),
        (["111m", "234m", "55m", "678m", "999m"], "9m", {}, [Yaku.CHUUREN_POUTOU]),
        (["111m", "234m", "678m", "999m", "55m"], "5m", {}, [Yaku.CHUUREN_POUTOU_9_SIDED]),
        (["1111mo", "2222po", "3333so", "4444mo", "55p"], "5p", {}, [Yaku.SUUKANTSU]),
        (["EEEw", "SSSwo", "rrrd", "gggd", "WWw"], "Ww", {}, [Yaku.TSUUIISOU]),
        (KOKUSHI_SINGLES[:11] + ["ggd", "wd"], "wd", {}, [Yaku.KOKUSHI_MUSOU]),
        (KOKUSHI_SINGLES + ["wwd"], "wd", {}, [Yaku.KOKUSHI_MUSOU_13_SIDED]),
    ],
)
def test_yakuman(tiles, win, ctx, expected):
    assert detect_for(tiles, win, **ctx) == (1, expected)


def test_yakuman_stack():
    assert detect_for(["rrrd", "gggd", "wwwdo", "EEEw", "SSw"], "Sw") == (2, [Yaku.DAISANGEN, Yaku.TSUUIISOU])


def test_yakuman_replaces_ordinary_yaku():
    han, yaku = detect_for(["111m", "999p", "EEEw", "55s", "777s"], "7s", tsumo=True, riichi=Riichi.RIICHI)
    assert han == 1
    assert all(y.is_yakuman for y in yaku)


def test_tenhou_and_chiihou():
    assert detect_for(PINFU_TILES, "6s", "Ew", "Ew", tsumo=True, tenhou=True) == (1, [Yaku.TENHOU])
    assert detect_for(PINFU_TILES, "6s", "Sw", "Ew", tsumo=True, tenhou=True) == (1, [Yaku.CHIIHOU])


def test_yaku_han_by_openness():
    assert Yaku.PINFU.label == "平和"
    assert Yaku.PINFU.han(is_open=False) == 1
    assert Yaku.PINFU.han(is_open=True) == 0
    assert Yaku.CHINITSU.han(is_open=True) == 5
    assert Yaku.DAISANGEN.is_yakuman
    assert not Yaku.HONROUTOU.is_yakuman


@pytest.mark.parametrize(
    ("tiles", "win", "expected"),
    [
        (["111m", "999po", "EEEw", "NNNw", "11s"], "1s", (6, [Yaku.TOITOI, Yaku.SANANKOU, Yaku.HONROUTOU])),
        (["11m", "99m", "11p", "99p", "EEw", "NNw", "rrd"], "rd", (4, [Yaku.HONROUTOU, Yaku.CHIITOITSU])),
    ],
    ids=["four_sets", "seven_pairs"],
)
def test_honroutou(tiles, win, expected):
    assert detect_for(tiles, win) == expected


def test_chankan_on_ron():
    assert detect_for(PINFU_TILES, "6s", chankan=True) == (3, [Yaku.CHANKAN, Yaku.TANYAO, Yaku.PINFU])


def test_seven_pairs_with_dragon_pairs_is_not_shousangen():
    han, yaku = detect_for(["11m", "33m", "55p", "rrd", "ggd", "wwd", "EEw"], "Ew")
    assert Yaku.SHOUSANGEN not in yaku
    assert (han, yaku) == (2, [Yaku.CHIITOITSU])
