import pytest

from hanfu.errors import NoFuError, NoHanError, NoYakuError
from hanfu.payment import LimitHand, Payment, calculate, calculate_yakuman, limit_hand, point_label


def as_tuple(payment: Payment) -> tuple[int, int, int, int, int]:
    return (
        payment.dealer_ron,
        payment.dealer_tsumo,
        payment.non_dealer_ron,
        payment.non_dealer_tsumo_to_non_dealer,
        payment.non_dealer_tsumo_to_dealer,
    )


def test_calculate_1_han_30_fu():
    assert as_tuple(calculate(1, 30)) == (1500, 500, 1000, 300, 500)


def test_calculate_2_han_80_fu():
    assert as_tuple(calculate(2, 80)) == (7700, 2600, 5200, 1300, 2600)


def test_calculate_4_han_30_fu_with_3_honba():
    assert as_tuple(calculate(4, 30).with_honba(3)) == (12500, 4200, 8600, 2300, 4200)


def test_calculate_13_han_70_fu_with_3_honba():
    assert as_tuple(calculate(13, 70).with_honba(3)) == (48900, 16300, 32900, 8300, 16300)


@pytest.mark.parametrize(
    ("han", "expected"),
    [
        (5, (12000, 4000, 8000, 2000, 4000)),
        (6, (18000, 6000, 12000, 3000, 6000)),
        (7, (18000, 6000, 12000, 3000, 6000)),
        (8, (24000, 8000, 16000, 4000, 8000)),
        (10, (24000, 8000, 16000, 4000, 8000)),
        (11, (36000, 12000, 24000, 6000, 12000)),
        (12, (36000, 12000, 24000, 6000, 12000)),
        (13, (48000, 16000, 32000, 8000, 16000)),
        (20, (48000, 16000, 32000, 8000, 16000)),
    ],
)
def test_limit_hands_ignore_fu(han, expected):
    for fu in (20, 30, 70, 110):
        assert as_tuple(calculate(han, fu)) == expected


def test_mangan_thresholds_for_3_and_4_han():
    assert limit_hand(4, 30) is None
    assert limit_hand(4, 40) == LimitHand.MANGAN
    assert limit_hand(3, 60) is None
    assert limit_hand(3, 70) == LimitHand.MANGAN
    assert as_tuple(calculate(3, 70).with_honba(3)) == (12900, 4300, 8900, 2300, 4300)
    assert as_tuple(calculate(4, 60).with_honba(3)) == (12900, 4300, 8900, 2300, 4300)


def test_manual_fu_beyond_any_real_hand_is_capped_at_mangan():
    assert limit_hand(2, 200) == LimitHand.MANGAN
    assert calculate(2, 200) == calculate(5, 30)


def test_no_han_and_no_fu():
    with pytest.raises(NoHanError):
        calculate(0, 30)
    with pytest.raises(NoFuError):
        calculate(3, 0)
    with pytest.raises(NoHanError):
        calculate(0, 0)


def test_payment_is_monotonic_below_the_limit():
    fus = [20, 25, 30, 40, 50, 60, 70, 80, 90, 100, 110]
    for han in range(1, 5):
        for low, high in zip(fus, fus[1:]):
            lower, upper = calculate(han, low), calculate(han, high)
            assert all(a <= b for a, b in zip(as_tuple(lower), as_tuple(upper)))
    for fu in fus:
        for han in range(1, 13):
            lower, upper = calculate(han, fu), calculate(han + 1, fu)
            assert all(a <= b for a, b in zip(as_tuple(lower), as_tuple(upper)))


def test_honba_surcharge_is_flat():
    for han, fu in [(1, 30), (3, 40), (6, 30)]:
        base = calculate(han, fu)
        with_honba = base.with_honba(2)
        assert with_honba.dealer_ron - base.dealer_ron == 600
        assert with_honba.non_dealer_ron - base.non_dealer_ron == 600
        assert with_honba.dealer_tsumo - base.dealer_tsumo == 200
        assert with_honba.non_dealer_tsumo_to_dealer - base.non_dealer_tsumo_to_dealer == 200
        assert with_honba.non_dealer_tsumo_to_non_dealer - base.non_dealer_tsumo_to_non_dealer == 200


def test_yakuman_units_stack():
    assert as_tuple(calculate_yakuman(1)) == (48000, 16000, 32000, 8000, 16000)
    assert as_tuple(calculate_yakuman(2)) == (96000, 32000, 64000, 16000, 32000)
    with pytest.raises(NoYakuError):
        calculate_yakuman(0)


def test_point_labels():
    assert point_label(1, 30) == "通常"
    assert point_label(5, 30) == "満貫"
    assert point_label(7, 30) == "跳満"
    assert point_label(9, 30) == "倍満"
    assert point_label(12, 30) == "三倍満"
    assert point_label(13, 30) == "数え役満"
