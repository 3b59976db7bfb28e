from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from hanfu.errors import InvalidGroupError, InvalidShapeError, InvalidSuitError
from hanfu.tiles import EAST, TERMINAL_HONOR_CODES, GroupKind, Suit, TileGroup, parse_group, parse_tile


def _parse_wind(notation: str) -> TileGroup:
    tile = parse_tile(notation)
    if tile.suit != Suit.WIND:
        raise InvalidSuitError(f"Expected a wind tile: {notation!r}")
    return tile


def _is_orphans_shape(groups: Sequence[TileGroup]) -> bool:
    kinds = Counter(g.kind for g in groups)
    if kinds[GroupKind.NONE] != 12 or kinds[GroupKind.PAIR] != 1 or len(groups) != 13:
        return False
    if any(g.is_open for g in groups):
        return False
    return {g.code for g in groups} == TERMINAL_HONOR_CODES


def _is_standard_shape(groups: Sequence[TileGroup]) -> bool:
    kinds = Counter(g.kind for g in groups)
    if kinds[GroupKind.NONE]:
        return False
    sets = kinds[GroupKind.SEQUENCE] + kinds[GroupKind.TRIPLET] + kinds[GroupKind.KAN]
    if sets == 0 and kinds[GroupKind.PAIR] == 7:
        return len({g.code for g in groups}) == 7
    return sets == 4 and kinds[GroupKind.PAIR] == 1


class Hand(BaseModel):
    """A complete, already partitioned winning hand.

    ``groups`` keeps the order it was given in; the last group is the one the
    winning tile completed.
    """

    groups: tuple[TileGroup, ...]
    win_tile: TileGroup
    seat_tile: TileGroup
    prev_tile: TileGroup
    is_open: bool

    model_config = ConfigDict(frozen=True)

    @classmethod
    def build(cls, tiles: Sequence[str], win: str, seat: str = "Ew", prev: str = "Ew") -> Hand:
        """Parse and validate a hand.

        ``seat`` is the seat wind and ``prev`` the prevalent (round) wind.
        Loose single tiles are only accepted as part of a thirteen-orphans hand.
        """
        groups: list[TileGroup] = []
        group_error: InvalidGroupError | None = None
        for notation in tiles:
            try:
                groups.append(parse_group(notation))
            except InvalidGroupError as exc:
                try:
                    groups.append(parse_tile(notation))
                except InvalidGroupError:
                    raise exc from None
                group_error = group_error or exc

        win_tile = parse_tile(win)
        seat_tile = _parse_wind(seat)
        prev_tile = _parse_wind(prev)

        if group_error is not None and not _is_orphans_shape(groups):
            raise group_error
        if group_error is None and not _is_standard_shape(groups):
            raise InvalidShapeError(
                "Hand must be four sets and a pair, or seven distinct pairs: " + " ".join(str(g) for g in groups)
            )
        if not groups[-1].contains(win_tile):
            raise InvalidShapeError(f"Winning tile {win_tile.code} is not part of the last group {groups[-1]}")

        return cls(
            groups=tuple(groups),
            win_tile=win_tile,
            seat_tile=seat_tile,
            prev_tile=prev_tile,
            is_open=any(g.is_open for g in groups),
        )

    def _of_kind(self, kind: GroupKind) -> tuple[TileGroup, ...]:
        return tuple(g for g in self.groups if g.kind == kind)

    def sequences(self) -> tuple[TileGroup, ...]:
        return self._of_kind(GroupKind.SEQUENCE)

    def triplets(self) -> tuple[TileGroup, ...]:
        return self._of_kind(GroupKind.TRIPLET)

    def kans(self) -> tuple[TileGroup, ...]:
        return self._of_kind(GroupKind.KAN)

    def pairs(self) -> tuple[TileGroup, ...]:
        return self._of_kind(GroupKind.PAIR)

    def singles(self) -> tuple[TileGroup, ...]:
        return self._of_kind(GroupKind.NONE)

    def melds(self) -> tuple[TileGroup, ...]:
        """Triplets and kans."""
        return tuple(g for g in self.groups if g.is_meld)

    @property
    def winning_group(self) -> TileGroup:
        return self.groups[-1]

    @property
    def is_dealer(self) -> bool:
        return self.seat_tile.value == EAST

    @property
    def is_seven_pairs(self) -> bool:
        return len(self.pairs()) == 7

    @property
    def is_thirteen_orphans(self) -> bool:
        return bool(self.singles())

    def tile_codes(self) -> list[str]:
        """Every tile in the hand, kans counted four times."""
        return [code for g in self.groups for code in g.tile_codes]

    def is_value_tile(self, tile: TileGroup) -> bool:
        """Dragons, the seat wind and the round wind."""
        if tile.suit == Suit.DRAGON:
            return True
        return tile.suit == Suit.WIND and tile.value in {self.seat_tile.value, self.prev_tile.value}
