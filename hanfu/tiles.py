from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from hanfu.errors import InvalidGroupError, InvalidSuitError

OPEN_MARKER = "o"


class Suit(str, Enum):
    MANZU = "m"
    PINZU = "p"
    SOUZU = "s"
    WIND = "w"
    DRAGON = "d"

    @property
    def is_honor(self) -> bool:
        return self in (Suit.WIND, Suit.DRAGON)


class GroupKind(str, Enum):
    SEQUENCE = "sequence"
    TRIPLET = "triplet"
    KAN = "kan"
    PAIR = "pair"
    NONE = "none"


NUMBERED_SUITS = (Suit.MANZU, Suit.PINZU, Suit.SOUZU)
SUIT_CODES: dict[str, Suit] = {suit.value: suit for suit in Suit}
SUIT_VALUES: dict[Suit, str] = {
    Suit.MANZU: "123456789",
    Suit.PINZU: "123456789",
    Suit.SOUZU: "123456789",
    Suit.WIND: "ESWN",
    Suit.DRAGON: "rgw",
}
VALID_SEQUENCES = {"123", "234", "345", "456", "567", "678", "789"}

# Every distinct tile, e.g. "1m" ... "9s", "Ew" ... "Nw", "rd", "gd", "wd".
TILE_CODES: tuple[str, ...] = tuple(f"{value}{suit.value}" for suit in Suit for value in SUIT_VALUES[suit])
TERMINAL_HONOR_CODES = frozenset(
    code for code in TILE_CODES if code[0] in {"1", "9"} or SUIT_CODES[code[1]].is_honor
)
GREEN_CODES = frozenset({"2s", "3s", "4s", "6s", "8s", "gd"})
EAST = "E"


class TileGroup(BaseModel):
    value: str
    suit: Suit
    is_open: bool = False
    kind: GroupKind = GroupKind.NONE
    is_terminal: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def code(self) -> str:
        """Notation of the (first) tile, without the open marker."""
        return f"{self.value}{self.suit.value}"

    @property
    def is_honor(self) -> bool:
        return self.suit.is_honor

    @property
    def is_terminal_or_honor(self) -> bool:
        return self.is_terminal or self.is_honor

    @property
    def is_meld(self) -> bool:
        return self.kind in (GroupKind.TRIPLET, GroupKind.KAN)

    @property
    def number(self) -> int:
        return int(self.value)

    @property
    def tile_codes(self) -> tuple[str, ...]:
        if self.kind == GroupKind.SEQUENCE:
            return tuple(f"{self.number + i}{self.suit.value}" for i in range(3))
        size = {GroupKind.TRIPLET: 3, GroupKind.KAN: 4, GroupKind.PAIR: 2}.get(self.kind, 1)
        return (self.code,) * size

    def contains(self, tile: TileGroup) -> bool:
        return tile.code in self.tile_codes

    def __str__(self) -> str:
        values = "".join(code[0] for code in self.tile_codes)
        return f"{values}{self.suit.value}{OPEN_MARKER if self.is_open else ''}"


def _suit_from_code(code: str) -> Suit:
    try:
        return SUIT_CODES[code]
    except KeyError:
        raise InvalidSuitError(f"Invalid suit code: {code!r}") from None


def _group_kind(values: str, suit: Suit, notation: str) -> GroupKind:
    if any(v not in SUIT_VALUES[suit] for v in values):
        raise InvalidGroupError(f"Invalid tile group: {notation!r}")

    identical = len(set(values)) == 1
    if len(values) == 2 and identical:
        return GroupKind.PAIR
    if len(values) == 3:
        if identical:
            return GroupKind.TRIPLET
        if values in VALID_SEQUENCES:
            return GroupKind.SEQUENCE
    if len(values) == 4 and identical:
        return GroupKind.KAN
    raise InvalidGroupError(f"Invalid tile group: {notation!r}")


def parse_group(notation: str) -> TileGroup:
    """Parse one group such as ``123m``, ``EEEw``, ``rrrrd`` or ``555po``."""
    is_open = notation.endswith(OPEN_MARKER)
    body = notation[:-1] if is_open else notation
    if len(body) < 2:
        raise InvalidGroupError(f"Invalid tile group: {notation!r}")

    suit = _suit_from_code(body[-1])
    values = body[:-1]
    kind = _group_kind(values, suit, notation)
    if is_open and kind == GroupKind.PAIR:
        raise InvalidGroupError(f"A pair cannot be called: {notation!r}")
    terminal_values = {"1", "7"} if kind == GroupKind.SEQUENCE else {"1", "9"}
    return TileGroup(
        value=values[0],
        suit=suit,
        is_open=is_open,
        kind=kind,
        is_terminal=values[0] in terminal_values,
    )


def parse_tile(notation: str) -> TileGroup:
    """Parse a single reference tile such as the winning tile or a wind (``3m``, ``Ew``)."""
    if len(notation) != 2:
        raise InvalidGroupError(f"Invalid tile: {notation!r}")
    suit = _suit_from_code(notation[1])
    value = notation[0]
    if value not in SUIT_VALUES[suit]:
        raise InvalidGroupError(f"Invalid tile: {notation!r}")
    return TileGroup(value=value, suit=suit, is_terminal=value in {"1", "9"})
