"""The square board: fields laid out along four sides with fixed corners."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Iterable, Iterator

from .fields import CardField, Field, FreeParking, GoToJail, Jail, Start

if TYPE_CHECKING:
    from .cards import CardDeck
    from .player import Player

MIN_BOARD_SIZE = 3
SEPARATOR = "\n----------\n\n"


class Board:
    """A board with ``size`` fields per side, corners shared between sides."""

    def __init__(self, size: int) -> None:
        if size < MIN_BOARD_SIZE:
            raise ValueError("Size is below the minimum allowed size")
        self.size = size
        self.position = 0
        self._fields: list[Field] = []

    def total_size(self) -> int:
        return 4 * (self.size - 1)

    def missing_fields(self) -> int:
        return self.total_size() - len(self._fields)

    def is_full(self) -> bool:
        return len(self._fields) == self.total_size()

    def can_add_corners(self) -> bool:
        return len(self._fields) == self.total_size() - 4

    def set_up_corners(self) -> None:
        side = self.size - 1
        self._fields.insert(0, Start())
        self._fields.insert(side, Jail())
        self._fields.insert(2 * side, FreeParking())
        self._fields.insert(3 * side, GoToJail(side))

    def move(self, positions: int) -> Field:
        self.position = (self.position + positions) % self.total_size()
        return self[self.position]

    def add_field(self, field: Field) -> None:
        """Add a field; the corners are placed once all other fields are in."""
        if len(self._fields) >= self.total_size():
            raise RuntimeError("Board has all fields, cannot add a new one")
        if any(existing is field for existing in self._fields):
            raise RuntimeError("This field is already on the board")
        self._fields.append(field)
        if self.can_add_corners():
            self.set_up_corners()

    def add_card_fields(self, count: int, deck: CardDeck) -> None:
        """Add up to ``count`` card fields, stopping when the board is full."""
        while count > 0 and self.missing_fields() > 4:
            self.add_field(CardField(deck))
            count -= 1

    def __getitem__(self, index: int) -> Field:
        if not 0 <= index < len(self._fields):
            raise IndexError("Invalid index")
        return self._fields[index]

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[Field]:
        return iter(self._fields)

    def render(self, players: Iterable[Player] = ()) -> str:
        """One line per field, with the players standing on it."""
        players = list(players)
        lines = []
        for index, field in enumerate(self._fields):
            marks = "".join(
                f"\t{player.colored_username()}"
                for player in players
                if player.position == index
            )
            lines.append(f"{field.describe()}{marks}\n")
        return "".join(lines) + SEPARATOR

    def _is_corner(self, index: int) -> bool:
        return index % (self.size - 1) == 0

    def switch_fields(self, first: int, second: int) -> None:
        total = self.total_size()
        if first >= total or second >= total:
            raise ValueError("Indexes exceed board size")
        if self._is_corner(first) or self._is_corner(second):
            raise ValueError("Cannot switch corner fields")
        self._fields[first], self._fields[second] = (
            self._fields[second],
            self._fields[first],
        )

    def randomise(self, rng: random.Random | None = None) -> None:
        """Shuffle every non-corner field, leaving the corners in place."""
        rng = rng if rng is not None else random.Random()
        end = self.total_size()
        for index in range(1, end):
            if self._is_corner(index):
                continue
            target = rng.randrange(end)
            while self._is_corner(target):
                target = rng.randrange(end)
            self.switch_fields(index, target)