"""Groups of buyable fields, such as colour sets, stations and facilities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from .mortgage import Castle, Cottage

if TYPE_CHECKING:
    from .buyable import BuyableField
    from .player import Player


class FieldFamily:
    """A named group of buyable fields."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._fields: list[BuyableField] = []

    def add_field(self, field: BuyableField) -> None:
        self._fields.append(field)

    def __contains__(self, field: object) -> bool:
        return any(existing is field for existing in self._fields)

    def __iter__(self) -> Iterator[BuyableField]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def owned_count(self, player: Player) -> int:
        """How many fields of the family belong to ``player``."""
        return sum(1 for field in self._fields if field.belongs_to(player))

    def owns_all(self, player: Player) -> bool:
        return all(field.belongs_to(player) for field in self._fields)

    def can_buy_mortgages(self) -> bool:
        return all(field.can_buy_mortgages() for field in self._fields)

    def _describe_fields(self) -> str:
        return "".join(f"\t{field.describe()}\n" for field in self._fields)

    def describe(self) -> str:
        """The family name followed by one indented line per field."""
        return f"{self.name}\n{self._describe_fields()}"

    def remove_owner(self, player: Player) -> None:
        """Return every field owned by ``player`` to the bank."""
        for field in self._fields:
            if field.belongs_to(player):
                field.sell()

    def owned_fields(self, owner: Player) -> list[BuyableField]:
        return [field for field in self._fields if field.belongs_to(owner)]


class PropertyFamily(FieldFamily):
    """A colour set whose properties share cottage and castle prices."""

    def __init__(self, name: str, cottage_price: int, castle_price: int) -> None:
        super().__init__(name)
        self.cottage = Cottage(cottage_price)
        self.castle = Castle(castle_price)

    def add_field(self, field: BuyableField) -> None:
        field.setup_mortgages(self.castle, self.cottage)
        super().add_field(field)

    def describe(self) -> str:
        return (
            f"{self.name}\n"
            f"Cottage cost: {self.cottage.price}\tCastle cost: {self.castle.price}\n"
            f"{self._describe_fields()}"
        )