"""Buildings (cottages and castles) that raise a property's rent."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from . import bank
from .utils import CASTLE_RENT_INCREASE, COTTAGE_RENT_INCREASE

if TYPE_CHECKING:
    from .player import Player

MIN_COTTAGES_FOR_CASTLE = 3


@dataclass
class Mortgage:
    """A building type with a purchase price and a rent increase factor."""

    price: int
    rent_increase: float = 0.0


class Cottage(Mortgage):
    def __init__(self, price: int) -> None:
        super().__init__(price, COTTAGE_RENT_INCREASE)


class Castle(Mortgage):
    def __init__(self, price: int) -> None:
        super().__init__(price, CASTLE_RENT_INCREASE)


class MortgageManager:
    """The buildings on one property."""

    def __init__(self, castle: Mortgage, cottage: Mortgage) -> None:
        self.castle = castle
        self.cottage = cottage
        self.mortgages: list[Mortgage] = []

    def buy_mortgage(self, mortgage: Mortgage) -> None:
        self.mortgages.append(mortgage)

    def build_mortgage(self, mortgage_type: str, owner: Player) -> None:
        """Charge the owner and add a 'cottage' or 'castle'."""
        if mortgage_type == "cottage":
            mortgage = self.cottage
        elif mortgage_type == "castle":
            mortgage = self.castle
        else:
            raise ValueError("Invalid mortgage type")
        bank.take_from(owner, mortgage.price, False)
        self.mortgages.append(mortgage)

    def can_buy_castle(self) -> bool:
        return len(self.mortgages) >= MIN_COTTAGES_FOR_CASTLE

    def total_rent(self, original_rent: int) -> int:
        return original_rent + sum(
            int(original_rent * (1 + mortgage.rent_increase))
            for mortgage in self.mortgages
        )