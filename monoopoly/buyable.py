"""Fields that players can buy: properties, stations and facilities."""

from __future__ import annotations

import weakref
from abc import abstractmethod
from typing import TYPE_CHECKING, ClassVar

from . import bank
from .bank import PendingPayment
from .errors import CantAffordError, InsufficientFundsError
from .fields import Field
from .mortgage import Mortgage, MortgageManager
from .utils import colorize, taxing_message, two_to_power

if TYPE_CHECKING:
    from .console import Console
    from .player import Player

FACILITY_RENT = 20
MAX_MULTIPLIER = 18


def _charge_rent(payer: Player, amount: int, receiver: Player) -> None:
    """Take rent; on failure attach the deferred payment to the error."""
    try:
        bank.take_from(payer, amount, important=True)
    except CantAffordError as err:
        err.pending = PendingPayment(
            payer=payer, receivers=[receiver], needed_amount=amount
        )
        raise


class BuyableField(Field):
    """A field with a price, a rent and possibly an owner."""

    _kind: ClassVar[str] = "property"

    def __init__(self, name: str, price: int, rent: int) -> None:
        self.name = name
        self.price = price
        self.rent = rent
        self.owner: Player | None = None

    @abstractmethod
    def total_rent(self) -> int:
        """Rent a visitor pays right now."""

    def sell_price_to_bank(self) -> int:
        return self.total_rent() // 3

    def sell_price_to_player(self) -> int:
        return 2 * self.total_rent() // 3

    def sell(self) -> None:
        self.owner = None

    def sell_to(self, new_owner: Player) -> None:
        self.owner = new_owner

    @abstractmethod
    def setup_mortgages(self, castle: Mortgage, cottage: Mortgage) -> None:
        """Attach the family's building types."""

    @abstractmethod
    def build_mortgage(self, mortgage_type: str) -> None:
        """Build a 'cottage' or 'castle' on the field."""

    @abstractmethod
    def can_buy_mortgages(self) -> bool:
        """Whether buildings may be put on the field."""

    def buy(self, player: Player) -> None:
        if not player.can_afford(self.price):
            raise InsufficientFundsError("You cannot afford to buy this property")
        bank.take_from(player, self.price, False)
        self.owner = player

    def _offer_purchase(self, player: Player, console: Console, prompt: str) -> None:
        console.write(f"\nYour balance: {player.balance}\n")
        console.write(prompt)
        if console.ask_yes_or_no():
            self.buy(player)
        console.clear()

    def action(self, player: Player, console: Console) -> bool:
        if self.is_free():
            self._offer_purchase(
                player, console, "\nDo you want to buy this property?(y|n): "
            )
            return True
        if not self.belongs_to(player):
            rent = self.total_rent()
            console.write(f"\nRent: {rent}\n")
            _charge_rent(player, rent, self.owner)
            console.write(taxing_message())
            bank.give_to(self.owner, rent)
        else:
            console.write("\nYou are the owner\n")
        console.pause()
        console.clear()
        return True

    def belongs_to(self, player: Player) -> bool:
        return self.owner is not None and self.owner is player

    def is_free(self) -> bool:
        return self.owner is None

    def landing_message(self, console: Console) -> None:
        console.write(f"You have landed on {self.name}\n")
        if self.owner is None:
            console.write(f"No one owns this {self._kind}. You can buy it!\n")
            console.write(f"It costs {self.price}\n")
        else:
            console.write(f"This {self._kind} belongs to ")
            console.write(self.owner.colored_username())

    def describe(self) -> str:
        if self.owner is None:
            return self.name
        return colorize(self.name, self.owner.color)

    def up_for_sale_message(self) -> str:
        return (
            f"{self.name}\n"
            f"\tPrice to bank: {self.sell_price_to_bank()}"
            f"\tPrice to player: {self.sell_price_to_player()}\n"
        )


class SpecialField(BuyableField):
    """A buyable field without buildings whose rent grows with each visit."""

    _initial_multiplier: ClassVar[int] = 0

    def __init__(self, name: str, price: int, rent: int) -> None:
        super().__init__(name, price, rent)
        self.multiplier = self._initial_multiplier

    def setup_mortgages(self, castle: Mortgage, cottage: Mortgage) -> None:
        """Special fields take no buildings; the building types are ignored."""

    def build_mortgage(self, mortgage_type: str) -> None:
        """Special fields take no buildings; the request is ignored."""

    def can_buy_mortgages(self) -> bool:
        return False

    def _bump_multiplier(self) -> None:
        if self.owner is not None and self.multiplier < MAX_MULTIPLIER:
            self.multiplier += 1


class Property(BuyableField):
    """A street that belongs to a colour family and can hold buildings."""

    _manager: MortgageManager | None = None

    def total_rent(self) -> int:
        if self._manager is None:
            return self.rent
        return self._manager.total_rent(self.rent)

    def setup_mortgages(self, castle: Mortgage, cottage: Mortgage) -> None:
        self._manager = MortgageManager(castle, cottage)

    def build_mortgage(self, mortgage_type: str) -> None:
        if self._manager is None:
            raise RuntimeError("No buildings can be built on this property")
        if self.owner is None:
            raise RuntimeError("Nobody owns this property")
        self._manager.build_mortgage(mortgage_type, self.owner)

    def can_buy_mortgages(self) -> bool:
        return True


class Station(SpecialField):
    """Rent doubles for every further station the same owner holds."""

    _kind: ClassVar[str] = "station"
    _initial_multiplier: ClassVar[int] = 1
    _owned_stations: ClassVar[weakref.WeakKeyDictionary] = weakref.WeakKeyDictionary()

    def buy(self, player: Player) -> None:
        super().buy(player)
        self._owned_stations[player] = self._owned_stations.get(player, 0) + 1

    def total_rent(self) -> int:
        if self.owner is None:
            return 0
        count = self._owned_stations.get(self.owner, 0)
        if count == 0:
            return 0
        return self.rent * two_to_power(count - 1) * self.multiplier

    def landing_message(self, console: Console) -> None:
        super().landing_message(console)
        self._bump_multiplier()

    def _release(self) -> None:
        if self.owner is not None and self._owned_stations.get(self.owner, 0) > 0:
            self._owned_stations[self.owner] -= 1

    def sell(self) -> None:
        self._release()
        self.owner = None

    def sell_to(self, new_owner: Player) -> None:
        self._release()
        self._owned_stations[new_owner] = self._owned_stations.get(new_owner, 0) + 1
        self.owner = new_owner


class Facility(SpecialField):
    """Visitors lose five percent of their balance per landing count."""

    _kind: ClassVar[str] = "facility"
    _initial_multiplier: ClassVar[int] = 1

    def __init__(self, name: str, price: int) -> None:
        super().__init__(name, price, FACILITY_RENT)

    def total_rent(self) -> int:
        return self.rent

    def action(self, player: Player, console: Console) -> bool:
        if self.is_free():
            self._offer_purchase(
                player, console, "Do you want to buy this property?(y|n): "
            )
            return True
        if not self.belongs_to(player):
            console.write(
                f"\nYou have to give {self.multiplier * 5}% of your balance\n"
            )
            player.remove_percent(self.multiplier * 0.05)
            console.write(taxing_message())
        else:
            console.write("\nYou are the owner\n")
        console.pause()
        console.clear()
        return True

    def landing_message(self, console: Console) -> None:
        super().landing_message(console)
        self._bump_multiplier()