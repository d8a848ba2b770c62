"""Board fields that cannot be bought: corners and card fields."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from . import bank

if TYPE_CHECKING:
    from .cards import CardDeck
    from .console import Console
    from .player import Player

MAX_CORNERS = 4


class Field(ABC):
    """A square on the board."""

    @abstractmethod
    def landing_message(self, console: Console) -> None:
        """Tell the player where they have landed."""

    @abstractmethod
    def describe(self) -> str:
        """Short text shown on the board."""

    @abstractmethod
    def action(self, player: Player, console: Console) -> bool:
        """Act on the player; False means the player moved and must act again."""


class CornerField(Field):
    """One of the board's corner fields; only a limited number may exist."""

    _count: ClassVar[int] = 0

    def __init__(self) -> None:
        if CornerField._count > MAX_CORNERS:
            raise RuntimeError("Cannot create more than 4 Corner Fields")
        CornerField._count += 1

    @classmethod
    def corner_count(cls) -> int:
        return CornerField._count

    @classmethod
    def reset_count(cls) -> None:
        CornerField._count = 0


class Start(CornerField):
    def landing_message(self, console: Console) -> None:
        console.write("You have landed on Start\nYou receive $200\n")
        console.pause()
        console.clear()

    def describe(self) -> str:
        return "Start"

    def action(self, player: Player, console: Console) -> bool:
        bank.land_on_start(player)
        return True


class Jail(CornerField):
    def landing_message(self, console: Console) -> None:
        console.write("You have landed on Jail\n")
        console.pause()
        console.clear()

    def describe(self) -> str:
        return "Jail"

    def action(self, player: Player, console: Console) -> bool:
        return True


class GoToJail(CornerField):
    def __init__(self, jail_position: int) -> None:
        super().__init__()
        self.jail_position = jail_position

    def landing_message(self, console: Console) -> None:
        console.write("You have landed on Go to Jail. Sorry!\n")
        console.pause()
        console.clear()

    def describe(self) -> str:
        return "Go to Jail"

    def action(self, player: Player, console: Console) -> bool:
        player.go_to_jail(self.jail_position)
        return True


class FreeParking(CornerField):
    def landing_message(self, console: Console) -> None:
        console.write("You have landed on Free Parking. Enjoy!\n")
        console.pause()
        console.clear()

    def describe(self) -> str:
        return "Free Parking"

    def action(self, player: Player, console: Console) -> bool:
        return True


class CardField(Field):
    """Draws the top card of a shared deck and puts it back at the bottom."""

    def __init__(self, deck: CardDeck) -> None:
        self.deck = deck

    def landing_message(self, console: Console) -> None:
        console.write("You have landed on a card field\n")

    def describe(self) -> str:
        return "Card Field"

    def action(self, player: Player, console: Console) -> bool:
        card = self.deck.draw_card()
        try:
            card.print_info(console)
            return card.apply_effect(player, console)
        finally:
            self.deck.add_card(card)