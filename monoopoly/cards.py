"""Cards drawn from the deck when a player lands on a card field."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

from . import bank
from .bank import PendingPayment
from .errors import CantAffordError

if TYPE_CHECKING:
    from .console import Console
    from .player import Player


def _charge(player: Player, amount: int, receivers: Iterable[Player] = ()) -> None:
    """Take a mandatory payment; on failure attach the deferred payment to the error."""
    try:
        bank.take_from(player, amount, important=True)
    except CantAffordError as err:
        err.pending = PendingPayment(
            payer=player, receivers=list(receivers), needed_amount=amount
        )
        raise


class Card(ABC):
    """A card with an effect on the player who drew it."""

    @abstractmethod
    def print_info(self, console: Console) -> None:
        """Tell the player what the card does."""

    @abstractmethod
    def apply_effect(self, player: Player, console: Console) -> bool:
        """Apply the card; False means the player moved and must act on the new field."""


@dataclass
class CardDeck:
    """A first-in, first-out pile of cards."""

    cards: deque[Card] = field(default_factory=deque)

    def add_card(self, card: Card) -> None:
        self.cards.append(card)

    def draw_card(self) -> Card:
        if not self.cards:
            raise IndexError("Empty deck!")
        return self.cards.popleft()

    def __len__(self) -> int:
        return len(self.cards)


class PaymentCard(Card):
    """Pay the bank, or be paid by it."""

    def __init__(self, balance_change: int) -> None:
        self.balance_change = balance_change

    def print_info(self, console: Console) -> None:
        console.write("You drew a Payment Card\n")
        if self.balance_change < 0:
            console.write(f"You have to give {-self.balance_change}\n")
        else:
            console.write(f"You get {self.balance_change}\n")
        console.pause()
        console.clear()

    def apply_effect(self, player: Player, console: Console) -> bool:
        if self.balance_change < 0:
            _charge(player, -self.balance_change)
        else:
            bank.give_to(player, self.balance_change)
        return True


class MovePositionCard(Card):
    """Move the player forwards or backwards."""

    def __init__(self, positions: int, board_size: int) -> None:
        self.positions = positions
        self.board_size = board_size

    def print_info(self, console: Console) -> None:
        direction = "forwards" if self.positions > 0 else "backwards"
        console.write("You drew a Movement Card\n")
        console.write(f"Move with {abs(self.positions)} positions {direction}\n\n")

    def apply_effect(self, player: Player, console: Console) -> bool:
        if player.move_with(self.positions, self.board_size):
            console.write(bank.PASS_START_MESSAGE + "\n")
        return False


class GroupPaymentCard(Card):
    """Pay every other player, or collect from each of them."""

    def __init__(self, balance_change: int, players: list[Player]) -> None:
        self.balance_change = balance_change
        self.players = players

    def print_info(self, console: Console) -> None:
        console.write("You drew a Group Payment Card\n")
        if self.balance_change < 0:
            console.write(f"You have to give {-self.balance_change} to each player\n")
        else:
            console.write(f"You get {self.balance_change} from each player\n")
            console.write(
                "\n*Note: Players that don't have enough give you "
                "all their remaining balance*\n"
            )
        console.pause()
        console.clear()

    def apply_effect(self, player: Player, console: Console) -> bool:
        others = [other for other in self.players if other is not player]
        if self.balance_change < 0:
            _charge(player, -self.balance_change * len(others), others)
            for other in others:
                bank.give_to(other, -self.balance_change)
        else:
            for other in others:
                taken = bank.take_everything_from(other, self.balance_change)
                bank.give_to(player, taken)
        return True