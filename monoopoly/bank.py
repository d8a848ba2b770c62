"""Money transfers between the bank and players, and deferred payments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

from .errors import CantAffordError, InsufficientFundsError

if TYPE_CHECKING:
    from .player import Player

INITIAL_BALANCE = 1500
START_BONUS = 200
PASS_START_MESSAGE = "You have gone over Start\nYou receive $200\n"


def give_initial_balance(players: Iterable[Player]) -> None:
    for player in players:
        player.add_to_balance(INITIAL_BALANCE)


def take_from(player: Player, amount: int, important: bool = False) -> None:
    """Take money from a player.

    An important payment that cannot be covered raises CantAffordError
    carrying the missing amount; otherwise InsufficientFundsError propagates.
    """
    if not important:
        player.remove_from_balance(amount)
        return
    try:
        player.remove_from_balance(amount)
    except InsufficientFundsError as err:
        raise CantAffordError("You have to trade", amount - player.balance) from err


def take_everything_from(player: Player, amount: int) -> int:
    """Take up to ``amount`` from a player and return what was taken."""
    taken = min(player.balance, amount)
    player.remove_from_balance(taken)
    return taken


def give_to(player: Player, amount: int) -> None:
    player.add_to_balance(amount)


def land_on_start(player: Player) -> None:
    give_to(player, START_BONUS)


@dataclass
class PendingPayment:
    """A payment put on hold until the payer has raised enough money."""

    payer: Player | None = None
    receivers: list[Player] = field(default_factory=list)
    needed_amount: int = 0

    def pay(self) -> None:
        """Settle the payment, sharing it equally among the receivers."""
        if self.payer is None:
            raise RuntimeError("No payer set for the pending payment")
        if self.receivers:
            share = self.needed_amount // len(self.receivers)
            for receiver in self.receivers:
                receiver.add_to_balance(share)
        self.payer.remove_from_balance(self.needed_amount)
        self.clear()

    def clear(self) -> None:
        self.receivers.clear()
        self.needed_amount = 0

    def add_receiver(self, player: Player) -> None:
        self.receivers.append(player)