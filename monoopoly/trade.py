"""Selling a field to another player or back to the bank."""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import bank

if TYPE_CHECKING:
    from .buyable import BuyableField
    from .console import Console
    from .player import Player


def sell_to_player(receiver: Player, field: BuyableField, console: Console) -> int:
    """Offer ``field`` to ``receiver``; return the price paid if accepted."""
    if field.owner is None:
        raise ValueError("Nobody owns this field")
    price = field.sell_price_to_player()
    console.write(f"\n\t{receiver.colored_username()} do you accept this offer(y|n): ")
    if not console.ask_yes_or_no():
        raise RuntimeError("Deal is cancelled")
    bank.take_from(receiver, price, False)
    bank.give_to(field.owner, price)
    field.sell_to(receiver)
    console.clear()
    return price


def sell_to_bank(field: BuyableField) -> int:
    """Sell ``field`` to the bank; return the price paid to its owner."""
    if field.owner is None:
        raise ValueError("Nobody owns this field")
    price = field.sell_price_to_bank()
    bank.give_to(field.owner, price)
    field.sell()
    return price