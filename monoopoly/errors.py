"""Exceptions raised during a game."""

from __future__ import annotations

from typing import Any


class InsufficientFundsError(ValueError):
    """A player's balance does not cover a payment."""


class CantAffordError(Exception):
    """A mandatory payment failed; the player has to trade to raise money."""

    def __init__(self, message: str, needed_amount: int) -> None:
        super().__init__(message)
        self.message = message
        self.needed_amount = needed_amount


class EndGameError(Exception):
    """Only one player is left: the game is over."""

    def __init__(self, winner: Any) -> None:
        self.winner = winner
        super().__init__(f"Congratulations {winner.username}. You won!\n")


class GiveUpError(Exception):
    """The current player gave up."""

    def __init__(self) -> None:
        super().__init__("You lost the game")