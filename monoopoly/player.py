"""Players: balance, position on the board and jail state."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import BinaryIO

from . import bank
from .errors import InsufficientFundsError
from .utils import colorize

_LENGTH = struct.Struct("<Q")
_RECORD = struct.Struct("<IQ?Qi")


class Color(IntEnum):
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise EOFError("Truncated player record")
    return data


@dataclass(eq=False)
class Player:
    """A player; two players are equal only if they are the same object."""

    username: str
    color: Color = Color.RED
    balance: int = field(default=0, init=False)
    position: int = field(default=0, init=False)
    in_jail: bool = field(default=False, init=False)
    remaining_to_ransom: int = field(default=0, init=False)

    def move_to(self, position: int) -> None:
        self.position = position

    def move_with(self, positions: int, board_size: int) -> bool:
        """Move along the board; return True if Start was passed (and paid)."""
        new_position = self.position + positions
        if new_position < 0:
            self.position = new_position % board_size
            return False
        if new_position >= board_size:
            self.position = new_position % board_size
            if self.position != 0:
                bank.land_on_start(self)
                return True
            return False
        self.position = new_position
        return False

    def add_to_balance(self, amount: int) -> None:
        self.balance += amount

    def remove_from_balance(self, amount: int) -> None:
        if not self.can_afford(amount):
            raise InsufficientFundsError(
                f"\n{self.username}, you don't have enough money "
                "to continue with this action!"
            )
        self.balance -= amount

    def remove_percent(self, percent: float) -> None:
        self.balance -= int(percent * self.balance)

    def can_afford(self, price: int) -> bool:
        return self.balance >= price

    def go_to_jail(self, jail_position: int) -> None:
        self.remaining_to_ransom = 2
        self.in_jail = True
        self.move_to(jail_position)

    def get_out_of_jail(self) -> None:
        self.in_jail = False
        self.remaining_to_ransom = 0

    def lower_ransom(self) -> None:
        if self.remaining_to_ransom > 0:
            self.remaining_to_ransom -= 1

    def colored_username(self) -> str:
        return colorize(self.username, self.color)

    def save(self, stream: BinaryIO) -> None:
        """Write the player as a length-prefixed name and fixed-size fields."""
        name = self.username.encode("utf-8")
        stream.write(_LENGTH.pack(len(name)))
        stream.write(name)
        stream.write(
            _RECORD.pack(
                self.balance,
                self.position,
                self.in_jail,
                self.remaining_to_ransom,
                int(self.color),
            )
        )

    @classmethod
    def load(cls, stream: BinaryIO) -> Player:
        (length,) = _LENGTH.unpack(_read_exact(stream, _LENGTH.size))
        name = _read_exact(stream, length).decode("utf-8")
        balance, position, in_jail, ransom, color = _RECORD.unpack(
            _read_exact(stream, _RECORD.size)
        )
        player = cls(name, Color(color))
        player.balance = balance
        player.position = position
        player.in_jail = in_jail
        player.remaining_to_ransom = ransom
        return player