"""Commands typed by the user while setting up and playing a game."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Sequence

from .game import Game
from .utils import STANDARD_BOARD_SIZE

if TYPE_CHECKING:
    from .buyable import BuyableField
    from .console import Console
    from .families import FieldFamily


class Command(ABC):
    """An action performed on a game."""

    @abstractmethod
    def execute(self, game: Game, console: Console) -> int | None:
        """Carry out the command, reading any arguments from the console."""


# ----- setting up the game ----------------------------------------------


class AddPlayerCommand(Command):
    def execute(self, game: Game, console: Console) -> None:
        username = console.read_line()
        game.add_player(username)
        console.clear()
        console.write("Player added successfully\n")


class AddPropertyFamilyCommand(Command):
    def execute(self, game: Game, console: Console) -> None:
        name = console.read_line()
        console.write("Enter cottage price: ")
        cottage_price = console.read_int()
        console.write("Enter castle price: ")
        castle_price = console.read_int()
        game.add_property_family(name, cottage_price, castle_price)
        console.clear()
        console.write("Property family added successfully\n")


class AddPropertyCommand(Command):
    def execute(self, game: Game, console: Console) -> None:
        name = console.read_line()
        console.write("Enter family name: ")
        family_name = console.read_line()
        console.write("Enter price: ")
        price = console.read_int()
        console.write("Enter rent: ")
        rent = console.read_int()
        game.add_property(family_name, name, price, rent)
        console.clear()
        console.write("Property added successfully\n")


class AddStationCommand(Command):
    def execute(self, game: Game, console: Console) -> None:
        name = console.read_line()
        console.write("Enter price: ")
        price = console.read_int()
        console.write("Enter rent: ")
        rent = console.read_int()
        game.add_station(name, price, rent)
        console.clear()
        console.write("Station added successfully\n")


class AddFacilityCommand(Command):
    def execute(self, game: Game, console: Console) -> None:
        name = console.read_line()
        console.write("Enter price: ")
        price = console.read_int()
        game.add_facility(name, price)
        console.clear()
        console.write("Facility added successfully\n")


class AddCardFieldCommand(Command):
    def execute(self, game: Game, console: Console) -> None:
        game.add_card_field()
        console.clear()
        console.write("Card Field added successfully\n")


class AddMoveCardCommand(Command):
    def execute(self, game: Game, console: Console) -> None:
        positions = console.read_int()
        game.add_move_card(positions)
        console.clear()
        console.write("Movement Card added successfully\n")


class AddPaymentCardCommand(Command):
    def execute(self, game: Game, console: Console) -> None:
        value = console.read_int()
        game.add_payment_card(value)
        console.clear()
        console.write("Payment Card added successfully\n")


class AddGroupPaymentCardCommand(Command):
    def execute(self, game: Game, console: Console) -> None:
        value = console.read_int()
        game.add_group_payment_card(value)
        console.clear()
        console.write("Group Payment Card added successfully\n")


# ----- playing ------------------------------------------------------------


class ThrowDiceCommand(Command):
    def execute(self, game: Game, console: Console) -> None:
        game.play_turn()


class BuyMortgageCommand(Command):
    def execute(self, game: Game, console: Console) -> None:
        game.check_can_build()
        build_menu(game, console)


class PrintOwnershipMapCommand(Command):
    def execute(self, game: Game, console: Console) -> None:
        game.ownership_map()


class BuildCommand(Command):
    """Build a cottage or castle on a property of one of the given families."""

    def __init__(self, valid_families: Sequence[FieldFamily]) -> None:
        self.valid_families = valid_families

    def execute(self, game: Game, console: Console) -> None:
        mortgage_type = console.read_token()
        property_name = console.read_line()
        try:
            game.build(property_name, mortgage_type, self.valid_families)
        except RuntimeError as err:
            console.write(f"{err}\n")


class TradeWithBankCommand(Command):
    """Sell a field to the bank; execute returns the money received."""

    def __init__(self, field: BuyableField) -> None:
        self.field = field

    def execute(self, game: Game, console: Console) -> int:
        return game.trade_with_bank(self.field)


class TradeWithPlayerCommand(Command):
    """Sell a field to a named player; execute returns the money received."""

    def __init__(self, field: BuyableField) -> None:
        self.field = field

    def execute(self, game: Game, console: Console) -> int:
        receiver_name = console.read_line()
        return game.trade_between_players(receiver_name, self.field)


# ----- creating a game ----------------------------------------------------


class GameCreationCommand(ABC):
    """A way of creating a new game."""

    is_default: ClassVar[bool] = False

    @abstractmethod
    def create(self, console: Console, rng: random.Random | None = None) -> Game:
        """Ask for the game's parameters and return the new game."""


class DefaultGameCommand(GameCreationCommand):
    """The classic board with its standard fields and cards."""

    is_default: ClassVar[bool] = True

    def create(self, console: Console, rng: random.Random | None = None) -> Game:
        console.write("Enter player count: ")
        player_count = console.read_int()
        game = Game(player_count, STANDARD_BOARD_SIZE, console, rng)
        game.load_default_game()
        return game


class ManualGameCommand(GameCreationCommand):
    """An empty board of a chosen size, to be filled by the user."""

    def create(self, console: Console, rng: random.Random | None = None) -> Game:
        console.write("Enter player count: ")
        player_count = console.read_int()
        console.write("Enter board size: ")
        board_size = console.read_int()
        return Game(player_count, board_size, console, rng)


class LoadGameCommand(GameCreationCommand):
    """Loading a stored game; no game gets created by it."""

    def create(self, console: Console, rng: random.Random | None = None) -> Game:
        raise RuntimeError("Game isn't initialised yet")


# ----- factories ----------------------------------------------------------

_CREATION_COMMANDS: dict[str, type[GameCreationCommand]] = {
    "default": DefaultGameCommand,
    "manual": ManualGameCommand,
    "load": LoadGameCommand,
}

_ELEMENT_COMMANDS: dict[str, type[Command]] = {
    "add_player": AddPlayerCommand,
    "add_property_family": AddPropertyFamilyCommand,
    "add_property": AddPropertyCommand,
    "add_station": AddStationCommand,
    "add_facility": AddFacilityCommand,
    "add_card_field": AddCardFieldCommand,
    "add_movement_card": AddMoveCardCommand,
    "add_payment_card": AddPaymentCardCommand,
    "add_group_payment_card": AddGroupPaymentCardCommand,
}

_GAME_COMMANDS: dict[str, type[Command]] = {
    "throw_dice": ThrowDiceCommand,
    "buy_mortgage": BuyMortgageCommand,
    "ownership_map": PrintOwnershipMapCommand,
}

_TRADING_COMMANDS = {
    "trade_with_bank": TradeWithBankCommand,
    "trade_with_player": TradeWithPlayerCommand,
}


def create_game_creation_command(name: str) -> GameCreationCommand | None:
    command_type = _CREATION_COMMANDS.get(name)
    return command_type() if command_type is not None else None


def create_element_command(name: str) -> Command | None:
    command_type = _ELEMENT_COMMANDS.get(name)
    return command_type() if command_type is not None else None


def create_game_command(name: str) -> Command | None:
    command_type = _GAME_COMMANDS.get(name)
    return command_type() if command_type is not None else None


def create_trading_command(name: str, field: BuyableField) -> Command | None:
    command_type = _TRADING_COMMANDS.get(name)
    return command_type(field) if command_type is not None else None


def create_build_command(
    name: str, valid_families: Sequence[FieldFamily]
) -> Command | None:
    if name == "build":
        return BuildCommand(valid_families)
    return None


def build_menu(game: Game, console: Console) -> None:
    """Let the current player build on a family they fully own, or cancel."""
    valid_families = game.valid_families()
    console.clear()
    while True:
        console.write("You can build on:\n")
        for family in valid_families:
            console.write(family.describe() + "\n")
        console.write("\nChoose command: \n")
        console.write("\t1. build <mortgage_type> <property_name>\n")
        console.write("\t2. cancel\n")
        console.write("Enter command: ")
        name = console.read_token()

        if name == "cancel":
            break

        command = create_build_command(name, valid_families)
        if command is None:
            console.clear()
            console.write("Invalid command\n")
            console.pause()
            console.clear()
            continue

        try:
            command.execute(game, console)
            break
        except (ValueError, RuntimeError, IndexError) as err:
            console.clear()
            console.write(f"{err}\n")
            console.pause()
            console.clear()