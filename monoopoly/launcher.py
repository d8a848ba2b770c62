"""Interactive front end: create a game, fill it and play it to the end."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Sequence

from .commands import (
    create_element_command,
    create_game_command,
    create_game_creation_command,
    create_trading_command,
)
from .console import Console
from .errors import CantAffordError, EndGameError, GiveUpError

if TYPE_CHECKING:
    from .buyable import BuyableField
    from .game import Game
    from .player import Player

# Errors a command may raise that are reported to the user before carrying on.
_RECOVERABLE = (ValueError, RuntimeError, LookupError)

_GAME_TYPE_OPTIONS = (
    "Choose game type: \n"
    "\t1. Start default game -> default\n"
    "\t2. Enter board manually -> manual\n"
)

_DEFAULT_ELEMENT_OPTIONS = (
    "Choose option: \n"
    "Add player -> add_player <username>\n"
    "\nWhen ready, type start\n"
)

_MANUAL_ELEMENT_OPTIONS = (
    "Choose option: \n"
    "\t1. Add player -> add_player <username>\n"
    "\t2. Add property family -> add_property_family <family_name>\n"
    "\t3. Add property -> add_property <property_name>\n"
    "\t4. Add station -> add_station <station_name>\n"
    "\t5. Add facility -> add_facility <facility_name>\n"
    "\t6. Add card field -> add_card_field\n"
    "\t7. Add movement card -> add_movement_card <positions_to_move>\n"
    "\t8. Add payment card -> add_payment_card <amount_to_give>\n"
    "\t9. Add group payment card -> add_group_payment_card <amount_to_give>\n"
    "\nWhen ready, type start\n"
)

_TRADE_OPTIONS = (
    "\nChoose option: \n"
    "\ttrade_with_bank\n"
    "\ttrade_with_player <username>\n"
    "\t give_up\n"
)


class Launcher:
    """Drives a whole game from the console: setup, play and forced trades."""

    def __init__(
        self, console: Console | None = None, rng: random.Random | None = None
    ) -> None:
        self.console = console if console is not None else Console()
        self.rng = rng
        self.game: Game | None = None

    def run(self) -> Player:
        """Play one game and return its winner."""
        game, is_default = self._start_game()
        self.game = game
        self.console.clear()
        self._create_elements(game, is_default)
        return self._play_game(game)

    def _pause_and_clear(self) -> None:
        self.console.pause()
        self.console.clear()

    def _start_game(self) -> tuple[Game, bool]:
        console = self.console
        while True:
            console.write(_GAME_TYPE_OPTIONS)
            console.write("Enter command: ")
            command = create_game_creation_command(console.read_token())
            if command is None:
                console.write("Invalid command\n\n")
                self._pause_and_clear()
                continue
            try:
                return command.create(console, self.rng), command.is_default
            except _RECOVERABLE as err:
                console.write(f"{err}\n\n")
                self._pause_and_clear()

    def _create_elements(self, game: Game, is_default: bool) -> None:
        console = self.console
        while True:
            console.write(
                _DEFAULT_ELEMENT_OPTIONS if is_default else _MANUAL_ELEMENT_OPTIONS
            )
            console.write("Enter command: ")
            name = console.read_token()

            if name == "start":
                console.clear()
                try:
                    game.start()
                    return
                except _RECOVERABLE as err:
                    console.clear()
                    console.write(f"{err}\n")
                    continue

            command = create_element_command(name)
            if command is None:
                console.clear()
                console.write("Invalid command\n")
                continue
            try:
                command.execute(game, console)
            except _RECOVERABLE as err:
                console.clear()
                console.write(f"{err}\n")

    def _play_game(self, game: Game) -> Player:
        console = self.console
        while True:
            game.print_turn_message()
            console.write("Enter command: ")
            command = create_game_command(console.read_token())
            if command is None:
                console.clear()
                console.write("Invalid command\n")
                self._pause_and_clear()
                continue

            console.clear()
            try:
                command.execute(game, console)
            except EndGameError as err:
                return self._announce_winner(err)
            except CantAffordError as err:
                console.write(f"{err.message}\n")
                try:
                    self._obligatory_trade(game, err)
                except EndGameError as end:
                    return self._announce_winner(end)
            except _RECOVERABLE as err:
                console.write(f"{err}\n")
                game.go_to_next_player()
                self._pause_and_clear()

    def _announce_winner(self, err: EndGameError) -> Player:
        self.console.clear()
        self.console.write(str(err))
        return err.winner

    def _fields_to_trade_message(
        self, owned: Sequence[BuyableField], needed_amount: int
    ) -> str:
        lines = [f"You have to get ${needed_amount}\nYou own:\n"]
        lines.extend(
            f"{number}. {field.up_for_sale_message()}"
            for number, field in enumerate(owned, start=1)
        )
        return "".join(lines)

    def _obligatory_trade(self, game: Game, err: CantAffordError) -> None:
        """Make the current player sell fields until the debt is covered."""
        console = self.console
        pending = getattr(err, "pending", None)
        needed = err.needed_amount
        owned = game.owned_fields()

        while needed > 0:
            if not owned:
                console.write("You have nothing to sell - you have gone bankrupt!\n")
                game.player_exit_game()
                self._pause_and_clear()
                return

            console.write(self._fields_to_trade_message(owned, needed))
            console.write(
                "Choose which property you want to sell (number).\n"
                "Type 0 to give up: "
            )
            try:
                choice = console.read_int()
            except ValueError:
                console.clear()
                console.write("Type valid number!\n")
                continue

            if choice == 0:
                game.player_exit_game()
                console.write("You have lost the game\n")
                self._pause_and_clear()
                return

            try:
                if choice < 0:
                    raise IndexError("Invalid index")
                field = owned[choice - 1]
                needed -= self._trade(game, field, needed)
                owned.remove(field)
            except GiveUpError as give_up:
                console.write(f"{give_up}\n")
                game.player_exit_game()
                self._pause_and_clear()
                return
            except _RECOVERABLE:
                console.clear()
                console.write("Type valid number!\n")

        if pending is not None:
            pending.pay()
        console.write("\nYou have paid your dept\n")
        game.go_to_next_player()
        self._pause_and_clear()

    def _trade(self, game: Game, field: BuyableField, needed_amount: int) -> int:
        """Sell one field to the bank or a player; return the money received."""
        console = self.console
        console.clear()
        while True:
            console.write(f"Needed amount: {needed_amount}\n")
            console.write(field.up_for_sale_message())
            console.write("\nPlayers that can afford to buy this property:\n")
            try:
                buyers = game.players_that_can_afford(field.sell_price_to_player())
            except RuntimeError as err:
                console.write(f"{err}\n")
            else:
                for buyer in buyers:
                    console.write(f"\t{buyer.username}\tBalance: {buyer.balance}\n")

            console.write(_TRADE_OPTIONS)
            console.write("Enter command: ")
            name = console.read_token()
            if name == "give_up":
                raise GiveUpError()

            command = create_trading_command(name, field)
            if command is None:
                console.clear()
                console.write("Invalid command\n")
                self._pause_and_clear()
                continue

            try:
                return command.execute(game, console)
            except _RECOVERABLE as err:
                console.clear()
                console.write(f"{err}\n")
                self._pause_and_clear()


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive game on the terminal."""
    try:
        Launcher().run()
    except (EOFError, KeyboardInterrupt):
        pass
    return 0