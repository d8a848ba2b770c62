"""The game state: board, players, field families, the card deck and turns."""

from __future__ import annotations

import random
from typing import Iterable

from . import bank, trade
from .board import Board
from .buyable import BuyableField, Facility, Property, Station
from .cards import CardDeck, GroupPaymentCard, MovePositionCard, PaymentCard
from .console import Console
from .errors import EndGameError, InsufficientFundsError
from .families import FieldFamily, PropertyFamily
from .fields import CardField, CornerField, Field
from .player import Color, Player
from .utils import MAX_PLAYER_COUNT, MIN_PLAYER_COUNT, STANDARD_BOARD_SIZE

JAIL_RANSOM = 100
MAX_CONSECUTIVE_PAIRS = 3
STATIONS = "Stations"
FACILITIES = "Facilities"

_DEFAULT_FAMILIES = (
    ("Brown", 50, 50),
    ("Light Blue", 50, 50),
    ("Pink", 100, 100),
    ("Orange", 100, 100),
    ("Red", 150, 150),
    ("Yellow", 150, 150),
    ("Green", 200, 200),
    ("Dark Blue", 200, 200),
)


class Game:
    """One game of the board game and everything it consists of."""

    def __init__(
        self,
        player_count: int,
        board_size: int = STANDARD_BOARD_SIZE,
        console: Console | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if not MIN_PLAYER_COUNT <= player_count <= MAX_PLAYER_COUNT:
            raise ValueError("Invalid player count")
        # A new game lays out a fresh board with its own corners.
        CornerField.reset_count()
        self.board = Board(board_size)
        self.console = console if console is not None else Console()
        self.rng = rng if rng is not None else random.Random()
        self.players: list[Player] = []
        self.player_count = player_count
        self.current_index = 0
        self.families: list[FieldFamily] = []
        self.deck = CardDeck()
        self.jail_position = board_size - 1

    @property
    def current_player(self) -> Player:
        return self.players[self.current_index]

    def go_to_next_player(self) -> None:
        self.current_index = (self.current_index + 1) % self.player_count

    # ----- setting up -------------------------------------------------

    def load_default_game(self) -> None:
        """Lay out the classic London board and fill the deck."""
        for name, cottage, castle in _DEFAULT_FAMILIES:
            self.add_field_family(PropertyFamily(name, cottage, castle))

        self.add_property("Brown", "Old Kent Road", 60, 80)
        self.add_card_field()
        self.add_property("Brown", "Whitechapel Road", 60, 100)
        self.add_card_field()

        self.add_station("Kings Cross Station", 200, 25)

        self.add_property("Light Blue", "The Angel, Islington", 100, 100)
        self.add_card_field()
        self.add_property("Light Blue", "Euston Road", 100, 100)
        self.add_property("Light Blue", "Pentonville Road", 120, 120)

        self.add_property("Pink", "Pall Mall", 120, 120)
        self.add_facility("Electric Company", 150)
        self.add_property("Pink", "Whitehall", 120, 120)
        self.add_property("Pink", "Northumberland Avenue", 140, 140)

        self.add_station("Marylebone Station", 200, 25)

        self.add_property("Orange", "Bow Street", 180, 140)
        self.add_card_field()
        self.add_property("Orange", "Marlborough Street", 180, 140)
        self.add_property("Orange", "Vine Street", 200, 160)

        self.add_property("Red", "Strand", 220, 160)
        self.add_card_field()
        self.add_property("Red", "Fleet Street", 220, 160)
        self.add_property("Red", "Trafalgar Square", 240, 180)

        self.add_station("Fenchurch St. Station", 200, 25)

        self.add_property("Yellow", "Leicester Square", 260, 180)
        self.add_facility("Water Works", 150)
        self.add_property("Yellow", "Coventry Street", 260, 180)
        self.add_property("Yellow", "Piccadilly", 280, 200)

        self.add_property("Green", "Regent Street", 300, 200)
        self.add_card_field()
        self.add_property("Green", "Oxford Street", 300, 200)
        self.add_property("Green", "Bond Street", 320, 220)

        self.add_station("Liverpool Street Station", 200, 25)

        self.add_card_field()
        self.add_property("Dark Blue", "Park Lane", 350, 250)
        self.add_card_field()
        self.add_property("Dark Blue", "Mayfair", 400, 300)

        self.fill_deck()

    def can_start(self) -> bool:
        return (
            len(self.players) == self.player_count
            and self.board.is_full()
            and len(self.deck) > 0
        )

    def start(self) -> None:
        """Check the game is complete and hand out the starting money."""
        if not self.can_start():
            raise RuntimeError(
                f" You have {self.player_count - len(self.players)} missing players, "
                f"{self.board.missing_fields()} missing fields and "
                f"{int(len(self.deck) == 0)} missing cards"
            )
        bank.give_initial_balance(self.players)

    def fill_deck(self) -> None:
        self.add_move_card(3)
        self.add_payment_card(-200)
        self.add_move_card(-1)
        self.add_payment_card(-300)
        self.add_group_payment_card(100)
        self.add_move_card(2)
        self.add_payment_card(200)
        self.add_group_payment_card(-50)
        self.add_payment_card(300)
        self.add_move_card(-2)

    def render_board(self) -> str:
        return self.board.render(self.players)

    def randomise_board(self) -> None:
        self.board.randomise(self.rng)

    def switch_fields(self, first: int, second: int) -> None:
        self.board.switch_fields(first, second)

    def add_card_fields(self, count: int) -> None:
        self.board.add_card_fields(count, self.deck)

    def add_player(self, username: str) -> Player:
        if len(self.players) in (MAX_PLAYER_COUNT, self.player_count):
            raise RuntimeError("Max player count reached")
        if any(player.username == username for player in self.players):
            raise ValueError("There already is a player with this username")
        player = Player(username, list(Color)[len(self.players)])
        self.players.append(player)
        return player

    def add_field_family(self, family: FieldFamily) -> None:
        """Register a family and put its fields on the board."""
        if any(existing.name == family.name for existing in self.families):
            raise ValueError("There already is a field family with this name")
        for field in family:
            if any(field in existing for existing in self.families):
                raise ValueError(
                    "This Field Familty contains a field already on board"
                )
        for field in family:
            self.board.add_field(field)
        self.families.append(family)

    def add_property_family(
        self, name: str, cottage_price: int, castle_price: int
    ) -> None:
        self.add_field_family(PropertyFamily(name, cottage_price, castle_price))

    def add_field(self, field: Field) -> None:
        self.board.add_field(field)

    def _place_in_family(self, family: FieldFamily, field: BuyableField) -> None:
        self.add_field(field)
        family.add_field(field)

    def _family_named(self, name: str) -> FieldFamily:
        """The family with this name, created empty if it does not exist yet."""
        for family in self.families:
            if family.name == name:
                return family
        family = FieldFamily(name)
        self.add_field_family(family)
        return family

    def add_property(self, family_name: str, name: str, price: int, rent: int) -> None:
        family = self.find_field_family(family_name)
        self._place_in_family(family, Property(name, price, rent))

    def add_facility(self, name: str, price: int) -> None:
        self._place_in_family(self._family_named(FACILITIES), Facility(name, price))

    def add_station(self, name: str, price: int, rent: int) -> None:
        self._place_in_family(self._family_named(STATIONS), Station(name, price, rent))

    def add_card_field(self) -> None:
        self.add_field(CardField(self.deck))

    def add_move_card(self, positions: int) -> None:
        self.deck.add_card(MovePositionCard(positions, self.board.total_size()))

    def add_payment_card(self, value: int) -> None:
        self.deck.add_card(PaymentCard(value))

    def add_group_payment_card(self, value: int) -> None:
        self.deck.add_card(GroupPaymentCard(value, self.players))

    # ----- turns ------------------------------------------------------

    def print_turn_message(self) -> None:
        """Handle jailed players, then show the board and the turn menu."""
        while self.current_player.in_jail:
            if not self.get_player_out_of_jail():
                self.go_to_next_player()
            self.console.clear()

        player = self.current_player
        self.console.write(self.render_board())
        self.console.write(f"Player {player.colored_username()}'s turn\n")
        self.console.write(f"Balance: {player.balance}\n")
        self.console.write("Choose action: \n")
        self.console.write("\t1. throw_dice\n")
        self.console.write("\t2. buy_mortgage\n")
        self.console.write("\t3. ownership_map\n")

    def play_turn(self) -> None:
        """Throw the dice, move and act; pairs allow another throw."""
        player = self.current_player
        pair_count = 0
        while True:
            first, second = self.roll_dice()
            is_pair = first == second
            if is_pair:
                pair_count += 1

            if pair_count >= MAX_CONSECUTIVE_PAIRS:
                self.console.write(
                    "You threw 3 consecutive pairs. You have to go to jail!\n"
                )
                player.go_to_jail(self.jail_position)
                self.console.pause()
                self.console.clear()
                break

            if player.move_with(first + second, self.board.total_size()):
                self.console.write(bank.PASS_START_MESSAGE + "\n")

            self.field_action_until_success(self.board[player.position])

            if not player.in_jail and is_pair:
                self.console.write("You threw a pair. You can throw again\n")
                self.console.pause()
                self.console.clear()
            else:
                break

        self.go_to_next_player()

    def field_action_until_success(self, field: Field) -> None:
        """Act on fields until one does not move the player elsewhere."""
        player = self.current_player
        while True:
            field.landing_message(self.console)
            if field.action(player, self.console):
                return
            field = self.board[player.position]

    def _roll(self) -> tuple[int, int]:
        return self.rng.randint(1, 6), self.rng.randint(1, 6)

    def roll_dice(self) -> tuple[int, int]:
        """Throw two dice, announce them and return both values."""
        first, second = self._roll()
        self.console.write(f"You threw a {first} and a {second}\n\n")
        return first, second

    # ----- building ---------------------------------------------------

    def check_can_build(self) -> None:
        """Raise if the current player may not build.

        The turn is stepped back first, so that the usual advance to the
        next player after a failed command leaves the same player on turn.
        """
        if not self.can_build():
            self.current_index = (self.current_index - 1) % self.player_count
            raise RuntimeError("You can't buy any mortgages")

    def can_build(self) -> bool:
        return bool(self.valid_families())

    def valid_families(self) -> list[FieldFamily]:
        """Families that take buildings and belong wholly to the current player."""
        player = self.current_player
        return [
            family
            for family in self.families
            if family.can_buy_mortgages() and family.owns_all(player)
        ]

    def build(
        self, property_name: str, mortgage_type: str, families: Iterable[FieldFamily]
    ) -> None:
        field = self.find_buyable_field(families, property_name)
        field.build_mortgage(mortgage_type)
        self.console.write(f"You successfully built a {mortgage_type}\n")
        self.console.pause()
        self.console.clear()

    def ownership_map(self) -> None:
        for family in self.families:
            self.console.write(family.describe() + "\n")
        self.console.pause()
        self.console.clear()

    # ----- jail -------------------------------------------------------

    def get_player_out_of_jail(self) -> bool:
        """Let the jailed current player pay or throw; True if they got out."""
        player = self.current_player
        console = self.console
        console.clear()
        console.write(f"Player {player.colored_username()}'s turn\n")
        console.write("You are in jail.\n")

        if player.remaining_to_ransom:
            console.write(
                f"You have to wait {player.remaining_to_ransom} "
                "turns to be able to pay to get out\n"
            )
            console.write("You have to throw a pair to get out\n\n")
        else:
            console.write(f"Balance: {player.balance}\n")
            console.write(
                f"Do you want to pay ${JAIL_RANSOM} to get out of jail?(y|n): "
            )
            if console.ask_yes_or_no():
                try:
                    bank.take_from(player, JAIL_RANSOM, False)
                except InsufficientFundsError as err:
                    console.write(f"{err}\n")
                else:
                    player.get_out_of_jail()
                    return True

        first, second = self._roll()
        console.write(f"You threw a {first} and a {second}\n")
        if first == second:
            console.write("You got out of jail!\n")
            player.get_out_of_jail()
            got_out = True
        else:
            console.write("You have to stay in jail for one more turn\n")
            player.lower_ransom()
            got_out = False

        console.pause()
        console.clear()
        return got_out

    # ----- trading ----------------------------------------------------

    def trade_between_players(self, receiver_name: str, field: BuyableField) -> int:
        """Sell the field to another player; return the price received."""
        if self.current_player.username == receiver_name:
            raise ValueError("You can't trade with yourself")
        receiver = self.find_player_that_can_afford(
            receiver_name, field.sell_price_to_player()
        )
        return trade.sell_to_player(receiver, field, self.console)

    def trade_with_bank(self, field: BuyableField) -> int:
        """Sell the field to the bank; return the price received."""
        return trade.sell_to_bank(field)

    # ----- lookups ----------------------------------------------------

    def find_buyable_field(
        self, families: Iterable[FieldFamily], name: str
    ) -> BuyableField:
        for family in families:
            for field in family:
                if field.name == name:
                    return field
        raise ValueError("Wrong property name")

    def find_player(self, name: str) -> Player:
        for player in self.players:
            if player.username == name:
                return player
        raise ValueError("Invalid username")

    def find_player_that_can_afford(self, name: str, amount: int) -> Player:
        player = self.find_player(name)
        if not player.can_afford(amount):
            raise ValueError("Player cannot afford this")
        return player

    def find_field_family(self, name: str) -> FieldFamily:
        for family in self.families:
            if family.name == name:
                return family
        raise ValueError("There isn't a field family with this name")

    def owned_fields(self) -> list[BuyableField]:
        player = self.current_player
        return [
            field for family in self.families for field in family.owned_fields(player)
        ]

    def players_that_can_afford(self, amount: int) -> list[Player]:
        """Other players whose balance covers ``amount``."""
        current = self.current_player
        able = [
            player
            for player in self.players
            if player is not current and player.can_afford(amount)
        ]
        if not able:
            raise RuntimeError("No one can afford this!")
        return able

    def player_exit_game(self) -> None:
        """Remove the current player; raise EndGameError if one is left."""
        player = self.current_player
        for family in self.families:
            family.remove_owner(player)
        del self.players[self.current_index]
        self.player_count -= 1
        self.current_index %= self.player_count
        if self.player_count == 1:
            raise EndGameError(self.current_player)