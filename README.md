# monoopoly

A Monopoly game for the terminal. Two to six players share one keyboard.

## Installing

```
pip install .
```

## Playing

```
monoopoly
```

First you choose the kind of game:

- `default` asks for the number of players. It then sets up the classic 40-field London board, with eight colour families, four stations, two facilities, card fields and a deck of ten cards. The cards move a player, make a player pay or receive money, or move money between a player and everyone else. After that you only need to add players.
- `manual` asks for the number of players and the number of fields per side, which must be at least 3. You then fill the board yourself:
  - `add_property_family <name>` asks for the cottage and castle prices.
  - `add_property <name>` asks for the family name, the price and the rent.
  - `add_station <name>` asks for the price and the rent.
  - `add_facility <name>` asks for the price.
  - `add_card_field`
  - `add_movement_card <positions>`
  - `add_payment_card <amount>`
  - `add_group_payment_card <amount>`

The four corner fields (Start, Jail, Free Parking and Go to Jail) are placed automatically once every other field is on the board.

In both kinds of game you add players with `add_player <username>`. When every player has joined, the board is full and the deck holds at least one card, type `start`. Each player then receives $1500.

On your turn you can type:

- `throw_dice` to roll two dice and move. A pair lets you roll again, and three pairs in a row send you to jail. Passing Start pays $200.
- `buy_mortgage` to build on a colour family that you own completely. Type `build cottage <property>` or `build castle <property>`, or type `cancel` to go back.
- `ownership_map` to list every family and its fields. A field's name is coloured in its owner's colour.

When you land on a field that nobody owns, you are asked whether to buy it. Rent on a property goes up with each cottage or castle built on it. A station's rent doubles for each further station its owner holds, and it also rises every time someone lands there. A facility takes a growing percentage of the visitor's balance.

In jail you either throw a pair to get out or, after waiting two turns, pay $100.

If you cannot make a payment you must sell fields, either to the bank (`trade_with_bank`) or to another player (`trade_with_player <username>`, which the buyer must accept). Entering `0` or `give_up` puts you out of the game, and so does having nothing left to sell. The last player left wins. Once input ends, the program exits quietly.

## What it does not do

A game cannot be saved or resumed. Typing `load` at the first menu only reports an error. `Player.save` and `Player.load` write and read one player's record to a binary stream, but nothing stores a whole game.

## Using it as a library

The game state and its rules live in `monoopoly.game.Game`. All input and output passes through `monoopoly.console.Console`, which works on any text streams you give it. Dice rolls and board shuffling use a `random.Random`, so passing a seeded generator makes a game reproducible:

```python
import io
import random

from monoopoly.console import Console
from monoopoly.game import Game

console = Console(io.StringIO(""), io.StringIO())
game = Game(2, 11, console, random.Random(1))
game.load_default_game()
game.add_player("alice")
game.add_player("bob")
game.start()
print(game.render_board())
```

`monoopoly.launcher.Launcher(console, rng).run()` plays a complete interactive game on the given console and returns the winning `Player`.

## Running the tests

```
pip install .[test]
pytest
```