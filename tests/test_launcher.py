import io

import pytest

from monoopoly.console import Console
from monoopoly.launcher import Launcher, main


class _Dice:
    """Hands out fixed dice values in order."""

    def __init__(self, *values):
        self._values = iter(values)

    def randint(self, low, high):
        return next(self._values)


def _launcher(script, rng=None):
    out = io.StringIO()
    console = Console(io.StringIO(script), out)
    return Launcher(console, rng), out


def _small_board_script(after_trade):
    return (
        "manual\n2\n3\n"
        "add_player alice\n"
        "add_player bob\n"
        "add_property_family Brown\n50\n50\n"
        "add_property Old Road\nBrown\n600\n300\n"
        "add_card_field\nadd_card_field\nadd_card_field\n"
        "add_payment_card -1200\n"
        "start\n"
        "throw_dice\ny\n"
        "throw_dice\n"
        "throw_dice\n" + after_trade
    )


def _small_board_dice():
    # alice 4+5 -> property, bob 1+3 -> Free Parking, alice 1+3 -> card field
    return _Dice(4, 5, 1, 3, 1, 3)


def _old_road(game):
    return next(iter(game.find_field_family("Brown")))


def test_invalid_game_type_is_reported():
    launcher, out = _launcher("nonsense\n")
    with pytest.raises(EOFError):
        launcher.run()
    assert "Invalid command" in out.getvalue()
    assert launcher.game is None


def test_invalid_player_count_is_reported():
    launcher, out = _launcher("default\n7\n")
    with pytest.raises(EOFError):
        launcher.run()
    assert "Invalid player count" in out.getvalue()
    assert launcher.game is None


def test_default_game_setup_gives_initial_balance():
    launcher, out = _launcher(
        "default\n2\nadd_player alice\nadd_player bob\nstart\n"
    )
    with pytest.raises(EOFError):
        launcher.run()
    game = launcher.game
    assert [player.username for player in game.players] == ["alice", "bob"]
    assert all(player.balance == 1500 for player in game.players)
    assert game.board.is_full()
    assert "Player added successfully" in out.getvalue()


def test_start_before_players_are_added_is_refused():
    launcher, out = _launcher("default\n2\nstart\n")
    with pytest.raises(EOFError):
        launcher.run()
    assert "2 missing players" in out.getvalue()
    assert launcher.game.players == []


def test_unknown_element_command_is_reported():
    launcher, out = _launcher("default\n2\nadd_hotel\n")
    with pytest.raises(EOFError):
        launcher.run()
    assert "Invalid command" in out.getvalue()


def test_buy_mortgage_without_full_family_keeps_turn():
    launcher, out = _launcher(
        "default\n2\nadd_player alice\nadd_player bob\nstart\nbuy_mortgage\n"
    )
    with pytest.raises(EOFError):
        launcher.run()
    assert "You can't buy any mortgages" in out.getvalue()
    assert launcher.game.current_index == 0


def test_unknown_game_command_is_reported():
    launcher, out = _launcher(
        "default\n2\nadd_player alice\nadd_player bob\nstart\ndance\n"
    )
    with pytest.raises(EOFError):
        launcher.run()
    assert out.getvalue().count("Invalid command") == 1


def test_bankrupt_player_loses_and_other_wins():
    script = (
        "manual\n2\n3\n"
        "add_player alice\nadd_player bob\n"
        "add_card_field\nadd_card_field\nadd_card_field\nadd_card_field\n"
        "add_payment_card -2000\n"
        "start\n"
        "throw_dice\n"
    )
    launcher, out = _launcher(script, _Dice(1, 2))
    winner = launcher.run()
    text = out.getvalue()
    assert winner.username == "bob"
    assert "You have nothing to sell - you have gone bankrupt!" in text
    assert "Congratulations bob. You won!" in text
    assert [player.username for player in launcher.game.players] == ["bob"]


def test_selling_to_bank_pays_the_debt():
    launcher, out = _launcher(_small_board_script("1\ntrade_with_bank\n"), _small_board_dice())
    with pytest.raises(EOFError):
        launcher.run()
    game = launcher.game
    assert _old_road(game).is_free()
    assert "You have paid your dept" in out.getvalue()
    assert len(game.players) == 2
    assert game.current_index == 1


def test_selling_to_player_transfers_ownership():
    launcher, out = _launcher(
        _small_board_script("1\ntrade_with_player bob\ny\n"), _small_board_dice()
    )
    with pytest.raises(EOFError):
        launcher.run()
    game = launcher.game
    assert _old_road(game).owner is game.find_player("bob")
    assert "You have paid your dept" in out.getvalue()


def test_give_up_command_in_trade_menu_ends_game():
    launcher, out = _launcher(_small_board_script("1\ngive_up\n"), _small_board_dice())
    winner = launcher.run()
    assert winner.username == "bob"
    assert "You lost the game" in out.getvalue()


def test_invalid_field_number_is_asked_again():
    launcher, out = _launcher(_small_board_script("5\n0\n"), _small_board_dice())
    winner = launcher.run()
    assert "Type valid number!" in out.getvalue()
    assert winner.username == "bob"


def test_main_returns_zero_on_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main() == 0
    assert "Choose game type" in capsys.readouterr().out