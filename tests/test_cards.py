import io

import pytest

from monoopoly import bank
from monoopoly.cards import (
    CardDeck,
    GroupPaymentCard,
    MovePositionCard,
    PaymentCard,
)
from monoopoly.console import Console
from monoopoly.errors import CantAffordError
from monoopoly.player import Player


def make_console(text=""):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def funded(name, balance):
    player = Player(name)
    player.add_to_balance(balance)
    return player


def test_deck_is_first_in_first_out():
    deck = CardDeck()
    first, second = PaymentCard(10), PaymentCard(20)
    deck.add_card(first)
    deck.add_card(second)
    assert len(deck) == 2
    assert deck.draw_card() is first
    assert deck.draw_card() is second
    assert len(deck) == 0


def test_drawing_from_empty_deck_raises():
    with pytest.raises(IndexError):
        CardDeck().draw_card()


def test_positive_payment_card_pays_player():
    console, out = make_console()
    start, change = 100, 50
    player = funded("ann", start)
    card = PaymentCard(change)
    card.print_info(console)
    assert card.apply_effect(player, console) is True
    assert player.balance == start + change
    assert f"You get {change}" in out.getvalue()


def test_negative_payment_card_takes_money():
    console, out = make_console()
    start, cost = 500, 200
    player = funded("ann", start)
    card = PaymentCard(-cost)
    card.print_info(console)
    assert card.apply_effect(player, console) is True
    assert player.balance == start - cost
    assert f"You have to give {cost}" in out.getvalue()


def test_unaffordable_payment_card_defers_payment():
    console, _ = make_console()
    start, cost = 50, 200
    player = funded("ann", start)
    with pytest.raises(CantAffordError) as info:
        PaymentCard(-cost).apply_effect(player, console)
    err = info.value
    assert err.needed_amount == cost - start
    assert err.pending.payer is player
    assert err.pending.needed_amount == cost
    assert err.pending.receivers == []
    assert player.balance == start


def test_move_card_forward_returns_false():
    console, _ = make_console()
    player = Player("ann")
    player.move_to(2)
    assert MovePositionCard(3, 40).apply_effect(player, console) is False
    assert player.position == 5


def test_move_card_backwards_wraps_around():
    console, _ = make_console()
    board_size = 10
    player = Player("ann")
    player.move_to(1)
    MovePositionCard(-2, board_size).apply_effect(player, console)
    assert player.position == board_size - 1
    assert player.balance == 0


def test_move_card_over_start_pays_bonus():
    console, out = make_console()
    player = Player("ann")
    player.move_to(8)
    MovePositionCard(3, 10).apply_effect(player, console)
    assert player.position == 1
    assert player.balance == bank.START_BONUS
    assert bank.PASS_START_MESSAGE in out.getvalue()


def test_move_card_info_mentions_direction():
    console, out = make_console()
    MovePositionCard(-2, 10).print_info(console)
    assert "Move with 2 positions backwards" in out.getvalue()


def test_group_card_collects_from_everyone_else():
    console, _ = make_console()
    change, poor_start = 100, 30
    collector = funded("ann", 0)
    rich = funded("bob", 500)
    poor = funded("cid", poor_start)
    card = GroupPaymentCard(change, [collector, rich, poor])
    assert card.apply_effect(collector, console) is True
    assert rich.balance == 500 - change
    assert poor.balance == 0
    assert collector.balance == change + poor_start


def test_group_card_pays_everyone_else():
    console, _ = make_console()
    change = -50
    payer = funded("ann", 1000)
    others = [funded("bob", 0), funded("cid", 0)]
    players = [payer, *others]
    total_before = sum(p.balance for p in players)
    GroupPaymentCard(change, players).apply_effect(payer, console)
    assert all(other.balance == -change for other in others)
    assert sum(p.balance for p in players) == total_before


def test_group_card_unaffordable_defers_to_other_players():
    console, _ = make_console()
    payer = funded("ann", 10)
    others = [funded("bob", 0), funded("cid", 0)]
    with pytest.raises(CantAffordError) as info:
        GroupPaymentCard(-50, [payer, *others]).apply_effect(payer, console)
    pending = info.value.pending
    assert pending.payer is payer
    assert pending.receivers == others
    assert info.value.needed_amount == pending.needed_amount - payer.balance
    assert all(other.balance == 0 for other in others)