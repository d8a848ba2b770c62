import pytest

from monoopoly.errors import InsufficientFundsError
from monoopoly.mortgage import Castle, Cottage, Mortgage, MortgageManager
from monoopoly.player import Player


def owner_with(amount):
    player = Player("owner")
    player.add_to_balance(amount)
    return player


def manager():
    return MortgageManager(Castle(150), Cottage(50))


def test_building_types_carry_their_rent_increase():
    cottage, castle = Cottage(50), Castle(150)
    assert (cottage.price, cottage.rent_increase) == (50, 0.15)
    assert (castle.price, castle.rent_increase) == (150, 0.5)
    assert isinstance(castle, Mortgage)


def test_rent_without_buildings_is_unchanged():
    assert manager().total_rent(120) == 120


def test_build_castle_charges_owner_and_raises_rent():
    mgr = manager()
    owner = owner_with(1000)
    mgr.build_mortgage("castle", owner)
    assert owner.balance == 1000 - 150
    assert mgr.total_rent(100) == 250


def test_build_cottage_charges_cottage_price():
    mgr = manager()
    owner = owner_with(1000)
    mgr.build_mortgage("cottage", owner)
    assert owner.balance == 1000 - 50
    assert mgr.total_rent(100) > 100


def test_invalid_type_is_rejected_without_charge():
    mgr = manager()
    owner = owner_with(1000)
    with pytest.raises(ValueError, match="Invalid mortgage type"):
        mgr.build_mortgage("palace", owner)
    assert owner.balance == 1000
    assert mgr.total_rent(100) == 100


def test_unaffordable_building_is_not_added():
    mgr = manager()
    owner = owner_with(10)
    with pytest.raises(InsufficientFundsError):
        mgr.build_mortgage("castle", owner)
    assert mgr.total_rent(100) == 100
    assert owner.balance == 10


def test_castle_needs_three_buildings():
    mgr = manager()
    owner = owner_with(1000)
    mgr.build_mortgage("cottage", owner)
    mgr.build_mortgage("cottage", owner)
    assert not mgr.can_buy_castle()
    mgr.build_mortgage("cottage", owner)
    assert mgr.can_buy_castle()


def test_buy_mortgage_adds_without_charging():
    mgr = manager()
    mgr.buy_mortgage(Castle(999))
    assert mgr.total_rent(100) == 250
    assert mgr.mortgages[0].price == 999