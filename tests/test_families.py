import pytest

from monoopoly.buyable import Property, Station
from monoopoly.errors import InsufficientFundsError
from monoopoly.families import FieldFamily, PropertyFamily
from monoopoly.player import Player


def _rich(name):
    player = Player(name)
    player.add_to_balance(1000)
    return player


def test_add_contains_len_iter():
    family = FieldFamily("Stations")
    first = Station("North", 200, 25)
    second = Station("South", 200, 25)
    family.add_field(first)
    family.add_field(second)
    assert len(family) == 2
    assert first in family
    assert Station("North", 200, 25) not in family
    assert list(family) == [first, second]


def test_ownership_queries():
    family = PropertyFamily("Brown", 50, 50)
    a = Property("Old Kent Road", 60, 80)
    b = Property("Whitechapel Road", 60, 100)
    family.add_field(a)
    family.add_field(b)
    alice, bob = _rich("alice"), _rich("bob")

    assert family.owned_count(alice) == 0
    a.buy(alice)
    assert family.owned_count(alice) == 1
    assert not family.owns_all(alice)
    assert family.owned_fields(alice) == [a]
    b.buy(alice)
    assert family.owns_all(alice)
    assert not family.owns_all(bob)
    assert family.owned_fields(bob) == []


def test_empty_family_is_owned_by_anyone():
    family = FieldFamily("Empty")
    assert family.owns_all(Player("x"))
    assert family.can_buy_mortgages()


def test_remove_owner_frees_only_that_players_fields():
    family = FieldFamily("Mixed")
    a = Property("A", 60, 80)
    b = Property("B", 60, 80)
    family.add_field(a)
    family.add_field(b)
    alice, bob = _rich("alice"), _rich("bob")
    a.buy(alice)
    b.buy(bob)
    family.remove_owner(alice)
    assert a.is_free()
    assert b.belongs_to(bob)


def test_can_buy_mortgages_depends_on_fields():
    properties = PropertyFamily("Pink", 100, 100)
    properties.add_field(Property("Pall Mall", 120, 120))
    stations = FieldFamily("Stations")
    stations.add_field(Station("Kings Cross Station", 200, 25))
    assert properties.can_buy_mortgages()
    assert not stations.can_buy_mortgages()


def test_property_family_sets_up_buildings():
    family = PropertyFamily("Brown", 50, 75)
    street = Property("Old Kent Road", 60, 80)
    family.add_field(street)
    owner = _rich("alice")
    street.buy(owner)
    before = owner.balance
    street.build_mortgage("cottage")
    assert owner.balance == before - 50
    street.build_mortgage("castle")
    assert owner.balance == before - 50 - 75
    assert street.total_rent() > 80


def test_building_fails_without_money():
    family = PropertyFamily("Dark Blue", 5000, 5000)
    street = Property("Mayfair", 400, 300)
    family.add_field(street)
    owner = Player("poor")
    owner.add_to_balance(400)
    street.buy(owner)
    with pytest.raises(InsufficientFundsError):
        street.build_mortgage("cottage")


def test_describe_lists_name_costs_and_fields():
    family = PropertyFamily("Brown", 50, 75)
    family.add_field(Property("Old Kent Road", 60, 80))
    text = family.describe()
    assert text.startswith("Brown\n")
    assert "Cottage cost: 50\tCastle cost: 75\n" in text
    assert "\tOld Kent Road\n" in text

    plain = FieldFamily("Stations")
    plain.add_field(Station("Marylebone Station", 200, 25))
    assert plain.describe() == "Stations\n\tMarylebone Station\n"