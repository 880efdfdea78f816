import pytest

from creaturetracker.creature import Creature


def test_fields_and_key():
    c = Creature("Blazefox", "Fire", 30)
    assert c.key == "Blazefox"
    assert c.type == "Fire"
    assert c.power == 30


def test_str_format():
    assert str(Creature("Blazefox", "Fire", 30)) == "(Blazefox, Fire, 30)"


def test_default_creature():
    c = Creature()
    assert c.key == " "
    assert c.power == 0
    assert str(c) == "( ,  , 0)"


def test_equality_uses_name_only():
    assert Creature("A", "Fire", 1) == Creature("A", "Water", 99)
    assert not Creature("A", "Fire", 1) == Creature("B", "Fire", 1)
    assert hash(Creature("A", "Fire", 1)) == hash(Creature("A", "Ice", 2))


def test_not_equal_to_other_types():
    assert (Creature("A", "Fire", 1) == "A") is False


def test_ordering_by_name():
    a = Creature("Alpha", "Fire", 100)
    b = Creature("Beta", "Fire", 1)
    assert a < b
    assert b > a
    assert not a > b
    assert not a < Creature("Alpha", "Ice", 0)


def test_sorting_follows_names():
    names = ["Swarmstrike", "Blazefox", "Aquafin", "Mossback"]
    creatures = [Creature(n, "T", i) for i, n in enumerate(names)]
    assert [c.key for c in sorted(creatures)] == sorted(names)


def test_immutable():
    c = Creature("A", "Fire", 1)
    with pytest.raises(AttributeError):
        c.power = 5
    assert c.power == 1
    assert str(c) == "(A, Fire, 1)"