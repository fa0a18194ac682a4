import pytest

from molviewer.atom import WHITE, Atom, Element, element_from_symbol
from molviewer.library import ATOM_SCALE, POSITION_SCALE


@pytest.mark.parametrize(
    "symbol, element, name",
    [
        ("O", Element.OXYGEN, "Oxygen"),
        ("N", Element.NITROGEN, "Nitrogen"),
        ("C", Element.CARBON, "Carbon"),
        ("H", Element.HYDROGEN, "Hydrogen"),
    ],
)
def test_known_symbols(symbol, element, name):
    assert element_from_symbol(symbol) is element
    atom = Atom()
    atom.set_element(symbol)
    assert atom.element is element
    assert atom.element_name() == name


@pytest.mark.parametrize("symbol", ["S", "o", "X", ""])
def test_unknown_symbols_give_none(symbol):
    assert element_from_symbol(symbol) is None


def test_unknown_symbol_keeps_previous_element():
    atom = Atom(element=Element.CARBON)
    atom.set_element("Z")
    assert atom.element is Element.CARBON


def test_unset_element_has_empty_name_and_no_colour():
    atom = Atom()
    assert atom.element_name() == ""
    assert atom.colour() is None


def test_colour_follows_element():
    for element in Element:
        assert Atom(element=element).colour() == element.colour


def test_element_colours_are_distinct():
    colours = set()
    for symbol in ("O", "N", "C", "H"):
        atom = Atom()
        atom.set_element(symbol)
        colours.add(atom.colour())
    assert None not in colours
    assert len(colours) == 4


def test_hydrogen_is_white():
    assert Atom(element=Element.HYDROGEN).colour() == WHITE
    assert WHITE == (1.0, 1.0, 1.0, 1.0)


def test_world_location_scales_position():
    position = (1.5, -2.0, 0.25)
    atom = Atom(position=position)
    location = atom.world_location()
    for scaled, original in zip(location, position):
        assert scaled == pytest.approx(original * POSITION_SCALE)


def test_world_location_of_origin_is_origin():
    assert Atom().world_location() == (0.0, 0.0, 0.0)


def test_world_scale_is_uniform_atom_scale():
    assert Atom().world_scale() == (ATOM_SCALE, ATOM_SCALE, ATOM_SCALE)