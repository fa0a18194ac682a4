"""Atoms: element kinds, their names and colours, and placement in the scene."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from molviewer.library import ATOM_SCALE, POSITION_SCALE

logger = logging.getLogger(__name__)

Vec3 = tuple[float, float, float]
Colour = tuple[float, float, float, float]

RED: Colour = (1.0, 0.0, 0.0, 1.0)
BLUE: Colour = (0.0, 0.0, 1.0, 1.0)
BLACK: Colour = (0.0, 0.0, 0.0, 1.0)
WHITE: Colour = (1.0, 1.0, 1.0, 1.0)


class Element(Enum):
    """The elements the viewer knows, with symbol, display name and colour."""

    OXYGEN = ("O", "Oxygen", RED)
    NITROGEN = ("N", "Nitrogen", BLUE)
    CARBON = ("C", "Carbon", BLACK)
    HYDROGEN = ("H", "Hydrogen", WHITE)

    def __init__(self, symbol: str, display_name: str, colour: Colour) -> None:
        self.symbol = symbol
        self.display_name = display_name
        self.colour = colour


_BY_SYMBOL = {element.symbol: element for element in Element}


def element_from_symbol(symbol: str) -> Element | None:
    """Return the element for a one-character symbol, or None if unknown."""
    return _BY_SYMBOL.get(symbol)


@dataclass
class Atom:
    """An atom at a position in molecule space."""

    position: Vec3 = (0.0, 0.0, 0.0)
    element: Element | None = None

    def set_element(self, symbol: str) -> None:
        """Set the element from its symbol; unknown symbols leave it unchanged."""
        element = element_from_symbol(symbol)
        if element is not None:
            self.element = element

    def element_name(self) -> str:
        """Return the element's display name, or an empty string if unset."""
        if self.element is None:
            logger.warning("No element found.")
            return ""
        return self.element.display_name

    def colour(self) -> Colour | None:
        """Return the RGBA colour the atom is drawn in, or None if unset."""
        if self.element is None:
            logger.warning("No element found.")
            return None
        return self.element.colour

    def world_location(self) -> Vec3:
        """Return the position scaled into scene units."""
        x, y, z = self.position
        return (x * POSITION_SCALE, y * POSITION_SCALE, z * POSITION_SCALE)

    def world_scale(self) -> Vec3:
        """Return the uniform scale the atom's sphere is drawn with."""
        return (ATOM_SCALE, ATOM_SCALE, ATOM_SCALE)