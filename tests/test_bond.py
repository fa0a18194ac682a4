import math

import pytest

from molviewer.atom import WHITE, Atom
from molviewer.bond import (
    DOUBLE_LINE_WIDTH,
    DOUBLE_POSITION_SCALE,
    SINGLE_LINE_WIDTH,
    Bond,
    LineSegment,
    rotate_about_z,
)
from molviewer.library import POSITION_SCALE


def _length(v):
    return math.sqrt(sum(c * c for c in v))


def test_rotate_x_axis_by_quarter_turn_gives_y_axis():
    assert rotate_about_z((1.0, 0.0, 0.0), 90.0) == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)


@pytest.mark.parametrize("vector", [(1.0, 2.0, 3.0), (-0.5, 0.25, -4.0), (0.0, 0.0, 1.0)])
@pytest.mark.parametrize("degrees", [0.0, 45.0, 90.0, 200.0])
def test_rotation_preserves_length_and_z(vector, degrees):
    rotated = rotate_about_z(vector, degrees)
    assert _length(rotated) == pytest.approx(_length(vector))
    assert rotated[2] == vector[2]


def test_four_quarter_turns_return_to_start():
    vector = (0.3, -1.2, 2.0)
    rotated = vector
    for _ in range(4):
        rotated = rotate_about_z(rotated, 90.0)
    assert rotated == pytest.approx(vector)


def test_bond_with_missing_atom_draws_nothing():
    assert Bond(start=Atom(), end=None).lines() == []
    assert Bond(start=None, end=Atom()).lines() == []


def test_single_bond_draws_one_line_between_atoms():
    a = Atom(position=(0.0, 0.0, 0.0))
    b = Atom(position=(1.0, 2.0, 3.0))
    segments = Bond(a, b).lines()
    assert segments == [
        LineSegment(a.world_location(), b.world_location(), SINGLE_LINE_WIDTH, WHITE)
    ]


def test_double_bond_draws_two_parallel_lines_around_atoms():
    a = Atom(position=(0.0, 0.0, 0.0))
    b = Atom(position=(2.0, 1.0, 0.0))
    first, second = Bond(a, b, is_double=True).lines()
    assert first.width == second.width == DOUBLE_LINE_WIDTH

    mid_start = tuple((p + q) / 2 for p, q in zip(first.start, second.start))
    mid_end = tuple((p + q) / 2 for p, q in zip(first.end, second.end))
    assert mid_start == pytest.approx(a.world_location())
    assert mid_end == pytest.approx(b.world_location())

    gap = tuple(p - q for p, q in zip(first.start, second.start))
    assert _length(gap) == pytest.approx(2 * DOUBLE_POSITION_SCALE * POSITION_SCALE)

    bond_dir = tuple(q - p for p, q in zip(first.start, first.end))
    assert sum(g * d for g, d in zip(gap, bond_dir)) == pytest.approx(0.0, abs=1e-9)
    other_dir = tuple(q - p for p, q in zip(second.start, second.end))
    assert other_dir == pytest.approx(bond_dir)


def test_double_bond_between_coincident_atoms_collapses():
    a = Atom(position=(1.0, 1.0, 1.0))
    b = Atom(position=(1.0, 1.0, 1.0))
    first, second = Bond(a, b, is_double=True).lines()
    assert first.start == second.start == a.world_location()
    assert first.end == second.end == b.world_location()