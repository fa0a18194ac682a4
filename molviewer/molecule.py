"""Reading molecules from SDF (MDL molfile) text and a command to show them."""

from __future__ import annotations

import argparse
import os
import re
import sys
from dataclasses import dataclass, field
from itertools import chain

from molviewer.atom import Atom
from molviewer.bond import Bond, LineSegment
from molviewer.library import SDFFile, find_sdf_files

_TITLE_LINE = 0
_TIMESTAMP_LINE = 1
_COMMENT_LINE = 2
_COUNTS_LINE = 3
_HEADER_LINES = 4

_ATOM_COUNT_FIELD = 0
_BOND_COUNT_FIELD = 1
_CHIRAL_FLAG_FIELD = 3

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class SDFError(ValueError):
    """Raised when SDF text cannot be read as a molecule."""


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _atof(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _fields(line: str) -> list[str]:
    return [part for part in line.split(" ") if part]


@dataclass
class Molecule:
    """A molecule: header details, atoms and the bonds between them."""

    title: str = ""
    timestamp: str = ""
    comments: str = ""
    atom_count: int = -1
    bond_count: int = -1
    is_chiral: bool = False
    atoms: list[Atom] = field(default_factory=list)
    bonds: list[Bond] = field(default_factory=list)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Molecule:
        """Read and parse an SDF file."""
        with open(path, encoding="utf-8-sig") as handle:
            return parse_sdf(handle.read())

    def lines(self) -> list[LineSegment]:
        """Return the line segments of every bond, in bond order."""
        return list(chain.from_iterable(bond.lines() for bond in self.bonds))


def _parse_atom(line: str) -> Atom:
    parts = _fields(line)
    if len(parts) < 4:
        raise SDFError(f"atom line has too few fields: {line!r}")
    atom = Atom(position=(_atof(parts[0]), _atof(parts[1]), _atof(parts[2])))
    atom.set_element(parts[3][0])
    return atom


def _parse_bond(line: str, atoms: list[Atom]) -> Bond:
    parts = _fields(line)
    if len(parts) < 3:
        raise SDFError(f"bond line has too few fields: {line!r}")
    indices = (_atoi(parts[0]) - 1, _atoi(parts[1]) - 1)
    for index in indices:
        if not 0 <= index < len(atoms):
            raise SDFError(f"bond refers to atom {index + 1}, which does not exist")
    return Bond(atoms[indices[0]], atoms[indices[1]], _atoi(parts[2]) == 2)


def parse_sdf(text: str) -> Molecule:
    """Parse the first molecule of SDF text."""
    lines = text.split("\n")
    if len(lines) < _HEADER_LINES:
        raise SDFError("missing header lines")

    counts = _fields(lines[_COUNTS_LINE])
    if len(counts) <= _CHIRAL_FLAG_FIELD:
        raise SDFError(f"counts line has too few fields: {lines[_COUNTS_LINE]!r}")

    molecule = Molecule(
        title=lines[_TITLE_LINE],
        timestamp=lines[_TIMESTAMP_LINE],
        comments=lines[_COMMENT_LINE],
        atom_count=_atoi(counts[_ATOM_COUNT_FIELD]),
        bond_count=_atoi(counts[_BOND_COUNT_FIELD]),
        is_chiral=_atoi(counts[_CHIRAL_FLAG_FIELD]) != 0,
    )

    atom_end = _HEADER_LINES + max(molecule.atom_count, 0)
    bond_end = _HEADER_LINES + molecule.atom_count + molecule.bond_count
    if bond_end > len(lines) or atom_end > len(lines):
        raise SDFError("file ends before all atoms and bonds are listed")

    atom_lines = lines[_HEADER_LINES:min(atom_end, bond_end)]
    bond_lines = lines[atom_end:bond_end]

    molecule.atoms = [_parse_atom(line) for line in atom_lines]
    molecule.bonds = [_parse_bond(line, molecule.atoms) for line in bond_lines]
    return molecule


def _describe(molecule: Molecule) -> str:
    rows = [
        f"Title: {molecule.title}",
        f"Timestamp: {molecule.timestamp}",
        f"Comments: {molecule.comments}",
        f"Atoms: {molecule.atom_count}",
        f"Bonds: {molecule.bond_count}",
        f"Chiral: {'yes' if molecule.is_chiral else 'no'}",
    ]
    for number, atom in enumerate(molecule.atoms, start=1):
        x, y, z = atom.position
        rows.append(f"  atom {number}: {atom.element_name() or '?'} ({x:.4f}, {y:.4f}, {z:.4f})")
    positions = {id(atom): number for number, atom in enumerate(molecule.atoms, start=1)}
    for bond in molecule.bonds:
        kind = "double" if bond.is_double else "single"
        rows.append(f"  bond {positions[id(bond.start)]}-{positions[id(bond.end)]}: {kind}")
    return "\n".join(rows)


def main(argv: list[str] | None = None) -> int:
    """List the project's SDF files, or describe the molecules in the given files."""
    parser = argparse.ArgumentParser(prog="molviewer", description=main.__doc__)
    parser.add_argument("files", nargs="*", help="SDF files to read")
    parser.add_argument(
        "--project-dir",
        default=".",
        help="project directory searched for Content/SDF when no files are given",
    )
    args = parser.parse_args(argv)

    if not args.files:
        for path in find_sdf_files(args.project_dir):
            print(SDFFile(full_file_path=path).chop_file_name())
        return 0

    status = 0
    for path in args.files:
        try:
            molecule = Molecule.from_file(path)
        except (OSError, SDFError) as error:
            print(f"molviewer: {path}: {error}", file=sys.stderr)
            status = 1
            continue
        print(_describe(molecule))
    return status