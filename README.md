# molviewer

`molviewer` reads molecules from SDF (MDL molfile) text. For the first molecule in a
file it gives the title, timestamp and comment lines, the atom and bond counts and the
chirality flag, and it works out the geometry a viewer needs to draw the molecule:

- **Atoms** carry a position and an element: oxygen, nitrogen, carbon or hydrogen.
  Each element has a display name and an RGBA colour (red, blue, black or white).
  An atom is placed at its position scaled by 100 and drawn at a uniform scale of 0.5.
  Symbols other than `O`, `N`, `C` and `H` leave the atom without an element.
- **Bonds** connect two atoms. A single bond becomes one line segment of width 5.
  A double bond becomes two parallel segments of width 2.5: the bond direction is
  normalised, rotated 90° about the Z axis, scaled by 0.1 and added to and subtracted
  from both ends. All segments are white and in scene units (positions × 100).

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Command line

Describe one or more SDF files:

```
molviewer path/to/molecule.sdf
```

For each file this prints the title, timestamp, comments, atom and bond counts and
whether the molecule is chiral, then one line per atom (element name, or `?` when the
element is unknown, and its position) and one line per bond (the numbers of the two
atoms and whether it is single or double). A file that cannot be read or parsed is
reported on standard error, and the command exits with status 1.

With no files, the command lists the names of the `*.sdf` files in
`<project-dir>/Content/SDF/`:

```
molviewer --project-dir path/to/project
```

`--project-dir` defaults to the current directory.

## Library use

```python
from molviewer.molecule import Molecule, SDFError, parse_sdf
from molviewer.library import SDFFile, find_sdf_files

molecule = Molecule.from_file("Content/SDF/water.sdf")
print(molecule.title, molecule.atom_count, molecule.bond_count, molecule.is_chiral)

for atom in molecule.atoms:
    print(atom.element_name(), atom.colour(), atom.world_location(), atom.world_scale())

for segment in molecule.lines():
    print(segment.start, segment.end, segment.width, segment.colour)

# SDF files in <project>/Content/SDF/, sorted by name
for path in find_sdf_files("."):
    entry = SDFFile(path)
    print(entry.chop_file_name())
```

- `parse_sdf(text)` builds a `Molecule` from SDF text already in memory. It raises
  `SDFError` (a `ValueError`) when the header or counts line is missing or short,
  when the text ends before all atoms and bonds are listed, or when a bond names an
  atom that does not exist.
- `molviewer.atom` holds `Element`, `element_from_symbol` and `Atom`.
- `molviewer.bond` holds `Bond`, `LineSegment` and `rotate_about_z`.
- `molviewer.library` holds `find_sdf_files`, `SDFFile` and the `POSITION_SCALE`
  and `ATOM_SCALE` constants.

## What it does not do

`molviewer` computes what to draw but draws nothing: there is no window, 3D view or
rendering. Only the first molecule of an SDF file is read, and properties blocks and
data items after the bond block are ignored.