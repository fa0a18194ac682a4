"""Project-wide scales and discovery of SDF files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

POSITION_SCALE = 100.0
ATOM_SCALE = 0.5

_SDF_SUBDIR = ("Content", "SDF")


def find_sdf_files(project_dir: str | os.PathLike[str]) -> list[str]:
    """Return the paths of the ``*.sdf`` files in ``<project_dir>/Content/SDF``.

    Only regular files are listed, sorted by name. A missing directory
    yields an empty list.
    """
    directory = Path(project_dir, *_SDF_SUBDIR)
    if not directory.is_dir():
        return []
    prefix = directory.as_posix()
    return [
        f"{prefix}/{entry.name}"
        for entry in sorted(directory.iterdir(), key=lambda p: p.name)
        if entry.is_file() and entry.suffix.lower() == ".sdf"
    ]


@dataclass
class SDFFile:
    """An SDF file as listed to the user: its full path and its bare name."""

    full_file_path: str = ""
    file_name: str = ""

    def chop_file_name(self) -> str:
        """Set ``file_name`` to the part of the path after the last '/'.

        When the path holds no '/', ``file_name`` is left as it was.
        """
        cut = self.full_file_path.rfind("/")
        if cut >= 0:
            self.file_name = self.full_file_path[cut + 1:]
        return self.file_name