[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "molviewer"
version = "0.1.0"
description = "Read SDF molecule files and compute atom placements, colours and bond lines for display"
requires-python = ">=3.10"
dependencies = []
keywords = ["chemistry", "sdf", "molfile", "molecule", "viewer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Chemistry",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
molviewer = "molviewer.molecule:main"

[tool.hatch.build.targets.wheel]
packages = ["molviewer"]

[tool.pytest.ini_options]
addopts = "-ra"
