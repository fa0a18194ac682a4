"""Read SDF molecule files and compute atom placements, colours and bond lines."""

__version__ = "0.1.0"
__all__ = ["atom", "bond", "library", "molecule"]