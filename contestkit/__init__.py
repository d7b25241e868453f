"""Solutions to programming-contest problems and classic data-structure exercises."""

__version__ = "0.1.0"