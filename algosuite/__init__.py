"""Classic algorithms over arrays, strings, integers, grids, graphs and trees."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "combinatorics",
    "dynamic",
    "graphs",
    "grids",
    "integers",
    "strings",
    "structures",
    "trees",
]