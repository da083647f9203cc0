"""Classic algorithms and data structures: trees, containers, dynamic
programming, matrices, game theory, geometry, number theory and sorting."""

__version__ = "0.1.0"

__all__ = [
    "containers",
    "dynamic_programming",
    "game_theory",
    "geometry",
    "linear_algebra",
    "miscellaneous",
    "number_theory",
    "sorting",
    "trees",
]