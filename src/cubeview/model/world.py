from __future__ import annotations

from typing import Iterator

from cubeview.model.figure import Figure


class World:
    """Insertion-ordered collection of figures. Holds no camera or projection state."""

    def __init__(self) -> None:
        self._figures: list[Figure] = []

    def add_figure(self, figure: Figure) -> None:
        if not isinstance(figure, Figure):
            raise TypeError(f"Expected a Figure, got {type(figure).__name__}.")
        self._figures.append(figure)

    def get_figures(self) -> list[Figure]:
        return list(self._figures)

    def figure(self, index: int) -> Figure:
        """Figure at `index`; negative indices are out of range (no wrap-around)."""
        if not (0 <= index < len(self._figures)):
            raise IndexError(f"No figure at index {index} (world has {len(self._figures)}).")
        return self._figures[index]

    def __len__(self) -> int:
        return len(self._figures)

    def __iter__(self) -> Iterator[Figure]:
        return iter(list(self._figures))
