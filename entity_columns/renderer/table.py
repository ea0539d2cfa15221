r"""
The following output-agnostic data structure is used to represent a grid of
entities in tabular form.

The basic data structure consists of a :py:class:`Table` object which contains
a set of nested lists containing a dense 2D array of :py:class:`Cell` objects.
Each entry in the array represents a cell in the table. Every row of a table
has the same number of cells; the layouts generated by
:py:mod:`entity_columns.renderer.entities_to_table` never leave gaps.

.. autoclass:: Table
    :members:

.. autoclass:: Cell
    :members:
    :undoc-members:
"""

from typing import (
    List,
    Sequence,
    Mapping,
    Tuple,
    Optional,
    Iterator,
    Generic,
    TypeVar,
    cast,
)

from dataclasses import dataclass


T = TypeVar("T")


@dataclass
class Cell(Generic[T]):
    value: T
    """The value contained in this cell."""


class InconsistentTableLayoutError(ValueError):
    """
    Base class for exceptions thrown when a badly formatted table is provided.
    """


class EmptyTableError(InconsistentTableLayoutError):
    """Thrown when an empty table is given."""


class MissingCellError(InconsistentTableLayoutError):
    """Thrown when a missing cell is encountered."""


@dataclass
class Table(Generic[T]):
    cells: Sequence[Sequence[Cell[T]]]
    """
    The table cells. A dense 2D array indexed as ``cells[row][column]``.
    """

    @classmethod
    def from_dict(cls, table_dict: Mapping[Tuple[int, int], Cell[T]]) -> "Table[T]":
        """
        Construct a :py:class:`Table` from a dictionary mapping (row, column)
        to :py:class:`Cell`.
        """
        # Compute table dimensions
        try:
            rows = max(row + 1 for (row, _column) in table_dict)
            columns = max(column + 1 for (_row, column) in table_dict)
        except ValueError:  # Thrown when max is provided an empty list
            raise EmptyTableError()

        # Populate the table
        cells: List[List[Optional[Cell[T]]]] = [
            [None for _ in range(columns)] for _ in range(rows)
        ]
        for (row, column), cell in table_dict.items():
            cells[row][column] = cell

        # Check for missing cells
        for row, row_cells in enumerate(cells):
            for column, maybe_cell in enumerate(row_cells):
                if maybe_cell is None:
                    raise MissingCellError(row, column)

        return cls(cast(Sequence[Sequence[Cell[T]]], cells))

    def to_dict(self) -> Mapping[Tuple[int, int], Cell[T]]:
        """
        Return a dictionary mapping from (row, column) to :py:class:`Cell`.
        """
        return {(row, column): cell for (row, column), cell in self}

    @property
    def columns(self) -> int:
        """Number of columns in this table"""
        return len(self.cells[0])

    @property
    def rows(self) -> int:
        """Number of rows in this table"""
        return len(self.cells)

    def values(self) -> List[T]:
        """The cell values in raster scan order."""
        return [cell.value for _coordinate, cell in self]

    def __iter__(self) -> Iterator[Tuple[Tuple[int, int], Cell[T]]]:
        """
        Iterate over ((row, column), cell) tuples in raster scan order.
        """
        for row, row_cells in enumerate(self.cells):
            for column, cell in enumerate(row_cells):
                yield (row, column), cell

    def __getitem__(self, index: Tuple[int, int]) -> Cell[T]:
        """Get the entry at the specified row and column."""
        row, column = index
        return self.cells[row][column]

    def __post_init__(self) -> None:
        if len(self.cells) == 0 or len(self.cells[0]) == 0:
            raise EmptyTableError()

        # Verify that every row is the same length
        for row, row_cells in enumerate(self.cells):
            if len(row_cells) < self.columns:
                raise MissingCellError(row, len(row_cells))
            elif len(row_cells) > self.columns:
                raise MissingCellError(0, self.columns)
