"""
The following routines place a sequence of entities into one or more
:py:class:`~entity_columns.renderer.table.Table` grids.

.. autofunction:: entities_to_tables

Each table is a complete rectangle. When the number of entities is not a
multiple of the column count, the entities left over after the last complete
row (the 'remainder') are laid out as a further table whose column count is
the number of leftover entities. When rendered at full width, this has the
effect of centring the remainder beneath the main grid::

    1   2   3
    4   5   6
      7   8

The individual steps are exposed as:

.. autofunction:: effective_columns

.. autofunction:: entity_index

.. autofunction:: entities_to_table
"""

import logging

from typing import List, Sequence, Tuple, TypeVar

from entity_columns.config import Order

from entity_columns.renderer.table import Cell, Table


logger = logging.getLogger(__name__)

T = TypeVar("T")


def effective_columns(entity_count: int, columns: int) -> int:
    """
    The number of columns actually used to lay out ``entity_count`` entities
    when ``columns`` were requested: there is no point displaying two entities
    in three columns.
    """
    return min(columns, entity_count)


def entity_index(row: int, column: int, columns: int, rows: int, order: Order) -> int:
    """
    Get the index of the entity displayed at the given row and column of a
    complete ``rows`` by ``columns`` grid.
    """
    if order is Order.left_to_right:
        return (row * columns) + column
    elif order is Order.top_to_down:
        return (column * rows) + row
    else:
        raise NotImplementedError(order)


def entities_to_table(
    entities: Sequence[T], columns: int, order: Order = Order.left_to_right
) -> Tuple[Table[T], Sequence[T]]:
    """
    Lay out as many of the provided entities as fit into complete rows of the
    (clamped) column count.

    Returns the table along with the leftover entities (in their original
    order) which did not fill a complete row. The entity sequence must not be
    empty.
    """
    columns = effective_columns(len(entities), columns)
    rows = len(entities) // columns

    table = Table(
        [
            [
                Cell(entities[entity_index(row, column, columns, rows, order)])
                for column in range(columns)
            ]
            for row in range(rows)
        ]
    )

    return table, entities[rows * columns :]


def entities_to_tables(
    entities: Sequence[T], columns: int = 1, order: Order = Order.left_to_right
) -> List[Table[T]]:
    """
    Lay out all of the provided entities as a list of tables: the main grid
    followed by one single-row table for each remainder.

    An empty list is returned when no entities are given.
    """
    tables: List[Table[T]] = []

    while entities:
        table, entities = entities_to_table(entities, columns, order)
        tables.append(table)
        if entities:
            logger.debug(
                "%d entities left over after %d row(s) of %d column(s)",
                len(entities),
                table.rows,
                table.columns,
            )
        columns = len(entities)

    return tables
