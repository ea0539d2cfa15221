import pytest

from typing import List

from entity_columns.config import Order

from entity_columns.renderer.table import Table, Cell

from entity_columns.renderer.entities_to_table import (
    effective_columns,
    entity_index,
    entities_to_table,
    entities_to_tables,
)


def rows_of(table: Table[str]) -> List[List[str]]:
    return [[cell.value for cell in row_cells] for row_cells in table.cells]


@pytest.mark.parametrize(
    "entity_count, columns, exp",
    [
        (8, 3, 3),
        (3, 3, 3),
        (2, 3, 2),
        (1, 5, 1),
        (10, 1, 1),
    ],
)
def test_effective_columns(entity_count: int, columns: int, exp: int) -> None:
    assert effective_columns(entity_count, columns) == exp


class TestEntityIndex:
    def test_left_to_right(self) -> None:
        # 2 rows of 3 columns
        assert [
            [entity_index(row, column, 3, 2, Order.left_to_right) for column in range(3)]
            for row in range(2)
        ] == [[0, 1, 2], [3, 4, 5]]

    def test_top_to_down(self) -> None:
        # 2 rows of 3 columns
        assert [
            [entity_index(row, column, 3, 2, Order.top_to_down) for column in range(3)]
            for row in range(2)
        ] == [[0, 2, 4], [1, 3, 5]]


class TestEntitiesToTable:
    def test_exact_fit(self) -> None:
        table, remainder = entities_to_table(list("ABCDEF"), 3)
        assert table == Table(
            [
                [Cell("A"), Cell("B"), Cell("C")],
                [Cell("D"), Cell("E"), Cell("F")],
            ]
        )
        assert list(remainder) == []

    def test_remainder_returned_in_original_order(self) -> None:
        table, remainder = entities_to_table(list("ABCDEFGH"), 3, Order.top_to_down)
        assert rows_of(table) == [["A", "C", "E"], ["B", "D", "F"]]
        assert list(remainder) == ["G", "H"]

    def test_more_columns_than_entities(self) -> None:
        table, remainder = entities_to_table(list("AB"), 5)
        assert rows_of(table) == [["A", "B"]]
        assert list(remainder) == []


class TestEntitiesToTables:
    def test_empty(self) -> None:
        assert entities_to_tables([], 3) == []

    def test_left_to_right_with_remainder(self) -> None:
        tables = entities_to_tables(list("ABCDEFGH"), 3, Order.left_to_right)
        assert [rows_of(table) for table in tables] == [
            [["A", "B", "C"], ["D", "E", "F"]],
            [["G", "H"]],
        ]

    def test_top_to_down_with_remainder(self) -> None:
        tables = entities_to_tables(list("ABCDEFGH"), 3, Order.top_to_down)
        assert [rows_of(table) for table in tables] == [
            [["A", "C", "E"], ["B", "D", "F"]],
            [["G", "H"]],
        ]

    def test_no_remainder_table_when_evenly_divisible(self) -> None:
        tables = entities_to_tables(list("ABCDEF"), 2, Order.top_to_down)
        assert [rows_of(table) for table in tables] == [
            [["A", "D"], ["B", "E"], ["C", "F"]],
        ]

    def test_more_columns_than_entities_is_a_single_row(self) -> None:
        tables = entities_to_tables(list("ABC"), 10)
        assert [rows_of(table) for table in tables] == [[["A", "B", "C"]]]

    def test_single_column(self) -> None:
        tables = entities_to_tables(list("ABC"))
        assert [rows_of(table) for table in tables] == [[["A"], ["B"], ["C"]]]

    @pytest.mark.parametrize("order", list(Order))
    @pytest.mark.parametrize("columns", range(1, 8))
    @pytest.mark.parametrize("entity_count", range(1, 20))
    def test_every_entity_placed_exactly_once(
        self, entity_count: int, columns: int, order: Order
    ) -> None:
        entities = list(range(entity_count))
        tables = entities_to_tables(entities, columns, order)

        placed = [value for table in tables for value in table.values()]
        assert sorted(placed) == entities

        # Main grid is complete and of the expected size
        clamped = min(columns, entity_count)
        main = tables[0]
        assert main.columns == clamped
        assert main.rows == entity_count // clamped
        assert main.rows * main.columns == (entity_count // clamped) * clamped

        # At most one (single row) remainder table
        remainder = entity_count % clamped
        if remainder == 0:
            assert len(tables) == 1
        else:
            assert len(tables) == 2
            assert tables[1].rows == 1
            assert tables[1].columns == remainder
            assert tables[1].values() == entities[-remainder:]

        # Left-to-right order preserves the entity order when read in raster
        # order
        if order is Order.left_to_right:
            assert placed == entities
