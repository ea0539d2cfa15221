import pytest

from dataclasses import FrozenInstanceError, replace

from entity_columns.config import LayoutConfig, Order

from entity_columns.exceptions import (
    ColumnizeError,
    InvalidColumnCountError,
    InvalidThumbnailConstraintError,
)


class TestLayoutConfig:
    def test_defaults(self) -> None:
        config = LayoutConfig()
        assert config.columns == 1
        assert config.order is Order.left_to_right
        assert config.draw_thumbnail_box is True
        assert config.max_thumbnail_width == 0
        assert config.max_thumbnail_height == 0
        assert config.table_class == ""
        assert config.entity_callback is None
        assert config.name_callback is None
        assert config.url_callback is None
        assert config.thumbnail_callback is None

    def test_immutable(self) -> None:
        config = LayoutConfig()
        with pytest.raises(FrozenInstanceError):
            config.columns = 3  # type: ignore

    @pytest.mark.parametrize("columns", [0, -1])
    def test_invalid_column_count(self, columns: int) -> None:
        with pytest.raises(InvalidColumnCountError):
            LayoutConfig(columns=columns)

    def test_invalid_column_count_on_replace(self) -> None:
        with pytest.raises(InvalidColumnCountError):
            replace(LayoutConfig(columns=3), columns=0)

    @pytest.mark.parametrize(
        "kwargs",
        [{"max_thumbnail_width": -1}, {"max_thumbnail_height": -10}],
    )
    def test_invalid_thumbnail_constraint(self, kwargs: dict) -> None:
        with pytest.raises(InvalidThumbnailConstraintError):
            LayoutConfig(**kwargs)

    def test_errors_are_value_errors(self) -> None:
        assert issubclass(InvalidColumnCountError, ColumnizeError)
        assert issubclass(InvalidThumbnailConstraintError, ColumnizeError)
        assert issubclass(ColumnizeError, ValueError)
