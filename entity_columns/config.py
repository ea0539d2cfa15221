"""
All formatting options are held in a single immutable value object:

.. autoclass:: LayoutConfig
    :members:

The order in which entities are placed into the grid is given by:

.. autoclass:: Order
    :members:
"""

from typing import Any, Callable, Optional

from dataclasses import dataclass

from enum import Enum, auto

from entity_columns.exceptions import (
    InvalidColumnCountError,
    InvalidThumbnailConstraintError,
)


EntityCallback = Callable[[Any], Optional[str]]
"""
A caller-supplied function which is given an entity and returns a string (or
None when the entity has no value for that part).
"""


class Order(Enum):
    left_to_right = auto()
    """
    Fill each row before moving onto the next (row-major). For example, eight
    entities in three columns::

        1   2   3
        4   5   6
          7   8
    """

    top_to_down = auto()
    """
    Fill each column before moving onto the next (column-major). For example,
    eight entities in three columns::

        1   3   5
        2   4   6
          7   8
    """


@dataclass(frozen=True)
class LayoutConfig:
    """
    Options controlling how entities are laid out and rendered.

    All paths should be given *without* a trailing slash.
    """

    columns: int = 1
    """
    Number of columns to split entities into. When fewer entities than columns
    are given, the column count is reduced to the number of entities.
    """

    order: Order = Order.left_to_right
    """The order in which entities fill the grid."""

    table_class: str = ""
    table_id: str = ""
    tr_class: str = ""
    td_class: str = ""
    """
    CSS class for each generated ``<table>``, the ``id`` attribute of the
    ``<table>`` and the CSS classes for the ``<tr>`` and ``<td>`` elements
    enclosing each entity.
    """

    entity_callback: Optional[EntityCallback] = None
    """
    When given, takes an entity and returns the complete HTML for that entity's
    cell. The name, url and thumbnail options are then not used.
    """

    name_callback: Optional[EntityCallback] = None
    name_class: str = ""
    """Returns the name for an entity and the CSS class of its ``<div>``."""

    url_callback: Optional[EntityCallback] = None
    url_class: str = ""
    url_target: str = ""
    """
    Returns the URL the entity's name is linked to, the CSS class of the
    ``<a>`` and its ``target`` attribute.
    """

    thumbnail_callback: Optional[EntityCallback] = None
    """Returns the filename of an entity's thumbnail image."""

    thumbnail_class: str = ""
    """CSS class for the thumbnail ``<img>``."""

    draw_thumbnail_box: bool = True
    thumbnail_box_class: str = ""
    """
    Whether to enclose the thumbnail in a box (a centred single-cell table)
    and the CSS class of the box's ``<td>``. The box is drawn even when an
    entity has no thumbnail.
    """

    thumbnail_path: str = ""
    """Folder path, relative to the web root, where thumbnails are stored."""

    web_root: str = ""
    """Absolute path of the web root. Used to locate thumbnail files."""

    max_thumbnail_width: int = 0
    max_thumbnail_height: int = 0
    """
    Maximum thumbnail dimensions in pixels. Larger thumbnails are scaled down,
    preserving their aspect ratio. When zero, the dimension is unconstrained
    and the corresponding ``width`` or ``height`` attribute is not emitted.
    """

    def __post_init__(self) -> None:
        if self.columns < 1:
            raise InvalidColumnCountError(
                f"At least one column is required (got {self.columns})."
            )
        for name in ("max_thumbnail_width", "max_thumbnail_height"):
            if getattr(self, name) < 0:
                raise InvalidThumbnailConstraintError(
                    f"{name} must not be negative (got {getattr(self, name)})."
                )
