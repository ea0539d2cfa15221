"""
Lay out a sequence of entities as HTML tables with a fixed number of columns.

.. autofunction:: entity_columns.renderer.html.columnize_entities
"""

__version__ = "1.0"

from entity_columns.config import LayoutConfig, Order
from entity_columns.renderer.html import columnize_entities

__all__ = [
    "LayoutConfig",
    "Order",
    "columnize_entities",
]
