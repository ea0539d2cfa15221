"""
Generates a stand alone HTML page containing a set of entities laid out in
columns.
"""

from typing import Any, Sequence

from pathlib import Path

from entity_columns import __version__

from entity_columns.config import LayoutConfig

from entity_columns.renderer.html import columnize_entities

from entity_columns.templates import standalone_page_template

from entity_columns.thumbnail import FileExists, ImageProbe, probe_image


def generate_standalone_page(
    entities: Sequence[Any],
    config: LayoutConfig = LayoutConfig(),
    title: str = "Entities",
    image_probe: ImageProbe = probe_image,
    file_exists: FileExists = Path.is_file,
) -> str:
    """
    Generate a standalone page with the entities rendered as tables.

    Parameters
    ==========
    entities : [entity, ...]
        The entities to display.
    config : LayoutConfig
        The layout and rendering options.
    title : str
        The page title. This is HTML-escaped.
    image_probe, file_exists
        Used to read thumbnail dimensions. See
        :py:func:`entity_columns.renderer.html.columnize_entities`.
    """
    return standalone_page_template.render(
        title=title,
        version=__version__,
        body=columnize_entities(entities, config, image_probe, file_exists),
    )
