"""
This module implements entity-to-HTML conversion in the following routine:

.. autofunction:: columnize_entities

Generated markup
================

Each :py:class:`~entity_columns.renderer.table.Table` produced by
:py:func:`~entity_columns.renderer.entities_to_table.entities_to_tables` is
rendered as a full-width ``<table>``. All cells within a table have the same
percentage width. When the entities do not divide evenly into the requested
number of columns, the remainder is rendered as a second ``<table>`` directly
after the first.

Unless an :py:attr:`~entity_columns.config.LayoutConfig.entity_callback` is
given, each cell contains, in order:

* A thumbnail ``<img>``, optionally enclosed in a 'box': a centred single-cell
  ``<table>`` sized to the maximum thumbnail dimensions.
* The entity name in a ``<div>``, enclosed in an ``<a>`` linking to the
  entity's URL.

Each part is omitted when the corresponding callback is not configured (or
returns None).

CSS classes, ids and link targets are taken from the
:py:class:`~entity_columns.config.LayoutConfig`. Attributes whose configured
value is empty are omitted.

.. note::

    Names, URLs and the output of the entity callback are inserted verbatim
    and may therefore contain HTML. Callers are responsible for escaping them
    where required.
"""

from typing import Any, Dict, Optional, Sequence

from textwrap import indent

from pathlib import Path

from xml.sax.saxutils import quoteattr

from entity_columns.config import LayoutConfig

from entity_columns.number_formatting import format_number

from entity_columns.renderer.table import Table, Cell

from entity_columns.renderer.entities_to_table import entities_to_tables

from entity_columns.thumbnail import (
    FileExists,
    ImageProbe,
    constrain_size,
    load_thumbnail,
    probe_image,
)


def t(
    tag: str, body: Optional[str] = None, *, indent_body: bool = True, **attrs: str
) -> str:
    """
    A simple utility function for generating HTML tags.

    Examples::

        >>> t("foo")
        '<foo />'
        >>> t("img", src="file.png")
        '<img src="file.png"/>'
        >>> t("a", "Click here", href="elsewhere.html")
        '<a href="elsewhere.html">Click here</a>'
        >>> t("div", "Hiya", class_="fancy")
        '<div class="fancy">Hiya</div>'

    Note that trailing underscores (``_``) are trimmed from attribute names.
    Multi-line bodies are placed on their own lines and indented unless
    ``indent_body`` is False, in which case the body is inserted verbatim.
    """

    attrs_str = " ".join(
        name.rstrip("_") + "=" + quoteattr(value) for name, value in attrs.items()
    )

    if body is None:
        return f"<{tag} {attrs_str}/>"
    else:
        if indent_body and "\n" in body:
            body = "\n" + indent(body, "  ").rstrip() + "\n"
        return f"<{tag}{(' ' + attrs_str).rstrip()}>{body}</{tag}>"


def non_empty(**attrs: str) -> Dict[str, str]:
    """Filter out attributes with empty values."""
    return {name: value for name, value in attrs.items() if value}


def render_thumbnail(
    filename: str,
    config: LayoutConfig,
    image_probe: ImageProbe = probe_image,
    file_exists: FileExists = Path.is_file,
) -> str:
    """
    Render the thumbnail for an entity whose thumbnail has the given filename.
    When the file is missing or unreadable no <img> is emitted, though the
    (empty) box is still drawn when enabled.
    """
    img = ""
    src = f"{config.thumbnail_path}/{filename}"
    info = load_thumbnail(Path(config.web_root + src), image_probe, file_exists)
    if info is not None:
        width, height = constrain_size(
            info.width,
            info.height,
            config.max_thumbnail_width,
            config.max_thumbnail_height,
        )
        img = t(
            "img",
            **non_empty(class_=config.thumbnail_class),
            src=src,
            **non_empty(
                width=format_number(width) if config.max_thumbnail_width else "",
                height=format_number(height) if config.max_thumbnail_height else "",
            ),
        )

    if not config.draw_thumbnail_box:
        return img

    return t(
        "table",
        t(
            "tr",
            t(
                "td",
                img,
                **non_empty(
                    class_=config.thumbnail_box_class,
                    width=str(config.max_thumbnail_width or ""),
                    height=str(config.max_thumbnail_height or ""),
                ),
                align="center",
                valign="middle",
            ),
        ),
        align="center",
        cellspacing="0",
        cellpadding="0",
    )


def render_entity(
    entity: Any,
    config: LayoutConfig,
    image_probe: ImageProbe = probe_image,
    file_exists: FileExists = Path.is_file,
) -> str:
    """
    Render the body of the cell containing a single entity.

    Caller-supplied text (entity callback output and names) is never
    re-indented.
    """
    if config.entity_callback is not None:
        return config.entity_callback(entity) or ""

    url = config.url_callback(entity) if config.url_callback is not None else None
    name = config.name_callback(entity) if config.name_callback is not None else None

    parts = []

    thumbnail = (
        config.thumbnail_callback(entity)
        if config.thumbnail_callback is not None
        else None
    )
    if thumbnail is not None:
        parts.append(render_thumbnail(thumbnail, config, image_probe, file_exists))

    name_html = ""
    if name is not None:
        name_html = t(
            "div", name, indent_body=False, **non_empty(class_=config.name_class)
        )

    if url is not None:
        parts.append(
            t(
                "a",
                name_html,
                indent_body=False,
                **non_empty(class_=config.url_class, target=config.url_target),
                href=url,
            )
        )
    else:
        parts.append(name_html)

    return "\n".join(part for part in parts if part)


def render_cell(
    cell: Cell[Any],
    width: float,
    config: LayoutConfig,
    image_probe: ImageProbe = probe_image,
    file_exists: FileExists = Path.is_file,
) -> str:
    """
    Render a table cell containing an entity. The ``width`` is given as a
    percentage.
    """
    return t(
        "td",
        render_entity(cell.value, config, image_probe, file_exists),
        indent_body=False,
        **non_empty(class_=config.td_class),
        width=f"{format_number(width)}%",
    )


def render_table(
    table: Table[Any],
    config: LayoutConfig,
    image_probe: ImageProbe = probe_image,
    file_exists: FileExists = Path.is_file,
) -> str:
    """
    Renders a table of entities as a HTML ``<table>`` whose cells all have
    equal width.

    Rows and cells are placed on their own lines but are not indented since
    cells may contain whitespace-sensitive caller markup (e.g. ``<pre>``).
    """
    width = 100 / table.columns
    rows = [
        t(
            "tr",
            "\n"
            + "\n".join(
                render_cell(cell, width, config, image_probe, file_exists)
                for cell in row_cells
            )
            + "\n",
            indent_body=False,
            **non_empty(class_=config.tr_class),
        )
        for row_cells in table.cells
    ]
    return t(
        "table",
        "\n" + "\n".join(rows) + "\n",
        indent_body=False,
        **non_empty(id=config.table_id, class_=config.table_class),
        width="100%",
    )


def columnize_entities(
    entities: Sequence[Any],
    config: LayoutConfig = LayoutConfig(),
    image_probe: ImageProbe = probe_image,
    file_exists: FileExists = Path.is_file,
) -> str:
    """
    Render a sequence of entities as HTML tables with (up to)
    :py:attr:`~entity_columns.config.LayoutConfig.columns` columns.

    Returns an empty string when no entities are given.

    Cell widths are percentages rounded to three decimal places (see
    :py:func:`~entity_columns.number_formatting.format_number`), so for column
    counts which do not divide 100 evenly the widths may sum to slightly more
    or less than 100% (e.g. seven columns of ``14.286%``). Browsers normalise
    such widths when laying out the table.

    The ``image_probe`` and ``file_exists`` functions are used to read the
    dimensions of thumbnail files (see :py:mod:`entity_columns.thumbnail`).
    """
    return "\n".join(
        render_table(table, config, image_probe, file_exists)
        for table in entities_to_tables(entities, config.columns, config.order)
    )
