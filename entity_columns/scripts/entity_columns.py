"""
The ``entity-columns`` command renders a JSON file of entity records as HTML
tables laid out in columns.

.. highlight:: bash

Basic usage
===========

.. code:: text

    $ entity-columns ENTITIES_JSON [OUTPUT_FILENAME]

The input must contain a JSON array of objects. If no output filename is
given, the input filename with the suffix replaced with '.html' is used.

Choosing what to display
========================

The ``--name-field``, ``--url-field`` and ``--thumbnail-field`` arguments name
the object keys holding each entity's name, link URL and thumbnail filename
respectively. Parts whose field is not given (or is missing from a particular
object) are not displayed.

Thumbnails are looked up in the folder given by ``--thumbnail-path`` beneath
``--web-root``, and may be scaled down to fit ``--max-thumbnail-width`` and
``--max-thumbnail-height``.

By default a complete HTML page is generated. Use ``--fragment`` or ``-f`` to
output just the tables.
"""

import sys

import json

import logging

from argparse import ArgumentParser

from pathlib import Path

from typing import Any, List, Mapping, Optional

from entity_columns import __version__

from entity_columns.config import EntityCallback, LayoutConfig, Order

from entity_columns.exceptions import ColumnizeError

from entity_columns.renderer.html import columnize_entities

from entity_columns.standalone_page import generate_standalone_page


logger = logging.getLogger(__name__)


def field_getter(field: Optional[str]) -> Optional[EntityCallback]:
    """
    Make an entity callback which returns the named field of a JSON object, or
    None when no field name is given.
    """
    if field is None:
        return None

    def get(entity: Mapping[str, Any]) -> Optional[str]:
        value = entity.get(field)
        return None if value is None else str(value)

    return get


def main(argv: Optional[List[str]] = None) -> None:
    parser = ArgumentParser(
        description="""
            Render a JSON array of entities as HTML tables laid out in
            columns.
        """,
    )

    parser.add_argument(
        "entities",
        type=Path,
        help="""
            The filename of a JSON file containing an array of entity objects.
        """,
    )
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        default=None,
        help="""
            The output filename for the generated HTML file. Defaults to the
            input filename with the extension replaced with .html if no name is
            given.
        """,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="""
            Log debugging information.
        """,
    )

    layout_group = parser.add_argument_group("layout")
    layout_group.add_argument(
        "--columns",
        "-c",
        type=int,
        default=1,
        metavar="N",
        help="""
            Number of columns to lay entities out in. Default: %(default)s.
        """,
    )
    layout_group.add_argument(
        "--top-to-down",
        "-t",
        action="store_const",
        const=Order.top_to_down,
        default=Order.left_to_right,
        dest="order",
        help="""
            Fill each column before moving onto the next rather than filling
            each row in turn.
        """,
    )

    fields_group = parser.add_argument_group("entity fields")
    for part in ["name", "url", "thumbnail"]:
        fields_group.add_argument(
            f"--{part}-field",
            metavar="KEY",
            default=None,
            help=f"""
                The object key holding each entity's {part}.
            """,
        )

    style_group = parser.add_argument_group("styling")
    for option, description in [
        ("table-class", "CSS class for each generated table."),
        ("table-id", "The id attribute of each generated table."),
        ("tr-class", "CSS class for table rows."),
        ("td-class", "CSS class for the cell enclosing each entity."),
        ("name-class", "CSS class for entity names."),
        ("url-class", "CSS class for entity links."),
        ("url-target", "The target attribute of entity links."),
        ("thumbnail-class", "CSS class for thumbnail images."),
        ("thumbnail-box-class", "CSS class for boxes enclosing thumbnails."),
    ]:
        style_group.add_argument(f"--{option}", default="", help=description)

    thumbnail_group = parser.add_argument_group("thumbnails")
    thumbnail_group.add_argument(
        "--thumbnail-path",
        default="",
        help="""
            Folder path, relative to the web root and without a trailing slash,
            where thumbnails are stored.
        """,
    )
    thumbnail_group.add_argument(
        "--web-root",
        default="",
        help="""
            Path of the web root, without a trailing slash. Used to locate
            thumbnail files.
        """,
    )
    thumbnail_group.add_argument(
        "--max-thumbnail-width",
        type=int,
        default=0,
        metavar="PIXELS",
        help="""
            Maximum thumbnail width. Default: unconstrained.
        """,
    )
    thumbnail_group.add_argument(
        "--max-thumbnail-height",
        type=int,
        default=0,
        metavar="PIXELS",
        help="""
            Maximum thumbnail height. Default: unconstrained.
        """,
    )
    thumbnail_group.add_argument(
        "--no-thumbnail-box",
        action="store_false",
        dest="draw_thumbnail_box",
        help="""
            Do not enclose thumbnails in a box sized to the maximum thumbnail
            dimensions.
        """,
    )

    parser.add_argument(
        "--fragment",
        "-f",
        action="store_true",
        help="""
            Output only the generated tables rather than a complete HTML page.
        """,
    )
    parser.add_argument(
        "--title",
        default=None,
        help="""
            The page title. Defaults to the input filename (without its
            extension).
        """,
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        with args.entities.open() as f:
            entities = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        sys.stderr.write(f"Could not read {args.entities}: {e}\n")
        sys.exit(1)

    if not isinstance(entities, list) or not all(
        isinstance(entity, dict) for entity in entities
    ):
        sys.stderr.write(
            f"{args.entities} does not contain a JSON array of objects.\n"
        )
        sys.exit(1)

    try:
        config = LayoutConfig(
            columns=args.columns,
            order=args.order,
            table_class=args.table_class,
            table_id=args.table_id,
            tr_class=args.tr_class,
            td_class=args.td_class,
            name_callback=field_getter(args.name_field),
            name_class=args.name_class,
            url_callback=field_getter(args.url_field),
            url_class=args.url_class,
            url_target=args.url_target,
            thumbnail_callback=field_getter(args.thumbnail_field),
            thumbnail_class=args.thumbnail_class,
            draw_thumbnail_box=args.draw_thumbnail_box,
            thumbnail_box_class=args.thumbnail_box_class,
            thumbnail_path=args.thumbnail_path,
            web_root=args.web_root,
            max_thumbnail_width=args.max_thumbnail_width,
            max_thumbnail_height=args.max_thumbnail_height,
        )
    except ColumnizeError as e:
        sys.stderr.write(f"{e}\n")
        sys.exit(1)

    if args.fragment:
        html = columnize_entities(entities, config)
    else:
        title = args.title if args.title is not None else args.entities.stem
        html = generate_standalone_page(entities, config, title)

    output = args.output
    if output is None:
        output = args.entities.with_suffix(".html")

    with output.open("w") as f:
        f.write(html)

    logger.info("Wrote %d entities to %s", len(entities), output)


if __name__ == "__main__":
    main()
