"""
Entities are rendered into tabular form for display.

Table rendering is split into two parts. First the entities are placed into
an abstract tabular description and then secondly this is rendered into its
final form (i.e. HTML). This decomposition keeps the grid placement logic
independent of the markup generated for each entity.

The abstract table representation is defined in
:py:mod:`entity_columns.renderer.table`, the entity-to-table placement in
:py:mod:`entity_columns.renderer.entities_to_table` and finally, table-to-HTML
conversion in :py:mod:`entity_columns.renderer.html`

:py:mod:`entity_columns.renderer.table`: Abstract table description
===================================================================

.. automodule:: entity_columns.renderer.table

:py:mod:`entity_columns.renderer.entities_to_table`: Entity grid placement
==========================================================================

.. automodule:: entity_columns.renderer.entities_to_table

:py:mod:`entity_columns.renderer.html`: HTML Table Renderer
===========================================================

.. automodule:: entity_columns.renderer.html

"""
