"""
This module implements :py:class:`~table_builder.builder.Table` to HTML
conversion in the following routines:

.. autofunction:: render_table

.. autofunction:: render_row

.. autofunction:: render_cell

The generated markup has the form::

    <table>
    <tr><th attr...>text</th>...</tr>
    <tr><td attr...>text</td>...</tr>
    ...
    </table>

where the header row is only present when at least one header cell was
created. Every line, including the last, ends with a newline.

.. warning::

    Neither cell text nor attributes are escaped or quoted: both are inserted
    verbatim. Callers rendering untrusted content must escape it first (e.g.
    using :py:func:`html.escape`).
"""

from typing import Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from table_builder.builder import Cell, Row, Table


def tag(name: str, body: str, attributes: Iterable[str] = ()) -> str:
    """
    A simple utility function for generating HTML tags with verbatim
    attributes.

    Examples::

        >>> tag("td", "")
        '<td></td>'
        >>> tag("td", "Alice", ['class="name"', "hidden"])
        '<td class="name" hidden>Alice</td>'
    """
    attributes_str = "".join(" " + attribute for attribute in attributes)
    return f"<{name}{attributes_str}>{body}</{name}>"


def render_cell(cell: "Cell") -> str:
    return tag(cell.kind.value, cell.value, cell.attributes)


def render_row(row: "Row") -> str:
    return tag("tr", "".join(render_cell(cell) for cell in row.cells))


def render_table(table: "Table") -> str:
    """
    Renders a table as HTML: the header row (if any) then the body rows, one
    per line.
    """
    lines = ["<table>"]

    if table.header is not None:
        lines.append(render_row(table.header))

    for row in table.rows:
        lines.append(render_row(row))

    lines.append("</table>")

    return "".join(line + "\n" for line in lines)
