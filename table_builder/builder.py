r"""
The table data model consists of a :py:class:`Table` which owns an optional
header :py:class:`Row` and any number of body :py:class:`Row`\ s, each of
which owns a sequence of :py:class:`Cell`\ s.

Tables are built up incrementally::

    >>> table = Table()
    >>> table.set_default_attributes(['class="hdr"'])
    >>> table.new_header_cell("Name")
    <th class="hdr">Name</th>
    >>> row = table.new_row()
    >>> row.new_cell("Alice").add_attribute('style="color: red"')
    <td style="color: red">Alice</td>
    >>> print(table, end="")
    <table>
    <tr><th class="hdr">Name</th></tr>
    <tr><td style="color: red">Alice</td></tr>
    </table>

Default attributes
==================

Both :py:class:`Row` and :py:class:`Table` hold a list of default attributes.
These are copied into each new cell at the moment it is created: changing a
default attribute list later only affects cells created after the change.

Table default attributes apply only to header cells created via
:py:meth:`Table.new_header_cell`. Body rows have their own, independent
default attribute lists.

.. autoclass:: Kind
    :members:

.. autoclass:: Cell
    :members:

.. autoclass:: Row
    :members:

.. autoclass:: Table
    :members:
"""

from typing import Iterable, Iterator, List, Optional, Union

from enum import Enum

from table_builder.exceptions import InvalidKindError, InvalidArgumentError

from table_builder.html import render_cell, render_row, render_table


class Kind(Enum):
    header = "th"
    """A header cell (or a row of header cells)."""

    data = "td"
    """A data cell (or a row of data cells)."""

    @classmethod
    def coerce(cls, kind: Union["Kind", str, None]) -> "Kind":
        """
        Return the :py:class:`Kind` for either a :py:class:`Kind` or its tag
        name (``"th"`` or ``"td"``). Raises :py:exc:`InvalidKindError`
        otherwise.
        """
        if isinstance(kind, Kind):
            return kind
        try:
            return cls(kind)
        except ValueError:
            raise InvalidKindError(f"Unexpected cell kind: {kind!r}")


def _copy_attributes(attributes: Optional[Iterable[str]]) -> List[str]:
    if attributes is None:
        raise InvalidArgumentError("Default attributes must not be None")
    return list(attributes)


class Cell:
    """A single ``<th>`` or ``<td>`` element."""

    value: str
    """The (unescaped) text contained in this cell."""

    attributes: List[str]
    """The attributes of this cell, inserted verbatim into the opening tag."""

    def __init__(self, kind: Union[Kind, str], value: Optional[str] = None) -> None:
        self._kind = Kind.coerce(kind)
        self.value = value if value is not None else ""
        self.attributes = []

    @property
    def kind(self) -> Kind:
        return self._kind

    def set_value(self, value: Optional[str]) -> "Cell":
        """Replace the text in this cell. Returns this cell."""
        self.value = value if value is not None else ""
        return self

    def add_attribute(self, attribute: str) -> "Cell":
        """
        Add an attribute (e.g. ``'class="foo"'``) to just this cell. Duplicates
        are kept. Returns this cell.
        """
        self.attributes.append(attribute)
        return self

    def clear_attributes(self) -> "Cell":
        """Remove every attribute from this cell. Returns this cell."""
        self.attributes.clear()
        return self

    def render(self) -> str:
        return render_cell(self)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return self.render()


class Row:
    """
    A ``<tr>`` containing cells of a single :py:class:`Kind`.

    Rows are normally obtained from :py:meth:`Table.new_row` rather than
    constructed directly.
    """

    cells: List[Cell]

    default_attributes: List[str]
    """
    Attributes added to each cell at the moment it is created by
    :py:meth:`new_cell`.
    """

    def __init__(
        self,
        kind: Union[Kind, str],
        default_attributes: Optional[Iterable[str]] = None,
    ) -> None:
        self._kind = Kind.coerce(kind)
        self.cells = []
        self.default_attributes = (
            list(default_attributes) if default_attributes is not None else []
        )

    @property
    def kind(self) -> Kind:
        return self._kind

    def new_cell(self, value: Optional[str] = None) -> Cell:
        """
        Append a new cell containing ``value`` with this row's current default
        attributes. Returns the new cell so further attributes may be added.
        """
        cell = Cell(self._kind, value)
        self.cells.append(cell)

        for attribute in self.default_attributes:
            cell.add_attribute(attribute)

        return cell

    def new_empty_cell(self) -> Cell:
        """Append a new cell with no text and none of the default attributes."""
        return self.new_cell("").clear_attributes()

    def set_default_attributes(
        self, default_attributes: Optional[Iterable[str]]
    ) -> None:
        """
        Replace the default attributes with a copy of the list given. Raises
        :py:exc:`InvalidArgumentError` if None is given.
        """
        self.default_attributes = _copy_attributes(default_attributes)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def render(self) -> str:
        return render_row(self)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return self.render()


class Table:
    """
    A ``<table>`` with an optional header row followed by any number of body
    rows.
    """

    header: Optional[Row]
    """
    The header row. None until the first call to :py:meth:`new_header_cell` or
    :py:meth:`new_empty_header_cell`, after which it is never replaced.
    """

    rows: List[Row]
    """The body rows, in the order they were created."""

    default_attributes: List[str]
    """Attributes added to each header cell at the moment it is created."""

    def __init__(self) -> None:
        self.header = None
        self.rows = []
        self.default_attributes = []

    @property
    def has_header(self) -> bool:
        return self.header is not None

    def new_header_cell(self, value: Optional[str] = None) -> Cell:
        """
        Add a column to the header row with the specified text, creating the
        header row if necessary. The table's default attributes are added to
        the new cell.
        """
        if self.header is None:
            self.header = Row(Kind.header)

        cell = self.header.new_cell(value)

        for attribute in self.default_attributes:
            cell.add_attribute(attribute)

        return cell

    def new_empty_header_cell(self) -> Cell:
        """Add a header cell with no text and no attributes at all."""
        return self.new_header_cell("").clear_attributes()

    def new_row(self) -> Row:
        """Append a new, empty body row."""
        row = Row(Kind.data)
        self.rows.append(row)
        return row

    def set_default_attributes(
        self, default_attributes: Optional[Iterable[str]]
    ) -> None:
        """
        Replace the default attributes for header cells (e.g. CSS classes or
        colours). Raises :py:exc:`InvalidArgumentError` if None is given, in
        which case the existing defaults are left unchanged.
        """
        self.default_attributes = _copy_attributes(default_attributes)

    def render(self) -> str:
        return render_table(self)

    def __str__(self) -> str:
        return self.render()
