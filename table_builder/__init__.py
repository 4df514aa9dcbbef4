"""
A builder for simple HTML tables consisting of an optional header row followed
by any number of data rows.

:py:mod:`table_builder.builder`: Table data model
=================================================

.. automodule:: table_builder.builder

:py:mod:`table_builder.html`: HTML rendering
============================================

.. automodule:: table_builder.html

:py:mod:`table_builder.exceptions`: Exceptions
==============================================

.. automodule:: table_builder.exceptions
    :members:
"""

__version__ = "1.0"

from table_builder.exceptions import (
    TableBuilderError,
    InvalidKindError,
    InvalidArgumentError,
)

from table_builder.builder import Kind, Cell, Row, Table

__all__ = [
    "Kind",
    "Cell",
    "Row",
    "Table",
    "TableBuilderError",
    "InvalidKindError",
    "InvalidArgumentError",
]
