from .builder import IndentedDocumentBuilder, DEFAULT_INDENT
from .columns import align_rows, column_widths
from .errors import InvalidIndentation
from .fragments import DocumentItem, Fragment, Line, Nested
from .source import (
    PyModule, PyClass, PyFunction, PyField, PyParameter, PyImport, PyStatement,
    PyAssign, PyReturn, PyCall, PyIf, PyFor, PyPass,
)

__all__ = [
    # builder
    "IndentedDocumentBuilder", "DEFAULT_INDENT", "InvalidIndentation",
    "DocumentItem", "Fragment", "Line", "Nested",
    # columns
    "align_rows", "column_widths",
    # source model
    "PyModule", "PyClass", "PyFunction", "PyField", "PyParameter", "PyImport", "PyStatement",
    "PyAssign", "PyReturn", "PyCall", "PyIf", "PyFor", "PyPass",
]
