from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Sequence

from .columns import align_rows
from .errors import InvalidIndentation
from .fragments import Fragment, Line, Nested

logger = logging.getLogger(__name__)

DEFAULT_INDENT = "   "
SEP = "\n"


class IndentedDocumentBuilder:
    """
    Indentation-aware text builder made of committed fragments.

    Lines, aligned row batches and nested insertion points are kept in order
    and only turned into text by `render`. Raw text and row batches are
    buffered until the next commit so a line can be built across several
    calls and a batch of rows can share column widths.

    Not thread-safe: a builder (and the tree under it) must only be mutated
    from one thread at a time.
    """

    def __init__(self, indent_unit: str | None = None) -> None:
        self.indent_unit: str = DEFAULT_INDENT if indent_unit is None else indent_unit
        self._depth: int = 0
        self._num_lines: int = 0
        self._text: list[str] = []
        self._dirty: bool = False
        self._rows: list[tuple[str | None, ...]] = []
        self._content: list[Fragment] = []
        self._generate: bool = True
        self._generate_if_empty: bool = True

    @classmethod
    def _child(cls, indent_unit: str, depth: int) -> IndentedDocumentBuilder:
        child = cls(indent_unit)
        child._depth = max(depth, 0)
        return child

    # ---------- configuration ----------

    @property
    def indent_depth(self) -> int:
        return self._depth

    @property
    def generate(self) -> bool:
        return self._generate

    @generate.setter
    def generate(self, value: bool) -> None:
        self._generate = bool(value)

    @property
    def generate_if_empty(self) -> bool:
        return self._generate_if_empty

    @generate_if_empty.setter
    def generate_if_empty(self, value: bool) -> None:
        self._generate_if_empty = bool(value)

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        return tuple(self._content)

    # ---------- indentation ----------

    def indent_right(self) -> None:
        self._depth += 1

    def indent_left(self) -> None:
        if self._depth == 0:
            logger.debug("Rejected dedent at depth 0")
            raise InvalidIndentation(self._depth)
        self._depth -= 1

    @contextmanager
    def indented(self) -> Iterator[IndentedDocumentBuilder]:
        self.indent_right()
        try:
            yield self
        finally:
            self.indent_left()

    # ---------- appending ----------

    def append_line(self, text: str = "") -> IndentedDocumentBuilder:
        self._num_lines += 1
        self._text.append(text)
        self._dirty = True
        self.flush()
        return self

    def append_lines(self, text: str) -> IndentedDocumentBuilder:
        for ln in text.splitlines():
            self.append_line(ln)
        return self

    def append_raw(self, text: str) -> IndentedDocumentBuilder:
        self._num_lines += 1
        self._text.append(text)
        self._dirty = True
        return self

    def append_row(self, *columns: str | None | Sequence[str | None]) -> IndentedDocumentBuilder:
        """
        Queue a row whose columns are aligned with the rest of its batch.

        Columns are given either as separate arguments or as one sequence:
        `append_row("a", "b")` and `append_row(["a", "b"])` are the same row.
        """
        if len(columns) == 1 and columns[0] is not None and not isinstance(columns[0], str):
            columns = tuple(columns[0])
        self._num_lines += 1
        self._rows.append(tuple(columns))
        self._dirty = True
        return self

    def append_line_then_indent_right(self, text: str) -> IndentedDocumentBuilder:
        self.append_line(text)
        self.indent_right()
        return self

    def append_line_after_indent_left(self, text: str) -> IndentedDocumentBuilder:
        self.flush_rows()
        self.indent_left()
        self.append_line(text)
        return self

    def append_line_surrounded_by_indent_change(self, text: str) -> IndentedDocumentBuilder:
        self.flush_rows()
        self.indent_left()
        self.append_line(text)
        self.indent_right()
        return self

    def create_nested_insertion_point(self) -> IndentedDocumentBuilder:
        """
        Reserve the current position for content written later.

        Everything appended so far is committed first, so whatever goes into
        the returned child renders here, before anything the parent receives
        afterwards.
        """
        self.flush()
        child = self._child(self.indent_unit, self._depth)
        self._content.append(Nested(child))
        self._num_lines += 1
        logger.debug("Created insertion point at depth %d (fragment #%d)", self._depth, len(self._content))
        return child

    # ---------- committing ----------

    def flush_rows(self) -> None:
        if not self._rows:
            return
        logger.debug("Aligning %d row(s) at depth %d", len(self._rows), self._depth)
        for text in align_rows(self._rows):
            self._content.append(Line(text, self._depth))
        self._rows.clear()

    def flush(self) -> None:
        """
        Commit all pending state: the row batch first, then the text buffer.

        Once anything was appended since the last commit the text buffer
        becomes a line even when empty, so a batch of rows flushed here is
        followed by one blank line.
        """
        self.flush_rows()
        if self._dirty:
            self._content.append(Line("".join(self._text), self._depth))
            self._text.clear()
            self._dirty = False

    @property
    def has_pending(self) -> bool:
        return self._dirty

    # ---------- queries ----------

    def is_empty(self) -> bool:
        return self._num_lines == 0

    def is_body_empty(self) -> bool:
        return not self._content and not "".join(self._text)

    # ---------- rendering ----------

    def render(self, ambient_depth: int = 0) -> str:
        if self.has_pending:
            self.flush()
        # Sections flagged off (or empty and flagged to skip) leave no trace in the parent.
        if not self._generate or (not self._generate_if_empty and self.is_body_empty()):
            return ""
        out: list[str] = []
        for item in self._content:
            if isinstance(item, Line):
                out.append(self.indent_unit * (ambient_depth + item.depth))
                out.append(item.text)
                out.append(SEP)
            elif isinstance(item, Nested):
                out.append(item.child.render(ambient_depth))
            else:
                raise TypeError(f"Unknown fragment: {item!r}")
        return "".join(out)

    def __str__(self) -> str:
        return self.render(0)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(depth={self._depth}, fragments={len(self._content)}, "
            f"pending={self.has_pending})"
        )
