from __future__ import annotations

from typing import Sequence

"""Column alignment for batches of rows.

Every column, including the last one in a row, is right-padded to the widest
value seen in that column across the batch. Generated output relies on this
exact padding, so trailing whitespace is never trimmed here.
"""

Row = Sequence["str | None"]


def column_widths(rows: Sequence[Row]) -> list[int]:
    """Widest value per column index; `None` counts as zero width."""

    widths: list[int] = []
    for columns in rows:
        for i, value in enumerate(columns):
            width = 0 if value is None else len(value)
            if i >= len(widths):
                widths.append(width)
            elif width > widths[i]:
                widths[i] = width
    return widths


def align_rows(rows: Sequence[Row]) -> list[str]:
    widths = column_widths(rows)
    aligned: list[str] = []
    for columns in rows:
        parts = [("" if value is None else value).ljust(widths[i]) for i, value in enumerate(columns)]
        aligned.append("".join(parts))
    return aligned
