from __future__ import annotations


class InvalidIndentation(ValueError):
    """Raised when a dedent would take a builder below depth zero.

    This always points at mismatched indent/dedent calls in the generator
    driving the builder; the builder's depth is left untouched.
    """

    def __init__(self, depth: int) -> None:
        super().__init__(f"Local indent cannot be less than zero (current depth: {depth})")
        self.depth = depth
