from __future__ import annotations

import logging
from dataclasses import dataclass, field

"""Declarative Python source model rendered through IndentedDocumentBuilder.

A deliberately small typed model: enough to emit modules made of imports,
classes with annotated fields, functions and simple statements. Imports are
written into an insertion point reserved at the top of the module, so they
can still be collected while the body is being generated.
"""

from .builder import IndentedDocumentBuilder

logger = logging.getLogger(__name__)

PY_INDENT = "    "


# -----------------------------
# Imports
# -----------------------------

@dataclass(frozen=True)
class PyImport:
    module: str | None = None
    alias: str | None = None
    from_module: str | None = None
    names: tuple[str, ...] = ()

    def to_code(self) -> str:
        if self.from_module:
            if self.names:
                return f"from {self.from_module} import {', '.join(self.names)}"
            return f"from {self.from_module} import *"
        if not self.module:
            raise ValueError("PyImport needs either `module` or `from_module`")
        if self.alias:
            return f"import {self.module} as {self.alias}"
        return f"import {self.module}"


# -----------------------------
# Statements
# -----------------------------

@dataclass
class PyStatement:
    """Base class for statements."""
    def to_code(self, doc: IndentedDocumentBuilder) -> None:
        raise NotImplementedError


@dataclass
class PyPass(PyStatement):
    def to_code(self, doc: IndentedDocumentBuilder) -> None:
        doc.append_line("pass")


@dataclass
class PyAssign(PyStatement):
    target: str
    value: str
    def to_code(self, doc: IndentedDocumentBuilder) -> None:
        doc.append_line(f"{self.target} = {self.value}")


@dataclass
class PyReturn(PyStatement):
    value: str | None = None
    def to_code(self, doc: IndentedDocumentBuilder) -> None:
        doc.append_line("return" if self.value is None else f"return {self.value}")


@dataclass
class PyCall(PyStatement):
    func: str
    args: list[str] = field(default_factory=list)
    kwargs: dict[str, str] = field(default_factory=dict)

    def to_code(self, doc: IndentedDocumentBuilder) -> None:
        parts: list[str] = list(self.args)
        parts.extend(f"{k}={v}" for k, v in self.kwargs.items())
        doc.append_line(f"{self.func}({', '.join(parts)})")


def _emit_body(doc: IndentedDocumentBuilder, body: list[PyStatement]) -> None:
    if not body:
        doc.append_line("pass")
    for st in body:
        st.to_code(doc)


@dataclass
class PyIf(PyStatement):
    condition: str
    body: list[PyStatement] = field(default_factory=list)
    else_body: list[PyStatement] = field(default_factory=list)

    def to_code(self, doc: IndentedDocumentBuilder) -> None:
        doc.append_line_then_indent_right(f"if {self.condition}:")
        _emit_body(doc, self.body)
        if self.else_body:
            doc.append_line_surrounded_by_indent_change("else:")
            _emit_body(doc, self.else_body)
        doc.indent_left()


@dataclass
class PyFor(PyStatement):
    target: str
    iterable: str
    body: list[PyStatement] = field(default_factory=list)

    def to_code(self, doc: IndentedDocumentBuilder) -> None:
        doc.append_line(f"for {self.target} in {self.iterable}:")
        with doc.indented():
            _emit_body(doc, self.body)


# -----------------------------
# Definitions
# -----------------------------

def _emit_docstring(doc: IndentedDocumentBuilder, docstring: str) -> None:
    if not docstring:
        return
    doc.append_line('"""')
    doc.append_lines(docstring.strip())
    doc.append_line('"""')


@dataclass
class PyParameter:
    name: str
    annotation: str | None = None
    default: str | None = None

    def as_sig(self) -> str:
        s = self.name
        if self.annotation:
            s += f": {self.annotation}"
        if self.default is not None:
            s += f" = {self.default}" if self.annotation else f"={self.default}"
        return s


@dataclass
class PyField:
    """Annotated class attribute, emitted as one row of an aligned batch."""
    name: str
    annotation: str
    default: str | None = None

    def to_row(self) -> tuple[str | None, ...]:
        if self.default is None:
            return (f"{self.name}: ", self.annotation)
        return (f"{self.name}: ", f"{self.annotation} ", f"= {self.default}")


@dataclass
class PyFunction:
    name: str
    params: list[PyParameter] = field(default_factory=list)
    return_type: str | None = None
    docstring: str = ""
    body: list[PyStatement] = field(default_factory=list)
    decorators: list[str] = field(default_factory=list)
    requires: list[PyImport] = field(default_factory=list)

    def to_code(self, doc: IndentedDocumentBuilder) -> None:
        for deco in self.decorators:
            doc.append_line(f"@{deco}")
        head = f"def {self.name}({', '.join(p.as_sig() for p in self.params)})"
        if self.return_type:
            head += f" -> {self.return_type}"
        doc.append_line_then_indent_right(head + ":")
        _emit_docstring(doc, self.docstring)
        if self.body or not self.docstring:
            _emit_body(doc, self.body)
        doc.indent_left()


@dataclass
class PyClass:
    name: str
    bases: list[str] = field(default_factory=list)
    docstring: str = ""
    fields: list[PyField] = field(default_factory=list)
    methods: list[PyFunction] = field(default_factory=list)
    decorators: list[str] = field(default_factory=list)
    requires: list[PyImport] = field(default_factory=list)

    def to_code(self, doc: IndentedDocumentBuilder) -> None:
        for deco in self.decorators:
            doc.append_line(f"@{deco}")
        bases = f"({', '.join(self.bases)})" if self.bases else ""
        doc.append_line_then_indent_right(f"class {self.name}{bases}:")
        _emit_docstring(doc, self.docstring)
        for fld in self.fields:
            doc.append_row(*fld.to_row())
        for i, m in enumerate(self.methods):
            if i > 0 or self.fields or self.docstring:
                doc.append_line()
            m.to_code(doc)
        if not (self.methods or self.fields or self.docstring):
            doc.append_line("pass")
        doc.append_line_after_indent_left("")


@dataclass
class PyModule:
    docstring: str = ""
    imports: list[PyImport] = field(default_factory=list)
    classes: list[PyClass] = field(default_factory=list)
    functions: list[PyFunction] = field(default_factory=list)
    trailer: list[PyStatement] = field(default_factory=list)

    def add_import(self, imp: PyImport) -> None:
        if imp not in self.imports:
            self.imports.append(imp)

    # ----------- codegen ------------

    def to_code(self, indent_unit: str = PY_INDENT) -> str:
        doc = IndentedDocumentBuilder(indent_unit)
        _emit_docstring(doc, self.docstring)

        # reserved now, filled once every body had the chance to add imports
        import_section = doc.create_nested_insertion_point()
        import_section.generate_if_empty = False

        imports: list[PyImport] = list(self.imports)
        body = doc.create_nested_insertion_point()
        for cls in self.classes:
            cls.to_code(body)
            imports.extend(cls.requires)
            for m in cls.methods:
                imports.extend(m.requires)
        for fn in self.functions:
            fn.to_code(body)
            body.append_line()
            imports.extend(fn.requires)
        for st in self.trailer:
            st.to_code(body)

        seen: set[str] = set()
        for imp in imports:
            line = imp.to_code()
            if line not in seen:
                import_section.append_line(line)
                seen.add(line)
        if not import_section.is_empty():
            import_section.append_line()

        logger.debug(
            "Rendered module: %d import(s), %d class(es), %d function(s)",
            len(seen), len(self.classes), len(self.functions),
        )
        return doc.render()
