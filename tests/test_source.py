import libcst as cst
import pytest

from indentdoc import (
    PyAssign,
    PyCall,
    PyClass,
    PyField,
    PyFor,
    PyFunction,
    PyIf,
    PyImport,
    PyModule,
    PyParameter,
    PyReturn,
)


def test_function_module() -> None:
    mod = PyModule(
        imports=[PyImport(module="os")],
        functions=[PyFunction("f", [PyParameter("x", "int")], "int", body=[PyReturn("x + 1")])],
    )
    assert mod.to_code() == "import os\n\ndef f(x: int) -> int:\n    return x + 1\n\n"


def test_module_without_imports_has_no_import_block() -> None:
    assert PyModule(trailer=[PyAssign("x", "1")]).to_code() == "x = 1\n"


def test_required_imports_land_in_reserved_section() -> None:
    point = PyClass(
        "Point",
        decorators=["dataclass"],
        fields=[PyField("x", "int"), PyField("label", "str", '""')],
        requires=[PyImport(from_module="dataclasses", names=("dataclass",))],
    )
    code = PyModule(classes=[point]).to_code()
    assert code == (
        "from dataclasses import dataclass\n"
        "\n"
        "@dataclass\n"
        "class Point:\n"
        "    x:     int \n"
        '    label: str = ""\n'
        "\n"
    )


def test_imports_are_deduplicated() -> None:
    fn = PyFunction("g", requires=[PyImport(module="os")], body=[PyCall("os.getcwd")])
    mod = PyModule(imports=[PyImport(module="os"), PyImport(module="sys", alias="system")], functions=[fn])
    code = mod.to_code()
    assert code == "import os\nimport sys as system\n\ndef g():\n    os.getcwd()\n\n"


def test_if_else_uses_block_transitions() -> None:
    fn = PyFunction("sign", [PyParameter("n")], body=[PyIf("n < 0", [PyReturn("-1")], [PyReturn("1")])])
    assert PyModule(functions=[fn]).to_code() == (
        "def sign(n):\n"
        "    if n < 0:\n"
        "        return -1\n"
        "    else:\n"
        "        return 1\n"
        "\n"
    )


def test_import_without_module_is_rejected() -> None:
    with pytest.raises(ValueError):
        PyModule(imports=[PyImport()]).to_code()


def test_generated_module_parses() -> None:
    cls = PyClass(
        "Counter",
        docstring="Counts things.",
        fields=[PyField("total", "int", "0"), PyField("name", "str", "'c'")],
        methods=[
            PyFunction(
                "add",
                [PyParameter("self"), PyParameter("items", "list[int]"), PyParameter("scale", "int", "1")],
                "None",
                docstring="Add items.",
                body=[
                    PyFor("item", "items", [
                        PyIf("item > 0", [PyAssign("self.total", "self.total + item * scale")]),
                    ]),
                    PyCall("logger.debug", ["'added %d'", "len(items)"]),
                ],
                requires=[PyImport(module="logging")],
            ),
            PyFunction("noop", [PyParameter("self")]),
        ],
    )
    mod = PyModule(
        docstring="Generated module.",
        classes=[cls],
        trailer=[PyAssign("logger", "logging.getLogger(__name__)")],
    )
    code = mod.to_code()
    tree = cst.parse_module(code)
    assert tree.code == code
    assert "import logging\n" in code
    assert "    total: int = 0  \n" in code
    assert "        pass\n" in code
    # rendering again yields identical output
    assert mod.to_code() == code


def test_rendering_leaves_imports_unchanged() -> None:
    fn = PyFunction("g", requires=[PyImport(module="os")], body=[PyCall("os.getcwd")])
    mod = PyModule(functions=[fn])
    mod.add_import(PyImport(module="sys"))
    mod.add_import(PyImport(module="sys"))
    first = mod.to_code()
    assert mod.imports == [PyImport(module="sys")]
    assert first.startswith("import sys\nimport os\n\n")
    assert mod.to_code() == first
