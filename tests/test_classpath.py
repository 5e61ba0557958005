from pathlib import Path

from pybuildj.classpath import compose_classpath, runtime_classpath
from pybuildj.types import PATH_SEPARATOR


def test_local_before_external():
    assert (
        compose_classpath([Path("A.jar"), Path("B.jar")], [Path("/ext/C.jar")])
        == f"lib/A.jar{PATH_SEPARATOR}lib/B.jar{PATH_SEPARATOR}/ext/C.jar{PATH_SEPARATOR}"
    )


def test_windows_separator():
    assert (
        compose_classpath([Path("A.jar")], [Path("C.jar")], separator=";")
        == "lib/A.jar;C.jar;"
    )


def test_nested_local_library():
    assert compose_classpath([Path("sub", "D.jar")], [], separator=":") == "lib/sub/D.jar:"


def test_empty_libraries():
    assert compose_classpath([], []) == ""


def test_runtime_classpath():
    assert runtime_classpath("bin", "lib/A.jar:", separator=":") == "bin:lib/A.jar:"
    assert runtime_classpath("bin", "", separator=":") == "bin:"
