import os

from pybuildj.cache import BuildState
from pybuildj.compiler import compile_sources, javac_command, select_sources
from pybuildj.context import BuildContext
from pybuildj.errors import CompilationFailed
from pybuildj.runner import ToolOutput
from pybuildj.types import PATH_SEPARATOR

from helpers import MAIN, FakeRunner, error, value, write


def _context(project, runner, **kwargs) -> BuildContext:
    return value(BuildContext.create(project, runner, **kwargs))


def test_javac_command(project, runner):
    main = write(project / "src" / "Main.java", MAIN)
    util = write(project / "src" / "app" / "Util.java")
    context = _context(project, runner)

    assert javac_command((main, util), "lib/A.jar:")(context) == (
        "javac",
        "-classpath",
        "lib/A.jar:",
        "-d",
        "bin",
        "src/Main.java",
        "src/app/Util.java",
    )


def test_javac_command_with_release(project, runner):
    main = write(project / "src" / "Main.java", MAIN)
    context = _context(project, runner, release="21")
    assert javac_command((main,), "")(context) == (
        "javac", "-classpath", "", "-d", "bin", "--release", "21", "src/Main.java",
    )


def test_all_sources_are_selected_by_default(tmp_path):
    old = write(tmp_path / "Old.java")
    new = write(tmp_path / "New.java")
    os.utime(old, (100, 100))
    os.utime(new, (300, 300))

    assert select_sources((old, new), BuildState(last_build=200), False) == (old, new)
    assert select_sources((old, new), BuildState(), True) == (old, new)


def test_incremental_selects_sources_changed_since_last_build(tmp_path):
    old = write(tmp_path / "Old.java")
    same = write(tmp_path / "Same.java")
    new = write(tmp_path / "New.java")
    os.utime(old, (100, 100))
    os.utime(same, (200, 200))
    os.utime(new, (300, 300))

    assert select_sources((old, same, new), BuildState(last_build=200), True) == (same, new)


def test_one_invocation_for_all_sources(project, runner):
    write(project / "src" / "Main.java", MAIN)
    write(project / "src" / "app" / "Util.java")
    write(project / "lib" / "A.jar", b"jar")

    post = value(compile_sources(_context(project, runner)))

    assert runner.executables == ["javac"]
    assert runner.calls[0][-2:] == ("src/Main.java", "src/app/Util.java")
    assert runner.calls[0][2] == f"lib/A.jar{PATH_SEPARATOR}"
    assert (project / "bin" / "app" / "Util.class").exists()
    assert post.previous == BuildState()
    assert post.state.last_build is not None


def test_no_sources_skips_the_compiler(project, runner):
    post = value(compile_sources(_context(project, runner)))
    assert runner.calls == []
    assert post.classes == frozenset()
    assert post.state.last_build is not None


def test_compiler_failure(project):
    write(project / "src" / "Main.java", MAIN)
    runner = FakeRunner(javac=ToolOutput(1, "", "Main.java:1: error: ';' expected"))

    e = error(compile_sources(_context(project, runner)))

    assert isinstance(e, CompilationFailed)
    assert e.returncode == 1
    assert "';' expected" in e.stderr
    assert "';' expected" in str(e)
    assert not (project / "bin" / "Main.class").exists()


def test_compiler_output_is_reported(project, capsys):
    write(project / "src" / "Main.java", MAIN)
    runner = FakeRunner(javac=ToolOutput(0, "", "Note: Main.java uses unchecked operations.\n"))

    value(compile_sources(_context(project, runner)))

    assert "uses unchecked operations" in capsys.readouterr().out


def test_incremental_compiles_against_previous_output(project, runner):
    old = write(project / "src" / "Old.java")
    new = write(project / "src" / "New.java")
    os.utime(old, (100, 100))
    write(project / "pybuildj.lock", "last_build = 200.0\n")

    value(compile_sources(_context(project, runner, incremental=True)))

    (call,) = runner.calls
    assert call[2] == f"bin{PATH_SEPARATOR}"
    assert call[-1] == "src/New.java"
    assert "src/Old.java" not in call


def test_source_removed_before_incremental_selection(project, runner):
    gone = write(project / "src" / "Gone.java")
    write(project / "pybuildj.lock", "last_build = 200.0\n")
    context = _context(project, runner, incremental=True)
    gone.unlink()

    assert isinstance(error(compile_sources(context)), FileNotFoundError)
    assert runner.calls == []
