from collections.abc import Iterable
from pathlib import Path
import time
from typing import Protocol

from returns.context import RequiresContext
from returns.io import IOResultE, impure_safe

from pybuildj import display
from pybuildj.cache import BuildState
from pybuildj.classpath import runtime_classpath
from pybuildj.config import ProjectConfig
from pybuildj.context import BuildContext, PostBuild
from pybuildj.errors import CompilationFailed
from pybuildj.files import Files
from pybuildj.reconcile import compiled_outputs
from pybuildj.runner import ToolOutput, execute
from pybuildj.types import Cmd


class _CompilerConfig(Protocol):
    config: ProjectConfig
    files: Files
    release: str | None


def javac_command(
    sources: Iterable[Path], classpath: str
) -> RequiresContext[Cmd, _CompilerConfig]:
    """All sources go to one compiler invocation, javac resolves types across them."""
    return RequiresContext(
        lambda context: (
            context.config.compiler,
            "-classpath",
            classpath,
            "-d",
            context.files.relative(context.files.bin),
            *(("--release", context.release) if context.release else ()),
            *map(context.files.relative, sources),
        )
    )


def select_sources(
    sources: tuple[Path, ...], state: BuildState, incremental: bool
) -> tuple[Path, ...]:
    """Sources passed to the compiler.

    Everything, unless 'incremental' is set and there was a previous build: then only
    the files modified since. That misses files depending on a changed file, so it is
    only ever a speed up.
    """
    if not incremental or state.last_build is None:
        return sources
    last_build = state.last_build
    return tuple(src for src in sources if src.stat().st_mtime >= last_build)


def _check(output: ToolOutput) -> IOResultE[ToolOutput]:
    if output.returncode != 0:
        return IOResultE.from_failure(CompilationFailed(output.returncode, output.stderr))
    if output.stdout:
        print(output.stdout, end="")
    if output.stderr:
        print(output.stderr, end="")
    return IOResultE.from_value(output)


def compile_sources(context: BuildContext) -> IOResultE[PostBuild]:
    started = time.time()
    post = PostBuild(
        config=context.config,
        files=context.files,
        runner=context.runner,
        classpath=context.classpath,
        local_libs=context.local_libs,
        external_libs=context.external_libs,
        classes=compiled_outputs(context.sources, context.files.src),
        previous=context.state,
        state=BuildState(last_build=started),
    )

    return impure_safe(select_sources)(
        context.sources, context.state, context.incremental
    ).bind(lambda selected: _compile_selected(context, post, selected))


def _compile_selected(
    context: BuildContext, post: PostBuild, selected: tuple[Path, ...]
) -> IOResultE[PostBuild]:
    if not selected:
        display.info(f"'{context.config.name}' is up to date")
        return IOResultE.from_value(post)

    classpath = context.classpath
    if context.incremental:
        # unchanged classes are only found in the output directory
        classpath = runtime_classpath(context.files.bin.name, classpath)

    display.info(f"building '{context.config.name}' {context.config.version}")
    for src in selected:
        display.step("COMPILING", context.files.relative(src))

    return (
        execute(
            context.runner,
            javac_command(selected, classpath)(context),
            context.files.project,
        )
        .bind(_check)
        .map(lambda _: post)
    )
