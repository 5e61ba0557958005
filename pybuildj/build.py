from collections.abc import Sequence
import sys

from returns.io import IOResultE
from returns.pipeline import flow
from returns.pointfree import bind

from pybuildj.cache import save_state
from pybuildj.classpath import runtime_classpath
from pybuildj.compiler import compile_sources
from pybuildj.context import BuildContext, PostBuild
from pybuildj.errors import MissingEntryPoint
from pybuildj.package import package
from pybuildj.reconcile import purge, sync
from pybuildj.runner import ToolOutput, execute
from pybuildj.types import Cmd


def _persist_state(post: PostBuild) -> IOResultE[PostBuild]:
    return save_state(post.files.lock, post.state).map(lambda _: post)


def build(context: BuildContext, jar: bool = False) -> IOResultE[PostBuild]:
    """compile -> purge dead classes -> persist state -> package or sync libraries

    The state is only persisted once the compiler succeeded.
    """
    return flow(
        compile_sources(context),
        bind(purge),
        bind(_persist_state),
        bind(package if jar else sync),
    )


def java_command(post: PostBuild, jar: bool, argv: Sequence[str]) -> Cmd:
    return (
        post.config.java,
        "-classpath",
        runtime_classpath(post.files.relative(post.files.bin), post.classpath),
        *(
            ("-jar", post.files.relative(post.files.archive(post.config.name)))
            if jar
            else (str(post.config.main),)
        ),
        *argv,
    )


def _require_entry_point(context: BuildContext) -> IOResultE[BuildContext]:
    if context.config.main is None:
        return IOResultE.from_failure(MissingEntryPoint(context.config.name))
    return IOResultE.from_value(context)


def _pass_through(output: ToolOutput) -> int:
    sys.stdout.write(output.stdout)
    sys.stderr.write(output.stderr)
    return output.returncode


def run(context: BuildContext, jar: bool = False, argv: Sequence[str] = ()) -> IOResultE[int]:
    return (
        _require_entry_point(context)
        .bind(lambda c: build(c, jar))
        .bind(
            lambda post: execute(
                post.runner, java_command(post, jar, argv), post.files.project
            )
        )
        .map(_pass_through)
    )
