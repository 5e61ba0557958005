from collections.abc import Iterable
from pathlib import Path, PurePosixPath
from typing import Protocol

from returns.context import RequiresContext
from returns.io import IOResultE, impure_safe

from pybuildj import display
from pybuildj.config import ProjectConfig
from pybuildj.context import PostBuild
from pybuildj.errors import PackagingFailed
from pybuildj.files import Files
from pybuildj.reconcile import library_pairs, sync
from pybuildj.runner import ToolOutput, execute
from pybuildj.types import Cmd

MANIFEST_VERSION = "1.0"
# Manifest lines may not be longer than 72 bytes, longer ones continue on the next
# line after a single space.
MANIFEST_LINE_BYTES = 72


class _PackageConfig(Protocol):
    config: ProjectConfig
    files: Files


def _wrap(line: str) -> str:
    lines: list[str] = []
    current = ""
    for char in line:
        if len(current.encode()) + len(char.encode()) > MANIFEST_LINE_BYTES:
            lines.append(current)
            current = " "
        current += char
    lines.append(current)
    return "".join(f"{part}\n" for part in lines)


def manifest_text(main: str | None, libraries: Iterable[Path], lib_dir_name="lib") -> str:
    headers = [f"Manifest-Version: {MANIFEST_VERSION}"]
    if main:
        headers.append(f"Main-Class: {main}")
    headers.append(
        "Class-Path: "
        + " ".join(str(PurePosixPath(lib_dir_name, *lib.parts)) for lib in libraries)
    )
    return "".join(map(_wrap, headers)) + "\n"


def write_manifest(post: PostBuild) -> Path:
    libraries = (
        relative
        for _, relative in library_pairs(post.files, post.local_libs, post.external_libs)
    )
    post.files.manifest.parent.mkdir(parents=True, exist_ok=True)
    post.files.manifest.write_text(
        manifest_text(post.config.main, libraries, post.files.build_lib.name)
    )
    return post.files.manifest


def jar_command(manifest: Path) -> RequiresContext[Cmd, _PackageConfig]:
    return RequiresContext(
        lambda context: (
            context.config.jar,
            "cfm",
            context.files.relative(context.files.archive(context.config.name)),
            context.files.relative(manifest),
            "-C",
            context.files.relative(context.files.bin),
            ".",
        )
    )


def _check(output: ToolOutput, post: PostBuild) -> IOResultE[PostBuild]:
    if output.returncode != 0:
        return IOResultE.from_failure(PackagingFailed(output.returncode, output.stderr))
    if output.stdout:
        print(output.stdout, end="")
    return IOResultE.from_value(post)


def package(post: PostBuild) -> IOResultE[PostBuild]:
    """Archives 'bin/' with a generated manifest, then syncs the library directory.

    The sync runs even if the archiver failed so a retry starts from a consistent
    library directory.
    """
    display.step("PACKAGING", post.files.relative(post.files.archive(post.config.name)))
    archived = impure_safe(write_manifest)(post).bind(
        lambda manifest: execute(
            post.runner, jar_command(manifest)(post), post.files.project
        )
    )
    return sync(post).bind(lambda _: archived).bind(lambda out: _check(out, post))
