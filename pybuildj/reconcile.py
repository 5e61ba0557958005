"""Keeps the output directories in line with the sources and libraries of a build.

'bin/' must only contain classes of sources that still exist, otherwise a deleted
class stays loadable at runtime and ends up in the archive. 'target/build/lib/'
receives the libraries the archive references through its manifest.
"""
from collections.abc import Iterable
from pathlib import Path
import shutil

from returns.io import impure_safe

from pybuildj import display
from pybuildj.context import PostBuild
from pybuildj.files import Files, find_files

CLASS_SUFFIX = ".class"
SOURCE_SUFFIX = ".java"


def class_file(source: Path, src_dir: Path) -> Path:
    """'src/a/B.java' -> 'a/B.class', relative to the output directory."""
    return source.relative_to(src_dir).with_suffix(CLASS_SUFFIX)


def source_file(class_path: Path, src_dir: Path) -> Path:
    """Inverse of 'class_file'."""
    return src_dir / class_path.with_suffix(SOURCE_SUFFIX)


def compiled_outputs(sources: Iterable[Path], src_dir: Path) -> frozenset[Path]:
    return frozenset(class_file(src, src_dir) for src in sources)


def _is_expected(class_path: Path, expected: frozenset[Path]) -> bool:
    if class_path in expected:
        return True
    # 'Outer$Inner.class' lives as long as 'Outer.class' does
    outer, nested, _ = class_path.name.partition("$")
    return bool(nested) and class_path.with_name(outer + CLASS_SUFFIX) in expected


def purge_outputs(bin_dir: Path, expected: frozenset[Path]) -> tuple[Path, ...]:
    """Deletes every class file in 'bin_dir' that is not expected. Returns the deleted
    files relative to 'bin_dir'."""
    removed = tuple(
        class_path
        for class_path in (
            file.relative_to(bin_dir) for file in find_files(bin_dir, "class")
        )
        if not _is_expected(class_path, expected)
    )
    for class_path in removed:
        (bin_dir / class_path).unlink()
    return removed


def library_pairs(
    files: Files, local: Iterable[Path], external: Iterable[Path]
) -> tuple[tuple[Path, Path], ...]:
    """(source, destination relative to the packaged library directory) of every library."""
    return (
        *((files.lib / lib, lib) for lib in local),
        *((files.project / lib, Path(lib.name)) for lib in external),
    )


def needs_copy(source: Path, destination: Path, last_build: float | None) -> bool:
    if not destination.exists():
        return True
    return last_build is not None and last_build <= source.stat().st_mtime


def sync_libraries(
    libraries: Iterable[tuple[Path, Path]], dest_dir: Path, last_build: float | None
) -> tuple[Path, ...]:
    copied = []
    for source, relative in libraries:
        destination = dest_dir / relative
        if needs_copy(source, destination, last_build):
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source, destination)
            copied.append(destination)
    return tuple(copied)


@impure_safe
def purge(post: PostBuild):
    for class_path in purge_outputs(post.files.bin, post.classes):
        display.step("PURGED", post.files.relative(post.files.bin / class_path))
    return post


@impure_safe
def sync(post: PostBuild):
    """Compares against the build before this one, the state of the current build
    is already persisted when it runs."""
    for library in sync_libraries(
        library_pairs(post.files, post.local_libs, post.external_libs),
        post.files.build_lib,
        post.previous.last_build,
    ):
        display.step("COPYING", post.files.relative(library))
    return post

