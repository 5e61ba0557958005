from collections.abc import Iterable
from pathlib import Path, PurePosixPath

from pybuildj.types import PATH_SEPARATOR


def compose_classpath(
    local: Iterable[Path],
    external: Iterable[Path],
    lib_dir_name: str = "lib",
    separator: str = PATH_SEPARATOR,
) -> str:
    """Local libraries (relative to the library directory) first, then the external
    ones verbatim. Every entry is terminated by the separator."""
    entries = (
        *(str(PurePosixPath(lib_dir_name, *lib.parts)) for lib in local),
        *map(str, external),
    )
    return "".join(f"{entry}{separator}" for entry in entries)


def runtime_classpath(
    output_dir_name: str, classpath: str, separator: str = PATH_SEPARATOR
) -> str:
    return f"{output_dir_name}{separator}{classpath}"
