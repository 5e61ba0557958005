from dataclasses import dataclass
from pathlib import Path

from returns.io import IOResultE, impure_safe

from pybuildj.cache import BuildState, load_state
from pybuildj.classpath import compose_classpath
from pybuildj.config import ProjectConfig, load_config
from pybuildj.errors import ImportValidationError
from pybuildj.files import Files, files_load, find_files
from pybuildj.runner import ToolRunner


@dataclass(frozen=True)
class BuildContext:
    config: ProjectConfig
    files: Files
    runner: ToolRunner

    state: BuildState

    sources: tuple[Path, ...]
    # relative to 'files.lib'
    local_libs: tuple[Path, ...]
    external_libs: tuple[Path, ...]
    classpath: str

    incremental: bool = False
    release: str | None = None

    @classmethod
    def create(
        cls,
        directory: Path,
        runner: ToolRunner,
        incremental: bool = False,
        release: str | None = None,
    ) -> IOResultE["BuildContext"]:
        files = files_load(directory)
        return load_config(files.config).bind(
            lambda config: load_state(files.lock).bind(
                lambda state: _discover(
                    cls,
                    config=config,
                    files=files,
                    runner=runner,
                    state=state,
                    incremental=incremental,
                    release=release or config.release,
                )
            )
        )


def check_library_names(
    files: Files, local_libs: tuple[Path, ...], imports: tuple[Path, ...]
) -> None:
    """Imports are packaged next to the local libraries under their file name, two
    libraries may not end up at the same place."""
    taken: dict[Path, Path] = {lib: files.lib / lib for lib in local_libs}
    for path in imports:
        destination = Path(path.name)
        if destination in taken:
            raise ImportValidationError(path, taken[destination])
        taken[destination] = path


@impure_safe
def _discover(cls, config: ProjectConfig, files: Files, **kwargs) -> BuildContext:
    local_libs = tuple(lib.relative_to(files.lib) for lib in find_files(files.lib, "jar"))
    check_library_names(files, local_libs, config.imports)
    files.ensure()
    return cls(
        config=config,
        files=files,
        sources=find_files(files.src, "java"),
        local_libs=local_libs,
        external_libs=config.imports,
        classpath=compose_classpath(local_libs, config.imports, files.lib.name),
        **kwargs,
    )


@dataclass(frozen=True)
class PostBuild:
    """Everything the packaging and run steps need from the build that preceded them."""

    config: ProjectConfig
    files: Files
    runner: ToolRunner

    classpath: str
    local_libs: tuple[Path, ...]
    external_libs: tuple[Path, ...]
    # relative to 'files.bin'
    classes: frozenset[Path]

    previous: BuildState
    state: BuildState
