from dataclasses import dataclass
from pathlib import Path

CONFIG_FILE = "pybuildj.toml"
LOCK_FILE = "pybuildj.lock"


def find_files(root: Path, extension: str) -> tuple[Path, ...]:
    """Depth first search for every file under 'root' ending in '.{extension}'.

    Entries are visited in name order. Any error while reading a directory aborts
    the whole search, a build must never miss a file silently.
    """
    suffix = f".{extension}"
    found: list[Path] = []
    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            found.extend(find_files(entry, extension))
        elif entry.suffix == suffix:
            found.append(entry)
    return tuple(found)


@dataclass(frozen=True)
class Files:
    project: Path
    config: Path
    lock: Path

    src: Path
    lib: Path
    bin: Path
    target: Path
    build: Path
    build_lib: Path
    manifest: Path

    def archive(self, name: str) -> Path:
        return self.build / f"{name}.jar"

    def ensure(self) -> "Files":
        self.bin.mkdir(parents=True, exist_ok=True)
        self.build_lib.mkdir(parents=True, exist_ok=True)
        return self

    def relative(self, path: Path) -> str:
        """Path as passed on a command line executed inside the project directory."""
        try:
            return str(path.relative_to(self.project))
        except ValueError:
            return str(path)


def files_load(directory: Path) -> Files:
    project = directory.absolute()
    target = project / "target"
    build = target / "build"
    return Files(
        project=project,
        config=project / CONFIG_FILE,
        lock=project / LOCK_FILE,
        src=project / "src",
        lib=project / "lib",
        bin=project / "bin",
        target=target,
        build=build,
        build_lib=build / "lib",
        manifest=target / "Manifest.txt",
    )
