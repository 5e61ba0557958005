from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypedDict

import toml

from returns.io import impure_safe

from pybuildj.errors import ConfigParseError, ImportValidationError
from pybuildj.types import ARCHIVE_SUFFIXES


class PackageTable(TypedDict, total=False):
    name: str
    version: str
    compiler: str
    java: str
    jar: str
    main: str
    release: str


class ImportTable(TypedDict):
    path: str


@dataclass(frozen=True)
class ProjectConfig:
    name: str
    version: str

    compiler: str = "javac"
    java: str = "java"
    jar: str = "jar"
    main: str | None = None
    release: str | None = None

    imports: tuple[Path, ...] = ()


def _get(
    config_path: Path, table: dict[str, Any], key: str, default: str | None = None
) -> str | None:
    if key not in table:
        return default
    value = table[key]
    # 'release = 17' is as valid as 'release = "17"'
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ConfigParseError(config_path, f"'package.{key}' must be a string")
    return str(value)


def _require(config_path: Path, table: dict[str, Any], key: str) -> str:
    value = _get(config_path, table, key)
    if value is None:
        raise ConfigParseError(config_path, f"missing key 'package.{key}'")
    return value


def validate_import(path: Path) -> Path:
    if path.suffix.lower() not in ARCHIVE_SUFFIXES:
        raise ImportValidationError(path)
    return path


def parse_imports(config_path: Path, imports: list[ImportTable]) -> tuple[Path, ...]:
    if not isinstance(imports, list):
        raise ConfigParseError(config_path, "'import' must be an array of tables")
    paths = []
    for entry in imports:
        if not isinstance(entry, dict) or not isinstance(entry.get("path"), str):
            raise ConfigParseError(config_path, "every [[import]] needs a 'path'")
        paths.append(validate_import(Path(entry["path"])))
    return tuple(paths)


def parse_config(config_path: Path, config: dict[str, Any]) -> ProjectConfig:
    package: PackageTable = config.get("package")  # type: ignore
    if not isinstance(package, dict):
        raise ConfigParseError(config_path, "missing table [package]")

    return ProjectConfig(
        name=_require(config_path, package, "name"),
        version=_require(config_path, package, "version"),
        compiler=_get(config_path, package, "compiler", "javac"),  # type: ignore
        java=_get(config_path, package, "java", "java"),  # type: ignore
        jar=_get(config_path, package, "jar", "jar"),  # type: ignore
        main=_get(config_path, package, "main"),
        release=_get(config_path, package, "release"),
        imports=parse_imports(config_path, config.get("import", [])),
    )


def read_config(config_path: Path) -> ProjectConfig:
    try:
        content = config_path.read_text()
    except FileNotFoundError:
        raise ConfigParseError(config_path, "file not found") from None
    try:
        config = toml.loads(content)
    except toml.TomlDecodeError as e:
        raise ConfigParseError(config_path, str(e)) from e
    return parse_config(config_path, config)


@impure_safe
def load_config(config_path: Path):
    return read_config(config_path)
