from dataclasses import dataclass
import os
from pathlib import Path

import toml

from returns.io import impure_safe

from pybuildj.errors import ConfigParseError


@dataclass(frozen=True)
class BuildState:
    """Persisted between invocations. 'last_build' is the start time (epoch seconds)
    of the last compilation that succeeded, None if there never was one."""

    last_build: float | None = None


def read_state(path: Path) -> BuildState:
    try:
        content = path.read_text()
    except FileNotFoundError:
        return BuildState()

    try:
        lock = toml.loads(content)
    except toml.TomlDecodeError as e:
        raise ConfigParseError(path, str(e)) from e

    last_build = lock.get("last_build")
    if last_build is None:
        return BuildState()
    if isinstance(last_build, bool) or not isinstance(last_build, (int, float)):
        raise ConfigParseError(path, "'last_build' must be a number")
    return BuildState(last_build=float(last_build))


def write_state(path: Path, state: BuildState) -> BuildState:
    lock = {} if state.last_build is None else {"last_build": state.last_build}
    tmp = path.with_name(f"{path.name}.tmp")
    tmp.write_text(toml.dumps(lock))
    os.replace(tmp, path)
    return state


@impure_safe
def load_state(path: Path):
    return read_state(path)


@impure_safe
def save_state(path: Path, state: BuildState):
    return write_state(path, state)
