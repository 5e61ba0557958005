from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
import subprocess
from typing import Protocol

from returns.io import impure_safe

from pybuildj.types import Cmd


@dataclass(frozen=True)
class ToolOutput:
    returncode: int
    stdout: str
    stderr: str


class ToolRunner(Protocol):
    """Runs one external tool to completion: compiler, archiver or runtime."""

    def __call__(
        self, executable: str, arguments: Sequence[str], cwd: Path
    ) -> ToolOutput:
        ...


class SubprocessRunner:
    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def __call__(
        self, executable: str, arguments: Sequence[str], cwd: Path
    ) -> ToolOutput:
        if self.verbose:
            print(" ".join((executable, *arguments)))
        try:
            res = subprocess.run(
                (executable, *arguments),
                cwd=cwd,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            e.add_note(f"Command '{executable}' not found!")
            raise
        return ToolOutput(res.returncode, res.stdout, res.stderr)


@impure_safe
def execute(runner: ToolRunner, cmd: Cmd, cwd: Path) -> ToolOutput:
    return runner(cmd[0], cmd[1:], cwd)
