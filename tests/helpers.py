from collections.abc import Sequence
from pathlib import Path

from returns.io import IOResultE
from returns.pipeline import is_successful
from returns.unsafe import unsafe_perform_io

from pybuildj.runner import ToolOutput

CONFIG = """\
[package]
name = "demo"
version = "0.0.1"
main = "Main"
"""

MAIN = """\
public class Main {
    public static void main(String[] args) {}
}
"""


def write(path: Path, content: str | bytes = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content)
    return path


def value(result: IOResultE):
    assert is_successful(result), unsafe_perform_io(result.failure())
    return unsafe_perform_io(result.unwrap())


def error(result: IOResultE) -> Exception:
    assert not is_successful(result)
    return unsafe_perform_io(result.failure())


class FakeRunner:
    """Records every invocation. 'javac' and 'jar' leave behind the files the real
    tools would create, unless their output says they failed."""

    def __init__(self, **outputs: ToolOutput):
        self.outputs = outputs
        self.calls: list[tuple[str, ...]] = []

    def __call__(self, executable: str, arguments: Sequence[str], cwd: Path) -> ToolOutput:
        self.calls.append((executable, *arguments))
        output = self.outputs.get(executable, ToolOutput(0, "", ""))
        if output.returncode == 0 and executable in ("javac", "jar"):
            getattr(self, f"_{executable}")(list(arguments), cwd)
        return output

    @property
    def executables(self) -> list[str]:
        return [call[0] for call in self.calls]

    def _javac(self, arguments: list[str], cwd: Path) -> None:
        bin_dir = cwd / arguments[arguments.index("-d") + 1]
        for arg in arguments:
            if arg.endswith(".java"):
                class_file = Path(arg).relative_to("src").with_suffix(".class")
                write(bin_dir / class_file, b"\xca\xfe\xba\xbe")

    def _jar(self, arguments: list[str], cwd: Path) -> None:
        archive, manifest = arguments[1], arguments[2]
        write(cwd / archive, (cwd / manifest).read_bytes())
