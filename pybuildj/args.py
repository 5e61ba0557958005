from pathlib import Path
from typing import Protocol
import argparse

from pybuildj.__version__ import __version__
from pybuildj.types import Action


class ArgsConfig(Protocol):
    action: Action
    dir: Path
    verbose: bool
    name: str
    jar: bool
    incremental: bool
    release: str | None


def _add_build_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--jar", action="store_true", help="package into a .jar")
    parser.add_argument(
        "--incremental",
        action="store_true",
        help="only compile sources changed since the last build (best effort)",
    )
    parser.add_argument("-r", "--release", default=None, help="javac --release value")


def args_parse(argv: list[str]) -> tuple[ArgsConfig, list[str]]:
    parser = argparse.ArgumentParser(
        prog="pybuildj",
        description="A mini build system for Java",
        epilog="",
    )
    parser.add_argument("-d", "--dir", type=Path, default=Path.cwd())
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=__version__)

    subparser = parser.add_subparsers(dest="action", required=True)

    new = subparser.add_parser("new")
    new.add_argument("name")

    _add_build_arguments(subparser.add_parser("build"))
    _add_build_arguments(subparser.add_parser("run"))

    subparser.add_parser("clean")

    return parser.parse_known_args(argv)  # type: ignore
