from pathlib import Path
import shutil

from returns.curry import partial
from returns.io import IOResultE, impure_safe

from pybuildj import display
from pybuildj.args import ArgsConfig
from pybuildj.build import build, run
from pybuildj.context import BuildContext, PostBuild
from pybuildj.files import files_load
from pybuildj.new import new
from pybuildj.runner import SubprocessRunner


def _context(args: ArgsConfig) -> IOResultE[BuildContext]:
    return BuildContext.create(
        args.dir,
        SubprocessRunner(args.verbose),
        incremental=args.incremental,
        release=args.release,
    )


def _created(project: Path) -> int:
    display.done(f"initialized project directory '{project}'")
    return 0


def _built(post: PostBuild) -> int:
    display.done(f"build done '{post.config.name}'")
    return 0


def new_command(args: ArgsConfig) -> IOResultE[int]:
    return impure_safe(new)(args.dir, args.name).map(_created)


def build_command(args: ArgsConfig) -> IOResultE[int]:
    return _context(args).bind(partial(build, jar=args.jar)).map(_built)


def run_command(args: ArgsConfig, argv: list[str]) -> IOResultE[int]:
    return _context(args).bind(partial(run, jar=args.jar, argv=argv))


def remove_dir(d: Path):
    if d.exists():
        shutil.rmtree(d)


@impure_safe
def clean_command(args: ArgsConfig) -> int:
    files = files_load(args.dir)
    remove_dir(files.bin)
    remove_dir(files.target)
    files.lock.unlink(missing_ok=True)
    display.done(f"cleaned '{files.project}'")
    return 0
