import sys
from typing import assert_never

from returns.io import IOResultE
from returns.pipeline import is_successful
from returns.unsafe import unsafe_perform_io

from pybuildj import display
from pybuildj.args import ArgsConfig, args_parse
from pybuildj.commands import build_command, clean_command, new_command, run_command


def pybuildj(args: ArgsConfig, argv: list[str]) -> IOResultE[int]:
    match args.action:
        case "new":
            return new_command(args)
        case "build":
            return build_command(args)
        case "run":
            return run_command(args, argv)
        case "clean":
            return clean_command(args)
        case _:
            assert_never(args.action)


def main():
    args, argv = args_parse(sys.argv[1:])
    try:
        result = pybuildj(args, argv)
    except KeyboardInterrupt:
        sys.exit(130)

    if not is_successful(result):
        e = unsafe_perform_io(result.failure())
        message = "\n".join((str(e), *getattr(e, "__notes__", ())))
        print(display.error(f"{args.action} error: {message}"), file=sys.stderr)
        sys.exit(1)
    sys.exit(unsafe_perform_io(result.unwrap()))
