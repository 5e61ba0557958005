import os
from typing import Literal

Action = Literal["new", "build", "run", "clean"]

Cmd = tuple[str, ...]

# Classpath entries are joined with ':' on POSIX and ';' on Windows.
PATH_SEPARATOR: str = os.pathsep

ARCHIVE_SUFFIXES = (".jar",)
