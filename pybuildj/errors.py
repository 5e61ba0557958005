from pathlib import Path


class BuildError(Exception):
    """Base class of every error the build reports to the user."""


class ConfigParseError(BuildError):
    def __init__(self, path: Path, reason: str):
        super().__init__(f"could not parse '{path}': {reason}")
        self.path = path
        self.reason = reason


class ImportValidationError(BuildError):
    def __init__(self, path: Path, conflict: Path | None = None):
        if conflict is None:
            message = f"the path '{path}' is not a valid .jar file path"
        else:
            message = f"the import '{path}' and '{conflict}' are both packaged as 'lib/{path.name}'"
        super().__init__(message)
        self.path = path
        self.conflict = conflict


class CompilationFailed(BuildError):
    def __init__(self, returncode: int, stderr: str):
        super().__init__(f"compiler exited with status {returncode}\n{stderr}".rstrip())
        self.returncode = returncode
        self.stderr = stderr


class PackagingFailed(BuildError):
    def __init__(self, returncode: int, stderr: str):
        super().__init__(f"archiver exited with status {returncode}\n{stderr}".rstrip())
        self.returncode = returncode
        self.stderr = stderr


class MissingEntryPoint(BuildError):
    def __init__(self, name: str):
        super().__init__(f"package '{name}' contains no entry point class")
        self.name = name


class InitError(BuildError):
    pass
