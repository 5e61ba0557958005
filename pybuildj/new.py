from pathlib import Path

import toml

from pybuildj.errors import InitError
from pybuildj.files import CONFIG_FILE, LOCK_FILE

MAIN_CLASS = "Main"


def _create_file(file: Path, content: str) -> Path:
    file.parent.mkdir(parents=True, exist_ok=True)
    file.write_text(content)
    return file


def new(directory: Path, name: str) -> Path:
    if not name.isascii() or not name.isalpha():
        raise InitError(f"project name is invalid '{name}'")

    project = directory / name
    if project.exists():
        raise InitError(f"Directory exists! {project}")

    for sub in ("src", "lib", "bin", "target"):
        (project / sub).mkdir(parents=True)

    _create_file(
        project / "src" / f"{MAIN_CLASS}.java",
        f"""\
public class {MAIN_CLASS} {{
    public static void main(String[] args) {{
        System.out.println("No pain, all gain!");
    }}
}}
""",
    )

    _create_file(
        project / CONFIG_FILE,
        toml.dumps(
            {
                "package": {
                    "name": name,
                    "version": "0.0.1",
                    "compiler": "javac",
                    "java": "java",
                    "jar": "jar",
                    "main": MAIN_CLASS,
                }
            }
        ),
    )

    _create_file(
        project / ".gitignore",
        f"""\
bin/
target/
{LOCK_FILE}
""",
    )

    return project
