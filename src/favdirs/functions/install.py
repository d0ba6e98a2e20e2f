"""Installs the shell function that lets favdirs change the caller's directory."""

import os
import shutil
import sys
from os import path
from string import Template

from favdirs.variables.constants import END_COMMENT, START_COMMENT

from .config import ConfigError, config_setup, load_config, resolve_store_paths

TEMPLATE_PATH = path.join(path.dirname(path.dirname(__file__)), "config", "function_template.sh")


def render_function(alias: str, executable: str, select_file: str) -> str:
    """
    Render the shell function block, markers included.

    Args:
        alias (str): Name of the shell function.
        executable (str): Path to the favdirs executable.
        select_file (str): Path to the selection file the function reads.

    Returns:
        str: The block, ending with a newline.
    """
    with open(TEMPLATE_PATH, "r", encoding="utf-8") as f:
        template = Template(f.read())
    return template.substitute(
        start_comment=START_COMMENT,
        end_comment=END_COMMENT,
        alias=alias,
        executable=executable,
        select_file=select_file,
    )


def replace_function_block(rc_text: str, block: str) -> str:
    """Swap the marked block in `rc_text` for `block`, or append it if absent."""
    lines = []
    in_function = False
    updated = False
    for line in rc_text.splitlines(keepends=True):
        stripped = line.rstrip("\n")
        if in_function:
            if stripped == END_COMMENT:
                in_function = False
            continue
        if stripped == START_COMMENT:
            in_function = True
            updated = True
            lines.append(block)
            continue
        lines.append(line)
    if not updated:
        if lines and not lines[-1].endswith("\n"):
            lines.append("\n")
        lines.append("\n" + block)
    return "".join(lines)


def create_file_if_missing(file_path: str) -> bool:
    """Create an empty file. Returns False if it already existed."""
    try:
        with open(file_path, "x", encoding="utf-8"):
            pass
    except FileExistsError:
        return False
    return True


def install(config: dict, executable: str) -> None:
    """
    Create the data files and write the shell function into the rc file.

    Raises:
        OSError: when a file cannot be created or the rc file cannot be rewritten.
    """
    locations_file, select_file = resolve_store_paths(config)
    for name, file_path in (("select", select_file), ("locations", locations_file)):
        if create_file_if_missing(file_path):
            print(f"Created {name} file at: {file_path}")
        else:
            print(f"File at {file_path} already exists, skipping creation.")

    block = render_function(config["shell"]["alias"], executable, select_file)
    # write through symlinks so dotfile managers keep their link
    rc_path = path.realpath(path.expanduser(config["shell"]["rc_file"]))
    rc_text = ""
    if path.exists(rc_path):
        with open(rc_path, "r", encoding="utf-8") as f:
            rc_text = f.read()
    temp_path = rc_path + ".tmp"
    try:
        with open(temp_path, "w", encoding="utf-8") as f:
            f.write(replace_function_block(rc_text, block))
        if path.exists(rc_path):
            shutil.copymode(rc_path, temp_path)
        os.replace(temp_path, rc_path)
    except OSError:
        if path.isfile(temp_path):
            os.remove(temp_path)
        raise
    print(f"Successfully updated {rc_path}")


def main() -> None:
    """Entry point for `favdirs-install`."""
    executable = shutil.which("favdirs") or path.abspath(sys.argv[0])
    try:
        install(load_config(config_setup()), executable)
    except (ConfigError, OSError) as error:
        print("Error installing shell integration:", error, file=sys.stderr)
        sys.exit(1)
